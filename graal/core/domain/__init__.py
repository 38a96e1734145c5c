"""
Domain models: тестовые векторы алгоритмов диапазонов.
"""

from graal.core.domain.vectors import (
    ALGORITHM_CALLABLE_KIND,
    DEFAULT_CALLABLE,
    Algorithm,
    CallableKind,
    RangeVector,
    VectorSuite,
)

__all__ = [
    "ALGORITHM_CALLABLE_KIND",
    "DEFAULT_CALLABLE",
    "Algorithm",
    "CallableKind",
    "RangeVector",
    "VectorSuite",
]
