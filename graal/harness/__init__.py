"""
Harness: прогон фиксированных тестовых векторов через graal.core.ranges.
"""

from graal.harness.registry import (
    COMPARATORS,
    EQUALITIES,
    PREDICATES,
    UnknownCallableError,
    resolve,
)
from graal.harness.runner import (
    DEFAULT_VECTORS_DIR,
    HarnessConfig,
    SuiteReport,
    VectorOutcome,
    load_suite,
    run_directory,
    run_suite,
    run_vector,
)

__all__ = [
    # Registry
    "COMPARATORS",
    "EQUALITIES",
    "PREDICATES",
    "UnknownCallableError",
    "resolve",
    # Runner
    "DEFAULT_VECTORS_DIR",
    "HarnessConfig",
    "SuiteReport",
    "VectorOutcome",
    "load_suite",
    "run_directory",
    "run_suite",
    "run_vector",
]
