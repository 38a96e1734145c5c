"""
Contract Validation Module

Модуль для валидации JSON контрактов graal (наборы тестовых векторов).
"""

from .validators import (
    ContractValidator,
    RangeVectorSuiteValidator,
    SchemaLoader,
    get_schema_loader,
    validate_range_vector_suite,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "RangeVectorSuiteValidator",
    # Functions
    "get_schema_loader",
    "validate_range_vector_suite",
]
