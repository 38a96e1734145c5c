"""
RangeVector — Модели фиксированных тестовых векторов

Immutable Pydantic модели, описывающие набор векторов для прогона
алгоритмов graal.core.ranges. Полная совместимость с JSON Schema
(contracts/schema/range_vector_suite.json).

Семантика полей по алгоритмам:
- minmax:              fn (comparator, default "less"), expected_min, expected_max
- find_if:             fn (predicate), expected_index (len(input) означает end)
- all_of/any_of/none_of: fn (predicate), expected (bool)
- equal:               second_input, fn (equality, default "equal"), bounded, expected (bool)
- reverse:             expected (список после разворота)
- copy:                second_input (исходное назначение, опционально), expected,
                       expected_index (опционально)
- unique:              fn (equality, default "equal"), expected (сжатый префикс),
                       expected_index
- partition:           fn (predicate), expected_index (граница групп)
"""

from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, Field, model_validator


# =============================================================================
# ENUMS
# =============================================================================


class Algorithm(str, Enum):
    """Алгоритм, который прогоняет вектор."""

    MINMAX = "minmax"
    FIND_IF = "find_if"
    ALL_OF = "all_of"
    ANY_OF = "any_of"
    NONE_OF = "none_of"
    EQUAL = "equal"
    REVERSE = "reverse"
    COPY = "copy"
    UNIQUE = "unique"
    PARTITION = "partition"


class CallableKind(str, Enum):
    """Вид пользовательской функции, которую принимает алгоритм."""

    COMPARATOR = "comparator"
    PREDICATE = "predicate"
    EQUALITY = "equality"


# Какой вид функции нужен алгоритму (None: функция не используется)
ALGORITHM_CALLABLE_KIND: dict[Algorithm, Optional[CallableKind]] = {
    Algorithm.MINMAX: CallableKind.COMPARATOR,
    Algorithm.FIND_IF: CallableKind.PREDICATE,
    Algorithm.ALL_OF: CallableKind.PREDICATE,
    Algorithm.ANY_OF: CallableKind.PREDICATE,
    Algorithm.NONE_OF: CallableKind.PREDICATE,
    Algorithm.EQUAL: CallableKind.EQUALITY,
    Algorithm.REVERSE: None,
    Algorithm.COPY: None,
    Algorithm.UNIQUE: CallableKind.EQUALITY,
    Algorithm.PARTITION: CallableKind.PREDICATE,
}

# Имя функции по умолчанию, если fn не задан
DEFAULT_CALLABLE: dict[CallableKind, str] = {
    CallableKind.COMPARATOR: "less",
    CallableKind.EQUALITY: "equal",
}

_BOOL_RESULT = {Algorithm.ALL_OF, Algorithm.ANY_OF, Algorithm.NONE_OF, Algorithm.EQUAL}
_LIST_RESULT = {Algorithm.REVERSE, Algorithm.COPY, Algorithm.UNIQUE}
_INDEX_RESULT = {Algorithm.FIND_IF, Algorithm.UNIQUE, Algorithm.PARTITION}


# =============================================================================
# RANGE VECTOR
# =============================================================================


class RangeVector(BaseModel):
    """
    Один тестовый вектор: вход, алгоритм, ожидаемый результат.

    Immutable модель (frozen=True). Согласованность полей с алгоритмом
    проверяется model validator'ом.
    """

    id: str = Field(..., pattern="^[a-z0-9_-]+$", description="Идентификатор вектора")
    algorithm: Algorithm = Field(..., description="Прогоняемый алгоритм")
    description: str = Field(default="", description="Что проверяет вектор")

    # Входные данные
    input: list[Any] = Field(..., description="Элементы первого диапазона")
    second_input: Optional[list[Any]] = Field(
        None, description="Второй диапазон (equal) или исходное назначение (copy)"
    )
    fn: Optional[str] = Field(
        None, min_length=1, description="Имя comparator/predicate/equality из registry"
    )
    bounded: bool = Field(
        default=True, description="equal: четырёхпозиционная форма с явным last2"
    )

    # Ожидания
    expected: Any = Field(None, description="Ожидаемый bool или список элементов")
    expected_index: Optional[int] = Field(
        None, ge=0, description="Ожидаемый индекс возвращённой позиции"
    )
    expected_min: Optional[int] = Field(None, ge=0, description="minmax: индекс минимума")
    expected_max: Optional[int] = Field(None, ge=0, description="minmax: индекс максимума")

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_algorithm_fields(self) -> "RangeVector":
        """Проверка, что заданы поля, которые нужны алгоритму."""
        algorithm = self.algorithm
        kind = ALGORITHM_CALLABLE_KIND[algorithm]

        if kind is CallableKind.PREDICATE and self.fn is None:
            raise ValueError(f"{algorithm.value} requires a predicate name in 'fn'")
        if kind is None and self.fn is not None:
            raise ValueError(f"{algorithm.value} takes no callable, got fn={self.fn!r}")

        if algorithm is Algorithm.MINMAX:
            if self.expected_min is None or self.expected_max is None:
                raise ValueError("minmax requires expected_min and expected_max")
            for name, index in (("expected_min", self.expected_min), ("expected_max", self.expected_max)):
                if index > len(self.input):
                    raise ValueError(f"{name} {index} exceeds input length {len(self.input)}")

        if algorithm in _BOOL_RESULT and not isinstance(self.expected, bool):
            raise ValueError(f"{algorithm.value} requires a boolean 'expected'")

        if algorithm in _LIST_RESULT and not isinstance(self.expected, list):
            raise ValueError(f"{algorithm.value} requires a list 'expected'")

        if algorithm in _INDEX_RESULT and self.expected_index is None:
            raise ValueError(f"{algorithm.value} requires 'expected_index'")

        if self.expected_index is not None and algorithm is not Algorithm.COPY:
            if self.expected_index > len(self.input):
                raise ValueError(
                    f"expected_index {self.expected_index} exceeds input length {len(self.input)}"
                )

        if algorithm is Algorithm.EQUAL and self.second_input is None:
            raise ValueError("equal requires 'second_input'")

        if algorithm is Algorithm.EQUAL and not self.bounded:
            if len(self.second_input) < len(self.input):
                raise ValueError("unbounded equal: second_input is shorter than input")

        if algorithm is Algorithm.COPY and self.second_input is not None:
            if len(self.second_input) < len(self.input):
                raise ValueError("copy destination is shorter than the source")

        return self

    def callable_name(self) -> Optional[str]:
        """Имя функции с учётом default для comparator/equality."""
        kind = ALGORITHM_CALLABLE_KIND[self.algorithm]
        if kind is None:
            return None
        return self.fn or DEFAULT_CALLABLE.get(kind)


# =============================================================================
# VECTOR SUITE
# =============================================================================


class VectorSuite(BaseModel):
    """
    Набор векторов, загружаемый из одного JSON файла.

    Immutable модель (frozen=True). Идентификаторы векторов уникальны.
    """

    schema_version: str = Field(
        ..., pattern="^1$", description="Версия схемы для tracking совместимости"
    )
    name: str = Field(..., min_length=1, description="Имя набора")
    vectors: list[RangeVector] = Field(
        default_factory=list, description="Векторы набора"
    )

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_unique_ids(self) -> "VectorSuite":
        """Проверка уникальности id внутри набора."""
        seen: set[str] = set()
        for vector in self.vectors:
            if vector.id in seen:
                raise ValueError(f"duplicate vector id {vector.id!r} in suite {self.name!r}")
            seen.add(vector.id)
        return self
