"""
Vector Runner — прогон фиксированных тестовых векторов

Загружает наборы векторов (JSON → JSON Schema → Pydantic), прогоняет
каждый вектор через алгоритм graal.core.ranges на свежей копии входа и
сравнивает результат с ожиданием.

Порядок загрузки набора:
1. json.load
2. validate_range_vector_suite (структура документа)
3. VectorSuite.model_validate (согласованность полей с алгоритмом)

Исключения алгоритмов (например, IndexError при нарушении предусловий
вектором) не перехватываются.
"""

import json
from collections import Counter
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, Dict, Optional

from graal.core.contracts import validate_range_vector_suite
from graal.core.domain.vectors import (
    ALGORITHM_CALLABLE_KIND,
    Algorithm,
    RangeVector,
    VectorSuite,
)
from graal.core.ranges import (
    all_of,
    any_of,
    begin,
    copy,
    end,
    equal,
    find_if,
    minmax,
    none_of,
    partition,
    reverse,
    unique,
)
from graal.harness.registry import resolve
from graal.logger import get_logger

log = get_logger("harness")

# Каталог векторов по умолчанию: <корень проекта>/contracts/vectors
DEFAULT_VECTORS_DIR = Path(__file__).parent.parent.parent / "contracts" / "vectors"


# =============================================================================
# RESULTS
# =============================================================================


@dataclass(frozen=True)
class VectorOutcome:
    """Результат прогона одного вектора."""

    vector_id: str
    algorithm: Algorithm
    passed: bool
    actual: Any
    expected: Any

    # Детали расхождения (пусто при passed)
    details: str = ""


@dataclass(frozen=True)
class SuiteReport:
    """Результат прогона набора векторов."""

    name: str
    outcomes: tuple[VectorOutcome, ...] = field(default_factory=tuple)

    @property
    def passed(self) -> int:
        return sum(1 for o in self.outcomes if o.passed)

    @property
    def failed(self) -> int:
        return len(self.outcomes) - self.passed

    @property
    def all_passed(self) -> bool:
        return self.failed == 0

    def failures(self) -> list[VectorOutcome]:
        return [o for o in self.outcomes if not o.passed]


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class HarnessConfig:
    """Конфигурация прогона векторов."""

    # Каталог *.json наборов (None: contracts/vectors проекта)
    vectors_dir: Optional[Path] = None

    # Остановить набор на первом несовпадении
    stop_on_failure: bool = False


# =============================================================================
# ALGORITHM RUNNERS
# =============================================================================


def _fn(vector: RangeVector) -> Callable[..., bool]:
    kind = ALGORITHM_CALLABLE_KIND[vector.algorithm]
    name = vector.callable_name()
    if kind is None or name is None:
        raise ValueError(f"{vector.algorithm.value} takes no callable")
    return resolve(kind, name)


def _outcome(vector: RangeVector, actual: Any, expected: Any, details: str = "") -> VectorOutcome:
    passed = actual == expected and not details
    if not passed and not details:
        details = f"expected {expected!r}, got {actual!r}"
    return VectorOutcome(
        vector_id=vector.id,
        algorithm=vector.algorithm,
        passed=passed,
        actual=actual,
        expected=expected,
        details=details,
    )


def _run_minmax(vector: RangeVector) -> VectorOutcome:
    data = list(vector.input)
    result = minmax(begin(data), end(data), _fn(vector))
    return _outcome(
        vector,
        (result.min.index, result.max.index),
        (vector.expected_min, vector.expected_max),
    )


def _run_find_if(vector: RangeVector) -> VectorOutcome:
    data = list(vector.input)
    pos = find_if(begin(data), end(data), _fn(vector))
    return _outcome(vector, pos.index, vector.expected_index)


def _quantifier(algorithm: Callable[..., bool]) -> Callable[[RangeVector], VectorOutcome]:
    def run(vector: RangeVector) -> VectorOutcome:
        data = list(vector.input)
        return _outcome(vector, algorithm(begin(data), end(data), _fn(vector)), vector.expected)

    return run


def _run_equal(vector: RangeVector) -> VectorOutcome:
    first = list(vector.input)
    second = list(vector.second_input or [])
    if vector.bounded:
        actual = equal(begin(first), end(first), begin(second), end(second), eq=_fn(vector))
    else:
        actual = equal(begin(first), end(first), begin(second), eq=_fn(vector))
    return _outcome(vector, actual, vector.expected)


def _run_reverse(vector: RangeVector) -> VectorOutcome:
    data = list(vector.input)
    reverse(begin(data), end(data))
    return _outcome(vector, data, vector.expected)


def _run_copy(vector: RangeVector) -> VectorOutcome:
    data = list(vector.input)
    if vector.second_input is not None:
        dest = list(vector.second_input)
    else:
        dest = [None] * len(data)

    out = copy(begin(data), end(data), begin(dest))

    details = ""
    if vector.expected_index is not None and out.index != vector.expected_index:
        details = f"expected returned index {vector.expected_index}, got {out.index}"
    return _outcome(vector, dest, vector.expected, details)


def _run_unique(vector: RangeVector) -> VectorOutcome:
    data = list(vector.input)
    new_end = unique(begin(data), end(data), _fn(vector))

    details = ""
    if new_end.index != vector.expected_index:
        details = f"expected new end {vector.expected_index}, got {new_end.index}"
    return _outcome(vector, data[: new_end.index], vector.expected, details)


def _run_partition(vector: RangeVector) -> VectorOutcome:
    data = list(vector.input)
    pred = _fn(vector)
    boundary = partition(begin(data), end(data), pred).index

    # Порядок внутри групп не определён: проверяем границу, группы и перестановку
    details = ""
    if Counter(data) != Counter(vector.input):
        details = f"result {data!r} is not a permutation of the input"
    elif not all(pred(x) for x in data[:boundary]):
        details = f"element before boundary {boundary} fails predicate: {data!r}"
    elif any(pred(x) for x in data[boundary:]):
        details = f"element after boundary {boundary} satisfies predicate: {data!r}"
    return _outcome(vector, boundary, vector.expected_index, details)


_RUNNERS: Dict[Algorithm, Callable[[RangeVector], VectorOutcome]] = {
    Algorithm.MINMAX: _run_minmax,
    Algorithm.FIND_IF: _run_find_if,
    Algorithm.ALL_OF: _quantifier(all_of),
    Algorithm.ANY_OF: _quantifier(any_of),
    Algorithm.NONE_OF: _quantifier(none_of),
    Algorithm.EQUAL: _run_equal,
    Algorithm.REVERSE: _run_reverse,
    Algorithm.COPY: _run_copy,
    Algorithm.UNIQUE: _run_unique,
    Algorithm.PARTITION: _run_partition,
}


# =============================================================================
# PUBLIC API
# =============================================================================


def run_vector(vector: RangeVector) -> VectorOutcome:
    """
    Прогон одного вектора.

    Args:
        vector: Вектор (вход не изменяется, алгоритм работает на копии)

    Returns:
        VectorOutcome с фактическим и ожидаемым результатом
    """
    outcome = _RUNNERS[vector.algorithm](vector)
    log.debug(
        "vector %s (%s): %s", vector.id, vector.algorithm.value,
        "ok" if outcome.passed else "FAIL",
    )
    return outcome


def run_suite(suite: VectorSuite, config: Optional[HarnessConfig] = None) -> SuiteReport:
    """
    Прогон всех векторов набора.

    Args:
        suite: Набор векторов
        config: Конфигурация (default: HarnessConfig())

    Returns:
        SuiteReport; при stop_on_failure содержит векторы до первого несовпадения
    """
    config = config or HarnessConfig()
    outcomes: list[VectorOutcome] = []

    for vector in suite.vectors:
        outcome = run_vector(vector)
        outcomes.append(outcome)
        if not outcome.passed:
            log.warning("suite %s: vector %s failed: %s", suite.name, vector.id, outcome.details)
            if config.stop_on_failure:
                break

    report = SuiteReport(name=suite.name, outcomes=tuple(outcomes))
    log.info("suite %s: %d passed, %d failed", suite.name, report.passed, report.failed)
    return report


def load_suite(path: Path) -> VectorSuite:
    """
    Загрузка набора векторов из JSON файла.

    Raises:
        jsonschema.ValidationError: Документ не соответствует схеме
        pydantic.ValidationError: Поля вектора не согласованы с алгоритмом
    """
    path = Path(path)
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)

    validate_range_vector_suite(data)
    suite = VectorSuite.model_validate(data)
    log.info("loaded suite %s from %s (%d vectors)", suite.name, path.name, len(suite.vectors))
    return suite


def run_directory(config: Optional[HarnessConfig] = None) -> list[SuiteReport]:
    """Загрузка и прогон всех *.json наборов каталога (в порядке имён файлов)."""
    config = config or HarnessConfig()
    vectors_dir = Path(config.vectors_dir) if config.vectors_dir is not None else DEFAULT_VECTORS_DIR

    return [run_suite(load_suite(path), config) for path in sorted(vectors_dir.glob("*.json"))]
