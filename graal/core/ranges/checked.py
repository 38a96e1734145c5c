"""
Checked Ranges — опциональный hardened слой

Ядро (search, mutating) ничего не проверяет: нарушение предусловий даёт
undefined behaviour. Этот модуль содержит явно задокументированное отклонение
для вызывающего кода, которому нужны диагностируемые ошибки:
- Таксономия RangeError
- validate_* функции для отдельных предусловий
- RangeGuard: те же алгоритмы с проверками перед делегированием в ядро

Проверки работают для SequenceCursor. Для прочих реализаций Position
структура последовательности недоступна, и проверки пропускаются.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. После успешной проверки результат идентичен вызову ядра
2. При нарушении ни один элемент не изменяется (проверки до мутаций)
3. Каждое отклонение логируется (WARNING) и пробрасывается вызывающему
"""

import operator
from dataclasses import dataclass
from typing import Any, Callable

from graal.core.ranges import mutating, search
from graal.core.ranges.cursor import Position, SequenceCursor, distance
from graal.core.ranges.search import MinMax
from graal.logger import get_logger

log = get_logger("checked")


# =============================================================================
# EXCEPTIONS
# =============================================================================


class RangeError(ValueError):
    """Базовая ошибка нарушения предусловия диапазона."""


class ForeignCursorError(RangeError):
    """Позиции диапазона указывают в разные последовательности."""


class InvertedRangeError(RangeError):
    """first расположена после last."""


class OutOfBoundsError(RangeError):
    """Индекс позиции вне [0, len(seq)] (или вне [0, len) для разыменования)."""


class OverlapError(RangeError):
    """Назначение copy затирает ещё не прочитанные элементы источника."""


class CapacityError(RangeError):
    """Диапазон назначения (или второй диапазон equal) короче требуемого."""


# =============================================================================
# VALIDATION
# =============================================================================


def _cursors(*positions: Any) -> bool:
    return all(isinstance(p, SequenceCursor) for p in positions)


def validate_range(
    first: Position,
    last: Position,
    same_sequence: bool = True,
    bounds: bool = True,
) -> None:
    """
    Проверка, что [first, last) является корректным диапазоном.

    Args:
        first: Начало диапазона
        last: Конец диапазона
        same_sequence: Проверять, что обе позиции над одной последовательностью
        bounds: Проверять индексы и порядок first <= last

    Raises:
        ForeignCursorError: Позиции над разными последовательностями
        OutOfBoundsError: Индекс вне [0, len(seq)]
        InvertedRangeError: first.index > last.index
    """
    if not _cursors(first, last):
        return

    if same_sequence and first.seq is not last.seq:
        raise ForeignCursorError(
            f"first and last belong to different sequences: {first!r}, {last!r}"
        )

    if not bounds:
        return

    validate_position(first)
    validate_position(last)

    if first.index > last.index:
        raise InvertedRangeError(
            f"first ({first.index}) is after last ({last.index})"
        )


def validate_position(pos: Position) -> None:
    """
    Проверка, что индекс позиции в [0, len(seq)] (end допустим).

    Raises:
        OutOfBoundsError: Индекс вне [0, len(seq)]
    """
    if not _cursors(pos):
        return

    size = len(pos.seq)
    if not 0 <= pos.index <= size:
        raise OutOfBoundsError(f"cursor index {pos.index} outside [0, {size}]")


def validate_dereferenceable(pos: Position) -> None:
    """
    Проверка, что позицию можно разыменовать (не end, не за границей).

    Raises:
        OutOfBoundsError: Индекс вне [0, len(seq))
    """
    if not _cursors(pos):
        return

    size = len(pos.seq)
    if not 0 <= pos.index < size:
        raise OutOfBoundsError(
            f"cursor index {pos.index} is not dereferenceable in sequence of {size}"
        )


def validate_capacity(pos: Position, required: int) -> None:
    """
    Проверка, что от pos до конца последовательности есть required элементов.

    Raises:
        OutOfBoundsError: Индекс pos вне [0, len(seq)]
        CapacityError: Осталось меньше required элементов
    """
    if not _cursors(pos):
        return

    validate_position(pos)
    available = len(pos.seq) - pos.index
    if available < required:
        raise CapacityError(
            f"need {required} elements from index {pos.index}, only {available} available"
        )


def validate_copy_destination(
    first: Position, last: Position, d_first: Position
) -> None:
    """
    Проверка, что прямое копирование не затрёт непрочитанный источник.

    Запрещено: d_first в той же последовательности и first < d_first < last.
    d_first == first допустимо (каждый элемент пишется сам в себя).

    Raises:
        OverlapError: Назначение пересекается с хвостом источника
    """
    if not _cursors(first, last, d_first):
        return

    if d_first.seq is first.seq and first.index < d_first.index < last.index:
        raise OverlapError(
            f"destination index {d_first.index} lies inside source "
            f"[{first.index}, {last.index})"
        )


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class RangeGuardConfig:
    """Конфигурация RangeGuard.

    Каждый флаг включает отдельный класс проверок.
    """

    # first/last над одной последовательностью
    check_same_sequence: bool = True

    # Индексы в границах, first <= last
    check_bounds: bool = True

    # copy: назначение не пересекается с непрочитанным источником
    check_overlap: bool = True

    # copy/equal: достаточная длина назначения / второго диапазона
    check_capacity: bool = True


# =============================================================================
# RANGE GUARD
# =============================================================================


class RangeGuard:
    """Алгоритмы graal с проверкой предусловий.

    Сигнатуры и результаты совпадают с graal.core.ranges; при нарушении
    предусловия вместо undefined behaviour выбрасывается RangeError.

    Пример:
        guard = RangeGuard()
        guard.reverse(first, last)
    """

    def __init__(self, config: RangeGuardConfig | None = None):
        """Инициализация guard.

        Args:
            config: конфигурация проверок (опционально, используется default)
        """
        self.config = config or RangeGuardConfig()

    # -------------------------------------------------------------------------
    # Проверки
    # -------------------------------------------------------------------------

    def _reject(self, operation: str, exc: RangeError) -> None:
        log.warning("%s rejected: %s: %s", operation, type(exc).__name__, exc)
        raise exc

    def _check_range(self, operation: str, first: Position, last: Position) -> None:
        try:
            validate_range(
                first,
                last,
                same_sequence=self.config.check_same_sequence,
                bounds=self.config.check_bounds,
            )
        except RangeError as exc:
            self._reject(operation, exc)

    def _check_position(self, operation: str, pos: Position) -> None:
        if not self.config.check_bounds:
            return
        try:
            validate_position(pos)
        except RangeError as exc:
            self._reject(operation, exc)

    def _check_capacity(self, operation: str, pos: Position, required: int) -> None:
        if not self.config.check_capacity:
            return
        try:
            validate_capacity(pos, required)
        except RangeError as exc:
            self._reject(operation, exc)

    # -------------------------------------------------------------------------
    # Search
    # -------------------------------------------------------------------------

    def minmax(
        self,
        first: Position,
        last: Position,
        cmp: Callable[[Any, Any], bool] = operator.lt,
    ) -> MinMax:
        self._check_range("minmax", first, last)
        return search.minmax(first, last, cmp)

    def find_if(
        self, first: Position, last: Position, pred: Callable[[Any], bool]
    ) -> Position:
        self._check_range("find_if", first, last)
        return search.find_if(first, last, pred)

    def all_of(
        self, first: Position, last: Position, pred: Callable[[Any], bool]
    ) -> bool:
        self._check_range("all_of", first, last)
        return search.all_of(first, last, pred)

    def any_of(
        self, first: Position, last: Position, pred: Callable[[Any], bool]
    ) -> bool:
        self._check_range("any_of", first, last)
        return search.any_of(first, last, pred)

    def none_of(
        self, first: Position, last: Position, pred: Callable[[Any], bool]
    ) -> bool:
        self._check_range("none_of", first, last)
        return search.none_of(first, last, pred)

    def equal(
        self,
        first1: Position,
        last1: Position,
        first2: Position,
        last2: Position | None = None,
        eq: Callable[[Any, Any], bool] = operator.eq,
    ) -> bool:
        self._check_range("equal", first1, last1)
        if last2 is None:
            # Трёхпозиционная форма: второй диапазон не короче первого
            self._check_position("equal", first2)
            self._check_capacity("equal", first2, distance(first1, last1))
        else:
            self._check_range("equal", first2, last2)
        return search.equal(first1, last1, first2, last2, eq)

    # -------------------------------------------------------------------------
    # Mutating
    # -------------------------------------------------------------------------

    def reverse(self, first: Position, last: Position) -> None:
        self._check_range("reverse", first, last)
        mutating.reverse(first, last)

    def copy(self, first: Position, last: Position, d_first: Position) -> Position:
        self._check_range("copy", first, last)
        self._check_position("copy", d_first)
        if self.config.check_overlap:
            try:
                validate_copy_destination(first, last, d_first)
            except RangeError as exc:
                self._reject("copy", exc)
        self._check_capacity("copy", d_first, distance(first, last))
        return mutating.copy(first, last, d_first)

    def unique(
        self,
        first: Position,
        last: Position,
        eq: Callable[[Any, Any], bool] = operator.eq,
    ) -> Position:
        self._check_range("unique", first, last)
        return mutating.unique(first, last, eq)

    def partition(
        self, first: Position, last: Position, pred: Callable[[Any], bool]
    ) -> Position:
        self._check_range("partition", first, last)
        return mutating.partition(first, last, pred)
