"""
Cursor — позиции и полуоткрытые диапазоны

Модуль определяет абстракцию позиции (cursor) над последовательностью:
- Position: протокол позиции (==, value, next(), prev())
- SequenceCursor: random-access позиция над Python-последовательностью
- Range: полуоткрытый диапазон [first, last)
- Вспомогательные операции: iter_swap, distance, advance, begin, end

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Позиции immutable: next()/prev() возвращают новую позицию
2. Две SequenceCursor равны только над одним и тем же объектом (identity)
3. Позиция end (one-past-the-last) никогда не разыменовывается
4. Никаких runtime проверок: нарушение предусловий даёт undefined behaviour
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, NamedTuple, Protocol, TypeVar

T = TypeVar("T")
P = TypeVar("P", bound="Position")


# =============================================================================
# POSITION PROTOCOL
# =============================================================================


class Position(Protocol):
    """
    Протокол позиции внутри последовательности.

    Forward-алгоритмам достаточно ==, value и next().
    Bidirectional-алгоритмам (reverse, partition) дополнительно нужен prev().
    """

    @property
    def value(self) -> Any: ...

    @value.setter
    def value(self, new_value: Any) -> None: ...

    def next(self: P) -> P: ...

    def prev(self: P) -> P: ...


# =============================================================================
# SEQUENCE CURSOR
# =============================================================================


class SequenceCursor:
    """
    Random-access позиция над Python-последовательностью.

    Пара (sequence, index). Запись через value требует mutable sequence
    (list, bytearray); для tuple/str запись приводит к TypeError.
    """

    __slots__ = ("_seq", "_index")

    def __init__(self, seq: Sequence[Any], index: int = 0):
        self._seq = seq
        self._index = index

    @property
    def seq(self) -> Sequence[Any]:
        return self._seq

    @property
    def index(self) -> int:
        return self._index

    @property
    def value(self) -> Any:
        return self._seq[self._index]

    @value.setter
    def value(self, new_value: Any) -> None:
        self._seq[self._index] = new_value  # type: ignore[index]

    def next(self) -> SequenceCursor:
        return SequenceCursor(self._seq, self._index + 1)

    def prev(self) -> SequenceCursor:
        return SequenceCursor(self._seq, self._index - 1)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SequenceCursor):
            return NotImplemented
        return self._seq is other._seq and self._index == other._index

    def __hash__(self) -> int:
        return hash((id(self._seq), self._index))

    def __repr__(self) -> str:
        return f"SequenceCursor(index={self._index}, len={len(self._seq)})"


# =============================================================================
# RANGE
# =============================================================================


class Range(NamedTuple):
    """
    Полуоткрытый диапазон [first, last).

    NamedTuple, поэтому распаковывается прямо в аргументы алгоритмов:
        minmax(*Range.of(values), cmp)
    """

    first: Any
    last: Any

    @classmethod
    def of(cls, seq: Sequence[Any]) -> Range:
        """Диапазон, покрывающий всю последовательность."""
        return cls(begin(seq), end(seq))

    def is_empty(self) -> bool:
        return self.first == self.last


def begin(seq: Sequence[Any]) -> SequenceCursor:
    """Позиция первого элемента."""
    return SequenceCursor(seq, 0)


def end(seq: Sequence[Any]) -> SequenceCursor:
    """Позиция one-past-the-last."""
    return SequenceCursor(seq, len(seq))


# =============================================================================
# ОПЕРАЦИИ НАД ПОЗИЦИЯМИ
# =============================================================================


def iter_swap(a: Position, b: Position) -> None:
    """
    Обмен элементов, на которые указывают две позиции.

    Args:
        a: Первая позиция (разыменовываемая)
        b: Вторая позиция (разыменовываемая)
    """
    a.value, b.value = b.value, a.value


def distance(first: Position, last: Position) -> int:
    """
    Количество шагов next() от first до last.

    Для SequenceCursor: O(1) разность индексов; для прочих позиций:
    линейный проход. Предусловие: last достижима из first.

    Examples:
        >>> values = [1, 2, 3]
        >>> distance(begin(values), end(values))
        3
    """
    if isinstance(first, SequenceCursor) and isinstance(last, SequenceCursor):
        return last.index - first.index

    count = 0
    while first != last:
        first = first.next()
        count += 1
    return count


def advance(pos: P, n: int) -> P:
    """
    Сдвиг позиции на n шагов (n < 0 означает назад, требует prev()).

    Returns:
        Новая позиция; исходная не изменяется
    """
    if isinstance(pos, SequenceCursor):
        return SequenceCursor(pos.seq, pos.index + n)  # type: ignore[return-value]

    while n > 0:
        pos = pos.next()
        n -= 1
    while n < 0:
        pos = pos.prev()
        n += 1
    return pos
