"""
Mutating — изменяющие примитивы над диапазонами

- reverse: разворот на месте встречными обменами
- copy: прямое поэлементное копирование в другой диапазон
- unique: сжатие серий соседних равных элементов
- partition: нестабильное разбиение по предикату

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Запись происходит только внутри исходного диапазона
   (для copy: внутри [d_first, d_first + n))
2. O(n) времени, O(1) дополнительной памяти
3. Предусловия не проверяются (см. graal.core.ranges.checked)
"""

import operator
from typing import Any, Callable

from graal.core.ranges.cursor import Position, iter_swap


# =============================================================================
# REVERSE
# =============================================================================


def reverse(first: Position, last: Position) -> None:
    """
    Разворот диапазона на месте.

    Встречные позиции обмениваются до пересечения: ровно n // 2 обменов,
    для n <= 1 ничего не происходит. Требует bidirectional позиции.

    Examples:
        >>> from graal.core.ranges.cursor import Range
        >>> values = [1, 2, 3, 4]
        >>> reverse(*Range.of(values))
        >>> values
        [4, 3, 2, 1]
    """
    while first != last:
        last = last.prev()
        if first == last:
            break
        iter_swap(first, last)
        first = first.next()


# =============================================================================
# COPY
# =============================================================================


def copy(first: Position, last: Position, d_first: Position) -> Position:
    """
    Копирование [first, last) в диапазон, начинающийся с d_first.

    Args:
        first: Начало исходного диапазона
        last: Конец исходного диапазона
        d_first: Начало диапазона назначения (достаточной длины)

    Returns:
        Позиция сразу после последнего записанного элемента

    Предусловие: d_first не лежит внутри (first, last), иначе запись
    затрёт ещё не прочитанные элементы источника.
    """
    while first != last:
        d_first.value = first.value
        first = first.next()
        d_first = d_first.next()
    return d_first


# =============================================================================
# UNIQUE
# =============================================================================


def unique(
    first: Position,
    last: Position,
    eq: Callable[[Any, Any], bool] = operator.eq,
) -> Position:
    """
    Удаление последовательных дубликатов со сжатием к началу диапазона.

    Из каждой максимальной серии соседних равных элементов остаётся первый,
    порядок серий сохраняется. Элементы после возвращённой позиции остаются
    валидными, но их значения не определены.

    Args:
        first: Начало диапазона
        last: Конец диапазона
        eq: Бинарный предикат равенства (default: operator.eq)

    Returns:
        Новый логический конец; для пустого диапазона first

    Examples:
        >>> from graal.core.ranges.cursor import Range
        >>> values = [1, 1, 2, 2, 2, 3, 1, 1]
        >>> new_end = unique(*Range.of(values))
        >>> values[:new_end.index]
        [1, 2, 3, 1]
    """
    if first == last:
        return first

    result = first
    pos = first.next()
    while pos != last:
        if not eq(result.value, pos.value):
            result = result.next()
            if result != pos:
                result.value = pos.value
        pos = pos.next()

    return result.next()


# =============================================================================
# PARTITION
# =============================================================================


def partition(
    first: Position,
    last: Position,
    pred: Callable[[Any], bool],
) -> Position:
    """
    Нестабильное разбиение: элементы с pred(x) == True перед остальными.

    Встречный scan-and-swap: first идёт вперёд, пока предикат выполняется,
    last идёт назад, пока предикат не выполняется; найденная пара
    обменивается. Порядок внутри групп не сохраняется.

    Returns:
        Первая позиция группы "не удовлетворяет":
        last если все удовлетворяют, first если ни один
    """
    while True:
        while first != last and pred(first.value):
            first = first.next()
        if first == last:
            return first

        last = last.prev()
        while first != last and not pred(last.value):
            last = last.prev()
        if first == last:
            return first

        iter_swap(first, last)
        first = first.next()
