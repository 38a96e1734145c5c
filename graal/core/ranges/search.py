"""
Search — сканирующие примитивы над диапазонами

Модуль содержит read-only алгоритмы одного прохода:
- minmax: позиции минимума и максимума
- find_if: первая позиция, удовлетворяющая предикату
- all_of / any_of / none_of: кванторы с short-circuit
- equal: поэлементное сравнение двух диапазонов

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Алгоритмы не изменяют элементы и не выходят за [first, last)
2. Кванторы останавливаются на первом решающем элементе
3. minmax: при равенстве побеждает самая ранняя позиция (и для min, и для max)
4. equal с явным last2: диапазоны разной длины никогда не равны
"""

import operator
from typing import Any, Callable, NamedTuple

from graal.core.ranges.cursor import Position

Compare = Callable[[Any, Any], bool]
Predicate = Callable[[Any], bool]
Equal = Callable[[Any, Any], bool]


# =============================================================================
# MINMAX
# =============================================================================


class MinMax(NamedTuple):
    """Пара позиций (минимум, максимум)."""

    min: Any  # позиция минимального элемента
    max: Any  # позиция максимального элемента


def minmax(first: Position, last: Position, cmp: Compare = operator.lt) -> MinMax:
    """
    Позиции наименьшего и наибольшего элементов за один проход.

    Tie-break: минимум заменяется только если cmp(x, min) истинно,
    максимум только если cmp(max, x) истинно. Поэтому среди равных
    элементов и для min, и для max остаётся самая ранняя позиция.

    Args:
        first: Начало диапазона (включительно)
        last: Конец диапазона (исключительно)
        cmp: Strict weak ordering, True если первый аргумент "меньше"

    Returns:
        MinMax(min, max); для пустого диапазона MinMax(last, last)

    Examples:
        >>> from graal.core.ranges.cursor import Range
        >>> values = [3, 1, 4, 1, 5]
        >>> result = minmax(*Range.of(values))
        >>> result.min.index, result.max.index
        (1, 4)
    """
    if first == last:
        return MinMax(last, last)

    min_pos = first
    max_pos = first

    pos = first.next()
    while pos != last:
        current = pos.value
        if cmp(current, min_pos.value):
            min_pos = pos
        if cmp(max_pos.value, current):
            max_pos = pos
        pos = pos.next()

    return MinMax(min_pos, max_pos)


# =============================================================================
# ПОИСК И КВАНТОРЫ
# =============================================================================


def find_if(first: Position, last: Position, pred: Predicate) -> Position:
    """
    Первая позиция, элемент которой удовлетворяет предикату.

    Returns:
        Найденная позиция или last, если совпадений нет
    """
    while first != last:
        if pred(first.value):
            return first
        first = first.next()
    return last


def all_of(first: Position, last: Position, pred: Predicate) -> bool:
    """True если все элементы удовлетворяют pred (True для пустого)."""
    while first != last:
        if not pred(first.value):
            return False
        first = first.next()
    return True


def any_of(first: Position, last: Position, pred: Predicate) -> bool:
    """True если хотя бы один элемент удовлетворяет pred (False для пустого)."""
    while first != last:
        if pred(first.value):
            return True
        first = first.next()
    return False


def none_of(first: Position, last: Position, pred: Predicate) -> bool:
    """True если ни один элемент не удовлетворяет pred (True для пустого)."""
    while first != last:
        if pred(first.value):
            return False
        first = first.next()
    return True


# =============================================================================
# EQUAL
# =============================================================================


def equal(
    first1: Position,
    last1: Position,
    first2: Position,
    last2: Position | None = None,
    eq: Equal = operator.eq,
) -> bool:
    """
    Поэлементное сравнение двух диапазонов.

    Две формы:
    - last2 is None: сравниваются distance(first1, last1) пар.
      Предусловие: второй диапазон содержит не меньше элементов.
      Лишние элементы второго диапазона не рассматриваются.
    - last2 задан: оба диапазона проходятся синхронно; результат True
      только если все пары равны и оба диапазона исчерпаны одновременно.
      Диапазоны разной длины всегда не равны.

    Args:
        first1: Начало первого диапазона
        last1: Конец первого диапазона
        first2: Начало второго диапазона
        last2: Конец второго диапазона (опционально)
        eq: Бинарный предикат равенства (default: operator.eq)

    Returns:
        True если диапазоны равны

    Examples:
        >>> from graal.core.ranges.cursor import begin, end
        >>> a, b = [1, 2, 3], [1, 2, 4]
        >>> equal(begin(a), end(a), begin(b), end(b))
        False
    """
    if last2 is None:
        while first1 != last1:
            if not eq(first1.value, first2.value):
                return False
            first1 = first1.next()
            first2 = first2.next()
        return True

    while first1 != last1 and first2 != last2:
        if not eq(first1.value, first2.value):
            return False
        first1 = first1.next()
        first2 = first2.next()

    # Равны только при одновременном исчерпании
    return first1 == last1 and first2 == last2
