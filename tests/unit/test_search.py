"""
Тесты для модуля Search

Проверяет:
1. minmax: экстремумы, пустой диапазон, tie-break (earliest wins)
2. find_if: первое совпадение, отсутствие совпадений
3. all_of/any_of/none_of: пустой диапазон, short-circuit
4. equal: обе формы, диапазоны разной длины
5. Работу с произвольной реализацией Position (forward-only cursor)
"""

import operator

import pytest

from graal.core.ranges import (
    MinMax,
    Range,
    all_of,
    any_of,
    begin,
    copy,
    end,
    equal,
    find_if,
    minmax,
    none_of,
)


# =============================================================================
# FIXTURES
# =============================================================================


class _Node:
    __slots__ = ("value", "next_node")

    def __init__(self, value, next_node=None):
        self.value = value
        self.next_node = next_node


class ForwardCursor:
    """Forward-only позиция над односвязным списком (end: None)."""

    def __init__(self, node):
        self.node = node

    @property
    def value(self):
        return self.node.value

    @value.setter
    def value(self, new_value):
        self.node.value = new_value

    def next(self):
        return ForwardCursor(self.node.next_node)

    def __eq__(self, other):
        return isinstance(other, ForwardCursor) and self.node is other.node


def linked(values):
    """(first, last) над односвязным списком из values."""
    head = None
    for value in reversed(values):
        head = _Node(value, head)
    return ForwardCursor(head), ForwardCursor(None)


class CountingPredicate:
    """Предикат, считающий свои вызовы."""

    def __init__(self, pred):
        self.pred = pred
        self.calls = 0

    def __call__(self, x):
        self.calls += 1
        return self.pred(x)


def is_even(x):
    return x % 2 == 0


# =============================================================================
# ТЕСТЫ MINMAX
# =============================================================================


class TestMinmax:
    """Тесты для minmax"""

    def test_basic_extremes(self) -> None:
        """Минимум и максимум найдены за один проход"""
        values = [3, 1, 4, 1, 5, 9, 2, 6]
        result = minmax(*Range.of(values), operator.lt)
        assert result.min.value == 1
        assert result.max.value == 9
        assert result.max.index == 5

    def test_empty_range_returns_end_end(self) -> None:
        """Пустой диапазон → (end, end)"""
        values = []
        result = minmax(begin(values), end(values), operator.lt)
        assert result == MinMax(end(values), end(values))

    def test_single_element(self) -> None:
        """Один элемент: и минимум, и максимум"""
        values = [42]
        result = minmax(*Range.of(values))
        assert result.min == begin(values)
        assert result.max == begin(values)

    def test_earliest_wins_for_min(self) -> None:
        """Среди равных минимумов выбирается самый ранний"""
        values = [5, 1, 3, 1, 1]
        assert minmax(*Range.of(values)).min.index == 1

    def test_earliest_wins_for_max(self) -> None:
        """Среди равных максимумов выбирается самый ранний"""
        values = [9, 1, 9, 3, 9]
        assert minmax(*Range.of(values)).max.index == 0

    def test_all_equal_points_at_first(self) -> None:
        """Все элементы равны → обе позиции на первом элементе"""
        values = [7, 7, 7, 7]
        result = minmax(*Range.of(values))
        assert (result.min.index, result.max.index) == (0, 0)

    def test_custom_comparator(self) -> None:
        """Comparator по модулю"""
        values = [-7, 3, 7, -1]
        result = minmax(*Range.of(values), lambda a, b: abs(a) < abs(b))
        assert result.min.index == 3
        assert result.max.index == 0

    def test_extremes_bound_every_element(self) -> None:
        """Ни один элемент не меньше *min и не больше *max"""
        values = [12, -4, 8, 0, 33, -4, 17, 33]
        result = minmax(*Range.of(values))
        assert all(not x < result.min.value for x in values)
        assert all(not result.max.value < x for x in values)

    def test_subrange(self) -> None:
        """Поиск только внутри [first, last)"""
        values = [100, 5, 2, 8, -100]
        result = minmax(begin(values).next(), end(values).prev())
        assert (result.min.index, result.max.index) == (2, 3)

    def test_unpacks_as_pair(self) -> None:
        """Результат распаковывается как пара"""
        values = [2, 1, 3]
        lo, hi = minmax(*Range.of(values))
        assert (lo.value, hi.value) == (1, 3)

    def test_forward_cursor(self) -> None:
        """Работает с forward-only позициями"""
        first, last = linked([4, 2, 8, 6])
        result = minmax(first, last)
        assert (result.min.value, result.max.value) == (2, 8)

    def test_tuple_sequence(self) -> None:
        """Read-only алгоритм работает с immutable sequence"""
        values = (3, 1, 2)
        result = minmax(*Range.of(values))
        assert (result.min.index, result.max.index) == (1, 0)


# =============================================================================
# ТЕСТЫ FIND_IF
# =============================================================================


class TestFindIf:
    """Тесты для find_if"""

    def test_first_match_returned(self) -> None:
        """Возвращается первая подходящая позиция"""
        values = [1, 3, 4, 6]
        pos = find_if(*Range.of(values), is_even)
        assert pos.index == 2
        assert not any(is_even(x) for x in values[: pos.index])

    def test_no_match_returns_last(self) -> None:
        """Нет совпадений → last"""
        values = [1, 3, 5]
        assert find_if(*Range.of(values), is_even) == end(values)

    def test_empty_range(self) -> None:
        """Пустой диапазон → last"""
        values = []
        assert find_if(*Range.of(values), is_even) == end(values)

    def test_stops_at_match(self) -> None:
        """Предикат не вызывается после совпадения"""
        pred = CountingPredicate(is_even)
        find_if(*Range.of([1, 2, 3, 4, 5]), pred)
        assert pred.calls == 2

    def test_forward_cursor(self) -> None:
        """Работает с forward-only позициями"""
        first, last = linked([1, 5, 10, 11])
        assert find_if(first, last, is_even).value == 10


# =============================================================================
# ТЕСТЫ КВАНТОРОВ
# =============================================================================


class TestQuantifiers:
    """Тесты для all_of, any_of, none_of"""

    def test_empty_range_results(self) -> None:
        """Пустой диапазон: true / false / true"""
        values = []
        assert all_of(*Range.of(values), is_even) is True
        assert any_of(*Range.of(values), is_even) is False
        assert none_of(*Range.of(values), is_even) is True

    @pytest.mark.parametrize(
        "values, expected",
        [
            ([2, 4, 6], (True, True, False)),
            ([1, 2, 3], (False, True, False)),
            ([1, 3, 5], (False, False, True)),
        ],
    )
    def test_results(self, values, expected) -> None:
        """all_of / any_of / none_of на разных входах"""
        actual = (
            all_of(*Range.of(values), is_even),
            any_of(*Range.of(values), is_even),
            none_of(*Range.of(values), is_even),
        )
        assert actual == expected

    def test_all_of_short_circuits(self) -> None:
        """all_of останавливается на первом несовпадении"""
        pred = CountingPredicate(is_even)
        assert all_of(*Range.of([2, 3, 4, 6]), pred) is False
        assert pred.calls == 2

    def test_any_of_short_circuits(self) -> None:
        """any_of останавливается на первом совпадении"""
        pred = CountingPredicate(is_even)
        assert any_of(*Range.of([1, 2, 4, 6]), pred) is True
        assert pred.calls == 2

    def test_none_of_short_circuits(self) -> None:
        """none_of останавливается на первом совпадении"""
        pred = CountingPredicate(is_even)
        assert none_of(*Range.of([1, 3, 4, 5, 7]), pred) is False
        assert pred.calls == 3

    def test_full_scan_without_decision(self) -> None:
        """Без решающего элемента проходится весь диапазон"""
        pred = CountingPredicate(is_even)
        assert all_of(*Range.of([2, 4, 6]), pred) is True
        assert pred.calls == 3


# =============================================================================
# ТЕСТЫ EQUAL
# =============================================================================


class TestEqual:
    """Тесты для equal"""

    def test_equal_ranges(self) -> None:
        """[1,2,3] == [1,2,3]"""
        a, b = [1, 2, 3], [1, 2, 3]
        assert equal(begin(a), end(a), begin(b), end(b), eq=operator.eq) is True
        assert equal(begin(a), end(a), begin(b), eq=operator.eq) is True

    def test_different_ranges(self) -> None:
        """[1,2,3] != [1,2,4]"""
        a, b = [1, 2, 3], [1, 2, 4]
        assert equal(begin(a), end(a), begin(b), end(b)) is False
        assert equal(begin(a), end(a), begin(b)) is False

    def test_bounded_longer_second_not_equal(self) -> None:
        """Четырёхпозиционная форма: второй диапазон длиннее → False"""
        a, b = [1, 2, 3], [1, 2, 3, 4]
        assert equal(begin(a), end(a), begin(b), end(b)) is False

    def test_bounded_shorter_second_not_equal(self) -> None:
        """Четырёхпозиционная форма: второй диапазон короче → False"""
        a, b = [1, 2, 3], [1, 2]
        assert equal(begin(a), end(a), begin(b), end(b)) is False

    def test_unbounded_ignores_tail_of_second(self) -> None:
        """Трёхпозиционная форма сравнивает только len(range1) пар"""
        a, b = [1, 2, 3], [1, 2, 3, 4]
        assert equal(begin(a), end(a), begin(b)) is True

    def test_empty_ranges_equal(self) -> None:
        """Два пустых диапазона равны"""
        a, b = [], []
        assert equal(begin(a), end(a), begin(b), end(b)) is True

    def test_custom_equality(self) -> None:
        """Пользовательский предикат равенства"""
        a, b = ["Ab", "c"], ["aB", "C"]
        same = lambda x, y: x.casefold() == y.casefold()
        assert equal(begin(a), end(a), begin(b), end(b), same) is True

    def test_stops_on_first_mismatch(self) -> None:
        """Сравнение прекращается на первом несовпадении"""
        calls = []

        def eq(x, y):
            calls.append((x, y))
            return x == y

        a, b = [1, 9, 3, 4], [1, 2, 3, 4]
        assert equal(begin(a), end(a), begin(b), end(b), eq) is False
        assert calls == [(1, 1), (9, 2)]

    def test_mixed_cursor_types(self) -> None:
        """Диапазоны разных реализаций Position"""
        values = [1, 2, 3]
        first2, last2 = linked([1, 2, 3])
        assert equal(begin(values), end(values), first2, last2) is True

    def test_copy_then_equal(self) -> None:
        """copy с последующим equal по источнику и назначению → True"""
        source = [5, -1, 8, 0, 3]
        dest = [None] * len(source)
        out = copy(begin(source), end(source), begin(dest))
        assert equal(begin(source), end(source), begin(dest), out) is True
