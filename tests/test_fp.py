"""
Tests for the pipe-style functional API.
"""

import pytest

from lazyiter import EmptySequenceError, IndexOutOfRangeError, fp

FRUIT = ["apple", "banana", "orange", "lemon", "pear"]


class TestPipe:
    """Tests for pipe itself."""

    def test_overview(self):
        """Test a filter followed by a collection."""
        assert fp.pipe([5, 6, 7, 8], fp.filter(lambda x: x > 6), fp.to_list) == [7, 8]

    def test_no_operators(self):
        """Test that a bare pipe returns the cursor."""
        cursor = fp.pipe([1, 2])
        assert next(cursor) == 1
        assert list(cursor) == [2]

    def test_generator_source(self):
        """Test a pipe over a generator."""
        result = fp.pipe((x * x for x in range(5)), fp.skip(1), fp.take(2), fp.to_list)
        assert result == [1, 4]

    def test_lazy_until_terminal(self):
        """Test that nothing is pulled without a terminal operator."""
        calls = []
        fp.pipe([1, 2, 3], fp.map(lambda x: calls.append(x) or x))
        assert calls == []


class TestLazyOperators:
    """Tests for the lazy operators."""

    def test_map_filter(self):
        """Test map and filter together."""
        result = fp.pipe(range(10), fp.map(lambda x: x * 3), fp.filter(lambda x: x % 2 == 0), fp.to_list)
        assert result == [0, 6, 12, 18, 24]

    def test_flat_map(self):
        """Test flattening one level."""
        assert fp.pipe([[1, 2], [3]], fp.flat_map(lambda x: x), fp.to_list) == [1, 2, 3]

    def test_concat(self):
        """Test appending another iterable."""
        assert fp.pipe([1], fp.concat([2, 3]), fp.to_list) == [1, 2, 3]

    def test_distinct(self):
        """Test duplicate removal with and without a key."""
        assert fp.pipe([5, 3, 3, 10, 5], fp.distinct(), fp.to_list) == [5, 3, 10]
        assert fp.pipe(FRUIT, fp.distinct(len), fp.to_list) == ["apple", "banana", "pear"]

    def test_sort(self):
        """Test natural, comparator and key ordering."""
        assert fp.pipe([3, 1, 2], fp.sort(), fp.to_list) == [1, 2, 3]
        assert fp.pipe([3, 1, 2], fp.sort(lambda a, b: b - a), fp.to_list) == [3, 2, 1]
        assert fp.pipe(FRUIT, fp.sort(key=len), fp.take(2), fp.to_list) == ["pear", "apple"]

    def test_take_while(self):
        """Test stopping at the first failing item."""
        assert fp.pipe([1, 2, 5, 1], fp.take_while(lambda x: x < 3), fp.to_list) == [1, 2]

    def test_indexed(self):
        """Test map and filter with positions."""
        result = fp.pipe(
            ["a", "b", "c"],
            fp.filter_indexed(lambda x, i: i != 1),
            fp.map_indexed(lambda x, i: f"{i}{x}"),
            fp.to_list,
        )
        assert result == ["0a", "1c"]


class TestTerminalOperators:
    """Tests for the terminal operators."""

    def test_counting(self):
        """Test length and is_empty."""
        assert fp.pipe(FRUIT, fp.length) == 5
        assert fp.pipe([], fp.is_empty) is True
        assert fp.pipe([None], fp.is_empty) is False

    def test_to_map(self):
        """Test grouping into a dict."""
        result = fp.pipe(FRUIT, fp.to_map(len))
        assert result[5] == ["apple", "lemon"]
        assert result[4] == ["pear"]

    def test_for_each(self):
        """Test a side-effecting walk."""
        seen = []
        fp.pipe([1, 2], fp.for_each(seen.append))
        assert seen == [1, 2]

    def test_for_each_indexed(self):
        """Test a side-effecting walk with positions."""
        seen = []
        fp.pipe(["x", "y"], fp.for_each_indexed(lambda x, i: seen.append(i)))
        assert seen == [0, 1]

    def test_reduce(self):
        """Test a left fold."""
        assert fp.pipe([1, 2, 3, 4], fp.reduce(lambda acc, x: acc + x, 10)) == 20

    def test_find(self):
        """Test find and find_index."""
        assert fp.pipe(FRUIT, fp.find(lambda x: x.startswith("o"))) == "orange"
        assert fp.pipe(FRUIT, fp.find(lambda x: x == "kiwi")) is None
        assert fp.pipe(FRUIT, fp.find_index(lambda x: x == "lemon")) == 3
        assert fp.pipe(FRUIT, fp.find_index(lambda x: x == "kiwi")) == -1

    def test_predicates(self):
        """Test some, every and includes."""
        assert fp.pipe(FRUIT, fp.some(lambda x: len(x) == 6)) is True
        assert fp.pipe(FRUIT, fp.every(lambda x: len(x) > 4)) is False
        assert fp.pipe([], fp.every(lambda x: False)) is True
        assert fp.pipe(FRUIT, fp.includes("pear")) is True
        assert fp.pipe(FRUIT, fp.includes("kiwi")) is False

    def test_aggregation(self):
        """Test sum, min and max."""
        assert fp.pipe([1, 2, 3], fp.sum()) == 6
        assert fp.pipe(FRUIT, fp.sum(len)) == 26
        assert fp.pipe([4, -1, 7], fp.min()) == -1
        assert fp.pipe(FRUIT, fp.max(len)) == 6
        assert fp.pipe([], fp.max()) is None

    def test_head(self):
        """Test head and its tolerant sibling."""
        assert fp.pipe(FRUIT, fp.head()) == "apple"
        assert fp.pipe([], fp.try_get_head()) is None
        assert fp.pipe([], fp.try_get_head("none")) == "none"
        with pytest.raises(EmptySequenceError):
            fp.pipe([], fp.head())

    def test_positional_access(self):
        """Test try_get_at and get_at."""
        assert fp.pipe(FRUIT, fp.try_get_at(2)) == "orange"
        assert fp.pipe(FRUIT, fp.try_get_at(10)) is None
        assert fp.pipe(FRUIT, fp.try_get_at(-1)) is None
        assert fp.pipe(FRUIT, fp.get_at(4)) == "pear"
        with pytest.raises(IndexOutOfRangeError):
            fp.pipe(FRUIT, fp.get_at(5))
