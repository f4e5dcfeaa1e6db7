"""
Tests for conversion operations and grouping.
"""

from types import MappingProxyType

import pytest

from lazyiter import Group, Seq, wrap

INPUT = [5, 3, 3, 10, 5]


def size(x):
    return "big" if x > 4 else "small"


class TestCollections:
    """Tests for list, tuple and set conversions."""

    def test_to_list_is_a_copy(self):
        """Test that to_list never hands out the wrapped list."""
        data = [1, 2, 3]
        result = wrap(data).to_list()
        assert result == data
        assert result is not data

    def test_to_tuple(self):
        """Test read-only array conversion."""
        assert wrap(INPUT).to_tuple() == tuple(INPUT)

    def test_to_set(self):
        """Test set conversion."""
        assert wrap(INPUT).to_set() == set(INPUT)

    def test_to_frozenset(self):
        """Test read-only set conversion."""
        result = wrap(INPUT).to_frozenset()
        assert isinstance(result, frozenset)
        assert result == frozenset(INPUT)


class TestToMap:
    """Tests for key-to-items mappings."""

    def test_to_map(self):
        """Test grouping into a dict."""
        result = wrap(INPUT).to_map(size)
        assert len(result) == 2
        assert result["big"] == [5, 10, 5]
        assert result["small"] == [3, 3]

    def test_to_map_key_order(self):
        """Test that keys keep first-seen order."""
        assert list(wrap(INPUT).to_map(size)) == ["big", "small"]

    def test_to_readonly_map(self):
        """Test that the read-only map cannot be modified."""
        result = wrap(INPUT).to_readonly_map(size)
        assert isinstance(result, MappingProxyType)
        assert result["small"] == [3, 3]
        with pytest.raises(TypeError):
            result["other"] = []


class TestGroupBy:
    """Tests for group_by."""

    def test_group_by(self):
        """Test groups and their items."""
        groups = wrap([5, 6, 7, 8]).group_by(lambda x: "big" if x > 6 else "small").to_list()
        assert [g.key for g in groups] == ["small", "big"]
        assert groups[0].items.to_list() == [5, 6]
        assert groups[1].items.to_list() == [7, 8]

    def test_groups_are_sequences(self):
        """Test that group items support the full chain."""
        groups = wrap(INPUT).group_by(size)
        big = groups.find(lambda g: g.key == "big")
        assert isinstance(big, Group)
        assert isinstance(big.items, Seq)
        assert big.items.sum() == 20
        assert big.items.distinct().to_list() == [5, 10]

    def test_group_by_is_restartable(self):
        """Test that the groups can be traversed twice, even from an iterator."""
        groups = wrap(iter(INPUT)).group_by(size)
        assert groups.length() == 2
        assert groups.map(lambda g: g.key).to_list() == ["big", "small"]

    def test_group_by_unpacks(self):
        """Test that a group unpacks into key and items."""
        key, items = wrap([1]).group_by(lambda x: x % 2).head()
        assert key == 1
        assert items.to_list() == [1]


class TestSeparatedString:
    """Tests for to_separated_string."""

    def test_default_separator(self):
        """Test the default separator."""
        assert wrap([1, 2, 3]).to_separated_string() == "1, 2, 3"

    def test_custom_separator(self):
        """Test a custom separator."""
        assert wrap(INPUT).to_separated_string(":") == ":".join(str(x) for x in INPUT)

    def test_none_is_skipped(self):
        """Test that None items are left out by default."""
        assert wrap([1, None, 2]).to_separated_string(":") == "1:2"

    def test_none_kept_on_request(self):
        """Test that None items can be stringified instead."""
        assert wrap([1, None]).to_separated_string(":", skip_none=False) == "1:None"

    def test_converter(self):
        """Test a custom converter."""
        result = wrap([1.5, 2.25]).to_separated_string("|", lambda x: f"{x:.1f}")
        assert result == "1.5|2.2"

    def test_converter_can_skip(self):
        """Test that a converter returning None leaves the element out."""
        result = wrap([1, 2, 3, 4]).to_separated_string(",", lambda x: str(x) if x % 2 else None)
        assert result == "1,3"

    def test_configured_separator(self, fresh_config):
        """Test that the configured default separator is used."""
        fresh_config.default_separator = " / "
        assert wrap(["a", "b"]).to_separated_string() == "a / b"

    def test_empty(self):
        """Test that an empty sequence gives an empty string."""
        assert wrap([]).to_separated_string() == ""
