"""
Test suite for the sorted string set.
"""

import pytest

from fixedset import (
    InvalidCapacityError, NullElementError, NullSetError, SetFullError, SortedStringSet,
)


class TestSortedStringSetBasic:
    """Basic SortedStringSet functionality tests."""

    def test_add_and_find(self):
        s = SortedStringSet(4)
        s.add("b")
        s.add("a")

        assert s.size() == 2
        assert s.find("a") == "a"
        assert s.find("b") == "b"
        assert s.find("c") is None

    def test_elements_sorted(self):
        """elements() is alphabetical regardless of insertion order."""
        s = SortedStringSet(8)
        for word in ["pear", "apple", "fig", "banana", "cherry"]:
            s.add(word)

        assert list(s.elements()) == ["apple", "banana", "cherry", "fig", "pear"]
        assert list(s) == ["apple", "banana", "cherry", "fig", "pear"]
        s.check_invariants()

    def test_byte_order(self):
        """Uppercase sorts before lowercase, as in byte-wise comparison."""
        s = SortedStringSet(4)
        s.add("b")
        s.add("B")
        s.add("a")
        assert list(s.elements()) == ["B", "a", "b"]

    def test_duplicate_add(self):
        s = SortedStringSet(8)
        assert s.add("alpha") == True
        assert s.add("alpha") == False
        assert s.size() == 1

    def test_remove_keeps_order(self):
        s = SortedStringSet(8)
        for word in ["d", "b", "a", "c"]:
            s.add(word)

        assert s.remove("b") == True
        assert s.remove("b") == False
        assert list(s.elements()) == ["a", "c", "d"]

        assert s.remove("a") == True
        assert s.remove("d") == True
        assert list(s.elements()) == ["c"]
        s.check_invariants()

    def test_elements_is_fresh(self):
        s = SortedStringSet(4)
        s.add("a")
        snapshot = s.elements()
        snapshot[0] = "z"
        assert s.find("a") == "a"


class TestSortedStringSetEdgeCases:
    """Test edge cases and error conditions."""

    def test_full(self):
        s = SortedStringSet(2)
        s.add("a")
        s.add("b")
        with pytest.raises(SetFullError):
            s.add("c")
        assert s.add("b") == False

        s.remove("a")
        assert s.add("c") == True
        assert list(s.elements()) == ["b", "c"]

    def test_zero_capacity(self):
        s = SortedStringSet(0)
        assert s.find("a") is None
        assert len(s.elements()) == 0
        with pytest.raises(SetFullError):
            s.add("a")

    def test_negative_capacity(self):
        with pytest.raises(InvalidCapacityError):
            SortedStringSet(-1)

    def test_invalid_elements(self):
        s = SortedStringSet(4)
        with pytest.raises(NullElementError):
            s.add(None)
        with pytest.raises(TypeError):
            s.add(1)

        assert s.find(None) is None
        assert s.find(1) is None
        assert s.remove(None) == False
        assert 1 not in s

    def test_clear(self):
        s = SortedStringSet(4)
        s.add("a")
        s.add("b")
        s.clear()
        assert s.size() == 0
        assert s.empty() == True
        s.check_invariants()

    def test_destroy(self):
        s = SortedStringSet(4)
        s.add("a")
        s.destroy()
        assert s.closed == True
        with pytest.raises(NullSetError):
            s.find("a")
        with pytest.raises(NullSetError):
            s.elements()

    def test_context_manager_and_str(self):
        with SortedStringSet(4) as s:
            s.add("a")
            assert str(s) == "SortedStringSet(capacity=4, size=1)"
        assert str(s) == "SortedStringSet(destroyed)"


class Renamed(str):
    """str subclass whose __str__ reports a different value."""

    def __str__(self):
        return "zzz"


class TestSortedStringSetSubclassElements:
    """Elements that are str subclasses."""

    def test_stores_value_that_was_placed(self):
        s = SortedStringSet(4)
        s.add("b")
        s.add(Renamed("a"))
        s.add("c")

        assert list(s.elements()) == ["a", "b", "c"]
        assert s.find("a") == "a"
        assert type(s.find("a")) is str
        assert s.find("zzz") is None
        s.check_invariants()


class TestSortedStringSetInvariantCheck:
    """check_invariants() reports corruption."""

    def test_out_of_order(self):
        s = SortedStringSet(4)
        s.add("a")
        s.add("b")
        s._data[0], s._data[1] = "b", "a"
        with pytest.raises(AssertionError, match="out of order"):
            s.check_invariants()

    def test_stale_tail(self):
        s = SortedStringSet(4)
        s.add("a")
        s._data[3] = "x"
        with pytest.raises(AssertionError, match="past the end"):
            s.check_invariants()
