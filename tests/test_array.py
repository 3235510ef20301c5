"""Tests for the array surface of Value."""

import pytest

from value_core import AccessError, ChildError, Kind, Value


# ---------------------------------------------------------------------------
# Element access
# ---------------------------------------------------------------------------

class TestAccess:
    def test_front_back(self):
        v = Value([1, 2, 3])
        assert v.front() == 1
        assert v.back() == 3

    @pytest.mark.parametrize("method", ["front", "back", "pop_back"])
    def test_empty(self, method):
        with pytest.raises(ChildError) as info:
            getattr(Value([]), method)()
        assert info.value.index == 0

    def test_at_out_of_range(self):
        v = Value([1, 2, 3, 4])
        with pytest.raises(ChildError, match=r"^4 has out of range\.$"):
            v.at(4)
        assert v.size() == 4

    def test_at_on_null(self):
        with pytest.raises(AccessError, match=r"^is not a array \(is null\)\.$"):
            Value().at(0)

    def test_iteration(self):
        v = Value([1, 2, 3])
        assert [c.number for c in v.array_iter()] == [1, 2, 3]
        assert [c.number for c in v.array_reversed()] == [3, 2, 1]

    def test_contains_index(self):
        v = Value([1, "x"])
        assert v.contains(0)
        assert 1 in v
        assert v.contains(1, Kind.STRING)
        assert not v.contains(1, Kind.NUMBER)
        assert not v.contains(2)
        assert not v.contains(-1)

    def test_contains_index_on_object(self):
        with pytest.raises(AccessError, match=r"\(is object\)\.$"):
            Value({}).contains(0)

    def test_iteration_promotes_null(self):
        v = Value()
        assert list(v.array_iter()) == []
        assert v.is_array()


# ---------------------------------------------------------------------------
# Auto-extension
# ---------------------------------------------------------------------------

class TestAutoExtension:
    def test_gaps_are_null(self):
        v = Value()
        v[42]
        v[41]
        assert v.size() == 43
        assert v[0].is_null()

    def test_nested(self):
        v = Value()
        v[1][2] = "x"
        assert v == [None, [None, None, "x"]]


# ---------------------------------------------------------------------------
# Modifiers
# ---------------------------------------------------------------------------

class TestModifiers:
    def test_push_back_promotes_null(self):
        v = Value()
        v.push_back(1)
        v.push_back("two")
        assert v == [1, "two"]

    def test_push_back_copies(self):
        child = Value([1])
        v = Value()
        v.push_back(child)
        child.push_back(2)
        assert v == [[1]]

    def test_push_back_wrong_kind(self):
        with pytest.raises(AccessError, match=r"\(is string\)\.$"):
            Value("x").push_back(1)

    def test_pop_back(self):
        v = Value([1, 2])
        assert v.pop_back() == 2
        assert v == [1]

    def test_erase_single(self):
        v = Value([1, 2, 3])
        assert v.array_erase(1) == 1
        assert v == [1, 3]

    def test_erase_range(self):
        v = Value([1, 2, 3])
        v.array_erase(0, 2)
        assert v == [3]

    def test_erase_out_of_range(self):
        with pytest.raises(ChildError) as info:
            Value([1]).array_erase(5)
        assert info.value.index == 5

    def test_insert(self):
        v = Value([1, 2])
        assert v.array_insert(1, "x", 2) == 1
        assert v == [1, "x", "x", 2]

    def test_insert_past_end(self):
        with pytest.raises(ChildError):
            Value([1]).array_insert(3, 0)

    def test_insert_range(self):
        v = Value([1])
        v.array_insert_range(0, (7, 8))
        assert v == [7, 8, 1]

    def test_assign(self):
        v = Value([1, 2, 3, 4])
        v.assign(3, None)
        assert v == [None, None, None]

    def test_array_assign(self):
        v = Value()
        v.array_assign({"b": 2, "a": 1})
        assert v == [1, 2]

    def test_array_resize(self):
        v = Value()
        v.array_resize(2, 0)
        assert v == [0, 0]
        v.array_resize(1)
        assert v == [0]

    def test_capacity(self):
        v = Value([1, 2])
        v.reserve(100)
        assert v.capacity() >= v.size()

    def test_array_resize_bad_fill(self):
        v = Value()
        with pytest.raises(TypeError):
            v.array_resize(2, object())
        assert v.is_null()

    def test_array_assign_failure_keeps_contents(self):
        v = Value([1, 2])
        with pytest.raises(TypeError):
            v.array_assign([3, object()])
        assert v == [1, 2]

    def test_insert_range_failure_keeps_contents(self):
        v = Value([1])
        with pytest.raises(TypeError):
            v.array_insert_range(0, [object()])
        assert v == [1]
