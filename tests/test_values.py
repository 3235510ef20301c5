"""Tests for value_core.values: construction, transitions and leaves."""

import copy

import pytest

from value_core import AccessError, ChildError, Kind, MethodError, Value


# ---------------------------------------------------------------------------
# Construction
# ---------------------------------------------------------------------------

class TestConstruction:
    def test_default_is_null(self):
        v = Value()
        assert v.is_null()
        assert v.kind is Kind.NULL

    def test_boolean(self):
        assert Value(True).kind is Kind.BOOLEAN

    def test_int_is_stored_as_float(self):
        v = Value(42)
        assert v.kind is Kind.NUMBER
        assert isinstance(v.number, float)
        assert v.number == 42.0

    def test_string(self):
        assert Value("foo").string == "foo"

    def test_bytes_are_latin1_text(self):
        assert Value(b"caf\xe9").string == "café"

    def test_list(self):
        v = Value([42, "foo", None])
        assert v.kind is Kind.ARRAY
        assert v.size() == 3
        assert v.at(2).is_null()

    def test_str_keyed_dict(self):
        v = Value({"foo": 42})
        assert v.kind is Kind.OBJECT
        assert v.at("foo") == 42

    def test_empty_dict_is_object(self):
        assert Value({}).is_object()

    def test_unsupported_source(self):
        with pytest.raises(TypeError):
            Value(object())


# ---------------------------------------------------------------------------
# Assignment
# ---------------------------------------------------------------------------

class TestSet:
    def test_replaces_any_kind(self):
        v = Value("foo")
        v.set(42)
        assert v.is_number()
        v.set([1, 2])
        assert v.is_array()
        v.set(None)
        assert v.is_null()

    def test_deep_copy(self):
        src = Value({"foo": [1, 2]})
        dst = Value()
        dst.set(src)
        src["foo"][0] = 99
        assert dst.at("foo").at(0) == 1

    def test_self_assignment_is_noop(self):
        v = Value({"foo": [1, 2, 3]})
        v.set(v)
        assert v.is_object()
        assert v["foo"].size() == 3
        assert v == {"foo": [1, 2, 3]}

    def test_self_reference_stores_copy(self):
        v = Value()
        v["foo"] = "bar"
        v["self"] = v
        assert v["self"]["foo"] == "bar"
        assert "self" not in v["self"]


class TestSetIfNull:
    def test_null_accepts_copy(self):
        v = Value()
        src = Value([1, 2])
        v <<= src
        assert v == [1, 2]
        src[0] = 5
        assert v.at(0) == 1

    def test_non_null_rejects(self):
        v = Value(42)
        with pytest.raises(AccessError, match=r"is not null \(is number\)\.$"):
            v.set_if_null("foo")
        assert v == 42

    def test_self_is_noop(self):
        v = Value(42)
        v.set_if_null(v)
        assert v == 42


class TestClear:
    def test_clear_twice(self):
        v = Value({"foo": 1})
        v.clear()
        v.clear()
        assert v.is_null()


def test_swap():
    a = Value("foo")
    b = Value([1])
    a.swap(b)
    assert a == [1]
    assert b == "foo"


@pytest.mark.parametrize(
    "source",
    [None, True, 42.5, "foo", [1, "x", None], {"a": [1], "b": {"c": False}}],
    ids=["null", "boolean", "number", "string", "array", "object"],
)
@pytest.mark.parametrize("clone_of", [Value.copy, copy.copy, copy.deepcopy])
def test_clone_equals_source(source, clone_of):
    v = Value(source)
    clone = clone_of(v)
    assert clone == v
    assert clone.kind is v.kind
    assert clone is not v


def test_copy_module_hooks():
    v = Value({"a": [1, {"b": True}]})
    for clone in (v.copy(), copy.copy(v), copy.deepcopy(v)):
        assert clone == v
        assert clone is not v
        clone["a"][1]["b"] = False
        assert v["a"][1]["b"] == True


# ---------------------------------------------------------------------------
# Installation
# ---------------------------------------------------------------------------

class TestInstallation:
    def test_new_null(self):
        Value().new_null()
        with pytest.raises(AccessError, match=r"^is not a null \(is boolean\)\.$"):
            Value(False).new_null()

    def test_new_boolean(self):
        v = Value()
        v.new_boolean()
        assert v == False
        v.new_boolean(True)
        assert v == True
        v.new_boolean()
        assert v == True

    def test_new_number(self):
        v = Value()
        v.new_number()
        assert v == 0
        v.new_number(42)
        v.new_number()
        assert v == 42

    def test_new_string_resets(self):
        v = Value("foo")
        v.new_string()
        assert v == ""
        v.new_string("bar")
        assert v == "bar"

    def test_new_array_from_seed(self):
        v = Value()
        v.new_array([0.42, -0.42, 42])
        assert v == [0.42, -0.42, 42]

    def test_new_array_clears_existing(self):
        v = Value([1, 2])
        v.new_array()
        assert v.is_array()
        assert v.empty()

    def test_new_object_clears_existing(self):
        v = Value({"foo": 42})
        v.new_object()
        assert v.is_object()
        assert v.size() == 0
        v.new_object({"bar": 1})
        assert v == {"bar": 1}

    @pytest.mark.parametrize(
        "method, name",
        [
            ("new_boolean", "boolean"),
            ("new_number", "number"),
            ("new_string", "string"),
            ("new_array", "array"),
            ("new_object", "object"),
        ],
    )
    def test_wrong_kind(self, method, name):
        v = Value(1 if name == "string" else "x")
        with pytest.raises(AccessError, match=rf"^is not a {name} \("):
            getattr(v, method)()


# ---------------------------------------------------------------------------
# Boolean / number leaves
# ---------------------------------------------------------------------------

class TestLeaves:
    def test_get_boolean_promotes_null(self):
        v = Value()
        assert v.get_boolean() is False
        assert v.is_boolean()

    def test_strict_boolean_does_not_promote(self):
        v = Value()
        with pytest.raises(AccessError, match=r"\(is null\)\.$"):
            v.boolean
        assert v.is_null()

    def test_strict_boolean_on_number(self):
        with pytest.raises(AccessError, match=r"^is not a boolean \(is number\)\.$"):
            Value(1).boolean

    def test_get_number_promotes_null(self):
        v = Value()
        assert v.get_number() == 0.0
        assert v.is_number()

    def test_get_number_wrong_kind(self):
        with pytest.raises(AccessError, match="is not a number"):
            Value("1").get_number()

    def test_cast(self):
        v = Value(42.9)
        assert v.cast(int) == 42
        assert int(v) == 42
        assert float(v) == 42.9

    def test_cast_requires_number(self):
        with pytest.raises(AccessError):
            int(Value(True))

    def test_live_array_payload(self):
        v = Value()
        v.get_array().append(Value(1))
        assert v == [1]

    def test_truthiness(self):
        assert not Value()
        assert not Value(False)
        assert not Value(0)
        assert not Value("")
        assert Value([0])
        assert Value({"a": None})


# ---------------------------------------------------------------------------
# Cross-kind methods
# ---------------------------------------------------------------------------

class TestCrossKind:
    @pytest.mark.parametrize("source", [None, True, 42])
    @pytest.mark.parametrize("method", ["size", "empty", "max_size", "capacity", "reserve"])
    def test_scalars_raise_method_error(self, source, method):
        with pytest.raises(MethodError) as info:
            getattr(Value(source), method)()
        assert info.value.method_name == method
        assert str(info.value) == f"has not a method {method}."

    def test_resize_on_scalar(self):
        with pytest.raises(MethodError, match="resize"):
            Value(1).resize(3)

    def test_object_has_no_capacity(self):
        with pytest.raises(MethodError, match="capacity"):
            Value({}).capacity()

    def test_sizes(self):
        assert Value("foo").size() == 3
        assert len(Value([1, 2])) == 2
        assert Value({"a": 1}).size() == 1
        assert Value([]).empty()
        assert Value("x").max_size() > 0

    def test_resize(self):
        s = Value("foo")
        s.resize(5)
        assert s == "foo\0\0"
        a = Value([1])
        a.resize(3)
        assert a.size() == 3
        assert a.at(2).is_null()
        a.resize(1)
        assert a == [1]


# ---------------------------------------------------------------------------
# Subscripts
# ---------------------------------------------------------------------------

class TestSubscripts:
    def test_nested_write(self):
        v = Value()
        v["foo"][3] = 42
        assert v.is_object()
        assert v["foo"].size() == 4
        assert v["foo"][3] == 42

    def test_auto_extension_with_gaps(self):
        v = Value()
        v[42]
        v[41]
        assert v.size() == 43
        assert v[0].is_null()

    def test_write_law(self):
        v = Value()
        v[5] = "x"
        assert v.size() == 6
        assert v[5] == "x"
        assert all(v.at(j).is_null() for j in range(5))

    def test_float_index_truncates(self):
        v = Value([1, 2, 3])
        assert v.at(1.9) == 2

    def test_value_subscripts(self):
        v = Value({"foo": [10, 20]})
        assert v[Value("foo")][Value(1)] == 20

    def test_bool_subscript_rejected(self):
        with pytest.raises(TypeError):
            Value([1])[True]

    def test_mixing_kinds(self):
        v = Value()
        v["foo"] = 1
        with pytest.raises(AccessError, match=r"^is not a array \(is object\)\.$"):
            v[0] = 1

    def test_negative_index(self):
        with pytest.raises(ChildError) as info:
            Value([1])[-1]
        assert info.value.index == -1

    def test_delitem(self):
        v = Value({"a": 1, "b": 2})
        del v["a"]
        assert v == {"b": 2}
        with pytest.raises(ChildError):
            del v["a"]
        a = Value([1, 2, 3])
        del a[0]
        assert a == [2, 3]

    def test_repeated_reads_return_same_cell(self):
        v = Value([1, 2])
        assert v.at(0) is v.at(0)
        assert v[1] is v[1]


def test_repr():
    assert repr(Value({"a": [1, None]})) == "Value({'a': [1.0, None]})"
