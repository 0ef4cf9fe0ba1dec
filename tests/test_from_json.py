"""Unit tests for the error-accumulating extraction engine."""

from jsonapi_codec.core.errors import error_builder
from jsonapi_codec.core.from_json import (
    Err,
    FieldSpec,
    Member,
    Ok,
    from_fields,
    from_json_array,
    integer_from_json,
    merge,
    put_key,
    reduce,
    string_from_json,
    validate_minimum_children,
)
from jsonapi_codec.schemas import Error


def template(pointer=""):
    return error_builder.template(pointer=pointer)


class TestMerge:
    def test_ok_values_are_combined(self):
        assert merge(Ok({"a": 1}), Ok({"b": 2})) == Ok({"a": 1, "b": 2})

    def test_errors_keep_order(self):
        first = Error(title="first")
        second = Error(title="second")
        result = merge(Err((first,)), Err((second,)))
        assert result == Err((first, second))

    def test_ok_is_dropped_when_other_side_failed(self):
        error = Error(title="bad")
        assert merge(Ok({"a": 1}), Err((error,))) == Err((error,))
        assert merge(Err((error,)), Ok({"a": 1})) == Err((error,))

    def test_reduce_defaults_to_empty_map(self):
        assert reduce([]) == Ok({})
        assert reduce([put_key(Ok(1), "a"), put_key(Ok(2), "b")]) == Ok({"a": 1, "b": 2})


class TestScalars:
    def test_string(self):
        assert string_from_json("x", template()) == Ok("x")

    def test_null_is_not_a_string(self):
        result = string_from_json(None, template("/data/id"))
        assert isinstance(result, Err)
        (error,) = result.errors
        assert error.title == "Type is wrong"
        assert error.detail == "`/data/id` type is not string"
        assert error.meta == {"type": "string"}
        assert error.source.pointer == "/data/id"
        assert error.status == "422"

    def test_booleans_are_not_integers(self):
        assert integer_from_json(3, template()) == Ok(3)
        assert isinstance(integer_from_json(True, template()), Err)


class TestFields:
    SPECS = (
        FieldSpec("name", Member("name", required=True, from_json=string_from_json)),
        FieldSpec("count", Member("count", from_json=integer_from_json)),
        FieldSpec("raw", Member("raw")),
    )

    def test_absent_optional_members_are_left_out(self):
        assert from_fields({"name": "a"}, template(), self.SPECS) == Ok({"name": "a"})

    def test_raw_members_are_kept(self):
        result = from_fields({"name": "a", "raw": [1]}, template(), self.SPECS)
        assert result == Ok({"name": "a", "raw": [1]})

    def test_every_error_is_reported_in_declaration_order(self):
        result = from_fields({"count": "many"}, template("/x"), self.SPECS)
        assert isinstance(result, Err)
        missing, wrong_type = result.errors
        assert missing.title == "Child missing"
        assert missing.detail == "`/x/name` is missing"
        assert missing.source.pointer == "/x"
        assert wrong_type.source.pointer == "/x/count"

    def test_minimum_children(self):
        result = validate_minimum_children(Ok({}), {}, template("/r"), ("data", "meta"))
        (error,) = result.errors
        assert error.title == "Not enough children"
        assert error.meta == {"children": ["data", "meta"]}
        assert error.detail == (
            "At least one of the following children of `/r` must be present:\ndata\nmeta"
        )


class TestArray:
    def test_not_an_array(self):
        (error,) = from_json_array({}, template("/errors"), string_from_json).errors
        assert error.meta == {"type": "array"}
        assert error.source.pointer == "/errors"

    def test_elements_are_descended_by_index(self):
        result = from_json_array(["a", 1, None], template("/list"), string_from_json)
        assert [error.source.pointer for error in result.errors] == ["/list/1", "/list/2"]

    def test_empty_array(self):
        assert from_json_array([], template(), string_from_json) == Ok([])
