"""Schema Validator — tests for compilation and argument validation.

Tests cover:
    - Bound checks (the limit <= 100 scenario) and default application
    - Error accumulation with dot-joined paths
    - String enum precedence, integer checks (whole floats narrowed), bool-is-not-a-number
    - additionalProperties: false, array item paths, minItems
    - Purity: no mutation of the caller's value, idempotence
    - Compile-time failures (required not declared, bad pattern, unknown type)
"""

import pytest

from portfolio_mcp.core.errors import SchemaDefinitionError
from portfolio_mcp.core.schema_validator import (
    AnySchema,
    NumberSchema,
    ObjectSchema,
    StringSchema,
    compile_schema,
    validate,
)

LIMIT_SCHEMA = {
    "type": "object",
    "properties": {"limit": {"type": "integer", "minimum": 1, "maximum": 100}},
    "required": [],
}


def test_limit_over_maximum_reports_one_error_on_limit():
    result = validate(compile_schema(LIMIT_SCHEMA), {"limit": 150})
    assert not result.valid
    assert result.errors == ["limit: Number must be less than or equal to 100"]
    assert result.coerced is None


def test_empty_object_is_valid_and_limit_stays_absent():
    result = validate(compile_schema(LIMIT_SCHEMA), {})
    assert result.valid
    assert result.coerced == {}


def test_absent_optional_property_receives_default():
    raw = {
        "type": "object",
        "properties": {"limit": {"type": "integer", "default": 10}},
    }
    result = validate(compile_schema(raw), {})
    assert result.coerced == {"limit": 10}


def test_errors_accumulate_across_properties():
    raw = {
        "type": "object",
        "properties": {
            "name": {"type": "string", "minLength": 2},
            "count": {"type": "integer"},
        },
        "required": ["name", "count"],
    }
    result = validate(compile_schema(raw), {"name": "x"})
    assert result.errors == [
        "name: String must contain at least 2 character(s)",
        "count: Required",
    ]


def test_enum_takes_precedence_over_other_string_constraints():
    schema = compile_schema({"type": "string", "enum": ["ab"], "minLength": 5})
    assert validate(schema, "ab").valid


def test_invalid_enum_lists_expected_values():
    schema = compile_schema({"type": "string", "enum": ["asc", "desc"]})
    result = validate(schema, "up")
    assert result.errors == [
        "value: Invalid enum value. Expected 'asc' | 'desc', received 'up'",
    ]


def test_boolean_is_not_a_number():
    result = validate(compile_schema({"type": "number"}), True)
    assert result.errors == ["value: Expected number, received boolean"]


def test_integer_rejects_fraction_but_accepts_whole_float():
    schema = compile_schema({"type": "integer"})
    assert validate(schema, 2.5).errors == ["value: Expected integer, received float"]
    assert validate(schema, 3.0).valid


def test_integer_narrows_whole_float_to_int():
    result = validate(compile_schema(LIMIT_SCHEMA), {"limit": 2.0})
    assert result.coerced == {"limit": 2}
    assert type(result.coerced["limit"]) is int


def test_pattern_is_searched():
    schema = compile_schema({"type": "string", "pattern": "^[a-z]+$"})
    assert validate(schema, "abc").valid
    assert not validate(schema, "ABC").valid


def test_unknown_keys_allowed_unless_exclusive():
    open_schema = compile_schema({"type": "object", "properties": {}})
    closed_schema = compile_schema(
        {"type": "object", "properties": {}, "additionalProperties": False},
    )
    assert validate(open_schema, {"extra": 1}).coerced == {"extra": 1}
    assert validate(closed_schema, {"extra": 1}).errors == [
        "value: Unrecognized key 'extra'",
    ]


def test_array_items_report_index_in_path():
    raw = {
        "type": "object",
        "properties": {
            "tags": {"type": "array", "items": {"type": "string"}, "minItems": 1},
        },
    }
    schema = compile_schema(raw)
    assert validate(schema, {"tags": ["a", 2]}).errors == [
        "tags.1: Expected string, received number",
    ]
    assert validate(schema, {"tags": []}).errors == [
        "tags: Array must contain at least 1 element(s)",
    ]


def test_nested_object_paths_are_dot_joined():
    raw = {
        "type": "object",
        "properties": {
            "filter": {
                "type": "object",
                "properties": {"year": {"type": "integer", "minimum": 2000}},
            },
        },
    }
    result = validate(compile_schema(raw), {"filter": {"year": 1999}})
    assert result.errors == [
        "filter.year: Number must be greater than or equal to 2000",
    ]


def test_non_object_root_is_reported_at_value():
    result = validate(compile_schema(LIMIT_SCHEMA), ["not", "an", "object"])
    assert result.errors == ["value: Expected object, received array"]


def test_validation_does_not_mutate_input_or_share_defaults():
    raw = {
        "type": "object",
        "properties": {
            "tags": {"type": "array", "default": []},
            "meta": {"type": "object"},
        },
    }
    schema = compile_schema(raw)
    value = {"meta": {"a": 1}}
    first = validate(schema, value)
    first.coerced["tags"].append("x")
    first.coerced["meta"]["a"] = 2
    second = validate(schema, value)
    assert value == {"meta": {"a": 1}}
    assert second.coerced["tags"] == []


def test_validation_is_idempotent():
    schema = compile_schema(LIMIT_SCHEMA)
    assert validate(schema, {"limit": "x"}) == validate(schema, {"limit": "x"})


def test_compile_infers_kinds():
    assert isinstance(compile_schema({"properties": {}}), ObjectSchema)
    assert isinstance(compile_schema({}), AnySchema)
    integer = compile_schema({"type": "integer", "maximum": 5})
    assert isinstance(integer, NumberSchema) and integer.integer
    assert isinstance(compile_schema({"type": "string"}), StringSchema)


def test_required_must_be_declared():
    with pytest.raises(SchemaDefinitionError, match="'missing'"):
        compile_schema({"type": "object", "properties": {}, "required": ["missing"]})


def test_invalid_pattern_fails_compilation():
    with pytest.raises(SchemaDefinitionError, match="invalid pattern"):
        compile_schema({"type": "string", "pattern": "("})


def test_unknown_type_fails_compilation():
    with pytest.raises(SchemaDefinitionError, match="unsupported schema type"):
        compile_schema({"type": "date"})
