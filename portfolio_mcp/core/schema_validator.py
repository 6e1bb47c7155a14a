"""Schema Validator — compiles declarative parameter schemas and checks tool arguments.

Invariants:
    - Schema is a closed union (String/Number/Boolean/Array/Object/Any); compile
      once at startup, read-only afterwards
    - An ObjectSchema's `required` only names declared `properties`
      (violations raise SchemaDefinitionError at compile time)
    - validate() is pure and idempotent: same (schema, value) -> same errors
    - Errors are accumulated, never short-circuited, each prefixed with its
      dot-joined property path ("value" for the root)
    - The caller's value is never mutated; `coerced` is a fresh structure where
      the only changes are defaults applied to absent optional properties and
      whole floats under an integer schema narrowed to int
    - String `enum` takes precedence: when present, no other string constraint runs

Design Decisions:
    - Frozen dataclasses + match over the node type instead of re-reading the
      raw dict on every call: every schema shape is handled in one place
    - Unknown object keys are accepted unless additionalProperties is false
    - bool is never accepted as a number even though it subclasses int
"""

import copy
import math
import re
from dataclasses import dataclass, field
from typing import Any

from portfolio_mcp.core.errors import SchemaDefinitionError


@dataclass(frozen=True, kw_only=True)
class _SchemaNode:
    description: str | None = None
    default: Any = None
    has_default: bool = False


@dataclass(frozen=True, kw_only=True)
class StringSchema(_SchemaNode):
    min_length: int | None = None
    max_length: int | None = None
    pattern: re.Pattern | None = None
    enum: tuple[str, ...] | None = None


@dataclass(frozen=True, kw_only=True)
class NumberSchema(_SchemaNode):
    integer: bool = False
    minimum: float | None = None
    maximum: float | None = None


@dataclass(frozen=True, kw_only=True)
class BooleanSchema(_SchemaNode):
    pass


@dataclass(frozen=True, kw_only=True)
class AnySchema(_SchemaNode):
    pass


@dataclass(frozen=True, kw_only=True)
class ArraySchema(_SchemaNode):
    items: "Schema" = field(default_factory=AnySchema)
    min_items: int | None = None
    max_items: int | None = None


@dataclass(frozen=True, kw_only=True)
class ObjectSchema(_SchemaNode):
    properties: dict[str, "Schema"] = field(default_factory=dict)
    required: tuple[str, ...] = ()
    exclusive: bool = False


Schema = StringSchema | NumberSchema | BooleanSchema | ArraySchema | ObjectSchema | AnySchema


@dataclass(frozen=True)
class ValidationResult:
    valid: bool
    errors: list[str]
    coerced: Any = None


# ─── Compilation ─────────────────────────────────────────────────

def compile_schema(raw: dict[str, Any], path: str = "") -> Schema:
    """Compile a JSON-Schema-like dict into a Schema tree."""
    if not isinstance(raw, dict):
        raise SchemaDefinitionError(f"{path or 'schema'}: schema must be an object")

    kind = raw.get("type")
    if kind is None:
        kind = "object" if "properties" in raw else "any"

    common = {
        "description": raw.get("description"),
        "default": copy.deepcopy(raw.get("default")),
        "has_default": "default" in raw,
    }

    match kind:
        case "string":
            return _compile_string(raw, path, common)
        case "number" | "integer":
            return NumberSchema(
                integer=kind == "integer",
                minimum=raw.get("minimum"),
                maximum=raw.get("maximum"),
                **common,
            )
        case "boolean":
            return BooleanSchema(**common)
        case "array":
            items = raw.get("items")
            return ArraySchema(
                items=compile_schema(items, _join(path, "items")) if items else AnySchema(),
                min_items=raw.get("minItems"),
                max_items=raw.get("maxItems"),
                **common,
            )
        case "object":
            return _compile_object(raw, path, common)
        case "any":
            return AnySchema(**common)
        case _:
            raise SchemaDefinitionError(
                f"{path or 'schema'}: unsupported schema type '{kind}'",
            )


def _compile_string(raw: dict, path: str, common: dict) -> StringSchema:
    pattern = None
    if raw.get("pattern") is not None:
        try:
            pattern = re.compile(raw["pattern"])
        except re.error as exc:
            raise SchemaDefinitionError(
                f"{path or 'schema'}: invalid pattern '{raw['pattern']}': {exc}",
            ) from exc
    enum = raw.get("enum")
    return StringSchema(
        min_length=raw.get("minLength"),
        max_length=raw.get("maxLength"),
        pattern=pattern,
        enum=tuple(enum) if enum is not None else None,
        **common,
    )


def _compile_object(raw: dict, path: str, common: dict) -> ObjectSchema:
    properties = {
        name: compile_schema(sub, _join(path, name))
        for name, sub in (raw.get("properties") or {}).items()
    }
    required = tuple(raw.get("required") or ())
    for name in required:
        if name not in properties:
            raise SchemaDefinitionError(
                f"{path or 'schema'}: required property '{name}' "
                f"is not declared in properties",
            )
    return ObjectSchema(
        properties=properties,
        required=required,
        exclusive=raw.get("additionalProperties") is False,
        **common,
    )


# ─── Validation ──────────────────────────────────────────────────

def validate(schema: Schema, value: Any) -> ValidationResult:
    """Validate `value` against `schema`, collecting every violation."""
    errors: list[str] = []
    coerced = _check(schema, value, "", errors)
    return ValidationResult(
        valid=not errors,
        errors=errors,
        coerced=coerced if not errors else None,
    )


def _check(schema: Schema, value: Any, path: str, errors: list[str]) -> Any:
    match schema:
        case ObjectSchema():
            return _check_object(schema, value, path, errors)
        case ArraySchema():
            return _check_array(schema, value, path, errors)
        case StringSchema():
            _check_string(schema, value, path, errors)
        case NumberSchema():
            _check_number(schema, value, path, errors)
            if schema.integer and _is_whole_float(value):
                return int(value)
        case BooleanSchema():
            if not isinstance(value, bool):
                _fail(errors, path, f"Expected boolean, received {_kind_of(value)}")
        case AnySchema():
            pass
    return copy.deepcopy(value)


def _check_object(
    schema: ObjectSchema, value: Any, path: str, errors: list[str],
) -> Any:
    if not isinstance(value, dict):
        _fail(errors, path, f"Expected object, received {_kind_of(value)}")
        return copy.deepcopy(value)

    coerced: dict[str, Any] = {}
    for key, item in value.items():
        sub = schema.properties.get(key)
        if sub is not None:
            coerced[key] = _check(sub, item, _join(path, key), errors)
        elif schema.exclusive:
            _fail(errors, path, f"Unrecognized key '{key}'")
        else:
            coerced[key] = copy.deepcopy(item)

    for key, sub in schema.properties.items():
        if key in value:
            continue
        if key in schema.required:
            _fail(errors, _join(path, key), "Required")
        elif sub.has_default:
            coerced[key] = copy.deepcopy(sub.default)
    return coerced


def _check_array(
    schema: ArraySchema, value: Any, path: str, errors: list[str],
) -> Any:
    if not isinstance(value, list):
        _fail(errors, path, f"Expected array, received {_kind_of(value)}")
        return copy.deepcopy(value)
    if schema.min_items is not None and len(value) < schema.min_items:
        _fail(errors, path, f"Array must contain at least {schema.min_items} element(s)")
    if schema.max_items is not None and len(value) > schema.max_items:
        _fail(errors, path, f"Array must contain at most {schema.max_items} element(s)")
    return [
        _check(schema.items, item, _join(path, str(index)), errors)
        for index, item in enumerate(value)
    ]


def _check_string(
    schema: StringSchema, value: Any, path: str, errors: list[str],
) -> None:
    if not isinstance(value, str):
        _fail(errors, path, f"Expected string, received {_kind_of(value)}")
        return
    if schema.enum is not None:
        if value not in schema.enum:
            expected = " | ".join(f"'{option}'" for option in schema.enum)
            _fail(
                errors, path,
                f"Invalid enum value. Expected {expected}, received '{value}'",
            )
        return
    if schema.min_length is not None and len(value) < schema.min_length:
        _fail(errors, path, f"String must contain at least {schema.min_length} character(s)")
    if schema.max_length is not None and len(value) > schema.max_length:
        _fail(errors, path, f"String must contain at most {schema.max_length} character(s)")
    if schema.pattern is not None and not schema.pattern.search(value):
        _fail(errors, path, f"String does not match pattern {schema.pattern.pattern}")


def _check_number(
    schema: NumberSchema, value: Any, path: str, errors: list[str],
) -> None:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        expected = "integer" if schema.integer else "number"
        _fail(errors, path, f"Expected {expected}, received {_kind_of(value)}")
        return
    if isinstance(value, float) and not math.isfinite(value):
        _fail(errors, path, "Number must be finite")
        return
    if schema.integer and isinstance(value, float) and not value.is_integer():
        _fail(errors, path, "Expected integer, received float")
    if schema.minimum is not None and value < schema.minimum:
        _fail(errors, path, f"Number must be greater than or equal to {schema.minimum}")
    if schema.maximum is not None and value > schema.maximum:
        _fail(errors, path, f"Number must be less than or equal to {schema.maximum}")


def _is_whole_float(value: Any) -> bool:
    return isinstance(value, float) and math.isfinite(value) and value.is_integer()


def _fail(errors: list[str], path: str, message: str) -> None:
    errors.append(f"{path or 'value'}: {message}")


def _join(path: str, key: str) -> str:
    return f"{path}.{key}" if path else key


def _kind_of(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "array"
    if isinstance(value, dict):
        return "object"
    return type(value).__name__
