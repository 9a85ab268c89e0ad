# core/schema.py
"""
Argument validation against a tool's declared parameter schema.

The schema is the JSON-Schema subset the tools declare: object, array,
string, number, integer and boolean nodes, plus bare enum nodes. Validation
walks the schema in declaration order and stops at the first violation. No
coercion is attempted: "3" is not a number.
"""

from __future__ import annotations

import copy
import math
import re
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple


class SchemaError(Exception):
    def __init__(self, path: str, message: str) -> None:
        super().__init__(f"{path}: {message}")
        self.path = path


@dataclass(frozen=True)
class ValidationFailure:
    messages: Tuple[str, ...]

    def __post_init__(self) -> None:
        if not self.messages:
            raise ValueError("a validation failure needs at least one message")

    def joined(self) -> str:
        return "; ".join(self.messages)


@dataclass(frozen=True)
class ValidationResult:
    arguments: Dict[str, Any] = field(default_factory=dict)
    failure: Optional[ValidationFailure] = None

    @property
    def ok(self) -> bool:
        return self.failure is None


def _assert(cond: bool, path: str, msg: str) -> None:
    if not cond:
        raise SchemaError(path, msg)


def json_type(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, (list, tuple)):
        return "array"
    if isinstance(value, dict):
        return "object"
    return type(value).__name__


def _child(path: str, key: str) -> str:
    return f"{path}.{key}" if path else key


def _check_enum(schema: Dict[str, Any], value: Any, path: str) -> None:
    allowed = schema.get("enum")
    if allowed is None:
        return
    # bool == int in Python; compare the JSON type too so True never matches 1.
    hit = any(value == a and json_type(value) == json_type(a) for a in allowed)
    _assert(hit, path, f"must be one of {list(allowed)}, got {value!r}")


def _validate_object(schema: Dict[str, Any], value: Any, path: str) -> Dict[str, Any]:
    _assert(isinstance(value, dict), path or "arguments", f"expected object, got {json_type(value)}")

    props: Dict[str, Any] = schema.get("properties") or {}
    required = list(schema.get("required") or [])
    out: Dict[str, Any] = {}

    for key, sub in props.items():
        where = _child(path, key)
        if key in value:
            out[key] = _validate_node(sub, value[key], where)
        elif key in required:
            raise SchemaError(where, "is required")
        elif isinstance(sub, dict) and "default" in sub:
            out[key] = copy.deepcopy(sub["default"])

    for key in required:
        if key not in props:
            _assert(key in value, _child(path, key), "is required")

    extra = [k for k in value if k not in props]
    if schema.get("additionalProperties") is False:
        _assert(not extra, _child(path, str(extra[0])) if extra else path, "unexpected property")
    else:
        extra_schema = schema.get("additionalProperties")
        for key in extra:
            if isinstance(extra_schema, dict):
                out[key] = _validate_node(extra_schema, value[key], _child(path, key))
            else:
                out[key] = value[key]

    return out


def _validate_array(schema: Dict[str, Any], value: Any, path: str) -> list:
    _assert(isinstance(value, (list, tuple)), path, f"expected array, got {json_type(value)}")

    items_schema = schema.get("items")
    out = []
    for i, item in enumerate(value):
        where = f"{path}[{i}]"
        out.append(_validate_node(items_schema, item, where) if items_schema else item)

    if "minItems" in schema:
        _assert(len(out) >= schema["minItems"], path, f"must have at least {schema['minItems']} items")
    if "maxItems" in schema:
        _assert(len(out) <= schema["maxItems"], path, f"must have at most {schema['maxItems']} items")
    if schema.get("uniqueItems"):
        seen = []
        for item in out:
            _assert(item not in seen, path, f"items must be unique, duplicate {item!r}")
            seen.append(item)
    return out


def _validate_string(schema: Dict[str, Any], value: Any, path: str) -> str:
    _assert(isinstance(value, str), path, f"expected string, got {json_type(value)}")
    _check_enum(schema, value, path)

    if "minLength" in schema:
        _assert(len(value) >= schema["minLength"], path, f"must be at least {schema['minLength']} characters")
    if "maxLength" in schema:
        _assert(len(value) <= schema["maxLength"], path, f"must be at most {schema['maxLength']} characters")
    if "pattern" in schema:
        _assert(re.search(schema["pattern"], value) is not None, path, f"must match pattern {schema['pattern']!r}")
    return value


def _validate_number(schema: Dict[str, Any], value: Any, path: str, integer: bool) -> Any:
    expected = "integer" if integer else "number"
    _assert(
        isinstance(value, (int, float)) and not isinstance(value, bool),
        path,
        f"expected {expected}, got {json_type(value)}",
    )
    # ints are arbitrary precision; only floats can be inf/nan
    if isinstance(value, float):
        _assert(math.isfinite(value), path, f"expected {expected}, got {value!r}")
    if integer:
        _assert(isinstance(value, int) or value.is_integer(), path, f"expected integer, got {value!r}")
        value = int(value)
    _check_enum(schema, value, path)

    if "minimum" in schema:
        _assert(value >= schema["minimum"], path, f"must be >= {schema['minimum']}")
    if "maximum" in schema:
        _assert(value <= schema["maximum"], path, f"must be <= {schema['maximum']}")
    if "exclusiveMinimum" in schema:
        _assert(value > schema["exclusiveMinimum"], path, f"must be > {schema['exclusiveMinimum']}")
    if "exclusiveMaximum" in schema:
        _assert(value < schema["exclusiveMaximum"], path, f"must be < {schema['exclusiveMaximum']}")
    if "multipleOf" in schema:
        step = schema["multipleOf"]
        if isinstance(value, int) and isinstance(step, int):
            _assert(value % step == 0, path, f"must be a multiple of {step}")
        else:
            try:
                ratio = value / step
            except OverflowError:
                raise SchemaError(path, f"is too large to check against multipleOf {step}")
            _assert(abs(ratio - round(ratio)) < 1e-9, path, f"must be a multiple of {step}")
    return value


def _validate_node(schema: Dict[str, Any], value: Any, path: str) -> Any:
    kind = schema.get("type")

    if kind == "object":
        return _validate_object(schema, value, path)
    if kind == "array":
        return _validate_array(schema, value, path)
    if kind == "string":
        return _validate_string(schema, value, path)
    if kind in ("number", "integer"):
        return _validate_number(schema, value, path, integer=(kind == "integer"))
    if kind == "boolean":
        _assert(isinstance(value, bool), path, f"expected boolean, got {json_type(value)}")
        _check_enum(schema, value, path)
        return value
    if kind is None:
        # bare enum node, or an unconstrained value
        _check_enum(schema, value, path)
        return copy.deepcopy(value)

    raise SchemaError(path or "schema", f"unsupported schema type {kind!r}")


def validate(schema: Dict[str, Any], raw: Any) -> ValidationResult:
    """
    Check raw tool arguments against a parameter schema.

    Returns a ValidationResult holding either the cleaned arguments (with
    schema defaults filled in) or a ValidationFailure whose messages name
    the offending field path.
    """
    try:
        cleaned = _validate_node(schema, raw, "")
    except SchemaError as e:
        return ValidationResult(failure=ValidationFailure(messages=(str(e),)))

    if not isinstance(cleaned, dict):
        return ValidationResult(
            failure=ValidationFailure(messages=(f"arguments: expected object, got {json_type(cleaned)}",))
        )
    return ValidationResult(arguments=cleaned)
