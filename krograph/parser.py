"""Discovery of expression-bearing fields in resources."""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any

from krograph.expressions import extract_expressions, is_standalone_expression
from krograph.spec import Schema
from krograph.variable import FieldDescriptor

PRESERVE_UNKNOWN_FIELDS = "x-kubernetes-preserve-unknown-fields"


class ParseError(ValueError):
    """Raised when a resource does not match its schema."""


def parse_resource(resource: Any, schema: Schema | None, path: str = "") -> list[FieldDescriptor]:
    """Find every field holding expressions, checking values against ``schema``.

    Each descriptor carries the type the schema expects at its path; for
    standalone expressions it also carries that schema.
    """
    schema = _validated(schema, path)
    expected_type = _expected_type(schema)

    if isinstance(resource, Mapping):
        return _parse_object(resource, schema, path, expected_type)
    if isinstance(resource, (list, tuple)):
        return _parse_array(resource, schema, path, expected_type)
    if isinstance(resource, str):
        return _parse_string(resource, schema, path, expected_type)
    if resource is None:
        return []
    return _parse_scalar(resource, path, expected_type)


def _validated(schema: Schema | None, path: str) -> Schema:
    if schema is None:
        raise ParseError(f"schema is nil for path {path}")
    if len(schema.type) != 1:
        if schema.one_of:
            schema.type = [schema.one_of[0].type[0]]
        else:
            shown = "[" + " ".join(schema.type) + "]"
            raise ParseError(f"found schema type that is not a single type: {shown}")
    return schema


def _allows_additional(schema: Schema) -> bool:
    return schema.additional_properties is not None and schema.additional_properties.allows


def _expected_type(schema: Schema) -> str:
    if schema.type[0]:
        return schema.type[0]
    if _allows_additional(schema):
        return "any"
    return ""


def _parse_object(
    obj: Mapping[str, Any], schema: Schema, path: str, expected_type: str
) -> list[FieldDescriptor]:
    if expected_type != "object" and not _allows_additional(schema):
        raise ParseError(
            f"expected object type or AdditionalProperties allowed for path {path}, got {obj}"
        )
    if schema.extensions.get(PRESERVE_UNKNOWN_FIELDS) is True:
        return []

    found: list[FieldDescriptor] = []
    for name, value in obj.items():
        try:
            field_schema = _field_schema(schema, name)
        except ParseError as exc:
            raise ParseError(
                f"error getting field schema for path {path + '.' + name}: {exc}"
            ) from exc
        found.extend(parse_resource(value, field_schema, join_path_and_field_name(path, name)))
    return found


def _parse_array(
    items: list[Any] | tuple[Any, ...], schema: Schema, path: str, expected_type: str
) -> list[FieldDescriptor]:
    if expected_type != "array":
        raise ParseError(f"expected array type for path {path}, got {list(items)}")
    if schema.items is None:
        raise ParseError(
            f"invalid array schema for path {path}: "
            "neither Items.Schema nor Properties are defined"
        )
    found: list[FieldDescriptor] = []
    for index, item in enumerate(items):
        found.extend(parse_resource(item, schema.items, f"{path}[{index}]"))
    return found


def _parse_string(text: str, schema: Schema, path: str, expected_type: str) -> list[FieldDescriptor]:
    if is_standalone_expression(text):
        return [
            FieldDescriptor(
                path=path,
                expressions=[text.strip("${}")],
                expected_type=expected_type,
                expected_schema=schema,
                standalone_expression=True,
            )
        ]
    if expected_type not in ("string", "any"):
        raise ParseError(
            f"expected string type or AdditionalProperties for path {path}, got {text}"
        )
    expressions = extract_expressions(text)
    if expressions:
        return [FieldDescriptor(path=path, expressions=expressions, expected_type=expected_type)]
    return []


def _parse_scalar(value: Any, path: str, expected_type: str) -> list[FieldDescriptor]:
    if expected_type == "any":
        return []
    type_name = type(value).__name__
    if expected_type == "number":
        if not isinstance(value, float):
            raise ParseError(f"expected number type for path {path}, got {type_name}")
    elif expected_type == "integer":
        if isinstance(value, bool) or not isinstance(value, int):
            raise ParseError(f"expected integer type for path {path}, got {type_name}")
    elif expected_type == "boolean":
        if not isinstance(value, bool):
            raise ParseError(f"expected boolean type for path {path}, got {type_name}")
    else:
        raise ParseError(f"unexpected type for path {path}: {type_name}")
    return []


def _field_schema(schema: Schema, name: str) -> Schema:
    if schema.properties is not None and name in schema.properties:
        return schema.properties[name]
    extra = schema.additional_properties
    if extra is not None:
        if extra.schema is not None:
            return extra.schema
        if extra.allows:
            return Schema()
    raise ParseError(f"schema not found for field {name}")


def parse_schemaless_resource(resource: Mapping[str, Any]) -> list[FieldDescriptor]:
    """Find every field holding expressions without a schema; types are ``any``."""
    return list(_walk_schemaless(resource, ""))


def _walk_schemaless(value: Any, path: str):
    if isinstance(value, Mapping):
        for name, item in value.items():
            yield from _walk_schemaless(item, join_path_and_field_name(path, name))
    elif isinstance(value, (list, tuple)):
        for index, item in enumerate(value):
            yield from _walk_schemaless(item, f"{path}[{index}]")
    elif isinstance(value, str):
        if is_standalone_expression(value):
            yield FieldDescriptor(
                path=path,
                expressions=[value.strip("${}")],
                expected_type="any",
                standalone_expression=True,
            )
        else:
            expressions = extract_expressions(value)
            if expressions:
                yield FieldDescriptor(path=path, expressions=expressions, expected_type="any")


def join_path_and_field_name(path: str, field_name: str) -> str:
    """Append a field to a path, bracket-quoting names that are empty or dotted."""
    if field_name == "" or "." in field_name:
        return f"{path}[{json.dumps(field_name, ensure_ascii=False)}]"
    if path == "":
        return field_name
    return f"{path}.{field_name}"