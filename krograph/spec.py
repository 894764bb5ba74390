"""OpenAPI schema model and conversion from CRD-style JSON schema props."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any


@dataclass
class AdditionalProperties:
    """Either a flag allowing any extra properties or a schema for them."""

    allows: bool = False
    schema: Schema | None = None


@dataclass
class Schema:
    """An OpenAPI schema node."""

    type: list[str] = field(default_factory=list)
    id: str = ""
    schema_url: str = ""
    title: str = ""
    description: str = ""
    default: Any = None
    format: str = ""
    maximum: float | None = None
    exclusive_maximum: bool = False
    minimum: float | None = None
    exclusive_minimum: bool = False
    max_length: int | None = None
    min_length: int | None = None
    pattern: str = ""
    max_items: int | None = None
    min_items: int | None = None
    unique_items: bool = False
    multiple_of: float | None = None
    max_properties: int | None = None
    min_properties: int | None = None
    required: list[str] = field(default_factory=list)
    nullable: bool = False
    external_docs: dict[str, str] | None = None
    extensions: dict[str, Any] = field(default_factory=dict)
    items: Schema | None = None
    item_schemas: list[Schema] = field(default_factory=list)
    all_of: list[Schema] = field(default_factory=list)
    one_of: list[Schema] = field(default_factory=list)
    any_of: list[Schema] = field(default_factory=list)
    not_: Schema | None = None
    properties: dict[str, Schema] | None = None
    additional_properties: AdditionalProperties | None = None


_SCALAR_KEYS = {
    "id": "id",
    "$schema": "schema_url",
    "title": "title",
    "description": "description",
    "default": "default",
    "format": "format",
    "maximum": "maximum",
    "exclusiveMaximum": "exclusive_maximum",
    "minimum": "minimum",
    "exclusiveMinimum": "exclusive_minimum",
    "maxLength": "max_length",
    "minLength": "min_length",
    "pattern": "pattern",
    "maxItems": "max_items",
    "minItems": "min_items",
    "uniqueItems": "unique_items",
    "multipleOf": "multiple_of",
    "maxProperties": "max_properties",
    "minProperties": "min_properties",
    "nullable": "nullable",
}

_COMPOSITIONS = (("allOf", "all_of"), ("oneOf", "one_of"), ("anyOf", "any_of"))


def convert_json_schema_props(props: Mapping[str, Any] | None) -> Schema | None:
    """Convert a CRD JSON schema mapping into a :class:`Schema`.

    Vendor extensions are not carried over.
    """
    if props is None:
        return None
    if not isinstance(props, Mapping):
        raise TypeError(f"schema props must be a mapping, got {type(props).__name__}")

    kwargs = {attr: props[key] for key, attr in _SCALAR_KEYS.items() if key in props}
    schema = Schema(type=[props.get("type", "")], **kwargs)
    schema.required = list(props.get("required") or [])

    docs = props.get("externalDocs")
    if docs is not None:
        schema.external_docs = {k: docs[k] for k in ("url", "description") if docs.get(k)}

    items = props.get("items")
    if isinstance(items, Mapping):
        try:
            schema.items = convert_json_schema_props(items)
        except TypeError as exc:
            raise TypeError(f"error converting items schema: {exc}") from exc
    elif items:
        converted = []
        for index, item in enumerate(items):
            try:
                converted.append(convert_json_schema_props(item))
            except TypeError as exc:
                raise TypeError(f"error converting item schema at index {index}: {exc}") from exc
        schema.item_schemas = converted

    for key, attr in _COMPOSITIONS:
        members = props.get(key)
        if members is None:
            continue
        converted = []
        for index, member in enumerate(members):
            try:
                converted.append(convert_json_schema_props(member))
            except TypeError as exc:
                raise TypeError(f"error converting {key} schema at index {index}: {exc}") from exc
        setattr(schema, attr, converted)

    if props.get("not") is not None:
        try:
            schema.not_ = convert_json_schema_props(props["not"])
        except TypeError as exc:
            raise TypeError(f"error converting not schema: {exc}") from exc

    properties = props.get("properties")
    if properties is not None:
        converted_props = {}
        for name, value in properties.items():
            try:
                converted_props[name] = convert_json_schema_props(value)
            except TypeError as exc:
                raise TypeError(f"error converting property '{name}': {exc}") from exc
        schema.properties = converted_props

    extra = props.get("additionalProperties")
    if extra is not None:
        if isinstance(extra, bool):
            schema.additional_properties = AdditionalProperties(allows=extra)
        elif isinstance(extra, Mapping):
            try:
                extra_schema = convert_json_schema_props(extra)
            except TypeError as exc:
                raise TypeError(f"error converting additionalProperties schema: {exc}") from exc
            schema.additional_properties = AdditionalProperties(schema=extra_schema)
        else:
            raise TypeError("additionalProperties must be a boolean or a mapping")

    return schema


def top_level_field_names(schema: Schema | None) -> list[str]:
    """Sorted top-level property names, without apiVersion and kind."""
    if schema is None or schema.properties is None:
        return []
    return sorted(name for name in schema.properties if name not in ("apiVersion", "kind"))