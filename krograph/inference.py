"""Inference of JSON schema props from evaluated values."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any


class UnsupportedTypeError(TypeError):
    """Raised when no schema can be inferred for a value."""


def infer_schema(value: Any) -> dict[str, Any]:
    """Infer CRD-style JSON schema props from a plain Python value.

    Arrays take the item schema of their first element; objects get a
    schema for every property.
    """
    if value is None:
        raise UnsupportedTypeError("value is nil")
    return _infer(value)


def _infer(value: Any) -> dict[str, Any]:
    if isinstance(value, bool):
        return {"type": "boolean"}
    if isinstance(value, int):
        return {"type": "integer"}
    if isinstance(value, float):
        return {"type": "number"}
    if isinstance(value, str):
        return {"type": "string"}
    if isinstance(value, (list, tuple)):
        return _infer_array(value)
    if isinstance(value, Mapping):
        return _infer_object(value)
    raise UnsupportedTypeError(f"unsupported type: {type(value).__name__}")


def _infer_array(values: list[Any] | tuple[Any, ...]) -> dict[str, Any]:
    schema: dict[str, Any] = {"type": "array"}
    if values:
        try:
            schema["items"] = _infer(values[0])
        except UnsupportedTypeError as exc:
            raise UnsupportedTypeError(f"failed to infer schema for array item: {exc}") from exc
    return schema


def _infer_object(obj: Mapping[Any, Any]) -> dict[str, Any]:
    properties: dict[str, Any] = {}
    for key, value in obj.items():
        if not isinstance(key, str):
            raise UnsupportedTypeError(f"unsupported property name type: {type(key).__name__}")
        try:
            properties[key] = _infer(value)
        except UnsupportedTypeError as exc:
            raise UnsupportedTypeError(
                f"failed to infer schema for property {key}: {exc}"
            ) from exc
    return {"type": "object", "properties": properties}