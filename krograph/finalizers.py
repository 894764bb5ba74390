"""Finalizers placed on resource groups, instances and their resources."""

from __future__ import annotations

from collections.abc import MutableMapping
from typing import Any

from krograph.meta import KRO_DOMAIN, ObjectMeta

KRO_FINALIZER = KRO_DOMAIN + "/finalizer"


class FinalizerError(ValueError):
    """Raised when the finalizers of an unstructured object are malformed."""


def instance_finalizer_name(uid: str) -> str:
    """The finalizer name tied to one instance."""
    return f"{uid}.{KRO_FINALIZER}"


def set_resource_group_finalizer(obj: ObjectMeta) -> None:
    if not has_resource_group_finalizer(obj):
        obj.finalizers = [*obj.finalizers, KRO_FINALIZER]


def remove_resource_group_finalizer(obj: ObjectMeta) -> None:
    obj.finalizers = [f for f in obj.finalizers if f != KRO_FINALIZER]


def has_resource_group_finalizer(obj: ObjectMeta) -> bool:
    return KRO_FINALIZER in obj.finalizers


def set_instance_finalizer(obj: ObjectMeta, uid: str) -> None:
    if not has_instance_finalizer(obj, uid):
        obj.finalizers = [*obj.finalizers, instance_finalizer_name(uid)]


def remove_instance_finalizer(obj: ObjectMeta, uid: str) -> None:
    name = instance_finalizer_name(uid)
    obj.finalizers = [f for f in obj.finalizers if f != name]


def has_instance_finalizer(obj: ObjectMeta, uid: str) -> bool:
    return instance_finalizer_name(uid) in obj.finalizers


def _get_finalizers(obj: MutableMapping[str, Any]) -> list[str] | None:
    """The ``metadata.finalizers`` list, or None when it is absent."""
    metadata = obj.get("metadata")
    if metadata is None:
        return None
    if not isinstance(metadata, MutableMapping):
        raise FinalizerError(
            "error getting finalizers: .metadata accessor error: "
            f"{metadata!r} is of the type {type(metadata).__name__}, expected map"
        )
    if "finalizers" not in metadata:
        return None
    finalizers = metadata["finalizers"]
    if not isinstance(finalizers, list):
        raise FinalizerError(
            "error getting finalizers: .metadata.finalizers accessor error: "
            f"{finalizers!r} is of the type {type(finalizers).__name__}, expected list"
        )
    for item in finalizers:
        if not isinstance(item, str):
            raise FinalizerError(
                "error getting finalizers: .metadata.finalizers accessor error: "
                f"contains non-string value {item!r}"
            )
    return list(finalizers)


def _set_finalizers(obj: MutableMapping[str, Any], finalizers: list[str]) -> None:
    metadata = obj.setdefault("metadata", {})
    if not isinstance(metadata, MutableMapping):
        raise FinalizerError("error setting finalizers: metadata is not a map")
    metadata["finalizers"] = list(finalizers)


def set_instance_finalizer_unstructured(obj: MutableMapping[str, Any], uid: str) -> None:
    """Add the instance finalizer to an unstructured object if missing."""
    name = instance_finalizer_name(uid)
    finalizers = _get_finalizers(obj)
    if finalizers is None or name not in finalizers:
        _set_finalizers(obj, [*(finalizers or []), name])


def remove_instance_finalizer_unstructured(obj: MutableMapping[str, Any], uid: str) -> None:
    """Remove the instance finalizer from an unstructured object."""
    name = instance_finalizer_name(uid)
    finalizers = _get_finalizers(obj)
    if finalizers is not None:
        _set_finalizers(obj, [f for f in finalizers if f != name])


def has_instance_finalizer_unstructured(obj: MutableMapping[str, Any], uid: str) -> bool:
    """True if the unstructured object carries the instance finalizer."""
    finalizers = _get_finalizers(obj)
    if finalizers is None:
        return False
    return instance_finalizer_name(uid) in finalizers