"""Naming conventions and structural checks for resource groups."""

from __future__ import annotations

import re
from collections.abc import Iterable, Mapping
from typing import Any

NAMING_CONVENTION_VIOLATION = "naming convention violation"

_LOWER_CAMEL_CASE = re.compile(r"[a-z][a-zA-Z0-9]*")
_UPPER_CAMEL_CASE = re.compile(r"[A-Z][a-zA-Z0-9]*")
_KUBERNETES_VERSION = re.compile(r"v\d+(?:(?:alpha|beta)\d+)?", re.ASCII)

RESERVED_WORDS = frozenset(
    {
        "apiVersion",
        "context",
        "dependency",
        "dependencies",
        "externalRef",
        "externalReference",
        "externalRefs",
        "externalReferences",
        "graph",
        "instance",
        "kind",
        "metadata",
        "namespace",
        "object",
        "resource",
        "resourcegroup",
        "resources",
        "runtime",
        "serviceAccountName",
        "spec",
        "status",
        "kro",
        "variables",
        "vars",
        "version",
    }
)


class ValidationError(ValueError):
    """Raised when a resource group or one of its objects is invalid."""


def is_valid_resource_id(resource_id: str) -> bool:
    """True if the id is lower camelCase and alphanumeric."""
    return _LOWER_CAMEL_CASE.fullmatch(resource_id) is not None


def is_valid_kind_name(name: str) -> bool:
    """True if the kind is UpperCamelCase and alphanumeric."""
    return _UPPER_CAMEL_CASE.fullmatch(name) is not None


def is_reserved_word(word: str) -> bool:
    """True if the word is reserved; the check is case sensitive."""
    return word in RESERVED_WORDS


def parse_group_version(api_version: str) -> tuple[str, str]:
    """Split an apiVersion into ``(group, version)``.

    A value without a slash is a version of the core group.
    """
    if api_version in ("", "/"):
        return "", ""
    slashes = api_version.count("/")
    if slashes == 0:
        return "", api_version
    if slashes == 1:
        group, version = api_version.split("/")
        return group, version
    raise ValidationError(f"unexpected GroupVersion string: {api_version}")


def validate_naming_conventions(kind: str, resource_ids: Iterable[str]) -> None:
    """Check the kind name and every resource id of a resource group."""
    if not is_valid_kind_name(kind):
        raise ValidationError(
            f"{NAMING_CONVENTION_VIOLATION}: kind '{kind}' is not a valid KRO kind name: "
            "must be UpperCamelCase"
        )
    try:
        validate_resource_ids(resource_ids)
    except ValidationError as exc:
        raise ValidationError(f"{NAMING_CONVENTION_VIOLATION}: {exc}") from exc


def validate_resource_ids(resource_ids: Iterable[str]) -> None:
    """Reject reserved, malformed and duplicate resource ids."""
    seen: set[str] = set()
    for resource_id in resource_ids:
        if is_reserved_word(resource_id):
            raise ValidationError(f"id {resource_id} is a reserved keyword in KRO")
        if not is_valid_resource_id(resource_id):
            raise ValidationError(
                f"id {resource_id} is not a valid KRO resource id: must be lower camelCase"
            )
        if resource_id in seen:
            raise ValidationError(f"found duplicate resource IDs {resource_id}")
        seen.add(resource_id)


def validate_kubernetes_object_structure(obj: Mapping[str, Any]) -> None:
    """Check that an object has a string apiVersion and kind and a map metadata."""
    if "apiVersion" not in obj:
        raise ValidationError("apiVersion field not found")
    api_version = obj["apiVersion"]
    if not isinstance(api_version, str):
        raise ValidationError("apiVersion field is not a string")

    try:
        _, version = parse_group_version(api_version)
    except ValidationError as exc:
        raise ValidationError(
            f"apiVersion field is not a valid Kubernetes group version: {exc}"
        ) from exc
    if version:
        try:
            validate_kubernetes_version(version)
        except ValidationError as exc:
            raise ValidationError(
                f"apiVersion field does not have a valid version: {exc}"
            ) from exc

    if "kind" not in obj:
        raise ValidationError("kind field not found")
    if not isinstance(obj["kind"], str):
        raise ValidationError("kind field is not a string")

    if "metadata" not in obj:
        raise ValidationError("metadata field not found")
    if not isinstance(obj["metadata"], Mapping):
        raise ValidationError("metadata field is not a map")


def validate_kubernetes_version(version: str) -> None:
    """Accept versions such as v1, v1alpha1 and v2beta3."""
    if _KUBERNETES_VERSION.fullmatch(version) is None:
        raise ValidationError(f"version {version} is not a valid Kubernetes version")