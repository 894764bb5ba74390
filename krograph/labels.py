"""Labels identifying resources managed by resource groups and instances."""

from __future__ import annotations

from collections.abc import Mapping

from krograph.meta import (
    CONTROLLER_POD_ID_LABEL,
    INSTANCE_ID_LABEL,
    INSTANCE_LABEL,
    INSTANCE_NAMESPACE_LABEL,
    KRO_VERSION_LABEL,
    OWNED_LABEL,
    RESOURCE_GROUP_ID_LABEL,
    RESOURCE_GROUP_NAME_LABEL,
    RESOURCE_GROUP_NAMESPACE_LABEL,
    ObjectMeta,
)


class DuplicateLabelsError(ValueError):
    """Raised when merging labelers that share a key."""


def _set_label(meta: ObjectMeta, key: str, value: str) -> None:
    if meta.labels is None:
        meta.labels = {}
    meta.labels[key] = value


def is_kro_owned(meta: ObjectMeta) -> bool:
    """True if the owned label is present and set to ``"true"``."""
    return (meta.labels or {}).get(OWNED_LABEL) == "true"


def set_kro_owned(meta: ObjectMeta) -> None:
    _set_label(meta, OWNED_LABEL, "true")


def set_kro_unowned(meta: ObjectMeta) -> None:
    _set_label(meta, OWNED_LABEL, "false")


class GenericLabeler(dict):
    """A set of labels that can be applied to objects and merged."""

    def labels(self) -> dict[str, str]:
        return self

    def apply_labels(self, meta: ObjectMeta) -> None:
        """Set every label on ``meta``, overriding existing values."""
        for key, value in self.items():
            _set_label(meta, key, value)

    def merge(self, other: Mapping[str, str]) -> GenericLabeler:
        """A new labeler holding both sets; shared keys raise an error."""
        other_labels = other.labels() if isinstance(other, GenericLabeler) else other
        merged = self.copy()
        for key, value in other_labels.items():
            if key in merged:
                raise DuplicateLabelsError(
                    f"duplicate labels: found key '{key}' in both maps"
                )
            merged[key] = value
        return GenericLabeler(merged)

    def copy(self) -> dict[str, str]:
        """A plain dictionary copy of the labels."""
        return dict(self)


def resource_group_labeler(meta: ObjectMeta) -> GenericLabeler:
    """Labels tying a resource to a resource group."""
    return GenericLabeler(
        {
            RESOURCE_GROUP_ID_LABEL: meta.uid,
            RESOURCE_GROUP_NAME_LABEL: meta.name,
            RESOURCE_GROUP_NAMESPACE_LABEL: meta.namespace,
        }
    )


def instance_labeler(meta: ObjectMeta) -> GenericLabeler:
    """Labels tying a resource to the instance that created it."""
    return GenericLabeler(
        {
            INSTANCE_ID_LABEL: meta.uid,
            INSTANCE_LABEL: meta.name,
            INSTANCE_NAMESPACE_LABEL: meta.namespace,
        }
    )


def kro_meta_labeler(kro_version: str, controller_pod_id: str) -> GenericLabeler:
    """Labels marking ownership, controller version and controller pod."""
    return GenericLabeler(
        {
            OWNED_LABEL: "true",
            KRO_VERSION_LABEL: kro_version,
            CONTROLLER_POD_ID_LABEL: controller_pod_id,
        }
    )