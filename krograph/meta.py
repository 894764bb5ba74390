"""Group/version/kind helpers, owner references, label keys and selectors."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

KRO_DOMAIN = "kro.run"
KRO_INSTANCES_GROUP_SUFFIX = KRO_DOMAIN
KRO_API_VERSION = f"{KRO_DOMAIN}/v1alpha1"

LABEL_PREFIX = KRO_DOMAIN + "/"

NODE_ID_LABEL = LABEL_PREFIX + "node-id"

OWNED_LABEL = LABEL_PREFIX + "owned"
KRO_VERSION_LABEL = LABEL_PREFIX + "kro-version"
CONTROLLER_POD_ID_LABEL = LABEL_PREFIX + "controller-pod-id"

INSTANCE_ID_LABEL = LABEL_PREFIX + "instance-id"
INSTANCE_LABEL = LABEL_PREFIX + "instance-name"
INSTANCE_NAMESPACE_LABEL = LABEL_PREFIX + "instance-namespace"

RESOURCE_GROUP_ID_LABEL = LABEL_PREFIX + "resource-group-id"
RESOURCE_GROUP_NAME_LABEL = LABEL_PREFIX + "resource-group-name"
RESOURCE_GROUP_NAMESPACE_LABEL = LABEL_PREFIX + "resource-group-namespace"
RESOURCE_GROUP_VERSION_LABEL = LABEL_PREFIX + "resource-group-version"

RESOURCE_GROUP_OWNER_KIND = "ResourceGroup"
RESOURCE_GROUP_OWNER_API_VERSION = KRO_API_VERSION


class GroupVersionError(ValueError):
    """Raised when a group, version or kind cannot be read from an object."""


@dataclass
class ObjectMeta:
    """The metadata of an object: identity, labels and finalizers."""

    name: str = ""
    namespace: str = ""
    uid: str = ""
    labels: dict[str, str] | None = field(default_factory=dict)
    finalizers: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class GroupVersionKind:
    group: str = ""
    version: str = ""
    kind: str = ""

    def api_version(self) -> str:
        """The ``group/version`` string, or just the version for the core group."""
        if self.group:
            return f"{self.group}/{self.version}"
        return self.version


@dataclass(frozen=True)
class GroupVersionResource:
    group: str = ""
    version: str = ""
    resource: str = ""


@dataclass(frozen=True)
class OwnerReference:
    name: str
    kind: str
    api_version: str
    controller: bool
    uid: str


@dataclass
class LabelSelector:
    match_labels: dict[str, str] = field(default_factory=dict)


def extract_gvk(obj: Mapping[str, Any]) -> GroupVersionKind:
    """Read the group, version and kind of an unstructured object."""
    kind = obj.get("kind")
    if not isinstance(kind, str):
        raise GroupVersionError("kind not found or not a string")
    api_version = obj.get("apiVersion")
    if not isinstance(api_version, str):
        raise GroupVersionError("apiVersion not found or not a string")

    parts = api_version.split("/")
    if len(parts) > 2:
        raise GroupVersionError(f"invalid apiVersion format: {api_version}")
    if len(parts) == 2:
        group, version = parts
    else:
        group, version = "", parts[0]
    return GroupVersionKind(group=group, version=version, kind=kind)


def instance_gvk(api_version: str, kind: str) -> GroupVersionKind:
    """The kind of the instances a resource group defines."""
    return GroupVersionKind(group=KRO_INSTANCES_GROUP_SUFFIX, version=api_version, kind=kind)


def instance_gvr(api_version: str, kind: str) -> GroupVersionResource:
    """The resource of the instances a resource group defines."""
    plural = pluralize(kind.lower())
    return GroupVersionResource(
        group=f"{plural}.{KRO_INSTANCES_GROUP_SUFFIX}",
        version=api_version,
        resource=plural,
    )


def gvr_to_gvk(gvr: GroupVersionResource) -> GroupVersionKind:
    return GroupVersionKind(group=gvr.group, version=gvr.version, kind=singularize(gvr.resource))


def gvk_to_gvr(gvk: GroupVersionKind) -> GroupVersionResource:
    return GroupVersionResource(
        group=gvk.group, version=gvk.version, resource=pluralize(gvk.kind).lower()
    )


_IRREGULAR = {
    "person": "people",
    "man": "men",
    "woman": "women",
    "child": "children",
    "mouse": "mice",
    "goose": "geese",
    "foot": "feet",
    "tooth": "teeth",
    "ox": "oxen",
}
_IRREGULAR_PLURALS = {plural: singular for singular, plural in _IRREGULAR.items()}
_UNCOUNTABLE = {
    "equipment",
    "information",
    "rice",
    "money",
    "species",
    "series",
    "fish",
    "sheep",
    "deer",
    "news",
    "metadata",
}
_VOWELS = "aeiou"


def _match_case(template: str, replacement: str) -> str:
    if len(template) > 1 and template.isupper():
        return replacement.upper()
    if template[:1].isupper():
        return replacement[:1].upper() + replacement[1:]
    return replacement


def _replace_suffix(word: str, strip: int, add: str) -> str:
    if word.isupper():
        add = add.upper()
    return word[: len(word) - strip] + add


def pluralize(word: str) -> str:
    """English plural of ``word``, keeping its capitalisation."""
    if not word:
        return word
    lower = word.lower()
    if lower in _UNCOUNTABLE or lower in _IRREGULAR_PLURALS:
        return word
    if lower in _IRREGULAR:
        return _match_case(word, _IRREGULAR[lower])
    if lower.endswith("y") and len(lower) > 1 and lower[-2] not in _VOWELS:
        return _replace_suffix(word, 1, "ies")
    if lower.endswith("ife"):
        return _replace_suffix(word, 2, "ves")
    if lower.endswith("is") and len(lower) > 2:
        return _replace_suffix(word, 2, "es")
    if lower.endswith(("ss", "us", "x", "z", "ch", "sh")):
        return _replace_suffix(word, 0, "es")
    if lower.endswith("s"):
        return word
    return _replace_suffix(word, 0, "s")


def singularize(word: str) -> str:
    """English singular of ``word``, keeping its capitalisation."""
    if not word:
        return word
    lower = word.lower()
    if lower in _UNCOUNTABLE or lower in _IRREGULAR:
        return word
    if lower in _IRREGULAR_PLURALS:
        return _match_case(word, _IRREGULAR_PLURALS[lower])
    if lower.endswith("ies") and len(lower) > 3:
        return _replace_suffix(word, 3, "y")
    if lower.endswith("ives"):
        return _replace_suffix(word, 3, "fe")
    if lower.endswith(("sses", "uses", "xes", "zes", "ches", "shes")):
        return _replace_suffix(word, 2, "")
    if lower.endswith(("ss", "us", "is")):
        return word
    if lower.endswith("s"):
        return _replace_suffix(word, 1, "")
    return word


def resource_group_owner_reference(name: str, uid: str) -> OwnerReference:
    """Owner reference stamped on the CRD and instances of a resource group."""
    return OwnerReference(
        name=name,
        kind=RESOURCE_GROUP_OWNER_KIND,
        api_version=RESOURCE_GROUP_OWNER_API_VERSION,
        controller=False,
        uid=uid,
    )


def instance_owner_reference(gvk: GroupVersionKind, name: str, uid: str) -> OwnerReference:
    """Owner reference stamped on the child resources of an instance."""
    return OwnerReference(
        name=name,
        kind=gvk.kind,
        api_version=gvk.api_version(),
        controller=True,
        uid=uid,
    )


def instance_selector(instance: ObjectMeta) -> LabelSelector:
    return LabelSelector(match_labels={INSTANCE_ID_LABEL: instance.uid})


def resource_group_selector(resource_group: ObjectMeta) -> LabelSelector:
    return LabelSelector(match_labels={RESOURCE_GROUP_ID_LABEL: resource_group.uid})


def instance_and_resource_group_selector(
    instance: ObjectMeta, resource_group: ObjectMeta
) -> LabelSelector:
    return LabelSelector(
        match_labels={
            INSTANCE_ID_LABEL: instance.uid,
            RESOURCE_GROUP_ID_LABEL: resource_group.uid,
        }
    )


def node_instance_resource_group_selector(
    node: ObjectMeta, instance: ObjectMeta, resource_group: ObjectMeta
) -> LabelSelector:
    return LabelSelector(
        match_labels={
            NODE_ID_LABEL: node.name,
            INSTANCE_ID_LABEL: instance.uid,
            RESOURCE_GROUP_ID_LABEL: resource_group.uid,
        }
    )