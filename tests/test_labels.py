import pytest

from krograph.labels import (
    DuplicateLabelsError,
    GenericLabeler,
    instance_labeler,
    is_kro_owned,
    kro_meta_labeler,
    resource_group_labeler,
    set_kro_owned,
    set_kro_unowned,
)
from krograph.meta import ObjectMeta

OWNED = "kro.run/owned"


@pytest.mark.parametrize(
    "labels, expected",
    [({OWNED: "true"}, True), ({OWNED: "false"}, False), ({}, False)],
)
def test_is_kro_owned(labels, expected):
    assert is_kro_owned(ObjectMeta(labels=labels)) is expected


def test_is_kro_owned_with_no_labels():
    assert is_kro_owned(ObjectMeta(labels=None)) is False


@pytest.mark.parametrize("initial", [{}, {OWNED: "false"}])
def test_set_kro_owned(initial):
    meta = ObjectMeta(labels=dict(initial))
    set_kro_owned(meta)
    assert meta.labels == {OWNED: "true"}


@pytest.mark.parametrize("initial", [{}, {OWNED: "true"}])
def test_set_kro_unowned(initial):
    meta = ObjectMeta(labels=dict(initial))
    set_kro_unowned(meta)
    assert meta.labels == {OWNED: "false"}


def test_set_kro_owned_creates_labels():
    meta = ObjectMeta(labels=None)
    set_kro_owned(meta)
    assert meta.labels == {OWNED: "true"}


@pytest.mark.parametrize(
    "labeler, expected",
    [
        (
            GenericLabeler({"key1": "value1", "key2": "value2"}),
            {"key1": "value1", "key2": "value2"},
        ),
        (
            GenericLabeler({"key2": "newvalue2", "key3": "value3"}),
            {"key1": "value1", "key2": "newvalue2", "key3": "value3"},
        ),
    ],
)
def test_apply_labels(labeler, expected):
    meta = ObjectMeta(labels={"key1": "value1"})
    labeler.apply_labels(meta)
    assert meta.labels == expected


def test_merge_non_overlapping():
    first = GenericLabeler({"key1": "value1", "key2": "value2"})
    second = GenericLabeler({"key3": "value3", "key4": "value4"})
    merged = first.merge(second)
    assert merged == {"key1": "value1", "key2": "value2", "key3": "value3", "key4": "value4"}
    assert isinstance(merged, GenericLabeler)
    assert first == {"key1": "value1", "key2": "value2"}


def test_merge_with_duplicate_keys():
    first = GenericLabeler({"key1": "value1", "key2": "value2"})
    second = GenericLabeler({"key2": "value3", "key3": "value4"})
    with pytest.raises(DuplicateLabelsError, match="duplicate labels"):
        first.merge(second)


def test_copy_is_independent():
    labeler = GenericLabeler({"a": "1"})
    copied = labeler.copy()
    copied["b"] = "2"
    assert labeler == {"a": "1"}
    assert copied == {"a": "1", "b": "2"}


def test_labels_returns_contents():
    assert GenericLabeler({"a": "1"}).labels() == {"a": "1"}


def test_resource_group_labeler():
    meta = ObjectMeta(name="rg", namespace="ns", uid="rg-uid")
    assert resource_group_labeler(meta) == {
        "kro.run/resource-group-id": "rg-uid",
        "kro.run/resource-group-name": "rg",
        "kro.run/resource-group-namespace": "ns",
    }


def test_instance_labeler():
    meta = ObjectMeta(name="inst", namespace="ns", uid="inst-uid")
    assert instance_labeler(meta) == {
        "kro.run/instance-id": "inst-uid",
        "kro.run/instance-name": "inst",
        "kro.run/instance-namespace": "ns",
    }


def test_kro_meta_labeler_merges_with_instance_labeler():
    meta = ObjectMeta(name="inst", namespace="ns", uid="inst-uid")
    merged = kro_meta_labeler("v0.1.0", "pod-1").merge(instance_labeler(meta))
    assert merged[OWNED] == "true"
    assert merged["kro.run/kro-version"] == "v0.1.0"
    assert merged["kro.run/controller-pod-id"] == "pod-1"
    assert len(merged) == 6