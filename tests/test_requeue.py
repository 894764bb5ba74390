from datetime import timedelta

import pytest

from krograph.requeue import (
    DEFAULT_REQUEUE_AFTER,
    NoRequeue,
    RequeueNeeded,
    RequeueNeededAfter,
    no_requeue,
    requeue_needed,
    requeue_needed_after,
)


def test_no_requeue_shows_wrapped_message():
    cause = ValueError("source resource missing")
    err = no_requeue(cause)
    assert str(err) == "source resource missing"
    assert err.error is cause
    assert err.__cause__ is cause


def test_requeue_needed_shows_wrapped_message():
    cause = RuntimeError("dependency not ready")
    err = requeue_needed(cause)
    assert str(err) == "dependency not ready"
    assert err.error is cause


@pytest.mark.parametrize("factory", [no_requeue, requeue_needed])
def test_empty_message_without_error(factory):
    err = factory(None)
    assert str(err) == ""
    assert err.error is None


def test_requeue_needed_after_carries_duration():
    cause = RuntimeError("waiting")
    err = requeue_needed_after(cause, DEFAULT_REQUEUE_AFTER)
    assert err.duration == DEFAULT_REQUEUE_AFTER
    assert str(err) == "waiting"
    assert err.__cause__ is cause


def test_requeue_needed_after_accepts_seconds():
    err = requeue_needed_after(None, 5)
    assert err.duration == timedelta(seconds=5)
    assert str(err) == ""


def test_default_duration_is_thirty_seconds():
    err = requeue_needed_after(RuntimeError("later"), DEFAULT_REQUEUE_AFTER)
    assert err.duration == timedelta(seconds=30)
    assert str(err) == "later"


def test_requeue_after_is_a_requeue_needed():
    cause = KeyError("x")
    with pytest.raises(RequeueNeeded) as info:
        raise requeue_needed_after(cause, 1)
    assert isinstance(info.value, RequeueNeededAfter)
    assert info.value.error is cause


def test_no_requeue_can_be_caught():
    cause = ValueError("terminal")
    with pytest.raises(NoRequeue) as info:
        raise no_requeue(cause)
    assert info.value.error is cause
    assert not isinstance(info.value, RequeueNeeded)