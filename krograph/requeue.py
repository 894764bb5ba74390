"""Errors telling the reconciler whether and when to retry an item."""

from __future__ import annotations

from datetime import timedelta

DEFAULT_REQUEUE_AFTER = timedelta(seconds=30)


class _WrappingError(Exception):
    """An error that carries another error and shows its message."""

    def __init__(self, error: BaseException | None = None) -> None:
        super().__init__(error)
        self.error = error
        if isinstance(error, BaseException):
            self.__cause__ = error

    def __str__(self) -> str:
        return "" if self.error is None else str(self.error)


class NoRequeue(_WrappingError):
    """Report the error but do not retry the item; retrying cannot fix it."""


class RequeueNeeded(_WrappingError):
    """Retry the item without reporting the error; the condition is expected."""


class RequeueNeededAfter(RequeueNeeded):
    """Retry the item after ``duration`` without reporting the error."""

    def __init__(
        self, error: BaseException | None = None, duration: timedelta = timedelta(0)
    ) -> None:
        super().__init__(error)
        self.duration = duration


def no_requeue(err: BaseException | None) -> NoRequeue:
    return NoRequeue(err)


def requeue_needed(err: BaseException | None) -> RequeueNeeded:
    return RequeueNeeded(err)


def requeue_needed_after(
    err: BaseException | None, duration: timedelta | float
) -> RequeueNeededAfter:
    """Build a delayed requeue; a number is taken as seconds."""
    if not isinstance(duration, timedelta):
        duration = timedelta(seconds=duration)
    return RequeueNeededAfter(err, duration)