"""Already-settled futures for code paths that never leave the calling thread."""

from __future__ import annotations

from concurrent.futures import Future
from typing import Any, TypeVar

T = TypeVar("T")

__all__ = ["resolved", "failed"]


def resolved(value: T) -> Future[T]:
    """Return a Future that is already done with `value`.

    Callers get the same shape as from a real transport call, so
    `fut.result()` / `fut.add_done_callback(...)` work on both branches.
    """
    fut: Future[T] = Future()
    fut.set_result(value)
    return fut


def failed(exc: BaseException) -> Future[Any]:
    """Return a Future that is already done with `exc` as its exception."""
    fut: Future[Any] = Future()
    fut.set_exception(exc)
    return fut
