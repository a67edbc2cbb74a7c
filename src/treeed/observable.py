"""Observable values — a single value that announces its writes.

set() stores the value and then notifies every subscriber with it.
quiet_set() only stores, which is how a subscriber updates state without
starting another round of notifications. renotify() re-announces the
current value unchanged.

There is no equality check: setting the same value notifies again.
"""

from __future__ import annotations

import asyncio
from typing import TypeVar

from treeed._deferred import run_resolved
from treeed.notifier import Notifier

T = TypeVar("T")


class Observable(Notifier[T]):
    """A single observable value."""

    __slots__ = ("_value",)

    def __init__(self, value: T) -> None:
        super().__init__()
        self._value = value

    def get(self) -> T:
        return self._value

    def set(self, value: T) -> None:
        """Write a new value and notify subscribers with it."""
        self._value = value
        self.notify(value)

    def quiet_set(self, value: T) -> None:
        """Write a new value without notifying anyone."""
        self._value = value

    def renotify(self) -> None:
        """Notify subscribers with the current value, leaving it unchanged."""
        self.notify(self._value)

    def set_async(self, value: T) -> asyncio.Future[None]:
        """set(), exposed as an awaitable.

        The write and the fan-out happen before this returns; the future
        is already done. A subscriber exception ends up on the future.
        """
        return run_resolved(lambda: self.set(value))

    def renotify_async(self) -> asyncio.Future[None]:
        """renotify(), exposed as an awaitable. Same contract as set_async()."""
        return run_resolved(self.renotify)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._value!r})"
