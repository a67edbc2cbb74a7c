"""Notifier — the ordered subscriber registry every treeed type builds on.

A Notifier keeps a plain list of callbacks and fans a payload out to them
in registration order. Registering the same callback twice means it runs
twice per notification.

Dispatch iterates over a copy of the list taken when notify() starts:
callbacks added during a dispatch wait for the next one, and callbacks
removed mid-dispatch still receive the payload already in flight.

Subscriber exceptions are not caught. A raising callback stops the
remaining callbacks of that dispatch and propagates to whoever called
notify().
"""

from __future__ import annotations

from typing import Callable, Generic, TypeVar

T = TypeVar("T")

Disposer = Callable[[], None]


class Notifier(Generic[T]):
    """Ordered, mutable registry of ``(T) -> None`` callbacks."""

    __slots__ = ("_subscribers",)

    def __init__(self) -> None:
        self._subscribers: list[Callable[[T], None]] = []

    @property
    def subscriber_count(self) -> int:
        return len(self._subscribers)

    def subscribe(self, callback: Callable[[T], None]) -> Disposer:
        """Register a callback. Returns a function that removes it."""
        self._subscribers.append(callback)

        def _unsubscribe() -> None:
            self.unsubscribe(callback)

        return _unsubscribe

    def unsubscribe(self, callback: Callable[[T], None]) -> None:
        """Remove the first registration equal to callback, if any."""
        try:
            self._subscribers.remove(callback)
        except ValueError:
            pass  # not registered

    def notify(self, payload: T) -> None:
        """Call every subscriber with payload."""
        for cb in list(self._subscribers):
            cb(payload)

    def dispose(self) -> None:
        """Drop all subscribers. The notifier stays usable afterwards."""
        self._subscribers.clear()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(subscribers={len(self._subscribers)})"
