"""Groups — tree composition for observables.

A Group is a Notifier whose payload is the group itself. Children are
created or adopted through the group, which subscribes its own re-fire
callback on them; from then on any notification on a child re-fires the
group, and through the group's own adopters, every ancestor above it.

Ancestors only learn that something beneath them changed. The child's
value is never forwarded.

The tree is whatever the adoption calls built. A group that was never
passed to adopt_group() stays isolated even when it is stored as an
attribute of another group.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Callable, TypeVar

from treeed._deferred import run_resolved
from treeed.notifier import Notifier
from treeed.observable import Observable

logger = logging.getLogger("treeed.group")

T = TypeVar("T")
G = TypeVar("G", bound="Group")


class Group(Notifier["Group"]):
    """A branch of the state tree. Subclass it and adopt children as attributes.

    Usage:
        class Profile(Group):
            def __init__(self):
                super().__init__()
                self.name = self.adopt_value("")
                self.age = self.adopt_value(0)
                self.detached = Observable(0)  # not adopted: never re-fires

        class App(Group):
            def __init__(self):
                super().__init__()
                self.profile = self.adopt_group(Profile())

        app = App()
        app.subscribe(lambda g: print("app changed"))
        app.profile.age.set(30)  # prints "app changed"
    """

    __slots__ = ()

    def _refire(self, _payload: object) -> None:
        self.notify(self)

    def adopt_value(
        self,
        initial: T,
        first_subscriber: Callable[[T], None] | None = None,
        *,
        kind: type[Observable] = Observable,
    ) -> Observable[T]:
        """Create a child observable that re-fires this group on every notification.

        first_subscriber, if given, is registered ahead of the group, so it
        sees each write before the group re-fires. kind picks the observable
        class (e.g. ConditionalObservable).
        """
        child = kind(initial)
        if first_subscriber is not None:
            child.subscribe(first_subscriber)
        child.subscribe(self._refire)
        logger.debug("%r adopted %r", self, child)
        return child

    def adopt_group(self, child: G) -> G:
        """Make child's notifications re-fire this group. Returns child."""
        child.subscribe(self._refire)
        logger.debug("%r adopted %r", self, child)
        return child

    def release(self, child: Notifier) -> None:
        """Undo one adoption of child. A child that was not adopted is left alone."""
        child.unsubscribe(self._refire)
        logger.debug("%r released %r", self, child)

    def trigger_update(self) -> None:
        """Announce that this group changed, without touching any child."""
        self.notify(self)

    def trigger_update_async(self) -> asyncio.Future[None]:
        """trigger_update(), exposed as an awaitable.

        Notification completes before this returns; the future is already
        done and carries any subscriber exception.
        """
        return run_resolved(self.trigger_update)

    def dispose(self) -> None:
        """Drop this group's subscribers.

        Adoption callbacks this group placed on its children are left in
        place; release() detaches a child.
        """
        logger.debug("Disposing %r (%d subscribers)", self, self.subscriber_count)
        super().dispose()
