"""Textual integration for treeed. Opt-in — requires textual.

Subscribers registered through this module only reach their callback
while the app is running and not paused, and a NoMatches raised by a
widget query inside the callback is dropped (the widget is not mounted).
Everything else propagates like any other subscriber failure.

Delivery stays on the calling thread; treeed does no cross-thread work.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Callable, TypeVar

from textual.css.query import NoMatches

from treeed.notifier import Disposer, Notifier

logger = logging.getLogger("treeed.textual")

T = TypeVar("T")

# Module-owned pause state — keyed by id(app) so multiple apps work in tests.
_paused_apps: set[int] = set()


@contextmanager
def pause(app):
    """Suspend guarded subscribers during widget replacement."""
    key = id(app)
    _paused_apps.add(key)
    try:
        yield
    finally:
        _paused_apps.discard(key)


def is_safe(app) -> bool:
    """Is the widget tree in a queryable state?"""
    return app.is_running and id(app) not in _paused_apps


def subscribe(app, notifier: Notifier[T], callback: Callable[[T], None]) -> Disposer:
    """notifier.subscribe() that safely bridges to Textual widgets.

    Usage:
        store = AppState()  # a Group
        stx.subscribe(app, store, lambda _: app.query_one(Footer).refresh())
    """

    def _guarded(payload: T) -> None:
        if not is_safe(app):
            logger.debug("Skipped delivery to %r: app not safe", callback)
            return
        try:
            callback(payload)
        except NoMatches:
            logger.debug("Dropped NoMatches from %r", callback)

    return notifier.subscribe(_guarded)
