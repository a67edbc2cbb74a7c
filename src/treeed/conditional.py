"""Conditional observables — dispatch on predicates or on exact values.

Two independent paths run on every set():

- when(predicate, action) subscribes a filter: action(value) runs only
  for values the predicate accepts.
- when_equals(key, action) files action under key; after the normal
  fan-out, the actions filed under the new value run with no arguments.

Both paths stay registered until unsubscribed or disposed.
"""

from __future__ import annotations

from typing import Callable, TypeVar

from treeed.notifier import Disposer
from treeed.observable import Observable

T = TypeVar("T")


class ConditionalObservable(Observable[T]):
    """Observable with predicate-gated and value-keyed handlers."""

    __slots__ = ("_exact_match_actions",)

    def __init__(self, value: T) -> None:
        super().__init__(value)
        self._exact_match_actions: dict[T, list[Callable[[], None]]] = {}

    def when(
        self,
        predicate: Callable[[T], bool],
        action: Callable[[T], None],
    ) -> Disposer:
        """Run action(value) on every notification whose value passes predicate.

        Returns a disposer that removes the handler.

        Usage:
            state = ConditionalObservable(0)
            state.when(lambda x: x % 2 == 0, lambda x: state.set(x + 1))

            state.set(1)  # odd — nothing chained, get() == 1
            state.set(2)  # even — chains set(3), get() == 3
        """

        def _filtered(value: T) -> None:
            if predicate(value):
                action(value)

        return self.subscribe(_filtered)

    def when_equals(self, key: T, action: Callable[[], None]) -> None:
        """Run action() after every set() whose new value equals key.

        key must be hashable.
        """
        self._exact_match_actions.setdefault(key, []).append(action)

    def set(self, value: T) -> None:
        super().set(value)
        try:
            actions = self._exact_match_actions.get(value)
        except TypeError:
            return  # unhashable values match no key
        if actions:
            for action in list(actions):
                action()

    def dispose(self) -> None:
        super().dispose()
        self._exact_match_actions.clear()
