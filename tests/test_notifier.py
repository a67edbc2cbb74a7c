"""Tests for Notifier — ordered subscriber registry and fan-out."""

import pytest

from treeed import Notifier


class TestSubscribe:
    def test_notify_reaches_subscribers_in_order(self):
        n = Notifier()
        log = []
        n.subscribe(lambda v: log.append(("a", v)))
        n.subscribe(lambda v: log.append(("b", v)))
        n.notify(1)
        assert log == [("a", 1), ("b", 1)]

    def test_duplicates_run_once_per_registration(self):
        n = Notifier()
        log = []
        cb = log.append
        n.subscribe(cb)
        n.subscribe(cb)
        n.notify("x")
        assert log == ["x", "x"]
        assert n.subscriber_count == 2

    def test_unsubscribe_removes_one_registration(self):
        n = Notifier()
        log = []
        cb = log.append
        n.subscribe(cb)
        n.subscribe(cb)
        n.unsubscribe(cb)
        n.notify(1)
        assert log == [1]

    def test_unsubscribe_absent_is_noop(self):
        n = Notifier()
        n.unsubscribe(lambda v: None)  # should not raise
        assert n.subscriber_count == 0

    def test_disposer(self):
        n = Notifier()
        log = []
        unsub = n.subscribe(log.append)
        n.notify(1)
        unsub()
        unsub()  # idempotent
        n.notify(2)
        assert log == [1]


class TestDispatch:
    def test_subscriber_added_during_dispatch_waits(self):
        n = Notifier()
        log = []

        def late(v):
            log.append(("late", v))

        def adder(v):
            log.append(("adder", v))
            n.subscribe(late)

        n.subscribe(adder)
        n.notify(1)
        assert log == [("adder", 1)]
        n.notify(2)
        assert ("late", 2) in log

    def test_removal_during_dispatch_does_not_skip(self):
        n = Notifier()
        log = []

        def first(v):
            log.append("first")
            n.unsubscribe(first)

        n.subscribe(first)
        n.subscribe(lambda v: log.append("second"))
        n.subscribe(lambda v: log.append("third"))
        n.notify(None)
        assert log == ["first", "second", "third"]

    def test_removed_later_subscriber_still_gets_in_flight_payload(self):
        n = Notifier()
        log = []

        def victim(v):
            log.append("victim")

        n.subscribe(lambda v: n.unsubscribe(victim))
        n.subscribe(victim)
        n.notify(None)
        assert log == ["victim"]
        n.notify(None)
        assert log == ["victim"]

    def test_failing_subscriber_stops_dispatch(self):
        n = Notifier()
        log = []

        def boom(v):
            raise ValueError("boom")

        n.subscribe(log.append)
        n.subscribe(boom)
        n.subscribe(log.append)
        with pytest.raises(ValueError, match="boom"):
            n.notify(1)
        assert log == [1]


class TestDispose:
    def test_dispose_clears(self):
        n = Notifier()
        log = []
        n.subscribe(log.append)
        n.dispose()
        n.notify(1)
        assert log == []
        assert n.subscriber_count == 0

    def test_usable_after_dispose(self):
        n = Notifier()
        n.dispose()
        log = []
        n.subscribe(log.append)
        n.notify(1)
        assert log == [1]

    def test_repr(self):
        n = Notifier()
        n.subscribe(lambda v: None)
        assert repr(n) == "Notifier(subscribers=1)"
