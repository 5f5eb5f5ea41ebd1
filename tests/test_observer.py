import pytest

from notifykit import BaseObservable, Subscription

from recorders import RecordingObserver


class LocationReporter(BaseObservable):
    """Validates before publishing and reports bad values through the error path."""

    def report(self, location):
        try:
            if not -90 <= location["lat"] <= 90:
                raise ValueError("Invalid latitude")
            self.publish(location)
        except ValueError as e:
            self._on_error(e)


def test_publish_reaches_every_observer_in_order(observable, journal):
    r1, r2, r3 = (RecordingObserver(name=n, journal=journal) for n in ("r1", "r2", "r3"))
    subs = [observable.subscribe(r) for r in (r1, r2, r3)]
    assert all(isinstance(s, Subscription) and not s.is_disposed for s in subs)

    observable.publish("v1")
    assert journal == [("r1", "v1"), ("r2", "v1"), ("r3", "v1")]


def test_dispose_and_complete_scenario(observable, journal):
    r1, r2, r3 = (RecordingObserver(name=n, journal=journal) for n in ("r1", "r2", "r3"))
    s1, s2, s3 = (observable.subscribe(r) for r in (r1, r2, r3))

    observable.publish("v1")
    s2.dispose()
    observable.publish("v2")
    journal.clear()
    observable.complete()

    assert r1.values == ["v1", "v2"]
    assert r2.values == ["v1"]
    assert r3.values == ["v1", "v2"]
    assert journal == [("r1", "complete"), ("r3", "complete")]
    assert (r1.completions, r2.completions, r3.completions) == (1, 0, 1)
    assert s1.is_disposed and s2.is_disposed and s3.is_disposed

    observable.publish("v3")
    assert r1.values[-1] == "v2" and r3.values[-1] == "v2"
    assert observable.observer_count == 0


def test_dispose_is_idempotent(observable):
    observer = RecordingObserver()
    subscription = observable.subscribe(observer)

    subscription.dispose()
    assert subscription.is_disposed
    subscription.dispose()
    assert subscription.is_disposed

    observable.publish(1)
    assert observer.values == []


def test_dispose_after_complete_does_not_raise(observable):
    subscription = observable.subscribe(RecordingObserver())
    observable.complete()
    subscription.dispose()
    assert subscription.is_disposed


def test_disposing_one_subscription_leaves_others_live(observable):
    s1 = observable.subscribe(RecordingObserver())
    s2 = observable.subscribe(RecordingObserver())
    s1.dispose()
    assert s1.is_disposed
    assert not s2.is_disposed


def test_same_observer_can_register_twice(observable):
    observer = RecordingObserver()
    first = observable.subscribe(observer)
    observable.subscribe(observer)

    observable.publish("x")
    assert observer.values == ["x", "x"]

    first.dispose()
    observable.publish("y")
    assert observer.values == ["x", "x", "y"]


def test_observer_unsubscribing_itself_mid_delivery(observable, journal):
    class OneShot(RecordingObserver):
        def next(self, value):
            super().next(value)
            self.unsubscribe()

    r1 = RecordingObserver(name="r1", journal=journal)
    once = OneShot(name="once", journal=journal)
    r3 = RecordingObserver(name="r3", journal=journal)
    r1.subscribe(observable)
    once.subscribe(observable)
    r3.subscribe(observable)

    observable.publish(1)
    observable.publish(2)

    assert journal == [("r1", 1), ("once", 1), ("r3", 1), ("r1", 2), ("r3", 2)]
    assert once.subscription.is_disposed


def test_peer_disposed_mid_delivery_is_skipped(observable):
    late = RecordingObserver()
    late_subscription = None

    class Revoker(RecordingObserver):
        def next(self, value):
            super().next(value)
            late_subscription.dispose()

    observable.subscribe(Revoker())
    late_subscription = observable.subscribe(late)

    observable.publish(1)
    assert late.values == []


def test_observer_added_mid_delivery_waits_for_next_pass(observable):
    newcomer = RecordingObserver()

    class Recruiter(RecordingObserver):
        def next(self, value):
            super().next(value)
            if len(self.values) == 1:
                observable.subscribe(newcomer)

    observable.subscribe(Recruiter())
    observable.publish(1)
    observable.publish(2)
    assert newcomer.values == [2]


def test_delivery_fault_propagates_and_stops_the_pass(observable):
    class Faulty(RecordingObserver):
        def next(self, value):
            raise RuntimeError("receiver failed")

    after = RecordingObserver()
    observable.subscribe(Faulty())
    observable.subscribe(after)

    with pytest.raises(RuntimeError, match="receiver failed"):
        observable.publish(1)
    assert after.values == []


def test_invalid_values_are_routed_through_error():
    reporter = LocationReporter()
    trackers = [RecordingObserver() for _ in range(3)]
    for tracker in trackers:
        reporter.subscribe(tracker)

    reporter.report({"lat": 37.7749, "lon": 122.4194})
    reporter.report({"lat": 100, "lon": 100})

    for tracker in trackers:
        assert len(tracker.values) == 1
        assert [str(e) for e in tracker.errors] == ["Invalid latitude"]


def test_observer_tracks_its_subscription():
    reporter = LocationReporter()
    trackers = [RecordingObserver() for _ in range(3)]
    subs = [t.subscribe(reporter) for t in trackers]
    assert [t.subscription for t in trackers] == subs

    trackers[0].unsubscribe()
    assert subs[0].is_disposed
    assert not subs[1].is_disposed

    reporter.report({"lat": 1, "lon": 1})
    assert [len(t.values) for t in trackers] == [0, 1, 1]

    trackers[2].complete()
    assert subs[2].is_disposed
    reporter.report({"lat": 2, "lon": 2})
    assert [len(t.values) for t in trackers] == [0, 2, 1]


def test_resubscribing_replaces_without_disposing():
    first, second = BaseObservable(), BaseObservable()
    observer = RecordingObserver()
    old = observer.subscribe(first)
    new = observer.subscribe(second)

    assert observer.subscription is new
    assert not old.is_disposed

    observer.unsubscribe()
    assert new.is_disposed
    first.publish("still here")
    assert observer.values == ["still here"]


def test_unsubscribe_without_subscription_is_a_noop():
    observer = RecordingObserver()
    observer.unsubscribe()
    observer.complete()
    assert observer.subscription is None


def test_subscription_as_context_manager(observable):
    observer = RecordingObserver()
    with observable.subscribe(observer) as subscription:
        observable.publish(1)
    observable.publish(2)

    assert subscription.is_disposed
    assert observer.values == [1]


def test_metrics_count_activity(observable):
    observable.subscribe(RecordingObserver())
    observable.subscribe(RecordingObserver())
    observable.publish(1)
    observable.complete()

    counters = observable.metrics.snapshot()["counters"]
    assert counters["subscribed"] == 2
    assert counters["published"] == 1
    assert counters["delivered"] == 2
    assert counters["completed"] == 1
    assert observable.metrics.get_gauge("receivers") == 0
