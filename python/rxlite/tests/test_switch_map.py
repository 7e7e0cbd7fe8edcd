"""Tests for switch operators."""

from typing import Any

from reactivex.testing.marbles import marbles_testing

from rxlite import Event, Observable, Subscriber, Subscription, create, from_event, from_rx, never, of, to_rx
from rxlite import operators as ops

type Lookup = dict[str | float, Any]


def test_switch_map_drops_previous_inner() -> None:
    """A new outer value switches away from the previous inner."""
    with marbles_testing() as (start, cold, _hot, exp):
        lookup: Lookup = {"a": 1, "b": 2, "x": "x", "y": "y", "z": "z"}

        outer = from_rx(cold("-a--b----|", lookup))  # type: ignore[call-arg]
        inners = {
            1: from_rx(cold("x-y-z|", lookup)),  # type: ignore[call-arg]
            2: from_rx(cold("x-y-z|", lookup)),  # type: ignore[call-arg]
        }
        expected = exp("-x-yx-y-z|", lookup)  # type: ignore[call-arg]

        result = start(to_rx(outer.pipe(ops.switch_map(lambda v: inners[v]))))
        assert result == expected


def test_switch_map_waits_for_active_inner() -> None:
    """Outer completion waits for the active inner to complete."""
    with marbles_testing() as (start, cold, _hot, exp):
        lookup: Lookup = {"a": 1, "x": "x", "y": "y"}

        outer = from_rx(cold("-a-|", lookup))  # type: ignore[call-arg]
        inner = from_rx(cold("x---y-|", lookup))  # type: ignore[call-arg]
        expected = exp("-x---y-|", lookup)  # type: ignore[call-arg]

        result = start(to_rx(outer.pipe(ops.switch_map(lambda _: inner))))
        assert result == expected


def test_switch_map_inner_error() -> None:
    """An inner error propagates immediately."""
    with marbles_testing() as (start, cold, _hot, exp):
        lookup: Lookup = {"a": 1, "x": "x"}

        outer = from_rx(cold("-a-----|", lookup))  # type: ignore[call-arg]
        inner = from_rx(cold("x-#", lookup))  # type: ignore[call-arg]
        expected = exp("-x-#", lookup)  # type: ignore[call-arg]

        result = start(to_rx(outer.pipe(ops.switch_map(lambda _: inner))))
        assert result == expected


def test_switch_map_cancels_previous_inner() -> None:
    """The previous inner is disposed before the next is subscribed."""
    trigger: Event[int] = Event()
    inner_events: dict[int, Event[str]] = {1: Event(), 2: Event()}
    log: list[str] = []

    def make_inner(pattern: Any) -> Observable[str]:
        key = pattern.args
        source = from_event(inner_events[key]).pipe(ops.map(lambda p: p.args))

        def subscribe(obs: Subscriber[str]) -> Subscription:
            log.append(f"subscribe {key}")
            inner = source.subscribe(obs)

            def dispose() -> None:
                log.append(f"dispose {key}")
                inner.dispose()

            return Subscription(dispose)

        return create(subscribe)

    results: list[str] = []
    subscription = from_event(trigger).pipe(ops.switch_map(make_inner)).subscribe(
        on_next=results.append
    )

    trigger.fire(None, 1)
    inner_events[1].fire(None, "a")
    trigger.fire(None, 2)
    inner_events[1].fire(None, "stale")
    inner_events[2].fire(None, "b")

    assert results == ["a", "b"]
    assert log == ["subscribe 1", "dispose 1", "subscribe 2"]
    assert len(inner_events[1]) == 0

    subscription.dispose()

    assert log[-1] == "dispose 2"
    assert len(trigger) == 0
    assert len(inner_events[2]) == 0


def test_switch_map_outer_error_disposes_inner() -> None:
    inner_event: Event[str] = Event()
    outer: Event[int] = Event()
    errors: list[Exception] = []

    def fail_on_two(pattern: Any) -> int:
        if pattern.args == 2:
            raise ValueError("outer")
        return pattern.args

    from_event(outer).pipe(
        ops.map(fail_on_two),
        ops.switch_map(lambda _: from_event(inner_event)),
    ).subscribe(on_error=errors.append)

    outer.fire(None, 1)
    assert len(inner_event) == 1

    outer.fire(None, 2)
    assert len(errors) == 1
    assert len(inner_event) == 0
    assert len(outer) == 0


def test_switch_map_indexed_passes_position() -> None:
    results: list[tuple[str, int]] = []
    completed: list[bool] = []

    of("a", "b", "c").pipe(ops.switch_map_indexed(lambda x, i: of((x, i)))).subscribe(
        on_next=results.append,
        on_completed=lambda: completed.append(True),
    )

    assert results == [("a", 0), ("b", 1), ("c", 2)]
    assert completed == [True]


def test_switch_latest_never_completes_while_inner_active() -> None:
    completed: list[bool] = []
    of(never()).pipe(ops.switch_latest()).subscribe(on_completed=lambda: completed.append(True))
    assert completed == []


def test_downstream_error_cancels_source_through_switch_map() -> None:
    """A failing effect below switch_map stops the outer source and the inner."""
    seen: list[int] = []
    errors: list[Exception] = []

    def fail(_value: int) -> None:
        raise ValueError("effect")

    of(1, 2, 3).pipe(
        ops.tap(on_next=seen.append),
        ops.switch_map(lambda x: of(x)),
        ops.tap(on_next=fail),
    ).subscribe(on_error=errors.append)

    assert seen == [1]
    assert [e.args for e in errors] == [("effect",)]


def test_dispose_during_emission_stops_source_through_switch_map() -> None:
    seen: list[int] = []
    inner_seen: list[int] = []

    def on_next(_value: int) -> None:
        subscriber.dispose()

    subscriber = Subscriber(on_next)
    of(1, 2, 3).pipe(
        ops.tap(on_next=seen.append),
        ops.switch_map(lambda x: of(x, x + 10).pipe(ops.tap(on_next=inner_seen.append))),
    ).subscribe(subscriber)

    assert seen == [1]
    assert inner_seen == [1]
