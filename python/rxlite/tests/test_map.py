"""Tests for map and to_signal operators."""

from typing import Any

from reactivex.testing.marbles import marbles_testing

from rxlite import UNIT, Unit, from_rx, of, to_rx
from rxlite import operators as ops

type Lookup = dict[str | float, Any]


def test_to_signal_preserves_timing() -> None:
    """Each value becomes UNIT at the same time, completion unchanged."""
    with marbles_testing() as (start, cold, _hot, exp):
        lookup: Lookup = {"a": 1, "b": 2, "c": 3, "u": UNIT}

        source = from_rx(cold("-a-b-c-|", lookup))  # type: ignore[call-arg]
        expected = exp("-u-u-u-|", lookup)  # type: ignore[call-arg]

        result = start(to_rx(source.pipe(ops.to_signal())))
        assert result == expected


def test_to_signal_count() -> None:
    results: list[Unit] = []
    completed: list[bool] = []

    of(1, 2, 3).pipe(ops.to_signal()).subscribe(
        on_next=results.append,
        on_completed=lambda: completed.append(True),
    )

    assert results == [UNIT, UNIT, UNIT]
    assert completed == [True]


def test_map_projects_values() -> None:
    results: list[int] = []
    of(1, 2, 3).pipe(ops.map(lambda x: x * 10)).subscribe(on_next=results.append)
    assert results == [10, 20, 30]


def test_map_indexed_passes_position() -> None:
    results: list[tuple[str, int]] = []
    of("a", "b").pipe(ops.map_indexed(lambda x, i: (x, i))).subscribe(on_next=results.append)
    assert results == [("a", 0), ("b", 1)]


def test_map_error_stops_stream() -> None:
    """A raising mapper errors the stream and cancels the source."""
    seen: list[int] = []

    def mapper(x: int) -> int:
        seen.append(x)
        if x == 2:
            raise ValueError("boom")
        return x

    results: list[int] = []
    errors: list[Exception] = []
    completed: list[bool] = []

    of(1, 2, 3).pipe(ops.map(mapper)).subscribe(
        on_next=results.append,
        on_error=errors.append,
        on_completed=lambda: completed.append(True),
    )

    assert results == [1]
    assert seen == [1, 2]
    assert len(errors) == 1
    assert errors[0].args == ("boom",)
    assert completed == []


def test_downstream_error_cancels_source_through_map() -> None:
    """A failing effect below map stops the source above it."""
    seen: list[int] = []
    errors: list[Exception] = []

    def fail(_value: int) -> None:
        raise ValueError("effect")

    of(1, 2, 3).pipe(
        ops.tap(on_next=seen.append),
        ops.map(lambda x: x * 10),
        ops.tap(on_next=fail),
    ).subscribe(on_error=errors.append)

    assert seen == [1]
    assert [e.args for e in errors] == [("effect",)]
