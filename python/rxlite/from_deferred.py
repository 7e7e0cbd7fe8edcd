"""Deferred-computation-to-Observable bridge (runs on the subscribing thread)."""

from collections.abc import Callable

from rxlite.map import to_signal
from rxlite.observable import Observable, create
from rxlite.subscriber import Subscriber
from rxlite.types import Unit


def from_deferred[T](computation: Callable[[], T]) -> Observable[T]:
    """Call computation once per subscription and emit its result.

    Nothing runs before subscribe. A raising computation is delivered as a
    single on_error.
    """

    def subscribe(obs: Subscriber[T]) -> None:
        result = computation()
        obs.on_next(result)
        obs.on_completed()

    return create(subscribe)


def from_action(action: Callable[[], object]) -> Observable[Unit]:
    """Like from_deferred for a computation without a meaningful result; emits UNIT."""
    return from_deferred(action).pipe(to_signal())
