"""Lazy push-based sequence and its subscribe entry point."""

from collections.abc import Callable
from typing import Any

from reactivex import compose
from reactivex.abc import DisposableBase, ObserverBase

from rxlite.subscriber import Subscriber
from rxlite.subscription import Subscription
from rxlite.types import OnCompleted, OnError, OnNext

type Producer[T] = Callable[[Subscriber[T]], DisposableBase | None]


class Observable[T]:
    """Immutable description of how to produce a sequence for a subscriber.

    Nothing happens until subscribe() is called, and every call runs the
    producer again from scratch.
    """

    def __init__(self, producer: Producer[T]) -> None:
        self._producer = producer

    def subscribe(
        self,
        on_next: ObserverBase[T] | OnNext[T] | None = None,
        on_error: OnError | None = None,
        on_completed: OnCompleted | None = None,
    ) -> Subscription:
        """Start production and return the handle that cancels it.

        Accepts either callbacks or an observer. A Subscriber that was never
        subscribed is used as-is, so the caller may dispose it before this
        method returns.
        """
        subscriber = _to_subscriber(on_next, on_error, on_completed)
        if subscriber.subscription.is_disposed:
            return subscriber.subscription

        try:
            upstream = self._producer(subscriber)
        except Exception as error:
            if subscriber.faulted:
                raise
            subscriber.on_error(error)
        else:
            if upstream is not None:
                subscriber.bind(upstream)

        return subscriber.subscription

    def pipe(self, *operators: Callable[[Any], Any]) -> Any:
        """Apply operators left to right."""
        return compose(*operators)(self)


def create[T](producer: Producer[T]) -> Observable[T]:
    """Create an observable from a producer function.

    The producer receives the subscriber and may return a disposable that tears
    production down.
    """
    return Observable(producer)


def _to_subscriber[T](
    on_next: ObserverBase[T] | OnNext[T] | None,
    on_error: OnError | None,
    on_completed: OnCompleted | None,
) -> Subscriber[T]:
    if isinstance(on_next, Subscriber) and not on_next.is_bound:
        on_next.is_bound = True
        return on_next
    if isinstance(on_next, ObserverBase):
        subscriber = Subscriber(on_next.on_next, on_next.on_error, on_next.on_completed)
    else:
        subscriber = Subscriber(on_next, on_error, on_completed)
    subscriber.is_bound = True
    return subscriber
