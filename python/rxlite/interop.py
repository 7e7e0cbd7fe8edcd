"""Bridges between rxlite and reactivex observables."""

import reactivex
from reactivex.abc import DisposableBase, ObserverBase, SchedulerBase

from rxlite.observable import Observable, create
from rxlite.subscriber import Subscriber


def from_rx[T](source: reactivex.Observable[T]) -> Observable[T]:
    """Lift a reactivex observable so rxlite operators can be applied to it."""

    def subscribe(observer: Subscriber[T]) -> DisposableBase:
        return source.subscribe(
            on_next=observer.on_next,
            on_error=observer.on_error,
            on_completed=observer.on_completed,
        )

    return create(subscribe)


def to_rx[T](source: Observable[T]) -> reactivex.Observable[T]:
    """Expose an rxlite observable to reactivex pipelines and test schedulers."""

    def subscribe(
        observer: ObserverBase[T], _scheduler: SchedulerBase | None = None
    ) -> DisposableBase:
        return source.subscribe(observer)

    return reactivex.create(subscribe)
