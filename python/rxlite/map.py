"""Projection operators, including signal erasure."""

from collections.abc import Callable

from reactivex.abc import DisposableBase

from rxlite.observable import Observable, create
from rxlite.subscriber import Subscriber
from rxlite.types import UNIT, Operator, Unit


def map_indexed[T, R](mapper: Callable[[T, int], R]) -> Operator[T, R]:
    """Project each value together with its zero-based position."""

    def _operator(source: Observable[T]) -> Observable[R]:
        def subscribe(observer: Subscriber[R]) -> DisposableBase:
            index = 0

            def on_next(value: T) -> None:
                nonlocal index
                try:
                    result = mapper(value, index)
                except Exception as e:
                    upstream.dispose()
                    observer.on_error(e)
                    return
                index += 1
                observer.on_next(result)

            upstream = Subscriber(on_next, observer.on_error, observer.on_completed)
            observer.bind(upstream)
            source.subscribe(upstream)
            return upstream

        return create(subscribe)

    return _operator


def map[T, R](mapper: Callable[[T], R]) -> Operator[T, R]:
    """Project each value. A raising mapper errors the stream."""
    return map_indexed(lambda value, _index: mapper(value))


def to_signal[T]() -> Operator[T, Unit]:
    """Replace every value with UNIT, keeping only when and how often it occurred."""
    return map(lambda _: UNIT)
