"""Filtering operators."""

from collections.abc import Callable

from reactivex.abc import DisposableBase

from rxlite.observable import Observable, create
from rxlite.subscriber import Subscriber
from rxlite.types import Operator


def filter[T](predicate: Callable[[T], bool]) -> Operator[T, T]:
    """Forward only values the predicate accepts. A raising predicate errors the stream."""

    def _operator(source: Observable[T]) -> Observable[T]:
        def subscribe(observer: Subscriber[T]) -> DisposableBase:
            def on_next(value: T) -> None:
                try:
                    accepted = predicate(value)
                except Exception as e:
                    upstream.dispose()
                    observer.on_error(e)
                    return
                if accepted:
                    observer.on_next(value)

            upstream = Subscriber(on_next, observer.on_error, observer.on_completed)
            observer.bind(upstream)
            source.subscribe(upstream)
            return upstream

        return create(subscribe)

    return _operator


def filter_equals(expected: bool) -> Operator[bool, bool]:
    """Forward only True or only False signals."""
    return filter(lambda value: value == expected)


def filter_not_none[T]() -> Operator[T | None, T]:
    """Forward only values that are not None."""
    return filter(lambda value: value is not None)  # type: ignore[return-value]
