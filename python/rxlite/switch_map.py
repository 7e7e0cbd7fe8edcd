"""Switch operators: follow only the most recent inner observable."""

from collections.abc import Callable

from reactivex import compose
from reactivex.abc import DisposableBase
from reactivex.disposable import CompositeDisposable, SerialDisposable

from rxlite.map import map_indexed
from rxlite.observable import Observable, create
from rxlite.subscriber import Subscriber
from rxlite.types import Operator


def switch_latest[T]() -> Operator[Observable[T], T]:
    """Flatten an observable of observables, subscribed only to the latest inner.

    Each new inner disposes the previous one before it is subscribed. The result
    completes once the outer has completed and the active inner (if any) has
    completed. An error from either side tears both down.
    """

    def _operator(source: Observable[Observable[T]]) -> Observable[T]:
        def subscribe(observer: Subscriber[T]) -> DisposableBase:
            inner = SerialDisposable()
            latest = 0
            has_latest = False
            outer_done = False

            def on_next(inner_source: Observable[T]) -> None:
                nonlocal latest, has_latest
                latest += 1
                current = latest
                has_latest = True

                def on_inner_next(value: T) -> None:
                    if latest == current:
                        observer.on_next(value)

                def on_inner_error(error: Exception) -> None:
                    if latest == current:
                        outer.dispose()
                        inner.dispose()
                        observer.on_error(error)

                def on_inner_completed() -> None:
                    nonlocal has_latest
                    if latest == current:
                        has_latest = False
                        if outer_done:
                            observer.on_completed()

                subscriber = Subscriber(on_inner_next, on_inner_error, on_inner_completed)
                inner.disposable = subscriber
                inner_source.subscribe(subscriber)

            def on_error(error: Exception) -> None:
                inner.dispose()
                observer.on_error(error)

            def on_completed() -> None:
                nonlocal outer_done
                outer_done = True
                if not has_latest:
                    observer.on_completed()

            outer = Subscriber(on_next, on_error, on_completed)
            subscription = CompositeDisposable(outer, inner)
            observer.bind(subscription)
            source.subscribe(outer)
            return subscription

        return create(subscribe)

    return _operator


def switch_map_indexed[T, R](
    selector: Callable[[T, int], Observable[R]],
) -> Operator[T, R]:
    """Project each value and its position into an observable, following only the latest."""
    return compose(map_indexed(selector), switch_latest())


def switch_map[T, R](selector: Callable[[T], Observable[R]]) -> Operator[T, R]:
    """Like flat_map, but switches to each new projection instead of merging them."""
    return switch_map_indexed(lambda value, _index: selector(value))
