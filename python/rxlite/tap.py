"""Side-effect operator that leaves the stream untouched."""

from reactivex.abc import DisposableBase

from rxlite.observable import Observable, create
from rxlite.subscriber import Subscriber
from rxlite.types import OnCompleted, OnError, OnNext, Operator


def tap[T](
    on_next: OnNext[T] | None = None,
    on_error: OnError | None = None,
    on_completed: OnCompleted | None = None,
) -> Operator[T, T]:
    """Run an effect for each signal before forwarding that same signal.

    If an effect raises, its exception is delivered downstream as on_error in
    place of the signal and the source is cancelled.
    """

    def _operator(source: Observable[T]) -> Observable[T]:
        def subscribe(observer: Subscriber[T]) -> DisposableBase:
            def _on_next(value: T) -> None:
                if on_next is not None:
                    try:
                        on_next(value)
                    except Exception as e:
                        upstream.dispose()
                        observer.on_error(e)
                        return
                observer.on_next(value)

            def _on_error(error: Exception) -> None:
                if on_error is not None:
                    try:
                        on_error(error)
                    except Exception as e:
                        observer.on_error(e)
                        return
                observer.on_error(error)

            def _on_completed() -> None:
                if on_completed is not None:
                    try:
                        on_completed()
                    except Exception as e:
                        observer.on_error(e)
                        return
                observer.on_completed()

            upstream = Subscriber(_on_next, _on_error, _on_completed)
            observer.bind(upstream)
            source.subscribe(upstream)
            return upstream

        return create(subscribe)

    return _operator
