"""Error recovery operators."""

from collections.abc import Callable

from reactivex.abc import DisposableBase
from reactivex.disposable import CompositeDisposable, SerialDisposable

from rxlite.observable import Observable, create
from rxlite.sources import return_value
from rxlite.subscriber import Subscriber
from rxlite.types import Operator


def catch[T](
    handler: Observable[T] | Callable[[Exception], Observable[T]],
) -> Operator[T, T]:
    """Continue with another observable when the source errors.

    handler is either the fallback observable itself or a function building one
    from the error. A raising handler errors the result.
    """

    def _operator(source: Observable[T]) -> Observable[T]:
        def subscribe(observer: Subscriber[T]) -> DisposableBase:
            fallback_subscription = SerialDisposable()

            def on_error(error: Exception) -> None:
                try:
                    fallback = handler if isinstance(handler, Observable) else handler(error)
                except Exception as e:
                    observer.on_error(e)
                    return
                subscriber = Subscriber(observer.on_next, observer.on_error, observer.on_completed)
                fallback_subscription.disposable = subscriber
                fallback.subscribe(subscriber)

            upstream = Subscriber(observer.on_next, on_error, observer.on_completed)
            subscription = CompositeDisposable(upstream, fallback_subscription)
            observer.bind(subscription)
            source.subscribe(upstream)
            return subscription

        return create(subscribe)

    return _operator


def catch_and_return[T](value: T) -> Operator[T, T]:
    """On error, emit value once and complete instead of failing."""
    return catch(return_value(value))
