"""Primitive observable sources."""

from rxlite.observable import Observable, create
from rxlite.subscriber import Subscriber


def of[T](*values: T) -> Observable[T]:
    """Emit each value in order, then complete. Stops early once disposed."""

    def subscribe(observer: Subscriber[T]) -> None:
        for value in values:
            if observer.is_stopped:
                return
            observer.on_next(value)
        observer.on_completed()

    return create(subscribe)


def return_value[T](value: T) -> Observable[T]:
    """Emit a single value, then complete."""
    return of(value)


def empty[T]() -> Observable[T]:
    def subscribe(observer: Subscriber[T]) -> None:
        observer.on_completed()

    return create(subscribe)


def never[T]() -> Observable[T]:
    def subscribe(_observer: Subscriber[T]) -> None:
        pass

    return create(subscribe)


def throw[T](error: Exception) -> Observable[T]:
    def subscribe(observer: Subscriber[T]) -> None:
        observer.on_error(error)

    return create(subscribe)
