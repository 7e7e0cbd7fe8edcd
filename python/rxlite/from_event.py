"""Event-source-to-Observable bridge."""

import itertools
import logging
import threading
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Protocol, runtime_checkable

from reactivex.abc import DisposableBase

from rxlite.exceptions import EventSourceError
from rxlite.observable import Observable, create
from rxlite.subscriber import Subscriber
from rxlite.subscription import Subscription

logger = logging.getLogger(__name__)

type EventHandler[A] = Callable[[object, A], None]


@runtime_checkable
class EventSource[A](Protocol):
    """Anything handlers can be registered with and later removed from by token."""

    def add_handler(self, handler: EventHandler[A]) -> object: ...

    def remove_handler(self, token: object) -> None: ...


@dataclass(frozen=True)
class EventPattern[A]:
    """One firing of an event.

    Attributes:
        sender: Object that fired the event
        args: Payload passed with the event
    """

    sender: object
    args: A


class Event[A]:
    """Multicast event. Handlers are called in registration order with (sender, args)."""

    def __init__(self) -> None:
        self._handlers: dict[int, EventHandler[A]] = {}
        self._tokens = itertools.count()
        self._lock = threading.Lock()

    def add_handler(self, handler: EventHandler[A]) -> int:
        with self._lock:
            token = next(self._tokens)
            self._handlers[token] = handler
        return token

    def remove_handler(self, token: object) -> None:
        with self._lock:
            self._handlers.pop(token, None)  # type: ignore[call-overload]

    def fire(self, sender: object, args: A) -> None:
        with self._lock:
            handlers = list(self._handlers.values())
        for handler in handlers:
            handler(sender, args)

    def __len__(self) -> int:
        with self._lock:
            return len(self._handlers)


def from_event[A](source: EventSource[A]) -> Observable[EventPattern[A]]:
    """Emit an EventPattern every time source fires.

    Never completes or errors on its own. Disposing removes exactly the handler
    this subscription registered.
    """

    def subscribe(obs: Subscriber[EventPattern[A]]) -> DisposableBase:
        def handler(sender: object, args: A) -> None:
            obs.on_next(EventPattern(sender, args))

        token = source.add_handler(handler)
        logger.debug("registered handler %r on %r", token, source)

        def remove() -> None:
            source.remove_handler(token)
            logger.debug("removed handler %r from %r", token, source)

        return Subscription(remove)

    return create(subscribe)


def get_events(target: object, event_name: str) -> Observable[EventPattern[Any]]:
    """Emit every firing of the event stored on target under event_name.

    The attribute is looked up on subscribe. If it is missing or is not an
    EventSource, the subscriber receives EventSourceError.
    """

    def subscribe(obs: Subscriber[EventPattern[Any]]) -> DisposableBase:
        source = getattr(target, event_name, None)
        if not isinstance(source, EventSource):
            raise EventSourceError(f"{type(target).__name__}.{event_name} is not an event source")
        return from_event(source).subscribe(obs)

    return create(subscribe)
