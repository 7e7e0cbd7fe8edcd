"""Minimal single-threaded reactive streams with RxPy interop."""

from rxlite.config import DebugConfig, LogLevel
from rxlite.exceptions import EventSourceError, StreamError
from rxlite.from_async import from_async
from rxlite.from_deferred import from_action, from_deferred
from rxlite.from_event import Event, EventPattern, EventSource, from_event, get_events
from rxlite.from_thread import from_thread
from rxlite.interop import from_rx, to_rx
from rxlite.observable import Observable, create
from rxlite.sources import empty, never, of, return_value, throw
from rxlite.subscriber import Subscriber
from rxlite.subscription import Subscription
from rxlite.types import UNIT, Operator, Unit

__all__ = [
    "UNIT",
    "DebugConfig",
    "Event",
    "EventPattern",
    "EventSource",
    "EventSourceError",
    "LogLevel",
    "Observable",
    "Operator",
    "StreamError",
    "Subscriber",
    "Subscription",
    "Unit",
    "create",
    "empty",
    "from_action",
    "from_async",
    "from_deferred",
    "from_event",
    "from_rx",
    "from_thread",
    "get_events",
    "never",
    "of",
    "return_value",
    "throw",
    "to_rx",
]
