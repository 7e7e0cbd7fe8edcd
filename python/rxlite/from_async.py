"""Async-to-Observable bridge."""

import asyncio
from asyncio import AbstractEventLoop
from collections.abc import Awaitable, Callable

from reactivex.abc import DisposableBase

from rxlite.observable import Observable, create
from rxlite.subscriber import Subscriber
from rxlite.utils import disposer


def from_async[T](
    coro: Callable[[], Awaitable[T]],
    loop: AbstractEventLoop | None = None,
) -> Observable[T]:
    """Convert a zero-arg async callable into a single-emission Observable.

    Without loop, must be subscribed from the asyncio thread and the task is
    started on the running loop. With an explicit loop, it can be subscribed from
    any thread (e.g., event handlers fired by a worker thread).

    Disposing the subscription cancels the task. Cancellation is not an error:
    nothing is emitted for a cancelled task. If a subscriber callback raises
    inside the task, it is logged.

    Example:
        >>> async def fetch(url: str) -> dict:
        ...     return {"data": "..."}
        >>> obs = from_async(lambda: fetch("https://example.com"))
        >>> obs.subscribe(on_next=print)
    """

    def subscribe(obs: Subscriber[T]) -> DisposableBase:
        async def run() -> None:
            try:
                result = await coro()
            except Exception as e:
                obs.on_error(e)
                return
            obs.on_next(result)
            obs.on_completed()

        if loop is None:
            task = asyncio.get_running_loop().create_task(run())
            return disposer(task)

        # schedule from any thread
        future = asyncio.run_coroutine_threadsafe(run(), loop)
        return disposer(future)

    return create(subscribe)
