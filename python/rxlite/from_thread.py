"""Thread-pool-to-Observable bridge (no asyncio)."""

from collections.abc import Callable
from concurrent.futures import Executor, ThreadPoolExecutor

from reactivex.abc import DisposableBase

from rxlite.observable import Observable, create
from rxlite.subscriber import Subscriber
from rxlite.utils import disposer

# Module-level default executor (lazy init)
_default_executor: ThreadPoolExecutor | None = None


def _get_default_executor() -> ThreadPoolExecutor:
    global _default_executor
    if _default_executor is None:
        _default_executor = ThreadPoolExecutor(max_workers=4)
    return _default_executor


def from_thread[T](
    fn: Callable[[], T],
    executor: Executor | None = None,
) -> Observable[T]:
    """Run blocking callable in thread pool, emit result as Observable.

    Sync equivalent of from_async(). Runs fn() in executor, emits result.
    If executor is None, uses a module-level default ThreadPoolExecutor.
    Disposing before fn() starts cancels it; disposing while it runs only drops
    the result. If a subscriber callback raises in the worker, it is logged.
    """

    def subscribe(obs: Subscriber[T]) -> DisposableBase:
        def task() -> None:
            try:
                result = fn()
            except Exception as e:
                obs.on_error(e)
                return
            obs.on_next(result)
            obs.on_completed()

        pool = executor or _get_default_executor()
        return disposer(pool.submit(task))

    return create(subscribe)
