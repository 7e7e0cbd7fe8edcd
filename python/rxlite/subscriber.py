"""Three-callback sink attached to an observable."""

import threading

from reactivex.abc import DisposableBase, ObserverBase

from rxlite.subscription import Subscription
from rxlite.types import OnCompleted, OnError, OnNext


def _noop(*_args: object) -> None:
    pass


def _default_error(error: Exception) -> None:
    raise error


class Subscriber[T](ObserverBase[T], DisposableBase):
    """Delivers on_next* followed by at most one on_error or on_completed.

    Signals arriving after termination or after dispose() are dropped. If one of
    the wrapped callbacks raises, the subscriber disposes itself and re-raises to
    whoever delivered the signal. An omitted on_error re-raises the error.
    """

    def __init__(
        self,
        on_next: OnNext[T] | None = None,
        on_error: OnError | None = None,
        on_completed: OnCompleted | None = None,
    ) -> None:
        self._on_next = on_next or _noop
        self._on_error = on_error or _default_error
        self._on_completed = on_completed or _noop

        self.is_stopped = False
        self.faulted = False  # a wrapped callback raised
        self.is_bound = False

        self._lock = threading.RLock()
        self._upstream: DisposableBase | None = None
        self.subscription = Subscription(self._teardown)

    def on_next(self, value: T) -> None:
        if self.is_stopped:
            return
        try:
            self._on_next(value)
        except Exception:
            self.faulted = True
            self.dispose()
            raise

    def on_error(self, error: Exception) -> None:
        if self.is_stopped:
            return
        self.is_stopped = True
        try:
            self._on_error(error)
        except Exception:
            self.faulted = True
            raise
        finally:
            self.dispose()

    def on_completed(self) -> None:
        if self.is_stopped:
            return
        self.is_stopped = True
        try:
            self._on_completed()
        except Exception:
            self.faulted = True
            raise
        finally:
            self.dispose()

    def bind(self, upstream: DisposableBase) -> None:
        """Attach the producer's teardown. Disposes it right away if already cancelled.

        Operators bind their upstream before subscribing to it, so a cancellation
        reaches the source even while it is still emitting synchronously.
        """
        with self._lock:
            if not self.subscription.is_disposed:
                self._upstream = upstream
                return
        upstream.dispose()

    def dispose(self) -> None:
        self.subscription.dispose()

    def _teardown(self) -> None:
        with self._lock:
            self.is_stopped = True
            upstream, self._upstream = self._upstream, None

        if upstream is not None:
            upstream.dispose()
