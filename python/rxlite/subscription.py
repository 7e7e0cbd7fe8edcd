"""Disposable handles for active stream observations."""

import threading
from collections.abc import Callable

from reactivex.abc import DisposableBase


class Subscription(DisposableBase):
    """Handle for one active observation.

    The teardown action runs at most once, no matter how many times or from how
    many places dispose() is called.
    """

    def __init__(self, teardown: Callable[[], None] | None = None) -> None:
        self._teardown = teardown
        self._lock = threading.RLock()
        self.is_disposed = False

    def dispose(self) -> None:
        with self._lock:
            if self.is_disposed:
                return
            self.is_disposed = True
            teardown, self._teardown = self._teardown, None

        if teardown is not None:
            teardown()
