"""Utility functions for bridging futures and observables."""

import asyncio
import concurrent.futures
import logging
from typing import Any

from rxlite.subscription import Subscription

logger = logging.getLogger(__name__)

type AnyFuture = asyncio.Future[Any] | concurrent.futures.Future[Any]


def _report_failure(future: AnyFuture) -> None:
    # Only a subscriber callback can fail the task, nobody else awaits it
    if future.cancelled():
        return
    error = future.exception()
    if error is not None:
        logger.error("subscriber raised while receiving from %r", future, exc_info=error)


def disposer(future: AnyFuture) -> Subscription:
    """Subscription that cancels a pending task or future when disposed.

    Exceptions raised by the subscriber inside the task are logged, since no
    caller is left to receive them.
    """
    future.add_done_callback(_report_failure)

    def dispose() -> None:
        if future.cancel():
            logger.debug("cancelled pending task %r", future)
        else:
            logger.debug("task %r already finished, nothing to cancel", future)

    return Subscription(dispose)
