"""Debug tap that writes every signal as a line of text."""

import logging
from collections.abc import Callable

from rxlite.config import DebugConfig
from rxlite.tap import tap
from rxlite.types import Operator

type Sink = Callable[[str], None]


def logging_sink(config: DebugConfig) -> Sink:
    """Build a sink that logs each line at the configured level."""
    logger = logging.getLogger(config.logger_name)

    def write(line: str) -> None:
        logger.log(config.level, line)

    return write


def debug[T](
    text: str = "",
    selector: Callable[[T], object] | None = None,
    sink: Sink | None = None,
) -> Operator[T, T]:
    """Write each signal to sink without modifying the stream.

    Lines look like "text on_next: 1", "text on_error: ValueError('boom')" and
    "text on_completed". selector picks what is written for a value. Without a
    sink, lines go to the logger described by DebugConfig().

    Example:
        >>> lines: list[str] = []
        >>> subscription = of(1, 2).pipe(debug("ticks", sink=lines.append)).subscribe()
        >>> lines
        ['ticks on_next: 1', 'ticks on_next: 2', 'ticks on_completed']
    """
    write = sink or logging_sink(DebugConfig())
    prefix = f"{text} " if text else ""

    def on_next(value: T) -> None:
        shown = selector(value) if selector is not None else value
        write(f"{prefix}on_next: {shown}")

    def on_error(error: Exception) -> None:
        write(f"{prefix}on_error: {error!r}")

    def on_completed() -> None:
        write(f"{prefix}on_completed")

    return tap(on_next, on_error, on_completed)
