"""Operators, applied with Observable.pipe().

Example:
    >>> from rxlite import operators as ops
    >>> source.pipe(ops.filter_not_none(), ops.to_signal())
"""

from rxlite.catch import catch, catch_and_return
from rxlite.debug import debug
from rxlite.filter import filter, filter_equals, filter_not_none
from rxlite.map import map, map_indexed, to_signal
from rxlite.switch_map import switch_latest, switch_map, switch_map_indexed
from rxlite.tap import tap

__all__ = [
    "catch",
    "catch_and_return",
    "debug",
    "filter",
    "filter_equals",
    "filter_not_none",
    "map",
    "map_indexed",
    "switch_latest",
    "switch_map",
    "switch_map_indexed",
    "tap",
    "to_signal",
]
