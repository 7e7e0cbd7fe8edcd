"""Shared type definitions for reactive streams."""

from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from rxlite.observable import Observable

type Operator[T, U] = Callable[[Observable[T]], Observable[U]]

type OnNext[T] = Callable[[T], None]
type OnError = Callable[[Exception], None]
type OnCompleted = Callable[[], None]


@dataclass(frozen=True, repr=False)
class Unit:
    """Value of a stream that only signals occurrence. All instances are equal."""

    def __repr__(self) -> str:
        return "UNIT"


UNIT = Unit()
