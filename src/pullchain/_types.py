from __future__ import annotations

from collections.abc import Iterable, Sized
from dataclasses import dataclass
from typing import Protocol

from ._core import Pipeable


class Destination[T](Sized, Iterable[T], Protocol):
    """A growable container: what `unzip` fills, one `append` per consumed element."""

    def append(self, value: T, /) -> None: ...


@dataclass(slots=True)
class Unzipped[L, R](Pipeable):
    """The two destinations built by `unzip()`, filled in lock-step.

    `len(left) == len(right) ==` the number of source elements consumed.
    """

    left: Destination[L]
    """The first field of every element."""
    right: Destination[R]
    """The second field of every element."""


@dataclass(slots=True)
class Unzipped3[L, M, R](Pipeable):
    """The three destinations built by `unzip3()`, filled in lock-step."""

    left: Destination[L]
    """The first field of every element."""
    middle: Destination[M]
    """The second field of every element."""
    right: Destination[R]
    """The third field of every element."""
