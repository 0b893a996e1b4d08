from __future__ import annotations

from collections.abc import Callable, Iterable
from enum import Enum, auto
from typing import Any

import cytoolz as cz

from ._core import require_callable
from ._source import PullSource, as_source

type Selector[T] = Callable[[T, T], Selection]
"""Given one candidate from each side, decide which one is emitted first."""


class Selection(Enum):
    """Outcome of a merge selector."""

    LEFT = auto()
    """Emit the left candidate, keep the right one pending."""
    RIGHT = auto()
    """Emit the right candidate, keep the left one pending."""


class Merge[T](PullSource[T]):
    """Two-way merge driven by a selector.

    At most one candidate per side is held pending across calls.

    The selector is called once per pair where at least one candidate was freshly pulled, and the losing candidate stays pending for the next call.

    If the selector raises, both candidates stay pending, and the next call asks the selector about the same pair again.

    Once a side is exhausted, the other side is drained as is.

    Args:
        left (PullSource[T]): Left source.
        right (PullSource[T]): Right source.
        selector (Selector[T]): Decides which candidate is emitted.
    """

    __slots__ = (
        "_has_pending_left",
        "_has_pending_right",
        "_left",
        "_pending_left",
        "_pending_right",
        "_right",
        "_selector",
    )

    def __init__(
        self, left: PullSource[T], right: PullSource[T], selector: Selector[T]
    ) -> None:
        self._left = left
        self._right = right
        self._selector = selector
        self._pending_left: T | None = None
        self._pending_right: T | None = None
        self._has_pending_left = False
        self._has_pending_right = False

    @property
    def pending(self) -> tuple[bool, bool]:
        """Whether a candidate is currently held back on the (left, right) side."""
        return (self._has_pending_left, self._has_pending_right)

    def has_next(self) -> bool:
        return (
            self._has_pending_left
            or self._has_pending_right
            or self._left.has_next()
            or self._right.has_next()
        )

    def _pull(self) -> T:
        match self.pending:
            case (True, True):
                # the previous selection raised, retry on the same pair
                pass
            case (True, False):
                if not self._right.has_next():
                    return self._take_left()
                self._hold_right(next(self._right))
            case (False, True):
                if not self._left.has_next():
                    return self._take_right()
                self._hold_left(next(self._left))
            case _:
                if not self._right.has_next():
                    return next(self._left)
                if not self._left.has_next():
                    return next(self._right)
                self._hold_left(next(self._left))
                self._hold_right(next(self._right))
        return self._select()

    def _select(self) -> T:
        match self._selector(self._pending_left, self._pending_right):  # type: ignore[arg-type]
            case Selection.LEFT:
                return self._take_left()
            case _:
                return self._take_right()

    def _hold_left(self, value: T) -> None:
        self._pending_left = value
        self._has_pending_left = True

    def _hold_right(self, value: T) -> None:
        self._pending_right = value
        self._has_pending_right = True

    def _take_left(self) -> T:
        value = self._pending_left
        self._pending_left = None
        self._has_pending_left = False
        return value  # type: ignore[return-value]

    def _take_right(self) -> T:
        value = self._pending_right
        self._pending_right = None
        self._has_pending_right = False
        return value  # type: ignore[return-value]


def merge[T](
    a: Iterable[T] | None,
    b: Iterable[T] | None,
    selector: Selector[T],
) -> PullSource[T]:
    """Merge two sources into one, letting **selector** pick which side goes first.

    The merge imposes no ordering of its own: ties are resolved however the selector decides.

    If both inputs are sorted and the selector picks the smaller candidate, the output is sorted.

    Args:
        a (Iterable[T] | None): Left source.
        b (Iterable[T] | None): Right source.
        selector (Selector[T]): Called with `(left_candidate, right_candidate)`.

    Returns:
        PullSource[T]: Every element of **a** and **b**, each exactly once.

    Example:
    ```python
    >>> import pullchain as pc
    >>> pc.merge([1, 3, 5], [2, 4, 6], pc.ascending()).into(list)
    [1, 2, 3, 4, 5, 6]
    >>> pc.merge([1, 2], [9], lambda l, r: pc.Selection.RIGHT).into(list)
    [9, 1, 2]

    ```
    """
    require_callable(selector, "selector")
    return Merge(as_source(a), as_source(b), selector)


def ascending[T](key: Callable[[T], Any] | None = None) -> Selector[T]:
    """Selector emitting the smaller candidate first.

    Ties go to the left side, so merging two sorted sources is stable.

    Args:
        key (Callable[[T], Any] | None): Optional function computing the compared value.

    Returns:
        Selector[T]: The selector.

    Example:
    ```python
    >>> import pullchain as pc
    >>> pc.merge(["bb", "d"], ["a", "ccc"], pc.ascending(len)).into(list)
    ['a', 'bb', 'd', 'ccc']

    ```
    """
    func = cz.functoolz.identity if key is None else key

    def _ascending(left: T, right: T) -> Selection:
        return Selection.LEFT if func(left) <= func(right) else Selection.RIGHT

    return _ascending


def descending[T](key: Callable[[T], Any] | None = None) -> Selector[T]:
    """Selector emitting the greater candidate first, ties going to the left side.

    Example:
    ```python
    >>> import pullchain as pc
    >>> pc.merge([5, 1], [4, 3], pc.descending()).into(list)
    [5, 4, 3, 1]

    ```
    """
    func = cz.functoolz.identity if key is None else key

    def _descending(left: T, right: T) -> Selection:
        return Selection.LEFT if func(left) >= func(right) else Selection.RIGHT

    return _descending
