from __future__ import annotations

from collections.abc import Iterable

from ._source import EmptySource, PullSource, as_source


class Concat[T](PullSource[T]):
    """Exhaust a sequence of child sources one after the other.

    The children are only adapted into sources when reached.

    `has_next()` moves the cursor forward past exhausted children until one with elements is found.

    Calling it again without an intervening `next()` finds the same child, since that child still has its element.

    Args:
        children (Iterable[Iterable[T] | None]): The children, in order. `None` children count as empty.
    """

    __slots__ = ("_children", "_children_done", "_current", "_entered")

    def __init__(self, children: Iterable[Iterable[T] | None]) -> None:
        self._children = iter(children)
        self._children_done = False
        self._current: PullSource[T] = EmptySource()
        self._entered = 0

    @property
    def children_entered(self) -> int:
        """How many children have been reached so far."""
        return self._entered

    def has_next(self) -> bool:
        while not self._current.has_next():
            if self._children_done:
                return False
            try:
                child = next(self._children)
            except StopIteration:
                self._children_done = True
                return False
            self._current = as_source(child)
            self._entered += 1
        return True

    def _pull(self) -> T:
        return next(self._current)


def concat[T](*sources: Iterable[T] | None) -> PullSource[T]:
    """Concatenate zero or more sources, any of which may be infinite.

    An infinite source prevents the following ones from ever being reached.

    Args:
        *sources (Iterable[T] | None): Sources to exhaust, in order.

    Returns:
        PullSource[T]: A source yielding every element of every source, in order.

    Example:
    ```python
    >>> import pullchain as pc
    >>> pc.concat([], [1, 2], None, [], [3]).into(list)
    [1, 2, 3]

    ```
    """
    return Concat(sources)


def flatten[T](collections: Iterable[Iterable[T] | None] | None) -> PullSource[T]:
    """Flatten one level of nesting.

    Each inner iterable is wrapped into a source only when the cursor reaches it.

    If the caller stops pulling early, the remaining inner iterables are never touched.

    Args:
        collections (Iterable[Iterable[T] | None] | None): An iterable of iterables.

    Returns:
        PullSource[T]: A source over the inner elements.

    Example:
    ```python
    >>> import pullchain as pc
    >>> pc.flatten([[1, 2], [], [3]]).into(list)
    [1, 2, 3]
    >>> pc.flatten(None).has_next()
    False

    ```
    """
    if collections is None:
        return EmptySource()
    return Concat(collections)
