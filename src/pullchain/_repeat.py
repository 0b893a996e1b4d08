"""Bounded repetition of a value, of each element of a collection, or of a whole collection.

Two families:

- *each*: every element is emitted several times in a row before moving to the next one.
- *all*: the whole collection is emitted in order, pass after pass.

Each family comes in a *by factor* flavour (exact multiplication) and a *to size* flavour, where the requested total length is distributed over the collection.

For `repeat_each_to_size`, the remainder of `size / len(collection)` goes to the first elements, in collection order.

For `repeat_all_to_size`, the last pass is truncated.
"""

from __future__ import annotations

from collections.abc import Collection, Iterator

from ._core import check_argument, logger
from ._source import EmptySource, PullSource, as_source


class Repeat[T](PullSource[T]):
    """Emit the same value a fixed number of times."""

    __slots__ = ("_remaining", "_value")

    def __init__(self, value: T, n: int) -> None:
        self._value = value
        self._remaining = n

    def has_next(self) -> bool:
        return self._remaining > 0

    def _pull(self) -> T:
        self._remaining -= 1
        return self._value


class RepeatEach[T](PullSource[T]):
    """Emit each element `per_element` times, plus one extra time for the first `remainder` elements.

    An element is only pulled from the underlying source once the previous one has been emitted enough times.

    Elements that would be emitted zero times are never pulled.
    """

    __slots__ = ("_current", "_elements", "_left", "_per_element", "_remainder")

    def __init__(
        self, elements: PullSource[T], per_element: int, remainder: int = 0
    ) -> None:
        self._elements = elements
        self._per_element = per_element
        self._remainder = remainder
        self._current: T | None = None
        self._left = 0

    def has_next(self) -> bool:
        while self._left == 0:
            if self._per_element == 0 and self._remainder == 0:
                return False
            if not self._elements.has_next():
                return False
            self._current = next(self._elements)
            if self._remainder > 0:
                self._remainder -= 1
                self._left = self._per_element + 1
            else:
                self._left = self._per_element
        return True

    def _pull(self) -> T:
        self._left -= 1
        return self._current  # type: ignore[return-value]


class RepeatAll[T](PullSource[T]):
    """Cycle through a whole collection until exactly `total` elements have been emitted.

    A fresh iterator over the collection is created at the start of each pass.
    """

    __slots__ = ("_collection", "_cursor", "_passes", "_remaining")

    def __init__(self, collection: Collection[T], total: int) -> None:
        self._collection = collection
        self._remaining = total
        self._cursor: PullSource[T] = EmptySource()
        self._passes = 0

    @property
    def passes(self) -> int:
        """How many passes over the collection have been started."""
        return self._passes

    def has_next(self) -> bool:
        return self._remaining > 0

    def _pull(self) -> T:
        if not self._cursor.has_next():
            self._cursor = as_source(self._new_pass())
        self._remaining -= 1
        return next(self._cursor)

    def _new_pass(self) -> Iterator[T]:
        self._passes += 1
        return iter(self._collection)


def _is_empty(collection: Collection[object] | None) -> bool:
    return collection is None or len(collection) == 0


def repeat[T](value: T, n: int) -> PullSource[T]:
    """Emit **value** **n** times.

    Args:
        value (T): The value to repeat.
        n (int): How many times. Must not be negative.

    Returns:
        PullSource[T]: The repeated value.

    Raises:
        InvalidArgumentError: If **n** is negative.

    Example:
    ```python
    >>> import pullchain as pc
    >>> pc.repeat("x", 3).into(list)
    ['x', 'x', 'x']

    ```
    """
    check_argument(n >= 0, "'n' can't be negative: %s", n)
    return Repeat(value, n)


def repeat_each[T](collection: Collection[T] | None, n: int) -> PullSource[T]:
    """Emit each element of **collection** **n** times in a row.

    Args:
        collection (Collection[T] | None): Elements to repeat. `None` is treated as empty.
        n (int): Repetitions per element. Must not be negative.

    Returns:
        PullSource[T]: `len(collection) * n` elements.

    Raises:
        InvalidArgumentError: If **n** is negative.

    Example:
    ```python
    >>> import pullchain as pc
    >>> pc.repeat_each([1, 2, 3], 2).into(list)
    [1, 1, 2, 2, 3, 3]

    ```
    """
    check_argument(n >= 0, "'n' can't be negative: %s", n)
    if n == 0 or _is_empty(collection):
        return EmptySource()
    return RepeatEach(as_source(collection), n)


def repeat_all[T](collection: Collection[T] | None, n: int) -> PullSource[T]:
    """Emit the whole **collection**, in order, **n** times.

    Args:
        collection (Collection[T] | None): Elements to repeat. `None` is treated as empty.
        n (int): Number of passes. Must not be negative.

    Returns:
        PullSource[T]: `len(collection) * n` elements.

    Raises:
        InvalidArgumentError: If **n** is negative.

    Example:
    ```python
    >>> import pullchain as pc
    >>> pc.repeat_all([1, 2, 3], 2).into(list)
    [1, 2, 3, 1, 2, 3]

    ```
    """
    check_argument(n >= 0, "'n' can't be negative: %s", n)
    if n == 0 or _is_empty(collection):
        return EmptySource()
    return RepeatAll(collection, len(collection) * n)


def repeat_each_to_size[T](collection: Collection[T] | None, size: int) -> PullSource[T]:
    """Repeat each element of **collection** so that exactly **size** elements are emitted.

    Every element is emitted `size // len(collection)` times, and the first `size % len(collection)` elements once more.

    Args:
        collection (Collection[T] | None): Elements to repeat.
        size (int): Exact number of elements to emit. Must not be negative.

    Returns:
        PullSource[T]: Exactly **size** elements.

    Raises:
        InvalidArgumentError: If **size** is negative, or positive while **collection** is empty or `None`.

    Example:
    ```python
    >>> import pullchain as pc
    >>> pc.repeat_each_to_size("abc", 7).into("".join)
    'aaabbcc'
    >>> pc.repeat_each_to_size("abc", 2).into("".join)
    'ab'

    ```
    """
    check_argument(size >= 0, "'size' can't be negative: %s", size)
    check_argument(
        size == 0 or not _is_empty(collection),
        "collection can't be empty or None when size > 0",
    )
    if size == 0 or collection is None:
        return EmptySource()
    per_element, remainder = divmod(size, len(collection))
    logger.debug(
        "repeat_each_to_size: %d per element, %d remainder over %d elements",
        per_element,
        remainder,
        len(collection),
    )
    return RepeatEach(as_source(collection), per_element, remainder)


def repeat_all_to_size[T](collection: Collection[T] | None, size: int) -> PullSource[T]:
    """Cycle through the whole **collection** until exactly **size** elements are emitted.

    The last pass is truncated if **size** is not a multiple of the collection length.

    Args:
        collection (Collection[T] | None): Elements to repeat.
        size (int): Exact number of elements to emit. Must not be negative.

    Returns:
        PullSource[T]: Exactly **size** elements.

    Raises:
        InvalidArgumentError: If **size** is negative, or positive while **collection** is empty or `None`.

    Example:
    ```python
    >>> import pullchain as pc
    >>> pc.repeat_all_to_size([1, 2, 3], 7).into(list)
    [1, 2, 3, 1, 2, 3, 1]

    ```
    """
    check_argument(size >= 0, "'size' can't be negative: %s", size)
    check_argument(
        size == 0 or not _is_empty(collection),
        "collection can't be empty or None when size > 0",
    )
    if size == 0 or collection is None:
        return EmptySource()
    logger.debug(
        "repeat_all_to_size: %d full passes, %d trailing elements",
        *divmod(size, len(collection)),
    )
    return RepeatAll(collection, size)
