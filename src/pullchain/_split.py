from __future__ import annotations

from collections.abc import Iterable

import more_itertools as mit

from ._core import check_argument
from ._source import PullSource, as_source


class Split[T](PullSource[list[T]]):
    """Batch a source into lists, each filled when pulled."""

    __slots__ = ("_size", "_source")

    def __init__(self, source: PullSource[T], size: int) -> None:
        self._source = source
        self._size = size

    def has_next(self) -> bool:
        return self._source.has_next()

    def _pull(self) -> list[T]:
        return mit.take(self._size, self._source)


class SkipNull[T](PullSource[T]):
    """Drop `None` elements, looking ahead by at most one non-null element."""

    __slots__ = ("_buffered", "_next", "_source")

    def __init__(self, source: PullSource[T | None]) -> None:
        self._source = source
        self._next: T | None = None
        self._buffered = False

    def has_next(self) -> bool:
        while not self._buffered and self._source.has_next():
            value = next(self._source)
            if value is not None:
                self._next = value
                self._buffered = True
        return self._buffered

    def _pull(self) -> T:
        value = self._next
        self._next = None
        self._buffered = False
        return value  # type: ignore[return-value]


def split[T](source: Iterable[T] | None, size: int) -> PullSource[list[T]]:
    """Batch a source into lists of **size** elements.

    - Each chunk is a new `list`, filled only when it is pulled.
    - The last chunk may be shorter than **size**; this is not an error.

    Args:
        source (Iterable[T] | None): The source to batch.
        size (int): Number of elements per chunk. Must be positive.

    Returns:
        PullSource[list[T]]: The chunks.

    Raises:
        InvalidArgumentError: If **size** is not positive.

    Example:
    ```python
    >>> import pullchain as pc
    >>> pc.split([1, 2, 3, 4, 5], 2).into(list)
    [[1, 2], [3, 4], [5]]
    >>> pc.split([], 3).has_next()
    False

    ```
    """
    check_argument(size > 0, "'size' must be greater than 0, can't be: %s", size)
    return Split(as_source(source), size)


def skip_null[T](source: Iterable[T | None] | None) -> PullSource[T]:
    """Skip every `None` element of **source**.

    Args:
        source (Iterable[T | None] | None): The source to filter.

    Returns:
        PullSource[T]: The non-null elements, in order.

    Example:
    ```python
    >>> import pullchain as pc
    >>> pc.skip_null([None, 1, None, None, 2, None]).into(list)
    [1, 2]

    ```
    """
    return SkipNull(as_source(source))
