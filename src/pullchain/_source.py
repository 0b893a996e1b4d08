from __future__ import annotations

from abc import abstractmethod
from collections.abc import Callable, Iterable, Iterator
from functools import partial

import more_itertools as mit

from ._core import Pipeable, require_callable
from ._errors import ExhaustedError


class PullSource[T](Iterator[T], Pipeable):
    """The minimal capability every combinator consumes and produces.

    A `PullSource` is a regular Python `Iterator` with one more operation, `has_next()`, which answers "is there another element?" without handing it out.

    Contract:

    - `has_next()` can be called any number of times. It has no observable effect beyond the internal buffering needed to answer truthfully.
    - Once `has_next()` returned `False`, it keeps returning `False`.
    - `next(source)` is only valid when `has_next()` is `True`, and raises `ExhaustedError` otherwise.
    - A source handed to a combinator is owned by it, and must not be driven from the outside anymore.

    Subclasses implement `has_next()` and `_pull()`.

    `_pull()` is only ever called right after `has_next()` returned `True`.
    """

    __slots__ = ()

    @abstractmethod
    def has_next(self) -> bool:
        """Return `True` if `next()` can be called at least once more.

        Example:
        ```python
        >>> import pullchain as pc
        >>> src = pc.as_source([1])
        >>> src.has_next(), src.has_next()
        (True, True)
        >>> next(src)
        1
        >>> src.has_next()
        False

        ```
        """
        ...

    @abstractmethod
    def _pull(self) -> T: ...

    def __next__(self) -> T:
        if not self.has_next():
            raise ExhaustedError
        return self._pull()


class EmptySource[T](PullSource[T]):
    """A source that never has an element."""

    __slots__ = ()

    def has_next(self) -> bool:
        return False

    def _pull(self) -> T:
        raise ExhaustedError


class IterSource[T](PullSource[T]):
    """Adapt any Python `Iterable` into a `PullSource`.

    Holds a one element lookahead, and latches exhaustion so an iterator that would start yielding again after raising `StopIteration` is never re-polled.
    """

    __slots__ = ("_done", "_it")

    def __init__(self, data: Iterable[T]) -> None:
        self._it = mit.peekable(data)
        self._done = False

    def has_next(self) -> bool:
        if not self._done and not self._it:
            self._done = True
        return not self._done

    def _pull(self) -> T:
        return next(self._it)


class Generated[T](PullSource[T]):
    """Delegate `has_next()` and `next()` to two caller callbacks."""

    __slots__ = ("_has_next", "_supplier")

    def __init__(self, has_next: Callable[[], bool], supplier: Callable[[], T]) -> None:
        self._has_next = has_next
        self._supplier = supplier

    def has_next(self) -> bool:
        return self._has_next()

    def _pull(self) -> T:
        return self._supplier()


def empty[T]() -> PullSource[T]:
    """Return a source with no elements.

    Example:
    ```python
    >>> import pullchain as pc
    >>> pc.empty().has_next()
    False

    ```
    """
    return EmptySource()


def as_source[T](data: Iterable[T] | None) -> PullSource[T]:
    """Normalize anything iterable into a `PullSource`.

    - `None` becomes an empty source, so a missing operand is never an error.
    - A `PullSource` (an `Iter` included) is returned as is.
    - Any other `Iterable` is wrapped lazily: nothing is pulled from it yet.

    Args:
        data (Iterable[T] | None): The data to adapt.

    Returns:
        PullSource[T]: A source over **data**.

    Example:
    ```python
    >>> import pullchain as pc
    >>> pc.as_source(None).has_next()
    False
    >>> src = pc.as_source(range(3))
    >>> pc.as_source(src) is src
    True
    >>> list(src)
    [0, 1, 2]

    ```
    """
    match data:
        case None:
            return EmptySource()
        case PullSource():
            return data
        case _:
            return IterSource(data)


def generate[T](has_next: Callable[[], bool], supplier: Callable[[], T]) -> PullSource[T]:
    """Build a source out of two callbacks.

    **Warning** ⚠️
        If **has_next** never returns `False`, this creates an infinite source.

    Args:
        has_next (Callable[[], bool]): Called for each `has_next()` query. Must honour the `PullSource` contract.
        supplier (Callable[[], T]): Called for each `next()`.

    Returns:
        PullSource[T]: The generated source.

    Example:
    ```python
    >>> import pullchain as pc
    >>> state = [0]
    >>> def bump() -> int:
    ...     state[0] += 1
    ...     return state[0]
    >>> pc.generate(lambda: state[0] < 3, bump).into(list)
    [1, 2, 3]

    ```
    """
    require_callable(has_next, "has_next")
    require_callable(supplier, "supplier")
    return Generated(has_next, supplier)


def generate_seeded[S, T](
    seed: S, has_next: Callable[[S], bool], supplier: Callable[[S], T]
) -> PullSource[T]:
    """Build a source out of two callbacks sharing a **seed** state.

    Both callbacks receive the same **seed** object on every call, so a mutable seed is the natural place to keep the iteration state.

    Args:
        seed (S): State handed to both callbacks.
        has_next (Callable[[S], bool]): Called with **seed** for each `has_next()` query.
        supplier (Callable[[S], T]): Called with **seed** for each `next()`.

    Returns:
        PullSource[T]: The generated source.

    Example:
    ```python
    >>> import pullchain as pc
    >>> pc.generate_seeded([3, 2, 1], bool, list.pop).into(list)
    [1, 2, 3]

    ```
    """
    require_callable(has_next, "has_next")
    require_callable(supplier, "supplier")
    return Generated(partial(has_next, seed), partial(supplier, seed))
