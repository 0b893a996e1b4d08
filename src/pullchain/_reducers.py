"""Terminal operations: they drive a source (partly or fully) and return a plain value."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any

import cytoolz as cz

from ._core import require_callable
from ._option import NONE, Option, Some
from ._source import as_source
from ._split import skip_null
from ._types import Destination, Unzipped, Unzipped3

type Factory = Callable[[], Destination[Any]]
"""Builds an empty destination container."""


def first[T](source: Iterable[T] | None) -> Option[T]:
    """Return the first element of **source**, pulling at most one element.

    Args:
        source (Iterable[T] | None): The source.

    Returns:
        Option[T]: `Some(first)`, or `NONE` if the source is empty. A `None` first element gives `Some(None)`.

    Example:
    ```python
    >>> import pullchain as pc
    >>> pc.first([None, 2])
    Some(value=None)
    >>> pc.first([])
    NONE

    ```
    """
    src = as_source(source)
    return Some(next(src)) if src.has_next() else NONE


def last[T](source: Iterable[T] | None) -> Option[T]:
    """Return the last element of **source**, draining it in a single pass.

    Example:
    ```python
    >>> import pullchain as pc
    >>> pc.last(iter([7, 8, 9]))
    Some(value=9)
    >>> pc.last(None)
    NONE

    ```
    """
    src = as_source(source)
    if not src.has_next():
        return NONE
    return Some(cz.itertoolz.last(src))


def first_non_null[T](source: Iterable[T | None] | None) -> Option[T]:
    """Return the first element of **source** that is not `None`.

    Pulls elements up to and including that one.

    Example:
    ```python
    >>> import pullchain as pc
    >>> pc.first_non_null([None, None, 3, 4])
    Some(value=3)
    >>> pc.first_non_null([None])
    NONE

    ```
    """
    return first(skip_null(source))


def last_non_null[T](source: Iterable[T | None] | None) -> Option[T]:
    """Return the last element of **source** that is not `None`, draining it.

    Example:
    ```python
    >>> import pullchain as pc
    >>> pc.last_non_null([1, 2, None])
    Some(value=2)

    ```
    """
    return last(skip_null(source))


def fold_until[T, R](
    source: Iterable[T] | None,
    seed: R,
    accumulator: Callable[[R, T], R],
    break_when: Callable[[R, T], bool],
) -> R:
    """Fold **source** into an accumulator, stopping as soon as **break_when** is satisfied.

    After each accumulation step, **break_when** is called with the new accumulated value and the element just consumed.

    When it returns `True`, the fold stops without pulling any further element, so this works on infinite or expensive sources.

    Args:
        source (Iterable[T] | None): The source to fold. `None` returns **seed**.
        seed (R): Initial accumulated value.
        accumulator (Callable[[R, T], R]): Combines the accumulated value with the next element.
        break_when (Callable[[R, T], bool]): Stop condition, evaluated after each step.

    Returns:
        R: The accumulated value when the source is exhausted or the condition is met.

    Example:
    ```python
    >>> import pullchain as pc
    >>> src = pc.Iter([1, 2, 3, 4, 5])
    >>> pc.fold_until(src, 0, lambda acc, x: acc + x, lambda acc, _: acc >= 6)
    6
    >>> src.collect()
    Seq(4, 5)

    ```
    """
    require_callable(accumulator, "accumulator")
    require_callable(break_when, "break_when")
    src = as_source(source)
    result = seed
    while src.has_next():
        element = next(src)
        result = accumulator(result, element)
        if break_when(result, element):
            break
    return result


def fold_until_indexed[T, R](
    source: Iterable[T] | None,
    seed: R,
    accumulator: Callable[[R, int, T], R],
    break_when: Callable[[R, T], bool],
) -> R:
    """Like `fold_until`, but **accumulator** also receives the 0-based index of the element.

    Example:
    ```python
    >>> import pullchain as pc
    >>> pc.fold_until_indexed(
    ...     "abcd", "", lambda acc, i, c: acc + c * (i + 1), lambda acc, _: len(acc) > 4
    ... )
    'abbccc'

    ```
    """
    require_callable(accumulator, "accumulator")
    require_callable(break_when, "break_when")
    src = as_source(source)
    result = seed
    index = 0
    while src.has_next():
        element = next(src)
        result = accumulator(result, index, element)
        if break_when(result, element):
            break
        index += 1
    return result


def for_each[T](source: Iterable[T] | None, action: Callable[[T], object]) -> None:
    """Drain **source**, calling **action** on each element.

    Example:
    ```python
    >>> import pullchain as pc
    >>> pc.for_each(pc.repeat("hi", 2), print)
    hi
    hi

    ```
    """
    require_callable(action, "action")
    for element in as_source(source):
        action(element)


def for_each_indexed[T](
    source: Iterable[T] | None, action: Callable[[int, T], object]
) -> None:
    """Drain **source**, calling **action** with the 0-based index and each element.

    Example:
    ```python
    >>> import pullchain as pc
    >>> pc.for_each_indexed("ab", lambda i, c: print(i, c))
    0 a
    1 b

    ```
    """
    require_callable(action, "action")
    for index, element in enumerate(as_source(source)):
        action(index, element)


def for_each_flat[T, U](
    source: Iterable[T] | None,
    flat_mapper: Callable[[T], Iterable[U] | None],
    action: Callable[[T, U], object],
) -> None:
    """Drain **source**, calling **action** on each element paired with each of its inner elements.

    The inner elements are given by **flat_mapper**. A `None` or empty result skips the element.

    Args:
        source (Iterable[T] | None): The outer source.
        flat_mapper (Callable[[T], Iterable[U] | None]): Gives the inner elements of an outer one.
        action (Callable[[T, U], object]): Called with `(outer, inner)`.

    Example:
    ```python
    >>> import pullchain as pc
    >>> teams = {"red": ["ann", "bob"], "blue": [], "green": ["cid"]}
    >>> pc.for_each_flat(teams, teams.get, lambda t, m: print(t, m))
    red ann
    red bob
    green cid

    ```
    """
    require_callable(flat_mapper, "flat_mapper")
    require_callable(action, "action")
    for element in as_source(source):
        for inner in as_source(flat_mapper(element)):
            action(element, inner)


def for_each_flat3[T, U, V](
    source: Iterable[T] | None,
    flat_mapper: Callable[[T], Iterable[U] | None],
    flat_mapper2: Callable[[U], Iterable[V] | None],
    action: Callable[[T, U, V], object],
) -> None:
    """Two levels of `for_each_flat`: **action** receives `(outer, inner, innermost)`.

    Example:
    ```python
    >>> import pullchain as pc
    >>> pc.for_each_flat3([2], range, range, lambda a, b, c: print(a, b, c))
    2 1 0

    ```
    """
    require_callable(flat_mapper, "flat_mapper")
    require_callable(flat_mapper2, "flat_mapper2")
    require_callable(action, "action")
    for element in as_source(source):
        for inner in as_source(flat_mapper(element)):
            for innermost in as_source(flat_mapper2(inner)):
                action(element, inner, innermost)


def for_each_non_null[T, U](
    source: Iterable[T | None] | None,
    flat_mapper: Callable[[T], Iterable[U | None] | None],
    action: Callable[[T, U], object],
) -> None:
    """Like `for_each_flat`, skipping `None` outer and inner elements.

    **flat_mapper** is never called with `None`.

    Example:
    ```python
    >>> import pullchain as pc
    >>> data = [None, ("x", [1, None, 2])]
    >>> pc.for_each_non_null(data, lambda t: t[1], lambda t, n: print(t[0], n))
    x 1
    x 2

    ```
    """
    require_callable(flat_mapper, "flat_mapper")
    require_callable(action, "action")
    for element in skip_null(source):
        for inner in skip_null(flat_mapper(element)):
            action(element, inner)


def for_each_non_null3[T, U, V](
    source: Iterable[T | None] | None,
    flat_mapper: Callable[[T], Iterable[U | None] | None],
    flat_mapper2: Callable[[U], Iterable[V | None] | None],
    action: Callable[[T, U, V], object],
) -> None:
    """Like `for_each_flat3`, skipping `None` elements at every level."""
    require_callable(flat_mapper, "flat_mapper")
    require_callable(flat_mapper2, "flat_mapper2")
    require_callable(action, "action")
    for element in skip_null(source):
        for inner in skip_null(flat_mapper(element)):
            for innermost in skip_null(flat_mapper2(inner)):
                action(element, inner, innermost)


def unzip[T, L, R](
    source: Iterable[T] | None,
    splitter: Callable[[T], tuple[L, R]],
    factory: Factory = list,
) -> Unzipped[L, R]:
    """Split every element of **source** in two, appending each half to its own destination.

    This is, in some sense, the opposite of `zip_with`.

    Args:
        source (Iterable[T] | None): The source, drained once.
        splitter (Callable[[T], tuple[L, R]]): Splits one element into its two fields.
        factory (Factory): Builds each destination. Anything with `append` works. Defaults to `list`.

    Returns:
        Unzipped[L, R]: The two destinations, in source order.

    Example:
    ```python
    >>> import pullchain as pc
    >>> res = pc.unzip(["a1", "b2"], lambda s: (s[0], int(s[1])))
    >>> res.left, res.right
    (['a', 'b'], [1, 2])

    ```
    """
    require_callable(splitter, "splitter")
    require_callable(factory, "factory")
    left: Destination[L] = factory()
    right: Destination[R] = factory()
    src = as_source(source)
    while src.has_next():
        lhs, rhs = splitter(next(src))
        left.append(lhs)
        right.append(rhs)
    return Unzipped(left, right)


def unzip3[T, L, M, R](
    source: Iterable[T] | None,
    splitter: Callable[[T], tuple[L, M, R]],
    factory: Factory = list,
) -> Unzipped3[L, M, R]:
    """Three-way `unzip`.

    Example:
    ```python
    >>> import pullchain as pc
    >>> res = pc.unzip3([(1, "a", True), (2, "b", False)], lambda t: t)
    >>> res.left, res.middle, res.right
    ([1, 2], ['a', 'b'], [True, False])

    ```
    """
    require_callable(splitter, "splitter")
    require_callable(factory, "factory")
    left: Destination[L] = factory()
    middle: Destination[M] = factory()
    right: Destination[R] = factory()
    src = as_source(source)
    while src.has_next():
        lhs, mid, rhs = splitter(next(src))
        left.append(lhs)
        middle.append(mid)
        right.append(rhs)
    return Unzipped3(left, middle, right)


unzipp = unzip3
"""Alternative name of `unzip3`."""
