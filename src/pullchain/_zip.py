from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any

from ._core import require_callable
from ._source import PullSource, as_source


class Zip[R](PullSource[R]):
    """Positional combination, stopping at the shortest child.

    `next()` pulls from every child unconditionally: it only runs after `has_next()` confirmed that all of them have an element.
    """

    __slots__ = ("_func", "_sources")

    def __init__(
        self, sources: tuple[PullSource[Any], ...], func: Callable[..., R]
    ) -> None:
        self._sources = sources
        self._func = func

    def has_next(self) -> bool:
        return all(src.has_next() for src in self._sources)

    def _pull(self) -> R:
        return self._func(*[next(src) for src in self._sources])


class ZipLongest[R](PullSource[R]):
    """Positional combination, running until the longest child is exhausted.

    Every exhausted child contributes its own default, for every remaining position.
    """

    __slots__ = ("_defaults", "_func", "_sources")

    def __init__(
        self,
        sources: tuple[PullSource[Any], ...],
        defaults: tuple[Any, ...],
        func: Callable[..., R],
    ) -> None:
        self._sources = sources
        self._defaults = defaults
        self._func = func

    def has_next(self) -> bool:
        return any(src.has_next() for src in self._sources)

    def _pull(self) -> R:
        return self._func(
            *[
                next(src) if src.has_next() else default
                for src, default in zip(self._sources, self._defaults, strict=True)
            ]
        )


def zip_with[A, B, R](
    a: Iterable[A] | None,
    b: Iterable[B] | None,
    func: Callable[[A, B], R],
) -> PullSource[R]:
    """Combine two sources position by position, stopping at the shortest.

    Args:
        a (Iterable[A] | None): Left source.
        b (Iterable[B] | None): Right source.
        func (Callable[[A, B], R]): Combining function.

    Returns:
        PullSource[R]: `func(a[i], b[i])` for every shared position.

    Example:
    ```python
    >>> import pullchain as pc
    >>> pc.zip_with([1, 2, 3], [10, 20], lambda x, y: x + y).into(list)
    [11, 22]

    ```
    """
    require_callable(func, "func")
    return Zip((as_source(a), as_source(b)), func)


def zip_with3[A, B, C, R](
    a: Iterable[A] | None,
    b: Iterable[B] | None,
    c: Iterable[C] | None,
    func: Callable[[A, B, C], R],
) -> PullSource[R]:
    """Three-way `zip_with`.

    Example:
    ```python
    >>> import pullchain as pc
    >>> pc.zip_with3("ab", [1, 2], (True, False, True), lambda *t: t).into(list)
    [('a', 1, True), ('b', 2, False)]

    ```
    """
    require_callable(func, "func")
    return Zip((as_source(a), as_source(b), as_source(c)), func)


def zip_longest_with[A, B, R](  # noqa: PLR0913
    a: Iterable[A] | None,
    b: Iterable[B] | None,
    default_a: A,
    default_b: B,
    func: Callable[[A, B], R],
) -> PullSource[R]:
    """Combine two sources position by position, padding the shortest with its default.

    Args:
        a (Iterable[A] | None): Left source.
        b (Iterable[B] | None): Right source.
        default_a (A): Value passed in place of **a** elements once **a** is exhausted.
        default_b (B): Value passed in place of **b** elements once **b** is exhausted.
        func (Callable[[A, B], R]): Combining function.

    Returns:
        PullSource[R]: One element per position of the longest source.

    Example:
    ```python
    >>> import pullchain as pc
    >>> pc.zip_longest_with([1], "abc", 0, "-", lambda x, y: f"{x}{y}").into(list)
    ['1a', '0b', '0c']

    ```
    """
    require_callable(func, "func")
    return ZipLongest((as_source(a), as_source(b)), (default_a, default_b), func)


def zip_longest_with3[A, B, C, R](  # noqa: PLR0913
    a: Iterable[A] | None,
    b: Iterable[B] | None,
    c: Iterable[C] | None,
    default_a: A,
    default_b: B,
    default_c: C,
    func: Callable[[A, B, C], R],
) -> PullSource[R]:
    """Three-way `zip_longest_with`.

    Each side falls back to its own default, independently of the others.

    Example:
    ```python
    >>> import pullchain as pc
    >>> pc.zip_longest_with3([1, 2], [3], [], 0, 0, 0, lambda *t: t).into(list)
    [(1, 3, 0), (2, 0, 0)]

    ```
    """
    require_callable(func, "func")
    return ZipLongest(
        (as_source(a), as_source(b), as_source(c)),
        (default_a, default_b, default_c),
        func,
    )
