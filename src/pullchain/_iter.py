from __future__ import annotations

import itertools
from collections.abc import Callable, Collection, Iterable
from typing import TYPE_CHECKING, Any, Concatenate, overload

from ._concat import concat, flatten
from ._core import CommonBase, check_argument, require_callable
from ._eager import Seq, Vec, convert_data
from ._merge import Selector, merge
from ._option import Option
from ._reducers import (
    Factory,
    first,
    first_non_null,
    fold_until,
    fold_until_indexed,
    for_each_flat,
    for_each_indexed,
    for_each_non_null,
    last,
    last_non_null,
    unzip,
    unzip3,
)
from ._repeat import (
    repeat,
    repeat_all,
    repeat_all_to_size,
    repeat_each,
    repeat_each_to_size,
)
from ._source import EmptySource, PullSource, as_source, generate, generate_seeded
from ._split import skip_null, split
from ._zip import zip_longest_with, zip_longest_with3, zip_with, zip_with3

if TYPE_CHECKING:
    from ._types import Unzipped, Unzipped3


class Iter[T](CommonBase[PullSource[T]], PullSource[T]):
    """A fluent wrapper around a `PullSource`, chaining combinators as methods.

    `Iter` is itself a `PullSource`, and a regular Python `Iterator`: it can be handed to any combinator, or iterated over in a for-loop.

    Every lazy method hands the wrapped source over to a new combinator and returns a new `Iter` around it.

    Nothing is pulled until the result is driven, by calling `next()`, iterating, or one of the terminal methods (`collect()`, `first()`, `fold_until()`...).

    Keep in mind that `Iter` instances are single-use: once a method took ownership of the source, the previous `Iter` must not be driven anymore.

    If you need to reuse the data, collect it first with `.collect()`, then call `.iter()` on the result.

    Args:
        data (Iterable[T] | None): Any iterable, or `None` for an empty source.

    Example:
    ```python
    >>> import pullchain as pc
    >>> (
    ...     pc.Iter([1, None, 3, 4, None, 6])
    ...     .skip_null()
    ...     .map(lambda x: x * 10)
    ...     .split(2)
    ...     .collect()
    ... )
    Seq([10, 30], [40, 60])

    ```
    """

    _inner: PullSource[T]

    __slots__ = ()

    def __init__(self, data: Iterable[T] | None) -> None:
        self._inner = as_source(data)

    def __repr__(self) -> str:
        return f"Iter({self._inner.__class__.__name__})"

    def has_next(self) -> bool:
        return self._inner.has_next()

    def _pull(self) -> T:
        return next(self._inner)

    def next(self) -> Option[T]:
        """Return the next element, wrapped in an `Option`.

        Unlike the builtin `next()`, this does not raise on an exhausted source.

        Returns:
            Option[T]: `Some[T]`, or `NONE` if the source is exhausted.

        Example:
        ```python
        >>> import pullchain as pc
        >>> it = pc.Iter([1, 2])
        >>> it.next(), it.next(), it.next()
        (Some(value=1), Some(value=2), NONE)

        ```
        """
        return first(self._inner)

    # constructors ------------------------------------------------------------

    @overload
    @staticmethod
    def from_[U](data: Iterable[U]) -> Iter[U]: ...
    @overload
    @staticmethod
    def from_[U](data: U, *more_data: U) -> Iter[U]: ...
    @staticmethod
    def from_[U](data: Iterable[U] | U, *more_data: U) -> Iter[U]:
        """Create an `Iter` from any Iterable, or from unpacked values.

        Prefer using the standard constructor, as this method involves extra checks and conversions steps.

        Example:
        ```python
        >>> import pullchain as pc
        >>> pc.Iter.from_(1, 2, 3).collect()
        Seq(1, 2, 3)

        ```
        """
        return Iter(convert_data(data, *more_data))

    @staticmethod
    def empty() -> Iter[T]:
        """Create an exhausted `Iter`."""
        return Iter(EmptySource())

    @staticmethod
    def concat[U](*sources: Iterable[U] | None) -> Iter[U]:
        """See `pullchain.concat`."""
        return Iter(concat(*sources))

    @staticmethod
    def generate[U](has_next: Callable[[], bool], supplier: Callable[[], U]) -> Iter[U]:
        """See `pullchain.generate`."""
        return Iter(generate(has_next, supplier))

    @staticmethod
    def generate_seeded[S, U](
        seed: S, has_next: Callable[[S], bool], supplier: Callable[[S], U]
    ) -> Iter[U]:
        """See `pullchain.generate_seeded`."""
        return Iter(generate_seeded(seed, has_next, supplier))

    @staticmethod
    def repeat[U](value: U, n: int) -> Iter[U]:
        """See `pullchain.repeat`."""
        return Iter(repeat(value, n))

    @staticmethod
    def repeat_each[U](collection: Collection[U] | None, n: int) -> Iter[U]:
        """See `pullchain.repeat_each`."""
        return Iter(repeat_each(collection, n))

    @staticmethod
    def repeat_all[U](collection: Collection[U] | None, n: int) -> Iter[U]:
        """See `pullchain.repeat_all`."""
        return Iter(repeat_all(collection, n))

    @staticmethod
    def repeat_each_to_size[U](collection: Collection[U] | None, size: int) -> Iter[U]:
        """See `pullchain.repeat_each_to_size`.

        Example:
        ```python
        >>> import pullchain as pc
        >>> pc.Iter.repeat_each_to_size(pc.Seq(("a", "b", "c")), 7).collect()
        Seq('a', 'a', 'a', 'b', 'b', 'c', 'c')

        ```
        """
        return Iter(repeat_each_to_size(collection, size))

    @staticmethod
    def repeat_all_to_size[U](collection: Collection[U] | None, size: int) -> Iter[U]:
        """See `pullchain.repeat_all_to_size`."""
        return Iter(repeat_all_to_size(collection, size))

    # lazy --------------------------------------------------------------------

    def _lazy[**P, U](
        self,
        factory: Callable[Concatenate[PullSource[T], P], Iterable[U]],
        *args: P.args,
        **kwargs: P.kwargs,
    ) -> Iter[U]:
        return Iter(factory(self._inner, *args, **kwargs))

    def chain(self, *others: Iterable[T] | None) -> Iter[T]:
        """Concatenate zero or more sources after this one.

        Example:
        ```python
        >>> import pullchain as pc
        >>> pc.Iter((1, 2)).chain((3, 4), [], [5]).collect()
        Seq(1, 2, 3, 4, 5)

        ```
        """
        return Iter(concat(self._inner, *others))

    def flatten[U](self: Iter[Iterable[U]]) -> Iter[U]:
        """Flatten one level of nesting.

        Example:
        ```python
        >>> import pullchain as pc
        >>> pc.Iter([[1, 2], [3]]).flatten().collect()
        Seq(1, 2, 3)

        ```
        """
        return self._lazy(flatten)

    def zip_with[U, R](
        self, other: Iterable[U] | None, func: Callable[[T, U], R]
    ) -> Iter[R]:
        """See `pullchain.zip_with`.

        Example:
        ```python
        >>> import pullchain as pc
        >>> pc.Iter([1, 2, 3]).zip_with("ab", lambda n, c: c * n).collect()
        Seq('a', 'bb')

        ```
        """
        return self._lazy(zip_with, other, func)

    def zip_with3[U, V, R](
        self,
        other: Iterable[U] | None,
        another: Iterable[V] | None,
        func: Callable[[T, U, V], R],
    ) -> Iter[R]:
        """See `pullchain.zip_with3`."""
        return self._lazy(zip_with3, other, another, func)

    def zip_longest_with[U, R](
        self,
        other: Iterable[U] | None,
        default: T,
        default_other: U,
        func: Callable[[T, U], R],
    ) -> Iter[R]:
        """See `pullchain.zip_longest_with`.

        Example:
        ```python
        >>> import pullchain as pc
        >>> pc.Iter([1, 2, 3]).zip_longest_with([10], 0, 0, lambda x, y: x + y).collect()
        Seq(11, 2, 3)

        ```
        """
        return self._lazy(zip_longest_with, other, default, default_other, func)

    def zip_longest_with3[U, V, R](  # noqa: PLR0913
        self,
        other: Iterable[U] | None,
        another: Iterable[V] | None,
        default: T,
        default_other: U,
        default_another: V,
        func: Callable[[T, U, V], R],
    ) -> Iter[R]:
        """See `pullchain.zip_longest_with3`."""
        return self._lazy(
            zip_longest_with3,
            other,
            another,
            default,
            default_other,
            default_another,
            func,
        )

    def merge(self, other: Iterable[T] | None, selector: Selector[T]) -> Iter[T]:
        """See `pullchain.merge`.

        Example:
        ```python
        >>> import pullchain as pc
        >>> pc.Iter([1, 4, 9]).merge([2, 3, 10], pc.ascending()).collect()
        Seq(1, 2, 3, 4, 9, 10)

        ```
        """
        return self._lazy(merge, other, selector)

    def split(self, size: int) -> Iter[list[T]]:
        """See `pullchain.split`."""
        return self._lazy(split, size)

    def skip_null[U](self: Iter[U | None]) -> Iter[U]:
        """See `pullchain.skip_null`."""
        return self._lazy(skip_null)

    def map[R](self, func: Callable[[T], R]) -> Iter[R]:
        """Apply **func** to each element, lazily.

        Example:
        ```python
        >>> import pullchain as pc
        >>> pc.Iter([1, 2]).map(str).collect()
        Seq('1', '2')

        ```
        """
        require_callable(func, "func")
        return self._lazy(lambda src: map(func, src))

    def filter(self, func: Callable[[T], bool]) -> Iter[T]:
        """Keep the elements for which **func** returns `True`, lazily.

        Example:
        ```python
        >>> import pullchain as pc
        >>> pc.Iter(range(6)).filter(lambda x: x % 2 == 0).collect()
        Seq(0, 2, 4)

        ```
        """
        require_callable(func, "func")
        return self._lazy(lambda src: filter(func, src))

    def take(self, n: int) -> Iter[T]:
        """Yield at most the first **n** elements.

        Useful to bound an infinite `generate()` source.

        Example:
        ```python
        >>> import pullchain as pc
        >>> pc.Iter.generate(lambda: True, lambda: 1).take(3).collect()
        Seq(1, 1, 1)

        ```
        """
        check_argument(n >= 0, "'n' can't be negative: %s", n)
        return self._lazy(itertools.islice, n)

    # terminal ----------------------------------------------------------------

    @overload
    def collect(self) -> Seq[T]: ...
    @overload
    def collect(self, collector: Callable[[Iterable[T]], tuple[T, ...]]) -> Seq[T]: ...
    @overload
    def collect(self, collector: Callable[[Iterable[T]], list[T]]) -> Vec[T]: ...
    def collect(
        self,
        collector: Callable[[Iterable[T]], tuple[T, ...]]
        | Callable[[Iterable[T]], list[T]] = tuple,
    ) -> Seq[T] | Vec[T]:
        """Drain the source into a collection.

        Args:
            collector (Callable[[Iterable[T]], tuple[T, ...] | list[T]]): `tuple` (the default) produces a `Seq`, `list` produces a `Vec`.

        Returns:
            Seq[T] | Vec[T]: The collected elements.

        Example:
        ```python
        >>> import pullchain as pc
        >>> pc.Iter(range(3)).collect()
        Seq(0, 1, 2)
        >>> pc.Iter(range(3)).collect(list)
        Vec(0, 1, 2)

        ```
        """
        match collector(self._inner):
            case list() as data:
                return Vec(data)
            case data:
                return Seq(tuple(data))

    def for_each[**P](
        self,
        func: Callable[Concatenate[T, P], Any],
        *args: P.args,
        **kwargs: P.kwargs,
    ) -> None:
        """Drain the source, calling **func** on each element.

        Example:
        ```python
        >>> import pullchain as pc
        >>> pc.Iter([1, 2]).for_each(print)
        1
        2

        ```
        """
        for v in self._inner:
            func(v, *args, **kwargs)

    def for_each_indexed(self, action: Callable[[int, T], object]) -> None:
        """See `pullchain.for_each_indexed`."""
        for_each_indexed(self._inner, action)

    def for_each_flat[U](
        self,
        flat_mapper: Callable[[T], Iterable[U] | None],
        action: Callable[[T, U], object],
    ) -> None:
        """See `pullchain.for_each_flat`.

        Example:
        ```python
        >>> import pullchain as pc
        >>> pc.Iter(["ab", "", "c"]).for_each_flat(list, lambda s, c: print(s, c))
        ab a
        ab b
        c c

        ```
        """
        for_each_flat(self._inner, flat_mapper, action)

    def for_each_non_null[U](
        self,
        flat_mapper: Callable[[T], Iterable[U | None] | None],
        action: Callable[[T, U], object],
    ) -> None:
        """See `pullchain.for_each_non_null`."""
        for_each_non_null(self._inner, flat_mapper, action)

    def first(self) -> Option[T]:
        """See `pullchain.first`."""
        return first(self._inner)

    def last(self) -> Option[T]:
        """See `pullchain.last`."""
        return last(self._inner)

    def first_non_null[U](self: Iter[U | None]) -> Option[U]:
        """See `pullchain.first_non_null`."""
        return first_non_null(self._inner)

    def last_non_null[U](self: Iter[U | None]) -> Option[U]:
        """See `pullchain.last_non_null`."""
        return last_non_null(self._inner)

    def fold_until[R](
        self,
        seed: R,
        accumulator: Callable[[R, T], R],
        break_when: Callable[[R, T], bool],
    ) -> R:
        """See `pullchain.fold_until`.

        Example:
        ```python
        >>> import pullchain as pc
        >>> pc.Iter.generate(lambda: True, lambda: 2).fold_until(
        ...     1, lambda acc, x: acc * x, lambda acc, _: acc > 100
        ... )
        128

        ```
        """
        return fold_until(self._inner, seed, accumulator, break_when)

    def fold_until_indexed[R](
        self,
        seed: R,
        accumulator: Callable[[R, int, T], R],
        break_when: Callable[[R, T], bool],
    ) -> R:
        """See `pullchain.fold_until_indexed`."""
        return fold_until_indexed(self._inner, seed, accumulator, break_when)

    def unzip[L, R](
        self, splitter: Callable[[T], tuple[L, R]], factory: Factory = Vec.new
    ) -> Unzipped[L, R]:
        """See `pullchain.unzip`. Destinations are `Vec` by default.

        Example:
        ```python
        >>> import pullchain as pc
        >>> res = pc.Iter([(1, "a"), (2, "b")]).unzip(lambda t: t)
        >>> res.left
        Vec(1, 2)
        >>> res.right
        Vec('a', 'b')

        ```
        """
        return unzip(self._inner, splitter, factory)

    def unzip3[L, M, R](
        self, splitter: Callable[[T], tuple[L, M, R]], factory: Factory = Vec.new
    ) -> Unzipped3[L, M, R]:
        """See `pullchain.unzip3`. Destinations are `Vec` by default."""
        return unzip3(self._inner, splitter, factory)
