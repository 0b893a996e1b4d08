from __future__ import annotations

from collections.abc import Iterable, Iterator, MutableSequence, Sequence
from typing import TYPE_CHECKING, Any, overload

import cytoolz as cz

from ._core import CommonBase, get_config

if TYPE_CHECKING:
    from ._iter import Iter


def convert_data[T](data: Iterable[T] | T, *more_data: T) -> Iterable[T]:
    """Return **data** if it is iterable, else pack it with **more_data** into a tuple."""
    return data if cz.itertoolz.isiterable(data) else (data, *more_data)  # type: ignore[return-value]


class CommonMethods[T](CommonBase[Sequence[T]]):
    """Shared behaviour of the eager `Seq` and `Vec` collections."""

    _inner: Sequence[T]

    __slots__ = ()

    def __iter__(self) -> Iterator[T]:
        return iter(self._inner)

    def __len__(self) -> int:
        return len(self._inner)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({get_config().iter_repr(self._inner)})"

    def iter(self) -> Iter[T]:
        """Get a lazy `Iter` over the collection.

        The collection itself is left untouched, and can be iterated again.

        Returns:
            Iter[T]: A new `Iter` over the elements.

        Example:
        ```python
        >>> import pullchain as pc
        >>> data = pc.Seq((1, 2, 3))
        >>> data.iter().skip_null().collect()
        Seq(1, 2, 3)
        >>> data.iter().last()
        Some(value=3)

        ```
        """
        from ._iter import Iter  # noqa: PLC0415

        return Iter(self._inner)

    def eq(self, other: Iterable[T]) -> bool:
        """Check if the elements are equal to the ones of **other**, in order.

        Note:
            This will drain **other** if it is a lazy source.

        Example:
        ```python
        >>> import pullchain as pc
        >>> pc.Seq((1, 2, 3)).eq(pc.Vec([1, 2, 3]))
        True
        >>> pc.Seq((1, 2)).eq(pc.Iter([1, 2, 3]))
        False

        ```
        """
        return tuple(self._inner) == tuple(other)

    def length(self) -> int:
        """Return the number of elements.

        Example:
        ```python
        >>> import pullchain as pc
        >>> pc.Vec([1, 2]).length()
        2

        ```
        """
        return len(self._inner)


class Seq[T](CommonMethods[T], Sequence[T]):
    """`Seq` represent an in memory, immutable Sequence.

    Implements the `Sequence` Protocol from `collections.abc`, so it can be used as a standard immutable sequence.

    It is the default return type of `Iter.collect()`, and a valid `Collection` for the repeat family.

    The underlying data structure is an immutable tuple.

    If you already have a tuple, simply pass it to the constructor, without runtime checks.

    Args:
        data (tuple[T, ...]): The data to initialize the Seq with.
    """

    _inner: tuple[T, ...]

    __slots__ = ()

    def __init__(self, data: tuple[T, ...]) -> None:
        self._inner = data  # pyright: ignore[reportIncompatibleVariableOverride]

    @overload
    def __getitem__(self, index: int) -> T: ...
    @overload
    def __getitem__(self, index: slice) -> Sequence[T]: ...
    def __getitem__(self, index: int | slice) -> T | Sequence[T]:
        return self._inner.__getitem__(index)

    @overload
    @staticmethod
    def from_[U](data: Iterable[U]) -> Seq[U]: ...
    @overload
    @staticmethod
    def from_[U](data: U, *more_data: U) -> Seq[U]: ...
    @staticmethod
    def from_[U](data: Iterable[U] | U, *more_data: U) -> Seq[U]:
        """Create a `Seq` from an `Iterable` or unpacked values.

        Prefer using the standard constructor, as this method involves extra checks and conversions steps.

        Args:
            data (Iterable[U] | U): Iterable to convert into a sequence, or a single value.
            *more_data (U): Unpacked items to include in the sequence, if 'data' is not an Iterable.

        Returns:
            Seq[U]: A new Seq instance containing the provided data.

        Example:
        ```python
        >>> import pullchain as pc
        >>> pc.Seq.from_(1, 2, 3)
        Seq(1, 2, 3)
        >>> pc.Seq.from_([1, 2])
        Seq(1, 2)

        ```
        """
        converted = convert_data(data, *more_data)
        return Seq(converted if isinstance(converted, tuple) else tuple(converted))


class Vec[T](Seq[T], MutableSequence[T]):
    """A growable, list-backed sequence.

    It is what `Iter.collect(list)` returns, and it satisfies the destination contract of `unzip` (`append`, `len`, iteration).

    If you already have a list, simply pass it to the constructor, without runtime checks.

    Args:
        data (list[T]): The list to wrap.
    """

    _inner: list[T]  # type: ignore[assignment]

    __slots__ = ()

    def __init__(self, data: list[T]) -> None:
        self._inner = data  # type: ignore[assignment]

    @overload
    def __setitem__(self, index: int, value: T) -> None: ...
    @overload
    def __setitem__(self, index: slice, value: Iterable[T]) -> None: ...
    def __setitem__(self, index: int | slice, value: Any) -> None:  # noqa: ANN401
        self._inner.__setitem__(index, value)

    def __delitem__(self, index: int | slice) -> None:
        self._inner.__delitem__(index)

    def insert(self, index: int, value: T) -> None:
        self._inner.insert(index, value)

    def append(self, value: T) -> None:
        """Append an element at the end.

        Example:
        ```python
        >>> import pullchain as pc
        >>> vec = pc.Vec.new()
        >>> vec.append(1)
        >>> vec.append(2)
        >>> vec
        Vec(1, 2)

        ```
        """
        self._inner.append(value)

    def extend(self, values: Iterable[T]) -> None:
        self._inner.extend(values)

    @staticmethod
    def new() -> Vec[T]:
        """Create an empty `Vec`.

        Usable as a destination factory, e.g. `pc.unzip(data, f, pc.Vec.new)`.

        Returns:
            Vec[T]: A new empty Vec instance.
        """
        return Vec([])
