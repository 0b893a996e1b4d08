"""Shared fixtures for pullchain tests."""

from collections.abc import Iterable, Iterator

import pytest

import pullchain as pc


class Counting[T](pc.PullSource[T]):
    """A list-backed source recording every element handed out."""

    __slots__ = ("_data", "_pos", "pulled")

    def __init__(self, data: Iterable[T]) -> None:
        self._data = list(data)
        self._pos = 0
        self.pulled: list[T] = []

    def has_next(self) -> bool:
        return self._pos < len(self._data)

    def _pull(self) -> T:
        value = self._data[self._pos]
        self._pos += 1
        self.pulled.append(value)
        return value


class Watched[T]:
    """A sized collection recording which elements were iterated over."""

    def __init__(self, data: Iterable[T]) -> None:
        self._data = list(data)
        self.seen: list[T] = []
        self.iterations = 0

    def __len__(self) -> int:
        return len(self._data)

    def __contains__(self, value: object) -> bool:
        return value in self._data

    def __iter__(self) -> Iterator[T]:
        self.iterations += 1
        for value in self._data:
            self.seen.append(value)
            yield value


@pytest.fixture
def counting() -> type[Counting[object]]:
    """The list-backed source class recording pulls."""
    return Counting


@pytest.fixture
def watched() -> type[Watched[object]]:
    """The collection class recording iterations."""
    return Watched
