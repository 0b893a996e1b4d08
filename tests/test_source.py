"""Tests for the PullSource contract and its adapters."""

import logging
from collections.abc import Iterator

import pytest

import pullchain as pc


class _Refilling:
    """An iterator that starts yielding again after having raised StopIteration."""

    def __init__(self) -> None:
        self.calls = 0

    def __iter__(self) -> Iterator[int]:
        return self

    def __next__(self) -> int:
        self.calls += 1
        if self.calls == 2:  # noqa: PLR2004
            raise StopIteration
        return self.calls


def test_as_source_none_is_empty() -> None:
    """A missing source is an empty source, not an error."""
    src = pc.as_source(None)
    assert src.has_next() is False
    assert list(src) == []


def test_as_source_keeps_pull_sources() -> None:
    """Sources are passed through, iterables are wrapped."""
    src = pc.as_source([1, 2])
    assert pc.as_source(src) is src
    it = pc.Iter([1])
    assert pc.as_source(it) is it


def test_has_next_is_idempotent() -> None:
    """Querying has_next repeatedly never changes what next returns."""
    src = pc.as_source(iter([1, 2]))
    for _ in range(5):
        assert src.has_next()
    assert next(src) == 1
    assert src.has_next()
    assert src.has_next()
    assert next(src) == 2  # noqa: PLR2004
    assert not src.has_next()
    assert not src.has_next()


def test_next_past_exhaustion_raises() -> None:
    """Calling next on an exhausted source raises ExhaustedError."""
    src = pc.as_source([1])
    next(src)
    with pytest.raises(pc.ExhaustedError):
        next(src)
    with pytest.raises(StopIteration):
        next(pc.empty())


def test_exhaustion_is_latched() -> None:
    """Once has_next returned False it keeps returning False."""
    refilling = _Refilling()
    src = pc.as_source(refilling)
    assert next(src) == 1
    assert not src.has_next()
    assert not src.has_next()
    assert refilling.calls == 2  # noqa: PLR2004


def test_iter_source_is_lazy() -> None:
    """Wrapping an iterable pulls nothing from it."""
    it = iter([1, 2, 3])
    pc.as_source(it)
    assert next(it) == 1


def test_generate() -> None:
    """A generated source delegates to its two callbacks."""
    remaining = [3]

    def supply() -> int:
        remaining[0] -= 1
        return remaining[0]

    assert pc.generate(lambda: remaining[0] > 0, supply).into(list) == [2, 1, 0]


def test_generate_requires_callables() -> None:
    """Non-callable callbacks are rejected at construction."""
    with pytest.raises(pc.InvalidArgumentError):
        pc.generate(None, lambda: 1)  # type: ignore[arg-type]
    with pytest.raises(pc.InvalidArgumentError):
        pc.generate(lambda: True, 42)  # type: ignore[arg-type]


def test_invalid_argument_is_a_value_error() -> None:
    """InvalidArgumentError can be caught as a ValueError."""
    with pytest.raises(ValueError, match="can't be negative"):
        pc.repeat(1, -1)


def test_rejected_argument_is_logged(caplog: pytest.LogCaptureFixture) -> None:
    """Rejected construction arguments are logged at DEBUG level."""
    with (
        caplog.at_level(logging.DEBUG, logger="pullchain"),
        pytest.raises(pc.InvalidArgumentError),
    ):
        pc.split([1], 0)
    assert "'size' must be greater than 0" in caplog.text


def test_custom_source_works_with_builtins(counting: type) -> None:
    """A user-defined PullSource is a regular Python iterator."""
    src = counting([1, 2, 3])
    assert sum(src) == 6  # noqa: PLR2004
    assert src.pulled == [1, 2, 3]


def test_generate_seeded_shares_the_seed() -> None:
    """Both callbacks receive the same seed object."""
    countdown = [3]

    def supply(state: list[int]) -> int:
        state[0] -= 1
        return state[0]

    src = pc.generate_seeded(countdown, lambda state: state[0] > 0, supply)
    assert src.into(list) == [2, 1, 0]
    assert countdown == [0]
    with pytest.raises(pc.InvalidArgumentError):
        pc.generate_seeded(countdown, None, supply)  # type: ignore[arg-type]
