"""Tests for the repeat family."""

import logging

import pytest

import pullchain as pc


def test_repeat_value() -> None:
    """A single value is emitted exactly n times."""
    assert pc.repeat(None, 2).into(list) == [None, None]
    assert pc.repeat("x", 0).into(list) == []


def test_repeat_each_by_factor() -> None:
    """Each element is emitted n times in a row."""
    assert pc.repeat_each([1, 2, 3], 2).into(list) == [1, 1, 2, 2, 3, 3]
    assert pc.repeat_each([1, 2, 3], 0).into(list) == []
    assert pc.repeat_each(None, 3).into(list) == []
    assert pc.repeat_each([], 3).into(list) == []


def test_repeat_all_by_factor() -> None:
    """The whole collection is emitted n times."""
    assert pc.repeat_all([1, 2, 3], 2).into(list) == [1, 2, 3, 1, 2, 3]
    assert pc.repeat_all([1, 2, 3], 0).into(list) == []
    assert pc.repeat_all(None, 3).into(list) == []
    assert pc.repeat_all((), 3).into(list) == []


def test_repeat_each_to_size_distribution() -> None:
    """The remainder goes to the first elements."""
    assert pc.repeat_each_to_size(["a", "b", "c"], 7).into(list) == [
        "a",
        "a",
        "a",
        "b",
        "b",
        "c",
        "c",
    ]
    assert pc.repeat_each_to_size(["a", "b", "c"], 6).into("".join) == "aabbcc"
    assert pc.repeat_each_to_size(["a", "b", "c"], 1).into(list) == ["a"]
    assert pc.repeat_each_to_size(["a", "b", "c"], 0).into(list) == []
    assert pc.repeat_each_to_size(None, 0).into(list) == []


def test_repeat_all_to_size_truncates_last_pass() -> None:
    """The last pass stops as soon as the requested size is reached."""
    assert pc.repeat_all_to_size([1, 2, 3], 7).into(list) == [1, 2, 3, 1, 2, 3, 1]
    assert pc.repeat_all_to_size([1, 2, 3], 2).into(list) == [1, 2]
    assert pc.repeat_all_to_size([], 0).into(list) == []


@pytest.mark.parametrize("length", [1, 2, 3, 5])
@pytest.mark.parametrize("size", [0, 1, 4, 7, 10, 11])
def test_to_size_emits_exactly_size(length: int, size: int) -> None:
    """Both to-size flavours emit exactly the requested number of elements."""
    data = list(range(length))
    each = pc.repeat_each_to_size(data, size).into(list)
    every = pc.repeat_all_to_size(data, size).into(list)
    assert len(each) == size
    assert len(every) == size
    assert each == sorted(each)
    counts = [each.count(v) for v in data]
    assert max(counts) - min(counts) <= 1
    assert counts == sorted(counts, reverse=True)


@pytest.mark.parametrize(
    "factory",
    [pc.repeat_each, pc.repeat_all, pc.repeat_each_to_size, pc.repeat_all_to_size],
)
def test_negative_count_is_rejected(factory) -> None:  # noqa: ANN001
    """Negative counts and sizes raise."""
    with pytest.raises(pc.InvalidArgumentError, match="can't be negative"):
        factory([1, 2], -1)


@pytest.mark.parametrize("factory", [pc.repeat_each_to_size, pc.repeat_all_to_size])
@pytest.mark.parametrize("collection", [None, [], ()])
def test_to_size_requires_elements(factory, collection) -> None:  # noqa: ANN001
    """A positive size cannot be reached from an empty collection."""
    with pytest.raises(pc.InvalidArgumentError, match="can't be empty or None"):
        factory(collection, 3)


def test_repeat_each_never_pulls_unused_elements(watched: type) -> None:
    """Elements emitted zero times are never pulled from the collection."""
    data = watched(["a", "b", "c", "d"])
    assert pc.repeat_each_to_size(data, 2).into(list) == ["a", "b"]
    assert data.seen == ["a", "b"]


def test_repeat_each_pulls_elements_lazily(watched: type) -> None:
    """The next element is only pulled once the current one is used up."""
    data = watched([1, 2, 3])
    src = pc.repeat_each(data, 2)
    assert data.seen == []
    assert [next(src), next(src)] == [1, 1]
    assert data.seen == [1]
    assert next(src) == 2  # noqa: PLR2004
    assert data.seen == [1, 2]


def test_repeat_all_restarts_iteration_each_pass(watched: type) -> None:
    """A fresh iteration over the collection is started for every pass."""
    data = watched([1, 2, 3])
    src = pc.repeat_all_to_size(data, 7)
    assert isinstance(src, pc.PullSource)
    assert len(src.into(list)) == 7  # noqa: PLR2004
    assert data.iterations == 3  # noqa: PLR2004
    assert src.passes == 3  # noqa: PLR2004


def test_to_size_distribution_is_logged(caplog: pytest.LogCaptureFixture) -> None:
    """The computed distribution is logged at DEBUG level."""
    with caplog.at_level(logging.DEBUG, logger="pullchain"):
        pc.repeat_each_to_size([1, 2, 3], 7)
    assert "2 per element, 1 remainder over 3 elements" in caplog.text


def test_iter_repeat_constructors() -> None:
    """The repeat family is available as Iter constructors."""
    assert pc.Iter.repeat(0, 3).collect().eq((0, 0, 0))
    assert pc.Iter.repeat_all("ab", 2).collect(list).inner() == ["a", "b", "a", "b"]
    assert pc.Iter.repeat_all_to_size("ab", 3).into(list) == ["a", "b", "a"]
