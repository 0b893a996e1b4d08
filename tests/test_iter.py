"""Tests for the fluent Iter wrapper and the eager collections."""

import itertools

import pytest

import pullchain as pc


def test_chained_pipeline() -> None:
    """Combinators can be chained as methods."""
    result = (
        pc.Iter([3, None, 1])
        .skip_null()
        .merge([2, 4], lambda a, b: pc.Selection.LEFT)
        .zip_longest_with(["a", "b"], 0, "-", lambda n, c: f"{n}{c}")
        .collect(list)
    )
    assert result.inner() == ["3a", "1b", "2-", "4-"]


def test_iter_is_a_pull_source() -> None:
    """An Iter can be handed to any combinator or builtin."""
    it = pc.Iter([1, 2, 3])
    assert isinstance(it, pc.PullSource)
    assert pc.zip_with(it, [10, 20], lambda a, b: a * b).into(list) == [10, 40]
    assert list(pc.Iter("ab")) == ["a", "b"]


def test_next_returns_option() -> None:
    """Iter.next never raises, it returns NONE once exhausted."""
    it = pc.Iter([1])
    assert it.next() == pc.Some(1)
    assert it.next() is pc.NONE
    assert it.next().unwrap_or(0) == 0
    with pytest.raises(pc.ExhaustedError):
        next(it)


def test_collect_variants() -> None:
    """collect builds a Seq by default and a Vec from list."""
    seq = pc.Iter(range(3)).collect()
    vec = pc.Iter(range(3)).collect(list)
    assert isinstance(seq, pc.Seq)
    assert not isinstance(seq, pc.Vec)
    assert isinstance(vec, pc.Vec)
    assert seq.eq(vec)
    vec.append(3)
    assert vec.length() == 4  # noqa: PLR2004
    assert seq.iter().chain(vec).collect().length() == 7  # noqa: PLR2004


def test_from_unpacked_values() -> None:
    """from_ accepts an iterable or unpacked values."""
    assert pc.Iter.from_(1, 2, 3).collect().eq([1, 2, 3])
    assert pc.Iter.from_([1, 2, 3]).collect().eq([1, 2, 3])
    assert pc.Seq.from_(4).eq([4])


def test_empty_and_none() -> None:
    """A None source and Iter.empty are both exhausted."""
    assert not pc.Iter(None).has_next()
    assert pc.Iter.empty().first() is pc.NONE
    assert pc.Iter(None).collect().length() == 0


def test_take() -> None:
    """take bounds an infinite source, and rejects negative counts."""
    assert pc.Iter(itertools.count()).take(3).collect().eq([0, 1, 2])
    assert pc.Iter([1, 2]).take(5).collect().eq([1, 2])
    with pytest.raises(pc.InvalidArgumentError):
        pc.Iter([1]).take(-1)


def test_map_and_filter() -> None:
    """map and filter are lazy and validate their function."""
    calls: list[int] = []

    def double(x: int) -> int:
        calls.append(x)
        return x * 2

    it = pc.Iter([1, 2, 3]).map(double).filter(lambda x: x > 2)  # noqa: PLR2004
    assert calls == []
    assert it.first() == pc.Some(4)
    assert calls == [1, 2]
    with pytest.raises(pc.InvalidArgumentError):
        pc.Iter([1]).map(None)  # type: ignore[arg-type]


def test_terminal_methods() -> None:
    """The reducers are available as methods."""
    assert pc.Iter([None, 1, 2, None]).first_non_null() == pc.Some(1)
    assert pc.Iter([None, 1, 2, None]).last_non_null() == pc.Some(2)
    assert pc.Iter([1, 2]).last() == pc.Some(2)
    total = pc.Iter(range(10)).fold_until(0, lambda a, x: a + x, lambda a, _: a > 5)  # noqa: PLR2004
    assert total == 6  # noqa: PLR2004
    res = pc.Iter(["a:1", "b:2"]).unzip(lambda s: tuple(s.split(":")))
    assert isinstance(res.left, pc.Vec)
    assert res.right.eq(["1", "2"])
    res3 = pc.Iter([(1, 2, 3)]).unzip3(lambda t: t, list)
    assert res3.middle == [2]


def test_for_each() -> None:
    """for_each drains the source, forwarding extra arguments."""
    out: list[int] = []
    pc.Iter([1, 2]).for_each(lambda x, n: out.append(x + n), 10)
    assert out == [11, 12]


def test_split_and_flatten_methods() -> None:
    """split and flatten are inverse operations."""
    chunks = pc.Iter(range(5)).split(2).collect()
    assert chunks.eq([[0, 1], [2, 3], [4]])
    assert chunks.iter().flatten().collect().eq(range(5))


def test_three_way_methods() -> None:
    """The three-way zips are available as methods."""
    strict = pc.Iter([1, 2]).zip_with3([3, 4], [5], lambda a, b, c: a + b + c)
    assert strict.collect().eq([9])
    padded = pc.Iter([1]).zip_longest_with3([], [1, 1], 0, 10, 0, lambda *t: sum(t))
    assert padded.collect().eq([12, 11])


def test_repr() -> None:
    """Reprs show the wrapped source or the truncated elements."""
    assert repr(pc.Iter([1])) == "Iter(IterSource)"
    assert repr(pc.Iter.concat([1])) == "Iter(Concat)"
    assert repr(pc.Seq((1, 2))) == "Seq(1, 2)"
    config = pc.get_config()
    previous = config.repr_max_items
    config.repr_max_items = 2
    try:
        assert repr(pc.Vec([1, 2, 3])) == "Vec(1, 2, ...)"
    finally:
        config.repr_max_items = previous


def test_option_helpers() -> None:
    """Option combinators behave on both variants."""
    assert pc.Some(2).map(lambda x: x + 1) == pc.Some(3)
    assert pc.NONE.map(lambda x: x + 1) is pc.NONE
    assert pc.Option.from_(None) is pc.NONE
    assert pc.Some(1).and_then(lambda _: pc.NONE) is pc.NONE
    assert pc.NONE.or_else(lambda: pc.Some(5)) == pc.Some(5)
    assert pc.NONE.unwrap_or_else(lambda: 7) == 7  # noqa: PLR2004
    with pytest.raises(pc.OptionUnwrapError, match="missing"):
        pc.NONE.expect("missing")


def test_indexed_and_nested_methods() -> None:
    """The indexed and nested consumers are available as methods."""
    out: list[object] = []
    pc.Iter("ab").for_each_indexed(lambda i, c: out.append(f"{i}{c}"))
    pc.Iter([[1, None], None]).for_each_non_null(list, lambda _, x: out.append(x))
    pc.Iter([2]).for_each_flat(range, lambda n, x: out.append(n * 10 + x))
    assert out == ["0a", "1b", 1, 20, 21]
    total = pc.Iter([3, 3]).fold_until_indexed(
        0, lambda t, i, x: t + i * x, lambda *_: False
    )
    assert total == 3  # noqa: PLR2004
    gen = pc.Iter.generate_seeded([1, 2], bool, list.pop)
    assert gen.collect().eq([2, 1])
