from __future__ import annotations

import pytest

from line_ranges.ranges import (
    MAX_COLUMN,
    BugIndicatingError,
    LineRange,
    OffsetRange,
    Range,
)


def lr(start: int, end: int) -> LineRange:
    return LineRange(start, end)


def test_construction_rejects_inverted_bounds() -> None:
    with pytest.raises(BugIndicatingError) as excinfo:
        lr(5, 4)

    assert excinfo.value.bounds == (5, 4)


def test_length_and_emptiness() -> None:
    assert lr(3, 7).length == 4
    assert lr(3, 3).is_empty
    assert not lr(3, 4).is_empty


def test_contains_is_half_open() -> None:
    line_range = lr(2, 5)

    assert not line_range.contains(1)
    assert line_range.contains(2)
    assert line_range.includes(4)
    assert not line_range.contains(5)
    assert 3 in line_range
    assert "3" not in line_range


def test_join_bridges_gap() -> None:
    assert lr(1, 3).join(lr(8, 10)) == lr(1, 10)
    assert lr(4, 6).join(lr(2, 5)) == lr(2, 6)


def test_intersect_distinguishes_touch_from_disjoint() -> None:
    assert lr(1, 5).intersect(lr(3, 8)) == lr(3, 5)
    touching = lr(1, 5).intersect(lr(5, 8))
    assert touching == lr(5, 5)
    assert touching is not None and touching.is_empty
    assert lr(1, 5).intersect(lr(6, 8)) is None


def test_overlap_or_touch_and_intersects_strict_differ_at_boundary() -> None:
    a, b = lr(1, 5), lr(5, 8)

    assert a.overlap_or_touch(b)
    assert b.overlap_or_touch(a)
    assert not a.intersects_strict(b)
    assert lr(1, 6).intersects_strict(b)
    assert not lr(1, 4).overlap_or_touch(b)


@pytest.mark.parametrize(
    "a, b, expected",
    [
        (lr(1, 10), None, [lr(1, 10)]),
        (lr(1, 10), lr(3, 5), [lr(1, 3), lr(5, 10)]),
        (lr(1, 10), lr(0, 20), []),
        (lr(1, 10), lr(1, 10), []),
        (lr(1, 10), lr(0, 4), [lr(4, 10)]),
        (lr(1, 10), lr(6, 12), [lr(1, 6)]),
        (lr(5, 10), lr(1, 3), [lr(5, 10)]),
        (lr(5, 10), lr(12, 14), [lr(5, 10)]),
        (lr(1, 10), lr(1, 4), [lr(4, 10)]),
        (lr(1, 10), lr(7, 10), [lr(1, 7)]),
    ],
)
def test_subtract_cases(a: LineRange, b: LineRange | None, expected: list[LineRange]) -> None:
    assert LineRange.subtract(a, b) == expected


def test_subtract_pieces_reconstruct_original() -> None:
    a = lr(3, 9)
    for start in range(0, 12):
        for end in range(start, 13):
            b = lr(start, end)
            pieces = LineRange.subtract(a, b)
            covered: set[int] = set()
            for piece in pieces:
                assert a.start_line_number <= piece.start_line_number
                assert piece.end_line_number_exclusive <= a.end_line_number_exclusive
                lines = set(piece)
                assert not covered & lines
                covered |= lines
            overlap = a.intersect(b)
            if overlap is not None:
                assert not covered & set(overlap)
                covered |= set(overlap)
            assert covered == set(a)


def test_delta_and_delta_length() -> None:
    assert lr(3, 6).delta(4) == lr(7, 10)
    assert lr(3, 6).delta(-2) == lr(1, 4)
    assert lr(3, 6).delta_length(2) == lr(3, 8)
    with pytest.raises(BugIndicatingError):
        lr(3, 6).delta_length(-4)


def test_of_length() -> None:
    assert LineRange.of_length(4, 3) == lr(4, 7)
    assert LineRange.of_length(4, 0).is_empty


def test_serialize_and_deserialize() -> None:
    assert lr(2, 9).serialize() == (2, 9)
    assert LineRange.deserialize([2, 9]) == lr(2, 9)
    with pytest.raises(BugIndicatingError):
        LineRange.deserialize([9, 2])
    with pytest.raises(BugIndicatingError):
        LineRange.deserialize((9, 2))


@pytest.mark.parametrize("payload", [[1, 2, 3], [1], "12", ()])
def test_deserialize_rejects_malformed_shape(payload: object) -> None:
    with pytest.raises(ValueError):
        LineRange.deserialize(payload)  # type: ignore[arg-type]


@pytest.mark.parametrize("payload", [(1.9, 3.2), ("1", "3"), (1, 3.0), (True, 3)])
def test_deserialize_rejects_non_integer_bounds(payload: tuple[object, object]) -> None:
    with pytest.raises(TypeError):
        LineRange.deserialize(payload)  # type: ignore[arg-type]


def test_range_conversions() -> None:
    assert lr(2, 5).to_inclusive_range() == Range(2, 1, 4, MAX_COLUMN)
    assert lr(2, 2).to_inclusive_range() is None
    assert lr(2, 5).to_exclusive_range() == Range(2, 1, 5, 1)
    assert lr(2, 5).to_offset_range() == OffsetRange(1, 4)
    assert LineRange.from_range(Range(2, 3, 5, 1)) == lr(2, 5)
    assert LineRange.from_range_inclusive(Range(2, 3, 5, 7)) == lr(2, 6)


def test_line_iteration_helpers() -> None:
    seen: list[int] = []

    lr(4, 7).for_each(seen.append)

    assert seen == [4, 5, 6]
    assert lr(4, 7).map_to_line_array(lambda n: n * 10) == [40, 50, 60]
    assert list(lr(4, 4)) == []


def test_str_and_value_semantics() -> None:
    assert str(lr(1, 4)) == "[1,4)"
    assert lr(1, 4) == lr(1, 4)
    assert len({lr(1, 4), lr(1, 4), lr(2, 4)}) == 2
    with pytest.raises(AttributeError):
        lr(1, 4).start_line_number = 2  # type: ignore[misc]
