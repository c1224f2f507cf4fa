from __future__ import annotations

from line_ranges.ranges import (
    find_first_idx_monotonous_or_len,
    find_first_monotonous,
    find_last_idx_monotonous,
    find_last_monotonous,
)

VALUES = [1, 3, 3, 5, 8, 13]


def test_find_first_idx() -> None:
    assert find_first_idx_monotonous_or_len(VALUES, lambda v: v >= 3) == 1
    assert find_first_idx_monotonous_or_len(VALUES, lambda v: v >= 0) == 0
    assert find_first_idx_monotonous_or_len(VALUES, lambda v: v > 13) == len(VALUES)
    assert find_first_idx_monotonous_or_len([], lambda v: True) == 0


def test_find_first_idx_respects_bounds() -> None:
    assert find_first_idx_monotonous_or_len(VALUES, lambda v: v >= 3, 2) == 2
    assert find_first_idx_monotonous_or_len(VALUES, lambda v: v >= 8, 0, 3) == 3


def test_find_last_idx() -> None:
    assert find_last_idx_monotonous(VALUES, lambda v: v <= 3) == 2
    assert find_last_idx_monotonous(VALUES, lambda v: v <= 100) == len(VALUES) - 1
    assert find_last_idx_monotonous(VALUES, lambda v: v < 1) == -1
    assert find_last_idx_monotonous([], lambda v: True) == -1


def test_find_last_idx_respects_bounds() -> None:
    assert find_last_idx_monotonous(VALUES, lambda v: v <= 8, 0, 3) == 2
    assert find_last_idx_monotonous(VALUES, lambda v: v <= 3, 3) == -1


def test_item_variants() -> None:
    assert find_first_monotonous(VALUES, lambda v: v > 4) == 5
    assert find_first_monotonous(VALUES, lambda v: v > 40) is None
    assert find_last_monotonous(VALUES, lambda v: v < 8) == 5
    assert find_last_monotonous(VALUES, lambda v: v < 0) is None


def test_matches_linear_scan() -> None:
    for threshold in range(0, 16):
        first = next((i for i, v in enumerate(VALUES) if v >= threshold), len(VALUES))
        last = max((i for i, v in enumerate(VALUES) if v <= threshold), default=-1)
        assert find_first_idx_monotonous_or_len(VALUES, lambda v: v >= threshold) == first
        assert find_last_idx_monotonous(VALUES, lambda v: v <= threshold) == last
