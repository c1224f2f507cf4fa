"""Binary searches over sequences ordered by a monotonic predicate."""

from __future__ import annotations

from bisect import bisect_left
from typing import Callable, Optional, Sequence, TypeVar

T = TypeVar("T")

Predicate = Callable[[T], bool]


def find_first_idx_monotonous_or_len(
    seq: Sequence[T],
    predicate: Predicate[T],
    start: int = 0,
    end: Optional[int] = None,
) -> int:
    """Index of the first item satisfying ``predicate``, or ``end``.

    ``predicate`` must be false for a prefix of ``seq[start:end]`` and true
    for the rest.
    """

    hi = len(seq) if end is None else end
    return bisect_left(seq, True, start, hi, key=predicate)


def find_last_idx_monotonous(
    seq: Sequence[T],
    predicate: Predicate[T],
    start: int = 0,
    end: Optional[int] = None,
) -> int:
    """Index of the last item satisfying ``predicate``, or ``-1``.

    ``predicate`` must be true for a prefix of ``seq[start:end]`` and false
    for the rest.
    """

    hi = len(seq) if end is None else end
    first_false = bisect_left(seq, True, start, hi, key=lambda item: not predicate(item))
    return first_false - 1 if first_false > start else -1


def find_first_monotonous(seq: Sequence[T], predicate: Predicate[T]) -> Optional[T]:
    idx = find_first_idx_monotonous_or_len(seq, predicate)
    return seq[idx] if idx < len(seq) else None


def find_last_monotonous(seq: Sequence[T], predicate: Predicate[T]) -> Optional[T]:
    idx = find_last_idx_monotonous(seq, predicate)
    return seq[idx] if idx >= 0 else None


__all__ = [
    "find_first_idx_monotonous_or_len",
    "find_first_monotonous",
    "find_last_idx_monotonous",
    "find_last_monotonous",
]
