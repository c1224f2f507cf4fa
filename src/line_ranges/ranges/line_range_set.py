"""Normalized, sorted collections of line ranges and their set algebra."""

from __future__ import annotations

from typing import Iterable, Iterator, List, Optional, Sequence

from line_ranges.runtime import checks

from .line_range import LineRange
from .monotonic import (
    find_first_idx_monotonous_or_len,
    find_last_idx_monotonous,
    find_last_monotonous,
)


class LineRangeSet:
    """Sorted line ranges where no two members touch or overlap.

    The constructor trusts ``normalized_ranges`` to already be sorted by start
    line, free of empty ranges, and pairwise non-touching. Use
    :meth:`from_ranges` for arbitrary input.
    """

    __slots__ = ("_normalized_ranges",)

    def __init__(self, normalized_ranges: Optional[Sequence[LineRange]] = None) -> None:
        self._normalized_ranges: List[LineRange] = list(normalized_ranges or ())

    @classmethod
    def from_ranges(cls, ranges: Iterable[LineRange]) -> "LineRangeSet":
        result = cls()
        for line_range in ranges:
            result.add_range(line_range)
        return result

    @property
    def ranges(self) -> tuple[LineRange, ...]:
        return tuple(self._normalized_ranges)

    @property
    def is_empty(self) -> bool:
        return not self._normalized_ranges

    def add_range(self, range_: LineRange) -> None:
        """Insert ``range_``, merging it with every member it touches."""

        if range_.is_empty:
            return

        ranges = self._normalized_ranges
        # first member that touches range_ or lies after it
        join_start = find_first_idx_monotonous_or_len(
            ranges, lambda r: r.end_line_number_exclusive >= range_.start_line_number
        )
        # one past the last member that touches range_ or lies before it
        join_end = (
            find_last_idx_monotonous(
                ranges, lambda r: r.start_line_number <= range_.end_line_number_exclusive
            )
            + 1
        )

        if join_start == join_end:
            ranges.insert(join_start, range_)
        elif join_start == join_end - 1:
            ranges[join_start] = ranges[join_start].join(range_)
        else:
            merged = ranges[join_start].join(ranges[join_end - 1]).join(range_)
            ranges[join_start:join_end] = [merged]

        checks.assert_normalized(ranges, origin="add_range")

    def contains(self, line_number: int) -> bool:
        candidate = find_last_monotonous(
            self._normalized_ranges, lambda r: r.start_line_number <= line_number
        )
        return candidate is not None and candidate.end_line_number_exclusive > line_number

    def __contains__(self, line_number: object) -> bool:
        return isinstance(line_number, int) and self.contains(line_number)

    def intersects(self, range_: LineRange) -> bool:
        """Whether any member strictly overlaps ``range_``."""

        candidate = find_last_monotonous(
            self._normalized_ranges,
            lambda r: r.start_line_number < range_.end_line_number_exclusive,
        )
        return (
            candidate is not None
            and candidate.end_line_number_exclusive > range_.start_line_number
        )

    def union(self, other: "LineRangeSet") -> "LineRangeSet":
        if not self._normalized_ranges:
            return other
        if not other._normalized_ranges:
            return self

        left, right = self._normalized_ranges, other._normalized_ranges
        result: List[LineRange] = []
        i1 = i2 = 0
        current: Optional[LineRange] = None
        while i1 < len(left) or i2 < len(right):
            if i1 < len(left) and i2 < len(right):
                if left[i1].start_line_number < right[i2].start_line_number:
                    next_range = left[i1]
                    i1 += 1
                else:
                    next_range = right[i2]
                    i2 += 1
            elif i1 < len(left):
                next_range = left[i1]
                i1 += 1
            else:
                next_range = right[i2]
                i2 += 1

            if current is None:
                current = next_range
            elif current.end_line_number_exclusive >= next_range.start_line_number:
                current = LineRange(
                    current.start_line_number,
                    max(
                        current.end_line_number_exclusive,
                        next_range.end_line_number_exclusive,
                    ),
                )
            else:
                result.append(current)
                current = next_range

        if current is not None:
            result.append(current)
        checks.assert_normalized(result, origin="union")
        return LineRangeSet(result)

    def subtract_from(self, range_: LineRange) -> "LineRangeSet":
        """Return ``range_`` minus every member of this set."""

        if range_.is_empty:
            return LineRangeSet()

        ranges = self._normalized_ranges
        join_start = find_first_idx_monotonous_or_len(
            ranges, lambda r: r.end_line_number_exclusive >= range_.start_line_number
        )
        join_end = (
            find_last_idx_monotonous(
                ranges, lambda r: r.start_line_number <= range_.end_line_number_exclusive
            )
            + 1
        )

        if join_start == join_end:
            return LineRangeSet([range_])

        result: List[LineRange] = []
        start_line_number = range_.start_line_number
        for member in ranges[join_start:join_end]:
            if member.start_line_number > start_line_number:
                result.append(LineRange(start_line_number, member.start_line_number))
            start_line_number = member.end_line_number_exclusive
        if start_line_number < range_.end_line_number_exclusive:
            result.append(LineRange(start_line_number, range_.end_line_number_exclusive))

        checks.assert_normalized(result, origin="subtract_from")
        return LineRangeSet(result)

    def intersection(self, other: "LineRangeSet") -> "LineRangeSet":
        left, right = self._normalized_ranges, other._normalized_ranges
        result: List[LineRange] = []
        i1 = i2 = 0
        while i1 < len(left) and i2 < len(right):
            r1, r2 = left[i1], right[i2]
            overlap = r1.intersect(r2)
            if overlap is not None and not overlap.is_empty:
                result.append(overlap)

            if r1.end_line_number_exclusive < r2.end_line_number_exclusive:
                i1 += 1
            else:
                i2 += 1

        checks.assert_normalized(result, origin="intersection")
        return LineRangeSet(result)

    def with_delta(self, offset: int) -> "LineRangeSet":
        return LineRangeSet([r.delta(offset) for r in self._normalized_ranges])

    def __iter__(self) -> Iterator[LineRange]:
        return iter(tuple(self._normalized_ranges))

    def __len__(self) -> int:
        return len(self._normalized_ranges)

    def __bool__(self) -> bool:
        return bool(self._normalized_ranges)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LineRangeSet):
            return NotImplemented
        return self._normalized_ranges == other._normalized_ranges

    def __repr__(self) -> str:
        return f"LineRangeSet({self._normalized_ranges!r})"

    def __str__(self) -> str:
        return ", ".join(str(r) for r in self._normalized_ranges)


__all__ = ["LineRangeSet"]
