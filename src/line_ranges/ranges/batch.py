"""Helpers operating on several ranges or range lists at once."""

from __future__ import annotations

from typing import List, Optional, Sequence

from line_ranges.runtime.telemetry import span

from .line_range import LineRange
from .line_range_set import LineRangeSet


def subtract(a: LineRange, b: Optional[LineRange] = None) -> List[LineRange]:
    """Parts of ``a`` outside ``b``; a missing ``b`` leaves ``a`` untouched."""

    return LineRange.subtract(a, b)


def join_many(line_ranges: Sequence[Sequence[LineRange]]) -> tuple[LineRange, ...]:
    """Union several lists of line ranges into one normalized sequence.

    Each inner list must already be sorted and normalized on its own; no
    ordering is assumed between lists.
    """

    if not line_ranges:
        return ()

    with span(
        "ranges::join_many",
        component="ranges",
        metadata={"lists": len(line_ranges)},
    ) as handle:
        result = LineRangeSet(line_ranges[0])
        for ranges in line_ranges[1:]:
            result = result.union(LineRangeSet(ranges))
        handle.add_metadata("ranges", len(result))
        return result.ranges


__all__ = ["join_many", "subtract"]
