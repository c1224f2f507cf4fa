"""Opt-in verification of the normalized-set invariants.

Disabled unless ``LINE_RANGES_CHECK_INVARIANTS`` is set, in which case every
set produced by the range algebra is re-validated before it is returned.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

from line_ranges.ranges.errors import BugIndicatingError

from . import telemetry
from .settings import get_settings

if TYPE_CHECKING:
    from line_ranges.ranges.line_range import LineRange


def enabled() -> bool:
    return get_settings().check_invariants


def find_violation(ranges: Sequence["LineRange"]) -> str | None:
    """Describe the first broken invariant in ``ranges``, if any."""

    for index, current in enumerate(ranges):
        if current.is_empty:
            return f"empty range {current} at index {index}"
        if index == 0:
            continue
        previous = ranges[index - 1]
        if previous.end_line_number_exclusive >= current.start_line_number:
            return f"{previous} and {current} touch or overlap at index {index}"
    return None


def assert_normalized(ranges: Sequence["LineRange"], *, origin: str) -> None:
    if not enabled():
        return
    problem = find_violation(ranges)
    if problem is None:
        return
    telemetry.record_event(
        "ranges.invariant_violation",
        level="error",
        data={"origin": origin, "problem": problem},
    )
    raise BugIndicatingError(f"{origin}: {problem}")


__all__ = ["assert_normalized", "enabled", "find_violation"]
