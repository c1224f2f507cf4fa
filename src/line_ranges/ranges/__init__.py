"""Line ranges, normalized range sets, and the searches behind them."""

from .batch import join_many, subtract
from .errors import BugIndicatingError
from .line_range import LineRange, SerializedLineRange
from .line_range_set import LineRangeSet
from .monotonic import (
    find_first_idx_monotonous_or_len,
    find_first_monotonous,
    find_last_idx_monotonous,
    find_last_monotonous,
)
from .positions import MAX_COLUMN, OffsetRange, Position, Range

__all__ = [
    "BugIndicatingError",
    "LineRange",
    "LineRangeSet",
    "SerializedLineRange",
    "MAX_COLUMN",
    "OffsetRange",
    "Position",
    "Range",
    "find_first_idx_monotonous_or_len",
    "find_first_monotonous",
    "find_last_idx_monotonous",
    "find_last_monotonous",
    "join_many",
    "subtract",
]
