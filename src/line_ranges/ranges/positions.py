"""Text positions and ranges that line ranges convert to and from."""

from __future__ import annotations

import sys
from dataclasses import dataclass

from .errors import BugIndicatingError

# Column used for "until the end of the line" in inclusive conversions.
MAX_COLUMN = sys.maxsize


@dataclass(frozen=True, slots=True)
class Position:
    """1-based line/column position inside a text model."""

    line_number: int
    column: int

    def __str__(self) -> str:
        return f"({self.line_number},{self.column})"


@dataclass(frozen=True, slots=True)
class Range:
    """1-based text range spanning two positions (end column exclusive)."""

    start_line_number: int
    start_column: int
    end_line_number: int
    end_column: int

    @classmethod
    def from_positions(cls, start: Position, end: Position | None = None) -> "Range":
        end = end or start
        return cls(start.line_number, start.column, end.line_number, end.column)

    @property
    def start_position(self) -> Position:
        return Position(self.start_line_number, self.start_column)

    @property
    def end_position(self) -> Position:
        return Position(self.end_line_number, self.end_column)

    @property
    def is_empty(self) -> bool:
        return (
            self.start_line_number == self.end_line_number
            and self.start_column == self.end_column
        )

    def __str__(self) -> str:
        return (
            f"[{self.start_line_number},{self.start_column} -> "
            f"{self.end_line_number},{self.end_column}]"
        )


@dataclass(frozen=True, slots=True)
class OffsetRange:
    """0-based half-open range ``[start, end_exclusive)``."""

    start: int
    end_exclusive: int

    def __post_init__(self) -> None:
        if self.start > self.end_exclusive:
            raise BugIndicatingError(
                f"Invalid range: [{self.start}, {self.end_exclusive})",
                bounds=(self.start, self.end_exclusive),
            )

    @property
    def length(self) -> int:
        return self.end_exclusive - self.start

    @property
    def is_empty(self) -> bool:
        return self.start == self.end_exclusive

    def __str__(self) -> str:
        return f"[{self.start}, {self.end_exclusive})"


__all__ = ["MAX_COLUMN", "OffsetRange", "Position", "Range"]
