"""The ``LineRange`` value type: a half-open span of 1-based line numbers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterator, List, Optional, Sequence, Tuple, TypeVar

from .errors import BugIndicatingError
from .positions import MAX_COLUMN, OffsetRange, Range

T = TypeVar("T")

SerializedLineRange = Tuple[int, int]  # (start_line_number, end_line_number_exclusive)


@dataclass(frozen=True, slots=True)
class LineRange:
    """A range of lines ``[start_line_number, end_line_number_exclusive)``.

    Line numbers are 1-based by convention. Instances are immutable; every
    operation returns a new range.
    """

    start_line_number: int
    end_line_number_exclusive: int

    def __post_init__(self) -> None:
        if self.start_line_number > self.end_line_number_exclusive:
            raise BugIndicatingError(
                f"start_line_number {self.start_line_number} cannot be after "
                f"end_line_number_exclusive {self.end_line_number_exclusive}",
                bounds=(self.start_line_number, self.end_line_number_exclusive),
            )

    @classmethod
    def from_range(cls, range_: Range) -> "LineRange":
        return cls(range_.start_line_number, range_.end_line_number)

    @classmethod
    def from_range_inclusive(cls, range_: Range) -> "LineRange":
        return cls(range_.start_line_number, range_.end_line_number + 1)

    @classmethod
    def of_length(cls, start_line_number: int, length: int) -> "LineRange":
        return cls(start_line_number, start_line_number + length)

    @classmethod
    def deserialize(cls, data: Sequence[int]) -> "LineRange":
        """Rebuild a range from its ``(start, end_exclusive)`` pair.

        Malformed payloads raise ``ValueError`` (wrong shape) or ``TypeError``
        (non-integer bounds); inverted bounds still raise ``BugIndicatingError``.
        """

        if isinstance(data, (str, bytes)) or len(data) != 2:
            raise ValueError(f"Serialized line range must be a pair, got {data!r}")
        start, end = data
        for bound in (start, end):
            if isinstance(bound, bool) or not isinstance(bound, int):
                raise TypeError(f"Line numbers must be integers, got {bound!r}")
        return cls(start, end)

    @staticmethod
    def subtract(a: "LineRange", b: Optional["LineRange"]) -> List["LineRange"]:
        """Return the parts of ``a`` not covered by ``b`` (zero to two ranges)."""

        if b is None:
            return [a]
        if (
            a.start_line_number < b.start_line_number
            and b.end_line_number_exclusive < a.end_line_number_exclusive
        ):
            return [
                LineRange(a.start_line_number, b.start_line_number),
                LineRange(b.end_line_number_exclusive, a.end_line_number_exclusive),
            ]
        if (
            b.start_line_number <= a.start_line_number
            and a.end_line_number_exclusive <= b.end_line_number_exclusive
        ):
            return []
        if b.end_line_number_exclusive < a.end_line_number_exclusive:
            return [
                LineRange(
                    max(b.end_line_number_exclusive, a.start_line_number),
                    a.end_line_number_exclusive,
                )
            ]
        return [
            LineRange(
                a.start_line_number,
                min(b.start_line_number, a.end_line_number_exclusive),
            )
        ]

    @property
    def length(self) -> int:
        return self.end_line_number_exclusive - self.start_line_number

    @property
    def is_empty(self) -> bool:
        return self.start_line_number == self.end_line_number_exclusive

    def contains(self, line_number: int) -> bool:
        return self.start_line_number <= line_number < self.end_line_number_exclusive

    includes = contains

    def __contains__(self, line_number: object) -> bool:
        return isinstance(line_number, int) and self.contains(line_number)

    def __iter__(self) -> Iterator[int]:
        return iter(range(self.start_line_number, self.end_line_number_exclusive))

    def delta(self, offset: int) -> "LineRange":
        """Move the whole range by ``offset`` lines."""

        return LineRange(
            self.start_line_number + offset, self.end_line_number_exclusive + offset
        )

    def delta_length(self, offset: int) -> "LineRange":
        """Grow (or shrink) the range by moving only its end."""

        return LineRange(self.start_line_number, self.end_line_number_exclusive + offset)

    def join(self, other: "LineRange") -> "LineRange":
        """Smallest range covering both, bridging any gap between them."""

        return LineRange(
            min(self.start_line_number, other.start_line_number),
            max(self.end_line_number_exclusive, other.end_line_number_exclusive),
        )

    def intersect(self, other: "LineRange") -> Optional["LineRange"]:
        """Overlap of both ranges.

        The result is empty when the ranges only touch, and ``None`` when
        they do not even touch.
        """

        start = max(self.start_line_number, other.start_line_number)
        end = min(self.end_line_number_exclusive, other.end_line_number_exclusive)
        if start <= end:
            return LineRange(start, end)
        return None

    def intersects_strict(self, other: "LineRange") -> bool:
        return (
            self.start_line_number < other.end_line_number_exclusive
            and other.start_line_number < self.end_line_number_exclusive
        )

    def overlap_or_touch(self, other: "LineRange") -> bool:
        return (
            self.start_line_number <= other.end_line_number_exclusive
            and other.start_line_number <= self.end_line_number_exclusive
        )

    def to_inclusive_range(self) -> Optional[Range]:
        if self.is_empty:
            return None
        return Range(
            self.start_line_number, 1, self.end_line_number_exclusive - 1, MAX_COLUMN
        )

    def to_exclusive_range(self) -> Range:
        return Range(self.start_line_number, 1, self.end_line_number_exclusive, 1)

    def to_offset_range(self) -> OffsetRange:
        """0-based offset range (both ends minus one)."""

        return OffsetRange(self.start_line_number - 1, self.end_line_number_exclusive - 1)

    def map_to_line_array(self, f: Callable[[int], T]) -> List[T]:
        return [f(line_number) for line_number in self]

    def for_each(self, f: Callable[[int], object]) -> None:
        for line_number in self:
            f(line_number)

    def serialize(self) -> SerializedLineRange:
        return (self.start_line_number, self.end_line_number_exclusive)

    def __str__(self) -> str:
        return f"[{self.start_line_number},{self.end_line_number_exclusive})"


__all__ = ["LineRange", "SerializedLineRange"]
