"""Line-oriented text document that produces line ranges from its content."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Callable, Iterable, List, Sequence

from line_ranges.ranges import LineRange, LineRangeSet
from line_ranges.runtime.telemetry import span

from .classifier import CharacterSet

# Line breaks: CRLF, lone CR, lone LF. Other control characters stay in the line.
LINE_BREAK = re.compile(r"\r\n|\r|\n")

WHITESPACE = CharacterSet.from_chars(" \t\f\v")


class DocumentRangeError(IndexError):
    """Raised when a line number or line range falls outside the document."""

    def __init__(self, message: str, *, line_range: LineRange | None = None) -> None:
        super().__init__(message)
        self.line_range = line_range


@dataclass(slots=True)
class TextDocument:
    """Immutable-ish list-of-lines text storage with 1-based line numbers."""

    _lines: List[str] = field(default_factory=lambda: [""])
    version: int = 0

    @classmethod
    def from_text(cls, text: str) -> "TextDocument":
        return cls(_lines=LINE_BREAK.split(text))

    @property
    def line_count(self) -> int:
        return len(self._lines)

    @property
    def text(self) -> str:
        return "\n".join(self._lines)

    def full_range(self) -> LineRange:
        return LineRange(1, self.line_count + 1)

    def _ensure_range(self, line_range: LineRange) -> LineRange:
        full = self.full_range()
        if (
            line_range.start_line_number < full.start_line_number
            or line_range.end_line_number_exclusive > full.end_line_number_exclusive
        ):
            raise DocumentRangeError(
                f"Line range {line_range} outside document {full}",
                line_range=line_range,
            )
        return line_range

    def get_line(self, line_number: int) -> str:
        if not self.full_range().contains(line_number):
            raise DocumentRangeError(f"Line {line_number} out of range")
        return self._lines[line_number - 1]

    def get_lines(self, line_range: LineRange) -> Sequence[str]:
        offsets = self._ensure_range(line_range).to_offset_range()
        return tuple(self._lines[offsets.start : offsets.end_exclusive])

    def collect_lines(self, predicate: Callable[[str], bool]) -> LineRangeSet:
        """Merge every line satisfying ``predicate`` into a range set."""

        result = LineRangeSet()
        for line_number, line in enumerate(self._lines, start=1):
            if predicate(line):
                result.add_range(LineRange.of_length(line_number, 1))
        return result

    def lines_matching(self, char_set: CharacterSet) -> LineRangeSet:
        """Lines containing at least one character of ``char_set``."""

        with span(
            "document::lines_matching",
            component="document",
            metadata={"version": self.version, "lines": self.line_count},
        ) as handle:
            result = self.collect_lines(
                lambda line: any(ord(char) in char_set for char in line)
            )
            handle.add_metadata("ranges", len(result))
            return result

    def blank_lines(self) -> LineRangeSet:
        with span(
            "document::blank_lines",
            component="document",
            metadata={"version": self.version, "lines": self.line_count},
        ) as handle:
            result = self.collect_lines(
                lambda line: all(ord(char) in WHITESPACE for char in line)
            )
            handle.add_metadata("ranges", len(result))
            return result

    def replace_lines(
        self, line_range: LineRange, new_lines: Iterable[str]
    ) -> "TextDocument":
        """Return a document with ``line_range`` replaced by ``new_lines``."""

        offsets = self._ensure_range(line_range).to_offset_range()
        lines = list(self._lines)
        lines[offsets.start : offsets.end_exclusive] = list(new_lines)
        if not lines:
            lines = [""]
        return TextDocument(_lines=lines, version=self.version + 1)


__all__ = ["DocumentRangeError", "TextDocument", "WHITESPACE"]
