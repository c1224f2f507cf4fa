"""Plain "replace range with text" edit descriptors."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from line_ranges.ranges import LineRange, Position, Range


@dataclass(frozen=True, slots=True)
class SingleEditOperation:
    """Replace the text at ``range`` with ``text``.

    An empty ``range`` describes an insert and a ``None`` text a deletion.
    ``force_move_markers`` gives the edit insert semantics: markers sitting at
    a collapsed ``range`` move along with the inserted text.
    """

    range: Range
    text: Optional[str]
    force_move_markers: bool = False


class EditOperation:
    """Factories for the recognised edit shapes."""

    @staticmethod
    def insert(position: Position, text: str) -> SingleEditOperation:
        return SingleEditOperation(
            range=Range.from_positions(position),
            text=text,
            force_move_markers=True,
        )

    @staticmethod
    def delete(range_: Range) -> SingleEditOperation:
        return SingleEditOperation(range=range_, text=None)

    @staticmethod
    def replace(range_: Range, text: Optional[str]) -> SingleEditOperation:
        return SingleEditOperation(range=range_, text=text)

    @staticmethod
    def replace_move(range_: Range, text: Optional[str]) -> SingleEditOperation:
        return SingleEditOperation(range=range_, text=text, force_move_markers=True)

    @staticmethod
    def replace_lines(line_range: LineRange, text: Optional[str]) -> SingleEditOperation:
        """Replace whole lines; an empty ``line_range`` inserts before its start."""

        return EditOperation.replace(line_range.to_exclusive_range(), text)


__all__ = ["EditOperation", "SingleEditOperation"]
