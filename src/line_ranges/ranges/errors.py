"""Error types raised by the range core."""

from __future__ import annotations

from typing import Optional, Tuple


class BugIndicatingError(RuntimeError):
    """Raised when a caller breaks a range invariant.

    This always signals a programming error and is never caught inside the
    package.
    """

    def __init__(
        self, message: str, *, bounds: Optional[Tuple[int, int]] = None
    ) -> None:
        super().__init__(message)
        self.bounds = bounds


__all__ = ["BugIndicatingError"]
