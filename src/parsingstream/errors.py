"""Exception classes for parsingstream.

Only the enforcing operations raise. Plain ``step``/``match``/``skip`` calls
report a miss through their return value instead.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from parsingstream.location import SourceLocation


class ParsingStreamError(Exception):
    """Base exception for all parsingstream errors."""

    pass


class MatchError(ParsingStreamError):
    """An enforced match did not succeed.

    Raised by ``enforce_step`` when the current element is rejected or the
    scanner is exhausted, and by ``enforce_match``/``enforce_until`` when the
    greedy match consumed nothing. The chaining ``capture_*`` variants raise
    it for the same reasons.
    """

    def __init__(
        self,
        message: str,
        lineno: int | None = None,
        col_offset: int | None = None,
        offset: int | None = None,
        source_file: str | None = None,
    ) -> None:
        """Initialize match error with optional location.

        Args:
            message: Error description
            lineno: Line number of the cursor (1-indexed)
            col_offset: Column of the cursor (1-indexed)
            offset: Absolute cursor index into the source
            source_file: Source name (optional)
        """
        self.message = message
        self.lineno = lineno
        self.col_offset = col_offset
        self.offset = offset
        self.source_file = source_file

        location = ""
        if source_file:
            location = f"{source_file}:"
        if lineno is not None:
            location += f"{lineno}:"
            if col_offset is not None:
                location += f"{col_offset}:"
        if location:
            location = location.rstrip(":") + " "

        super().__init__(f"{location}{message}")

    @classmethod
    def at(cls, message: str, location: SourceLocation) -> MatchError:
        """Create a MatchError positioned at ``location``."""
        return cls(
            message,
            lineno=location.lineno,
            col_offset=location.col_offset,
            offset=location.offset,
            source_file=location.source_file,
        )


__all__ = ["MatchError", "ParsingStreamError"]
