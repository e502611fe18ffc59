"""Source location tracking for error messages and debugging.

Thread Safety:
SourceLocation is frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SourceLocation:
    """Snapshot of a scanner position.

    ``lineno`` and ``col_offset`` are 1-indexed and only meaningful for text
    sources; ``offset`` is the absolute cursor index and always meaningful.

    Attributes:
        lineno: Line number (1-indexed)
        col_offset: Column (1-indexed)
        offset: Absolute index into the source sequence
        source_file: Source name (optional)

    Examples:
            >>> loc = SourceLocation(lineno=3, col_offset=7, offset=25)
            >>> str(loc)
            '3:7'
            >>> str(SourceLocation(1, 1, 0, "query.sql"))
            'query.sql:1:1'

    """

    lineno: int
    col_offset: int
    offset: int = 0
    source_file: str | None = None

    def __str__(self) -> str:
        """Format location for error messages.

        Returns:
            Formatted string like "file.txt:10:5" or "10:5"
        """
        if self.source_file:
            return f"{self.source_file}:{self.lineno}:{self.col_offset}"
        return f"{self.lineno}:{self.col_offset}"


__all__ = ["SourceLocation"]
