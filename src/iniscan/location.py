"""Source location tracking for scanned items.

Thread Safety:
SourceLocation is frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SourceLocation:
    """Position of a scanned line in the source buffer.

    ``lineno`` and ``col_offset`` are 1-indexed. ``offset`` and
    ``end_offset`` are absolute indices into the source and delimit the
    line without its terminator. Synthetic items have a zero-width span.

    Examples:
            >>> loc = SourceLocation(lineno=3, col_offset=1, offset=14, end_offset=23)
            >>> str(loc)
            '3:1'

            >>> loc = SourceLocation(2, 1, source_file="setup.cfg")
            >>> str(loc)
            'setup.cfg:2:1'

    """

    lineno: int
    col_offset: int
    offset: int = 0
    end_offset: int = 0
    source_file: str | None = None

    def __str__(self) -> str:
        """Format location for error messages.

        Returns:
            Formatted string like "app.ini:10:1" or "10:1"
        """
        if self.source_file:
            return f"{self.source_file}:{self.lineno}:{self.col_offset}"
        return f"{self.lineno}:{self.col_offset}"

    @property
    def is_empty(self) -> bool:
        """True for zero-width spans (section boundaries)."""
        return self.offset == self.end_offset
