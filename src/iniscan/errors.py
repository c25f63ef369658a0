"""Exception classes for iniscan.

The scanner itself never raises on malformed input; these exceptions
cover invalid configuration and the opt-in strict scanning mode.
"""

from __future__ import annotations


class IniscanError(Exception):
    """Base exception for all iniscan errors."""

    pass


class ConfigError(IniscanError, ValueError):
    """Invalid scanner configuration.

    Raised when a ScanConfig is built with an unusable value, for example
    a comment character that is not exactly one character long.
    """

    pass


class ScanError(IniscanError):
    """A malformed line reported by strict scanning.

    Raised by :func:`iniscan.scan` with ``strict=True`` when a line looks
    like a section header but is not well formed.
    """

    def __init__(
        self,
        message: str,
        lineno: int | None = None,
        col_offset: int | None = None,
        source_file: str | None = None,
    ) -> None:
        """Initialize scan error with optional location.

        Args:
            message: Error description
            lineno: Line number of the offending line (1-indexed)
            col_offset: Column offset (1-indexed)
            source_file: Path to source file (optional)
        """
        self.message = message
        self.lineno = lineno
        self.col_offset = col_offset
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
