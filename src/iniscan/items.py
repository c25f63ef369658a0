"""Item and ItemType definitions for the iniscan parser.

The parser produces a stream of Item objects. Each Item has a type, the
offsets of its text fields in the source buffer, and a source location.

Items never copy the input: text fields are stored as ``(start, end)``
offsets and sliced out of the source only when read.

Thread Safety:
Item is frozen (immutable) and safe to share across threads.
ItemType is an enum (inherently immutable).

"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from iniscan.location import SourceLocation


class ItemType(Enum):
    """Item types produced by the parser."""

    SECTION_END = auto()  # synthetic boundary, not present in source
    SECTION = auto()  # [name]
    COMMENT = auto()  # ;text
    PROPERTY = auto()  # key=value or key
    MALFORMED = auto()  # [name without a line-terminal ]


# Marks an absent property value (no `=` on the line).
NO_VALUE = -1


@dataclass(frozen=True, slots=True)
class Item:
    """An item produced by the parser.

    Attributes:
        type: The item type
        _source: The buffer the offsets refer to
        _lineno: Line number (1-indexed)
        _line_start: Start of the raw line in source
        _line_end: End of the raw line in source, terminator excluded
        _start: Start of the primary text field (name, comment, key, raw line)
        _end: End of the primary text field
        _value_start: Start of the property value, or NO_VALUE
        _value_end: End of the property value, or NO_VALUE
        _source_file: Optional source file path

    Performance:
        Text fields are sliced on access and SourceLocation is created
        lazily on first access to `.location`.

    """

    type: ItemType
    _source: str = field(repr=False)
    _lineno: int
    _line_start: int
    _line_end: int
    _start: int
    _end: int
    _value_start: int = NO_VALUE
    _value_end: int = NO_VALUE
    _source_file: str | None = None
    _location_cache: SourceLocation | None = field(
        default=None, repr=False, compare=False, hash=False
    )

    @property
    def text(self) -> str:
        """The primary text of the item.

        Section name for SECTION, comment text for COMMENT, key for
        PROPERTY, the raw line for MALFORMED and ``""`` for SECTION_END.
        """
        return self._source[self._start : self._end]

    @property
    def name(self) -> str:
        """Section name (alias of `text`)."""
        return self.text

    @property
    def key(self) -> str:
        """Property key (alias of `text`)."""
        return self.text

    @property
    def value(self) -> str | None:
        """Property value, or None when the line has no `=`.

        Always None for non-PROPERTY items.
        """
        if self._value_start == NO_VALUE:
            return None
        return self._source[self._value_start : self._value_end]

    @property
    def has_value(self) -> bool:
        """True when the property line contained a `=`."""
        return self._value_start != NO_VALUE

    @property
    def raw(self) -> str:
        """The full source line the item came from, terminator excluded."""
        return self._source[self._line_start : self._line_end]

    @property
    def is_boundary(self) -> bool:
        """True for SECTION_END items."""
        return self.type is ItemType.SECTION_END

    @property
    def location(self) -> SourceLocation:
        """Get source location (lazily created and cached)."""
        if self._location_cache is not None:
            return self._location_cache

        from iniscan.location import SourceLocation

        loc = SourceLocation(
            lineno=self._lineno,
            col_offset=1,
            offset=self._line_start,
            end_offset=self._line_end,
            source_file=self._source_file,
        )
        object.__setattr__(self, "_location_cache", loc)
        return loc

    @property
    def lineno(self) -> int:
        """Line number (convenience accessor)."""
        return self._lineno

    def __repr__(self) -> str:
        """Compact repr for debugging."""
        if self.type is ItemType.SECTION_END:
            return f"Item(SECTION_END, {self._lineno})"
        if self.type is ItemType.PROPERTY:
            return f"Item(PROPERTY, {self.key!r}, {self.value!r}, {self._lineno})"
        val = self.text
        if len(val) > 20:
            val = val[:17] + "..."
        return f"Item({self.type.name}, {val!r}, {self._lineno})"
