"""Pull-based INI line scanner.

Implements a window-based approach: find the end of the line, classify it,
then commit the cursor past the terminator. Every line has a determinable
end, so every pull makes forward progress.

No regex in the hot path and no copying of the input: items carry offsets
into the caller's buffer.

Thread Safety:
Parser instances are single-use. Create one per source string.
All state is instance-local; no shared mutable state.

"""

from __future__ import annotations

import dataclasses

from iniscan.config import DEFAULT_CONFIG, ScanConfig
from iniscan.items import NO_VALUE, Item, ItemType
from iniscan.scanner.classifiers import (
    CommentClassifierMixin,
    PropertyClassifierMixin,
    SectionClassifierMixin,
)
from iniscan.scanner.modes import ScanState


class Parser(
    CommentClassifierMixin,
    SectionClassifierMixin,
    PropertyClassifierMixin,
):
    """Pull-based INI scanner producing a flat stream of items.

    Each pull (``next(parser)``) returns one Item:
    1. The first pull returns the SECTION_END closing the implicit
       top-level section.
    2. A well-formed section header is preceded by a SECTION_END. When the
       header is found the boundary is returned and the header is queued
       for the following pull.
    3. After the last line a final SECTION_END is returned, then the
       parser is exhausted for good.

    Blank lines produce nothing. Two SECTION_END items are never adjacent:
    a header found right after the leading boundary shares it, and input
    with no lines at all yields a single SECTION_END.

    Usage:
            >>> for item in Parser("[SECTION]\\n;this is a comment\\nKey=Value"):
            ...     print(item)
        Item(SECTION_END, 1)
        Item(SECTION, 'SECTION', 1)
        Item(COMMENT, 'this is a comment', 2)
        Item(PROPERTY, 'Key', 'Value', 3)
        Item(SECTION_END, 3)

    Thread Safety:
        Parser instances are single-use. Create one per source string.
        All state is instance-local; no shared mutable state.

    """

    __slots__ = (
        "_source",
        "_source_len",  # Cached len(source)
        "_pos",
        "_lineno",
        "_state",
        "_pending",  # Section header queued behind its boundary
        "_last_was_boundary",
        "_config",
        "_comment_char",
        "_source_file",
        "_next_lf",  # Cached position of the next "\n" at or after _pos
        "_next_cr",  # Cached position of the next "\r" at or after _pos
    )

    def __init__(
        self,
        source: str,
        comment_char: str | None = None,
        *,
        source_file: str | None = None,
        config: ScanConfig | None = None,
    ) -> None:
        """Initialize parser over source text.

        Args:
            source: INI source text; never copied or modified
            comment_char: Comment-leading character (default ``;``).
                Overrides ``config.comment_char`` when both are given.
            source_file: Optional source file path for item locations
            config: Scanner configuration (defaults to ScanConfig())

        Raises:
            ConfigError: comment_char is not a valid comment character.
        """
        if config is None:
            config = DEFAULT_CONFIG
        if comment_char is not None and comment_char != config.comment_char:
            config = dataclasses.replace(config, comment_char=comment_char)

        self._source = source
        self._source_len = len(source)
        self._pos = 0
        self._lineno = 1
        self._state = ScanState.START
        self._pending: Item | None = None
        self._last_was_boundary = False
        self._config = config
        self._comment_char = config.comment_char
        self._source_file = source_file

        # -1 forces a lookup on the first line
        self._next_lf = -1
        self._next_cr = -1

    def __iter__(self) -> Parser:
        return self

    def __next__(self) -> Item:
        """Return the next item.

        Raises:
            StopIteration: The trailing SECTION_END has been returned.
        """
        state = self._state
        if state is ScanState.DONE:
            raise StopIteration

        if state is ScanState.START:
            self._state = ScanState.SCANNING
            return self._emit(self._make_boundary(self._pos))

        if state is ScanState.HEADER_PENDING:
            pending = self._pending
            assert pending is not None
            self._pending = None
            self._state = ScanState.SCANNING
            return self._emit(pending)

        source_len = self._source_len
        while self._pos < source_len:
            item = self._scan_line()
            if item is None:
                continue
            if item.type is ItemType.SECTION and not self._last_was_boundary:
                self._pending = item
                self._state = ScanState.HEADER_PENDING
                return self._emit(self._make_boundary(item._line_start, item._lineno))
            return self._emit(item)

        self._state = ScanState.DONE
        if self._last_was_boundary:
            # Only blank lines since the leading boundary
            raise StopIteration
        return self._emit(self._make_boundary(self._pos))

    # =========================================================================
    # Public state
    # =========================================================================

    @property
    def config(self) -> ScanConfig:
        return self._config

    @property
    def comment_char(self) -> str:
        return self._comment_char

    @property
    def source_file(self) -> str | None:
        return self._source_file

    @property
    def lineno(self) -> int:
        """Line number (1-indexed) of the next line to scan."""
        return self._lineno

    @property
    def remainder(self) -> str:
        """The input not consumed yet."""
        return self._source[self._pos :]

    @property
    def exhausted(self) -> bool:
        """True once the trailing SECTION_END has been returned."""
        return self._state is ScanState.DONE

    # =========================================================================
    # Line scanning
    # =========================================================================

    def _scan_line(self) -> Item | None:
        """Classify the line at the cursor and commit past it.

        Returns:
            The classified item, or None for a blank line.
        """
        line_start = self._pos
        line_end = self._find_line_end()

        item: Item | None = None
        if line_end > line_start:
            item = self._try_classify_comment(line_start, line_end)
            if item is None:
                item = self._try_classify_section(line_start, line_end)
            if item is None:
                item = self._classify_property(line_start, line_end)

        self._commit_to(line_end)
        return item

    def _find_line_end(self) -> int:
        """Find the end of the current line (position of \\r, \\n or EOF).

        The positions of the next "\\n" and "\\r" are cached and only looked
        up again once the cursor has passed them, so documents using a single
        newline style are scanned in O(n).

        Returns:
            Position of the first terminator character or end of source.
        """
        pos = self._pos
        if self._next_lf < pos:
            idx = self._source.find("\n", pos)
            self._next_lf = idx if idx != -1 else self._source_len
        if self._next_cr < pos:
            idx = self._source.find("\r", pos)
            self._next_cr = idx if idx != -1 else self._source_len
        return min(self._next_lf, self._next_cr)

    def _commit_to(self, line_end: int) -> None:
        """Commit position to line_end, consuming the terminator if present.

        "\\r\\n" is one terminator; a lone "\\r" or "\\n" is one terminator.

        Args:
            line_end: Position returned by _find_line_end().
        """
        pos = line_end
        if pos < self._source_len:
            if self._source[pos] == "\r":
                pos += 1
                if pos < self._source_len and self._source[pos] == "\n":
                    pos += 1
            else:
                pos += 1
            self._lineno += 1
        self._pos = pos

    # =========================================================================
    # Item construction
    # =========================================================================

    def _emit(self, item: Item) -> Item:
        self._last_was_boundary = item.type is ItemType.SECTION_END
        return item

    def _make_boundary(self, pos: int, lineno: int | None = None) -> Item:
        """Create a zero-width SECTION_END at pos."""
        return Item(
            type=ItemType.SECTION_END,
            _source=self._source,
            _lineno=self._lineno if lineno is None else lineno,
            _line_start=pos,
            _line_end=pos,
            _start=pos,
            _end=pos,
            _source_file=self._source_file,
        )

    def _make_item(
        self,
        item_type: ItemType,
        line_start: int,
        line_end: int,
        start: int,
        end: int,
        value_start: int = NO_VALUE,
        value_end: int = NO_VALUE,
    ) -> Item:
        """Create an Item for the line being classified.

        Must be called before _commit_to() so the line number is current.
        """
        return Item(
            type=item_type,
            _source=self._source,
            _lineno=self._lineno,
            _line_start=line_start,
            _line_end=line_end,
            _start=start,
            _end=end,
            _value_start=value_start,
            _value_end=value_end,
            _source_file=self._source_file,
        )
