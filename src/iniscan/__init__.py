"""
iniscan: Streaming INI scanner for Python

Turns INI text into a flat stream of items (section boundaries, section
headers, comments, properties and malformed lines) without building any
document model. Nothing is trimmed, merged or unescaped; items point back
into the caller's buffer.

Quick Start:
    >>> from iniscan import Parser
    >>> for item in Parser("[SECTION]\\n;this is a comment\\nKey=Value"):
    ...     print(item)
    Item(SECTION_END, 1)
    Item(SECTION, 'SECTION', 1)
    Item(COMMENT, 'this is a comment', 2)
    Item(PROPERTY, 'Key', 'Value', 3)
    Item(SECTION_END, 3)

    >>> # Malformed headers are data, not exceptions
    >>> [i.type.name for i in Parser("[SECTION\\nnonsense")]
    ['SECTION_END', 'MALFORMED', 'PROPERTY', 'SECTION_END']

    >>> # Unless strict scanning is requested
    >>> list(scan("[SECTION\\n", strict=True))
    Traceback (most recent call last):
    ...
    iniscan.errors.ScanError: 1:1 malformed section header: '[SECTION'

Installation:
    pip install iniscan              # Zero runtime dependencies
"""

from collections.abc import Iterator

from iniscan.config import ScanConfig
from iniscan.errors import ConfigError, IniscanError, ScanError
from iniscan.items import Item, ItemType
from iniscan.location import SourceLocation
from iniscan.render import render, render_item
from iniscan.scanner import Parser, ScanState
from iniscan.serialization import to_dict, to_json
from iniscan.utils.text import trim, trim_value

__version__ = "0.1.0"


def scan(
    source: str,
    *,
    comment_char: str | None = None,
    source_file: str | None = None,
    config: ScanConfig | None = None,
    strict: bool = False,
) -> Iterator[Item]:
    """Scan INI source into a stream of items.

    Args:
        source: INI source text
        comment_char: Comment-leading character (default ``;``)
        source_file: Optional source file path for locations and errors
        config: Scanner configuration
        strict: Raise ScanError on the first malformed section header
            instead of yielding it

    Returns:
        Iterator over items in source order.

    Raises:
        ConfigError: The comment character is invalid (raised immediately).
        ScanError: strict is set and a malformed header was reached
            (raised during iteration).
    """
    parser = Parser(source, comment_char, source_file=source_file, config=config)
    if not strict:
        return parser
    return _strict(parser)


def _strict(parser: Parser) -> Iterator[Item]:
    for item in parser:
        if item.type is ItemType.MALFORMED:
            raise ScanError(
                f"malformed section header: {item.raw!r}",
                lineno=item.lineno,
                col_offset=1,
                source_file=parser.source_file,
            )
        yield item


__all__ = [
    # Main API
    "Parser",
    "scan",
    "render",
    "render_item",
    "to_dict",
    "to_json",
    "trim",
    "trim_value",
    # Items
    "Item",
    "ItemType",
    "SourceLocation",
    # Configuration
    "ScanConfig",
    "ScanState",
    # Errors
    "ConfigError",
    "IniscanError",
    "ScanError",
    "__version__",
]
