"""Write scanned items back out as INI text.

Rendering is the inverse of classification for a single line:

- SECTION      -> ``[name]``
- PROPERTY     -> ``key=value``, or ``key`` when the value is absent
- COMMENT      -> ``;text`` (with the configured comment character)
- MALFORMED    -> the raw line
- SECTION_END  -> nothing

Values are not checked or escaped. An item whose text contains a line
terminator, or a key containing ``=``, will not scan back to the same item.

Example:
    >>> from iniscan import Parser
    >>> from iniscan.render import render
    >>> render(Parser("[a]\\r\\nk = v"))
    '[a]\\nk = v\\n'

Thread Safety:
    All functions are pure and safe to call from any thread.

"""

from __future__ import annotations

from collections.abc import Iterable

from iniscan.config import DEFAULT_COMMENT_CHAR
from iniscan.items import Item, ItemType


def render_item(item: Item, *, comment_char: str = DEFAULT_COMMENT_CHAR) -> str:
    """Render one item as a line of INI text, without a terminator.

    Args:
        item: Item to render
        comment_char: Comment-leading character to write before comments

    Returns:
        The INI line; ``""`` for SECTION_END.
    """
    item_type = item.type
    if item_type is ItemType.SECTION:
        return f"[{item.name}]"
    if item_type is ItemType.PROPERTY:
        value = item.value
        if value is None:
            return item.key
        return f"{item.key}={value}"
    if item_type is ItemType.COMMENT:
        return f"{comment_char}{item.text}"
    if item_type is ItemType.MALFORMED:
        return item.text
    return ""


def render(
    items: Iterable[Item],
    *,
    comment_char: str = DEFAULT_COMMENT_CHAR,
    newline: str = "\n",
) -> str:
    """Render items as INI text.

    Every rendered line ends with ``newline``. SECTION_END items produce
    no output.

    Args:
        items: Items to render, typically a Parser
        comment_char: Comment-leading character to write before comments
        newline: Line terminator to write after each line

    Returns:
        INI text.
    """
    parts: list[str] = []
    for item in items:
        if item.type is ItemType.SECTION_END:
            continue
        parts.append(render_item(item, comment_char=comment_char))
        parts.append(newline)
    return "".join(parts)
