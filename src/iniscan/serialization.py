"""Item serialization: JSON-compatible records for scanned items.

Converts items to plain dicts with their text fields resolved. Useful for:
- Debugging and inspection
- Feeding scan results to tools that do not import iniscan
- Snapshot tests

All output is deterministic (sorted keys).

Example:
    from iniscan import Parser
    from iniscan.serialization import to_json

    print(to_json(Parser("[a]\\nk=v"), indent=2))

Thread Safety:
    All functions are pure and safe to call from any thread.

"""

import json
from collections.abc import Iterable
from typing import Any

from iniscan.items import Item, ItemType


def to_dict(item: Item) -> dict[str, Any]:
    """Convert an item to a JSON-compatible dict.

    Always includes ``type`` (the ItemType name), ``lineno``, ``offset`` and
    ``end_offset``. Adds the fields that belong to the item type:

    - SECTION: ``name``
    - COMMENT: ``text``
    - PROPERTY: ``key`` and ``value`` (``None`` when absent)
    - MALFORMED: ``raw``

    Args:
        item: Any scanned item.

    Returns:
        Dict describing the item.
    """
    loc = item.location
    result: dict[str, Any] = {
        "type": item.type.name,
        "lineno": loc.lineno,
        "offset": loc.offset,
        "end_offset": loc.end_offset,
    }
    if loc.source_file is not None:
        result["source_file"] = loc.source_file

    item_type = item.type
    if item_type is ItemType.SECTION:
        result["name"] = item.name
    elif item_type is ItemType.COMMENT:
        result["text"] = item.text
    elif item_type is ItemType.PROPERTY:
        result["key"] = item.key
        result["value"] = item.value
    elif item_type is ItemType.MALFORMED:
        result["raw"] = item.raw
    return result


def to_json(items: Iterable[Item], *, indent: int | None = None) -> str:
    """Serialize items to a JSON array string.

    Args:
        items: Items to serialize, typically a Parser.
        indent: JSON indentation (None for compact).

    Returns:
        Deterministic JSON string.
    """
    return json.dumps(
        [to_dict(item) for item in items],
        sort_keys=True,
        ensure_ascii=False,
        indent=indent,
    )
