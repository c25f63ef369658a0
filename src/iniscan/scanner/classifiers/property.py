"""Property classifier mixin."""

from iniscan.items import NO_VALUE, Item, ItemType


class PropertyClassifierMixin:
    """Mixin providing property classification.

    Property is the fallback: any non-blank line that is neither a comment
    nor bracketed is a property.
    """

    _source: str

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
        """Create item with raw offsets. Implemented by Parser."""
        raise NotImplementedError

    def _classify_property(self, line_start: int, line_end: int) -> Item:
        """Classify a line as a property.

        Splits on the first ``=`` only; later ``=`` belong to the value.
        Without any ``=`` the whole line is the key and the value is absent.
        The key may be empty (line starts with ``=``).

        Returns:
            PROPERTY item.
        """
        eq = self._source.find("=", line_start, line_end)
        if eq == -1:
            return self._make_item(ItemType.PROPERTY, line_start, line_end, line_start, line_end)
        return self._make_item(
            ItemType.PROPERTY, line_start, line_end, line_start, eq, eq + 1, line_end
        )
