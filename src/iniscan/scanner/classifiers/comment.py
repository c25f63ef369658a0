"""Comment classifier mixin."""

from iniscan.items import NO_VALUE, Item, ItemType


class CommentClassifierMixin:
    """Mixin providing comment classification."""

    _source: str
    _comment_char: str

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

    def _try_classify_comment(self, line_start: int, line_end: int) -> Item | None:
        """Try to classify a line as a comment.

        The comment character must be the first character of the line;
        everything after it is the comment text.

        Returns:
            COMMENT item, or None if the line does not start a comment.
        """
        if self._source[line_start] != self._comment_char:
            return None
        return self._make_item(ItemType.COMMENT, line_start, line_end, line_start + 1, line_end)
