"""Section header classifier mixin."""

from iniscan.items import NO_VALUE, Item, ItemType
from iniscan.utils.logger import get_logger

logger = get_logger(__name__)


class SectionClassifierMixin:
    """Mixin providing section header classification."""

    _source: str
    _lineno: int

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

    def _try_classify_section(self, line_start: int, line_end: int) -> Item | None:
        """Try to classify a line as a section header.

        A header is ``[`` at the start of the line and ``]`` as its last
        character. The name between them is not validated or trimmed, and
        may itself contain brackets. A line starting with ``[`` that has no
        line-terminal ``]`` is a MALFORMED item carrying the whole line.

        Args:
            line_start: Position in source where the line starts
            line_end: Position of the line terminator (or end of source)

        Returns:
            SECTION or MALFORMED item, or None if the line is not bracketed.
        """
        source = self._source
        if source[line_start] != "[":
            return None

        # "[" alone is too short to close itself
        if line_end - line_start >= 2 and source[line_end - 1] == "]":
            return self._make_item(
                ItemType.SECTION, line_start, line_end, line_start + 1, line_end - 1
            )

        logger.debug(
            "Malformed section header on line %d: %r",
            self._lineno,
            source[line_start:line_end],
        )
        return self._make_item(ItemType.MALFORMED, line_start, line_end, line_start, line_end)
