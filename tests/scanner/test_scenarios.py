"""Example-based tests for line classification and section boundaries."""

from __future__ import annotations

import pytest

from iniscan import Parser
from iniscan.items import Item, ItemType

END = ("end",)


def _summary(item: Item) -> tuple:
    if item.type is ItemType.SECTION_END:
        return END
    if item.type is ItemType.SECTION:
        return ("section", item.name)
    if item.type is ItemType.COMMENT:
        return ("comment", item.text)
    if item.type is ItemType.PROPERTY:
        return ("property", item.key, item.value)
    return ("error", item.raw)


def check(source: str, expected: list[tuple], comment_char: str | None = None) -> None:
    assert [_summary(i) for i in Parser(source, comment_char)] == expected


class TestDocumentedScenarios:
    """The canonical documents from the README and package docs."""

    def test_section_comment_property(self) -> None:
        check(
            "[SECTION]\n;this is a comment\nKey=Value",
            [
                END,
                ("section", "SECTION"),
                ("comment", "this is a comment"),
                ("property", "Key", "Value"),
                END,
            ],
        )

    def test_malformed_header_then_bare_key(self) -> None:
        check(
            "[SECTION\nnonsense",
            [END, ("error", "[SECTION"), ("property", "nonsense", None), END],
        )

    def test_section_name_not_trimmed(self) -> None:
        check("[ SECTION ]\n", [END, ("section", " SECTION "), END])

    def test_property_not_trimmed(self) -> None:
        check("KEY = VALUE\n", [END, ("property", "KEY ", " VALUE"), END])

    def test_mixed_terminators(self) -> None:
        check(
            "A=1\r\nB=2\nC=3\r",
            [END, ("property", "A", "1"), ("property", "B", "2"), ("property", "C", "3"), END],
        )


class TestEndOfStream:
    """Last line with and without a terminator."""

    @pytest.mark.parametrize("tail", ["", "\n", "\r", "\r\n"])
    def test_section(self, tail: str) -> None:
        check(f"\r\n[SECTION]{tail}", [END, ("section", "SECTION"), END])

    @pytest.mark.parametrize("tail", ["", "\n", "\r", "\r\n"])
    def test_comment(self, tail: str) -> None:
        check(f"\r\n;comment{tail}", [END, ("comment", "comment"), END])

    @pytest.mark.parametrize("tail", ["", "\n", "\r", "\r\n"])
    def test_property(self, tail: str) -> None:
        check(f"\r\nKey=Value{tail}", [END, ("property", "Key", "Value"), END])

    @pytest.mark.parametrize("tail", ["", "\n", "\r", "\r\n"])
    def test_bare_key(self, tail: str) -> None:
        check(f"\r\nAction{tail}", [END, ("property", "Action", None), END])


class TestEmptyStrings:
    """Empty names, keys, values and comments are kept as empty strings."""

    def test_empty_everything(self) -> None:
        check(
            "[]\n=\r\n = \n;\n \r= \r\n =\n=",
            [
                END,
                ("section", ""),
                ("property", "", ""),
                ("property", " ", " "),
                ("comment", ""),
                ("property", " ", None),
                ("property", "", " "),
                ("property", " ", ""),
                ("property", "", ""),
                END,
            ],
        )

    def test_empty_value_is_not_absent(self) -> None:
        items = [i for i in Parser("a=\nb") if i.type is ItemType.PROPERTY]
        assert items[0].value == ""
        assert items[0].has_value
        assert items[1].value is None
        assert not items[1].has_value

    def test_only_first_equals_splits(self) -> None:
        check("a==b=c", [END, ("property", "a", "=b=c"), END])

    def test_whitespace_line_is_a_property(self) -> None:
        check(" \t ", [END, ("property", " \t ", None), END])


class TestSyntaxErrors:
    """Bracketed lines without a line-terminal `]`."""

    @pytest.mark.parametrize(
        "source",
        ["[foo] ", "[foo] \r", "[foo] \n", "[foo", "[foo\r", "[foo\n", "[", "[\r", "[\n"],
    )
    def test_malformed_first_line(self, source: str) -> None:
        items = list(Parser(source))
        assert items[1].type is ItemType.MALFORMED
        assert items[1].raw == source.rstrip("\r\n")

    def test_malformed_after_section(self) -> None:
        check("[foo]\n[", [END, ("section", "foo"), ("error", "["), END])

    def test_errors_advance_the_cursor(self) -> None:
        check("[\n[] \r\n", [END, ("error", "["), ("error", "[] "), END])

    def test_malformed_does_not_open_a_section(self) -> None:
        check(
            "[a\n[b]\nk=v",
            [END, ("error", "[a"), END, ("section", "b"), ("property", "k", "v"), END],
        )

    def test_closing_bracket_is_the_last_one(self) -> None:
        check("[a]b]", [END, ("section", "a]b"), END])

    def test_brackets_inside_name_are_not_validated(self) -> None:
        check("[[x]]", [END, ("section", "[x]"), END])


class TestSectionBoundaries:
    """Placement of SECTION_END items."""

    def test_boundary_before_each_header(self) -> None:
        check(
            "[a]\nx=1\n[b]\ny=2\n",
            [
                END,
                ("section", "a"),
                ("property", "x", "1"),
                END,
                ("section", "b"),
                ("property", "y", "2"),
                END,
            ],
        )

    def test_consecutive_headers(self) -> None:
        check("[a]\n\n[b]", [END, ("section", "a"), END, ("section", "b"), END])

    def test_top_level_items_before_first_header(self) -> None:
        check(
            ";c\nk=v\n[a]\n",
            [END, ("comment", "c"), ("property", "k", "v"), END, ("section", "a"), END],
        )

    def test_leading_boundary_shared_with_first_header(self) -> None:
        check("\n\n[a]", [END, ("section", "a"), END])

    @pytest.mark.parametrize("source", ["", "\n", "\r\n", "\r", "\n\r\n\r", "\r\r\n\r"])
    def test_no_lines_collapse_to_single_boundary(self, source: str) -> None:
        check(source, [END])


class TestCommentChar:
    """Custom comment-leading characters."""

    def test_hash(self) -> None:
        check("#x\n;y", [END, ("comment", "x"), ("property", ";y", None), END], "#")

    def test_comment_char_only_at_line_start(self) -> None:
        check("k=v ;not a comment", [END, ("property", "k", "v ;not a comment"), END])

    def test_comment_wins_over_section(self) -> None:
        check("[x]", [END, ("comment", "x]"), END], "[")

    def test_comment_wins_over_property(self) -> None:
        check("=x", [END, ("comment", "x"), END], "=")

    def test_non_ascii_comment_char(self) -> None:
        check("§ note\nk=v", [END, ("comment", " note"), ("property", "k", "v"), END], "§")
