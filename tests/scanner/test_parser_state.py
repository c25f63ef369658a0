"""Tests for the parser's pull protocol and internal state transitions."""

from __future__ import annotations

import pytest

from iniscan import Parser
from iniscan.items import ItemType
from iniscan.scanner import ScanState


class TestPullProtocol:
    """Iterator behaviour."""

    def test_iter_returns_self(self) -> None:
        parser = Parser("k=v")
        assert iter(parser) is parser

    def test_stop_iteration_forever(self) -> None:
        parser = Parser("k=v")
        assert len(list(parser)) == 3
        for _ in range(3):
            with pytest.raises(StopIteration):
                next(parser)

    def test_not_restartable(self) -> None:
        parser = Parser("[a]\nk=v")
        first = list(parser)
        assert len(first) == 4
        assert list(parser) == []

    def test_caller_may_stop_early(self) -> None:
        parser = Parser("[a]\nk=v\n[b]\n")
        next(parser)
        next(parser)
        assert not parser.exhausted
        assert parser.remainder == "k=v\n[b]\n"


class TestStateTransitions:
    """ScanState moves through START, SCANNING, HEADER_PENDING and DONE."""

    def test_initial_state(self) -> None:
        parser = Parser("k=v")
        assert parser._state is ScanState.START
        assert parser._pending is None

    def test_first_pull_does_not_advance(self) -> None:
        source = "k=v\n[a]\n"
        parser = Parser(source)
        item = next(parser)
        assert item.type is ItemType.SECTION_END
        assert parser.remainder == source
        assert parser._state is ScanState.SCANNING

    def test_header_is_queued_behind_its_boundary(self) -> None:
        parser = Parser("k=v\n[a]\nx=1")
        next(parser)  # leading boundary
        next(parser)  # k=v

        boundary = next(parser)
        assert boundary.type is ItemType.SECTION_END
        assert parser._state is ScanState.HEADER_PENDING
        assert parser._pending is not None
        assert parser._pending.name == "a"
        # The header line is already consumed
        assert parser.remainder == "x=1"

        header = next(parser)
        assert header.type is ItemType.SECTION
        assert header.name == "a"
        assert parser._state is ScanState.SCANNING
        assert parser._pending is None

    def test_header_right_after_leading_boundary_is_not_queued(self) -> None:
        parser = Parser("[a]\n")
        next(parser)
        header = next(parser)
        assert header.type is ItemType.SECTION
        assert parser._pending is None

    def test_done_after_trailing_boundary(self) -> None:
        parser = Parser("k=v")
        list(parser)
        assert parser._state is ScanState.DONE
        assert parser.exhausted

    def test_blank_lines_consumed_in_one_pull(self) -> None:
        parser = Parser("\n\n\r\n\rk=v")
        next(parser)
        item = next(parser)
        assert item.key == "k"
        assert item.lineno == 5


class TestCursor:
    """Line numbers and remainder."""

    def test_lineno_counts_terminators(self) -> None:
        parser = Parser("a\r\nb\rc\nd")
        assert parser.lineno == 1
        linenos = [i.lineno for i in parser if not i.is_boundary]
        assert linenos == [1, 2, 3, 4]
        assert parser.lineno == 4

    def test_lineno_after_trailing_newline(self) -> None:
        parser = Parser("a\n")
        list(parser)
        assert parser.lineno == 2

    def test_remainder_empty_when_done(self) -> None:
        parser = Parser("[a]\nk=v\n")
        list(parser)
        assert parser.remainder == ""

    def test_terminator_cache_survives_mixed_styles(self) -> None:
        source = "a=1\rb=2\nc=3\r\nd=4\re=5"
        keys = [i.key for i in Parser(source) if not i.is_boundary]
        assert keys == ["a", "b", "c", "d", "e"]


class TestBoundaryLocations:
    """SECTION_END items are zero-width spans at the boundary position."""

    def test_leading_boundary_at_start(self) -> None:
        item = next(Parser("k=v"))
        assert item.location.offset == 0
        assert item.location.is_empty
        assert item.lineno == 1

    def test_header_boundary_at_header_line(self) -> None:
        items = list(Parser("k=v\n[a]"))
        boundary = items[2]
        assert boundary.is_boundary
        assert boundary.location.offset == 4
        assert boundary.lineno == 2

    def test_trailing_boundary_at_end(self) -> None:
        source = "k=v\n"
        items = list(Parser(source))
        assert items[-1].location.offset == len(source)
        assert items[-1].text == ""
