"""Tests for rule combinators.

Focus on the rollback contract: a failed rule leaves the caller's cursor
and buffer untouched, and repetition never backtracks into its count.
"""

from __future__ import annotations

import pytest

from ipv6literal.diagnostics import DiagnosticCode
from ipv6literal.syntax.buffer import EMPTY_BUFFER, CompressionMark, GroupBuffer
from ipv6literal.syntax.cursor import Cursor, ParseError
from ipv6literal.syntax.parser.combinators import (
    alternatives,
    collect,
    emit,
    exact,
    maybe,
    most_significant,
    not_followed_by,
    repeat,
    sequence,
    symbol,
)
from ipv6literal.syntax.parser.primitives import parse_h16


def _group_overflow(cursor: Cursor) -> ParseError:
    return ParseError(DiagnosticCode.GROUP_OVERFLOW, "overflow", cursor)


h16 = collect(parse_h16, GroupBuffer.append, _group_overflow)


def _error(code: DiagnosticCode, pos: int) -> ParseError:
    return ParseError(code, code.name, Cursor("x" * 10, pos))


class TestMostSignificant:
    """Test failure selection."""

    def test_empty_list_raises(self) -> None:
        """There is no most significant error of nothing."""
        with pytest.raises(ValueError, match="at least one error"):
            most_significant([])

    def test_furthest_lexical_error_wins(self) -> None:
        """Among lexical errors the furthest position wins."""
        errors = [
            _error(DiagnosticCode.INVALID_HEX_DIGIT, 2),
            _error(DiagnosticCode.UNEXPECTED_CHARACTER, 7),
            _error(DiagnosticCode.INCOMPLETE_INPUT, 4),
        ]

        assert most_significant(errors) is errors[1]

    def test_range_error_beats_position(self) -> None:
        """A range error wins even when a lexical one got further."""
        errors = [
            _error(DiagnosticCode.UNEXPECTED_CHARACTER, 9),
            _error(DiagnosticCode.OCTET_OUT_OF_RANGE, 2),
        ]

        assert most_significant(errors) is errors[1]

    def test_earliest_wins_ties(self) -> None:
        """Equal rank and position keep the first error."""
        errors = [
            _error(DiagnosticCode.INVALID_HEX_DIGIT, 3),
            _error(DiagnosticCode.UNEXPECTED_CHARACTER, 3),
        ]

        assert most_significant(errors) is errors[0]


class TestLiterals:
    """Test symbol, exact and not_followed_by."""

    def test_symbol_keeps_buffer(self) -> None:
        """symbol consumes input but never writes."""
        result = symbol(":")(Cursor(":1", 0), EMPTY_BUFFER)

        assert not isinstance(result, ParseError)
        assert result.value is EMPTY_BUFFER
        assert result.cursor.pos == 1

    def test_exact_fails_at_first_difference(self) -> None:
        """exact reports the first mismatching character."""
        result = exact("::")(Cursor(":1", 0), EMPTY_BUFFER)

        assert isinstance(result, ParseError)
        assert result.position == 1

    def test_not_followed_by_consumes_nothing(self) -> None:
        """Lookahead success leaves the cursor where it was."""
        cursor = Cursor(":1", 1)
        result = not_followed_by(symbol(":"))(cursor, EMPTY_BUFFER)

        assert not isinstance(result, ParseError)
        assert result.cursor == cursor

    def test_not_followed_by_fails_on_match(self) -> None:
        """Lookahead fails where the forbidden token is present."""
        result = not_followed_by(symbol(":"))(Cursor("1::", 2), EMPTY_BUFFER)

        assert isinstance(result, ParseError)
        assert result.code is DiagnosticCode.UNEXPECTED_CHARACTER
        assert result.position == 2


class TestSequence:
    """Test sequence rollback."""

    def test_threads_state(self) -> None:
        """Each rule sees the cursor and buffer of the previous one."""
        result = sequence(h16, symbol(":"), h16)(Cursor("1:2", 0), EMPTY_BUFFER)

        assert not isinstance(result, ParseError)
        assert result.value.groups[:2] == (1, 2)
        assert result.cursor.is_eof

    def test_failure_leaves_caller_state(self) -> None:
        """A failing sequence returns the error; the caller's values are unchanged."""
        cursor = Cursor("1:x", 0)
        result = sequence(h16, symbol(":"), h16)(cursor, EMPTY_BUFFER)

        assert isinstance(result, ParseError)
        assert result.position == 2
        assert cursor.pos == 0
        assert EMPTY_BUFFER.groups == (0,) * 8


class TestRepeat:
    """Test bounded greedy repetition."""

    def test_invalid_bounds(self) -> None:
        """Negative or inverted bounds are a programming error."""
        with pytest.raises(ValueError, match="Invalid repeat bounds"):
            repeat(2, 1, h16)
        with pytest.raises(ValueError, match="Invalid repeat bounds"):
            repeat(-1, 1, h16)

    def test_stops_at_max(self) -> None:
        """No more than max_count iterations run."""
        group_colon = sequence(h16, symbol(":"))
        result = repeat(0, 2, group_colon)(Cursor("1:2:3:", 0), EMPTY_BUFFER)

        assert not isinstance(result, ParseError)
        assert result.cursor.pos == 4
        assert result.value.pos == 2

    def test_below_min_fails(self) -> None:
        """Fewer than min_count matches is an error."""
        group_colon = sequence(h16, symbol(":"))
        result = repeat(3, 3, group_colon)(Cursor("1:2:", 0), EMPTY_BUFFER)

        assert isinstance(result, ParseError)
        assert result.position == 4

    def test_zero_matches_allowed(self) -> None:
        """min_count 0 succeeds with nothing consumed."""
        result = repeat(0, 3, h16)(Cursor(":", 0), EMPTY_BUFFER)

        assert not isinstance(result, ParseError)
        assert result.cursor.pos == 0

    def test_no_backtracking(self) -> None:
        """A greedy repeat that eats too much makes the sequence fail."""
        group_colon = sequence(h16, symbol(":"))
        rule = sequence(repeat(0, 3, group_colon), h16, symbol(":"))
        result = rule(Cursor("1:2:", 0), EMPTY_BUFFER)

        assert isinstance(result, ParseError)


class TestMaybeAndAlternatives:
    """Test optional and ordered choice."""

    def test_maybe_success(self) -> None:
        """maybe returns the inner result when it matches."""
        result = maybe(h16, symbol(":"))(Cursor("1:", 0), EMPTY_BUFFER)

        assert not isinstance(result, ParseError)
        assert result.cursor.pos == 2

    def test_maybe_failure_consumes_nothing(self) -> None:
        """A partial match inside maybe is fully undone."""
        result = maybe(h16, symbol(":"))(Cursor("1.", 0), EMPTY_BUFFER)

        assert not isinstance(result, ParseError)
        assert result.cursor.pos == 0
        assert result.value is EMPTY_BUFFER

    def test_alternatives_first_success_wins(self) -> None:
        """The first matching branch wins even if a later one is longer."""
        rule = alternatives(h16, sequence(h16, symbol(":"), h16))
        result = rule(Cursor("1:2", 0), EMPTY_BUFFER)

        assert not isinstance(result, ParseError)
        assert result.cursor.pos == 1

    def test_alternatives_report_most_significant(self) -> None:
        """When all branches fail, the furthest failure is returned."""
        rule = alternatives(exact("::"), sequence(h16, symbol(":"), h16))
        result = rule(Cursor("1:x", 0), EMPTY_BUFFER)

        assert isinstance(result, ParseError)
        assert result.position == 2
        assert result.code is DiagnosticCode.INVALID_HEX_DIGIT


class TestCollectAndEmit:
    """Test buffer writes."""

    def test_collect_overflow_rejected_at_value_start(self) -> None:
        """A value that does not fit is rejected where it started."""
        full = GroupBuffer((1,) * 8, 8)
        result = h16(Cursor("::9", 2), full)

        assert isinstance(result, ParseError)
        assert result.code is DiagnosticCode.GROUP_OVERFLOW
        assert result.position == 2

    def test_emit_consumes_nothing(self) -> None:
        """emit writes a constant without moving the cursor."""

        def reject(cursor: Cursor) -> ParseError:
            return ParseError(DiagnosticCode.COMPRESSION_RANGE_ERROR, "range", cursor)

        rule = emit(CompressionMark(2), GroupBuffer.apply_compression, reject)
        result = rule(Cursor("::", 2), EMPTY_BUFFER)

        assert not isinstance(result, ParseError)
        assert result.value.pos == 6
        assert result.cursor.pos == 2

    def test_emit_rejection(self) -> None:
        """emit reports the reject error when the write fails."""

        def reject(cursor: Cursor) -> ParseError:
            return ParseError(DiagnosticCode.COMPRESSION_RANGE_ERROR, "range", cursor)

        rule = emit(CompressionMark(9), GroupBuffer.apply_compression, reject)
        result = rule(Cursor("::", 2), EMPTY_BUFFER)

        assert isinstance(result, ParseError)
        assert result.code is DiagnosticCode.COMPRESSION_RANGE_ERROR
