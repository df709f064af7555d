"""Grammar rules for IPv6 address literals.

Uses the following grammar (RFC 3986 Appendix A):

    IPv6address =                            6( h16 ":" ) ls32
                /                       "::" 5( h16 ":" ) ls32
                / [               h16 ] "::" 4( h16 ":" ) ls32
                / [ *1( h16 ":" ) h16 ] "::" 3( h16 ":" ) ls32
                / [ *2( h16 ":" ) h16 ] "::" 2( h16 ":" ) ls32
                / [ *3( h16 ":" ) h16 ] "::"    h16 ":"   ls32
                / [ *4( h16 ":" ) h16 ] "::"              ls32
                / [ *5( h16 ":" ) h16 ] "::"              h16
                / [ *6( h16 ":" ) h16 ] "::"

    h16         = 1*4HEXDIG
    ls32        = ( h16 ":" h16 ) / IPv4address

Groups before "::" are written from the front of the buffer. Parsing "::"
applies a CompressionMark carrying the number of groups its alternative
still has to read, so those groups land at the tail and the skipped slots
stay zero.

Lookahead:
    ``h16 ":"`` is only accepted when the ":" is not followed by another ":".
    Otherwise the greedy head repetition would eat the first colon of "::"
    and the alternative could never see its compression token.
"""

from dataclasses import dataclass

from ipv6literal.diagnostics import DiagnosticCode, ErrorTemplate
from ipv6literal.syntax.buffer import CompressionMark, GroupBuffer
from ipv6literal.syntax.cursor import Cursor, ParseError
from ipv6literal.syntax.parser.combinators import (
    Rule,
    alternatives,
    collect,
    emit,
    exact,
    maybe,
    not_followed_by,
    repeat,
    sequence,
    symbol,
)
from ipv6literal.syntax.parser.primitives import parse_h16, parse_ipv4

__all__ = [
    "ADDRESS_ALTERNATIVES",
    "AddressAlternative",
    "double_colon",
    "h16",
    "h16_with_colon",
    "ipv4",
    "ls32",
]


def _group_overflow(cursor: Cursor) -> ParseError:
    return ParseError(DiagnosticCode.GROUP_OVERFLOW, ErrorTemplate.group_overflow(), cursor)


def _append_ipv4(buffer: GroupBuffer, groups: tuple[int, int]) -> GroupBuffer | None:
    return buffer.append_ipv4(*groups)


# =============================================================================
# Building Blocks
# =============================================================================

h16: Rule = collect(parse_h16, GroupBuffer.append, _group_overflow)
"""One hex group, appended to the buffer."""

ipv4: Rule = collect(parse_ipv4, _append_ipv4, _group_overflow)
"""Dotted-quad literal, appended as two groups."""

h16_with_colon: Rule = sequence(h16, symbol(":"), not_followed_by(symbol(":")))
"""``h16 ":"`` that is not the start of a "::" token."""

ls32: Rule = alternatives(sequence(h16, symbol(":"), h16), ipv4)
"""Last 32 bits: two hex groups, or an IPv4 literal when that fails."""


def double_colon(remaining: int) -> Rule:
    """Match "::" and reposition the buffer for ``remaining`` tail groups."""
    mark = CompressionMark(remaining)

    def reject(cursor: Cursor) -> ParseError:
        return ParseError(
            DiagnosticCode.COMPRESSION_RANGE_ERROR,
            ErrorTemplate.compression_range(remaining),
            cursor,
        )

    return sequence(exact("::"), emit(mark, GroupBuffer.apply_compression, reject))


def _head(max_separated: int) -> Rule:
    """``[ *N( h16 ":" ) h16 ]``: optional groups before "::"."""
    return maybe(repeat(0, max_separated, h16_with_colon), h16)


# =============================================================================
# Address Alternatives
# =============================================================================


@dataclass(frozen=True, slots=True)
class AddressAlternative:
    """One top-level production of the address grammar.

    Attributes:
        index: 1-based priority (1 is tried first)
        pattern: ABNF text of the production, for logs and diagnostics
        compression: Groups reserved by its "::" (None when it has none)
        rule: The composed rule
    """

    index: int
    pattern: str
    compression: int | None
    rule: Rule


ADDRESS_ALTERNATIVES: tuple[AddressAlternative, ...] = (
    AddressAlternative(
        1,
        '6( h16 ":" ) ls32',
        None,
        sequence(repeat(6, 6, h16_with_colon), ls32),
    ),
    AddressAlternative(
        2,
        '"::" 5( h16 ":" ) ls32',
        7,
        sequence(double_colon(7), repeat(5, 5, h16_with_colon), ls32),
    ),
    AddressAlternative(
        3,
        '[ h16 ] "::" 4( h16 ":" ) ls32',
        6,
        sequence(maybe(h16), double_colon(6), repeat(4, 4, h16_with_colon), ls32),
    ),
    AddressAlternative(
        4,
        '[ *1( h16 ":" ) h16 ] "::" 3( h16 ":" ) ls32',
        5,
        sequence(_head(1), double_colon(5), repeat(3, 3, h16_with_colon), ls32),
    ),
    AddressAlternative(
        5,
        '[ *2( h16 ":" ) h16 ] "::" 2( h16 ":" ) ls32',
        4,
        sequence(_head(2), double_colon(4), repeat(2, 2, h16_with_colon), ls32),
    ),
    AddressAlternative(
        6,
        '[ *3( h16 ":" ) h16 ] "::" h16 ":" ls32',
        3,
        sequence(_head(3), double_colon(3), h16_with_colon, ls32),
    ),
    AddressAlternative(
        7,
        '[ *4( h16 ":" ) h16 ] "::" ls32',
        2,
        sequence(_head(4), double_colon(2), ls32),
    ),
    AddressAlternative(
        8,
        '[ *5( h16 ":" ) h16 ] "::" h16',
        1,
        sequence(_head(5), double_colon(1), h16),
    ),
    AddressAlternative(
        9,
        '[ *6( h16 ":" ) h16 ] "::"',
        0,
        sequence(_head(6), double_colon(0)),
    ),
)
