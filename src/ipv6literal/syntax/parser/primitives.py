"""Primitive parsing utilities for IPv6 address literals.

This module provides the leaf parsers of the RFC 3986 address grammar:
hexadecimal groups (h16), decimal octets and dotted-quad IPv4 literals.

Every parser takes a Cursor and returns ``ParseResult[T] | ParseError``.
Failures never raise and never move the caller's cursor.
"""

from ipv6literal.constants import H16_MAX_DIGITS, IPV4_OCTET_COUNT, OCTET_MAX
from ipv6literal.diagnostics import DiagnosticCode, ErrorTemplate
from ipv6literal.syntax.cursor import Cursor, ParseError, ParseResult

__all__ = [
    "HEX_EXPECTED",
    "expect_symbol",
    "hex_value",
    "is_hex_digit",
    "parse_dec_octet",
    "parse_h16",
    "parse_ipv4",
]

# ASCII only: str.isdigit() and int(ch, 16) accept non-ASCII digits like '٣'.
_HEX_DIGITS: str = "0123456789abcdefABCDEF"
_ASCII_DIGITS: str = "0123456789"

HEX_EXPECTED: tuple[str, ...] = ("0-9", "a-f", "A-F")
_DIGIT_EXPECTED: tuple[str, ...] = ("0-9",)


def is_hex_digit(ch: str | None) -> bool:
    """Check if character is an ASCII hexadecimal digit."""
    return ch is not None and len(ch) == 1 and ch in _HEX_DIGITS


def hex_value(ch: str) -> int:
    """Nibble value of an ASCII hex digit (case-insensitive).

    Raises:
        ValueError: If ch is not an ASCII hex digit
    """
    index = _HEX_DIGITS.find(ch) if len(ch) == 1 else -1
    if index < 0:
        msg = f"Not a hexadecimal digit: {ch!r}"
        raise ValueError(msg)
    # "abcdef" and "ABCDEF" both follow the ten decimal digits.
    return index if index < 16 else index - 6


def expect_symbol(cursor: Cursor, symbol: str) -> ParseResult[str] | ParseError:
    """Consume exactly one literal character.

    Returns:
        ParseResult(symbol, advanced cursor) on match, otherwise
        ParseError with INCOMPLETE_INPUT at end of input or
        UNEXPECTED_CHARACTER for any other character
    """
    if cursor.is_eof:
        return ParseError(
            DiagnosticCode.INCOMPLETE_INPUT,
            ErrorTemplate.incomplete_input(repr(symbol)),
            cursor,
            expected=(symbol,),
        )
    if cursor.current != symbol:
        return ParseError(
            DiagnosticCode.UNEXPECTED_CHARACTER,
            ErrorTemplate.unexpected_character(cursor.current, repr(symbol)),
            cursor,
            expected=(symbol,),
        )
    return ParseResult(symbol, cursor.advance())


def parse_h16(cursor: Cursor) -> ParseResult[int] | ParseError:
    """Parse h16: 1*4HEXDIG

    Digits are accumulated most-significant first. Parsing stops after four
    digits even when more hex digits follow; those are left for the next
    token, which then fails on them.

    Examples:
        0 -> 0x0
        fe01 -> 0xfe01
        AbCe -> 0xabce
        12345 -> 0x1234 (cursor stops before '5')

    Args:
        cursor: Current position in source

    Returns:
        ParseResult(group, new_cursor) on success
        ParseError(INVALID_HEX_DIGIT) if no hex digit is present
    """
    if not is_hex_digit(cursor.peek()):
        return ParseError(
            DiagnosticCode.INVALID_HEX_DIGIT,
            ErrorTemplate.invalid_hex_digit(),
            cursor,
            expected=HEX_EXPECTED,
        )

    value = 0
    digits = 0
    while digits < H16_MAX_DIGITS and is_hex_digit(cursor.peek()):
        value = (value << 4) | hex_value(cursor.current)
        cursor = cursor.advance()
        digits += 1

    return ParseResult(value, cursor)


def parse_dec_octet(cursor: Cursor) -> ParseResult[int] | ParseError:
    """Parse one dotted-quad octet: 1*DIGIT with value 0-255.

    Reads every consecutive ASCII digit. Leading zeros are accepted
    ("007" is 7); a value above 255 fails rather than wrapping.

    Args:
        cursor: Current position in source

    Returns:
        ParseResult(octet, new_cursor) on success
        ParseError(OCTET_OUT_OF_RANGE) at the first digit if the value is too big
        ParseError(INCOMPLETE_INPUT / UNEXPECTED_CHARACTER) if no digit is present
    """
    if cursor.is_eof:
        return ParseError(
            DiagnosticCode.INCOMPLETE_INPUT,
            ErrorTemplate.incomplete_input("decimal digit"),
            cursor,
            expected=_DIGIT_EXPECTED,
        )
    if cursor.current not in _ASCII_DIGITS:
        return ParseError(
            DiagnosticCode.UNEXPECTED_CHARACTER,
            ErrorTemplate.unexpected_character(cursor.current, "decimal digit"),
            cursor,
            expected=_DIGIT_EXPECTED,
        )

    start = cursor
    value = 0
    while not cursor.is_eof and cursor.current in _ASCII_DIGITS:
        value = value * 10 + _ASCII_DIGITS.index(cursor.current)
        cursor = cursor.advance()

    if value > OCTET_MAX:
        return ParseError(
            DiagnosticCode.OCTET_OUT_OF_RANGE,
            ErrorTemplate.octet_out_of_range(start.slice_to(cursor.pos)),
            start,
        )
    return ParseResult(value, cursor)


def parse_ipv4(cursor: Cursor) -> ParseResult[tuple[int, int]] | ParseError:
    """Parse IPv4address: dec-octet "." dec-octet "." dec-octet "." dec-octet

    The four octets are combined big-endian into the two groups an IPv6
    address stores them in.

    Examples:
        127.0.0.1 -> (0x7f00, 0x0001)
        255.255.255.255 -> (0xffff, 0xffff)

    Args:
        cursor: Current position in source

    Returns:
        ParseResult((high_group, low_group), new_cursor) on success
        ParseError from the first octet or separator that failed
    """
    octets: list[int] = []
    for index in range(IPV4_OCTET_COUNT):
        if index:
            dot = expect_symbol(cursor, ".")
            if isinstance(dot, ParseError):
                return dot
            cursor = dot.cursor

        octet = parse_dec_octet(cursor)
        if isinstance(octet, ParseError):
            return octet
        octets.append(octet.value)
        cursor = octet.cursor

    b0, b1, b2, b3 = octets
    return ParseResult(((b0 << 8) | b1, (b2 << 8) | b3), cursor)
