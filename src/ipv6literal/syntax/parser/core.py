"""Core IPv6 literal parser implementation.

This module provides the IPv6Parser class that drives the nine grammar
alternatives of :mod:`ipv6literal.syntax.parser.rules` against a complete
input string.

Architecture:
    Each alternative is tried from the start of the input with the empty
    :class:`~ipv6literal.syntax.buffer.GroupBuffer`. Cursor and buffer are
    immutable, so an alternative that fails leaves nothing behind for the
    next one to see. The first alternative that succeeds wins; it must then
    have consumed the whole input.

Error Selection:
    - Winner left text starting with "." and an earlier alternative failed
      on an out-of-range value: that range error is reported. The winner only
      stopped short because the dotted quad it would have needed was invalid
      (``::999.1.1.1`` matches ``::999`` as a group).
    - Winner read all eight groups and the leftover is another ":" group:
      GROUP_OVERFLOW at the surplus group.
    - Any other leftover: TRAILING_CHARACTERS.
    - No alternative matched: NO_ALTERNATIVE_MATCHED, positioned at and
      caused by the most significant failure among the nine attempts.

Security:
    Includes a configurable input length limit so that arbitrarily long
    input is rejected before any grammar work.
"""

import logging

from ipv6literal.constants import MAX_INPUT_LENGTH
from ipv6literal.diagnostics import DiagnosticCode, ErrorTemplate
from ipv6literal.syntax.buffer import EMPTY_BUFFER, GroupBuffer
from ipv6literal.syntax.cursor import Cursor, ParseError, ParseResult
from ipv6literal.syntax.parser.combinators import most_significant
from ipv6literal.syntax.parser.primitives import expect_symbol, parse_h16
from ipv6literal.syntax.parser.rules import ADDRESS_ALTERNATIVES, AddressAlternative

__all__ = ["IPv6Groups", "IPv6Parser"]

logger = logging.getLogger(__name__)

type IPv6Groups = tuple[int, ...]


class IPv6Parser:
    """IPv6 address literal parser using immutable cursor pattern.

    Design:
    - Every rule takes an immutable Cursor and GroupBuffer
    - Every rule returns ParseResult | ParseError (no exceptions for bad input)
    - No state outlives a call; one instance is safe to share across threads

    Security:
    - Configurable max_input_length rejects oversized input up front
    - Default limit: 1024 characters

    Attributes:
        max_input_length: Maximum accepted input length (0 disables the check)
    """

    __slots__ = ("_max_input_length",)

    def __init__(self, *, max_input_length: int | None = None) -> None:
        """Initialize parser with an optional input length limit.

        Args:
            max_input_length: Maximum input length in characters (default: 1024).
                              Set to 0 to disable the limit.

        Raises:
            ValueError: If max_input_length is negative
        """
        if max_input_length is not None and max_input_length < 0:
            msg = f"max_input_length must be >= 0, got {max_input_length}"
            raise ValueError(msg)
        self._max_input_length = (
            max_input_length if max_input_length is not None else MAX_INPUT_LENGTH
        )

    @property
    def max_input_length(self) -> int:
        """Maximum accepted input length in characters."""
        return self._max_input_length

    def parse(self, text: str) -> ParseResult[IPv6Groups] | ParseError:
        """Parse a complete IPv6 address literal into eight groups.

        Args:
            text: Address text without brackets, e.g. ``"fe80::1"``

        Returns:
            ParseResult whose value is the eight groups and whose cursor sits
            at end of input, or the ParseError explaining the rejection

        Raises:
            TypeError: If text is not a str

        Example:
            >>> result = IPv6Parser().parse("::127.0.0.1")
            >>> [hex(g) for g in result.value]
            ['0x0', '0x0', '0x0', '0x0', '0x0', '0x0', '0x7f00', '0x1']
        """
        cursor = self._start(text)
        if isinstance(cursor, ParseError):
            return cursor

        failures: list[ParseError] = []
        for alternative in ADDRESS_ALTERNATIVES:
            result = alternative.rule(cursor, EMPTY_BUFFER)
            if isinstance(result, ParseError):
                logger.debug(
                    "Alternative %d (%s) failed at %d: %s",
                    alternative.index,
                    alternative.pattern,
                    result.position,
                    result.message,
                )
                failures.append(result)
                continue
            return self._finish(alternative, result, failures)

        cause = most_significant(failures)
        logger.debug("No alternative matched %r; best failure: %s", text, cause.format_error())
        return ParseError(
            DiagnosticCode.NO_ALTERNATIVE_MATCHED,
            ErrorTemplate.no_alternative_matched(),
            cause.cursor,
            expected=cause.expected,
            cause=cause,
        )

    def parse_h16(self, text: str) -> ParseResult[int] | ParseError:
        """Parse text that must consist of exactly one h16 group.

        Raises:
            TypeError: If text is not a str

        Example:
            >>> IPv6Parser().parse_h16("AbCe").value == 0xABCE
            True
        """
        cursor = self._start(text)
        if isinstance(cursor, ParseError):
            return cursor

        result = parse_h16(cursor)
        if isinstance(result, ParseError):
            return result
        if not result.cursor.is_eof:
            return _trailing(result.cursor)
        return result

    def _start(self, text: str) -> Cursor | ParseError:
        if not isinstance(text, str):
            msg = f"Expected str, got {type(text).__name__}"
            raise TypeError(msg)
        if self._max_input_length and len(text) > self._max_input_length:
            logger.debug("Rejected input of %d characters", len(text))
            return ParseError(
                DiagnosticCode.INPUT_TOO_LONG,
                ErrorTemplate.input_too_long(len(text), self._max_input_length),
                Cursor(text, self._max_input_length),
            )
        return Cursor(text, 0)

    def _finish(
        self,
        alternative: AddressAlternative,
        result: ParseResult[GroupBuffer],
        failures: list[ParseError],
    ) -> ParseResult[IPv6Groups] | ParseError:
        """Accept the winning alternative if it consumed all input."""
        buffer, cursor = result.value, result.cursor
        if cursor.is_eof:
            logger.debug(
                "Parsed %r with alternative %d (%s)",
                cursor.source,
                alternative.index,
                alternative.pattern,
            )
            return ParseResult(buffer.groups, cursor)

        logger.debug(
            "Alternative %d (%s) stopped at %d of %d",
            alternative.index,
            alternative.pattern,
            cursor.pos,
            len(cursor.source),
        )

        range_failures = [failure for failure in failures if failure.is_range_error]
        if cursor.current == "." and range_failures:
            return most_significant(range_failures)

        # A final "::" fills the buffer without reading groups; what follows
        # it is trailing text, not a ninth group.
        if buffer.is_full and alternative.compression != 0:
            overflow = _surplus_group(cursor, buffer)
            if overflow is not None:
                return overflow

        return _trailing(cursor)


def _surplus_group(cursor: Cursor, buffer: GroupBuffer) -> ParseError | None:
    """Report GROUP_OVERFLOW if the leftover text is one more ":" h16 group."""
    colon = expect_symbol(cursor, ":")
    if isinstance(colon, ParseError):
        return None
    group = parse_h16(colon.cursor)
    if isinstance(group, ParseError):
        return None
    if buffer.append(group.value) is not None:
        return None
    return ParseError(DiagnosticCode.GROUP_OVERFLOW, ErrorTemplate.group_overflow(), colon.cursor)


def _trailing(cursor: Cursor) -> ParseError:
    return ParseError(
        DiagnosticCode.TRAILING_CHARACTERS,
        ErrorTemplate.trailing_characters(cursor.remainder),
        cursor,
    )
