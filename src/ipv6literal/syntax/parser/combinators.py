"""Parsing primitives for building address rules.

A rule is a function ``(cursor, buffer) -> ParseResult[GroupBuffer] | ParseError``.
Because both Cursor and GroupBuffer are immutable, every combinator here is
all-or-nothing for free: a failed rule hands back an error and the caller
still holds the cursor and buffer it started with.

Combinators:
    symbol / exact      - literal characters (buffer unchanged)
    not_followed_by     - negative lookahead (consumes nothing)
    sequence            - all rules in order, first failure aborts
    repeat              - greedy bounded repetition, no backtracking into the count
    maybe               - optional sequence
    alternatives        - ordered choice, first success wins
    collect / emit      - move a parsed value into the buffer
"""

from collections.abc import Callable

from ipv6literal.diagnostics import DiagnosticCode, ErrorTemplate
from ipv6literal.syntax.buffer import GroupBuffer
from ipv6literal.syntax.cursor import Cursor, ParseError, ParseResult
from ipv6literal.syntax.parser.primitives import expect_symbol

__all__ = [
    "Rule",
    "alternatives",
    "collect",
    "emit",
    "exact",
    "maybe",
    "most_significant",
    "not_followed_by",
    "repeat",
    "sequence",
    "symbol",
]

type Rule = Callable[[Cursor, GroupBuffer], ParseResult[GroupBuffer] | ParseError]
type Parser[T] = Callable[[Cursor], ParseResult[T] | ParseError]
type Write[T] = Callable[[GroupBuffer, T], GroupBuffer | None]
type Reject = Callable[[Cursor], ParseError]


def most_significant(errors: list[ParseError]) -> ParseError:
    """Pick the failure that best explains why all attempts failed.

    Uses ParseError.outranks; the earliest error wins ties.

    Raises:
        ValueError: If errors is empty
    """
    if not errors:
        msg = "most_significant() requires at least one error"
        raise ValueError(msg)
    best = errors[0]
    for error in errors[1:]:
        if error.outranks(best):
            best = error
    return best


def symbol(char: str) -> Rule:
    """Match one literal character."""

    def rule(cursor: Cursor, buffer: GroupBuffer) -> ParseResult[GroupBuffer] | ParseError:
        result = expect_symbol(cursor, char)
        if isinstance(result, ParseError):
            return result
        return ParseResult(buffer, result.cursor)

    return rule


def exact(text: str) -> Rule:
    """Match a literal string, failing at the first character that differs."""
    return sequence(*(symbol(char) for char in text))


def not_followed_by(inner: Rule) -> Rule:
    """Succeed without consuming input only if inner does NOT match here."""

    def rule(cursor: Cursor, buffer: GroupBuffer) -> ParseResult[GroupBuffer] | ParseError:
        result = inner(cursor, buffer)
        if isinstance(result, ParseError):
            return ParseResult(buffer, cursor)
        return ParseError(
            DiagnosticCode.UNEXPECTED_CHARACTER,
            ErrorTemplate.unexpected_token(cursor.slice_to(result.cursor.pos)),
            cursor,
        )

    return rule


def sequence(*rules: Rule) -> Rule:
    """Run rules in order, threading cursor and buffer through them."""

    def rule(cursor: Cursor, buffer: GroupBuffer) -> ParseResult[GroupBuffer] | ParseError:
        for step in rules:
            result = step(cursor, buffer)
            if isinstance(result, ParseError):
                return result
            cursor, buffer = result.cursor, result.value
        return ParseResult(buffer, cursor)

    return rule


def repeat(min_count: int, max_count: int, inner: Rule) -> Rule:
    """Apply inner between min_count and max_count times, greedily.

    Stops at the first failed iteration. The count reached is final: a later
    failure in the enclosing sequence does not retry with fewer iterations.

    Raises:
        ValueError: If the bounds are negative or inverted
    """
    if min_count < 0 or max_count < min_count:
        msg = f"Invalid repeat bounds: min={min_count}, max={max_count}"
        raise ValueError(msg)

    def rule(cursor: Cursor, buffer: GroupBuffer) -> ParseResult[GroupBuffer] | ParseError:
        for count in range(max_count):
            result = inner(cursor, buffer)
            if isinstance(result, ParseError):
                if count < min_count:
                    return result
                break
            cursor, buffer = result.cursor, result.value
        return ParseResult(buffer, cursor)

    return rule


def maybe(*rules: Rule) -> Rule:
    """Optional sequence: on failure, succeed with nothing consumed."""
    inner = sequence(*rules)

    def rule(cursor: Cursor, buffer: GroupBuffer) -> ParseResult[GroupBuffer] | ParseError:
        result = inner(cursor, buffer)
        if isinstance(result, ParseError):
            return ParseResult(buffer, cursor)
        return result

    return rule


def alternatives(*rules: Rule) -> Rule:
    """Ordered choice: the first rule that succeeds wins.

    Every branch starts from the same cursor and buffer. When all branches
    fail, the most significant branch failure is returned.
    """

    def rule(cursor: Cursor, buffer: GroupBuffer) -> ParseResult[GroupBuffer] | ParseError:
        failures: list[ParseError] = []
        for branch in rules:
            result = branch(cursor, buffer)
            if not isinstance(result, ParseError):
                return result
            failures.append(result)
        return most_significant(failures)

    return rule


def collect[T](parser: Parser[T], write: Write[T], reject: Reject) -> Rule:
    """Parse a value and write it into the buffer.

    Args:
        parser: Leaf parser producing the value
        write: Buffer operation storing the value; returns None if it does not fit
        reject: Builds the error reported when write returns None, given the
            cursor where the value started
    """

    def rule(cursor: Cursor, buffer: GroupBuffer) -> ParseResult[GroupBuffer] | ParseError:
        result = parser(cursor)
        if isinstance(result, ParseError):
            return result
        written = write(buffer, result.value)
        if written is None:
            return reject(cursor)
        return ParseResult(written, result.cursor)

    return rule


def emit[T](value: T, write: Write[T], reject: Reject) -> Rule:
    """Write a constant into the buffer without consuming input."""
    return collect(lambda cursor: ParseResult(value, cursor), write, reject)
