"""Immutable cursor infrastructure for type-safe parsing.

Implements the immutable cursor pattern for zero-`None` parsing.
Python 3.13+. Zero external dependencies.

Design Philosophy:
    - Cursor is immutable (frozen dataclass)
    - EOF is a state (is_eof), not a return value
    - Every advance() returns NEW cursor, so a failed attempt can never
      move the position seen by its caller
    - Failures are values (ParseError), not exceptions

Pattern Reference:
    - Rust nom parser combinator library
    - Haskell Parsec
"""

from dataclasses import dataclass, field

from ipv6literal.diagnostics import Diagnostic, DiagnosticCode, ErrorCategory, ErrorTemplate

__all__ = ["Cursor", "ParseError", "ParseResult"]


@dataclass(frozen=True, slots=True)
class Cursor:
    """Immutable source position tracker.

    Example:
        >>> cursor = Cursor("fe01::", 0)
        >>> cursor.current
        'f'
        >>> cursor.advance().current
        'e'
        >>> cursor.current  # Original unchanged (immutability)
        'f'
        >>> Cursor("::", 2).is_eof
        True
    """

    source: str
    pos: int

    @property
    def is_eof(self) -> bool:
        """Check if at end of input."""
        return self.pos >= len(self.source)

    @property
    def current(self) -> str:
        """Get current character.

        Returns:
            Current character at position

        Raises:
            EOFError: If at end of input. Check is_eof first; reaching
                this is a bug in the calling parser.
        """
        if self.is_eof:
            msg = f"Unexpected EOF at position {self.pos}"
            raise EOFError(msg)
        return self.source[self.pos]

    def peek(self, offset: int = 0) -> str | None:
        """Peek at character with offset without advancing.

        Args:
            offset: Offset from current position (0 = current, 1 = next)

        Returns:
            Character at position + offset, or None if beyond EOF
        """
        target_pos = self.pos + offset
        if target_pos >= len(self.source):
            return None
        return self.source[target_pos]

    def advance(self, count: int = 1) -> "Cursor":
        """Return new cursor advanced by count positions.

        Args:
            count: Number of positions to advance (default: 1)

        Returns:
            New Cursor instance at new position (original unchanged)
        """
        new_pos = min(self.pos + count, len(self.source))
        return Cursor(self.source, new_pos)

    def slice_to(self, end_pos: int) -> str:
        """Extract source slice from current position to end_pos.

        Example:
            >>> start_cursor = Cursor("127.0.0.1", 0)
            >>> start_cursor.slice_to(3)
            '127'
        """
        return self.source[self.pos : end_pos]

    @property
    def remainder(self) -> str:
        """Unconsumed input from the current position to the end."""
        return self.source[self.pos :]


@dataclass(frozen=True, slots=True)
class ParseResult[T]:
    """Parser result containing parsed value and new cursor position.

    Type Parameters:
        T: The type of the parsed value

    Pattern:
        Every parser has signature:
            def parse_foo(cursor: Cursor) -> ParseResult[Foo] | ParseError:
                ...
                return ParseResult(parsed_value, new_cursor)

    Example:
        >>> result = ParseResult(0xFE01, Cursor("fe01::", 4))
        >>> result.value
        65025
        >>> result.cursor.current
        ':'
    """

    value: T
    cursor: Cursor


@dataclass(frozen=True, slots=True)
class ParseError:
    """Parse failure with kind, location and context.

    Design:
        - Stores cursor at error point (offset into the input)
        - Code identifies the failure kind
        - Expected tokens tuple (immutable for better errors)
        - Optional cause: the failure that explains a summary error such
          as NO_ALTERNATIVE_MATCHED

    Example:
        >>> cursor = Cursor("fe01:x", 5)
        >>> error = ParseError(
        ...     DiagnosticCode.INVALID_HEX_DIGIT,
        ...     "Expected hexadecimal digit",
        ...     cursor,
        ...     expected=("0-9", "a-f", "A-F"),
        ... )
        >>> error.format_error()
        "6: Expected hexadecimal digit (expected: '0-9', 'a-f', 'A-F')"
    """

    code: DiagnosticCode
    message: str
    cursor: Cursor
    expected: tuple[str, ...] = field(default_factory=tuple)
    cause: "ParseError | None" = None

    @property
    def position(self) -> int:
        """Character offset of the failure."""
        return self.cursor.pos

    @property
    def is_range_error(self) -> bool:
        """True when the input had the right shape but a value did not fit."""
        return self.code.category is ErrorCategory.RANGE

    def outranks(self, other: "ParseError") -> bool:
        """Check whether this failure explains the input better than other.

        A range failure outranks a lexical one: the alternative that raised
        it recognized the shape of the text. Within the same rank the failure
        that got further into the input wins. Ties go to other, so the
        earliest-tried alternative is kept.
        """
        if self.is_range_error != other.is_range_error:
            return self.is_range_error
        return self.position > other.position

    def format_error(self) -> str:
        """Format error with 1-indexed column.

        Example:
            >>> error = ParseError(DiagnosticCode.TRAILING_CHARACTERS,
            ...                    "Unexpected trailing characters '%eth0'",
            ...                    Cursor("fe80::1%eth0", 7))
            >>> error.format_error()
            "8: Unexpected trailing characters '%eth0'"
        """
        error_msg = f"{self.position + 1}: {self.message}"

        if self.expected:
            expected_str = ", ".join(f"'{e}'" for e in self.expected)
            error_msg += f" (expected: {expected_str})"

        return error_msg

    def format_with_context(self) -> str:
        """Format error with the input line and a caret under the failure.

        Example:
            >>> print(error.format_with_context())
            8: Unexpected trailing characters '%eth0'
            <BLANKLINE>
               1 | fe80::1%eth0
                 |        ^
        """
        line_num_str = f"{1:4} | "
        pointer = " " * (len(line_num_str) + self.position) + "^"
        return "\n".join(
            [self.format_error(), "", line_num_str + self.cursor.source, pointer]
        )

    def to_diagnostic(self) -> Diagnostic:
        """Convert to a structured Diagnostic with hint and help URL."""
        return ErrorTemplate.diagnostic(
            self.code,
            self.message,
            source=self.cursor.source,
            position=self.position,
            expected=self.expected,
        )
