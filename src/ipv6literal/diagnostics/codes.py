"""Diagnostic codes and data structures.

Defines error codes, source spans, and diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum, StrEnum

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "ErrorCategory",
    "SourceSpan",
]


class ErrorCategory(StrEnum):
    """Error categorization for parse failures.

    Inherits from ``StrEnum`` so that ``str(category)`` and direct string
    comparisons work without accessing ``.value``.

    Categories:
        LEXICAL: Input did not have the expected shape (wrong or missing character)
        RANGE: Input had the right shape but a value did not fit
        STRUCTURE: Whole-input failures (leftover text, no matching form)
    """

    LEXICAL = "lexical"
    RANGE = "range"
    STRUCTURE = "structure"


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Lexical errors (character-level mismatches)
        2000-2999: Range errors (values that do not fit their slot)
        3000-3999: Structural errors (whole-input failures)
    """

    # Lexical errors (1000-1999)
    INVALID_HEX_DIGIT = 1001
    UNEXPECTED_CHARACTER = 1002
    INCOMPLETE_INPUT = 1003

    # Range errors (2000-2999)
    GROUP_OVERFLOW = 2001
    COMPRESSION_RANGE_ERROR = 2002
    OCTET_OUT_OF_RANGE = 2003

    # Structural errors (3000-3999)
    TRAILING_CHARACTERS = 3001
    NO_ALTERNATIVE_MATCHED = 3002
    INPUT_TOO_LONG = 3003

    @property
    def category(self) -> ErrorCategory:
        """Category derived from the code's numeric range."""
        if self.value < 2000:
            return ErrorCategory.LEXICAL
        if self.value < 3000:
            return ErrorCategory.RANGE
        return ErrorCategory.STRUCTURE


@dataclass(frozen=True, slots=True)
class SourceSpan:
    """Source location for error reporting.

    Attributes:
        start: Starting character offset (0-indexed)
        end: Ending character offset (exclusive)
        column: Column number (1-indexed)
    """

    start: int
    end: int
    column: int

    def __post_init__(self) -> None:
        """Validate SourceSpan invariants.

        Raises:
            ValueError: If start is negative, end precedes start, or column
                is less than 1.
        """
        if self.start < 0:
            msg = f"SourceSpan.start must be >= 0, got {self.start}"
            raise ValueError(msg)
        if self.end < self.start:
            msg = f"SourceSpan.end ({self.end}) must be >= start ({self.start})"
            raise ValueError(msg)
        if self.column < 1:
            msg = f"SourceSpan.column must be >= 1 (1-indexed), got {self.column}"
            raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Inspired by Rust compiler diagnostics. Provides rich error information
    for both humans and tools.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        span: Source location (None when the failure has no position)
        hint: Suggestion for fixing the error
        help_url: Documentation URL for this error
        input_value: The text being parsed, for context lines
        expected: Tokens the parser would have accepted at the span
    """

    code: DiagnosticCode
    message: str
    span: SourceSpan | None = None
    hint: str | None = None
    help_url: str | None = None
    input_value: str | None = None
    expected: tuple[str, ...] = ()

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Example output:
            error[OCTET_OUT_OF_RANGE]: IPv4 octet 999 is out of range (0-255)
              --> column 3
               | ::999.1.1.1
               |   ^
              = help: Each dotted-quad octet must be a decimal number from 0 to 255

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
