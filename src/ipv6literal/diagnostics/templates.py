"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from ipv6literal.constants import (
    GRAMMAR_URL,
    H16_MAX_DIGITS,
    OCTET_MAX,
    TEXT_REPRESENTATION_URL,
)

from .codes import Diagnostic, DiagnosticCode, SourceSpan


class ErrorTemplate:
    """Centralized error message templates.

    Every parser failure message is built by a static method here, so the
    wording lives in one place and tests can compare against it directly.

    Message builders return plain strings for the parser's hot path; the
    ``diagnostic`` builder wraps a failure into a full Diagnostic with hint
    and help URL only when a caller asks for one.
    """

    _HINTS: dict[DiagnosticCode, str] = {
        DiagnosticCode.INVALID_HEX_DIGIT: (
            f"A group is 1 to {H16_MAX_DIGITS} hexadecimal digits (0-9, a-f, A-F)"
        ),
        DiagnosticCode.UNEXPECTED_CHARACTER: (
            "Groups are separated by ':' and a run of zero groups is written '::'"
        ),
        DiagnosticCode.INCOMPLETE_INPUT: "The address ends in the middle of a group or octet",
        DiagnosticCode.GROUP_OVERFLOW: "An IPv6 address has exactly eight 16-bit groups",
        DiagnosticCode.COMPRESSION_RANGE_ERROR: "'::' cannot stand for more than eight groups",
        DiagnosticCode.OCTET_OUT_OF_RANGE: (
            f"Each dotted-quad octet must be a decimal number from 0 to {OCTET_MAX}"
        ),
        DiagnosticCode.TRAILING_CHARACTERS: (
            "Remove the text after the address (zone IDs and ports are not part of it)"
        ),
        DiagnosticCode.NO_ALTERNATIVE_MATCHED: (
            "Write eight groups, or fewer groups with exactly one '::'"
        ),
        DiagnosticCode.INPUT_TOO_LONG: "Pass a single address literal, not a document",
    }

    @staticmethod
    def invalid_hex_digit() -> str:
        """No hex digit where an h16 group must start."""
        return "Expected hexadecimal digit"

    @staticmethod
    def unexpected_character(found: str, expected: str) -> str:
        """A literal character did not match.

        Args:
            found: The character present in the input
            expected: Human-readable description of what was expected

        Returns:
            Error message text
        """
        return f"Unexpected character {found!r}, expected {expected}"

    @staticmethod
    def unexpected_token(text: str) -> str:
        """Negative lookahead hit: text that must not follow here."""
        return f"Unexpected {text!r} at this position"

    @staticmethod
    def incomplete_input(expected: str) -> str:
        """Input ended where more text was required."""
        return f"Unexpected end of input, expected {expected}"

    @staticmethod
    def group_overflow() -> str:
        """More than eight groups supplied."""
        return "Too many groups: an IPv6 address has at most 8"

    @staticmethod
    def compression_range(remaining: int) -> str:
        """Compression mark asks for more tail groups than exist."""
        return f"Compression cannot reserve {remaining} trailing groups (maximum 8)"

    @staticmethod
    def octet_out_of_range(text: str) -> str:
        """Dotted-quad octet above 255."""
        return f"IPv4 octet {text} is out of range (0-{OCTET_MAX})"

    @staticmethod
    def trailing_characters(remainder: str) -> str:
        """Winning alternative left input unconsumed."""
        return f"Unexpected trailing characters {remainder!r}"

    @staticmethod
    def no_alternative_matched() -> str:
        """None of the nine address forms matched."""
        return "Not a valid IPv6 address"

    @staticmethod
    def input_too_long(length: int, limit: int) -> str:
        """Input exceeds the configured length guard."""
        return f"Input length {length} exceeds maximum of {limit} characters"

    @staticmethod
    def diagnostic(
        code: DiagnosticCode,
        message: str,
        *,
        source: str,
        position: int,
        expected: tuple[str, ...] = (),
    ) -> Diagnostic:
        """Build a Diagnostic for a parse failure.

        Args:
            code: Failure kind
            message: Message text from one of the builders above
            source: The input that was being parsed
            position: Character offset of the failure
            expected: Tokens acceptable at ``position``

        Returns:
            Diagnostic with a one-character span (empty at end of input)
        """
        end = min(position + 1, len(source))
        span = SourceSpan(start=position, end=max(end, position), column=position + 1)
        help_url = (
            TEXT_REPRESENTATION_URL if code is DiagnosticCode.GROUP_OVERFLOW else GRAMMAR_URL
        )
        return Diagnostic(
            code=code,
            message=message,
            span=span,
            hint=ErrorTemplate._HINTS.get(code),
            help_url=help_url,
            input_value=source,
            expected=expected,
        )
