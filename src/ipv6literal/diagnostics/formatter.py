"""Diagnostic formatting service.

Centralizes diagnostic output formatting with configurable options.
Python 3.13+. Zero external dependencies.
"""

import json
from collections.abc import Iterable
from dataclasses import dataclass
from enum import StrEnum

from .codes import Diagnostic

__all__ = [
    "DiagnosticFormatter",
    "OutputFormat",
]


class OutputFormat(StrEnum):
    """Output format options for diagnostic formatting."""

    RUST = "rust"  # Rust compiler-style output (default)
    SIMPLE = "simple"  # Single-line format
    JSON = "json"  # JSON format for tooling integration


@dataclass(frozen=True, slots=True)
class DiagnosticFormatter:
    """Diagnostic formatting service.

    Centralizes formatting of Diagnostic objects into human-readable
    or machine-readable output. Supports multiple output formats and
    sanitization options.

    Attributes:
        output_format: Output style (rust, simple, json)
        sanitize: Truncate content to prevent information leakage
        color: Enable ANSI color codes (for terminal output)
        max_content_length: Maximum content length when sanitizing

    Example:
        >>> formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)
        >>> print(formatter.format(diagnostic))
        TRAILING_CHARACTERS: Unexpected trailing characters '%eth0'
    """

    output_format: OutputFormat = OutputFormat.RUST
    sanitize: bool = False
    color: bool = False
    max_content_length: int = 100

    def format(self, diagnostic: Diagnostic) -> str:
        """Format a single diagnostic.

        Args:
            diagnostic: Diagnostic to format

        Returns:
            Formatted diagnostic string
        """
        match self.output_format:
            case OutputFormat.RUST:
                return self._format_rust(diagnostic)
            case OutputFormat.SIMPLE:
                return self._format_simple(diagnostic)
            case OutputFormat.JSON:
                return self._format_json(diagnostic)

    def format_all(self, diagnostics: Iterable[Diagnostic]) -> str:
        """Format multiple diagnostics.

        Args:
            diagnostics: Iterable of diagnostics to format

        Returns:
            Formatted string with all diagnostics separated by newlines
        """
        separator = "\n" if self.output_format is not OutputFormat.RUST else "\n\n"
        return separator.join(self.format(d) for d in diagnostics)

    def _format_rust(self, diagnostic: Diagnostic) -> str:
        """Format diagnostic in Rust compiler style.

        Example output:
            error[TRAILING_CHARACTERS]: Unexpected trailing characters '%eth0'
              --> column 8
               | fe80::1%eth0
               |        ^
              = help: Remove the text after the address
              = note: see https://datatracker.ietf.org/doc/html/rfc3986#appendix-A
        """
        label = "\033[1;31merror\033[0m" if self.color else "error"  # Bold red

        message = self._maybe_sanitize(diagnostic.message)
        parts = [f"{label}[{diagnostic.code.name}]: {message}"]

        if diagnostic.span:
            parts.append(f"  --> column {diagnostic.span.column}")
            if diagnostic.input_value is not None:
                source = self._maybe_sanitize(diagnostic.input_value)
                parts.append(f"   | {source}")
                parts.append("   | " + " " * (diagnostic.span.column - 1) + "^")

        if diagnostic.expected:
            expected = ", ".join(f"'{e}'" for e in diagnostic.expected)
            parts.append(f"  = expected: {expected}")

        if diagnostic.hint:
            parts.append(f"  = help: {diagnostic.hint}")

        if diagnostic.help_url:
            parts.append(f"  = note: see {diagnostic.help_url}")

        return "\n".join(parts)

    def _format_simple(self, diagnostic: Diagnostic) -> str:
        """Format diagnostic in single-line format.

        Example output:
            OCTET_OUT_OF_RANGE: IPv4 octet 999 is out of range (0-255)
        """
        message = self._maybe_sanitize(diagnostic.message)
        return f"{diagnostic.code.name}: {message}"

    def _format_json(self, diagnostic: Diagnostic) -> str:
        """Format diagnostic as JSON.

        Example output:
            {"code": "OCTET_OUT_OF_RANGE", "code_value": 2003, "message": "...", ...}
        """
        data: dict[str, str | int | list[str] | None] = {
            "code": diagnostic.code.name,
            "code_value": diagnostic.code.value,
            "category": str(diagnostic.code.category),
            "message": self._maybe_sanitize(diagnostic.message),
        }

        if diagnostic.span:
            data["column"] = diagnostic.span.column
            data["start"] = diagnostic.span.start
            data["end"] = diagnostic.span.end

        if diagnostic.input_value is not None:
            data["input"] = self._maybe_sanitize(diagnostic.input_value)

        if diagnostic.expected:
            data["expected"] = list(diagnostic.expected)

        if diagnostic.hint:
            data["hint"] = diagnostic.hint

        if diagnostic.help_url:
            data["help_url"] = diagnostic.help_url

        return json.dumps(data, ensure_ascii=False)

    def _maybe_sanitize(self, text: str) -> str:
        """Truncate text and escape control characters if sanitization is enabled.

        Args:
            text: Text to possibly truncate

        Returns:
            Original or sanitized text
        """
        if not self.sanitize:
            return text
        text = "".join(ch if ch.isprintable() else f"\\x{ord(ch):02x}" for ch in text)
        if len(text) > self.max_content_length:
            return text[: self.max_content_length] + "..."
        return text
