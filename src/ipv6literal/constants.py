"""Shared constants for ipv6literal.

This module provides centralized configuration constants used across the
syntax and diagnostics packages. Placing constants here avoids circular
imports and provides a single source of truth.

Constants are grouped by domain:
- Address shape: Group counts and widths fixed by RFC 4291 / RFC 3986
- Input limits: DoS prevention via size constraints

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Address shape
    "GROUP_COUNT",
    "GROUP_MAX",
    "H16_MAX_DIGITS",
    "IPV4_OCTET_COUNT",
    "OCTET_MAX",
    "MAX_ADDRESS_LENGTH",
    # Input limits
    "MAX_INPUT_LENGTH",
    # Reference
    "GRAMMAR_URL",
    "TEXT_REPRESENTATION_URL",
]

# ============================================================================
# ADDRESS SHAPE
# ============================================================================

# An IPv6 address is eight 16-bit groups.
GROUP_COUNT: int = 8

# Largest value a single group can hold.
GROUP_MAX: int = 0xFFFF

# h16 = 1*4HEXDIG. Four hex digits exactly fill 16 bits.
H16_MAX_DIGITS: int = 4

# Embedded IPv4 literal: four dotted decimal octets (two groups).
IPV4_OCTET_COUNT: int = 4

# Largest decimal octet value. Larger values are rejected, never wrapped.
OCTET_MAX: int = 255

# Longest canonical literal: "ffff:ffff:ffff:ffff:ffff:ffff:255.255.255.255".
# Informational only; octets with leading zeros may legally exceed it.
MAX_ADDRESS_LENGTH: int = 45

# ============================================================================
# INPUT LIMITS
# ============================================================================

# Default maximum input length in characters.
# Far above any legitimate literal, low enough that a hostile caller cannot
# make the nine-way alternation scan megabytes of text.
MAX_INPUT_LENGTH: int = 1024

# ============================================================================
# REFERENCE
# ============================================================================

GRAMMAR_URL: str = "https://datatracker.ietf.org/doc/html/rfc3986#appendix-A"

# Text representation of addresses, including the eight-group limit.
TEXT_REPRESENTATION_URL: str = "https://datatracker.ietf.org/doc/html/rfc4291#section-2.2"
