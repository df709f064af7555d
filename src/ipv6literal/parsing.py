"""Address parsing facade: text in, groups and errors out.

- parse_ipv6() returns tuple[IPv6Groups | None, tuple[IPv6ParseError, ...]]
- parse_h16() returns tuple[int | None, tuple[IPv6ParseError, ...]]
- Functions NEVER raise for bad input - errors are returned in the tuple
- Non-str input is a programming error and raises TypeError

Thread-safe. No module-level mutable state.

Python 3.13+.
"""

from ipv6literal.diagnostics import IPv6ParseError
from ipv6literal.syntax import IPv6Groups, IPv6Parser, ParseError

__all__ = ["parse_h16", "parse_ipv6"]

_PARSER = IPv6Parser()


def _to_error(error: ParseError) -> IPv6ParseError:
    diagnostic = error.to_diagnostic()
    return IPv6ParseError(
        diagnostic,
        input_value=error.cursor.source,
        position=error.position,
    )


def parse_ipv6(text: str) -> tuple[IPv6Groups | None, tuple[IPv6ParseError, ...]]:
    """Parse an IPv6 address literal (RFC 3986 IPv6address) into eight groups.

    Args:
        text: Address literal without brackets or zone ID

    Returns:
        Tuple of (result, errors):
        - result: Eight 16-bit groups, or None if parsing failed
        - errors: Tuple of IPv6ParseError (empty tuple on success)

    Raises:
        TypeError: If text is not a str

    Examples:
        >>> groups, errors = parse_ipv6("fe01::1")
        >>> [hex(g) for g in groups]
        ['0xfe01', '0x0', '0x0', '0x0', '0x0', '0x0', '0x0', '0x1']
        >>> errors
        ()

        >>> groups, errors = parse_ipv6("::999.1.1.1")
        >>> groups is None
        True
        >>> errors[0].code.name
        'OCTET_OUT_OF_RANGE'
    """
    result = _PARSER.parse(text)
    if isinstance(result, ParseError):
        return (None, (_to_error(result),))
    return (result.value, ())


def parse_h16(text: str) -> tuple[int | None, tuple[IPv6ParseError, ...]]:
    """Parse a single 16-bit hex group (1-4 hex digits, case-insensitive).

    The whole string must be one group.

    Args:
        text: Group text, e.g. "fe01"

    Returns:
        Tuple of (result, errors):
        - result: Group value 0-0xFFFF, or None if parsing failed
        - errors: Tuple of IPv6ParseError (empty tuple on success)

    Raises:
        TypeError: If text is not a str

    Examples:
        >>> parse_h16("AbCe")
        (43982, ())
        >>> value, errors = parse_h16("12345")
        >>> errors[0].code.name
        'TRAILING_CHARACTERS'
    """
    result = _PARSER.parse_h16(text)
    if isinstance(result, ParseError):
        return (None, (_to_error(result),))
    return (result.value, ())
