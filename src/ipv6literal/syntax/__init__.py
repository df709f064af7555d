"""IPv6 literal syntax package.

Provides the cursor, group buffer and parser. Separate from the public
facade so tooling can work with ParseResult / ParseError values directly.

Python 3.13+.
"""

from .buffer import CompressionMark, GroupBuffer
from .cursor import Cursor, ParseError, ParseResult
from .parser import IPv6Groups, IPv6Parser

__all__ = [
    "CompressionMark",
    "Cursor",
    "GroupBuffer",
    "IPv6Groups",
    "IPv6Parser",
    "ParseError",
    "ParseResult",
    "parse",
]


def parse(text: str) -> ParseResult[IPv6Groups] | ParseError:
    """Parse an IPv6 literal into eight groups.

    Convenience function for IPv6Parser().parse().

    Args:
        text: Address literal

    Returns:
        ParseResult with the groups, or ParseError

    Example:
        >>> from ipv6literal.syntax import parse
        >>> parse("fe01::").value[0] == 0xFE01
        True
    """
    return IPv6Parser().parse(text)
