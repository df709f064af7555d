"""Type guard for parse result narrowing.

parse_ipv6() returns tuple[IPv6Groups | None, tuple[IPv6ParseError, ...]].
The guard checks the result component to narrow types for mypy.

Note: The guard accepts None and returns False. This simplifies the pattern
from `if not errors and is_valid_groups(groups)` to just
`if is_valid_groups(groups)`.

Example:
    >>> groups, errors = parse_ipv6("fe80::1")
    >>> if is_valid_groups(groups):
    ...     # mypy knows groups is IPv6Groups
    ...     prefix = groups[:4]
"""

from typing import TypeIs

from ipv6literal.constants import GROUP_COUNT, GROUP_MAX
from ipv6literal.syntax import IPv6Groups

__all__ = ["is_valid_groups"]


def is_valid_groups(value: object) -> TypeIs[IPv6Groups]:
    """Type guard: Check for a complete eight-group address.

    Returns False for None, wrong lengths, and values outside 0-0xFFFF.
    """
    return (
        isinstance(value, tuple)
        and len(value) == GROUP_COUNT
        and all(
            isinstance(group, int) and not isinstance(group, bool) and 0 <= group <= GROUP_MAX
            for group in value
        )
    )
