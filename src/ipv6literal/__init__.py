"""ipv6literal - RFC 3986 IPv6 address literal parser.

Parses textual IPv6 addresses, including "::" zero-run compression and
embedded dotted-quad IPv4, into eight 16-bit groups. The grammar is the
nine-alternative IPv6address rule of RFC 3986 Appendix A, driven by an
immutable cursor so that every failed alternative is rolled back for free.

Public API:
    parse_ipv6 - Parse an address literal to eight groups
    parse_h16 - Parse a single hex group
    is_valid_groups - Type guard for parse results
    IPv6Parser - Reusable parser with configurable input limit
    IPv6Groups - Type alias for the eight-group result

Exceptions:
    IPv6Error - Base exception class
    IPv6ParseError - Parse failure (returned by the parse functions)

Submodules:
    ipv6literal.syntax - Cursor, GroupBuffer, ParseResult / ParseError
    ipv6literal.syntax.parser - Grammar rules and parsing primitives
    ipv6literal.diagnostics - Error codes, templates and formatting
"""

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

from .diagnostics import IPv6Error, IPv6ParseError
from .guards import is_valid_groups
from .parsing import parse_h16, parse_ipv6
from .syntax import IPv6Groups, IPv6Parser

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
try:
    __version__ = _get_version("ipv6literal")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

# Grammar conformance
__rfc__ = "RFC 3986 Appendix A (IPv6address)"

__all__ = [
    "IPv6Error",
    "IPv6Groups",
    "IPv6ParseError",
    "IPv6Parser",
    "__rfc__",
    "__version__",
    "is_valid_groups",
    "parse_h16",
    "parse_ipv6",
]
