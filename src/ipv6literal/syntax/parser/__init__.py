"""IPv6 address literal parser module.

This module provides the main IPv6Parser class and related parsing
utilities organized into focused submodules.

Module Organization:
- core.py: IPv6Parser class, whole-input matching and error selection
- rules.py: The nine RFC 3986 address alternatives and their building blocks
- combinators.py: Sequencing, ordered choice, repetition, lookahead
- primitives.py: Leaf parsers (h16 groups, decimal octets, IPv4 literals)

Public API:
    IPv6Parser: Main parser class
    IPv6Groups: Result type (eight 16-bit groups)
"""

from ipv6literal.syntax.parser.core import IPv6Groups, IPv6Parser

__all__ = ["IPv6Groups", "IPv6Parser"]
