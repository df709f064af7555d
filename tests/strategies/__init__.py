"""Hypothesis strategies for ipv6literal property-based testing.

Usage:
    from tests.strategies import address_literals, h16_texts

Event-Emitting Strategies (HypoFuzz-Optimized):
    These strategies emit hypothesis.event() calls for coverage-guided fuzzing:
    - address_literals, chaos_literals
"""

from .addresses import (
    GRAMMAR_CHARS,
    HEX_CHARS,
    address_groups,
    address_literals,
    chaos_literals,
    dotted_quad,
    group_values,
    h16_texts,
)

__all__ = [
    "GRAMMAR_CHARS",
    "HEX_CHARS",
    "address_groups",
    "address_literals",
    "chaos_literals",
    "dotted_quad",
    "group_values",
    "h16_texts",
]
