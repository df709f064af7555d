"""Hypothesis strategies for IPv6 address literal testing.

Every valid-literal strategy draws the eight groups first and then renders
them, so each example carries the groups it must parse to.

Event-Emitting Strategies (HypoFuzz-Optimized):
    These strategies emit hypothesis.event() calls for coverage-guided fuzzing:
    - addr_form: Rendering used (full|full_ipv4|compressed|compressed_ipv4)
    - addr_compressed_run: Length of the run elided by "::" (1-8)
    - addr_chaos: Character pool of an arbitrary literal (grammar|mixed)
"""

from __future__ import annotations

from hypothesis import event
from hypothesis import strategies as st

from ipv6literal.constants import GROUP_COUNT, GROUP_MAX, H16_MAX_DIGITS

# =============================================================================
# Constants
# =============================================================================

HEX_CHARS: str = "0123456789abcdefABCDEF"
GRAMMAR_CHARS: str = HEX_CHARS + ":."

# =============================================================================
# Groups
# =============================================================================

group_values = st.integers(min_value=0, max_value=GROUP_MAX)
"""Any 16-bit group value."""

# Zero groups are frequent in real addresses and are what "::" elides.
_group_or_zero = st.one_of(st.just(0), group_values)

address_groups = st.tuples(*([_group_or_zero] * GROUP_COUNT))
"""Eight groups, biased toward zeros."""


@st.composite
def h16_texts(draw: st.DrawFn, value: int | None = None) -> str:
    """Render one group as 1-4 hex digits with random case and zero padding."""
    if value is None:
        value = draw(group_values)
    digits = f"{value:x}"
    width = draw(st.integers(min_value=len(digits), max_value=H16_MAX_DIGITS))
    padded = digits.rjust(width, "0")
    return "".join(draw(st.sampled_from((ch.lower(), ch.upper()))) for ch in padded)


def dotted_quad(high: int, low: int) -> str:
    """Render two groups as an IPv4 dotted quad."""
    return f"{high >> 8}.{high & 0xFF}.{low >> 8}.{low & 0xFF}"


# =============================================================================
# Literals
# =============================================================================


@st.composite
def address_literals(draw: st.DrawFn) -> tuple[str, tuple[int, ...]]:
    """Generate a valid literal together with the groups it denotes.

    Events emitted:
    - addr_form={full|full_ipv4|compressed|compressed_ipv4}
    - addr_compressed_run={1..8}
    """
    groups = list(draw(address_groups))
    form = draw(st.sampled_from(["full", "full_ipv4", "compressed", "compressed_ipv4"]))

    if form.startswith("full"):
        head, tail = groups, []
        compressed = False
    else:
        start = draw(st.integers(min_value=0, max_value=GROUP_COUNT - 1))
        run = draw(st.integers(min_value=1, max_value=GROUP_COUNT - start))
        groups[start : start + run] = [0] * run
        head, tail = groups[:start], groups[start + run :]
        compressed = True
        event(f"addr_compressed_run={run}")

    # A dotted quad needs the last two groups outside the elided run.
    ipv4 = form.endswith("ipv4") and len(tail if compressed else head) >= 2
    if form.endswith("ipv4") and not ipv4:
        form = form.removesuffix("_ipv4")
    event(f"addr_form={form}")

    def render(part: list[int], *, with_quad: bool) -> list[str]:
        if not with_quad:
            return [draw(h16_texts(value)) for value in part]
        rendered = [draw(h16_texts(value)) for value in part[:-2]]
        rendered.append(dotted_quad(part[-2], part[-1]))
        return rendered

    if compressed:
        text = ":".join(render(head, with_quad=False)) + "::" + ":".join(
            render(tail, with_quad=ipv4)
        )
    else:
        text = ":".join(render(head, with_quad=ipv4))
    return text, tuple(groups)


@st.composite
def chaos_literals(draw: st.DrawFn) -> str:
    """Generate arbitrary short strings over the address alphabet.

    Most are invalid; the parser must answer each with a result or a
    ParseError and never raise.

    Events emitted:
    - addr_chaos={grammar|mixed}
    """
    pool = draw(st.sampled_from(["grammar", "mixed"]))
    event(f"addr_chaos={pool}")
    alphabet = GRAMMAR_CHARS if pool == "grammar" else GRAMMAR_CHARS + "gxyz%[] /-\x00٣"
    return draw(st.text(alphabet=alphabet, max_size=60))
