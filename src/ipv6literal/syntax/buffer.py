"""Group buffer: the accumulator every address rule writes into.

A GroupBuffer is an immutable value of eight 16-bit groups plus a write
position. Writes return a new buffer; the buffer a rule received is never
changed. Each grammar alternative therefore works on its own value, and a
failed alternative is rolled back simply by discarding what it built.

Buffer operations report failure by returning None. The grammar rule that
called them knows the cursor position and turns None into a ParseError.

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass

from ipv6literal.constants import GROUP_COUNT, GROUP_MAX

__all__ = ["EMPTY_BUFFER", "CompressionMark", "GroupBuffer"]

_ZERO_GROUPS: tuple[int, ...] = (0,) * GROUP_COUNT


@dataclass(frozen=True, slots=True)
class CompressionMark:
    """Instruction emitted by a "::" token.

    Attributes:
        remaining: Number of groups the grammar guarantees will follow the
            "::". Applying the mark moves the write position to
            ``GROUP_COUNT - remaining`` so those groups land at the tail.
    """

    remaining: int


@dataclass(frozen=True, slots=True)
class GroupBuffer:
    """Eight zero-initialized groups with a forward-only write position.

    Example:
        >>> buffer = GroupBuffer().append(0xFE01)
        >>> buffer = buffer.apply_compression(CompressionMark(1))
        >>> buffer.append(1).groups
        (65025, 0, 0, 0, 0, 0, 0, 1)
    """

    groups: tuple[int, ...] = _ZERO_GROUPS
    pos: int = 0

    def __post_init__(self) -> None:
        """Validate buffer invariants.

        Raises:
            ValueError: If the buffer does not hold exactly eight groups or
                the write position is outside [0, 8].
        """
        if len(self.groups) != GROUP_COUNT:
            msg = f"GroupBuffer needs {GROUP_COUNT} groups, got {len(self.groups)}"
            raise ValueError(msg)
        if not 0 <= self.pos <= GROUP_COUNT:
            msg = f"GroupBuffer.pos must be in [0, {GROUP_COUNT}], got {self.pos}"
            raise ValueError(msg)

    @property
    def is_full(self) -> bool:
        """True when no slot is left at or after the write position."""
        return self.pos >= GROUP_COUNT

    def append(self, group: int) -> "GroupBuffer | None":
        """Write one group at the write position.

        Returns:
            New buffer with the position advanced by one, or None if the
            buffer is already full.
        """
        _check_group(group)
        if self.is_full:
            return None
        return self._write(group)

    def append_ipv4(self, high: int, low: int) -> "GroupBuffer | None":
        """Write the two groups of an embedded IPv4 literal.

        Returns:
            New buffer with the position advanced by two, or None if fewer
            than two slots remain.
        """
        _check_group(high)
        _check_group(low)
        if self.pos + 2 > GROUP_COUNT:
            return None
        return self._write(high, low)

    def apply_compression(self, mark: CompressionMark) -> "GroupBuffer | None":
        """Reposition the write position for the groups after "::".

        Slots skipped over stay zero: they are the elided run.

        Returns:
            New buffer positioned at ``GROUP_COUNT - mark.remaining``, or None
            if the mark reserves more than eight groups.
        """
        if not 0 <= mark.remaining <= GROUP_COUNT:
            return None
        return GroupBuffer(self.groups, GROUP_COUNT - mark.remaining)

    def _write(self, *values: int) -> "GroupBuffer":
        end = self.pos + len(values)
        groups = self.groups[: self.pos] + values + self.groups[end:]
        return GroupBuffer(groups, end)


def _check_group(group: int) -> None:
    if not 0 <= group <= GROUP_MAX:
        msg = f"Group value must be in [0, {GROUP_MAX:#x}], got {group!r}"
        raise ValueError(msg)


EMPTY_BUFFER = GroupBuffer()
