"""
Module: breakpoints

Purpose:
    Provides the BreakpointContext dataclass - the current breakpoint
    together with the full, ordered breakpoint sequence it belongs to.

Key Classes:
    - BreakpointContext: Current breakpoint + ordered breakpoint list

Dependencies:
    - dataclasses (std)

Used By:
    - layout.region: Region resolution
    - layout.hug: Theme-aware entry point
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence


@dataclass(frozen=True, slots=True)
class BreakpointContext:
    """
    Breakpoint state for one resolution call.

    The order runs from the smallest to the largest viewport. The
    current breakpoint does not have to appear in it, in which case
    only exact matches can be resolved.

    Attributes:
        current: Active breakpoint name, e.g. "md"
        order: All known breakpoints, smallest first

    Invariants:
        - order is non-empty
        - current is a non-empty string

    Example:
        >>> ctx = BreakpointContext.create("md", ["base", "sm", "md", "lg"])
        >>> ctx.position
        2
    """

    current: str
    order: tuple[str, ...]

    def __post_init__(self) -> None:
        """Validate context on construction."""
        if not self.order:
            raise ValueError("Breakpoint order must not be empty")
        if not self.current:
            raise ValueError(f"Current breakpoint must be set: {self.current!r}")

    @classmethod
    def create(cls, current: str, order: Sequence[str]) -> "BreakpointContext":
        """Build a context from any breakpoint sequence."""
        return cls(current=current, order=tuple(order))

    @property
    def position(self) -> int:
        """Index of the current breakpoint in the order, or -1."""
        try:
            return self.order.index(self.current)
        except ValueError:
            return -1
