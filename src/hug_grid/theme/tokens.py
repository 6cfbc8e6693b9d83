"""
Module: theme.tokens

Purpose:
    The parts of a UI theme the gridder reads: the ordered breakpoint
    names, the size token table and the gridder config.

Key Classes:
    - Theme: Immutable theme

Constants:
    - DEFAULT_BREAKPOINTS: base, sm, md, lg, xl, 2xl
    - DEFAULT_SIZES: Size tokens used by the default gridder config
    - DEFAULT_THEME: Theme built from the defaults above

Dependencies:
    - layout.config: HugConfig

Used By:
    - layout.hug: Theme-aware entry point
    - theme.loader: Theme file loading
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

from hug_grid.layout.config import DEFAULT_HUG_CONFIG, HugConfig


DEFAULT_BREAKPOINTS = ("base", "sm", "md", "lg", "xl", "2xl")

DEFAULT_SIZES = {
    # Spacing scale
    "1": "0.25rem",
    "2": "0.5rem",
    "3": "0.75rem",
    "4": "1rem",
    "6": "1.5rem",
    "8": "2rem",
    "10": "2.5rem",
    "12": "3rem",
    "16": "4rem",
    # Containers
    "container.sm": "640px",
    "container.md": "768px",
    "container.lg": "1024px",
    "container.xl": "1280px",
}


@dataclass(frozen=True)
class Theme:
    """
    Theme values consumed by the gridder (immutable).

    Attributes:
        breakpoints: Breakpoint names, smallest first
        sizes: Size token -> css length
        hug: Gridder config

    Example:
        >>> DEFAULT_THEME.resolve_size("container.xl")
        '1280px'
        >>> DEFAULT_THEME.resolve_size("42px")
        '42px'
    """

    breakpoints: tuple[str, ...] = DEFAULT_BREAKPOINTS
    sizes: Mapping[str, str] = field(default_factory=lambda: dict(DEFAULT_SIZES))
    hug: HugConfig = DEFAULT_HUG_CONFIG

    def __post_init__(self) -> None:
        """Validate theme on construction."""
        object.__setattr__(self, "breakpoints", tuple(self.breakpoints))
        object.__setattr__(self, "sizes", MappingProxyType(dict(self.sizes)))
        if not self.breakpoints:
            raise ValueError("Theme must define at least one breakpoint")
        if len(set(self.breakpoints)) != len(self.breakpoints):
            raise ValueError(f"Breakpoints must be unique: {self.breakpoints}")

    def resolve_size(self, token: str) -> str:
        """Css length for ``token``, or the token itself when unknown."""
        return self.sizes.get(str(token), str(token))


DEFAULT_THEME = Theme()
