"""
Module: layout.config

Purpose:
    Configuration for the gridder. Defines the max layout width token
    and the per-breakpoint gaps and column counts.

Key Classes:
    - HugConfig: Immutable gridder configuration

Key Functions:
    - extend_hug_config(): Merge user overrides over the defaults

Dependencies:
    - dataclasses (std)

Used By:
    - layout.region: Region resolution
    - theme.tokens: Theme defaults
    - theme.loader: Theme file loading
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Any, Dict, Mapping


DEFAULT_LAYOUT_MAX = "container.xl"
DEFAULT_GAPS = {"base": "4", "md": "8", "lg": "12"}
DEFAULT_COLUMNS = {"base": 4, "md": 8, "lg": 12}


@dataclass(frozen=True)
class HugConfig:
    """
    Configuration for the gridder (immutable).

    Gaps and columns are sparse: breakpoints without an entry inherit
    the value of the closest smaller breakpoint.

    Attributes:
        layout_max: Size token of the max content width
        gaps: Breakpoint -> gap size token
        columns: Breakpoint -> number of content columns

    Example:
        >>> config = HugConfig()
        >>> config.columns["md"]
        8
    """

    layout_max: str = DEFAULT_LAYOUT_MAX
    gaps: Mapping[str, str] = field(default_factory=lambda: dict(DEFAULT_GAPS))
    columns: Mapping[str, int] = field(default_factory=lambda: dict(DEFAULT_COLUMNS))

    def __post_init__(self) -> None:
        """Validate configuration and freeze the mappings."""
        if not self.layout_max:
            raise ValueError(f"layout_max must be set: {self.layout_max!r}")
        object.__setattr__(self, "gaps", MappingProxyType(dict(self.gaps)))
        object.__setattr__(self, "columns", MappingProxyType(dict(self.columns)))

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "HugConfig":
        """Build a config from the camelCase theme format."""
        return extend_hug_config(data)["hug"]

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to the camelCase theme format."""
        return {
            "layoutMax": self.layout_max,
            "gaps": dict(self.gaps),
            "columns": dict(self.columns),
        }


DEFAULT_HUG_CONFIG = HugConfig()


def extend_hug_config(config: Mapping[str, Any]) -> Dict[str, HugConfig]:
    """
    Merge user settings over the default configuration.

    The merge is shallow: a key present in ``config`` replaces the
    default value as a whole, so ``{"gaps": {"base": "2"}}`` drops the
    default md and lg gaps.

    Args:
        config: Any of ``layoutMax``, ``gaps``, ``columns``

    Returns:
        ``{"hug": HugConfig}``, ready to be placed in a theme's config

    Raises:
        ValueError: If ``config`` holds an unknown key
    """
    known = {"layoutMax": "layout_max", "gaps": "gaps", "columns": "columns"}
    unknown = sorted(set(config) - set(known))
    if unknown:
        raise ValueError(f"Unknown hug config keys: {unknown}")

    overrides = {known[key]: value for key, value in config.items()}
    return {"hug": replace(DEFAULT_HUG_CONFIG, **overrides)}
