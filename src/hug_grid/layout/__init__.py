"""
Module: layout

Purpose:
    Responsive grid layout for the Human Universal Gridder.
    Turns per-breakpoint gaps, column counts and spans into a named
    column template for the current breakpoint.

Key Functions:
    - get_closest_value(): Mobile-first breakpoint resolution
    - build_template(): Full named-line template
    - slice_template(): Subgrid slice for a span
    - resolve_region(): Main entry point for one region
    - hug(): Theme-aware entry point

Key Classes:
    - HugConfig: Gridder configuration
    - RegionLayout: Resolved region template + span

Dependencies:
    - hug_grid.core.models: GridTemplate, Span, BreakpointContext

Used By:
    - hug_grid.cli: Command line interface
    - hug_grid.output: CSS rendering and previews
"""

from .config import HugConfig, DEFAULT_HUG_CONFIG, extend_hug_config
from .resolver import get_closest_value
from .template import build_template, content_column_width
from .slicer import slice_template, LineNotFoundError
from .region import resolve_region, RegionLayout, ResolutionError
from .hug import hug, HugError

__all__ = [
    # Config
    "HugConfig",
    "DEFAULT_HUG_CONFIG",
    "extend_hug_config",
    # Functions
    "get_closest_value",
    "build_template",
    "content_column_width",
    "slice_template",
    "resolve_region",
    "hug",
    # Results and errors
    "RegionLayout",
    "ResolutionError",
    "LineNotFoundError",
    "HugError",
]
