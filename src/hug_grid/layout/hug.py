"""
Module: layout.hug

Purpose:
    Theme-aware entry point of the Human Universal Gridder. Reads the
    breakpoints, size tokens and gridder config from a Theme and
    resolves a region for the current breakpoint.

    Each region nested inside another must declare its span for the
    different breakpoints through ``hug_grid``. A breakpoint without a
    span uses the previous one (<breakpoint>Up pattern):

        hug(theme, "lg", hug_grid={
            "base": ["full-start", "full-end"],
            # md is not defined, so base is used until lg.
            "lg": ["content-6", "full-end"],
        })

Key Functions:
    - hug(): Resolve a region against a theme

Key Classes:
    - HugError: Theme does not provide what the gridder needs

Dependencies:
    - layout.region: Region resolution
    - theme.tokens: Theme

Used By:
    - cli: Command line interface
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Mapping, Optional, Sequence

from hug_grid.core.models import BreakpointContext

from .region import RegionLayout, resolve_region

if TYPE_CHECKING:
    from hug_grid.theme.tokens import Theme

logger = logging.getLogger(__name__)


class HugError(Exception):
    """Gridder cannot run with the given theme state."""
    pass


def hug(
    theme: Theme,
    current_breakpoint: Optional[str],
    hug_grid: Optional[Mapping[str, Sequence[str]]] = None,
) -> RegionLayout:
    """
    Resolve a region for ``current_breakpoint`` using ``theme``.

    Args:
        theme: Breakpoints, size tokens and gridder config
        current_breakpoint: Active breakpoint reported by the environment
        hug_grid: Breakpoint -> [start, end], None for a top level grid

    Returns:
        RegionLayout with resolved lengths

    Raises:
        HugError: If the current breakpoint is unknown
        ResolutionError, LineNotFoundError: From region resolution
    """
    if not current_breakpoint:
        raise HugError("Can't get current breakpoint")

    context = BreakpointContext.create(current_breakpoint, theme.breakpoints)
    layout = resolve_region(
        context,
        theme.hug,
        hug_grid,
        resolve_size=theme.resolve_size,
    )
    logger.debug(f"Resolved region at {current_breakpoint}: span {layout.span_expr or 'full'}")
    return layout
