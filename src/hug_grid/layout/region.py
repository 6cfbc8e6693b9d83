"""
Module: layout.region

Purpose:
    Resolve the template and span of one layout region for the
    current breakpoint. Ties breakpoint resolution, template building
    and subgrid slicing together.

Key Functions:
    - resolve_region(): Main entry point for one region

Key Classes:
    - RegionLayout: Resolved template + span of a region
    - ResolutionError: Required setting has no value at this breakpoint

Algorithm:
    1. Resolve gap token and column count (both required)
    2. Build the full template for the column count
    3. If the region declares spans, resolve the span for this
       breakpoint (defaulting to the full extent) and slice

Dependencies:
    - layout.resolver, layout.template, layout.slicer
    - layout.config: HugConfig

Used By:
    - layout.hug: Theme-aware entry point
    - cli: Command line interface
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Mapping, Optional, Sequence

from hug_grid.core.models import DEFAULT_SPAN, BreakpointContext, GridTemplate, Span

from .config import HugConfig
from .resolver import get_closest_value
from .slicer import slice_template
from .template import build_template, content_column_width

logger = logging.getLogger(__name__)


class ResolutionError(Exception):
    """Required breakpoint setting could not be resolved."""
    pass


@dataclass(frozen=True)
class RegionLayout:
    """
    Resolved grid for one region (immutable).

    Attributes:
        breakpoint: Breakpoint the layout was resolved for
        column_count: Content columns at that breakpoint
        gap: Resolved gap length
        template: Full or sliced column template
        span: Resolved span, or None when the region has no spans
        span_expr: "<start> / <end>", or None when the region has no spans

    Example:
        >>> layout.template_css
        '[content-2] minmax(0, ...)\\n[content-3] ...'
        >>> layout.span_expr
        'content-2 / content-4'
    """

    breakpoint: str
    column_count: int
    gap: str
    template: GridTemplate
    span: Optional[Span] = None
    span_expr: Optional[str] = None

    @property
    def template_css(self) -> str:
        """Template joined into a grid-template-columns value."""
        return self.template.to_css()


def resolve_region(
    context: BreakpointContext,
    config: HugConfig,
    user_span: Optional[Mapping[str, Sequence[str]]] = None,
    *,
    resolve_size: Callable[[str], str] = str,
) -> RegionLayout:
    """
    Resolve template and span for a region at the current breakpoint.

    Args:
        context: Current breakpoint and breakpoint order
        config: Gaps, columns and layout width token
        user_span: Breakpoint -> [start, end] line names, None for a
            region that fills its parent
        resolve_size: Turns a size token into a css length. Defaults to
            using the token as is.

    Returns:
        RegionLayout for the current breakpoint

    Raises:
        ResolutionError: If no gap or column count applies
        LineNotFoundError: If the span names a missing line
        ValueError: If the column count or span value is malformed
    """
    current = context.current
    order = context.order

    gap_token = get_closest_value(config.gaps, current, order)
    if gap_token is None or gap_token == "":
        raise ResolutionError(f"Can't get current gap token for breakpoint {current}")

    column_count = get_closest_value(config.columns, current, order)
    if column_count is None:
        raise ResolutionError(f"Can't get current number of columns for breakpoint {current}")

    gap = resolve_size(gap_token)
    layout_max = resolve_size(config.layout_max)
    logger.debug(
        f"Breakpoint {current}: {column_count} columns, gap {gap_token} ({gap}), "
        f"layout max {config.layout_max} ({layout_max})"
    )

    template = build_template(
        column_count, content_column_width(layout_max, gap, column_count)
    )

    span = None
    span_expr = None
    if user_span is not None:
        span_value = get_closest_value(user_span, current, order, DEFAULT_SPAN)
        span = Span.from_value(span_value)
        template, span_expr = slice_template(template, span, breakpoint=current)

    return RegionLayout(
        breakpoint=current,
        column_count=column_count,
        gap=gap,
        template=template,
        span=span,
        span_expr=span_expr,
    )
