"""
Module: layout.slicer

Purpose:
    Cut a full template down to the lines a nested region spans.
    Line names are kept so that nested regions stay aligned with the
    top-most grid.

Key Functions:
    - slice_template(): Slice a template by a Span

Key Classes:
    - LineNotFoundError: Span names a line the template does not have

Dependencies:
    - core.models: GridTemplate, Span, NameOnlyLine

Used By:
    - layout.region: Region resolution
"""

from __future__ import annotations

import logging
from typing import Optional, Sequence, Tuple

from hug_grid.core.models import GridTemplate, NameOnlyLine, Span

logger = logging.getLogger(__name__)


class LineNotFoundError(Exception):
    """
    A span line does not exist in the current template.

    Attributes:
        line: The missing line name
        breakpoint: Breakpoint the template was built for (if known)
        column_count: Columns of that template
        valid_names: Every line name the template does have
    """

    def __init__(
        self,
        line: str,
        breakpoint: Optional[str],
        column_count: int,
        valid_names: Sequence[str],
    ):
        self.line = line
        self.breakpoint = breakpoint
        self.column_count = column_count
        self.valid_names = tuple(valid_names)
        where = f"the {breakpoint} media query" if breakpoint else "the current grid"
        label = breakpoint or "current grid"
        super().__init__(
            f"The grid line `{line}` does not exist in {where} "
            f"which has {column_count} columns.\n"
            f"Grid lines for {label}: {' | '.join(self.valid_names)}"
        )


def slice_template(
    template: GridTemplate,
    span: Span,
    *,
    breakpoint: Optional[str] = None,
) -> Tuple[GridTemplate, str]:
    """
    Slice ``template`` to the lines between ``span.start`` and ``span.end``.

    The slice keeps every entry from the start line up to (not
    including) the end line, then closes with the end line's name and
    no size so the boundary can still be referenced by name.

    Args:
        template: Full template for the current breakpoint
        span: Start and end line names
        breakpoint: Current breakpoint, only used in error messages

    Returns:
        (sliced template, "<start> / <end>")

    Raises:
        LineNotFoundError: If either line is missing from the template

    Example:
        >>> sliced, expr = slice_template(build_template(4, "1fr"), Span("content-start", "content-3"))
        >>> sliced.names
        ('content-start', 'content-2', 'content-3')
        >>> expr
        'content-start / content-3'
    """
    start_idx = template.index_of(span.start)
    end_idx = template.index_of(span.end)

    if start_idx == -1 or end_idx == -1:
        line = span.start if start_idx == -1 else span.end
        raise LineNotFoundError(line, breakpoint, template.column_count, template.names)

    if start_idx >= end_idx:
        logger.warning(
            f"Span {span.expression} does not run forward on the "
            f"{breakpoint or 'current'} grid, region will have no tracks"
        )

    last_line = template[end_idx]
    lines = template.lines[start_idx:end_idx] + (NameOnlyLine(last_line.name),)

    logger.debug(f"Sliced lines {start_idx}..{end_idx} for span {span.expression}")

    sliced = GridTemplate(lines=lines, column_count=template.column_count)
    return sliced, span.expression
