"""
Module: layout.template

Purpose:
    Build the full named-line column template for a breakpoint.

    Grid:
      start    1    2    3    4    5    6    7    8    9   10   11   12     end
    |      |*|  |*|  |*|  |*|  |*|  |*|  |*|  |*|  |*|  |*|  |*|  |*|  |*|      |
    |      |*|  |*|  |*|  |*|  |*|  |*|  |*|  |*|  |*|  |*|  |*|  |*|  |*|      |

    The start and end tracks take up 1 fraction each and are fluid.
    Each content column takes up an equal share of the max layout width.
    Grid gaps are marked with an asterisk.

    In a css grid the lines are named, not the columns:
    full-start, content-start, content-2 .. content-N, content-end, full-end.
    There is no content-1, it is called content-start.

Key Functions:
    - content_column_width(): Size expression of one content column
    - build_template(): Full template for a column count

Dependencies:
    - core.models: GridTemplate, SizedColumn, NameOnlyLine

Used By:
    - layout.region: Region resolution
"""

from __future__ import annotations

import logging
from typing import List

from hug_grid.core.models import ColumnSpec, GridTemplate, NameOnlyLine, SizedColumn

logger = logging.getLogger(__name__)

FLUID_SIZE = "minmax(0, 1fr)"


def content_column_width(layout_max: str, gap: str, column_count: int) -> str:
    """
    Size expression of a single content column.

    The layout width loses one gap so that gridded blocks line up with
    the page constrainers, is divided by the column count, and each
    column then gives up one gap.

    Args:
        layout_max: Resolved max layout width, e.g. "1280px"
        gap: Resolved gap length, e.g. "1rem"
        column_count: Columns at the current breakpoint

    Returns:
        Nested css calc() expression

    Example:
        >>> content_column_width("1280px", "1rem", 4)
        'calc(calc(calc(1280px - 1rem) / 4) - 1rem)'
    """
    layout_max_no_padding = f"calc({layout_max} - {gap})"
    full_column = f"calc({layout_max_no_padding} / {column_count})"
    return f"calc({full_column} - {gap})"


def build_template(column_count: int, column_width: str) -> GridTemplate:
    """
    Build the full template for ``column_count`` columns.

    Line names come from the column index only, so a nested region
    using `content-5` lines up with every other `content-5` on the page.

    Args:
        column_count: Content columns, at least 1
        column_width: Size expression of one content column

    Returns:
        GridTemplate with ``column_count + 3`` entries

    Raises:
        ValueError: If column_count is not a positive integer
    """
    if isinstance(column_count, bool) or not isinstance(column_count, int) or column_count < 1:
        raise ValueError(f"column_count must be a positive integer: {column_count!r}")

    content_size = f"minmax(0, {column_width})"

    lines: List[ColumnSpec] = [
        SizedColumn("full-start", FLUID_SIZE),
        SizedColumn("content-start", content_size),
    ]
    # Content columns after the first start at index 2
    lines.extend(
        SizedColumn(f"content-{i}", content_size)
        for i in range(2, column_count + 1)
    )
    lines.append(SizedColumn("content-end", FLUID_SIZE))
    lines.append(NameOnlyLine("full-end"))

    logger.debug(f"Built template with {len(lines)} lines for {column_count} columns")

    return GridTemplate(lines=tuple(lines), column_count=column_count)
