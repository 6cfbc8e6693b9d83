"""
Module: output.preview

Purpose:
    Debug preview of a breakpoint's grid. Evaluates the template in
    pixels for a given viewport and draws every named line, the content
    tracks and, optionally, the span of a nested region, to help
    diagnose misaligned regions.

Key Functions:
    - compute_line_positions(): X position of every named line
    - render_preview(): Create preview image
    - save_preview(): Save preview to disk

Dependencies:
    - PIL: Image drawing
    - layout.template, layout.slicer: Line names and span validation

Used By:
    - cli: --preview option
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional, Tuple

from PIL import Image, ImageDraw, ImageFont

from hug_grid.core.models import Span
from hug_grid.layout.slicer import slice_template
from hug_grid.layout.template import build_template

logger = logging.getLogger(__name__)

# Visualization constants
COLORS = {
    "fluid": (235, 235, 235, 255),    # Light grey - fluid tracks
    "content": (190, 215, 255, 255),  # Light blue - content tracks
    "line": (40, 40, 40, 255),        # Dark grey - grid lines
    "span": (255, 120, 0, 90),        # Orange - nested region span
}

BACKGROUND_COLOR = (255, 255, 255)
LABEL_TEXT_COLOR = (0, 0, 0)
LINE_WIDTH = 1
FONT_SIZE = 12
LABEL_ROW_HEIGHT = 16


def compute_line_positions(
    column_count: int,
    viewport_px: float,
    layout_max_px: float,
    gap_px: float,
) -> List[Tuple[str, float]]:
    """
    Pixel x position of every line of the full template.

    Content columns are ``(layout_max - gap) / n - gap`` wide, the two
    fluid tracks share whatever is left of the viewport. Gaps sit
    between tracks, so each line is placed where its track starts.

    Args:
        column_count: Content columns
        viewport_px: Width of the grid container
        layout_max_px: Resolved max layout width
        gap_px: Resolved gap

    Returns:
        (line name, x) pairs in template order

    Example:
        >>> compute_line_positions(2, 1000, 800, 0)
        [('full-start', 0.0), ('content-start', 100.0), ('content-2', 500.0),
         ('content-end', 900.0), ('full-end', 1000.0)]
    """
    template = build_template(column_count, "0px")
    content = max(0.0, (layout_max_px - gap_px) / column_count - gap_px)
    fluid = max(0.0, (viewport_px - column_count * content - (column_count + 1) * gap_px) / 2)

    track_widths = [fluid] + [content] * column_count + [fluid]

    positions: List[Tuple[str, float]] = []
    x = 0.0
    for idx, line in enumerate(template):
        positions.append((line.name, float(x)))
        if idx < len(track_widths):
            x += track_widths[idx]
            if idx < len(track_widths) - 1:
                x += gap_px
    return positions


def render_preview(
    column_count: int,
    viewport_px: int,
    layout_max_px: float,
    gap_px: float,
    span: Optional[Span] = None,
    height: int = 160,
) -> Image.Image:
    """
    Draw the grid of one breakpoint.

    Fluid tracks are grey, content tracks blue and the optional span is
    shaded orange. Line names are printed above the lines, alternating
    between two rows so neighbours do not overlap.

    Args:
        column_count: Content columns
        viewport_px: Image width in pixels
        layout_max_px: Resolved max layout width
        gap_px: Resolved gap
        span: Nested region to highlight
        height: Image height in pixels

    Returns:
        RGB preview image

    Raises:
        LineNotFoundError: If the span names a missing line
    """
    if viewport_px <= 0:
        raise ValueError(f"viewport_px must be positive: {viewport_px}")

    positions = compute_line_positions(column_count, viewport_px, layout_max_px, gap_px)
    x_by_name = dict(positions)

    image = Image.new("RGBA", (int(viewport_px), height), BACKGROUND_COLOR + (255,))
    draw = ImageDraw.Draw(image)

    try:
        font = ImageFont.truetype("Arial.ttf", FONT_SIZE)
    except (IOError, OSError):
        font = ImageFont.load_default()

    top = LABEL_ROW_HEIGHT * 2 + 4

    # Tracks
    last_track = len(positions) - 2
    for idx, (name, x0) in enumerate(positions[:-1]):
        # Every track but the last is followed by a gap
        track_end = positions[idx + 1][1] - (0 if idx == last_track else gap_px)
        is_fluid = name in ("full-start", "content-end")
        color = COLORS["fluid"] if is_fluid else COLORS["content"]
        if track_end > x0:
            draw.rectangle((x0, top, track_end, height - 1), fill=color)

    # Span overlay
    if span is not None:
        slice_template(build_template(column_count, "0px"), span)
        x0, x1 = sorted((x_by_name[span.start], x_by_name[span.end]))
        overlay = Image.new("RGBA", image.size, (255, 255, 255, 0))
        ImageDraw.Draw(overlay).rectangle((x0, top, x1, height - 1), fill=COLORS["span"])
        image = Image.alpha_composite(image, overlay)
        draw = ImageDraw.Draw(image)

    # Lines and labels
    for idx, (name, x) in enumerate(positions):
        x = min(x, viewport_px - 1)
        draw.line((x, top - 4, x, height - 1), fill=COLORS["line"], width=LINE_WIDTH)
        label_y = 2 + (idx % 2) * LABEL_ROW_HEIGHT
        text_width = draw.textbbox((0, 0), name, font=font)[2]
        label_x = max(0, min(x + 2, viewport_px - text_width - 2))
        draw.text((label_x, label_y), name, fill=LABEL_TEXT_COLOR, font=font)

    return image.convert("RGB")


def save_preview(image: Image.Image, output_path: Path) -> Path:
    """
    Save a preview image.

    Args:
        image: Image from render_preview()
        output_path: Destination file, parent directories are created

    Returns:
        Path to the saved image
    """
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    image.save(output_path)
    logger.info(f"Saved grid preview: {output_path}")
    return output_path
