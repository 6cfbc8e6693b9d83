"""Resolve a Human Universal Gridder region from the command line.

Prints the css (or JSON) for one region at one breakpoint and can
save a debug preview of the breakpoint's grid.

Usage:
    hug-grid --breakpoint md
    hug-grid --breakpoint lg --span base=full-start,full-end --span lg=content-2,content-5
    hug-grid --breakpoint md --theme theme.json --preview grid.png --viewport 1440
"""

from __future__ import annotations

import argparse
import json
import logging
import re
import sys
from pathlib import Path
from typing import Dict, List, Optional, Sequence, Tuple

from hug_grid import __version__
from hug_grid.core.schemas.validator import ValidationError
from hug_grid.layout import HugError, LineNotFoundError, RegionLayout, ResolutionError, hug
from hug_grid.output import format_css_block, render_preview, save_preview
from hug_grid.theme import DEFAULT_THEME, Theme, ThemeLoadError, load_theme

logger = logging.getLogger(__name__)

ROOT_FONT_SIZE_PX = 16
LENGTH_PATTERN = re.compile(r"^\s*(-?\d+(?:\.\d+)?)\s*(px|rem|em)?\s*$")


def parse_span(value: str) -> Tuple[str, List[str]]:
    """Parse ``BREAKPOINT=START,END`` into (breakpoint, [start, end])."""
    breakpoint, sep, lines = value.partition("=")
    names = [name.strip() for name in lines.split(",")]
    if not sep or not breakpoint.strip() or len(names) != 2 or not all(names):
        raise argparse.ArgumentTypeError(
            f"Span must look like BREAKPOINT=START,END: {value!r}"
        )
    return breakpoint.strip(), names


def length_to_px(length: str) -> float:
    """
    Convert a css length to pixels for the preview.

    Only plain px, rem and em lengths are supported, with the browser
    default root font size.
    """
    match = LENGTH_PATTERN.match(length)
    if not match:
        raise ValueError(f"Preview needs px or rem lengths, got: {length!r}")
    number, unit = match.groups()
    if unit in ("rem", "em"):
        return float(number) * ROOT_FONT_SIZE_PX
    return float(number)


def layout_to_dict(layout: RegionLayout) -> Dict[str, object]:
    """JSON-friendly view of a resolved region."""
    return {
        "breakpoint": layout.breakpoint,
        "columns": layout.column_count,
        "gap": layout.gap,
        "gridTemplateColumns": [line.css for line in layout.template],
        "gridColumn": layout.span_expr,
    }


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="hug-grid",
        description="Resolve the grid template and span of a layout region.",
    )
    parser.add_argument("--breakpoint", "-b", required=True, help="Current breakpoint, e.g. md")
    parser.add_argument("--theme", type=Path, help="JSON theme file (defaults to the built-in theme)")
    parser.add_argument(
        "--span",
        action="append",
        type=parse_span,
        default=[],
        metavar="BP=START,END",
        help="Span of a nested region for one breakpoint (repeatable)",
    )
    parser.add_argument("--format", choices=("css", "json"), default="css")
    parser.add_argument("--selector", default=".hug", help="Css selector for css output")
    parser.add_argument("--preview", type=Path, help="Save a grid preview image to this path")
    parser.add_argument("--viewport", type=int, default=1440, help="Preview width in pixels")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    hug_grid = dict(args.span) if args.span else None

    try:
        theme: Theme = load_theme(args.theme) if args.theme else DEFAULT_THEME
        layout = hug(theme, args.breakpoint, hug_grid)
    except (ThemeLoadError, ValidationError, HugError, ResolutionError, LineNotFoundError, ValueError) as e:
        print(f"hug-grid: {e}", file=sys.stderr)
        return 1

    logger.info(f"Resolved {layout.breakpoint} region: {layout.column_count} columns, span {layout.span_expr or 'full'}")

    # Nothing reaches stdout unless the preview can be drawn too
    image = None
    if args.preview:
        try:
            image = render_preview(
                layout.column_count,
                args.viewport,
                length_to_px(theme.resolve_size(theme.hug.layout_max)),
                length_to_px(layout.gap),
                span=layout.span,
            )
        except (LineNotFoundError, ValueError) as e:
            print(f"hug-grid: {e}", file=sys.stderr)
            return 1

    if args.format == "json":
        print(json.dumps(layout_to_dict(layout), indent=2))
    else:
        print(format_css_block(layout, args.selector))

    if image is not None:
        save_preview(image, args.preview)

    return 0


if __name__ == "__main__":
    sys.exit(main())
