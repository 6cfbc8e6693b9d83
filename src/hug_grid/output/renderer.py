"""
Module: output.renderer

Purpose:
    Render a resolved RegionLayout as css declarations for the element
    that hosts the region.

Key Functions:
    - render_css(): Ordered css property -> value mapping
    - format_css_block(): Css rule block for a selector

Dependencies:
    - layout.region: RegionLayout

Used By:
    - cli: css output format
"""

from __future__ import annotations

from typing import Dict

from hug_grid.layout.region import RegionLayout


def render_css(layout: RegionLayout) -> Dict[str, str]:
    """
    Css declarations for a region.

    ``grid-column`` is only present when the region declared spans.

    Example:
        >>> render_css(layout)["display"]
        'grid'
    """
    declarations = {
        "display": "grid",
        "gap": layout.gap,
        "grid-template-columns": layout.template_css,
    }
    if layout.span_expr is not None:
        declarations["grid-column"] = layout.span_expr
    return declarations


def format_css_block(layout: RegionLayout, selector: str = ".hug") -> str:
    """Render a region as a css rule, one declaration per line."""
    lines = [f"{selector} {{"]
    for prop, value in render_css(layout).items():
        # Continuation lines of the template are indented under the property
        value = value.replace("\n", "\n    ")
        lines.append(f"  {prop}: {value};")
    lines.append("}")
    return "\n".join(lines)
