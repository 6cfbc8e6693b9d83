"""
Output Package

Css rendering of resolved regions and Pillow debug previews.
"""

from .renderer import render_css, format_css_block
from .preview import compute_line_positions, render_preview, save_preview

__all__ = [
    "render_css",
    "format_css_block",
    "compute_line_positions",
    "render_preview",
    "save_preview",
]
