"""
Core Models Package

Immutable data models shared by the layout, theme and output packages.

All models in this package are frozen dataclasses. Every resolution
call builds them from scratch, so they can be passed between threads
without coordination.
"""

from .breakpoints import BreakpointContext
from .grid import ColumnSpec, SizedColumn, NameOnlyLine, GridTemplate, Span, DEFAULT_SPAN

__all__ = [
    "BreakpointContext",
    "ColumnSpec",
    "SizedColumn",
    "NameOnlyLine",
    "GridTemplate",
    "Span",
    "DEFAULT_SPAN",
]
