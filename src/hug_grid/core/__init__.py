"""
Human Universal Gridder Core Package

Shared data models and schema validation for the gridder.

1. **Immutable Data Models**
   - Frozen dataclasses, rebuilt on every resolution call

2. **Stable Line Names**
   - Line names derive from the column index, never from nesting depth,
     so `content-5` is the same position in every nested region
"""

from .models import (
    BreakpointContext,
    ColumnSpec,
    SizedColumn,
    NameOnlyLine,
    GridTemplate,
    Span,
    DEFAULT_SPAN,
)

__all__ = [
    "BreakpointContext",
    "ColumnSpec",
    "SizedColumn",
    "NameOnlyLine",
    "GridTemplate",
    "Span",
    "DEFAULT_SPAN",
]
