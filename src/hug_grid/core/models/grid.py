"""
Module: grid

Purpose:
    Provides the grid line models - named column entries, the ordered
    template they form, and the (start, end) span a nested region
    occupies within its parent template.

Key Classes:
    - ColumnSpec: Base of the column entry variant
    - SizedColumn: Named line followed by a sized track
    - NameOnlyLine: Closing line that only contributes a name
    - GridTemplate: Ordered, immutable sequence of ColumnSpecs
    - Span: Start/end line pair for a nested region

Dependencies:
    - dataclasses (std)

Used By:
    - layout.template: Builds GridTemplates
    - layout.slicer: Slices GridTemplates by Span
    - output.renderer: Renders templates as CSS
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Sequence


@dataclass(frozen=True, slots=True)
class ColumnSpec:
    """
    One named line of a grid template.

    Never instantiated directly: every entry is either a SizedColumn
    or a NameOnlyLine.

    Attributes:
        name: Grid line name, e.g. "content-5"
    """

    name: str

    @property
    def css(self) -> str:
        raise NotImplementedError


@dataclass(frozen=True, slots=True)
class SizedColumn(ColumnSpec):
    """
    Named line followed by a track of the given size.

    Example:
        >>> SizedColumn("full-start", "minmax(0, 1fr)").css
        '[full-start] minmax(0, 1fr)'
    """

    size: str

    @property
    def css(self) -> str:
        return f"[{self.name}] {self.size}"


@dataclass(frozen=True, slots=True)
class NameOnlyLine(ColumnSpec):
    """
    Closing line with no track after it.

    Example:
        >>> NameOnlyLine("full-end").css
        '[full-end]'
    """

    @property
    def css(self) -> str:
        return f"[{self.name}]"


@dataclass(frozen=True, slots=True)
class GridTemplate:
    """
    Ordered column template for one breakpoint (immutable).

    Attributes:
        lines: Column entries in grid order
        column_count: Number of content columns the full template was built for

    Example:
        >>> template.names
        ('full-start', 'content-start', 'content-2', ..., 'full-end')
        >>> template.index_of("content-2")
        2
    """

    lines: tuple[ColumnSpec, ...]
    column_count: int

    def __len__(self) -> int:
        return len(self.lines)

    def __iter__(self) -> Iterator[ColumnSpec]:
        return iter(self.lines)

    def __getitem__(self, index: int) -> ColumnSpec:
        return self.lines[index]

    @property
    def names(self) -> tuple[str, ...]:
        """Line names in grid order."""
        return tuple(line.name for line in self.lines)

    def index_of(self, name: str) -> int:
        """Position of the line called ``name``, or -1 when missing."""
        for idx, line in enumerate(self.lines):
            if line.name == name:
                return idx
        return -1

    def to_css(self) -> str:
        """Join the entries into a multi-line grid-template-columns value."""
        return "\n".join(line.css for line in self.lines)


@dataclass(frozen=True, slots=True)
class Span:
    """
    Portion of a parent template a nested region occupies.

    Works like the css `grid-column` property: the region starts at the
    `start` line and stops at the `end` line.

    Attributes:
        start: Name of the first line
        end: Name of the closing line
    """

    start: str
    end: str

    @classmethod
    def from_value(cls, value: Sequence[str] | "Span") -> "Span":
        """
        Build a Span from a configured ``[start, end]`` pair.

        Raises:
            ValueError: If the value does not hold exactly two line names
        """
        if isinstance(value, Span):
            return value
        if isinstance(value, str) or not isinstance(value, Sequence) or len(value) != 2:
            raise ValueError(f"Span must be a [start, end] pair: {value!r}")
        start, end = value
        return cls(str(start), str(end))

    @property
    def expression(self) -> str:
        """Span as a css `grid-column` value."""
        return f"{self.start} / {self.end}"


DEFAULT_SPAN = Span("full-start", "full-end")
