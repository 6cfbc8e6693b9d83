"""
Unit tests for grid models.

Test Coverage:
- ColumnSpec variants and their css
- GridTemplate queries
- Span parsing and expression
- BreakpointContext validation
"""

import dataclasses

import pytest

from hug_grid.core.models import (
    DEFAULT_SPAN,
    BreakpointContext,
    GridTemplate,
    NameOnlyLine,
    SizedColumn,
    Span,
)


@pytest.fixture
def small_template():
    return GridTemplate(
        lines=(
            SizedColumn("full-start", "minmax(0, 1fr)"),
            SizedColumn("content-start", "minmax(0, 10px)"),
            SizedColumn("content-end", "minmax(0, 1fr)"),
            NameOnlyLine("full-end"),
        ),
        column_count=1,
    )


class TestColumnSpec:
    """Tests for SizedColumn / NameOnlyLine."""

    def test_css_when_sized_then_name_and_size(self):
        assert SizedColumn("content-2", "minmax(0, 5px)").css == "[content-2] minmax(0, 5px)"

    def test_css_when_name_only_then_name(self):
        assert NameOnlyLine("full-end").css == "[full-end]"

    def test_eq_when_same_name_different_variant_then_not_equal(self):
        assert NameOnlyLine("content-3") != SizedColumn("content-3", "1fr")

    def test_init_when_frozen_then_cannot_mutate(self):
        line = SizedColumn("content-2", "1fr")

        with pytest.raises(dataclasses.FrozenInstanceError):
            line.size = "2fr"


class TestGridTemplate:
    """Tests for GridTemplate."""

    def test_names_when_built_then_in_order(self, small_template):
        assert small_template.names == ("full-start", "content-start", "content-end", "full-end")

    def test_index_of_when_present_then_position(self, small_template):
        assert small_template.index_of("content-end") == 2

    def test_index_of_when_missing_then_minus_one(self, small_template):
        assert small_template.index_of("content-2") == -1

    def test_iter_when_looped_then_yields_lines(self, small_template):
        assert [line.name for line in small_template] == list(small_template.names)


class TestSpan:
    """Tests for Span."""

    def test_from_value_when_pair_then_span(self):
        assert Span.from_value(["content-2", "content-4"]) == Span("content-2", "content-4")

    def test_from_value_when_span_then_same_object(self):
        assert Span.from_value(DEFAULT_SPAN) is DEFAULT_SPAN

    @pytest.mark.parametrize("value", [[], ["content-2"], ["a", "b", "c"], "ab", None, 5])
    def test_from_value_when_not_a_pair_then_raises(self, value):
        with pytest.raises(ValueError, match="pair"):
            Span.from_value(value)

    def test_expression_when_default_then_full_extent(self):
        assert DEFAULT_SPAN.expression == "full-start / full-end"


class TestBreakpointContext:
    """Tests for BreakpointContext."""

    def test_position_when_current_in_order_then_index(self):
        ctx = BreakpointContext.create("md", ["base", "sm", "md", "lg"])

        assert ctx.position == 2
        assert ctx.order == ("base", "sm", "md", "lg")

    def test_position_when_current_not_in_order_then_minus_one(self):
        assert BreakpointContext.create("print", ["base"]).position == -1

    def test_init_when_order_empty_then_raises(self):
        with pytest.raises(ValueError, match="must not be empty"):
            BreakpointContext.create("md", [])

    def test_init_when_current_empty_then_raises(self):
        with pytest.raises(ValueError, match="Current breakpoint"):
            BreakpointContext.create("", ["base"])
