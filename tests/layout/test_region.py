"""
Unit tests for region resolution.

Test Coverage:
- resolve_region(): gap / column resolution per breakpoint
- Span resolution with the full-extent default
- ResolutionError for missing required settings
- Error propagation from slicing
"""

import pytest

from hug_grid.core.models import BreakpointContext, Span
from hug_grid.layout import (
    HugConfig,
    LineNotFoundError,
    ResolutionError,
    resolve_region,
)


class TestRequiredSettings:
    """Gap and column count resolution."""

    def test_resolve_region_when_md_then_exact_columns_and_inherited_gap(self, hug_config, context_factory):
        # Act
        layout = resolve_region(context_factory("md"), hug_config)

        # Assert
        assert layout.column_count == 8
        assert layout.gap == "4"
        assert layout.breakpoint == "md"

    def test_resolve_region_when_sm_then_inherits_base(self, hug_config, context_factory):
        # Act
        layout = resolve_region(context_factory("sm"), hug_config)

        # Assert
        assert layout.column_count == 4
        assert len(layout.template) == 7

    def test_resolve_region_when_xl_then_inherits_lg(self, hug_config, context_factory):
        # Act
        layout = resolve_region(context_factory("xl"), hug_config)

        # Assert
        assert layout.column_count == 12
        assert layout.gap == "12"

    def test_resolve_region_when_no_span_mapping_then_full_template_and_no_expr(self, hug_config, context_factory):
        # Act
        layout = resolve_region(context_factory("lg"), hug_config)

        # Assert
        assert layout.template.names[0] == "full-start"
        assert layout.template.names[-1] == "full-end"
        assert layout.span is None
        assert layout.span_expr is None

    def test_resolve_region_when_size_resolver_then_lengths_used(self, hug_config, context_factory):
        # Arrange
        sizes = {"4": "1rem", "1280px": "1280px"}

        # Act
        layout = resolve_region(context_factory("base"), hug_config, resolve_size=sizes.__getitem__)

        # Assert
        assert layout.gap == "1rem"
        assert layout.template[1].size == "minmax(0, calc(calc(calc(1280px - 1rem) / 4) - 1rem))"

    def test_resolve_region_when_no_gap_applies_then_raises(self, context_factory):
        # Arrange
        config = HugConfig(gaps={"lg": "12"}, columns={"base": 4})

        # Act & Assert
        with pytest.raises(ResolutionError, match="gap"):
            resolve_region(context_factory("md"), config)

    def test_resolve_region_when_no_columns_apply_then_raises(self, context_factory):
        # Arrange
        config = HugConfig(gaps={"base": "4"}, columns={"xl": 16})

        # Act & Assert
        with pytest.raises(ResolutionError, match="number of columns"):
            resolve_region(context_factory("md"), config)

    def test_resolve_region_when_breakpoint_unknown_then_raises(self, hug_config, breakpoints):
        # Arrange
        context = BreakpointContext.create("print", breakpoints)

        # Act & Assert
        with pytest.raises(ResolutionError):
            resolve_region(context, hug_config)

    def test_resolve_region_when_exact_column_count_is_zero_then_raises_value_error(self, context_factory):
        # Arrange
        config = HugConfig(gaps={"base": "4"}, columns={"base": 4, "md": 0})

        # Act & Assert
        with pytest.raises(ValueError, match="column_count"):
            resolve_region(context_factory("md"), config)


class TestUserSpan:
    """Nested regions with per-breakpoint spans."""

    def test_resolve_region_when_span_for_breakpoint_then_sliced(self, hug_config, context_factory):
        # Arrange
        user_span = {"base": ["full-start", "full-end"], "md": ["content-2", "content-4"]}

        # Act
        layout = resolve_region(context_factory("md"), hug_config, user_span)

        # Assert
        assert layout.template.names == ("content-2", "content-3", "content-4")
        assert layout.span == Span("content-2", "content-4")
        assert layout.span_expr == "content-2 / content-4"

    def test_resolve_region_when_span_missing_for_breakpoint_then_previous_used(self, hug_config, context_factory):
        # Arrange
        user_span = {"base": ["content-start", "content-3"], "lg": ["content-6", "full-end"]}

        # Act
        layout = resolve_region(context_factory("md"), hug_config, user_span)

        # Assert
        assert layout.span_expr == "content-start / content-3"
        assert layout.template.names == ("content-start", "content-2", "content-3")

    def test_resolve_region_when_span_mapping_empty_then_full_extent_default(self, hug_config, context_factory):
        # Act
        layout = resolve_region(context_factory("md"), hug_config, {})

        # Assert
        assert layout.span_expr == "full-start / full-end"
        assert len(layout.template) == 8 + 3

    def test_resolve_region_when_span_line_missing_then_raises(self, hug_config, context_factory):
        # Arrange
        user_span = {"base": ["content-2", "content-8"]}

        # Act
        with pytest.raises(LineNotFoundError) as exc_info:
            resolve_region(context_factory("sm"), hug_config, user_span)

        # Assert
        assert exc_info.value.line == "content-8"
        assert exc_info.value.breakpoint == "sm"
        assert exc_info.value.column_count == 4

    def test_resolve_region_when_span_not_a_pair_then_raises(self, hug_config, context_factory):
        with pytest.raises(ValueError, match="pair"):
            resolve_region(context_factory("md"), hug_config, {"md": ["content-2"]})

    @pytest.mark.parametrize("value", [None, 5])
    def test_resolve_region_when_exact_span_not_a_sequence_then_raises_value_error(self, hug_config, context_factory, value):
        """Exact entries are returned as is, so a non-sequence must still be rejected as a span."""
        with pytest.raises(ValueError, match="pair"):
            resolve_region(context_factory("md"), hug_config, {"md": value})

    def test_resolve_region_when_same_inputs_then_identical_output(self, hug_config, context_factory):
        # Arrange
        user_span = {"md": ("content-2", "content-5")}

        # Act
        first = resolve_region(context_factory("md"), hug_config, user_span)
        second = resolve_region(context_factory("md"), hug_config, user_span)

        # Assert
        assert first == second
        assert first.template_css == second.template_css
