"""Tests for column style declarations."""

import pytest

from texttab.columns import (
    extend_style,
    named_col_style,
    named_col_styles,
    ref_col_style,
    split_declaration,
)


class TestExtendStyle:
    """Test the propagation law."""

    def test_star_repeats_previous_value(self):
        assert extend_style(["a", "b", "*"], 4) == ["a", "b", "b", "b"]

    def test_no_star_pads_empty(self):
        assert extend_style(["a"], 3) == ["a", "", ""]

    def test_long_enough_is_unchanged(self):
        assert extend_style(["a", "b", "c"], 2) == ["a", "b", "c"]

    def test_star_alone(self):
        assert extend_style(["*"], 2) == ["", ""]

    def test_empty(self):
        assert extend_style([], 2) == ["", ""]

    def test_star_fills_exact_length(self):
        """Test * with nothing left to fill just drops the marker."""
        assert extend_style(["a", "b", "*"], 2) == ["a", "b"]


class TestSplitDeclaration:

    def test_trailing_pipe(self):
        assert split_declaration("td-x | a | b |") == ("td-x", ["a", "b"])

    def test_star_before_trailing_pipe(self):
        assert split_declaration("td-x|a|*|") == ("td-x", ["a", "*"])


class TestNamedColumnStyles:
    """Test th-<name> / td-<name> / t*-<name> rows."""

    def test_quoted_values_with_propagation(self):
        styles = named_col_styles("td-text-align", ['"left"', '"right"', "*"], 4)
        assert styles == [
            {"text-align": "left"},
            {"text-align": "right"},
            {"text-align": "right"},
            {"text-align": "right"},
        ]

    def test_literal_reading(self):
        """Test numbers, bare words and unreadable text."""
        styles = named_col_styles("td-width", ["10", "", "10px", "a b"], 4)
        assert styles == [{"width": 10}, {}, {"width": "10px"}, {"width": "a b"}]

    def test_merge_into_state(self, make_state):
        state = make_state(3)
        named_col_style(state, "td-color | red | blue")
        named_col_style(state, "td-width | 1 | *")
        assert state.col_styles["td"] == [
            {"color": "red", "width": 1},
            {"color": "blue", "width": 1},
            {"width": 1},
        ]
        assert state.col_styles["th"] == [{}, {}, {}]

    def test_both_row_types(self, make_state):
        state = make_state(3)
        named_col_style(state, "t*-color | red")
        assert state.col_styles["th"] == [{"color": "red"}, {}, {}]
        assert state.col_styles["td"] == [{"color": "red"}, {}, {}]

    def test_later_value_overrides(self, make_state):
        state = make_state(2)
        named_col_style(state, 'th-color | "red" | "red"')
        named_col_style(state, 'th-color | | "blue"')
        assert state.col_styles["th"] == [{"color": "red"}, {"color": "blue"}]

    def test_extra_values_are_ignored(self, make_state):
        state = make_state(2)
        named_col_style(state, "td-x | 1 | 2 | 3")
        assert state.col_styles["td"] == [{"x": 1}, {"x": 2}]


class TestReferenceColumnStyles:
    """Test th-^ / td-^ / t*-^ rows."""

    @pytest.fixture
    def state(self, make_state):
        state = make_state(3)
        state.merge_ref_style("a", {"color": "red"})
        state.merge_ref_style("b", {"color": "blue", "width": "1px"})
        return state

    def test_tags_per_column(self, state):
        ref_col_style(state, "th-^ | ^a | | ^a^b")
        assert state.col_styles["th"] == [{"color": "red"}, {}, {"color": "blue", "width": "1px"}]
        assert state.col_styles["td"] == [{}, {}, {}]

    def test_propagation(self, state):
        ref_col_style(state, "td-^ | ^a | ^b | *")
        assert state.col_styles["td"] == [{"color": "red"}, {"color": "blue", "width": "1px"}, {"color": "blue", "width": "1px"}]

    def test_both_row_types(self, state):
        ref_col_style(state, "t*-^ | ^a | *")
        assert state.col_styles["th"] == [{"color": "red"}] * 3
        assert state.col_styles["td"] == [{"color": "red"}] * 3

    def test_unknown_reference(self, state):
        ref_col_style(state, "td-^ | ^nope")
        assert state.col_styles["td"] == [{}, {}, {}]
