"""Tests for line classification and dispatch."""

import pytest

from texttab.rows import RowKind, classify, interpret_row


class TestClassify:
    """Test the first-match-wins rule order."""

    @pytest.mark.parametrize("row,kind", [
        ("", RowKind.BLANK),
        ("| a comment", RowKind.COMMENT),
        ("|td | not a row", RowKind.COMMENT),
        ("^^ {debug true}", RowKind.OPTIONS),
        ("^^{a 1}", RowKind.OPTIONS),
        ("^^row-sum", RowKind.OPTIONS),
        ("table {border 1}", RowKind.ELEMENT_STYLE),
        ("tr {height 1}", RowKind.ELEMENT_STYLE),
        ("th {x 1}", RowKind.ELEMENT_STYLE),
        ("td   {x 1}", RowKind.ELEMENT_STYLE),
        ("^1 {x 1}", RowKind.REFERENCE_STYLE),
        ("^hdr {font-weight bold}", RowKind.REFERENCE_STYLE),
        ("th-^ | ^a", RowKind.REF_COLUMN_STYLE),
        ("td-^|^a", RowKind.REF_COLUMN_STYLE),
        ("t*-^ | ^a", RowKind.REF_COLUMN_STYLE),
        ("th-color | red", RowKind.NAMED_COLUMN_STYLE),
        ("td-text-align | left", RowKind.NAMED_COLUMN_STYLE),
        ("t*-width | 1", RowKind.NAMED_COLUMN_STYLE),
        ("th | a", RowKind.TH_ROW),
        ("th^1 | a", RowKind.TH_ROW),
        ("td | a", RowKind.TD_ROW),
        ("td^1^2 | a", RowKind.TD_ROW),
        ("td{x 1}", RowKind.TD_ROW),
        ("td {x 1", RowKind.TD_ROW),
        ("tr | a", RowKind.UNKNOWN),
        ("^1{x 1}", RowKind.UNKNOWN),
        ("^1 {x 1", RowKind.UNKNOWN),
        ("hello", RowKind.UNKNOWN),
    ])
    def test_classify(self, row, kind):
        assert classify(row)[0] == kind


class TestInterpretRow:
    """Test handlers update the state."""

    def test_element_styles_merge(self, make_state):
        state = make_state(1)
        interpret_row(state, 'td {a "1" b "x"}')
        interpret_row(state, 'td {a "2"}')
        assert state.elem_styles["td"] == {"a": "2", "b": "x"}

    def test_element_styles_merge_with_base(self, make_state):
        state = make_state(1, {"td": {"color": "red", "width": "1px"}})
        interpret_row(state, "td {color blue}")
        assert state.elem_styles["td"] == {"color": "blue", "width": "1px"}

    def test_reference_styles_merge(self, make_state):
        state = make_state(1)
        interpret_row(state, '^r {x "1"}')
        interpret_row(state, "^r {y 2}")
        assert state.ref_styles == {"r": {"x": "1", "y": 2}}

    def test_malformed_payload_is_empty(self, make_state):
        state = make_state(1)
        interpret_row(state, 'td {color "red}')
        interpret_row(state, "^r {x}")
        assert state.elem_styles["td"] == {}
        assert state.ref_styles["r"] == {}

    def test_options_lower_cased(self, make_state):
        state = make_state(1)
        interpret_row(state, '^^ {Mode "fast" :Debug true}')
        interpret_row(state, "^^ {mode slow}")
        assert state.options == {"mode": "slow", "debug": "true"}

    def test_bad_options_are_ignored(self, make_state):
        state = make_state(1)
        interpret_row(state, "^^ {a} ")
        interpret_row(state, "^^row-sum")
        assert state.options == {}

    def test_comment_and_unknown_do_nothing(self, make_state):
        state = make_state(1)
        interpret_row(state, "| td | a")
        interpret_row(state, "nonsense")
        assert state.rows == []

    def test_data_rows(self, make_state):
        state = make_state(1)
        interpret_row(state, "th | A")
        interpret_row(state, "td | a")
        assert [row.row_type for row in state.rows] == ["th", "td"]
