"""
Cell compiler for th/td data rows.

A data row looks like ``td^r1 | 12.5 | Total^bold | ^^col-sum^num``:
the first segment is the row type with optional row reference tags,
every other segment is one cell. Each cell is split into literal content
and trailing ``^tags``, styled by merging four layers

    element style < column style < row style < cell style

and then resolved to its text. Plain numbers count toward the row and
column running totals used by the calculation variables:

- ``^^row-sum`` / ``^^row-avg``: numeric cells to the left in the same row
- ``^^col-sum`` / ``^^col-avg``: numeric cells above in the same column,
  since the last column calculation

With no numeric contributors a calculation shows ``NaN``.
"""

import math
import re
from typing import Any, Optional

from .core.logging import get_context_logger
from .formatting import format_or_str, number_str, parse_number
from .models import Cell, CompiledRow, CompilerState
from .styles import FORMAT_KEY, StyleMap, merge_styles, resolve_refs, style_to_attrs

logger = get_context_logger(__name__)

ROW_SUM = "^^row-sum"
ROW_AVG = "^^row-avg"
COL_SUM = "^^col-sum"
COL_AVG = "^^col-avg"

ROW_VARIABLES = (ROW_SUM, ROW_AVG)
COL_VARIABLES = (COL_SUM, COL_AVG)

# ^^name followed by optional ^tags
VARIABLE_RE = re.compile(r"(\^\^[^\^\s]+)\s*(\^.*)", re.DOTALL)
# content up to the first caret, then ^tags
CONTENT_RE = re.compile(r"(.*?)(\^.*)", re.DOTALL)


def parse_cell(text: str) -> tuple[str, str]:
    """
    Split cell text into (content, tags).

    Examples:
        >>> parse_cell("b^1^2")
        ('b', '^1^2')
        >>> parse_cell("^^col-avg ^num")
        ('^^col-avg', '^num')
        >>> parse_cell("plain")
        ('plain', '')
    """
    if text == "":
        return "", ""

    pattern = VARIABLE_RE if text.startswith("^^") else CONTENT_RE
    match = pattern.fullmatch(text)
    if match is None:
        return text, ""
    return match.group(1), match.group(2)


def split_row(row: str) -> tuple[str, list[str]]:
    """Split a data row into its head segment and trimmed cell texts."""
    cols = [col.strip() for col in row.split("|")]
    return cols[0], cols[1:]


def apply_row_variables(cells: list[str], nan_text: str = "NaN") -> list[str]:
    """
    Replace ^^row-sum / ^^row-avg cells with their values.

    Totals run left to right over numeric cell content; a variable sees
    only the cells before it and does not count toward later ones. Any
    tags on the variable stay attached to the value.
    """
    total = 0.0
    count = 0
    resolved: list[str] = []
    for text in cells:
        content, tags = parse_cell(text)
        if content in ROW_VARIABLES:
            if count == 0:
                value_text = nan_text
            elif content == ROW_SUM:
                value_text = number_str(total)
            else:
                value_text = number_str(total / count)
            resolved.append(value_text + tags)
            continue

        number = parse_number(content)
        if number is not None:
            total += number
            count += 1
        resolved.append(text)
    return resolved


def _span(value: Any) -> int:
    number = parse_number(str(value)) if value is not None else None
    if number is None or not math.isfinite(number) or number < 1:
        return 1
    return int(number)


def _free_slots(state: CompilerState, cells: list[Cell]) -> int:
    """
    Count column slots the row leaves empty and advance the rowspan carry.

    Slots still covered by a rowspan from a row above are skipped, and a
    cell occupies as many slots as its colspan.
    """
    width = state.col_count
    occupied = [carry > 0 for carry in state.span_carry]
    next_carry = [max(carry - 1, 0) for carry in state.span_carry]

    slot = 0
    for cell in cells:
        while slot < width and occupied[slot]:
            slot += 1
        colspan = _span(cell.attributes.get("colspan"))
        rowspan = _span(cell.attributes.get("rowspan"))
        for taken in range(slot, min(slot + colspan, width)):
            occupied[taken] = True
            if rowspan > 1:
                next_carry[taken] = max(next_carry[taken], rowspan - 1)
        slot += colspan

    state.span_carry = next_carry
    return occupied.count(False)


class RowCompiler:
    """Compile one data row against the current interpreter state."""

    def __init__(self, state: CompilerState, row_type: str):
        self.state = state
        self.row_type = row_type
        self.elem_style = state.elem_styles.get(row_type)
        self.col_styles = state.col_styles[row_type]
        self.row_style: StyleMap = {}
        # per column: numeric value this row adds to the running totals
        self.pending: dict[int, float] = {}

    def compile(self, row: str) -> CompiledRow:
        head, texts = split_row(row)
        self.row_style = resolve_refs(self.state.ref_styles, head)

        texts = apply_row_variables(texts, self.state.settings.NAN_TEXT)
        if len(texts) > self.state.col_count:
            logger.debug(
                "Row has more cells than columns",
                extra_data={"cells": len(texts), "columns": self.state.col_count},
            )
            texts = texts[: self.state.col_count]

        cells = [self.compile_cell(index, text) for index, text in enumerate(texts)]

        for _ in range(_free_slots(self.state, cells)):
            cells.append(self.compile_cell(len(cells), ""))

        for index, value in self.pending.items():
            self.state.col_calcs[index].add(value)

        tr_style = self.state.elem_styles.get("tr", {})
        return CompiledRow(row_type=self.row_type, attributes=style_to_attrs(tr_style), cells=cells)

    def cell_style(self, index: int, tags: str) -> StyleMap:
        col_style = self.col_styles[index] if index < len(self.col_styles) else None
        cell_style = resolve_refs(self.state.ref_styles, tags)
        return merge_styles(self.elem_style, col_style, self.row_style, cell_style)

    def compile_cell(self, index: int, text: str) -> Cell:
        content, tags = parse_cell(text)
        styles = self.cell_style(index, tags)
        return Cell(attributes=style_to_attrs(styles), content=self.cell_text(index, content, styles))

    def cell_text(self, index: int, content: str, styles: StyleMap) -> str:
        fmt: Optional[str] = styles.get(FORMAT_KEY)

        if content in COL_VARIABLES:
            return self.column_result(index, content, fmt)

        number = parse_number(content)
        if number is None:
            return content

        self.pending[index] = number
        if fmt is None:
            return content
        return format_or_str(fmt, number)

    def column_result(self, index: int, variable: str, fmt: Optional[str]) -> str:
        """Column total or average so far; the running values start over afterwards."""
        if index >= len(self.state.col_calcs):
            return self.state.settings.NAN_TEXT

        calc = self.state.col_calcs[index]
        total, count = calc.sum, calc.count
        calc.sum, calc.count = 0.0, 0

        if count == 0:
            return self.state.settings.NAN_TEXT

        value = total if variable == COL_SUM else total / count
        return format_or_str(fmt if fmt is not None else self.state.settings.DEFAULT_FORMAT, value)


def compile_data_row(state: CompilerState, row: str, row_type: str) -> None:
    """Compile a th/td row and append it to the state's rows."""
    state.rows.append(RowCompiler(state, row_type).compile(row))
