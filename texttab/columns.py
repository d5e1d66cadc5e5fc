"""
Column styles.

Two declaration forms set per-column styles for th rows, td rows, or both:

    td-text-align | "left" | "right" | *      named: one style key, a value per column
    th-^          | ^hdr   | ^num^bold        reference: ^tags per column

The ``t*-`` prefix applies a declaration to both th and td columns.
A trailing ``*`` repeats the last listed value for every remaining column.
"""

from typing import Iterable

from .core.errors import LiteralSyntaxError
from .core.logging import get_context_logger
from .literal import read_literal
from .models import CompilerState, RowType
from .styles import StyleMap, resolve_refs

logger = get_context_logger(__name__)

PROPAGATE = "*"


def extend_style(values: list[str], length: int) -> list[str]:
    """
    Extend a column value list to length.

    If the last value is ``*`` it is dropped and the value before it fills
    the remaining columns; otherwise they are filled with "". Lists that
    are already long enough are returned unchanged.
    """
    values = list(values)
    pad = ""
    if values and values[-1] == PROPAGATE:
        values.pop()
        pad = values[-1] if values else ""
    if len(values) < length:
        values.extend([pad] * (length - len(values)))
    return values


def split_declaration(row: str) -> tuple[str, list[str]]:
    """Split a column-style row into its head token and trimmed values."""
    cols = [col.strip() for col in row.split("|")]
    head, values = cols[0], cols[1:]
    # Trailing empty values pad the same way as missing ones
    while values and values[-1] == "":
        values.pop()
    return head, values


def target_row_types(head: str) -> Iterable[str]:
    if head.startswith("t*"):
        return (RowType.TH.value, RowType.TD.value)
    return (head[:2],)


def _named_value(text: str):
    try:
        return read_literal(text)
    except LiteralSyntaxError:
        # Not a single literal: keep the raw text as a string value
        return text


def named_col_styles(head: str, values: list[str], length: int) -> list[StyleMap]:
    """Style maps for a named declaration such as ``td-color | red | * ``."""
    style_key = head[3:]
    styles: list[StyleMap] = []
    for value in extend_style(values, length):
        if value == "" or not style_key:
            styles.append({})
        else:
            styles.append({style_key: _named_value(value)})
    return styles


def ref_col_styles(state: CompilerState, values: list[str], length: int) -> list[StyleMap]:
    """Style maps for a reference declaration such as ``td-^ | ^a | ^b^c``."""
    return [resolve_refs(state.ref_styles, value) for value in extend_style(values, length)]


def named_col_style(state: CompilerState, row: str) -> None:
    """Merge a ``th-<name>``, ``td-<name>`` or ``t*-<name>`` row into the column styles."""
    head, values = split_declaration(row)
    styles = named_col_styles(head, values, state.col_count)
    for row_type in target_row_types(head):
        state.merge_col_styles(row_type, styles)
    logger.debug("Named column style", extra_data={"key": head[3:], "targets": list(target_row_types(head))})


def ref_col_style(state: CompilerState, row: str) -> None:
    """Merge a ``th-^``, ``td-^`` or ``t*-^`` row into the column styles."""
    head, values = split_declaration(row)
    styles = ref_col_styles(state, values, state.col_count)
    for row_type in target_row_types(head):
        state.merge_col_styles(row_type, styles)
