"""
Texttab compiler - table assembly and public entry points.

    >>> compile("td | a | b | c")
    '<table><tr><td>a</td><td>b</td><td>c</td></tr></table>'

The source is escaped, split into trimmed lines, pre-scanned for the
data column count, and then interpreted line by line top to bottom.
The compiled rows are wrapped in a <table> carrying the table element
style, serialized, and unescaped.
"""

import re
from typing import Any, Mapping, Optional

from .core.config import Settings
from .core.logging import get_context_logger
from .escaping import escape, unescape
from .models import CompiledTable, CompilerState
from .rows import interpret_row
from .styles import style_to_attrs

logger = get_context_logger(__name__)

LINE_RE = re.compile(r"\r?\n")

# th/td data rows as counted by the column pre-scan
DATA_ROW_RE = re.compile(r"(?:td|th)[\s\^|]")

ElementStyles = Mapping[str, Mapping[str, Any]]


def split_rows(text: str) -> list[str]:
    """Split escaped source into trimmed lines."""
    return [line.strip() for line in LINE_RE.split(text.strip())]


def column_count(rows: list[str]) -> int:
    """Maximum cell count over th/td data rows, not counting the row type segment."""
    counts = [len(row.split("|")) for row in rows if DATA_ROW_RE.match(row)]
    if not counts:
        return 0
    return max(counts) - 1


def compile_table(
    text: str,
    styles: Optional[ElementStyles] = None,
    settings: Optional[Settings] = None,
) -> CompiledTable:
    """
    Compile texttab source into the table data model.

    Args:
        text: Texttab source
        styles: Base element styles, e.g. ``{"table": {"border-collapse": "collapse"}}``
        settings: Settings to use instead of the environment defaults

    Returns:
        The compiled table. Cell content still carries the escape
        placeholders; ``texttab.escaping.unescape`` restores them.
    """
    rows = split_rows(escape(text or ""))
    state = CompilerState.new(column_count(rows), styles, settings)

    for row in rows:
        interpret_row(state, row)

    logger.debug(
        "Compiled texttab table",
        extra_data={"lines": len(rows), "rows": len(state.rows), "columns": state.col_count},
    )

    return CompiledTable(
        attributes=style_to_attrs(state.elem_styles.get("table", {})),
        rows=state.rows,
        column_count=state.col_count,
        options=state.options,
    )


def compile(
    text: str,
    styles: Optional[ElementStyles] = None,
    settings: Optional[Settings] = None,
) -> str:
    """
    Compile texttab source into <table> HTML.

    Args:
        text: Texttab source
        styles: Base element styles (table, tr, th, td), may be empty
        settings: Settings to use instead of the environment defaults

    Returns:
        The table markup
    """
    return unescape(compile_table(text, styles, settings).to_html())


texttab_html = compile
