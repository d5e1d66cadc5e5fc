"""Texttab - HTML tables with inline CSS from a line-based text layout.

Subpackages and modules:
- texttab.compiler: compile() / compile_table() entry points
- texttab.rows: line classification and dispatch
- texttab.cells: data row and cell compilation, calculations
- texttab.columns: column style declarations
- texttab.styles: style maps, reference tags, style resolution
- texttab.literal: brace-object and literal reader
- texttab.formatting: number detection and printf-style formats
- texttab.layout: side-by-side layout of several tables
- texttab.generators: texttab source from in-memory data
- texttab.core: settings, exceptions, logging
"""

from .compiler import compile, compile_table, texttab_html
from .generators import tt_table, tt_values
from .layout import layout_html
from .models import Cell, CompiledRow, CompiledTable, RowType

__version__ = "0.1.1"

__all__ = [
    "compile",
    "compile_table",
    "texttab_html",
    "layout_html",
    "tt_values",
    "tt_table",
    "Cell",
    "CompiledRow",
    "CompiledTable",
    "RowType",
]
