"""
Texttab data model.

The compiled table (rows of cells with resolved attributes) is a set of
Pydantic models so callers can inspect or serialize it before it becomes
HTML. The per-compile interpreter state is a plain dataclass that lives
only for the duration of one compile call.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from .core.config import Settings, get_settings
from .markup import render_element
from .styles import StyleMap, merge_styles

AttrValue = Union[str, int, float]


class RowType(str, Enum):
    """Data row types"""
    TH = "th"
    TD = "td"


ELEMENTS = ("table", "tr", "th", "td")


class Cell(BaseModel):
    """One compiled th/td cell"""
    attributes: dict[str, AttrValue] = Field(default_factory=dict)
    content: str = ""


class CompiledRow(BaseModel):
    """One compiled table row"""
    model_config = ConfigDict(use_enum_values=True)

    row_type: RowType
    attributes: dict[str, AttrValue] = Field(default_factory=dict)
    cells: list[Cell] = Field(default_factory=list)

    def to_element(self) -> tuple:
        return (
            "tr",
            self.attributes,
            [(self.row_type, cell.attributes, [cell.content]) for cell in self.cells],
        )


class CompiledTable(BaseModel):
    """A compiled texttab document, ready for serialization"""
    attributes: dict[str, AttrValue] = Field(default_factory=dict)
    rows: list[CompiledRow] = Field(default_factory=list)
    column_count: int = 0
    options: dict[str, Any] = Field(default_factory=dict)

    def to_element(self) -> tuple:
        return ("table", self.attributes, [row.to_element() for row in self.rows])

    def to_html(self) -> str:
        """Serialize to <table> markup (escape placeholders still in place)."""
        return render_element(self.to_element())


@dataclass
class ColumnCalc:
    """Running sum/count of numeric cells in one column"""

    sum: float = 0.0
    count: int = 0

    def add(self, value: float, count: int = 1) -> None:
        self.sum += value
        self.count += count


@dataclass
class CompilerState:
    """
    Interpreter state threaded through the lines of one document.

    Attributes:
        col_count: Data column count, fixed by the pre-scan
        elem_styles: table/tr/th/td element styles
        ref_styles: Named reference styles (^name {...})
        col_styles: Per row type, one style map per data column
        col_calcs: Running column sums/counts for ^^col-sum / ^^col-avg
        options: Implementation options from ^^ {...} lines
        rows: Compiled rows so far
        span_carry: Per column slot, rows still covered by a rowspan from above
    """

    col_count: int
    settings: Settings
    elem_styles: dict[str, StyleMap] = field(default_factory=dict)
    ref_styles: dict[str, StyleMap] = field(default_factory=dict)
    col_styles: dict[str, list[StyleMap]] = field(default_factory=dict)
    col_calcs: list[ColumnCalc] = field(default_factory=list)
    options: dict[str, Any] = field(default_factory=dict)
    rows: list[CompiledRow] = field(default_factory=list)
    span_carry: list[int] = field(default_factory=list)

    @classmethod
    def new(
        cls,
        col_count: int,
        styles: Optional[Mapping[str, Mapping[str, Any]]] = None,
        settings: Optional[Settings] = None,
    ) -> CompilerState:
        """Fresh state seeded with caller-supplied element styles."""
        elem_styles = {
            str(elem): merge_styles(dict(style))
            for elem, style in (styles or {}).items()
            if style is not None
        }
        return cls(
            col_count=col_count,
            settings=settings or get_settings(),
            elem_styles=elem_styles,
            col_styles={row_type.value: [{} for _ in range(col_count)] for row_type in RowType},
            col_calcs=[ColumnCalc() for _ in range(col_count)],
            span_carry=[0] * col_count,
        )

    def merge_elem_style(self, elem: str, style: StyleMap) -> None:
        self.elem_styles[elem] = merge_styles(self.elem_styles.get(elem), style)

    def merge_ref_style(self, name: str, style: StyleMap) -> None:
        self.ref_styles[name] = merge_styles(self.ref_styles.get(name), style)

    def merge_col_styles(self, row_type: str, styles: list[StyleMap]) -> None:
        """Merge new per-column styles position by position; extra entries are ignored."""
        current = self.col_styles[row_type]
        self.col_styles[row_type] = [
            merge_styles(old, new) for old, new in zip(current, styles + [{}] * len(current))
        ]
