"""
Row interpreter.

Each trimmed source line is classified by the first matching rule below
and handed to its handler, which updates the compiler state. The rule
order matters: the prefixes ``th-^``, ``th-`` and ``th`` overlap, as do
``^^`` and ``^name``.

    ""                      blank, ignored
    | ...                   comment
    ^^ {...}                implementation options
    table|tr|th|td {...}    element style
    ^name {...}             reference style
    th-^ | td-^ | t*-^      reference column style
    th-x | td-x | t*-x      named column style
    th ...                  th data row
    td ...                  td data row

Lines matching no rule are dropped.
"""

import re
from enum import Enum, auto
from typing import Callable, Optional

from .cells import compile_data_row
from .columns import named_col_style, ref_col_style
from .core.errors import LiteralSyntaxError
from .core.logging import get_context_logger
from .literal import read_map
from .models import CompilerState, RowType

logger = get_context_logger(__name__)


class RowKind(Enum):
    """Source line kinds, in dispatch order."""

    BLANK = auto()
    COMMENT = auto()
    OPTIONS = auto()
    ELEMENT_STYLE = auto()
    REFERENCE_STYLE = auto()
    REF_COLUMN_STYLE = auto()
    NAMED_COLUMN_STYLE = auto()
    TH_ROW = auto()
    TD_ROW = auto()
    UNKNOWN = auto()


# Order is significant, first match wins
ROW_RULES: list[tuple[RowKind, re.Pattern]] = [
    (RowKind.BLANK, re.compile(r"$")),
    (RowKind.COMMENT, re.compile(r"\|")),
    (RowKind.OPTIONS, re.compile(r"\^\^\s*(?:(?P<payload>\{.*\})$)?")),
    (RowKind.ELEMENT_STYLE, re.compile(r"(?P<elem>table|tr|th|td)\s+(?P<payload>\{.*\})$")),
    (RowKind.REFERENCE_STYLE, re.compile(r"\^(?P<ref>[^\^\s]+)\s+(?P<payload>\{.*\})$")),
    (RowKind.REF_COLUMN_STYLE, re.compile(r"(?:th|td|t\*)-\^")),
    (RowKind.NAMED_COLUMN_STYLE, re.compile(r"(?:th|td|t\*)-")),
    (RowKind.TH_ROW, re.compile(r"th")),
    (RowKind.TD_ROW, re.compile(r"td")),
]


def classify(row: str) -> tuple[RowKind, Optional[re.Match]]:
    """Return the kind of a trimmed line and the rule's match object."""
    for kind, pattern in ROW_RULES:
        match = pattern.match(row)
        if match:
            return kind, match
    return RowKind.UNKNOWN, None


def read_payload(payload: Optional[str], row: str) -> dict:
    """Read a brace payload; anything unreadable gives an empty map."""
    try:
        return read_map(payload)
    except LiteralSyntaxError as e:
        logger.debug("Unreadable style payload", extra_data={"row": row, "error": e.message})
        return {}


def _options(state: CompilerState, row: str, match: re.Match) -> None:
    options = read_payload(match.group("payload"), row)
    state.options.update({key.lower(): value for key, value in options.items()})


def _element_style(state: CompilerState, row: str, match: re.Match) -> None:
    state.merge_elem_style(match.group("elem"), read_payload(match.group("payload"), row))


def _reference_style(state: CompilerState, row: str, match: re.Match) -> None:
    state.merge_ref_style(match.group("ref"), read_payload(match.group("payload"), row))


def _ref_column_style(state: CompilerState, row: str, match: re.Match) -> None:
    ref_col_style(state, row)


def _named_column_style(state: CompilerState, row: str, match: re.Match) -> None:
    named_col_style(state, row)


def _th_row(state: CompilerState, row: str, match: re.Match) -> None:
    compile_data_row(state, row, RowType.TH.value)


def _td_row(state: CompilerState, row: str, match: re.Match) -> None:
    compile_data_row(state, row, RowType.TD.value)


def _ignore(state: CompilerState, row: str, match: Optional[re.Match]) -> None:
    pass


def _unknown(state: CompilerState, row: str, match: Optional[re.Match]) -> None:
    logger.debug("Dropped unrecognized row", extra_data={"row": row})


HANDLERS: dict[RowKind, Callable[[CompilerState, str, Optional[re.Match]], None]] = {
    RowKind.BLANK: _ignore,
    RowKind.COMMENT: _ignore,
    RowKind.OPTIONS: _options,
    RowKind.ELEMENT_STYLE: _element_style,
    RowKind.REFERENCE_STYLE: _reference_style,
    RowKind.REF_COLUMN_STYLE: _ref_column_style,
    RowKind.NAMED_COLUMN_STYLE: _named_column_style,
    RowKind.TH_ROW: _th_row,
    RowKind.TD_ROW: _td_row,
    RowKind.UNKNOWN: _unknown,
}


def interpret_row(state: CompilerState, row: str) -> CompilerState:
    """Apply one trimmed source line to the state."""
    kind, match = classify(row)
    HANDLERS[kind](state, row, match)
    return state
