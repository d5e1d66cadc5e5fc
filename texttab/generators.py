"""
Texttab source generators.

Helpers that turn in-memory data into texttab source text, ready to be
extended with style lines and passed to compile().
"""

import math
from enum import Enum
from typing import Any, Callable, Hashable, Iterable, Mapping, Optional, Sequence, Union

from .formatting import format_or_str

SortSpec = Union[bool, Callable[[Any], Any], None]


def _field(value: Any, fmt: str) -> str:
    if value is None:
        return ""
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, float):
        return format_or_str(fmt, value)
    return str(value)


def _entry(values: Any, fmt: str) -> str:
    if isinstance(values, (str, bytes)) or not isinstance(values, Iterable):
        values = [values]
    return " | ".join(_field(value, fmt) for value in values)


def tt_values(values: Sequence[Any], cols: int = 1, fmt: str = "%.2f") -> str:
    """
    Lay a list of value groups out as td rows.

    Groups fill the first column top to bottom, then the next column,
    so ``cols=2`` turns six groups into three rows of two groups each.

    Args:
        values: Sequence of value groups (tuples), or single values
        cols: Number of groups per row
        fmt: printf-style format for floats

    Returns:
        Texttab source with one ``td`` line per row
    """
    if not values:
        return ""

    cols = max(int(cols), 1)
    row_count = math.ceil(len(values) / cols)
    rows: list[list[str]] = [["td"] for _ in range(row_count)]

    for index, group in enumerate(values):
        rows[index % row_count].append(_entry(group, fmt))

    return "\n".join(" | ".join(row) for row in rows)


def _distinct(keys: Iterable[Hashable]) -> list:
    return list(dict.fromkeys(keys))


def _select(keys: list, wanted: Optional[Iterable[Hashable]], sort: SortSpec) -> list:
    if sort is True:
        keys = sorted(keys)
    elif callable(sort):
        keys = sorted(keys, key=sort)
    if wanted is not None:
        wanted = set(wanted)
        keys = [key for key in keys if key in wanted]
    return keys


def tt_table(
    data: Mapping[tuple, Any],
    r_keys: Optional[Iterable[Hashable]] = None,
    r_sort: SortSpec = None,
    r_fmtfn: Optional[Callable[[Any], str]] = None,
    c_keys: Optional[Iterable[Hashable]] = None,
    c_sort: SortSpec = None,
    c_fmtfn: Optional[Callable[[Any], str]] = None,
    fmt: str = "%.2f",
) -> str:
    """
    Cross-tabulate a ``{(row_key, col_key): value}`` mapping.

    The first line is a ``th`` heading row with an empty corner cell and
    the column labels; then one ``td`` row per row key with its label and
    the cell values, ``-`` where a combination is missing.

    Args:
        data: Mapping of (row key, column key) to cell value
        r_keys: Row keys to include (default all, in data order)
        r_sort: True to sort row keys, or a sort key function
        r_fmtfn: Row label formatter
        c_keys: Column keys to include
        c_sort: True to sort column keys, or a sort key function
        c_fmtfn: Column label formatter
        fmt: printf-style format for float values and labels

    Returns:
        Texttab source text
    """
    def label(value: Any) -> str:
        return _field(value, fmt)

    r_fmtfn = r_fmtfn or label
    c_fmtfn = c_fmtfn or label

    row_keys = _select(_distinct(key[0] for key in data), r_keys, r_sort)
    col_keys = _select(_distinct(key[1] for key in data), c_keys, c_sort)

    lines = [" | ".join(["th", ""] + [c_fmtfn(col) for col in col_keys])]
    for row in row_keys:
        cells = [label(data.get((row, col), "-")) for col in col_keys]
        lines.append(" | ".join(["td", r_fmtfn(row)] + cells))
    return "\n".join(lines)
