"""
Side-by-side layout of several texttab tables.

The layout source holds one or more ``<texttab!> ... </texttab!>`` blocks
and, outside them, an optional options line::

    {width "40px" margin "10px"}
    <texttab!>
    td | a | b
    </texttab!>
    <texttab!>
    td | c
    </texttab!>

Each block is compiled on its own and the tables are placed in a single
row of a borderless outer table, separated by spacer cells ``width``
wide. ``margin`` is applied to the outer table.
"""

import re
from typing import Any, Mapping, Optional

from .compiler import ElementStyles, compile
from .core.config import Settings, get_settings
from .core.errors import LiteralSyntaxError
from .core.logging import get_context_logger
from .literal import read_map
from .markup import render_element

logger = get_context_logger(__name__)

BLOCK_RE = re.compile(r"<texttab!>(.*?)</texttab!>", re.DOTALL)

CELL_STYLE = "border:none; padding:0px; vertical-align:top"


def layout_options(text: str) -> dict[str, Any]:
    """Read the options line found outside the texttab blocks, if any."""
    outside = BLOCK_RE.sub("\n", text)
    for line in outside.splitlines():
        line = line.strip()
        if not line:
            continue
        if line.startswith("{"):
            try:
                return {key.lower(): value for key, value in read_map(line).items()}
            except LiteralSyntaxError as e:
                logger.debug("Unreadable layout options", extra_data={"line": line, "error": e.message})
                return {}
        break
    return {}


def layout_html(
    text: str,
    styles: Optional[ElementStyles] = None,
    settings: Optional[Settings] = None,
) -> str:
    """
    Compile every texttab block in text and lay the tables out in one row.

    Args:
        text: Layout source with ``<texttab!>`` blocks
        styles: Base element styles passed to every table
        settings: Settings to use instead of the environment defaults

    Returns:
        Outer table markup
    """
    settings = settings or get_settings()
    options: Mapping[str, Any] = layout_options(text)
    width = options.get("width", settings.LAYOUT_WIDTH)
    margin = options.get("margin", settings.LAYOUT_MARGIN)

    children: list = []
    for block in BLOCK_RE.findall(text):
        if children:
            children.append(("td", {"style": f"border:none; width:{width}"}, []))
        children.append(("td", {"style": CELL_STYLE}, [compile(block, styles, settings)]))

    outer = ("table", {"style": f"border:none; border-collapse:collapse; margin:{margin}"}, [("tr", {}, children)])
    return render_element(outer)
