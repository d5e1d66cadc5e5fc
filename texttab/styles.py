"""
Style maps, reference tags and the style-map resolver.

A style map is a plain dict of style key to value. Three keys are
reserved: ``colspan`` and ``rowspan`` become element attributes, and
``format`` is read by the cell compiler and never reaches the output.
"""

import re
from typing import Mapping, Optional, Union

from .core.logging import get_context_logger

logger = get_context_logger(__name__)

StyleValue = Union[str, int, float]
StyleMap = dict[str, StyleValue]

SPAN_KEYS = ("colspan", "rowspan")
FORMAT_KEY = "format"

# ^name, where name runs up to the next caret or whitespace
REF_TAG_RE = re.compile(r"\^([^\^\s]+)")


def merge_styles(*maps: Optional[Mapping[str, StyleValue]]) -> StyleMap:
    """Merge style maps left to right; later keys win. None entries are skipped."""
    merged: StyleMap = {}
    for style in maps:
        if style:
            merged.update(style)
    return merged


def ref_tags(text: str) -> list[str]:
    """Return the reference names in a ``^a^b`` tag string, in order."""
    return REF_TAG_RE.findall(text)


def resolve_refs(ref_styles: Mapping[str, StyleMap], text: str) -> StyleMap:
    """
    Merge the reference styles named by the tags in text.

    Tags are applied left to right so the last tag wins on a conflict.
    Unknown names contribute nothing.
    """
    found = []
    for name in ref_tags(text):
        style = ref_styles.get(name)
        if style is None:
            logger.debug("Unknown reference style", extra_data={"ref": name})
            continue
        found.append(style)
    return merge_styles(*found)


def _css_value(value: StyleValue) -> str:
    return str(value)


def resolve_style(styles: Mapping[str, StyleValue]) -> tuple[dict[str, StyleValue], str]:
    """
    Split a merged style map into element attributes and a CSS string.

    Args:
        styles: Merged style map

    Returns:
        (attributes, css) where attributes holds colspan/rowspan when set
        and css is the remaining ``key:value`` pairs joined by ``"; "``.
        The format key is dropped.
    """
    attrs: dict[str, StyleValue] = {}
    for key in SPAN_KEYS:
        if styles.get(key) is not None:
            attrs[key] = styles[key]

    css = "; ".join(
        f"{key}:{_css_value(value)}"
        for key, value in styles.items()
        if key not in SPAN_KEYS and key != FORMAT_KEY
    )
    return attrs, css


def style_to_attrs(styles: Mapping[str, StyleValue]) -> dict[str, StyleValue]:
    """Element attributes for a style map, with the CSS under ``style`` when not empty."""
    attrs, css = resolve_style(styles)
    if css:
        attrs["style"] = css
    return attrs
