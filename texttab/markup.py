"""
HTML serialization for (tag, attributes, children) elements.

Attribute values are HTML-escaped and attributes are written in name
order so output is deterministic. Text children are written as-is:
texttab cell content may carry inline HTML on purpose, and user-escaped
angle brackets already arrive as entities.
"""

from html import escape
from typing import Any, Iterable, Mapping, Union

Element = tuple  # (tag, attributes, children)
Child = Union[str, Element, None]


def render_attributes(attributes: Mapping[str, Any]) -> str:
    """Render an attribute map as ` name="value"` pairs, sorted by name."""
    if not attributes:
        return ""
    return "".join(
        f' {name}="{escape(str(value), quote=True)}"'
        for name, value in sorted(attributes.items())
        if value is not None
    )


def render_children(children: Iterable[Child]) -> str:
    parts = []
    for child in children:
        if child is None:
            continue
        if isinstance(child, tuple):
            parts.append(render_element(child))
        else:
            parts.append(str(child))
    return "".join(parts)


def render_element(element: Element) -> str:
    """
    Render one element and its children.

    Args:
        element: (tag, attributes, children) where children are strings
            or nested elements

    Returns:
        The element markup, e.g. ``<td style="x:1">a</td>``
    """
    tag, attributes, children = element
    tag = getattr(tag, "value", tag)
    return f"<{tag}{render_attributes(attributes)}>{render_children(children)}</{tag}>"
