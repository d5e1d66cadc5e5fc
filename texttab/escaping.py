"""
Escape and unescape passes.

Before a document is split into lines, ``\\|``, ``\\^``, ``\\<`` and ``\\>``
are swapped for placeholder characters from the Unicode private use area,
so they are invisible to the line grammar. After serialization the pipe
and caret placeholders go back to ``|`` and ``^``, while the angle bracket
placeholders become ``&lt;`` and ``&gt;`` so they show as text instead of
markup.
"""

PIPE = "\ue000"
CARET = "\ue001"
LT = "\ue002"
GT = "\ue003"

ESCAPES = (
    ("\\|", PIPE),
    ("\\^", CARET),
    ("\\<", LT),
    ("\\>", GT),
)

UNESCAPES = (
    (PIPE, "|"),
    (CARET, "^"),
    (LT, "&lt;"),
    (GT, "&gt;"),
)


def escape(text: str) -> str:
    """Replace the four escape sequences with placeholders."""
    for seq, placeholder in ESCAPES:
        text = text.replace(seq, placeholder)
    return text


def unescape(text: str) -> str:
    """Restore placeholders: ``|`` and ``^`` literally, ``<`` and ``>`` as entities."""
    for placeholder, repl in UNESCAPES:
        text = text.replace(placeholder, repl)
    return text
