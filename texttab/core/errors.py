"""
Texttab exceptions.

These never leave a compile call. The leaf helpers raise them and the
compiler catches them where the input degrades: an empty style map for a
bad payload, the plain number for a bad format string.
"""

from typing import Any, Dict, Optional


class TexttabError(Exception):
    """Base exception for texttab errors"""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class LiteralSyntaxError(TexttabError):
    """Raised when a literal or brace-object payload cannot be read"""

    def __init__(self, text: str, pos: int, reason: str):
        super().__init__(
            message=f"Cannot read literal at {pos}: {reason}",
            details={"text": text, "pos": pos, "reason": reason},
        )
        self.text = text
        self.pos = pos


class NumberFormatError(TexttabError):
    """Raised when a printf-style format string does not fit the value"""

    def __init__(self, fmt: str, value: Any, reason: str):
        super().__init__(
            message=f"Cannot format {value!r} with {fmt!r}: {reason}",
            details={"format": fmt, "value": value, "reason": reason},
        )
        self.fmt = fmt
        self.value = value
