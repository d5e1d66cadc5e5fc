"""Settings, exceptions and logging shared by the texttab modules."""

from .config import Settings, get_settings
from .errors import LiteralSyntaxError, NumberFormatError, TexttabError
from .logging import get_context_logger, get_logger, setup_logging

__all__ = [
    "Settings",
    "get_settings",
    "TexttabError",
    "LiteralSyntaxError",
    "NumberFormatError",
    "setup_logging",
    "get_logger",
    "get_context_logger",
]
