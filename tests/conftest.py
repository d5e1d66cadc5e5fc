"""
Shared pytest fixtures and utilities for the texttab tests.

This module provides:
- A settings fixture independent of TEXTTAB_* environment variables
- A factory compiling texttab source into the table model
- Helpers to pull cell text and styles out of a compiled table
"""

import logging
from typing import Any, Callable, Optional

import pytest

from texttab.compiler import compile_table
from texttab.core.config import Settings
from texttab.models import CompiledTable, CompilerState


@pytest.fixture
def settings(monkeypatch) -> Settings:
    """Default settings with no environment overrides."""
    for name in ("DEFAULT_FORMAT", "NAN_TEXT", "LAYOUT_WIDTH", "LAYOUT_MARGIN", "LOG_LEVEL", "LOG_FORMAT", "LOG_FILE"):
        monkeypatch.delenv(f"TEXTTAB_{name}", raising=False)
    return Settings(_env_file=None)


@pytest.fixture
def compile_tt(settings) -> Callable[..., CompiledTable]:
    """Factory compiling texttab source with the default settings."""
    def _compile(text: str, styles: Optional[dict[str, Any]] = None) -> CompiledTable:
        return compile_table(text, styles, settings)
    return _compile


@pytest.fixture
def make_state(settings) -> Callable[..., CompilerState]:
    """Factory for a fresh interpreter state with a given column count."""
    def _make(col_count: int, styles: Optional[dict[str, Any]] = None) -> CompilerState:
        return CompilerState.new(col_count, styles, settings)
    return _make


@pytest.fixture
def cell_texts() -> Callable[[CompiledTable], list[list[str]]]:
    """Cell content per row."""
    def _texts(table: CompiledTable) -> list[list[str]]:
        return [[cell.content for cell in row.cells] for row in table.rows]
    return _texts


@pytest.fixture
def cell_styles() -> Callable[[CompiledTable], list[list[Optional[str]]]]:
    """Cell style attribute per row, None where there is none."""
    def _styles(table: CompiledTable) -> list[list[Optional[str]]]:
        return [[cell.attributes.get("style") for cell in row.cells] for row in table.rows]
    return _styles


@pytest.fixture
def restore_root_logger():
    """Put the root logger back the way it was after a test calls setup_logging()."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield root
    for handler in list(root.handlers):
        if handler not in handlers:
            root.removeHandler(handler)
            handler.close()
    for handler in handlers:
        if handler not in root.handlers:
            root.addHandler(handler)
    root.setLevel(level)
