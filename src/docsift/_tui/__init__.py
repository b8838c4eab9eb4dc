"""Docsift TUI - search box, result list and reader pane.

This module provides a Textual-based TUI for:
- Running literal substring searches over loaded documents
- Cycling through matches with Tab / Shift+Tab
- Reading the selected document in place
"""

from docsift._tui._app import DocsiftApp
from docsift._tui._theme import StyleConfig

__all__ = ["DocsiftApp", "StyleConfig"]
