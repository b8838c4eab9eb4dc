"""Error types raised by docsift."""

from __future__ import annotations

from pathlib import Path


class DocsiftError(Exception):
    """Base class for all docsift errors."""


class LoadError(DocsiftError):
    """The document tree could not be loaded.

    Raised when the root is missing, a directory cannot be listed, or a
    matching file cannot be read. Partial results are never returned.
    """

    def __init__(self, message: str, path: str | Path | None = None):
        super().__init__(message)
        self.path = str(path) if path is not None else None


class ConfigError(DocsiftError):
    """The configuration file is unreadable or invalid."""
