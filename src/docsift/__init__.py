"""docsift - load a directory of text documents and search them in a TUI."""

from docsift._config import DocsiftConfig
from docsift._errors import ConfigError, DocsiftError, LoadError
from docsift._search import search_documents
from docsift._state import (
    Advance,
    Quit,
    ResultEntry,
    ResultView,
    Retreat,
    SearchSession,
    SearchState,
    TriggerSearch,
    advance,
    apply_event,
    build_view,
    retreat,
    trigger_search,
)
from docsift._store import Document, load_documents

__all__ = [
    "Advance",
    "ConfigError",
    "DocsiftConfig",
    "DocsiftError",
    "Document",
    "LoadError",
    "Quit",
    "ResultEntry",
    "ResultView",
    "Retreat",
    "SearchSession",
    "SearchState",
    "TriggerSearch",
    "advance",
    "apply_event",
    "build_view",
    "load_documents",
    "retreat",
    "search_documents",
    "trigger_search",
]
