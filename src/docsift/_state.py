"""Search results, selection, and the events that change them."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, replace

from loguru import logger

from docsift._search import search_documents
from docsift._store import Document


@dataclass(frozen=True)
class TriggerSearch:
    term: str


@dataclass(frozen=True)
class Advance:
    pass


@dataclass(frozen=True)
class Retreat:
    pass


@dataclass(frozen=True)
class Quit:
    pass


Event = TriggerSearch | Advance | Retreat | Quit


@dataclass(frozen=True)
class SearchState:
    """
    Result of the most recent search plus the current selection.

    query is the last executed term ("" before any search). When results
    is non-empty, selected_index is in [0, len(results)); otherwise it is 0.
    """

    query: str = ""
    results: tuple[Document, ...] = ()
    selected_index: int = 0

    @property
    def is_empty(self) -> bool:
        return not self.results

    @property
    def selected(self) -> Document | None:
        if not self.results:
            return None
        return self.results[self.selected_index]


@dataclass(frozen=True)
class ResultEntry:
    path: str
    selected: bool


@dataclass(frozen=True)
class ResultView:
    """What the display shows after an event."""

    query: str
    entries: tuple[ResultEntry, ...]
    content: str

    @property
    def match_count(self) -> int:
        return len(self.entries)

    @property
    def has_results(self) -> bool:
        return bool(self.entries)

    @property
    def searched(self) -> bool:
        return bool(self.query)


def trigger_search(state: SearchState, documents: Sequence[Document], term: str) -> SearchState:
    """Run a fresh search, or return state untouched if term is blank."""
    if not term.strip():
        return state
    results = tuple(search_documents(documents, term))
    logger.debug("Search {!r}: {} matches", term, len(results))
    return SearchState(query=term, results=results, selected_index=0)


def advance(state: SearchState) -> SearchState:
    if state.is_empty:
        return state
    return replace(state, selected_index=(state.selected_index + 1) % len(state.results))


def retreat(state: SearchState) -> SearchState:
    if state.is_empty:
        return state
    count = len(state.results)
    return replace(state, selected_index=(state.selected_index - 1 + count) % count)


def apply_event(state: SearchState, event: Event, documents: Sequence[Document]) -> SearchState:
    """Compute the state that follows event."""
    if isinstance(event, TriggerSearch):
        return trigger_search(state, documents, event.term)
    if isinstance(event, Advance):
        return advance(state)
    if isinstance(event, Retreat):
        return retreat(state)
    if isinstance(event, Quit):
        return state
    raise TypeError(f"Unknown event: {event!r}")


def build_view(state: SearchState) -> ResultView:
    """Derive the result list and reader content from state."""
    entries = tuple(
        ResultEntry(path=doc.path, selected=index == state.selected_index)
        for index, doc in enumerate(state.results)
    )
    selected = state.selected
    return ResultView(
        query=state.query,
        entries=entries,
        content=selected.content if selected is not None else "",
    )


class SearchSession:
    """
    Interactive session over a fixed document set.

    Documents are loaded once and never change; each dispatched event
    replaces the current state.
    """

    def __init__(self, documents: Sequence[Document]):
        self.documents = tuple(documents)
        self.state = SearchState()
        self.finished = False

    def dispatch(self, event: Event) -> ResultView:
        """Apply event and return the view to display."""
        self.state = apply_event(self.state, event, self.documents)
        if isinstance(event, Quit):
            self.finished = True
        return self.view()

    def view(self) -> ResultView:
        return build_view(self.state)
