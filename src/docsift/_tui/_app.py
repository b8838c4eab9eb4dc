"""Main TUI application for docsift."""

from __future__ import annotations

from collections.abc import Sequence
from typing import ClassVar

from loguru import logger
from textual.app import App, ComposeResult
from textual.binding import Binding, BindingType
from textual.containers import Container, Horizontal, Vertical, VerticalScroll
from textual.widgets import Header, Input, Static

from docsift._state import Advance, Event, Quit, ResultView, Retreat, SearchSession, TriggerSearch
from docsift._store import Document
from docsift._tui._help import HELP_TEXT
from docsift._tui._render import display_text, render_preview_header, render_results
from docsift._tui._theme import StyleConfig


class DocsiftApp(App):
    """Search box, results list, and a reader pane for the selected match.

    All state lives in a SearchSession; key handlers only translate keys
    into session events and redraw from the returned view.
    """

    TITLE = "docsift"
    CSS_PATH = "app.tcss"

    BINDINGS: ClassVar[list[BindingType]] = [
        Binding("tab", "next_result", "next", priority=True),
        Binding("shift+tab", "prev_result", "prev", priority=True),
        Binding("escape,ctrl+c", "quit_session", "quit", priority=True),
    ]

    def __init__(
        self,
        documents: Sequence[Document],
        styles: StyleConfig | None = None,
        root: str | None = None,
    ) -> None:
        """Initialize the TUI application.

        Args:
            documents: Loaded documents to search.
            styles: Result list styles.
            root: Directory the documents came from, shown as subtitle.
        """
        super().__init__()
        self.session = SearchSession(documents)
        self._styles = styles or StyleConfig()
        if root:
            self.sub_title = root

    @property
    def selected_index(self) -> int:
        """Index of the highlighted result (0 when there are none)."""
        return self.session.state.selected_index

    def compose(self) -> ComposeResult:
        """Compose the UI layout."""
        yield Header()

        with Container(id="search-container"):
            yield Input(placeholder="Type your search term and press Enter...", id="search-input")

        with Horizontal(id="main-container"):
            with VerticalScroll(id="results-pane"):
                yield Static(id="results-list")

            with Vertical(id="preview-column"):
                yield Static(id="preview-header")
                with VerticalScroll(id="preview-pane"):
                    yield Static(id="preview-content")

        yield Static(HELP_TEXT, id="help-hints")

    def on_mount(self) -> None:
        self._show(self.session.view())
        self.query_one("#search-input", Input).focus()

    def on_input_submitted(self, event: Input.Submitted) -> None:
        """Run a search when Enter is pressed."""
        self._dispatch(TriggerSearch(event.value))

    def action_next_result(self) -> None:
        self._dispatch(Advance())

    def action_prev_result(self) -> None:
        self._dispatch(Retreat())

    def action_quit_session(self) -> None:
        self._dispatch(Quit())
        self.exit()

    def _dispatch(self, event: Event) -> None:
        previous = self.session.state
        view = self.session.dispatch(event)
        if self.session.state is previous:
            return
        logger.debug("{} -> {} results, selected {}", event, view.match_count, self.selected_index)
        self._show(view)

    def _show(self, view: ResultView) -> None:
        self.query_one("#results-list", Static).update(render_results(view, self._styles))
        self.query_one("#preview-header", Static).update(render_preview_header(view))
        self.query_one("#preview-content", Static).update(display_text(view.content))
        self.query_one("#preview-pane", VerticalScroll).scroll_home(animate=False)
