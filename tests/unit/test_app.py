"""Test the Textual app with the headless pilot."""

import asyncio
from collections.abc import Awaitable, Callable

from textual.widgets import Header, Input

from docsift import Document
from docsift._tui import DocsiftApp

DOCS = [
    Document(path="a/x.md", content="hello world"),
    Document(path="b/y.md", content="goodbye"),
    Document(path="c/z.md", content="hello [bold]markup[/bold]"),
]


def _run(app: DocsiftApp, scenario: Callable[..., Awaitable[None]]) -> None:
    async def runner() -> None:
        async with app.run_test() as pilot:
            await scenario(pilot)

    asyncio.run(runner())


async def _search(pilot, term: str) -> None:
    pilot.app.query_one("#search-input", Input).value = term
    await pilot.press("enter")
    await pilot.pause()


class TestDocsiftApp:
    """Tests for DocsiftApp key handling."""

    def test_search_input_focused_on_start(self):
        """Test typing goes straight into the search box."""
        app = DocsiftApp(DOCS)

        async def scenario(pilot):
            await pilot.press("h", "i")
            search_input = app.query_one("#search-input", Input)
            assert app.focused is search_input
            assert search_input.value == "hi"

        _run(app, scenario)

    def test_enter_runs_search(self):
        """Test Enter searches and selects the first match."""
        app = DocsiftApp(DOCS)

        async def scenario(pilot):
            await _search(pilot, "hello")
            view = app.session.view()
            assert [e.path for e in view.entries] == ["a/x.md", "c/z.md"]
            assert app.selected_index == 0
            assert view.content == "hello world"

        _run(app, scenario)

    def test_tab_and_shift_tab_cycle(self):
        """Test Tab advances and Shift+Tab retreats with wraparound."""
        app = DocsiftApp(DOCS)

        async def scenario(pilot):
            await _search(pilot, "o")
            await pilot.press("tab")
            assert app.selected_index == 1
            await pilot.press("tab", "tab")
            assert app.selected_index == 0
            await pilot.press("shift+tab")
            assert app.selected_index == 2
            assert app.session.view().content == "hello [bold]markup[/bold]"

        _run(app, scenario)

    def test_tab_keeps_focus_in_search_box(self):
        """Test Tab navigates results instead of moving focus."""
        app = DocsiftApp(DOCS)

        async def scenario(pilot):
            await _search(pilot, "o")
            await pilot.press("tab")
            assert app.focused is app.query_one("#search-input", Input)

        _run(app, scenario)

    def test_blank_enter_keeps_results(self):
        """Test Enter on a blank box leaves the previous search alone."""
        app = DocsiftApp(DOCS)

        async def scenario(pilot):
            await _search(pilot, "o")
            await pilot.press("tab")
            before = app.session.state
            await _search(pilot, "   ")
            assert app.session.state is before
            assert app.selected_index == 1

        _run(app, scenario)

    def test_no_matches_then_navigation_is_noop(self):
        """Test Tab does nothing when the last search found nothing."""
        app = DocsiftApp(DOCS)

        async def scenario(pilot):
            await _search(pilot, "zzz")
            await pilot.press("tab", "shift+tab")
            assert app.session.view().match_count == 0
            assert app.selected_index == 0

        _run(app, scenario)

    def test_escape_quits(self):
        """Test Escape ends the session and exits."""
        app = DocsiftApp(DOCS)

        async def scenario(pilot):
            await pilot.press("escape")

        _run(app, scenario)
        assert app.session.finished
        assert app.return_code == 0

    def test_closing_tag_search_term_does_not_crash(self):
        """Test a zero-match term shaped like markup is displayed as text."""
        app = DocsiftApp(DOCS)

        async def scenario(pilot):
            await _search(pilot, "[/x]")
            assert app.session.view().searched
            assert app.session.view().match_count == 0

        _run(app, scenario)

    def test_bracketed_path_is_selectable(self):
        """Test documents with brackets in their path can be shown."""
        docs = [
            Document(path="notes/[/draft].md", content="hello draft"),
            Document(path="[b]plan.md", content="hello plan"),
        ]
        app = DocsiftApp(docs)

        async def scenario(pilot):
            await _search(pilot, "hello")
            await pilot.press("tab")
            assert app.selected_index == 1
            assert app.session.view().content == "hello plan"

        _run(app, scenario)

    def test_root_shown_as_subtitle(self):
        """Test the loaded root appears in the header."""
        app = DocsiftApp(DOCS, root="/notes")

        async def scenario(pilot):
            assert app.query_one(Header) is not None
            assert app.sub_title == "/notes"

        _run(app, scenario)
