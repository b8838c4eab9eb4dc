"""Turn a ResultView into renderables for the two panes."""

from rich.text import Text

from docsift._state import ResultView
from docsift._tui._theme import StyleConfig

NO_RESULTS = "No results found."
NOT_SEARCHED = "Type a term and press Enter to search."


def render_results(view: ResultView, styles: StyleConfig) -> Text:
    """Render matched paths, one per line, highlighting the selection."""
    if not view.has_results:
        message = NO_RESULTS if view.searched else NOT_SEARCHED
        return Text(message, style="italic")

    text = Text()
    for entry in view.entries:
        style = styles.selected if entry.selected else styles.regular
        text.append(entry.path, style=style)
        text.append("\n")
    text.rstrip()
    return text


def render_preview_header(view: ResultView) -> Text:
    """Describe the selected document, e.g. "2/5  notes/todo.md".

    Paths and queries are plain text; brackets in them are not markup.
    """
    for position, entry in enumerate(view.entries, start=1):
        if entry.selected:
            return Text(f"{position}/{view.match_count}  {entry.path}")
    if view.searched:
        return Text(f"0 matches for {view.query!r}")
    return Text()


def display_text(content: str) -> Text:
    """Build reader-pane text without markup interpretation.

    Undecodable bytes kept as surrogates are shown as replacement chars.
    """
    printable = content.encode("utf-8", "surrogateescape").decode("utf-8", "replace")
    return Text(printable)
