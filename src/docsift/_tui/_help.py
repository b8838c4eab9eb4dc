"""Help text for the TUI."""

from docsift._tui._theme import Palette

HELP_TEXT = (
    f"[{Palette.CYAN.value}]enter[/] [{Palette.COMMENT.value}]run search[/]  "
    f"[{Palette.CYAN.value}]tab[/] [{Palette.COMMENT.value}]next[/]  "
    f"[{Palette.CYAN.value}]shift+tab[/] [{Palette.COMMENT.value}]prev[/]  "
    f"[{Palette.RED.value}]esc[/] [{Palette.COMMENT.value}]quit[/]"
)
