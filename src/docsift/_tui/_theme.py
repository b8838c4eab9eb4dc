"""Colors and styles for the TUI."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from rich.style import Style


class Palette(Enum):
    """256-color palette used for help text and defaults."""

    PINK = "color(212)"
    PURPLE = "color(63)"
    BLACK = "color(0)"
    CYAN = "color(117)"
    COMMENT = "color(244)"
    RED = "color(203)"


@dataclass
class StyleConfig:
    """Styles for the results list.

    Values are anything rich.color.Color.parse accepts ("color(212)",
    "#ff79c6", "magenta").
    """

    selected_foreground: str = Palette.BLACK.value
    selected_background: str = Palette.PURPLE.value
    regular_foreground: str = Palette.PINK.value

    @property
    def selected(self) -> Style:
        return Style(color=self.selected_foreground, bgcolor=self.selected_background)

    @property
    def regular(self) -> Style:
        return Style(color=self.regular_foreground)
