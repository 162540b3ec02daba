"""clipfrag display: stderr console, prompt printer and theme."""

from clipfrag.display.console import get_console, set_console
from clipfrag.display.printer import PromptPrinter
from clipfrag.display.theme import DEFAULT_THEME, Theme

__all__ = [
    "get_console",
    "set_console",
    "PromptPrinter",
    "DEFAULT_THEME",
    "Theme",
]
