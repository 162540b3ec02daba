"""Theme definitions for clipfrag display."""

from dataclasses import dataclass


@dataclass
class Theme:
    """Visual theme configuration.

    Prompts themselves are unstyled so their text stays exact.
    """

    notice: str = "yellow"
    info: str = "dim"
    error: str = "bold red"


DEFAULT_THEME = Theme()
