"""Shared Rich Console instance for clipfrag.

Everything interactive goes to stderr; stdout is never written.
"""

from __future__ import annotations

from rich.console import Console

_console: Console | None = None


def get_console() -> Console:
    """Get the shared stderr Console instance."""
    global _console
    if _console is None:
        _console = Console(
            stderr=True,
            highlight=False,
            markup=True,
        )
    return _console


def set_console(console: Console) -> None:
    """Set a custom Console instance.

    Useful for testing or custom configurations.
    """
    global _console
    _console = console
