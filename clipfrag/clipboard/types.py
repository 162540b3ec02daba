"""Clipboard sink protocol."""

from typing import Protocol


class ClipboardSink(Protocol):
    """Destination for delivered fragments.

    `write` replaces the whole clipboard content; `clear` is `write("")`.
    Both raise ClipboardError on failure and never retry.
    """

    def write(self, text: str) -> None:
        ...

    def clear(self) -> None:
        ...
