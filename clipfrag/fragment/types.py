"""Fragment types."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class OversizePolicy(Enum):
    """What to do when the first candidate line alone exceeds the budget."""

    FORCE = "force"  # Deliver that line by itself, over budget
    STALL = "stall"  # Return an empty fragment; callers must treat it as fatal


@dataclass(frozen=True)
class Fragment:
    """A run of whole lines `[start, next_cursor)` and its total size."""

    start: int
    text: str
    units: int
    next_cursor: int

    @property
    def line_count(self) -> int:
        return self.next_cursor - self.start

    @property
    def is_stalled(self) -> bool:
        """True when no line could be taken."""
        return self.next_cursor == self.start

    def as_tuple(self) -> tuple[str, int, int]:
        """(text, units, next_cursor)."""
        return self.text, self.units, self.next_cursor
