"""Document state owned by the transfer session."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from clipfrag.document.meter import measure_lines
from clipfrag.document.splitter import split_lines
from clipfrag.document.types import Line, UnitKind

logger = logging.getLogger(__name__)


@dataclass
class DocumentState:
    """Lines of one document plus the transfer cursor.

    `lines`, `line_units`, `total_units`, `max_units`, `unit_kind` and
    `source_label` are fixed once built. Only the transfer session moves
    `cursor` and replaces `last_delivered`.
    """

    lines: tuple[Line, ...]
    line_units: tuple[int, ...]
    max_units: int
    unit_kind: UnitKind
    source_label: str | None = None
    total_units: int = field(init=False)
    cursor: int = 0
    last_delivered: str = ""

    def __post_init__(self) -> None:
        if len(self.line_units) != len(self.lines):
            raise ValueError(
                f"line_units has {len(self.line_units)} entries for {len(self.lines)} lines"
            )
        if self.max_units <= 0:
            raise ValueError(f"max_units must be positive, got {self.max_units}")
        if not 0 <= self.cursor <= len(self.lines):
            raise ValueError(f"cursor {self.cursor} outside 0..{len(self.lines)}")
        self.total_units = sum(self.line_units)

    @classmethod
    def from_text(
        cls,
        text: str,
        unit_kind: UnitKind,
        max_units: int,
        source_label: str | None = None,
    ) -> DocumentState:
        """Split and measure decoded text."""
        lines = split_lines(text)
        state = cls(
            lines=lines,
            line_units=measure_lines(lines, unit_kind),
            max_units=max_units,
            unit_kind=unit_kind,
            source_label=source_label,
        )
        logger.debug(
            "Document %s: %d lines, %d %s, budget %d",
            source_label or "<stdin>",
            len(lines),
            state.total_units,
            unit_kind.label,
            max_units,
        )
        return state

    @property
    def line_count(self) -> int:
        return len(self.lines)

    @property
    def is_exhausted(self) -> bool:
        """True once every line has been delivered."""
        return self.cursor >= len(self.lines)

    @property
    def has_source(self) -> bool:
        """True when the document came from a named source such as a file."""
        return self.source_label is not None
