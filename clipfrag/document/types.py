"""Document types: unit kinds and lines."""

from enum import Enum

# A line keeps its terminator ("\n", "\r\n", or none for a final unterminated line)
Line = str


class UnitKind(Enum):
    """How line sizes and the fragment budget are measured."""

    CHARS = "chars"  # Unicode scalar values
    BYTES = "bytes"  # UTF-16 code units * 2, the clipboard's wide-char size

    @property
    def label(self) -> str:
        """Short name shown in progress prompts."""
        return self.value
