"""Typed exception hierarchy for clipfrag."""

from __future__ import annotations


class ClipfragError(Exception):
    """Base class for all clipfrag errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class ConfigError(ClipfragError):
    """Raised for configuration issues (missing file, invalid JSON, validation failure)."""


class DecodeError(ClipfragError):
    """Raised when input bytes are valid in none of the supported encodings."""

    def __init__(self, encodings: tuple[str, ...]) -> None:
        self.encodings = encodings
        super().__init__(
            f"Input could not be decoded as any of: {', '.join(encodings)}"
        )


class InputError(ClipfragError):
    """Raised when the document or the interactive terminal cannot be read."""


class ClipboardError(ClipfragError):
    """Raised when the system clipboard rejects a write."""


class FragmentStallError(ClipfragError):
    """Raised when packing cannot advance past an oversized line."""

    def __init__(self, index: int, units: int, max_units: int) -> None:
        self.index = index
        self.units = units
        self.max_units = max_units
        super().__init__(
            f"Line {index + 1} needs {units} units but the budget is {max_units}; "
            "no fragment can be built"
        )
