"""Core errors, encoding helpers and constants."""

from clipfrag.core.encoding import ENCODING, ENCODING_ERRORS, configure_stdio, decode_input
from clipfrag.core.errors import (
    ClipboardError,
    ClipfragError,
    ConfigError,
    DecodeError,
    FragmentStallError,
    InputError,
)

__all__ = [
    "ENCODING",
    "ENCODING_ERRORS",
    "configure_stdio",
    "decode_input",
    # Errors
    "ClipfragError",
    "ConfigError",
    "DecodeError",
    "InputError",
    "ClipboardError",
    "FragmentStallError",
]
