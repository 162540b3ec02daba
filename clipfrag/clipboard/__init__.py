"""Clipboard sinks for delivered fragments."""

from clipfrag.clipboard.system import SystemClipboard
from clipfrag.clipboard.types import ClipboardSink

__all__ = [
    "ClipboardSink",
    "SystemClipboard",
]
