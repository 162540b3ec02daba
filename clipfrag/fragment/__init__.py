"""Fragment packing and progress accounting."""

from clipfrag.fragment.builder import build_fragment
from clipfrag.fragment.progress import (
    ProgressSnapshot,
    consumed_before,
    format_grouped,
    percent,
)
from clipfrag.fragment.types import Fragment, OversizePolicy

__all__ = [
    "Fragment",
    "OversizePolicy",
    "ProgressSnapshot",
    "build_fragment",
    "consumed_before",
    "format_grouped",
    "percent",
]
