"""Document model: line splitting, unit measurement and transfer state."""

from clipfrag.document.meter import measure, measure_lines
from clipfrag.document.splitter import split_lines
from clipfrag.document.state import DocumentState
from clipfrag.document.types import Line, UnitKind

__all__ = [
    "DocumentState",
    "Line",
    "UnitKind",
    "measure",
    "measure_lines",
    "split_lines",
]
