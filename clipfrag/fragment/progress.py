"""Progress accounting and prompt number formatting."""

from __future__ import annotations

from dataclasses import dataclass

from clipfrag.document.state import DocumentState
from clipfrag.fragment.types import Fragment


def consumed_before(state: DocumentState, cursor: int) -> int:
    """Units in the lines before `cursor`."""
    return sum(state.line_units[:cursor])


def percent(part: int, whole: int) -> float:
    """Percentage of `part` in `whole`; 0.0 for an empty whole."""
    if whole == 0:
        return 0.0
    return 100.0 * part / whole


def format_grouped(n: int) -> str:
    """Render a non-negative integer with "_" between groups of three digits.

    Examples:
        >>> format_grouped(10240)
        '10_240'
        >>> format_grouped(999)
        '999'
    """
    return f"{n:_d}"


@dataclass(frozen=True)
class ProgressSnapshot:
    """Numbers shown in the transfer prompt for one pending fragment."""

    fragment_units: int
    fragment_percent: float
    cumulative_units: int
    total_units: int
    cumulative_percent: float
    unit_label: str

    @classmethod
    def for_fragment(cls, state: DocumentState, fragment: Fragment) -> ProgressSnapshot:
        """Progress as it will stand once `fragment` is accepted."""
        cumulative = consumed_before(state, fragment.start) + fragment.units
        return cls(
            fragment_units=fragment.units,
            fragment_percent=percent(fragment.units, state.total_units),
            cumulative_units=cumulative,
            total_units=state.total_units,
            cumulative_percent=percent(cumulative, state.total_units),
            unit_label=state.unit_kind.label,
        )

    def describe(self) -> str:
        """Progress part of the prompt, e.g. '+3 [chars] (50.0 %), 3 / 6 (50.0 %)'."""
        return (
            f"+{format_grouped(self.fragment_units)} [{self.unit_label}] "
            f"({self.fragment_percent:.1f} %), "
            f"{format_grouped(self.cumulative_units)} / {format_grouped(self.total_units)} "
            f"({self.cumulative_percent:.1f} %)"
        )
