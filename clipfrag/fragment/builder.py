"""Greedy fragment packing.

Lines are atomic: a fragment is always the exact concatenation of the lines
in `[start, next_cursor)`. Packing walks forward from `start`, taking each
line while the running total stays within `max_units`, and stops at the
first line that would overflow.

When the very first candidate is itself larger than the budget, the result
depends on OversizePolicy:

- FORCE (default): that line is delivered alone and the fragment is over
  budget. Packing always makes progress.
- STALL: the fragment is empty and `next_cursor == start`. The transfer
  session treats this as fatal (FragmentStallError).

The policy is selected by `oversize_policy` in the config file.
"""

import logging

from clipfrag.document.state import DocumentState
from clipfrag.fragment.types import Fragment, OversizePolicy

logger = logging.getLogger(__name__)


def build_fragment(
    state: DocumentState,
    start: int,
    policy: OversizePolicy = OversizePolicy.FORCE,
) -> Fragment:
    """Select the longest run of whole lines from `start` that fits the budget.

    Pure: reads `state` and never mutates it, so repeated calls with the
    same arguments return equal fragments.

    Args:
        state: Document to pack.
        start: Index of the first candidate line (usually `state.cursor`).
        policy: Handling of a first line that alone exceeds the budget.

    Returns:
        The packed Fragment. At the end of the document it is empty.
    """
    if not 0 <= start <= state.line_count:
        raise IndexError(f"start {start} outside 0..{state.line_count}")

    parts: list[str] = []
    used = 0
    idx = start

    while idx < state.line_count:
        units = state.line_units[idx]
        if used + units > state.max_units:
            if idx == start and policy is OversizePolicy.FORCE:
                logger.debug(
                    "Line %d (%d units) exceeds budget %d; sending it alone",
                    idx, units, state.max_units,
                )
                parts.append(state.lines[idx])
                used = units
                idx += 1
            break
        parts.append(state.lines[idx])
        used += units
        idx += 1

    return Fragment(start=start, text="".join(parts), units=used, next_cursor=idx)
