"""Interactive transfer of fragments to the clipboard."""

from clipfrag.transfer.decisions import parse_decision
from clipfrag.transfer.session import TRANSITIONS, TransferSession
from clipfrag.transfer.types import (
    PHASE_PROMPTS,
    Decision,
    LineReader,
    Phase,
    PhasePrompt,
    TransferResult,
)

__all__ = [
    "Decision",
    "LineReader",
    "PHASE_PROMPTS",
    "Phase",
    "PhasePrompt",
    "TRANSITIONS",
    "TransferResult",
    "TransferSession",
    "parse_decision",
]
