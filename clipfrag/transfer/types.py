"""Transfer state machine types."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Protocol


class Phase(Enum):
    """Transfer session phases."""

    TRANSFERRING = "transferring"  # Delivering fragments
    FINALIZING = "finalizing"  # Offering the footer (named sources only)
    EXITING = "exiting"  # Only prev/quit remain
    TERMINATED = "terminated"


class Decision(Enum):
    """A user answer at a prompt."""

    YES = "yes"
    PREV = "prev"
    QUIT = "quit"


# Accepted spellings, matched case-insensitively after trimming
DECISION_ALIASES: dict[str, Decision] = {
    "y": Decision.YES,
    "yes": Decision.YES,
    "p": Decision.PREV,
    "prev": Decision.PREV,
    "q": Decision.QUIT,
    "quit": Decision.QUIT,
}


@dataclass(frozen=True)
class PhasePrompt:
    """Choices offered in one phase."""

    choices: tuple[Decision, ...]
    default: Decision
    hint: str
    invalid_notice: str


PHASE_PROMPTS: dict[Phase, PhasePrompt] = {
    Phase.TRANSFERRING: PhasePrompt(
        choices=(Decision.YES, Decision.PREV, Decision.QUIT),
        default=Decision.YES,
        hint="Y(es)/P(rev)/Q(uit) [y]: ",
        invalid_notice="Invalid input. Enter one of Y(es)/P(rev)/Q(uit).",
    ),
    Phase.FINALIZING: PhasePrompt(
        choices=(Decision.YES, Decision.PREV, Decision.QUIT),
        default=Decision.YES,
        hint="Y(es)/P(rev)/Q(uit) [y]: ",
        invalid_notice="Invalid input. Enter one of Y(es)/P(rev)/Q(uit).",
    ),
    Phase.EXITING: PhasePrompt(
        choices=(Decision.PREV, Decision.QUIT),
        default=Decision.QUIT,
        hint="P(rev)/Q(uit) [q]: ",
        invalid_notice="Invalid input. Enter one of P(rev)/Q(uit).",
    ),
}


class LineReader(Protocol):
    """Blocking source of user answers.

    `read_line` returns one line without its trailing newline and raises
    EOFError when no more input can arrive.
    """

    def read_line(self) -> str:
        ...


@dataclass(frozen=True)
class TransferResult:
    """How a transfer session ended."""

    quit_phase: Phase
    """Phase in which the user quit."""

    cursor: int
    """Index of the first line not delivered."""

    line_count: int

    deliveries: int
    """Clipboard writes made, replays and header/footer included."""

    @property
    def completed(self) -> bool:
        """True when every line was delivered before quitting."""
        return self.cursor >= self.line_count

    @property
    def exit_code(self) -> int:
        """Quitting is a normal exit from every phase."""
        return 0
