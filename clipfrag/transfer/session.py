"""Interactive fragment transfer.

TransferSession drives one document through its phases:

    TRANSFERRING -> FINALIZING -> EXITING -> TERMINATED

FINALIZING only exists for documents with a source name; without one the
session goes from TRANSFERRING straight to EXITING. QUIT from any phase
leads to TERMINATED.

Every prompt reads one Decision. What it does is looked up in TRANSITIONS,
keyed by (phase, decision). PREV always re-sends `last_delivered` unchanged
and keeps the phase. QUIT clears the clipboard and ends the session; the
caller owns process exit.

The clipboard always holds `state.last_delivered`, or is empty after quit.
`last_delivered` is only replaced after a successful write, so a failed
write (ClipboardError) leaves both untouched and aborts the run.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from clipfrag.clipboard.types import ClipboardSink
from clipfrag.config.schema import MessagesConfig
from clipfrag.core.errors import FragmentStallError
from clipfrag.display.printer import PromptPrinter
from clipfrag.document.state import DocumentState
from clipfrag.fragment.builder import build_fragment
from clipfrag.fragment.progress import ProgressSnapshot
from clipfrag.fragment.types import Fragment, OversizePolicy
from clipfrag.transfer.decisions import parse_decision
from clipfrag.transfer.types import (
    PHASE_PROMPTS,
    Decision,
    LineReader,
    Phase,
    TransferResult,
)

logger = logging.getLogger(__name__)

FOOTER_PROMPT_PREFIX = "+footer prompt: "


class TransferSession:
    """Owns a DocumentState and moves it through the transfer phases."""

    def __init__(
        self,
        state: DocumentState,
        sink: ClipboardSink,
        reader: LineReader,
        printer: PromptPrinter,
        messages: MessagesConfig | None = None,
        policy: OversizePolicy = OversizePolicy.FORCE,
    ) -> None:
        """Initialize a session.

        Args:
            state: Document to transfer. Mutated in place (cursor, last_delivered).
            sink: Clipboard that receives fragments.
            reader: Source of user answers.
            printer: Prompt output (stderr).
            messages: Header/footer text. Defaults to MessagesConfig().
            policy: Oversized-line handling for the fragment builder.
        """
        self.state = state
        self.sink = sink
        self.reader = reader
        self.printer = printer
        self.messages = messages or MessagesConfig()
        self.policy = policy
        self.phase = Phase.TRANSFERRING
        self._pending: Fragment | None = None
        self._deliveries = 0
        self._quit_phase: Phase | None = None

    def run(self) -> TransferResult:
        """Run until the user quits.

        Returns:
            TransferResult describing where the session stopped.

        Raises:
            ClipboardError: If a clipboard write fails.
            FragmentStallError: Under the STALL policy, when a line exceeds the budget.
        """
        self._start()
        while self.phase is not Phase.TERMINATED:
            self.step()

        assert self._quit_phase is not None
        return TransferResult(
            quit_phase=self._quit_phase,
            cursor=self.state.cursor,
            line_count=self.state.line_count,
            deliveries=self._deliveries,
        )

    def _start(self) -> None:
        """Deliver the header (named sources only) and pick the first phase."""
        source = self.state.source_label
        if source is not None and self.messages.send_header:
            self._deliver(self.messages.header_for(source))
        if self.state.is_exhausted:
            self._enter(self._phase_after_transfer())

    def step(self) -> Phase:
        """Show one prompt, read an answer, and apply its transition."""
        decision = self._ask(self._prompt_text())
        handler = TRANSITIONS[(self.phase, decision)]
        self._enter(handler(self))
        return self.phase

    # ------------------------------------------------------------------
    # Prompting
    # ------------------------------------------------------------------

    def _prompt_text(self) -> str:
        hint = PHASE_PROMPTS[self.phase].hint
        if self.phase is Phase.TRANSFERRING:
            self._pending = self._next_fragment()
            snapshot = ProgressSnapshot.for_fragment(self.state, self._pending)
            return f"{snapshot.describe()}: {hint}"
        if self.phase is Phase.FINALIZING:
            return f"{FOOTER_PROMPT_PREFIX}{hint}"
        return hint

    def _ask(self, text: str) -> Decision:
        """Prompt until the answer is valid for the current phase."""
        prompt = PHASE_PROMPTS[self.phase]
        while True:
            self.printer.prompt(text)
            try:
                raw = self.reader.read_line()
            except EOFError:
                self.printer.end_line()
                logger.debug("Input closed in %s; quitting", self.phase.value)
                return Decision.QUIT
            decision = parse_decision(raw, prompt)
            if decision is not None:
                return decision
            self.printer.notice(prompt.invalid_notice)

    def _next_fragment(self) -> Fragment:
        fragment = build_fragment(self.state, self.state.cursor, self.policy)
        if fragment.is_stalled:
            idx = self.state.cursor
            raise FragmentStallError(idx, self.state.line_units[idx], self.state.max_units)
        logger.debug(
            "Fragment lines %d..%d (%d units)",
            fragment.start, fragment.next_cursor - 1, fragment.units,
        )
        return fragment

    # ------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------

    def _enter(self, phase: Phase) -> None:
        if phase is not self.phase:
            logger.debug("Phase %s -> %s", self.phase.value, phase.value)
            self.phase = phase

    def _phase_after_transfer(self) -> Phase:
        if self.state.has_source:
            return Phase.FINALIZING
        return Phase.EXITING

    def _deliver(self, text: str) -> None:
        self.sink.write(text)
        self.state.last_delivered = text
        self._deliveries += 1

    def _accept_fragment(self) -> Phase:
        fragment = self._pending
        assert fragment is not None and fragment.start == self.state.cursor
        self._deliver(fragment.text)
        self.state.cursor = fragment.next_cursor
        self._pending = None
        if self.state.is_exhausted:
            return self._phase_after_transfer()
        return Phase.TRANSFERRING

    def _accept_footer(self) -> Phase:
        self._deliver(self.messages.footer_for(self.state.source_label))
        return Phase.EXITING

    def _replay(self) -> Phase:
        self.sink.write(self.state.last_delivered)
        self._deliveries += 1
        return self.phase

    def _quit(self) -> Phase:
        self.sink.clear()
        self._quit_phase = self.phase
        return Phase.TERMINATED


TRANSITIONS: dict[tuple[Phase, Decision], Callable[[TransferSession], Phase]] = {
    (Phase.TRANSFERRING, Decision.YES): TransferSession._accept_fragment,
    (Phase.TRANSFERRING, Decision.PREV): TransferSession._replay,
    (Phase.TRANSFERRING, Decision.QUIT): TransferSession._quit,
    (Phase.FINALIZING, Decision.YES): TransferSession._accept_footer,
    (Phase.FINALIZING, Decision.PREV): TransferSession._replay,
    (Phase.FINALIZING, Decision.QUIT): TransferSession._quit,
    (Phase.EXITING, Decision.PREV): TransferSession._replay,
    (Phase.EXITING, Decision.QUIT): TransferSession._quit,
}
