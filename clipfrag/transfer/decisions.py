"""Parsing of user answers."""

from clipfrag.transfer.types import DECISION_ALIASES, Decision, PhasePrompt


def parse_decision(raw: str, prompt: PhasePrompt) -> Decision | None:
    """Interpret one answer for a phase.

    Empty input selects the phase default. Returns None for anything that is
    not one of the phase's choices; callers re-prompt.

    Examples:
        >>> from clipfrag.transfer.types import PHASE_PROMPTS, Phase
        >>> parse_decision(" Y ", PHASE_PROMPTS[Phase.TRANSFERRING])
        <Decision.YES: 'yes'>
        >>> parse_decision("", PHASE_PROMPTS[Phase.EXITING])
        <Decision.QUIT: 'quit'>
        >>> parse_decision("yes", PHASE_PROMPTS[Phase.EXITING]) is None
        True
    """
    answer = raw.strip().lower()
    if not answer:
        return prompt.default
    decision = DECISION_ALIASES.get(answer)
    if decision not in prompt.choices:
        return None
    return decision
