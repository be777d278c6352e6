"""Turn budget for execute-mode runs."""

from leonidas.models.domain import TurnBudget

RESERVED_TURNS = 5


def compute_turn_budget(total_turns: int) -> TurnBudget:
    """Build the turn budget for a run of ``total_turns``.

    Configuration validation keeps ``total_turns`` above its minimum bound;
    this check only guards callers that bypass it.

    Raises:
        ValueError: If the push deadline would not be positive
    """
    budget = TurnBudget(total_turns=total_turns, reserved_turns=RESERVED_TURNS)
    if budget.push_deadline <= 0:
        raise ValueError(
            f"Turn budget of {total_turns} leaves no turns before the {RESERVED_TURNS} reserved turns"
        )
    return budget
