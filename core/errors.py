"""Error taxonomy for the range equity engine.

None of these is fatal to the process: the engine absorbs them and
reflects them as zero or partial results.
"""

from __future__ import annotations


class EquityError(Exception):
    """Base class for every engine error."""


class InsufficientInformation(EquityError):
    """Hero hand has fewer than 2 cards or the board fewer than 3."""

    def __init__(self, hero_count: int, board_count: int) -> None:
        self.hero_count = hero_count
        self.board_count = board_count
        missing: list[str] = []
        if hero_count < 2:
            missing.append(f"hero needs 2 cards (has {hero_count})")
        if board_count < 3:
            missing.append(f"board needs 3 cards (has {board_count})")
        super().__init__("; ".join(missing) or "insufficient information")


class EvaluationError(EquityError):
    """The hand evaluator rejected a card set (wrong size or duplicates)."""


class InvariantViolation(EquityError):
    """A card was assigned to more than one slot."""
