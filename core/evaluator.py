"""Hand evaluator adapter over the Treys library.

Treys scores 5–7 card hands on ``[1, 7462]`` where **lower is stronger**
(1 = royal flush, 7462 = seven-high). Treys itself does not reject
duplicate cards, so this adapter validates the card set before handing
it over and turns every rejection into :class:`EvaluationError`.
"""

from __future__ import annotations

from typing import Iterable

from treys import Evaluator

from core.cards import Card
from core.errors import EvaluationError

MIN_CARDS = 5
MAX_CARDS = 7


class HandEvaluator:
    """Maps 5–7 distinct cards to a totally ordered score (lower = stronger)."""

    def __init__(self) -> None:
        self._evaluator = Evaluator()

    def evaluate(self, cards: Iterable[Card]) -> int:
        """Return the Treys score of *cards*.

        Raises:
            EvaluationError: on fewer than 5, more than 7 or repeated cards.
        """
        hand = list(cards)
        if not MIN_CARDS <= len(hand) <= MAX_CARDS:
            raise EvaluationError(f"expected 5-7 cards, got {len(hand)}")
        if len(set(hand)) != len(hand):
            codes = " ".join(card.code for card in hand)
            raise EvaluationError(f"duplicate card in {codes}")

        encoded = [card.to_treys() for card in hand]
        try:
            return self._evaluator.evaluate(encoded[:2], encoded[2:])
        except KeyError as exc:
            raise EvaluationError(f"evaluator lookup failed: {exc}") from exc

    def hand_class(self, score: int) -> str:
        """Human-readable class for a score (``"Three of a Kind"``)."""
        return self._evaluator.class_to_string(self._evaluator.get_rank_class(score))
