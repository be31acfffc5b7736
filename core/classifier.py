"""Outcome classification of one opponent hand against the hero.

Scores follow the evaluator convention: **lower is stronger**. The
opponent wins the pot when its score is lower than the hero's, the hero
wins when the hero's score is lower, and equal scores split.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Sequence

from core.cards import Card
from core.enumerator import OpponentHand
from core.errors import EvaluationError
from core.evaluator import HandEvaluator

_log = logging.getLogger("equity.engine")


class Verdict(str, Enum):
    HERO_WINS = "hero_wins"
    VILLAIN_WINS = "villain_wins"
    TIE = "tie"


def classify(hero_score: int, opponent_score: int) -> Verdict:
    """Compare two scores from the hero's point of view."""
    if opponent_score < hero_score:
        return Verdict.VILLAIN_WINS
    if opponent_score > hero_score:
        return Verdict.HERO_WINS
    return Verdict.TIE


class OutcomeClassifier:
    """Classifies opponent hands on a fixed board against a fixed hero score.

    One instance serves one computation run; outcomes are memoised per
    hand so the global totals and the matrix share evaluations. A hand
    the evaluator rejects is remembered too: it is evaluated and logged
    once, and every later lookup raises the same error.

    Raises :class:`core.errors.EvaluationError` from :meth:`classify_hand`
    when the evaluator rejects ``hand ∪ board``.
    """

    def __init__(self, evaluator: HandEvaluator, board: Sequence[Card], hero_score: int) -> None:
        self.evaluator = evaluator
        self.board = tuple(board)
        self.hero_score = hero_score
        self._verdicts: dict[frozenset[Card], Verdict] = {}
        self._rejected: dict[frozenset[Card], EvaluationError] = {}

    def opponent_score(self, hand: OpponentHand) -> int:
        return self.evaluator.evaluate([*hand, *self.board])

    def classify_hand(self, hand: OpponentHand) -> Verdict:
        key = frozenset(hand)
        verdict = self._verdicts.get(key)
        if verdict is not None:
            return verdict
        if key in self._rejected:
            raise self._rejected[key]

        try:
            score = self.opponent_score(hand)
        except EvaluationError as exc:
            _log.warning("opponent hand %s%s rejected: %s", hand[0], hand[1], exc)
            self._rejected[key] = exc
            raise
        verdict = classify(self.hero_score, score)
        self._verdicts[key] = verdict
        return verdict
