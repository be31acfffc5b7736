"""Tests for core.evaluator — the Treys adapter (lower score = stronger)."""

from __future__ import annotations

import pytest

from core.cards import parse_cards
from core.errors import EvaluationError
from core.evaluator import HandEvaluator


pytest.importorskip("treys")


@pytest.fixture(scope="module")
def evaluator() -> HandEvaluator:
    return HandEvaluator()


class TestHandEvaluator:
    def test_royal_flush_is_best_score(self, evaluator: HandEvaluator) -> None:
        assert evaluator.evaluate(parse_cards("AsKsQsJsTs")) == 1

    def test_lower_is_stronger(self, evaluator: HandEvaluator) -> None:
        board = parse_cards("As8dQc")
        queens = evaluator.evaluate(parse_cards("QhQd") + board)
        aces = evaluator.evaluate(parse_cards("AhAd") + board)
        assert aces < queens

    def test_accepts_six_and_seven_cards(self, evaluator: HandEvaluator) -> None:
        six = evaluator.evaluate(parse_cards("QhQdAs8dQc2h"))
        seven = evaluator.evaluate(parse_cards("QhQdAs8dQc2h3c"))
        assert six == seven

    def test_hand_class(self, evaluator: HandEvaluator) -> None:
        score = evaluator.evaluate(parse_cards("QhQdAs8dQc"))
        assert evaluator.hand_class(score) == "Three of a Kind"

    @pytest.mark.parametrize("cards", ["QhQdAs8d", "QhQdAs8dQc2h3c4d"])
    def test_rejects_wrong_size(self, evaluator: HandEvaluator, cards: str) -> None:
        with pytest.raises(EvaluationError):
            evaluator.evaluate(parse_cards(cards))

    def test_rejects_duplicate_cards(self, evaluator: HandEvaluator) -> None:
        with pytest.raises(EvaluationError):
            evaluator.evaluate(parse_cards("QhQhAs8dQc"))
