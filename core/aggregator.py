"""Reductions of classified opponent hands.

Two parallel reductions are kept:

* :class:`GlobalTotals` — over the enumerated opponent hands (range or
  heads-up). ``possible`` counts only hands actually evaluated.
* :class:`CellCounts` — per matrix cell, over every theoretical combo of
  the cell. Blocked combos are counted and never evaluated.

Per-cell invariant::

    total == blocked + winning + losing + ties + failed + pending

``failed`` holds combos the evaluator rejected; ``pending`` holds
unblocked combos left unevaluated because no hero score exists yet.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable

from core.cards import KnownCardSet
from core.classifier import OutcomeClassifier, Verdict
from core.enumerator import OpponentHand, cell_combos
from core.errors import EvaluationError
from core.matrix import MatrixCell, all_cells

_log = logging.getLogger("equity.engine")


def _pct(part: int, whole: int) -> float:
    if whole <= 0:
        return 0.0
    return part / whole * 100.0


@dataclass(slots=True)
class GlobalTotals:
    """Hero-perspective totals over the evaluated opponent hands."""

    possible: int = 0
    winning: int = 0
    losing: int = 0
    ties: int = 0
    failed: int = 0

    def record(self, verdict: Verdict) -> None:
        self.possible += 1
        if verdict is Verdict.HERO_WINS:
            self.winning += 1
        elif verdict is Verdict.VILLAIN_WINS:
            self.losing += 1
        else:
            self.ties += 1

    def record_failure(self) -> None:
        self.failed += 1

    @property
    def win_pct(self) -> float:
        return _pct(self.winning, self.possible)

    @property
    def lose_pct(self) -> float:
        return _pct(self.losing, self.possible)

    @property
    def tie_pct(self) -> float:
        return _pct(self.ties, self.possible)


@dataclass(slots=True)
class CellCounts:
    total_combos: int = 0
    blocked_combos: int = 0
    winning_combos: int = 0
    losing_combos: int = 0
    tie_combos: int = 0
    failed_combos: int = 0
    pending_combos: int = 0

    def record_blocked(self) -> None:
        self.total_combos += 1
        self.blocked_combos += 1

    def record(self, verdict: Verdict) -> None:
        self.total_combos += 1
        if verdict is Verdict.HERO_WINS:
            self.winning_combos += 1
        elif verdict is Verdict.VILLAIN_WINS:
            self.losing_combos += 1
        else:
            self.tie_combos += 1

    def record_failure(self) -> None:
        self.total_combos += 1
        self.failed_combos += 1

    def record_pending(self) -> None:
        self.total_combos += 1
        self.pending_combos += 1

    @property
    def available_combos(self) -> int:
        return self.total_combos - self.blocked_combos

    def is_consistent(self) -> bool:
        return self.total_combos == (
            self.blocked_combos
            + self.winning_combos
            + self.losing_combos
            + self.tie_combos
            + self.failed_combos
            + self.pending_combos
        )


class Aggregator:
    """Feeds opponent hands through a classifier into totals and cells."""

    @staticmethod
    def aggregate_totals(hands: Iterable[OpponentHand], classifier: OutcomeClassifier) -> GlobalTotals:
        totals = GlobalTotals()
        for hand in hands:
            try:
                verdict = classifier.classify_hand(hand)
            except EvaluationError as exc:
                _log.debug("skipping %s%s: %s", hand[0], hand[1], exc)
                totals.record_failure()
                continue
            totals.record(verdict)
        return totals

    @staticmethod
    def aggregate_cell(
        cell: MatrixCell,
        known: KnownCardSet,
        classifier: OutcomeClassifier | None,
    ) -> CellCounts:
        counts = CellCounts()
        for hand in cell_combos(cell):
            if known.blocks(*hand):
                counts.record_blocked()
                continue
            if classifier is None:
                counts.record_pending()
                continue
            try:
                verdict = classifier.classify_hand(hand)
            except EvaluationError as exc:
                _log.debug("skipping %s%s in %s: %s", hand[0], hand[1], cell.label, exc)
                counts.record_failure()
                continue
            counts.record(verdict)
        return counts

    @classmethod
    def aggregate_matrix(
        cls,
        known: KnownCardSet,
        classifier: OutcomeClassifier | None,
    ) -> dict[MatrixCell, CellCounts]:
        return {cell: cls.aggregate_cell(cell, known, classifier) for cell in all_cells()}
