"""Exhaustive range equity engine using the Treys hand evaluator.

Given the hero's hand, a 3–5 card board and every card already known to
be held (villain, friends), the engine enumerates opponent holdings and
reports how the hero fares:

* **Heads-up mode** — a villain hand of exactly two cards is declared;
  the global totals cover that single hand.
* **Range mode** — no villain hand; the totals cover every two-card
  combination left in the deck.

The 13×13 matrix is always computed against the full range, with the
villain's cards counted as blockers.

The engine is a pure function of its :class:`EngineInput`: nothing is
kept between calls, so the caller simply recomputes on every change.

Performance:
    Range mode evaluates at most C(50, 2) = 1225 hands per run; verdicts
    are shared between the totals and the matrix.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, Sequence

from core.aggregator import Aggregator, CellCounts, GlobalTotals
from core.cards import Card, KnownCardSet
from core.classifier import OutcomeClassifier
from core.enumerator import is_heads_up, opponent_hands, require_evaluable
from core.errors import EvaluationError, InsufficientInformation
from core.evaluator import HandEvaluator
from core.matrix import CellState, MatrixCell, all_cells, classify_cell
from utils.card_utils import street_from_board

_log = logging.getLogger("equity.engine")

MAX_HAND_CARDS = 2
MAX_BOARD_CARDS = 5


class ReportStatus(str, Enum):
    READY = "ready"
    INSUFFICIENT_INFORMATION = "insufficient_information"
    HERO_UNEVALUABLE = "hero_unevaluable"


class Mode(str, Enum):
    RANGE = "range"
    HEADS_UP = "heads_up"


@dataclass(frozen=True, slots=True)
class EngineInput:
    """Snapshot of the selection state handed to the engine.

    Attributes:
        hero:       Hero's cards (0–2).
        board:      Community cards (0–5).
        villain:    Declared villain cards (0–2); two cards mean heads-up.
        friends:    Cards held by friendly seats, one tuple per seat.
        exclusions: Matrix cells manually toggled off (display only).

    Raises ``ValueError`` when a hand or the board holds more cards than
    the table allows. Partial hands are accepted and reported as
    insufficient information.
    """

    hero: tuple[Card, ...] = ()
    board: tuple[Card, ...] = ()
    villain: tuple[Card, ...] = ()
    friends: tuple[tuple[Card, ...], ...] = ()
    exclusions: frozenset[MatrixCell] = frozenset()

    def __post_init__(self) -> None:
        groups = [
            ("hero", self.hero, MAX_HAND_CARDS),
            ("board", self.board, MAX_BOARD_CARDS),
            ("villain", self.villain, MAX_HAND_CARDS),
        ]
        groups += [
            (f"friend seat {seat + 1}", hand, MAX_HAND_CARDS)
            for seat, hand in enumerate(self.friends)
        ]
        for name, cards, limit in groups:
            if len(cards) > limit:
                raise ValueError(f"{name} holds {len(cards)} cards (max {limit})")

    @classmethod
    def build(
        cls,
        hero: Iterable[Card] = (),
        board: Iterable[Card] = (),
        villain: Iterable[Card] = (),
        friends: Iterable[Iterable[Card]] = (),
        exclusions: Iterable[MatrixCell] = (),
    ) -> EngineInput:
        return cls(
            hero=tuple(hero),
            board=tuple(board),
            villain=tuple(villain),
            friends=tuple(tuple(seat) for seat in friends),
            exclusions=frozenset(exclusions),
        )

    def known_cards(self) -> KnownCardSet:
        return KnownCardSet.from_hands(self.hero, self.board, self.villain, *self.friends)

    @property
    def mode(self) -> Mode:
        return Mode.HEADS_UP if is_heads_up(self.villain) else Mode.RANGE


@dataclass(frozen=True, slots=True)
class CellResult:
    cell: MatrixCell
    counts: CellCounts
    state: CellState


@dataclass(frozen=True, slots=True)
class EquityReport:
    """Output snapshot for the presentation layer.

    Attributes:
        status:     :class:`ReportStatus`; totals are meaningful only when ``READY``.
        mode:       Range or heads-up.
        totals:     Global win / lose / tie counts (zeros unless ready).
        cells:      One :class:`CellResult` per matrix cell.
        known:      Cards excluded from enumeration.
        hero_score: Treys score of hero + board, when available.
        hero_class: Readable hand class (``"Three of a Kind"``).
        street:     ``preflop`` to ``river`` from the board size.
        reason:     Why no result is available.
    """

    status: ReportStatus
    mode: Mode
    totals: GlobalTotals
    cells: dict[MatrixCell, CellResult]
    known: KnownCardSet
    hero_score: int | None = None
    hero_class: str | None = None
    street: str = "preflop"
    reason: str = ""
    warnings: tuple[str, ...] = field(default_factory=tuple)

    @property
    def ready(self) -> bool:
        return self.status is ReportStatus.READY

    def cell(self, cell: MatrixCell) -> CellResult:
        return self.cells[cell]


def _street(snapshot: EngineInput) -> str:
    return street_from_board([card.code for card in snapshot.board])


class RangeEquityEngine:
    """Stateless range equity calculator."""

    def __init__(self, evaluator: HandEvaluator | None = None) -> None:
        self.evaluator = evaluator or HandEvaluator()

    def hero_score(self, hero: Sequence[Card], board: Sequence[Card]) -> int:
        """Score hero + board; raises InsufficientInformation or EvaluationError."""
        require_evaluable(hero, board)
        return self.evaluator.evaluate([*hero, *board])

    def compute(self, snapshot: EngineInput) -> EquityReport:
        known = snapshot.known_cards()
        mode = snapshot.mode

        try:
            hero_score = self.hero_score(snapshot.hero, snapshot.board)
        except InsufficientInformation as exc:
            return self._pending_report(snapshot, known, ReportStatus.INSUFFICIENT_INFORMATION, str(exc))
        except EvaluationError as exc:
            _log.warning("hero hand rejected: %s", exc)
            return self._pending_report(snapshot, known, ReportStatus.HERO_UNEVALUABLE, str(exc))

        classifier = OutcomeClassifier(self.evaluator, snapshot.board, hero_score)
        hands = opponent_hands(
            snapshot.hero, snapshot.board, known, snapshot.villain, snapshot.friends
        )
        totals = Aggregator.aggregate_totals(hands, classifier)
        counts = Aggregator.aggregate_matrix(known, classifier)

        warnings: list[str] = []
        if totals.failed:
            warnings.append(f"{totals.failed} opponent hand(s) could not be evaluated")
        if mode is Mode.HEADS_UP and totals.possible == 0 and not totals.failed:
            warnings.append("villain hand shares a card with another slot")

        _log.debug(
            "%s: possible=%d win=%d lose=%d tie=%d",
            mode.value, totals.possible, totals.winning, totals.losing, totals.ties,
        )
        return EquityReport(
            status=ReportStatus.READY,
            mode=mode,
            totals=totals,
            cells=self._cell_results(counts, snapshot.exclusions, hero_score_available=True),
            known=known,
            hero_score=hero_score,
            hero_class=self.evaluator.hand_class(hero_score),
            street=_street(snapshot),
            warnings=tuple(warnings),
        )

    def _pending_report(
        self,
        snapshot: EngineInput,
        known: KnownCardSet,
        status: ReportStatus,
        reason: str,
    ) -> EquityReport:
        counts = Aggregator.aggregate_matrix(known, None)
        return EquityReport(
            status=status,
            mode=snapshot.mode,
            totals=GlobalTotals(),
            cells=self._cell_results(counts, snapshot.exclusions, hero_score_available=False),
            known=known,
            reason=reason,
            street=_street(snapshot),
        )

    @staticmethod
    def _cell_results(
        counts: dict[MatrixCell, CellCounts],
        exclusions: frozenset[MatrixCell],
        hero_score_available: bool,
    ) -> dict[MatrixCell, CellResult]:
        return {
            cell: CellResult(
                cell=cell,
                counts=counts[cell],
                state=classify_cell(cell, counts[cell], exclusions, hero_score_available),
            )
            for cell in all_cells()
        }
