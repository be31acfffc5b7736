"""Range equity tool.

Wraps :class:`core.math_engine.RangeEquityEngine` with a string-based
interface for the presentation layer. Card strings are parsed strictly:
a malformed card raises ``ValueError`` before the engine runs.
"""

from __future__ import annotations

from typing import Iterable

from core.cards import parse_cards
from core.math_engine import EngineInput, EquityReport, RangeEquityEngine
from core.matrix import MatrixCell, parse_cell_label
from tools.table_state import TableState


class EquityTool:
    """Facade over :class:`RangeEquityEngine`."""

    def __init__(self, engine: RangeEquityEngine | None = None) -> None:
        self.engine = engine or RangeEquityEngine()

    def evaluate(
        self,
        hero: Iterable[str] | str,
        board: Iterable[str] | str = (),
        villain: Iterable[str] | str = (),
        friends: Iterable[Iterable[str] | str] = (),
        exclusions: Iterable[str | MatrixCell] = (),
    ) -> EquityReport:
        """Compute the report for card strings.

        Args:
            hero:       Hero's hole cards, e.g. ``["Qh", "Qd"]`` or ``"QhQd"``.
            board:      Community cards on the board.
            villain:    A specific villain hand for heads-up mode.
            friends:    One entry per friendly seat; their cards act as blockers.
            exclusions: Matrix cells (``"AKs"`` labels or cells) toggled off.

        Returns:
            :class:`EquityReport` with totals and the matrix.

        Raises:
            ValueError: on a malformed card or label, or a hand or board
                holding too many cards.
        """
        snapshot = EngineInput.build(
            hero=parse_cards(hero),
            board=parse_cards(board),
            villain=parse_cards(villain),
            friends=[parse_cards(seat) for seat in friends],
            exclusions=[
                cell if isinstance(cell, MatrixCell) else parse_cell_label(cell)
                for cell in exclusions
            ],
        )
        return self.engine.compute(snapshot)

    def from_state(self, state: TableState) -> EquityReport:
        return self.engine.compute(state.snapshot())
