"""13×13 starting-hand matrix and per-cell display state.

Rows and columns follow the presentation rank order ``A K Q J T … 2``.
The diagonal holds pocket pairs, the upper triangle (``row < col``)
suited hands and the lower triangle (``row > col``) offsuit hands, so
``AKs`` sits at ``(0, 1)`` and ``AKo`` at ``(1, 0)``.

:func:`classify_cell` derives the display state with a strict priority
order; only the first matching predicate applies:

    EXCLUDED > FULLY_BLOCKED > DANGER > SAFE > SPLIT
    > NEUTRAL_EVALUATED > PREFLOP_PAIR / PREFLOP_SUITED / PREFLOP_OFFSUIT
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Iterable, Iterator

if TYPE_CHECKING:
    from core.aggregator import CellCounts

MATRIX_RANKS = "AKQJT98765432"
"""Presentation rank order (descending). Index position is the row/column."""

GRID_SIZE = len(MATRIX_RANKS)


class Shape(str, Enum):
    PAIR = "pair"
    SUITED = "suited"
    OFFSUIT = "offsuit"


class CellState(str, Enum):
    """Display state of one matrix cell, in priority order."""

    EXCLUDED = "excluded"
    FULLY_BLOCKED = "fully_blocked"
    DANGER = "danger"
    SAFE = "safe"
    SPLIT = "split"
    NEUTRAL_EVALUATED = "neutral_evaluated"
    PREFLOP_PAIR = "preflop_pair"
    PREFLOP_SUITED = "preflop_suited"
    PREFLOP_OFFSUIT = "preflop_offsuit"


@dataclass(frozen=True, slots=True, order=True)
class MatrixCell:
    row: int
    col: int

    def __post_init__(self) -> None:
        if not (0 <= self.row < GRID_SIZE and 0 <= self.col < GRID_SIZE):
            raise ValueError(f"Matrix cell out of range: ({self.row}, {self.col})")

    @property
    def shape(self) -> Shape:
        if self.row == self.col:
            return Shape.PAIR
        if self.row < self.col:
            return Shape.SUITED
        return Shape.OFFSUIT

    @property
    def high_rank(self) -> str:
        return MATRIX_RANKS[min(self.row, self.col)]

    @property
    def low_rank(self) -> str:
        return MATRIX_RANKS[max(self.row, self.col)]

    @property
    def label(self) -> str:
        """``"77"``, ``"AKs"`` or ``"QJo"``."""
        suffix = {Shape.PAIR: "", Shape.SUITED: "s", Shape.OFFSUIT: "o"}[self.shape]
        return f"{self.high_rank}{self.low_rank}{suffix}"

    @property
    def combo_count(self) -> int:
        return {Shape.PAIR: 6, Shape.SUITED: 4, Shape.OFFSUIT: 12}[self.shape]

    def __str__(self) -> str:
        return self.label


def all_cells() -> Iterator[MatrixCell]:
    """Row-major iteration over the 169 cells."""
    for row in range(GRID_SIZE):
        for col in range(GRID_SIZE):
            yield MatrixCell(row, col)


def parse_cell_label(label: str) -> MatrixCell:
    """Parse ``"AKs"``, ``"AKo"``, ``"77"`` (``"10"`` accepted for tens).

    Raises ``ValueError`` on an unknown label, a suffix on a pair or a
    missing suffix on two different ranks.
    """
    token = label.strip().upper().replace("10", "T")
    if len(token) not in (2, 3):
        raise ValueError(f"Invalid hand label: {label!r}")
    first, second, suffix = token[0], token[1], token[2:].lower()
    if first not in MATRIX_RANKS or second not in MATRIX_RANKS:
        raise ValueError(f"Invalid hand label: {label!r}")

    i, j = sorted((MATRIX_RANKS.index(first), MATRIX_RANKS.index(second)))
    if i == j:
        if suffix:
            raise ValueError(f"Pairs take no suffix: {label!r}")
        return MatrixCell(i, i)
    if suffix == "s":
        return MatrixCell(i, j)
    if suffix == "o":
        return MatrixCell(j, i)
    raise ValueError(f"Expected 's' or 'o' suffix: {label!r}")


def toggle_exclusion(exclusions: Iterable[MatrixCell], cell: MatrixCell) -> frozenset[MatrixCell]:
    """Return a new exclusion set with *cell* flipped."""
    current = frozenset(exclusions)
    if cell in current:
        return current - {cell}
    return current | {cell}


def classify_cell(
    cell: MatrixCell,
    counts: CellCounts,
    exclusions: Iterable[MatrixCell],
    hero_score_available: bool,
) -> CellState:
    """Derive the display state; exclusions never touch *counts*."""
    if cell in frozenset(exclusions):
        return CellState.EXCLUDED
    if counts.total_combos > 0 and counts.blocked_combos == counts.total_combos:
        return CellState.FULLY_BLOCKED
    if counts.losing_combos > 0:
        return CellState.DANGER
    if counts.winning_combos > 0:
        return CellState.SAFE
    if counts.tie_combos > 0:
        return CellState.SPLIT
    if hero_score_available:
        return CellState.NEUTRAL_EVALUATED
    return {
        Shape.PAIR: CellState.PREFLOP_PAIR,
        Shape.SUITED: CellState.PREFLOP_SUITED,
        Shape.OFFSUIT: CellState.PREFLOP_OFFSUIT,
    }[cell.shape]
