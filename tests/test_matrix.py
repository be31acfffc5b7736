"""Tests for core.matrix — cell layout, labels and display-state priority."""

from __future__ import annotations

import pytest

from core.aggregator import CellCounts
from core.matrix import (
    CellState,
    MatrixCell,
    Shape,
    all_cells,
    classify_cell,
    parse_cell_label,
    toggle_exclusion,
)


def _counts(**kwargs: int) -> CellCounts:
    counts = CellCounts(**kwargs)
    if "total_combos" not in kwargs:
        counts.total_combos = (
            counts.blocked_combos + counts.winning_combos + counts.losing_combos + counts.tie_combos
        )
    return counts


class TestLayout:
    def test_169_cells(self) -> None:
        cells = list(all_cells())
        assert len(cells) == 169
        assert sum(cell.shape is Shape.PAIR for cell in cells) == 13
        assert sum(cell.shape is Shape.SUITED for cell in cells) == 78
        assert sum(cell.shape is Shape.OFFSUIT for cell in cells) == 78

    def test_labels(self) -> None:
        assert MatrixCell(0, 0).label == "AA"
        assert MatrixCell(0, 1).label == "AKs"
        assert MatrixCell(1, 0).label == "AKo"
        assert MatrixCell(12, 12).label == "22"
        assert MatrixCell(4, 12).label == "T2s"

    @pytest.mark.parametrize("label", ["AA", "AKs", "AKo", "T9s", "72o", "22"])
    def test_parse_label_matches_cell_label(self, label: str) -> None:
        assert parse_cell_label(label).label == label

    def test_parse_label_accepts_reversed_ranks_and_tens(self) -> None:
        assert parse_cell_label("KAs") == MatrixCell(0, 1)
        assert parse_cell_label("109s") == parse_cell_label("T9s")

    @pytest.mark.parametrize("label", ["", "A", "AKx", "AAs", "AK", "ZZ", "AKso"])
    def test_parse_label_rejects(self, label: str) -> None:
        with pytest.raises(ValueError):
            parse_cell_label(label)

    def test_out_of_range_cell(self) -> None:
        with pytest.raises(ValueError):
            MatrixCell(13, 0)


class TestToggleExclusion:
    def test_toggle_on_and_off(self) -> None:
        cell = MatrixCell(0, 1)
        on = toggle_exclusion(frozenset(), cell)
        assert cell in on
        assert cell not in toggle_exclusion(on, cell)


class TestClassifyCell:
    def test_excluded_beats_everything(self) -> None:
        cell = parse_cell_label("AKs")
        counts = _counts(winning_combos=4)
        assert classify_cell(cell, counts, {cell}, True) is CellState.EXCLUDED
        assert counts.winning_combos == 4

    def test_fully_blocked(self) -> None:
        counts = _counts(blocked_combos=6)
        assert classify_cell(parse_cell_label("QQ"), counts, (), True) is CellState.FULLY_BLOCKED

    def test_danger_over_safe(self) -> None:
        counts = _counts(blocked_combos=2, winning_combos=3, losing_combos=1)
        assert classify_cell(parse_cell_label("AKo"), counts, (), True) is CellState.DANGER

    def test_safe_over_split(self) -> None:
        counts = _counts(winning_combos=3, tie_combos=1)
        assert classify_cell(parse_cell_label("AKs"), counts, (), True) is CellState.SAFE

    def test_split(self) -> None:
        counts = _counts(tie_combos=4)
        assert classify_cell(parse_cell_label("AKs"), counts, (), True) is CellState.SPLIT

    def test_neutral_when_evaluated_without_outcomes(self) -> None:
        counts = _counts(total_combos=6, failed_combos=6)
        assert classify_cell(parse_cell_label("55"), counts, (), True) is CellState.NEUTRAL_EVALUATED

    @pytest.mark.parametrize(
        ("label", "state"),
        [
            ("77", CellState.PREFLOP_PAIR),
            ("AKs", CellState.PREFLOP_SUITED),
            ("AKo", CellState.PREFLOP_OFFSUIT),
        ],
    )
    def test_shape_only_without_hero_score(self, label: str, state: CellState) -> None:
        cell = parse_cell_label(label)
        counts = _counts(total_combos=cell.combo_count, pending_combos=cell.combo_count)
        assert classify_cell(cell, counts, (), False) is state

    def test_fully_blocked_wins_even_before_the_flop(self) -> None:
        counts = _counts(blocked_combos=6)
        assert classify_cell(parse_cell_label("AA"), counts, (), False) is CellState.FULLY_BLOCKED
