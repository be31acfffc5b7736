"""Tests for tools.matrix_render — plain-text output only."""

from __future__ import annotations

import pytest

from core.math_engine import EquityReport
from core.matrix import MATRIX_RANKS
from tools.equity_tool import EquityTool
from tools.matrix_render import (
    render_bar,
    render_dashboard,
    render_legend,
    render_matrix,
    render_report,
)


pytest.importorskip("treys")


@pytest.fixture(scope="module")
def range_report() -> EquityReport:
    return EquityTool().evaluate("QhQd", "As8dQc")


class TestRenderBar:
    def test_plain(self) -> None:
        assert render_bar(50.0, 0.0, width=10, color=False) == "[#####.....]"

    def test_clamped(self) -> None:
        assert render_bar(100.0, 10.0, width=4, color=False) == "[####]"
        assert render_bar(0.0, 0.0, width=4, color=False) == "[....]"

    def test_color_uses_ansi(self) -> None:
        assert "\033[48;2;" in render_bar(50.0, 0.0, width=4)


class TestDashboard:
    def test_range(self, range_report: EquityReport) -> None:
        text = render_dashboard(range_report, color=False)
        assert text.startswith("YOUR CHANCES (exact count)")
        assert "Known cards: 8♦ Q♣ Q♦ Q♥ A♠" in text
        assert "Hero holds: Three of a Kind" in text
        assert "Street: FLOP" in text
        assert f"{range_report.totals.win_pct:.1f}% CHANCE OF WINNING" in text
        assert "\033[" not in text

    def test_heads_up_loss(self) -> None:
        report = EquityTool().evaluate("QhQd", "As8dQc", villain="AhAd")
        text = render_dashboard(report, color=False)
        assert text.startswith("HEADS-UP: HERO vs VILLAIN")
        assert "YOU LOSE!" in text

    def test_heads_up_split(self) -> None:
        report = EquityTool().evaluate("2c3d", "AsKsQsJsTs", villain="4h5h")
        assert "SPLIT POT!" in render_dashboard(report, color=False)

    def test_missing_cards(self) -> None:
        text = render_dashboard(EquityTool().evaluate("AsAh"), color=False)
        assert "MISSING CARDS TO CALCULATE" in text
        assert "board needs 3 cards (has 0)" in text

    def test_overlapping_villain_shows_warning(self) -> None:
        report = EquityTool().evaluate("QhQd", "As8dQc", villain="AsKd")
        assert "shares a card" in render_dashboard(report, color=False)

    def test_ten_notation(self) -> None:
        report = EquityTool().evaluate("ThTd", "2c3d4h")
        assert "10♦" in render_dashboard(report, color=False, ten_as_digits=True)
        assert "T♦" in render_dashboard(report, color=False, ten_as_digits=False)


class TestMatrix:
    def test_grid_shape(self, range_report: EquityReport) -> None:
        lines = render_matrix(range_report, color=False).splitlines()
        assert len(lines) == 14
        assert lines[0].split() == list(MATRIX_RANKS)

    def test_plain_markers(self, range_report: EquityReport) -> None:
        text = render_matrix(range_report, color=False)
        assert "AA x" in text
        assert "QQ #" in text
        assert "88 +" in text

    def test_legend(self) -> None:
        text = render_legend(color=False)
        assert text.startswith("COLOUR GUIDE")
        assert "Danger" in text

    def test_report_without_legend(self, range_report: EquityReport) -> None:
        assert "COLOUR GUIDE" not in render_report(range_report, color=False, legend=False)
        assert "COLOUR GUIDE" in render_report(range_report, color=False)
