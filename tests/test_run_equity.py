"""End-to-end tests for the run_equity command line."""

from __future__ import annotations

import pytest

import run_equity


pytest.importorskip("treys")


@pytest.fixture(autouse=True)
def _plain_terminal(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("EQUITY_NO_COLOR", "1")
    monkeypatch.setenv("EQUITY_TABLE_FRIEND_SEATS", "3")
    monkeypatch.setenv("EQUITY_TABLE_STRICT_ASSIGN", "1")


class TestMain:
    def test_range_report(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert run_equity.main(["--hero", "QhQd", "--board", "As8dQc"]) == 0
        out = capsys.readouterr().out
        assert "YOUR CHANCES (exact count)" in out
        assert "COLOUR GUIDE" in out
        assert "AA x" in out

    def test_heads_up_summary(self, capsys: pytest.CaptureFixture[str]) -> None:
        code = run_equity.main(["--hero", "QhQd", "--board", "As8dQc", "--villain", "AhAd", "--summary"])
        out = capsys.readouterr().out
        assert code == 0
        assert "YOU LOSE!" in out
        assert "AKs" not in out

    def test_friends_and_exclusions(self, capsys: pytest.CaptureFixture[str]) -> None:
        code = run_equity.main(
            ["--hero", "AsKs", "--board", "2c7d9h", "--friend", "QcQd", "--exclude", "99", "--no-legend"]
        )
        out = capsys.readouterr().out
        assert code == 0
        assert "excluded from range: 99" in out
        assert "99 -" in out
        assert "COLOUR GUIDE" not in out

    def test_preflop_warns(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert run_equity.main(["--hero", "AsAh", "--no-color"]) == 0
        out = capsys.readouterr().out
        assert "MISSING CARDS TO CALCULATE" in out
        assert "no result available yet" in out

    @pytest.mark.parametrize(
        "argv",
        [
            ["--hero", "QhXx"],
            ["--hero", "QhQdQs"],
            ["--hero", "QhQd", "--board", "Qh8dAc"],
            ["--hero", "QhQd", "--exclude", "AKx"],
            ["--hero", "QhQd", "--friend", "2c2d", "--friend", "3c3d", "--friend", "4c4d", "--friend", "5c5d"],
        ],
    )
    def test_bad_input_exits_2(self, argv: list[str], capsys: pytest.CaptureFixture[str]) -> None:
        assert run_equity.main(argv) == 2
        assert "[CLI] X" in capsys.readouterr().err

    def test_unknown_log_level_is_ignored(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        monkeypatch.setenv("EQUITY_LOGGING_LEVEL", "ROOT")
        assert run_equity.main(["--hero", "QhQd", "--board", "As8dQc", "--summary"]) == 0
        assert "YOUR CHANCES" in capsys.readouterr().out
