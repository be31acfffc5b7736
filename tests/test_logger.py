from __future__ import annotations

import pytest

from utils.logger import ConsoleLogger, supports_color


class TestSupportsColor:
    def test_opt_out(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("EQUITY_NO_COLOR", "1")
        assert supports_color() is False

    def test_no_color_convention(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("EQUITY_NO_COLOR", raising=False)
        monkeypatch.setenv("NO_COLOR", "1")
        assert supports_color() is False


class TestConsoleLogger:
    def test_plain_output(self, capsys: pytest.CaptureFixture[str]) -> None:
        log = ConsoleLogger("Engine", color=False)
        log.info("ready")
        log.warn("careful")
        log.error("broken")
        captured = capsys.readouterr()
        assert captured.out.splitlines() == ["[Engine] > ready", "[Engine] ! careful"]
        assert captured.err.strip() == "[Engine] X broken"

    def test_colored_output(self, capsys: pytest.CaptureFixture[str]) -> None:
        ConsoleLogger("Matrix", color=True).info("ready")
        out = capsys.readouterr().out
        assert "\033[" in out
        assert "[Matrix]" in out
