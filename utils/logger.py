"""Colored terminal logger for the equity matrix console.

Provides ANSI-coloured, module-prefixed output for the operator-facing
side of the tool. Falls back to plain text when the terminal does not
support ANSI or when ``EQUITY_NO_COLOR=1`` is set.

Diagnostics from library code go through the standard :mod:`logging`
module instead (``logging.getLogger("equity.<module>")``).
"""

from __future__ import annotations

import os
import sys


# ---------------------------------------------------------------------------
# ANSI colour codes
# ---------------------------------------------------------------------------

_RESET = "\033[0m"
_BOLD = "\033[1m"

_FG_RED = "\033[31m"
_FG_GREEN = "\033[32m"
_FG_YELLOW = "\033[33m"
_FG_BLUE = "\033[34m"
_FG_MAGENTA = "\033[35m"
_FG_CYAN = "\033[36m"
_FG_WHITE = "\033[37m"


def supports_color() -> bool:
    """Heuristic check for ANSI colour support."""
    if os.getenv("EQUITY_NO_COLOR", "").strip().lower() in {"1", "true", "yes"}:
        return False
    if os.getenv("NO_COLOR"):
        return False
    if os.name == "nt":
        # Windows Terminal and VS Code render ANSI; legacy conhost does not
        return bool(os.getenv("WT_SESSION") or os.getenv("TERM_PROGRAM") == "vscode")
    return hasattr(sys.stdout, "isatty") and sys.stdout.isatty()


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

class ConsoleLogger:
    """Simple coloured logger with module prefix."""

    # Colour palette per module
    _MODULE_COLORS: dict[str, str] = {
        "Engine": _FG_YELLOW,
        "Matrix": _FG_MAGENTA,
        "Deck": _FG_BLUE,
        "Table": _FG_CYAN,
        "CLI": _FG_GREEN,
    }

    def __init__(self, module: str, color: bool | None = None) -> None:
        self.module = module
        self.color = supports_color() if color is None else color
        self._prefix_color = self._MODULE_COLORS.get(module, _FG_WHITE)

    def _format(self, level_color: str, level: str, message: str) -> str:
        if self.color:
            return (
                f"{self._prefix_color}{_BOLD}[{self.module}]{_RESET} "
                f"{level_color}{level}{_RESET} {message}"
            )
        return f"[{self.module}] {level} {message}"

    def info(self, message: str) -> None:
        print(self._format(_FG_GREEN, ">", message))

    def warn(self, message: str) -> None:
        print(self._format(_FG_YELLOW, "!", message))

    def error(self, message: str) -> None:
        print(self._format(_FG_RED, "X", message), file=sys.stderr)

