"""Terminal rendering of an :class:`EquityReport`.

Pure string builders: the dashboard (verdict banner or win-rate bar),
the 13×13 matrix coloured by :class:`CellState`, and the colour legend.
Colour uses 24-bit ANSI backgrounds; with ``color=False`` each cell gets
a one-character state marker instead.
"""

from __future__ import annotations

from core.math_engine import EquityReport, Mode, ReportStatus
from core.matrix import GRID_SIZE, MATRIX_RANKS, CellState, MatrixCell

_RESET = "\033[0m"
_BOLD = "\033[1m"

STATE_RGB: dict[CellState, tuple[int, int, int]] = {
    CellState.EXCLUDED: (20, 20, 20),
    CellState.FULLY_BLOCKED: (40, 40, 40),
    CellState.DANGER: (200, 50, 50),
    CellState.SAFE: (50, 180, 50),
    CellState.SPLIT: (50, 100, 200),
    CellState.NEUTRAL_EVALUATED: (30, 30, 30),
    CellState.PREFLOP_PAIR: (100, 80, 0),
    CellState.PREFLOP_SUITED: (0, 60, 60),
    CellState.PREFLOP_OFFSUIT: (50, 50, 50),
}

STATE_MARKER: dict[CellState, str] = {
    CellState.EXCLUDED: "-",
    CellState.FULLY_BLOCKED: "#",
    CellState.DANGER: "x",
    CellState.SAFE: "+",
    CellState.SPLIT: "=",
    CellState.NEUTRAL_EVALUATED: ".",
    CellState.PREFLOP_PAIR: " ",
    CellState.PREFLOP_SUITED: " ",
    CellState.PREFLOP_OFFSUIT: " ",
}

LEGEND: list[tuple[CellState, str, str]] = [
    (CellState.DANGER, "RED", "Danger: at least one combo in this cell beats you."),
    (CellState.SAFE, "GREEN", "Safe: you beat every live combo in this cell."),
    (CellState.SPLIT, "BLUE", "Split: the live combos tie with you."),
    (CellState.FULLY_BLOCKED, "DARK GREY", "Blocked: every combo uses a known card."),
    (CellState.EXCLUDED, "BLACK", "Excluded: removed from the villain's range by hand."),
    (CellState.PREFLOP_PAIR, "BROWN/CYAN", "Pre-flop: pairs (brown) and suited (cyan) until the flop is set."),
]

_GREY_TEXT = {CellState.EXCLUDED, CellState.FULLY_BLOCKED}

_WIN_RGB = (50, 180, 50)
_LOSE_RGB = (200, 50, 50)


def _bg(rgb: tuple[int, int, int]) -> str:
    return "\033[48;2;{};{};{}m".format(*rgb)


def _fg(rgb: tuple[int, int, int]) -> str:
    return "\033[38;2;{};{};{}m".format(*rgb)


def _paint_cell(text: str, state: CellState, color: bool) -> str:
    if not color:
        return f"{text:<3}{STATE_MARKER[state]}"
    text_rgb = (128, 128, 128) if state in _GREY_TEXT else (255, 255, 255)
    return f"{_bg(STATE_RGB[state])}{_fg(text_rgb)}{text:^4}{_RESET}"


def render_bar(win_pct: float, tie_pct: float, width: int = 40, color: bool = True) -> str:
    """Win + tie share on the left, losses on the right."""
    safe = round((win_pct + tie_pct) / 100.0 * width)
    safe = min(max(safe, 0), width)
    if not color:
        return "[" + "#" * safe + "." * (width - safe) + "]"
    return f"{_bg(_WIN_RGB)}{' ' * safe}{_bg(_LOSE_RGB)}{' ' * (width - safe)}{_RESET}"


def render_dashboard(report: EquityReport, color: bool = True, ten_as_digits: bool = True) -> str:
    title = "HEADS-UP: HERO vs VILLAIN" if report.mode is Mode.HEADS_UP else "YOUR CHANCES (exact count)"
    lines = [f"{_BOLD}{title}{_RESET}" if color else title]
    if len(report.known):
        lines.append("Known cards: " + " ".join(card.display(ten_as_digits) for card in report.known))
    lines.append(f"Street: {report.street.upper()}")

    if report.status is ReportStatus.INSUFFICIENT_INFORMATION:
        lines.append(f"MISSING CARDS TO CALCULATE ({report.reason})")
        return "\n".join(lines)
    if report.status is ReportStatus.HERO_UNEVALUABLE:
        lines.append(f"HERO HAND CANNOT BE EVALUATED ({report.reason})")
        return "\n".join(lines)

    lines.append(f"Hero holds: {report.hero_class} (score {report.hero_score})")
    totals = report.totals
    if totals.possible == 0:
        lines.extend(report.warnings or ("No opponent hand left to evaluate.",))
        return "\n".join(lines)

    if report.mode is Mode.HEADS_UP:
        if totals.winning:
            lines.append("YOU WIN!")
        elif totals.losing:
            lines.append("YOU LOSE!")
        else:
            lines.append("SPLIT POT!")
    else:
        lines.append(f"YOU HAVE A {totals.win_pct:.1f}% CHANCE OF WINNING")
        lines.append(render_bar(totals.win_pct, totals.tie_pct, color=color))
        lines.append(
            f"Hands that beat you: {totals.losing} | "
            f"Hands you beat: {totals.winning} | Ties: {totals.ties}"
        )
        lines.append("The bar shows your strength against ANY hand a random opponent could hold.")
    lines.extend(report.warnings)
    return "\n".join(lines)


def render_matrix(report: EquityReport, color: bool = True) -> str:
    header = "    " + "".join(f"{rank:^4}" for rank in MATRIX_RANKS)
    lines = [header]
    for row in range(GRID_SIZE):
        cells = []
        for col in range(GRID_SIZE):
            cell = MatrixCell(row, col)
            result = report.cells[cell]
            cells.append(_paint_cell(cell.label, result.state, color))
        lines.append(f"{MATRIX_RANKS[row]:^4}" + "".join(cells))
    return "\n".join(lines)


def render_legend(color: bool = True) -> str:
    lines = ["COLOUR GUIDE"]
    for state, name, description in LEGEND:
        swatch = _paint_cell("", state, color) if color else STATE_MARKER[state]
        lines.append(f"{swatch} {name:<11} {description}")
    return "\n".join(lines)


def render_report(
    report: EquityReport,
    color: bool = True,
    legend: bool = True,
    ten_as_digits: bool = True,
) -> str:
    parts = [render_dashboard(report, color, ten_as_digits), render_matrix(report, color)]
    if legend:
        parts.append(render_legend(color))
    return "\n\n".join(parts)
