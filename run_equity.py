"""run_equity.py — Terminal front-end for the range equity matrix.

Fills a :class:`TableState` from the command line, runs the engine once
and prints the dashboard, the 13×13 matrix and the colour legend.

Usage::

    python run_equity.py --hero QhQd --board As8dQc
    python run_equity.py --hero QhQd --board As8dQc --villain AhAd
    python run_equity.py --hero AsKs --board 2c7d9h --friend QcQd --exclude AKo --exclude 99

Environment variables (optional — see ``config.yaml``)
------------------------------------------------------
``EQUITY_TABLE_FRIEND_SEATS``   Number of friendly seats (default ``3``).
``EQUITY_TABLE_STRICT_ASSIGN``  Refuse a card placed twice (default ``1``).
``EQUITY_DISPLAY_COLOR``        ANSI colours (default ``1``).
``EQUITY_DISPLAY_TEN_AS_DIGITS`` Show tens as ``10`` on cards (default ``1``).
``EQUITY_LOGGING_LEVEL``        Level for diagnostic logging (default ``WARNING``).
"""

from __future__ import annotations

import argparse
import logging
import sys

from core.cards import parse_cards
from core.errors import InvariantViolation
from core.matrix import parse_cell_label
from tools.equity_tool import EquityTool
from tools.matrix_render import render_dashboard, render_report
from tools.table_state import Slot, TableState
from utils.config import DisplayConfig, TableConfig
from utils.logger import ConsoleLogger, supports_color


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Range equity matrix: your hand against every possible opponent hand",
    )
    parser.add_argument("--hero", type=str, default="", help="Hero's two cards, e.g. QhQd")
    parser.add_argument("--board", type=str, default="", help="Flop/turn/river, e.g. As8dQc")
    parser.add_argument(
        "--villain", type=str, default="",
        help="A specific villain hand; two cards switch to heads-up mode",
    )
    parser.add_argument(
        "--friend", action="append", default=[],
        help="Cards held by a friendly seat (repeatable); they act as blockers",
    )
    parser.add_argument(
        "--exclude", action="append", default=[],
        help="Matrix cell to remove from the villain's range, e.g. AKs (repeatable)",
    )
    parser.add_argument("--summary", action="store_true", help="Print only the dashboard")
    parser.add_argument("--no-legend", action="store_true", help="Hide the colour guide")
    parser.add_argument("--no-color", action="store_true", help="Plain-text output")
    return parser


def fill_state(state: TableState, args: argparse.Namespace) -> None:
    """Assign every card given on the command line to its slot.

    Raises ``ValueError`` on malformed input and :class:`InvariantViolation`
    when a card is placed twice in strict mode.
    """
    groups: list[tuple[str, list[Slot]]] = [
        (args.hero, [Slot.hero(i) for i in range(2)]),
        (args.board, [Slot.board(i) for i in range(5)]),
        (args.villain, [Slot.villain(i) for i in range(2)]),
    ]
    if len(args.friend) > state.config.friend_seats:
        raise ValueError(f"at most {state.config.friend_seats} friend seat(s) configured")
    for seat, text in enumerate(args.friend):
        groups.append((text, [Slot.friend(seat, i) for i in range(2)]))

    for text, slots in groups:
        cards = parse_cards(text)
        if len(cards) > len(slots):
            raise ValueError(f"too many cards in {text!r} (max {len(slots)})")
        for card, slot in zip(cards, slots):
            state.assign(card, slot)

    for label in args.exclude:
        state.toggle_exclusion(parse_cell_label(label))


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    display = DisplayConfig()
    color = display.color and not args.no_color and supports_color()

    logging.basicConfig(level=display.log_level)
    log = ConsoleLogger("CLI", color=color)

    state = TableState(TableConfig())
    try:
        fill_state(state, args)
    except (ValueError, InvariantViolation) as exc:
        log.error(str(exc))
        return 2
    if state.exclusions:
        log.info("excluded from range: " + " ".join(sorted(cell.label for cell in state.exclusions)))

    report = EquityTool().from_state(state)
    if args.summary:
        print(render_dashboard(report, color=color, ten_as_digits=display.ten_as_digits))
    else:
        print(
            render_report(
                report,
                color=color,
                legend=not args.no_legend,
                ten_as_digits=display.ten_as_digits,
            )
        )

    if not report.ready:
        log.warn("no result available yet")
    return 0


if __name__ == "__main__":
    sys.exit(main())
