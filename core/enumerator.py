"""Opponent-hand enumeration.

Two modes:

* **Range mode** — every unordered two-card combination of the remaining
  deck, emitted once as ``(high, low)`` with ``high > low`` in card order.
* **Heads-up mode** — exactly the declared villain hand.

Matrix cells get their own fixed-shape generator (:func:`cell_combos`)
so the pair / suited / offsuit filter lives in one place.
"""

from __future__ import annotations

import logging
from typing import Iterator, Sequence

from core.cards import Card, KnownCardSet, remaining_deck
from core.errors import InsufficientInformation
from core.matrix import MatrixCell, Shape
from utils.card_utils import SUITS

_log = logging.getLogger("equity.engine")

OpponentHand = tuple[Card, Card]


def require_evaluable(hero: Sequence[Card], board: Sequence[Card]) -> None:
    """Raise :class:`InsufficientInformation` unless hero has 2 and board ≥ 3 cards."""
    if len(hero) < 2 or len(board) < 3:
        raise InsufficientInformation(len(hero), len(board))


def is_heads_up(villain: Sequence[Card] | None) -> bool:
    return villain is not None and len(villain) == 2


def enumerate_range(known: KnownCardSet) -> Iterator[OpponentHand]:
    """All unordered pairs of unknown cards, each exactly once."""
    deck = sorted(remaining_deck(known), reverse=True)
    for i, high in enumerate(deck):
        for low in deck[i + 1 :]:
            yield high, low


def enumerate_heads_up(
    villain: Sequence[Card],
    held_elsewhere: KnownCardSet | None = None,
) -> Iterator[OpponentHand]:
    """The declared villain hand, unless one of its cards sits in another slot."""
    first, second = villain
    if first == second or (held_elsewhere is not None and held_elsewhere.blocks(first, second)):
        _log.warning("villain hand %s%s overlaps another slot, excluded", first, second)
        return
    yield (first, second) if first > second else (second, first)


def opponent_hands(
    hero: Sequence[Card],
    board: Sequence[Card],
    known: KnownCardSet,
    villain: Sequence[Card] | None = None,
    friends: Sequence[Sequence[Card]] = (),
) -> Iterator[OpponentHand]:
    """Validate the inputs, then enumerate in the mode the villain implies."""
    require_evaluable(hero, board)
    if is_heads_up(villain):
        return enumerate_heads_up(villain, KnownCardSet.from_hands(hero, board, *friends))
    return enumerate_range(known)


def cell_combos(cell: MatrixCell) -> Iterator[OpponentHand]:
    """Every concrete combo of a matrix cell: 6 pairs, 4 suited or 12 offsuit."""
    shape = cell.shape
    for s1 in SUITS:
        for s2 in SUITS:
            if shape is Shape.PAIR:
                if s1 >= s2:
                    continue
                yield Card.of(cell.high_rank, s2), Card.of(cell.high_rank, s1)
            elif shape is Shape.SUITED:
                if s1 != s2:
                    continue
                yield Card.of(cell.high_rank, s1), Card.of(cell.low_rank, s2)
            else:
                if s1 == s2:
                    continue
                yield Card.of(cell.high_rank, s1), Card.of(cell.low_rank, s2)
