"""Card encoding, normalisation and display utilities.

Maps the standard 52-card deck to a flat ``[0, 51]`` integer space
for compact storage and a fixed total order.

Encoding: ``index = rank_idx * 4 + suit_idx``
where ``RANKS = '23456789TJQKA'`` and ``SUITS = 'cdhs'``.

This module is the **single source of truth** for card-string helpers
used across ``core`` and ``tools``.
"""

from __future__ import annotations

RANKS = "23456789TJQKA"
"""Ordered rank characters (``2``–``A``). Index position is the rank id."""

SUITS = "cdhs"
"""Ordered suit characters (clubs, diamonds, hearts, spades)."""

SUIT_SYMBOLS: dict[str, str] = {"c": "♣", "d": "♦", "h": "♥", "s": "♠"}

_SYMBOL_TO_SUIT: dict[str, str] = {symbol: suit for suit, symbol in SUIT_SYMBOLS.items()}


# ── Index encoding ────────────────────────────────────────────────


def card_to_index(card: str) -> int:
    """Convert a two-character card (e.g. ``'As'``) to an integer index.

    Raises ``ValueError`` if *card* contains invalid rank or suit.
    """
    if len(card) < 2:
        raise ValueError(f"Invalid card string: {card!r}")
    rank, suit = card[0], card[1]
    try:
        rank_idx = RANKS.index(rank)
        suit_idx = SUITS.index(suit)
    except ValueError:
        raise ValueError(f"Invalid card string: {card!r}") from None
    return rank_idx * len(SUITS) + suit_idx


def index_to_card(index: int) -> str:
    """Convert an integer index back to a two-character card string."""
    if not 0 <= index <= 51:
        raise ValueError(f"Card index out of range [0, 51]: {index}")
    rank_idx, suit_idx = divmod(index, len(SUITS))
    return f"{RANKS[rank_idx]}{SUITS[suit_idx]}"


# ── Normalisation (canonical ``Xs`` format) ───────────────────────


def normalize_card(card: str) -> str | None:
    """Normalise a card string to canonical ``Xs`` format.

    Accepts common variants like ``"10h"`` → ``"Th"``, ``"aS"`` → ``"As"``
    and suit symbols (``"Q♥"`` → ``"Qh"``).
    Returns ``None`` if the input is not a valid card.
    """
    cleaned = card.strip().replace("10", "T")
    for symbol, suit in _SYMBOL_TO_SUIT.items():
        cleaned = cleaned.replace(symbol, suit)
    cleaned = cleaned.upper()
    if len(cleaned) != 2:
        return None
    rank = cleaned[0]
    suit = cleaned[1].lower()
    if rank not in RANKS or suit not in SUITS:
        return None
    return f"{rank}{suit}"


def split_cards(text: str) -> list[str]:
    """Split a compact run like ``"As8dQc"`` or ``"As 8d,Qc"`` into tokens.

    Tokens are not validated; pass them through :func:`normalize_card`.
    """
    tokens: list[str] = []
    raw = text.replace(",", " ").split()
    for chunk in raw:
        idx = 0
        while idx < len(chunk):
            width = 3 if chunk.startswith("10", idx) else 2
            tokens.append(chunk[idx : idx + width])
            idx += width
    return tokens


def street_from_board(board_cards: list[str]) -> str:
    """Infer the current street from the number of community cards."""
    count = len(board_cards)
    if count >= 5:
        return "river"
    if count == 4:
        return "turn"
    if count >= 3:
        return "flop"
    return "preflop"


# ── Display ───────────────────────────────────────────────────────


def rank_label(rank: str, ten_as_digits: bool = False) -> str:
    """Return the printable rank (``"T"`` or ``"10"`` for tens)."""
    if rank == "T" and ten_as_digits:
        return "10"
    return rank
