"""Card & deck model.

A :class:`Card` is an immutable ``(rank, suit)`` value. Cards are totally
ordered by their deck index (``rank_idx * 4 + suit_idx``), which gives the
enumerator a fixed tie-break for emitting unordered pairs once.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator

from treys import Card as TreysCard

from utils.card_utils import (
    RANKS,
    SUITS,
    SUIT_SYMBOLS,
    card_to_index,
    index_to_card,
    normalize_card,
    rank_label,
    split_cards,
)


@dataclass(frozen=True, slots=True, order=True)
class Card:
    """A playing card; compares by deck index."""

    index: int

    def __post_init__(self) -> None:
        if not 0 <= self.index <= 51:
            raise ValueError(f"Card index out of range [0, 51]: {self.index}")

    @classmethod
    def of(cls, rank: str, suit: str) -> Card:
        return cls(card_to_index(f"{rank}{suit}"))

    @classmethod
    def parse(cls, text: str) -> Card:
        """Parse ``"Ah"``, ``"10h"``, ``"aH"`` or ``"A♥"``.

        Raises ``ValueError`` on anything else.
        """
        normalized = normalize_card(text) if isinstance(text, str) else None
        if normalized is None:
            raise ValueError(f"Invalid card string: {text!r}")
        return cls(card_to_index(normalized))

    @property
    def rank(self) -> str:
        return RANKS[self.index // len(SUITS)]

    @property
    def suit(self) -> str:
        return SUITS[self.index % len(SUITS)]

    @property
    def code(self) -> str:
        """Compact ``"Th"`` form."""
        return index_to_card(self.index)

    def display(self, ten_as_digits: bool = True) -> str:
        """Symbolic ``"10♥"`` form."""
        return f"{rank_label(self.rank, ten_as_digits)}{SUIT_SYMBOLS[self.suit]}"

    def to_treys(self) -> int:
        return TreysCard.new(self.code)

    def __str__(self) -> str:
        return self.code

    def __repr__(self) -> str:
        return f"Card({self.code!r})"


_FULL_DECK: tuple[Card, ...] = tuple(Card(i) for i in range(52))


def full_deck() -> tuple[Card, ...]:
    """All 52 cards in ascending order."""
    return _FULL_DECK


def parse_cards(texts: Iterable[str] | str) -> list[Card]:
    """Parse a card list or a compact run such as ``"As8dQc"``."""
    if isinstance(texts, str):
        texts = split_cards(texts)
    return [Card.parse(text) for text in texts]


class KnownCardSet:
    """Cards already held by hero, board, villain or friends.

    A card assigned to two slots simply appears once; the set never
    raises on duplicates.
    """

    __slots__ = ("_cards",)

    def __init__(self, cards: Iterable[Card] = ()) -> None:
        self._cards: frozenset[Card] = frozenset(cards)

    @classmethod
    def from_hands(cls, *groups: Iterable[Card | None]) -> KnownCardSet:
        """Union of card groups; ``None`` entries (empty slots) are skipped."""
        return cls(card for group in groups for card in group if card is not None)

    def is_known(self, card: Card) -> bool:
        return card in self._cards

    def blocks(self, *cards: Card) -> bool:
        """``True`` when any of *cards* is known."""
        return any(card in self._cards for card in cards)

    @property
    def cards(self) -> frozenset[Card]:
        return self._cards

    def __contains__(self, card: object) -> bool:
        return card in self._cards

    def __iter__(self) -> Iterator[Card]:
        return iter(sorted(self._cards))

    def __len__(self) -> int:
        return len(self._cards)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, KnownCardSet):
            return self._cards == other._cards
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._cards)

    def __repr__(self) -> str:
        return f"KnownCardSet({' '.join(card.code for card in self)})"


def remaining_deck(known: KnownCardSet | Iterable[Card]) -> frozenset[Card]:
    """All 52 cards minus *known*. An empty result is valid."""
    known_cards = known.cards if isinstance(known, KnownCardSet) else frozenset(known)
    return frozenset(card for card in _FULL_DECK if card not in known_cards)
