"""table_state.py — Mutable selection state owned by the presentation layer.

The UI edits slots here (hero, board, optional villain, friendly seats),
toggles matrix exclusions, then hands :meth:`TableState.snapshot` to the
engine. The engine never reaches back into this object.

Usage::

    from tools.table_state import Slot, TableState

    state = TableState()
    state.select(Slot.hero(0))
    state.assign(Card.parse("Qh"))
    report = RangeEquityEngine().compute(state.snapshot())
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from core.cards import Card, KnownCardSet, full_deck
from core.errors import InvariantViolation
from core.math_engine import MAX_BOARD_CARDS, MAX_HAND_CARDS, EngineInput
from core.matrix import MatrixCell, toggle_exclusion
from utils.config import TableConfig

BOARD_SLOTS = MAX_BOARD_CARDS
HAND_SLOTS = MAX_HAND_CARDS


class Role(str, Enum):
    HERO = "hero"
    VILLAIN = "villain"
    FRIEND = "friend"
    BOARD = "board"


@dataclass(frozen=True, slots=True)
class Slot:
    """Address of one card position. ``seat`` is only used by friends."""

    role: Role
    index: int
    seat: int = 0

    @classmethod
    def hero(cls, index: int) -> Slot:
        return cls(Role.HERO, index)

    @classmethod
    def villain(cls, index: int) -> Slot:
        return cls(Role.VILLAIN, index)

    @classmethod
    def friend(cls, seat: int, index: int) -> Slot:
        return cls(Role.FRIEND, index, seat)

    @classmethod
    def board(cls, index: int) -> Slot:
        return cls(Role.BOARD, index)

    @property
    def label(self) -> str:
        if self.role is Role.BOARD:
            return "Flop" if self.index < 3 else ("Turn" if self.index == 3 else "River")
        if self.role is Role.FRIEND:
            return f"P{self.seat + 2} C{self.index + 1}"
        return f"{self.role.value.title()} C{self.index + 1}"


class TableState:
    """Hero / villain / friends / board slots plus manual matrix exclusions."""

    def __init__(self, config: TableConfig | None = None) -> None:
        self.config = config or TableConfig()
        self.reset()

    def reset(self) -> None:
        """Clear every slot, the selection and the exclusions."""
        self._hero: list[Card | None] = [None] * HAND_SLOTS
        self._villain: list[Card | None] = [None] * HAND_SLOTS
        self._friends: list[list[Card | None]] = [
            [None] * HAND_SLOTS for _ in range(self.config.friend_seats)
        ]
        self._board: list[Card | None] = [None] * BOARD_SLOTS
        self.selected: Slot | None = None
        self.exclusions: frozenset[MatrixCell] = frozenset()

    # ── Slot access ───────────────────────────────────────────────

    def _row(self, slot: Slot) -> list[Card | None]:
        if slot.role is Role.HERO:
            row = self._hero
        elif slot.role is Role.VILLAIN:
            row = self._villain
        elif slot.role is Role.BOARD:
            row = self._board
        else:
            if not 0 <= slot.seat < len(self._friends):
                raise IndexError(f"No friend seat {slot.seat}")
            row = self._friends[slot.seat]
        if not 0 <= slot.index < len(row):
            raise IndexError(f"No slot {slot.index} for {slot.role.value}")
        return row

    def get(self, slot: Slot) -> Card | None:
        return self._row(slot)[slot.index]

    def slots(self) -> list[Slot]:
        """Every addressable slot in display order."""
        result = [Slot.hero(i) for i in range(HAND_SLOTS)]
        result += [Slot.board(i) for i in range(BOARD_SLOTS)]
        result += [Slot.villain(i) for i in range(HAND_SLOTS)]
        for seat in range(len(self._friends)):
            result += [Slot.friend(seat, i) for i in range(HAND_SLOTS)]
        return result

    def owner_of(self, card: Card) -> Slot | None:
        for slot in self.slots():
            if self.get(slot) == card:
                return slot
        return None

    # ── Editing ───────────────────────────────────────────────────

    def select(self, slot: Slot | None) -> None:
        if slot is not None:
            self._row(slot)
        self.selected = slot

    def assign(self, card: Card, slot: Slot | None = None) -> bool:
        """Place *card* in *slot* (default: the selected slot).

        Returns ``False`` when no slot is given or selected. In strict
        mode a card already placed in another slot raises
        :class:`InvariantViolation`; otherwise the duplicate is allowed
        and the engine treats it as known.
        """
        target = slot or self.selected
        if target is None:
            return False
        owner = self.owner_of(card)
        if owner is not None and owner != target and self.config.strict_assign:
            raise InvariantViolation(f"{card} is already in {owner.label}")
        self._row(target)[target.index] = card
        self.selected = None
        return True

    def clear(self, slot: Slot | None = None) -> bool:
        target = slot or self.selected
        if target is None:
            return False
        self._row(target)[target.index] = None
        self.selected = None
        return True

    def toggle_exclusion(self, cell: MatrixCell) -> bool:
        """Flip a matrix cell; returns ``True`` when it is now excluded."""
        self.exclusions = toggle_exclusion(self.exclusions, cell)
        return cell in self.exclusions

    # ── Derived views ─────────────────────────────────────────────

    @property
    def hero(self) -> tuple[Card, ...]:
        return tuple(card for card in self._hero if card is not None)

    @property
    def villain(self) -> tuple[Card, ...]:
        return tuple(card for card in self._villain if card is not None)

    @property
    def board(self) -> tuple[Card, ...]:
        return tuple(card for card in self._board if card is not None)

    @property
    def friends(self) -> tuple[tuple[Card, ...], ...]:
        return tuple(tuple(card for card in seat if card is not None) for seat in self._friends)

    @property
    def is_heads_up(self) -> bool:
        return len(self.villain) == HAND_SLOTS

    def known_cards(self) -> KnownCardSet:
        return KnownCardSet.from_hands(self._hero, self._board, self._villain, *self._friends)

    def is_known(self, card: Card) -> bool:
        return self.known_cards().is_known(card)

    def available_cards(self) -> list[Card]:
        """Cards a selector may still offer, ascending."""
        known = self.known_cards()
        return [card for card in full_deck() if not known.is_known(card)]

    def snapshot(self) -> EngineInput:
        return EngineInput.build(
            hero=self.hero,
            board=self.board,
            villain=self.villain,
            friends=self.friends,
            exclusions=self.exclusions,
        )
