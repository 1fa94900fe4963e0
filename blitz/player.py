"""Per-player pile state machine for Blitz."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, List, Sequence

from .cards import Card, format_cards, player_deck
from .rules import (
    CANDIDATE_SLOTS,
    ROTATE_COUNT,
    STOCK_SIZE,
    InvalidStateError,
    UnplayableCardError,
)

__all__ = ["Player", "PlayerSnapshot"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class PlayerSnapshot:
    """Read-only copy of a player's piles.

    Piles are listed bottom-to-top; ``candidates`` keeps slot order and uses
    ``None`` for an empty slot.
    """

    name: str
    stock: tuple[Card, ...]
    reserve: tuple[Card, ...]
    waste: tuple[Card, ...]
    candidates: tuple[Card | None, ...]

    @property
    def card_count(self) -> int:
        occupied = sum(1 for card in self.candidates if card is not None)
        return len(self.stock) + len(self.reserve) + len(self.waste) + occupied

    def cards(self) -> list[Card]:
        """Return every card the player still holds, in no particular order."""

        held = [card for card in self.candidates if card is not None]
        return held + list(self.stock) + list(self.reserve) + list(self.waste)


class Player:
    """One seat at the table together with its stock, reserve, waste and candidates.

    The pile lists are private; callers go through :meth:`visible_cards`,
    :meth:`rotate_reserve`, :meth:`play_card` and :meth:`snapshot`.
    """

    def __init__(self, name: str, rng: Any) -> None:
        self.name = name
        deck = player_deck(name)
        rng.shuffle(deck)
        # Stored bottom-to-top so the top card is always ``[-1]``.
        self._candidates: List[Card | None] = list(deck[:CANDIDATE_SLOTS])
        self._stock: List[Card] = list(reversed(deck[CANDIDATE_SLOTS : CANDIDATE_SLOTS + STOCK_SIZE]))
        self._reserve: List[Card] = list(reversed(deck[CANDIDATE_SLOTS + STOCK_SIZE :]))
        self._waste: List[Card] = []

    def __repr__(self) -> str:
        return (
            f"Player({self.name!r}, stock={len(self._stock)}, reserve={len(self._reserve)}, "
            f"waste={len(self._waste)}, candidates=[{format_cards(self._candidates)}])"
        )

    @property
    def stock_size(self) -> int:
        return len(self._stock)

    @property
    def waste_top(self) -> Card | None:
        return self._waste[-1] if self._waste else None

    @property
    def card_count(self) -> int:
        return self.snapshot().card_count

    def snapshot(self) -> PlayerSnapshot:
        return PlayerSnapshot(
            name=self.name,
            stock=tuple(self._stock),
            reserve=tuple(self._reserve),
            waste=tuple(self._waste),
            candidates=tuple(self._candidates),
        )

    def rotate_reserve(self) -> None:
        """Flip up to three reserve cards onto the waste pile.

        An exhausted reserve is rebuilt from the waste pile turned over, after
        which the flip is attempted once more.
        """

        if not self._reserve:
            if not self._waste:
                return
            self._reserve = list(reversed(self._waste))
            self._waste = []
            logger.debug("%s turned the waste pile over (%d cards)", self.name, len(self._reserve))
        for _ in range(min(ROTATE_COUNT, len(self._reserve))):
            self._waste.append(self._reserve.pop())

    def visible_cards(self) -> list[Card]:
        """Return waste top, stock top and occupied candidates, in that order."""

        visible: list[Card] = []
        if self._waste:
            visible.append(self._waste[-1])
        if self._stock:
            visible.append(self._stock[-1])
        visible.extend(card for card in self._candidates if card is not None)
        return visible

    def play_card(self, card: Card) -> bool:
        """Remove ``card`` from the pile it is playable from.

        Returns ``True`` when the stock pile is empty afterwards, which wins
        the game.
        """

        if self._waste and self._waste[-1] is card:
            self._waste.pop()
            return not self._stock
        if self._stock and self._stock[-1] is card:
            self._stock.pop()
            return not self._stock
        slot = _slot_of(self._candidates, card)
        if slot is None:
            raise UnplayableCardError(
                f"Cannot play the card {card} as it is not in any of the playable piles: "
                f"[{', '.join(str(c) for c in self.visible_cards())}]"
            )
        if not self._stock:
            raise InvalidStateError("Invalid state - unexpected empty stock pile")
        self._candidates[slot] = self._stock.pop()
        return not self._stock


def _slot_of(candidates: Sequence[Card | None], card: Card) -> int | None:
    for idx, candidate in enumerate(candidates):
        if candidate is card:
            return idx
    return None
