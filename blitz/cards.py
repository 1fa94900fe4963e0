"""Card abstractions and deck assembly for Blitz."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Final, Iterable, List

MIN_RANK: Final[int] = 1
MAX_RANK: Final[int] = 10


class Gender(str, Enum):
    """Figure printed on the card face; suits come in boy and girl pairs."""

    BOY = "boy"
    GIRL = "girl"


class Suit(str, Enum):
    """Enumeration of the four card colours in a Blitz deck."""

    RED = "Red"
    BLUE = "Blue"
    GREEN = "Green"
    YELLOW = "Yellow"

    @property
    def gender(self) -> Gender:
        if self in (Suit.RED, Suit.BLUE):
            return Gender.BOY
        return Gender.GIRL

    @property
    def initial(self) -> str:
        return self.value[0]


@dataclass(frozen=True, slots=True, eq=False)
class Card:
    """A physical card owned by one player.

    Equality and hashing are by identity: two cards with the same owner,
    suit and rank are still different cards. ``index`` is the card's stable
    position in its owner's freshly assembled deck.
    """

    owner: str
    suit: Suit
    rank: int
    index: int = 0

    def can_play_onto(self, target: Card | None) -> bool:
        """Return ``True`` when this card extends ``target`` on a community pile."""

        if target is None:
            return False
        return target.suit == self.suit and self.rank == target.rank + 1

    def label(self) -> str:
        return f"{self.suit.initial}{self.rank}"

    def __str__(self) -> str:
        return f"Card[{self.suit.value}, {self.rank}]<{self.owner}>"


def player_deck(owner: str) -> List[Card]:
    """Return the 40 cards belonging to ``owner`` in suit-major order."""

    cards: List[Card] = []
    for suit in Suit:
        for rank in range(MIN_RANK, MAX_RANK + 1):
            cards.append(Card(owner=owner, suit=suit, rank=rank, index=len(cards)))
    return cards


def format_cards(cards: Iterable[Card | None]) -> str:
    return " ".join(card.label() if card is not None else "--" for card in cards)
