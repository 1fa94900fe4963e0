"""Rule utilities and constants for Blitz."""

from __future__ import annotations

from typing import Final, Sequence

from .cards import MIN_RANK, Card

__all__ = [
    "CANDIDATE_SLOTS",
    "STOCK_SIZE",
    "ROTATE_COUNT",
    "DECK_SIZE",
    "DEFAULT_PLAYER_NAMES",
    "UnplayableCardError",
    "InvalidStateError",
    "starts_pile",
    "find_target_pile",
    "is_legal",
    "legal_cards",
]

CANDIDATE_SLOTS: Final[int] = 3
STOCK_SIZE: Final[int] = 10
ROTATE_COUNT: Final[int] = 3
DECK_SIZE: Final[int] = 40
DEFAULT_PLAYER_NAMES: Final[tuple[str, ...]] = ("Plow", "Bucket", "Cart", "Pump")


class UnplayableCardError(RuntimeError):
    """Raised when a player is asked to play a card it cannot reach."""


class InvalidStateError(RuntimeError):
    """Raised when player bookkeeping reaches an impossible state."""


def starts_pile(card: Card) -> bool:
    """Return ``True`` if ``card`` may open a new community pile."""

    return card.rank == MIN_RANK


def find_target_pile(card: Card, piles: Sequence[Sequence[Card]]) -> int | None:
    """Return the index of the pile whose top ``card`` extends, if any.

    Piles are listed bottom-to-top. With several players two piles of the
    same suit can share a top rank; the oldest pile wins.
    """

    for idx, pile in enumerate(piles):
        if pile and card.can_play_onto(pile[-1]):
            return idx
    return None


def is_legal(card: Card, piles: Sequence[Sequence[Card]]) -> bool:
    return starts_pile(card) or find_target_pile(card, piles) is not None


def legal_cards(visible: Sequence[Card], piles: Sequence[Sequence[Card]]) -> list[Card]:
    """Filter ``visible`` down to the cards playable against ``piles``."""

    return [card for card in visible if is_legal(card, piles)]
