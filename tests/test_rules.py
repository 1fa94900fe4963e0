"""Tests covering Blitz rule helpers."""

from __future__ import annotations

from blitz import rules
from blitz.cards import Card, Suit


def _pile(owner: str, suit: Suit, height: int) -> list[Card]:
    return [Card(owner, suit, rank) for rank in range(1, height + 1)]


def test_starts_pile_only_for_rank_one() -> None:
    assert rules.starts_pile(Card("Plow", Suit.BLUE, 1))
    assert not rules.starts_pile(Card("Plow", Suit.BLUE, 2))


def test_find_target_pile_matches_suit_and_rank() -> None:
    piles = [_pile("Plow", Suit.RED, 3), _pile("Plow", Suit.BLUE, 2)]

    assert rules.find_target_pile(Card("Cart", Suit.BLUE, 3), piles) == 1
    assert rules.find_target_pile(Card("Cart", Suit.RED, 4), piles) == 0
    assert rules.find_target_pile(Card("Cart", Suit.RED, 3), piles) is None
    assert rules.find_target_pile(Card("Cart", Suit.GREEN, 2), piles) is None


def test_find_target_pile_prefers_oldest_pile() -> None:
    piles = [_pile("Plow", Suit.RED, 2), _pile("Pump", Suit.RED, 2)]

    assert rules.find_target_pile(Card("Cart", Suit.RED, 3), piles) == 0


def test_legal_cards_keeps_visible_order() -> None:
    piles = [_pile("Plow", Suit.YELLOW, 4)]
    visible = [
        Card("Cart", Suit.YELLOW, 6),
        Card("Cart", Suit.YELLOW, 5),
        Card("Cart", Suit.RED, 1),
        Card("Cart", Suit.RED, 2),
    ]

    assert rules.legal_cards(visible, piles) == [visible[1], visible[2]]
    assert rules.legal_cards(visible, []) == [visible[2]]
    assert rules.legal_cards([], piles) == []
