from __future__ import annotations

from typing import Any, Sequence

import pytest

from blitz.cards import Card, Suit, player_deck
from blitz.player import Player
from blitz.rules import InvalidStateError, UnplayableCardError


class KeepOrder:
    def shuffle(self, seq: list[Any]) -> None:
        return None

    def choice(self, seq: Sequence[Any]) -> Any:
        return seq[0]


class ReverseShuffle:
    def shuffle(self, seq: list[Any]) -> None:
        seq.reverse()


def _labels(cards: Sequence[Card | None]) -> list[str]:
    return [card.label() if card is not None else "--" for card in cards]


def _deck_labels() -> list[str]:
    return [card.label() for card in player_deck("Plow")]


def test_deal_layout_follows_shuffled_order() -> None:
    deck = _deck_labels()
    player = Player("Plow", KeepOrder())
    snapshot = player.snapshot()

    assert _labels(snapshot.candidates) == deck[:3]
    assert _labels(reversed(snapshot.stock)) == deck[3:13]
    assert _labels(reversed(snapshot.reserve)) == deck[13:]
    assert snapshot.waste == ()
    assert snapshot.card_count == 40
    assert player.stock_size == 10


def test_deal_uses_injected_shuffle() -> None:
    player = Player("Plow", ReverseShuffle())
    snapshot = player.snapshot()

    assert _labels(snapshot.candidates) == ["Y10", "Y9", "Y8"]
    assert snapshot.stock[-1].label() == "Y7"


def test_visible_cards_order() -> None:
    player = Player("Plow", KeepOrder())

    assert _labels(player.visible_cards()) == ["R4", "R1", "R2", "R3"]

    player.rotate_reserve()
    assert _labels(player.visible_cards()) == ["B6", "R4", "R1", "R2", "R3"]


def test_visible_cards_is_pure() -> None:
    player = Player("Plow", KeepOrder())
    before = player.snapshot()

    player.visible_cards()
    player.visible_cards()

    assert player.snapshot() == before


def test_rotation_cycles_through_whole_reserve() -> None:
    deck = _deck_labels()
    player = Player("Plow", KeepOrder())

    for _ in range(9):
        player.rotate_reserve()
        assert player.card_count == 40

    snapshot = player.snapshot()
    assert snapshot.reserve == ()
    assert _labels(snapshot.waste) == deck[13:]
    assert player.waste_top is snapshot.waste[-1]

    player.rotate_reserve()
    snapshot = player.snapshot()
    assert _labels(snapshot.waste) == deck[13:16]
    assert _labels(reversed(snapshot.reserve)) == deck[16:]
    assert snapshot.card_count == 40


def test_rotation_handles_partial_groups() -> None:
    player = Player("Plow", KeepOrder())
    player.rotate_reserve()
    assert player.play_card(player.visible_cards()[0]) is False

    for _ in range(8):
        player.rotate_reserve()
    assert len(player.snapshot().reserve) == 0
    assert len(player.snapshot().waste) == 26

    for _ in range(9):
        player.rotate_reserve()
    snapshot = player.snapshot()
    assert len(snapshot.reserve) == 0
    assert len(snapshot.waste) == 26
    assert snapshot.card_count == 39


def test_rotation_with_nothing_left_is_a_no_op() -> None:
    player = Player("Plow", KeepOrder())
    while True:
        player.rotate_reserve()
        top = player.waste_top
        if top is None:
            break
        player.play_card(top)

    before = player.snapshot()
    player.rotate_reserve()

    assert player.snapshot() == before
    assert before.card_count == 13


def test_play_waste_top() -> None:
    player = Player("Plow", KeepOrder())
    player.rotate_reserve()
    top = player.waste_top

    assert top is not None
    assert player.play_card(top) is False
    assert player.waste_top is not None
    assert player.waste_top.label() == "B5"
    assert player.card_count == 39


def test_play_stock_top() -> None:
    player = Player("Plow", KeepOrder())
    stock_top = player.snapshot().stock[-1]

    assert player.play_card(stock_top) is False
    assert player.stock_size == 9
    assert _labels(player.snapshot().candidates) == ["R1", "R2", "R3"]


def test_play_candidate_refills_from_stock() -> None:
    player = Player("Plow", KeepOrder())
    candidate = player.snapshot().candidates[1]

    assert candidate is not None
    assert player.play_card(candidate) is False
    assert _labels(player.snapshot().candidates) == ["R1", "R4", "R3"]
    assert player.stock_size == 9
    assert player.card_count == 39


def test_emptying_stock_from_the_top_wins() -> None:
    player = Player("Plow", KeepOrder())
    results = [player.play_card(player.snapshot().stock[-1]) for _ in range(10)]

    assert results == [False] * 9 + [True]
    assert player.stock_size == 0


def test_emptying_stock_through_candidate_refill_wins() -> None:
    player = Player("Plow", KeepOrder())
    for _ in range(9):
        player.play_card(player.snapshot().stock[-1])
    candidate = player.snapshot().candidates[0]

    assert candidate is not None
    assert player.play_card(candidate) is True
    assert player.snapshot().candidates[0].label() == "B3"


def test_candidate_with_empty_stock_is_invalid_state() -> None:
    player = Player("Plow", KeepOrder())
    for _ in range(10):
        player.play_card(player.snapshot().stock[-1])
    candidate = player.snapshot().candidates[2]

    assert candidate is not None
    with pytest.raises(InvalidStateError, match="Invalid state"):
        player.play_card(candidate)


def test_unreachable_card_is_rejected() -> None:
    player = Player("Plow", KeepOrder())
    buried = player.snapshot().reserve[0]

    with pytest.raises(UnplayableCardError, match="Cannot play the card"):
        player.play_card(buried)
    assert player.card_count == 40


def test_lookalike_card_is_rejected() -> None:
    player = Player("Plow", KeepOrder())
    lookalike = Card("Plow", Suit.RED, 1)

    with pytest.raises(UnplayableCardError) as excinfo:
        player.play_card(lookalike)
    assert "Card[Red, 1]<Plow>" in str(excinfo.value)
    assert player.card_count == 40
