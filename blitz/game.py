"""Turn loop driving a full Blitz game."""

from __future__ import annotations

import logging
import random
from typing import Any, Sequence

from . import rules
from .cards import Card
from .events import CardPlayed, GameFinished, GameObserver, NullObserver, ReserveRotated
from .player import Player
from .state import BlitzConfig, GameOutcome, GameStatus

__all__ = ["Game", "simulate_game"]

logger = logging.getLogger(__name__)


class Game:
    """Shared community piles plus the seated players.

    ``rng`` must provide ``shuffle`` and ``choice``; a ``random.Random``
    instance is the usual choice. It deals every player's deck and breaks
    ties between legal cards.
    """

    def __init__(
        self,
        config: BlitzConfig | None = None,
        rng: Any | None = None,
        observer: GameObserver | None = None,
    ) -> None:
        self.config = config or BlitzConfig()
        self.rng = rng if rng is not None else random.Random()
        self.observer: GameObserver = observer or NullObserver()
        self._players = [Player(name, self.rng) for name in self.config.seat_names]
        self._piles: list[list[Card]] = []
        self._tick = 0
        self._outcome: GameOutcome | None = None

    @property
    def players(self) -> Sequence[Player]:
        return tuple(self._players)

    @property
    def tick(self) -> int:
        return self._tick

    @property
    def outcome(self) -> GameOutcome | None:
        return self._outcome

    @property
    def status(self) -> GameStatus:
        if self._outcome is None:
            return GameStatus.RUNNING
        return self._outcome.status

    def piles(self) -> tuple[tuple[Card, ...], ...]:
        """Return the community piles, each listed bottom-to-top."""

        return tuple(tuple(pile) for pile in self._piles)

    def run(self) -> GameOutcome:
        """Play turn steps until somebody wins or the tick ceiling is reached."""

        outcome = self._outcome
        while outcome is None:
            outcome = self.step()
        return outcome

    def step(self) -> GameOutcome | None:
        """Give every player one turn; return the outcome once the game is over."""

        if self._outcome is not None:
            return self._outcome

        self._tick += 1
        for player in self._players:
            if self._take_turn(player):
                return self._outcome

        if self.config.max_ticks is not None and self._tick >= self.config.max_ticks:
            self._finish(GameOutcome(status=GameStatus.STALEMATE, ticks=self._tick))
        return self._outcome

    def _take_turn(self, player: Player) -> bool:
        visible = player.visible_cards()
        playable = rules.legal_cards(visible, self._piles)
        if not playable:
            player.rotate_reserve()
            logger.debug("tick %d: %s has no legal card, rotating reserve", self._tick, player.name)
            self.observer.notify(
                ReserveRotated(
                    tick=self._tick,
                    player=player.name,
                    visible=tuple(player.visible_cards()),
                    waste_top=player.waste_top,
                )
            )
            return False

        card = self.rng.choice(playable)
        pile_index = self._place(card)
        got_blitz = player.play_card(card)
        logger.debug("tick %d: %s plays %s onto pile %d", self._tick, player.name, card, pile_index)
        self.observer.notify(
            CardPlayed(
                tick=self._tick,
                player=player.name,
                visible=tuple(visible),
                legal=tuple(playable),
                card=card,
                pile_index=pile_index,
                piles=self.piles(),
                stock_remaining=player.stock_size,
            )
        )
        if got_blitz:
            self._finish(
                GameOutcome(
                    status=GameStatus.FINISHED,
                    ticks=self._tick,
                    winner=player.name,
                    winning_card=card,
                )
            )
            return True
        return False

    def _place(self, card: Card) -> int:
        if rules.starts_pile(card):
            self._piles.append([card])
            return len(self._piles) - 1
        pile_index = rules.find_target_pile(card, self._piles)
        if pile_index is None:
            raise rules.UnplayableCardError(f"{card} does not extend any community pile")
        self._piles[pile_index].append(card)
        return pile_index

    def _finish(self, outcome: GameOutcome) -> None:
        self._outcome = outcome
        if outcome.winner is not None:
            logger.info("%s emptied their stock after %d tick(s)", outcome.winner, outcome.ticks)
        else:
            logger.info("no winner after %d tick(s), stopping", outcome.ticks)
        self.observer.notify(GameFinished(outcome=outcome, piles=self.piles()))


def simulate_game(
    config: BlitzConfig | None = None,
    rng: Any | None = None,
    observer: GameObserver | None = None,
) -> GameOutcome:
    """Run one game to completion with default settings unless overridden."""

    return Game(config, rng=rng, observer=observer).run()
