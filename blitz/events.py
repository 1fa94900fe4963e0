"""Event records emitted by the game loop and the observers that consume them."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Protocol, Union

from .cards import Card, format_cards
from .state import GameOutcome

__all__ = [
    "CardPlayed",
    "ReserveRotated",
    "GameFinished",
    "GameEvent",
    "GameObserver",
    "EventLog",
    "CompositeObserver",
    "LoggingObserver",
    "NullObserver",
]

Piles = tuple[tuple[Card, ...], ...]


@dataclass(frozen=True, slots=True)
class CardPlayed:
    """A card was placed on a community pile."""

    tick: int
    player: str
    visible: tuple[Card, ...]
    legal: tuple[Card, ...]
    card: Card
    pile_index: int
    piles: Piles
    stock_remaining: int


@dataclass(frozen=True, slots=True)
class ReserveRotated:
    """A player had no legal card and flipped their reserve instead."""

    tick: int
    player: str
    visible: tuple[Card, ...]
    waste_top: Card | None


@dataclass(frozen=True, slots=True)
class GameFinished:
    """The game ended with a winner or hit its tick ceiling."""

    outcome: GameOutcome
    piles: Piles


GameEvent = Union[CardPlayed, ReserveRotated, GameFinished]


class GameObserver(Protocol):
    """Sink for one-way game notifications."""

    def notify(self, event: GameEvent) -> None: ...


class NullObserver:
    def notify(self, event: GameEvent) -> None:
        return None


@dataclass(slots=True)
class EventLog:
    """In-memory recorder, optionally keeping only the newest ``max_events``."""

    max_events: int | None = None
    events: list[GameEvent] = field(default_factory=list)

    def notify(self, event: GameEvent) -> None:
        self.events.append(event)
        if self.max_events is not None:
            excess = len(self.events) - self.max_events
            if excess > 0:
                del self.events[:excess]

    def of_type(self, kind: type) -> list[GameEvent]:
        return [event for event in self.events if isinstance(event, kind)]


class CompositeObserver:
    """Fan a single event stream out to several observers in order."""

    def __init__(self, *observers: GameObserver) -> None:
        self.observers = observers

    def notify(self, event: GameEvent) -> None:
        for observer in self.observers:
            observer.notify(event)


class LoggingObserver:
    """Forward events to a standard library logger."""

    def __init__(self, logger: logging.Logger | None = None, level: int = logging.INFO) -> None:
        self.logger = logger or logging.getLogger("blitz.trace")
        self.level = level

    def notify(self, event: GameEvent) -> None:
        if isinstance(event, CardPlayed):
            self.logger.log(
                self.level,
                "tick %d: %s plays %s (visible %s, playable %s, stock %d)",
                event.tick,
                event.player,
                event.card.label(),
                format_cards(event.visible),
                format_cards(event.legal),
                event.stock_remaining,
            )
        elif isinstance(event, ReserveRotated):
            self.logger.log(
                self.level,
                "tick %d: %s flips reserve, waste shows %s",
                event.tick,
                event.player,
                event.waste_top.label() if event.waste_top is not None else "--",
            )
        elif isinstance(event, GameFinished):
            outcome = event.outcome
            if outcome.winner is not None:
                self.logger.log(self.level, "%s wins after %d tick(s)", outcome.winner, outcome.ticks)
            else:
                self.logger.log(self.level, "game stalled after %d tick(s)", outcome.ticks)
