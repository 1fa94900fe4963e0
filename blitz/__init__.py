"""Top-level package for the Blitz pile race simulator."""

from . import audit, cards, events, game, player, rules, state
from .game import Game, simulate_game
from .state import BlitzConfig, GameOutcome, GameStatus

__all__ = [
    "audit",
    "cards",
    "events",
    "game",
    "player",
    "rules",
    "state",
    "Game",
    "simulate_game",
    "BlitzConfig",
    "GameOutcome",
    "GameStatus",
]
