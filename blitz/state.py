"""Configuration and outcome records for a Blitz game."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .cards import Card
from .rules import DEFAULT_PLAYER_NAMES

__all__ = ["BlitzConfig", "GameStatus", "GameOutcome", "DEFAULT_MAX_TICKS"]

DEFAULT_MAX_TICKS = 10_000


class GameStatus(str, Enum):
    """Lifecycle states of a single game."""

    RUNNING = "running"
    FINISHED = "finished"
    STALEMATE = "stalemate"


@dataclass(slots=True)
class BlitzConfig:
    """Runtime configuration for a single Blitz game.

    ``max_ticks`` caps the number of passes over the table; ``None`` lets the
    game run until somebody empties their stock, however long that takes.
    """

    num_players: int = 4
    max_ticks: int | None = DEFAULT_MAX_TICKS
    player_names: tuple[str, ...] = DEFAULT_PLAYER_NAMES

    def __post_init__(self) -> None:
        if len(set(self.player_names)) != len(self.player_names):
            raise ValueError("player names must be unique")
        if not 1 <= self.num_players <= len(self.player_names):
            raise ValueError(
                f"num_players must be between 1 and {len(self.player_names)}, got {self.num_players}"
            )
        if self.max_ticks is not None and self.max_ticks <= 0:
            raise ValueError("max_ticks must be positive")

    @property
    def seat_names(self) -> tuple[str, ...]:
        return self.player_names[: self.num_players]


@dataclass(frozen=True, slots=True)
class GameOutcome:
    """Final result of a game."""

    status: GameStatus
    ticks: int
    winner: str | None = None
    winning_card: Card | None = None

    @property
    def finished(self) -> bool:
        return self.status is GameStatus.FINISHED
