"""Shuffle fairness audit for the opening deal."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

import numpy as np

from .player import Player
from .rules import DECK_SIZE

if TYPE_CHECKING:  # pragma: no cover - typing helper
    from numpy.typing import NDArray

__all__ = ["ChiSquareResult", "deal_positions", "dealt_order", "chi_square_uniform"]

_AUDIT_SEAT = "Audit"


@dataclass(frozen=True, slots=True)
class ChiSquareResult:
    """Pearson statistic of a position table against the uniform expectation."""

    statistic: float
    dof: int
    z_score: float

    def plausibly_uniform(self, z_limit: float = 4.0) -> bool:
        """Return ``True`` unless the statistic sits ``z_limit`` deviations above its mean."""

        return self.z_score < z_limit


def dealt_order(player: Player) -> list[int]:
    """Return card indices in the order they were dealt to ``player``.

    Candidates come first, then the stock from the top down, then the
    reserve from the top down. Only meaningful before any card is played.
    """

    snapshot = player.snapshot()
    order = [card.index for card in snapshot.candidates if card is not None]
    order.extend(card.index for card in reversed(snapshot.stock))
    order.extend(card.index for card in reversed(snapshot.reserve))
    return order


def deal_positions(trials: int, rng: Any) -> "NDArray[np.int64]":
    """Count how often each card lands at each dealt position over ``trials`` deals."""

    if trials <= 0:
        raise ValueError("trials must be positive")
    counts = np.zeros((DECK_SIZE, DECK_SIZE), dtype=np.int64)
    positions = np.arange(DECK_SIZE)
    for _ in range(trials):
        order = np.asarray(dealt_order(Player(_AUDIT_SEAT, rng)))
        counts[order, positions] += 1
    return counts


def chi_square_uniform(counts: "NDArray[Any]") -> ChiSquareResult:
    """Compare a card-by-position table with an even spread of each row."""

    table = np.asarray(counts, dtype=np.float64)
    if table.ndim != 2 or min(table.shape) < 2:
        raise ValueError("counts must be a two-dimensional table with at least 2x2 cells")
    expected = np.repeat(table.sum(axis=1, keepdims=True) / table.shape[1], table.shape[1], axis=1)
    if np.any(expected <= 0):
        raise ValueError("every row needs at least one observation")
    statistic = float(np.sum((table - expected) ** 2 / expected))
    dof = (table.shape[0] - 1) * (table.shape[1] - 1)
    return ChiSquareResult(statistic=statistic, dof=dof, z_score=_wilson_hilferty(statistic, dof))


def _wilson_hilferty(statistic: float, dof: int) -> float:
    # Cube-root normal approximation of the chi-square distribution.
    scale = 2.0 / (9.0 * dof)
    return ((statistic / dof) ** (1.0 / 3.0) - (1.0 - scale)) / math.sqrt(scale)
