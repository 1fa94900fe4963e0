"""Composable view primitives for the Blitz CLI."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from rich import box
from rich.console import Group, RenderableType
from rich.panel import Panel
from rich.table import Table

from ..cards import Card
from ..game import Game
from ..state import GameStatus


@dataclass(slots=True)
class GameSummaryView:
    """Renderable summarising players and community piles."""

    game: Game
    card_formatter: Callable[[Card | None], str]

    def _cards_markup(self, cards: tuple[Card | None, ...]) -> str:
        if not cards:
            return "—"
        return " ".join(self.card_formatter(card) for card in cards)

    def _metadata_panel(self) -> Panel:
        grid = Table.grid(expand=True)
        grid.add_column(justify="left")
        grid.add_row(f"[cyan]Tick[/cyan]: {self.game.tick}")
        grid.add_row(f"[cyan]Status[/cyan]: {self.game.status.value.title()}")
        grid.add_row(f"[cyan]Piles[/cyan]: {len(self.game.piles())}")
        played = sum(len(pile) for pile in self.game.piles())
        grid.add_row(f"[cyan]Cards played[/cyan]: {played}")
        return Panel(grid, title="Table State", box=box.SQUARE, border_style="blue")

    def _pile_table(self) -> Table:
        pile_table = Table(box=box.MINIMAL, expand=True)
        pile_table.add_column("Pile", justify="left", style="bold")
        pile_table.add_column("Top", justify="left")
        pile_table.add_column("Cards", justify="left")
        pile_table.add_column("Owners", justify="left")
        for idx, pile in enumerate(self.game.piles()):
            owners = sorted({card.owner for card in pile})
            pile_table.add_row(
                f"#{idx}",
                self.card_formatter(pile[-1]),
                self._cards_markup(pile),
                ", ".join(owners),
            )
        return pile_table

    def render(self) -> RenderableType:
        table = Table(box=box.ROUNDED, expand=True)
        table.add_column("Player", justify="left", style="bold")
        table.add_column("Stock", justify="right")
        table.add_column("Stock top", justify="left")
        table.add_column("Candidates", justify="left")
        table.add_column("Reserve", justify="right")
        table.add_column("Waste", justify="left")
        table.add_column("Status", justify="left")

        outcome = self.game.outcome
        for player in self.game.players:
            snapshot = player.snapshot()
            status_text = ""
            name = snapshot.name
            if outcome is not None and outcome.winner == snapshot.name:
                status_text = "[bold green]Winner[/bold green]"
                name = f"[bold green]{name}[/bold green]"
            waste_top = snapshot.waste[-1] if snapshot.waste else None
            waste_text = f"{self.card_formatter(waste_top)} ({len(snapshot.waste)})"
            stock_top = snapshot.stock[-1] if snapshot.stock else None
            table.add_row(
                name,
                str(len(snapshot.stock)),
                self.card_formatter(stock_top),
                self._cards_markup(snapshot.candidates),
                str(len(snapshot.reserve)),
                waste_text,
                status_text,
            )

        components: list[RenderableType] = [table, self._metadata_panel()]
        if self.game.piles():
            border = "green" if self.game.status is GameStatus.FINISHED else "yellow"
            components.append(
                Panel(self._pile_table(), title="Community Piles", box=box.SQUARE, border_style=border)
            )
        return Group(*components)
