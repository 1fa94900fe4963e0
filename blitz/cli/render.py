"""Rendering helpers dedicated to the CLI experience."""

from __future__ import annotations

from typing import Sequence

from rich.console import Console, RenderableType
from rich.panel import Panel

from ..cards import Card, Gender, Suit
from ..events import CardPlayed, GameEvent, GameFinished, ReserveRotated
from ..game import Game
from .views import GameSummaryView

_SUIT_COLOURS = {
    Suit.RED: "red",
    Suit.BLUE: "blue",
    Suit.GREEN: "green",
    Suit.YELLOW: "yellow",
}

_GENDER_MARKS = {
    Gender.BOY: "♂",
    Gender.GIRL: "♀",
}


def format_card(card: Card | None) -> str:
    """Return a Rich-rendered label for ``card``."""

    if card is None:
        return "[dim]--[/dim]"
    colour = _SUIT_COLOURS[card.suit]
    return f"[{colour}]{card.label()}[/{colour}]"


def format_card_long(card: Card) -> str:
    colour = _SUIT_COLOURS[card.suit]
    mark = _GENDER_MARKS[card.suit.gender]
    return f"[{colour}]{card.suit.value} {card.rank}{mark}[/{colour}] [dim]({card.owner})[/dim]"


def format_cards(cards: Sequence[Card | None]) -> str:
    if not cards:
        return "—"
    return " ".join(format_card(card) for card in cards)


def render_game(game: Game, *, title: str = "Blitz") -> RenderableType:
    """Return a Rich panel describing the players and community piles."""

    view = GameSummaryView(game=game, card_formatter=format_card)
    return Panel(view.render(), title=title, padding=(0, 1), border_style="cyan")


class RichTraceObserver:
    """Print one line per event to a Rich console as the game unfolds."""

    def __init__(self, console: Console, *, show_piles: bool = False) -> None:
        self.console = console
        self.show_piles = show_piles

    def notify(self, event: GameEvent) -> None:
        if isinstance(event, CardPlayed):
            self.console.print(
                f"[dim]{event.tick:>4}[/dim] [cyan]{event.player}[/cyan] "
                f"visible {format_cards(event.visible)} · playable {format_cards(event.legal)} "
                f"→ plays {format_card(event.card)} on pile {event.pile_index} "
                f"[dim](stock {event.stock_remaining})[/dim]"
            )
            if self.show_piles:
                for idx, pile in enumerate(event.piles):
                    self.console.print(f"       pile {idx}: {format_cards(pile)}")
        elif isinstance(event, ReserveRotated):
            self.console.print(
                f"[dim]{event.tick:>4}[/dim] [cyan]{event.player}[/cyan] "
                f"[dim]no move, flips reserve → {format_card(event.waste_top)}[/dim]"
            )
        elif isinstance(event, GameFinished):
            outcome = event.outcome
            if outcome.winner is not None:
                winning = format_card_long(outcome.winning_card) if outcome.winning_card else ""
                self.console.print(
                    f"[bold green]Blitz![/bold green] {outcome.winner} emptied their stock "
                    f"on tick {outcome.ticks} {winning}"
                )
            else:
                self.console.print(f"[bold yellow]Stalemate[/bold yellow] after {outcome.ticks} tick(s)")
