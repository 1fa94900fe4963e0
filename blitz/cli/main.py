"""Typer entry-point wiring for the Blitz CLI."""

from __future__ import annotations

import logging
import random

import typer
from rich import box
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from .. import audit
from ..events import CompositeObserver, GameObserver, LoggingObserver
from ..game import Game
from ..rules import DEFAULT_PLAYER_NAMES
from ..state import DEFAULT_MAX_TICKS, BlitzConfig
from .render import RichTraceObserver, render_game

app = typer.Typer(add_completion=False, rich_markup_mode="rich")
console = Console()


def _configure_logging(verbose: bool) -> None:
    if not verbose:
        return
    logging.basicConfig(
        level=logging.DEBUG,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


def _make_rng(seed: int | None) -> random.Random:
    return random.Random(seed) if seed is not None else random.Random()


@app.command()
def run(
    players: int = typer.Option(
        4, min=1, max=len(DEFAULT_PLAYER_NAMES), help="Number of seated players."
    ),
    seed: int | None = typer.Option(None, help="Random seed for reproducible games (omit for randomness)."),
    max_ticks: int = typer.Option(
        DEFAULT_MAX_TICKS, min=0, help="Stop with a stalemate after this many passes (0 disables the limit)."
    ),
    trace: bool = typer.Option(True, "--trace/--no-trace", help="Print every move as it happens."),
    show_piles: bool = typer.Option(False, "--show-piles", help="Print all community piles after each move."),
    verbose: bool = typer.Option(False, "--verbose", help="Emit debug logging for the game engine."),
) -> None:
    """Simulate one game and print the final table."""

    _configure_logging(verbose)
    config = BlitzConfig(num_players=players, max_ticks=max_ticks or None)

    observers: list[GameObserver] = []
    if trace:
        observers.append(RichTraceObserver(console, show_piles=show_piles))
    if verbose:
        observers.append(LoggingObserver(level=logging.DEBUG))

    game = Game(config, rng=_make_rng(seed), observer=CompositeObserver(*observers))
    outcome = game.run()

    console.print(render_game(game, title="Game finished!" if outcome.finished else "Game stalled"))
    if outcome.winner is not None:
        console.print(f"[bold green]{outcome.winner}[/bold green] wins after {outcome.ticks} tick(s).")
    else:
        console.print(f"[yellow]No winner after {outcome.ticks} tick(s).[/yellow]")


@app.command("audit")
def audit_cli(
    trials: int = typer.Option(2000, min=1, help="Number of fresh deals to sample."),
    seed: int | None = typer.Option(None, help="Random seed for the audit."),
    z_limit: float = typer.Option(4.0, min=0.0, help="Largest z-score still accepted as uniform."),
) -> None:
    """Check that the opening deal places every card evenly."""

    counts = audit.deal_positions(trials, _make_rng(seed))
    result = audit.chi_square_uniform(counts)

    table = Table(title="Shuffle Audit", box=box.SIMPLE_HEAVY)
    table.add_column("Trials", justify="right")
    table.add_column("Chi-square", justify="right")
    table.add_column("DoF", justify="right")
    table.add_column("z", justify="right")
    table.add_column("Verdict", justify="center")

    verdict = (
        "[bold green]uniform[/bold green]"
        if result.plausibly_uniform(z_limit)
        else "[bold red]biased[/bold red]"
    )
    table.add_row(
        str(trials),
        f"{result.statistic:.1f}",
        str(result.dof),
        f"{result.z_score:.2f}",
        verdict,
    )
    console.print(table)


def main() -> None:
    """Entry-point for ``python -m blitz.cli``."""

    app()


if __name__ == "__main__":  # pragma: no cover - CLI invocation
    main()
