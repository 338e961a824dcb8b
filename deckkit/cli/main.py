"""Typer entry-point wiring for the deckkit CLI."""

from __future__ import annotations

import logging
from pathlib import Path

import typer
from rich import box
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from ..assets import AssetResolver
from ..cards import NameStyle
from ..config import AssetConfig, DeckConfig
from ..deck import Deck
from ..errors import AssetConfigurationError
from .render import format_cards, render_deck
from .textual import run_textual_app

app = typer.Typer(add_completion=False, rich_markup_mode="rich")
console = Console()


def setup_logging(level: str) -> None:
    """Route library logging through Rich."""

    logging.basicConfig(
        level=level.upper(),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, rich_tracebacks=True)],
    )


@app.callback()
def configure(
    log_level: str = typer.Option("WARNING", "--log-level", help="Logging level (DEBUG, INFO, WARNING, ...)."),
) -> None:
    """Build, shuffle and inspect playing-card decks."""

    if not isinstance(logging.getLevelName(log_level.upper()), int):
        raise typer.BadParameter(f"unknown log level '{log_level}'", param_hint="--log-level")
    setup_logging(log_level)


@app.command()
def show(
    jokers: bool = typer.Option(False, "--jokers/--no-jokers", help="Append two Jokers (54 cards)."),
    shuffle: bool = typer.Option(True, "--shuffle/--no-shuffle", help="Shuffle before display."),
    seed: int | None = typer.Option(None, min=0, help="Random seed for reproducible shuffles."),
    style: NameStyle = typer.Option(NameStyle.FULL, case_sensitive=False, help="Card naming style."),
) -> None:
    """Print a full deck in order."""

    deck = Deck.from_config(DeckConfig(use_jokers=jokers, shuffle=shuffle, seed=seed))
    console.print(render_deck(deck, title="Deck", style=style))


@app.command()
def draw(
    count: int = typer.Argument(5, min=1, help="Number of cards to deal into the hand."),
    from_back: bool = typer.Option(False, "--from-back", help="Deal from the back of the deck."),
    jokers: bool = typer.Option(False, "--jokers/--no-jokers", help="Append two Jokers (54 cards)."),
    seed: int | None = typer.Option(None, min=0, help="Random seed for reproducible shuffles."),
) -> None:
    """Shuffle a full deck and deal ``COUNT`` cards into a hand."""

    deck = Deck.from_config(DeckConfig(use_jokers=jokers, shuffle=True, seed=seed))
    if count > len(deck):
        raise typer.BadParameter(f"deck only holds {len(deck)} cards", param_hint="COUNT")

    hand = Deck()
    for _ in range(count):
        hand.add(deck.draw_back() if from_back else deck.draw_front())

    table = Table(title="Hand", box=box.SIMPLE_HEAVY)
    table.add_column("Cards", justify="left")
    table.add_column("Value", justify="right")
    table.add_column("Remaining", justify="right")
    table.add_row(format_cards(hand.cards), str(hand.total_value), str(len(deck)))
    console.print(table)
    console.print(render_deck(hand, title="Hand"))


@app.command()
def assets(
    root: Path = typer.Argument(..., help="Directory holding one sprite per card key."),
    suffix: str = typer.Option(".png", help="Sprite file suffix."),
    placeholder: str = typer.Option("BLANK", help="Key of the fallback sprite."),
) -> None:
    """Audit a sprite directory against the 54-card key set."""

    try:
        resolver = AssetResolver(AssetConfig(root=root, suffix=suffix, placeholder=placeholder))
        fallback = resolver.placeholder()
    except AssetConfigurationError as exc:
        console.print(f"[bold red]Configuration error:[/bold red] {exc}")
        raise typer.Exit(code=1) from exc

    missing = resolver.missing_keys()
    table = Table(title="Sprite Audit", box=box.SIMPLE_HEAVY)
    table.add_column("Check", justify="left")
    table.add_column("Result", justify="left")
    table.add_row("Placeholder", f"[green]{fallback.name}[/green]")
    if missing:
        table.add_row("Missing", f"[yellow]{', '.join(missing)}[/yellow]")
    else:
        table.add_row("Missing", "[green]none[/green]")
    console.print(table)


@app.command()
def play(
    jokers: bool = typer.Option(False, "--jokers/--no-jokers", help="Fill with 54 cards instead of 52."),
    seed: int | None = typer.Option(None, min=0, help="Random seed for reproducible shuffles."),
) -> None:
    """Launch the interactive deck viewer."""

    run_textual_app(use_jokers=jokers, seed=seed)


def main() -> None:
    """Entry-point for ``python -m deckkit.cli``."""

    app()


if __name__ == "__main__":  # pragma: no cover - CLI invocation
    main()
