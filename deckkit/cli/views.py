"""Composable view primitives for the deckkit CLI."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from rich import box
from rich.console import Group, RenderableType
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from .. import encoding
from ..cards import Card, NameStyle
from ..deck import Deck


@dataclass(slots=True)
class DeckSummaryView:
    """Renderable listing a deck's cards followed by its aggregates."""

    deck: Deck
    style: NameStyle
    card_formatter: Callable[[Card], str]

    def _totals_panel(self) -> Panel:
        grid = Table.grid(expand=True)
        grid.add_column(justify="left")
        grid.add_row(f"[cyan]Cards[/cyan]: {len(self.deck)}")
        grid.add_row(f"[cyan]Total value[/cyan]: {self.deck.total_value}")
        jokers = self.deck.count_of_value(encoding.JOKER_VALUE)
        if jokers:
            grid.add_row(f"[cyan]Jokers[/cyan]: {jokers}")
        return Panel(grid, title="Totals", box=box.SQUARE, border_style="blue")

    def render(self) -> RenderableType:
        if not len(self.deck):
            return Group(Text("Empty deck", style="dim"), self._totals_panel())

        table = Table(box=box.ROUNDED, expand=True)
        table.add_column("#", justify="right", style="bold")
        table.add_column("Card", justify="left")
        table.add_column("Name", justify="left")
        table.add_column("Asset", justify="left")

        for position, card in enumerate(self.deck, start=1):
            table.add_row(
                str(position),
                self.card_formatter(card),
                card.format(self.style),
                encoding.asset_key(card),
            )

        return Group(table, self._totals_panel())
