"""Textual-powered deck viewer with fill and shuffle controls."""

from __future__ import annotations

import random
from typing import Sequence

from rich.console import RenderableType
from rich.panel import Panel
from rich.table import Table
from rich.text import Text
from textual import on
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.reactive import reactive
from textual.widgets import Button, Footer, Header, Static

from ...cards import Card
from ...deck import Deck
from ..render import format_card

MAX_LOG_ENTRIES = 12
GRID_COLUMNS = 13


class ActionLog(Static):
    """Numbered history of fill and shuffle actions, newest last."""

    entries: reactive[tuple[tuple[int, str], ...]] = reactive((), init=False)

    def __init__(self, *, id: str | None = None) -> None:
        super().__init__(id=id)
        self.count = 0

    def on_mount(self) -> None:  # pragma: no cover - widget lifecycle glue
        self._show(self.entries)

    def record(self, message: str) -> None:
        self.count += 1
        self.entries = (*self.entries, (self.count, message))[-MAX_LOG_ENTRIES:]

    def watch_entries(self, value: tuple[tuple[int, str], ...]) -> None:
        self._show(value)

    def _show(self, entries: tuple[tuple[int, str], ...]) -> None:
        if not entries:
            body: RenderableType = Text.from_markup("[dim]Fill the deck to start[/dim]")
        else:
            table = Table.grid(padding=(0, 1), expand=True)
            table.add_column(justify="right", style="dim")
            table.add_column(justify="left")
            for number, message in entries:
                table.add_row(str(number), Text.from_markup(message))
            body = table
        title = f"Actions ({self.count})" if self.count else "Actions"
        self.update(Panel(body, title=title, border_style="magenta"))


class DeckPanel(Static):
    """Shows one label per card, in deck order."""

    def update_deck(self, deck: Deck | None) -> None:
        if deck is None:
            body: RenderableType = Text.from_markup("[dim]No deck yet, press F to fill[/dim]")
            title = "Deck"
        else:
            body = _render_card_grid(deck.cards)
            title = f"Deck ({len(deck)} cards, value {deck.total_value})"
        self.update(Panel(body, title=title, border_style="cyan"))


class DeckViewerApp(App):
    """Fill a deck, shuffle it, and watch the order change."""

    CSS = """
    Screen {
        layout: vertical;
        height: 100%;
    }

    #buttons {
        height: auto;
        padding: 0 1;
    }

    #buttons Button {
        margin-right: 2;
    }

    #main {
        layout: horizontal;
        height: 1fr;
    }

    DeckPanel {
        width: 2fr;
        overflow-y: auto;
    }

    ActionLog {
        width: 1fr;
        min-height: 6;
    }
    """

    BINDINGS = [
        Binding("q", "quit", "Quit"),
        Binding("f", "fill_deck", "Fill deck"),
        Binding("s", "shuffle_deck", "Shuffle"),
    ]

    def __init__(self, *, use_jokers: bool = False, seed: int | None = None) -> None:
        super().__init__()
        if seed is None:
            seed = random.SystemRandom().randrange(0, 2**63)
        self.seed = seed
        self.rng = random.Random(seed)
        self.use_jokers = use_jokers
        self.deck: Deck | None = None

        # Widgets initialised in compose
        self.deck_panel: DeckPanel | None = None
        self.action_log: ActionLog | None = None

    def compose(self) -> ComposeResult:
        yield Header(show_clock=False)
        yield Horizontal(
            Button("Fill deck", id="fill", variant="primary"),
            Button("Shuffle", id="shuffle", disabled=True),
            id="buttons",
        )
        self.deck_panel = DeckPanel(id="deck")
        self.action_log = ActionLog(id="actions")
        yield Horizontal(self.deck_panel, Vertical(self.action_log), id="main")
        yield Footer()

    def on_mount(self) -> None:
        if self.deck_panel:
            self.deck_panel.update_deck(self.deck)

    @on(Button.Pressed, "#fill")
    def _on_fill_pressed(self) -> None:
        self.action_fill_deck()

    @on(Button.Pressed, "#shuffle")
    def _on_shuffle_pressed(self) -> None:
        self.action_shuffle_deck()

    def action_fill_deck(self) -> None:
        if self.deck is not None:
            return
        self.deck = Deck.full(self.use_jokers, shuffle=False, rng=self.rng)
        self.query_one("#fill", Button).disabled = True
        self.query_one("#shuffle", Button).disabled = False
        self._log(f"Filled deck with {len(self.deck)} cards")
        self._refresh_deck()

    def action_shuffle_deck(self) -> None:
        if self.deck is None:
            return
        self.deck.shuffle()
        top = self.deck.peek_front()
        self._log(f"Shuffled; {format_card(top)} is now on top")
        self._refresh_deck()

    def _refresh_deck(self) -> None:
        if self.deck_panel:
            self.deck_panel.update_deck(self.deck)

    def _log(self, message: str) -> None:
        if self.action_log:
            self.action_log.record(message)


def _render_card_grid(cards: Sequence[Card], *, columns: int = GRID_COLUMNS) -> RenderableType:
    if not cards:
        return Text.from_markup("[dim]No cards[/dim]")

    columns = max(1, columns)
    grid = Table.grid(expand=True, padding=(0, 0))
    grid.add_column(justify="left")

    for start in range(0, len(cards), columns):
        row_cards = cards[start : start + columns]
        grid.add_row(Text.from_markup("  ".join(format_card(card) for card in row_cards)))

    return grid


def run_textual_app(*, use_jokers: bool = False, seed: int | None = None) -> None:
    """Launch the Textual UI."""

    app = DeckViewerApp(use_jokers=use_jokers, seed=seed)
    app.run()
