"""Rendering helpers dedicated to the CLI experience."""

from __future__ import annotations

from typing import Sequence

from rich.console import RenderableType
from rich.panel import Panel

from .. import encoding
from ..cards import Card, NameStyle, Suit
from ..deck import Deck
from .views import DeckSummaryView

_SUIT_SYMBOLS = {
    Suit.SPADES: ("♠", "cyan"),
    Suit.HEARTS: ("♥", "red"),
    Suit.DIAMONDS: ("♦", "magenta"),
    Suit.CLUBS: ("♣", "green"),
}


def format_card(card: Card) -> str:
    """Return a Rich-rendered label for ``card``."""

    if card.is_joker:
        return "[magenta]🃏[/magenta]"
    symbol, color = _SUIT_SYMBOLS.get(card.suit, (encoding.UNKNOWN, "white"))
    return f"[{color}]{encoding.value_abbreviation(card.value)}{symbol}[/{color}]"


def format_cards(cards: Sequence[Card]) -> str:
    if not cards:
        return "—"
    return " ".join(format_card(card) for card in cards)


def render_deck(
    deck: Deck,
    *,
    title: str = "Deck",
    style: NameStyle = NameStyle.FULL,
) -> RenderableType:
    """Return a Rich panel listing ``deck`` in order."""

    view = DeckSummaryView(deck=deck, style=style, card_formatter=format_card)
    return Panel(view.render(), title=title, padding=(0, 1), border_style="cyan")
