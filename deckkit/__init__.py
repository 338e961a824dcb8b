"""Top-level package for the deckkit playing-card core."""

from . import assets, cards, config, deck, encoding, errors
from .cards import JOKER, Card, NameStyle, Suit, compare
from .deck import Deck, transfer
from .errors import AssetConfigurationError, DeckError, EmptyDeckError

__all__ = [
    "JOKER",
    "AssetConfigurationError",
    "Card",
    "Deck",
    "DeckError",
    "EmptyDeckError",
    "NameStyle",
    "Suit",
    "assets",
    "cards",
    "compare",
    "config",
    "deck",
    "encoding",
    "errors",
    "transfer",
]
