"""Exception hierarchy for deckkit."""

from __future__ import annotations


class DeckError(Exception):
    """Base class for every error raised by deckkit."""


class EmptyDeckError(DeckError, IndexError):
    """Raised when a card is peeked or drawn from an empty deck."""


class AssetConfigurationError(DeckError, RuntimeError):
    """Raised when the sprite directory cannot supply even the placeholder."""
