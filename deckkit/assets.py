"""Sprite lookup for presentation layers.

The core only derives keys (:func:`deckkit.encoding.asset_key`); this module
maps them onto files in a sprite directory such as ``AS.png`` or
``JOKER.png``, falling back to the placeholder sprite for unknown cards.
"""

from __future__ import annotations

import logging
from pathlib import Path

from . import encoding
from .cards import Card, iter_full_deck
from .config import AssetConfig
from .errors import AssetConfigurationError

__all__ = ["AssetResolver"]

logger = logging.getLogger(__name__)


class AssetResolver:
    """Resolve cards to sprite files below ``config.root``."""

    def __init__(self, config: AssetConfig) -> None:
        if not config.root.is_dir():
            raise AssetConfigurationError(f"asset root {config.root} is not a directory")
        self.config = config

    def path_for_key(self, key: str) -> Path:
        return self.config.root / f"{key}{self.config.suffix}"

    def has_key(self, key: str) -> bool:
        return self.path_for_key(key).is_file()

    def placeholder(self) -> Path:
        """Return the placeholder sprite or raise if it is missing."""

        path = self.path_for_key(self.config.placeholder)
        if not path.is_file():
            raise AssetConfigurationError(
                f"placeholder sprite {path.name} not found in {self.config.root}"
            )
        return path

    def resolve(self, card: Card) -> Path:
        """Return the sprite for ``card``, or the placeholder when it has none."""

        key = encoding.asset_key(card)
        path = self.path_for_key(key)
        if path.is_file():
            return path
        logger.warning("no sprite for %r (key %s); using placeholder", card, key)
        return self.placeholder()

    def missing_keys(self) -> list[str]:
        """Return the keys of a 54-card deck that have no sprite file."""

        missing: list[str] = []
        for card in iter_full_deck(use_jokers=True):
            key = encoding.asset_key(card)
            if key not in missing and not self.has_key(key):
                missing.append(key)
        return missing
