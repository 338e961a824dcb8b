"""Runtime configuration for deck construction and asset lookup."""

from __future__ import annotations

import random
from dataclasses import dataclass
from pathlib import Path

from . import encoding


@dataclass(slots=True)
class DeckConfig:
    """Options used when building a full deck."""

    use_jokers: bool = False
    shuffle: bool = True
    seed: int | None = None

    def __post_init__(self) -> None:
        if self.seed is not None and self.seed < 0:
            raise ValueError("seed must be non-negative")

    def make_rng(self) -> random.Random:
        """Return a generator seeded from ``seed`` (or OS entropy when unset)."""

        return random.Random(self.seed)


@dataclass(slots=True)
class AssetConfig:
    """Location and naming of the card sprite directory."""

    root: Path
    suffix: str = ".png"
    placeholder: str = encoding.PLACEHOLDER_ASSET_KEY

    def __post_init__(self) -> None:
        self.root = Path(self.root)
        if self.suffix and not self.suffix.startswith("."):
            raise ValueError("suffix must start with '.'")
        if not self.placeholder:
            raise ValueError("placeholder key must not be empty")
