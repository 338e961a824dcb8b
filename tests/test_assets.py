from __future__ import annotations

import logging
from pathlib import Path

import pytest

from deckkit import encoding
from deckkit.assets import AssetResolver
from deckkit.cards import JOKER, Card, Suit, iter_full_deck
from deckkit.config import AssetConfig
from deckkit.errors import AssetConfigurationError


def _sprite_dir(root: Path, keys: list[str]) -> Path:
    for key in keys:
        (root / f"{key}.png").write_bytes(b"")
    return root


def test_resolve_existing_sprite(tmp_path: Path) -> None:
    root = _sprite_dir(tmp_path, ["AS", "JOKER", "BLANK"])
    resolver = AssetResolver(AssetConfig(root=root))

    assert resolver.resolve(Card(1, Suit.SPADES)) == root / "AS.png"
    assert resolver.resolve(JOKER) == root / "JOKER.png"


def test_missing_sprite_falls_back_to_placeholder(
    tmp_path: Path, caplog: pytest.LogCaptureFixture
) -> None:
    root = _sprite_dir(tmp_path, ["BLANK"])
    resolver = AssetResolver(AssetConfig(root=root))

    with caplog.at_level(logging.WARNING, logger="deckkit.assets"):
        path = resolver.resolve(Card(15, Suit.CLUBS))

    assert path == root / "BLANK.png"
    assert "15C" in caplog.text


def test_missing_placeholder_is_fatal(tmp_path: Path) -> None:
    resolver = AssetResolver(AssetConfig(root=tmp_path))
    with pytest.raises(AssetConfigurationError):
        resolver.resolve(Card(2, Suit.HEARTS))


def test_missing_root_is_fatal(tmp_path: Path) -> None:
    with pytest.raises(AssetConfigurationError):
        AssetResolver(AssetConfig(root=tmp_path / "missing"))


def test_missing_keys_reports_unique_keys(tmp_path: Path) -> None:
    present = [encoding.asset_key(card) for card in iter_full_deck()]
    root = _sprite_dir(tmp_path, present + ["BLANK"])
    resolver = AssetResolver(AssetConfig(root=root))

    assert resolver.missing_keys() == ["JOKER"]


def test_custom_suffix_and_placeholder(tmp_path: Path) -> None:
    (tmp_path / "EMPTY.webp").write_bytes(b"")
    resolver = AssetResolver(AssetConfig(root=tmp_path, suffix=".webp", placeholder="EMPTY"))
    assert resolver.resolve(Card(3, Suit.DIAMONDS)) == tmp_path / "EMPTY.webp"


def test_asset_config_validation(tmp_path: Path) -> None:
    with pytest.raises(ValueError):
        AssetConfig(root=tmp_path, suffix="png")
    with pytest.raises(ValueError):
        AssetConfig(root=tmp_path, placeholder="")
