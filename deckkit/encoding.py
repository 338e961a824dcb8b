"""Lookup tables and naming helpers for standard playing cards."""

from __future__ import annotations

from typing import TYPE_CHECKING, Final

if TYPE_CHECKING:  # pragma: no cover - typing helper
    from .cards import Card, Suit

JOKER_VALUE: Final[int] = 0
MIN_VALUE: Final[int] = 1
MAX_VALUE: Final[int] = 13
VALUES: Final[tuple[int, ...]] = tuple(range(MIN_VALUE, MAX_VALUE + 1))
UNKNOWN: Final[str] = "?"

VALUE_NAMES: Final[dict[int, str]] = {
    1: "Ace",
    2: "Deuce",
    3: "Three",
    4: "Four",
    5: "Five",
    6: "Six",
    7: "Seven",
    8: "Eight",
    9: "Nine",
    10: "Ten",
    11: "Jack",
    12: "Queen",
    13: "King",
}
FACE_ABBREVIATIONS: Final[dict[int, str]] = {1: "A", 11: "J", 12: "Q", 13: "K"}

SUIT_NAMES: Final[dict[str, str]] = {
    "Clubs": "Clubs",
    "Diamonds": "Diamonds",
    "Hearts": "Hearts",
    "Spades": "Spades",
}
SUIT_INITIALS: Final[dict[str, str]] = {name: name[0] for name in SUIT_NAMES}

JOKER_ASSET_KEY: Final[str] = "JOKER"
PLACEHOLDER_ASSET_KEY: Final[str] = "BLANK"


def value_name(value: int) -> str:
    """Return the spoken name of ``value`` (``"Three"``) or ``"?"``."""

    return VALUE_NAMES.get(value, UNKNOWN)


def value_abbreviation(value: int) -> str:
    """Return ``A``/``J``/``Q``/``K`` for face values, else the number itself."""

    return FACE_ABBREVIATIONS.get(value, str(value))


def _suit_label(suit: "Suit | str") -> str:
    return getattr(suit, "value", suit)


def suit_name(suit: "Suit | str") -> str:
    """Return the plural suit name, or ``"?"`` for the Joker or an unknown suit."""

    return SUIT_NAMES.get(_suit_label(suit), UNKNOWN)


def suit_initial(suit: "Suit | str") -> str:
    """Return the single-letter initial used in asset keys, or ``""``."""

    return SUIT_INITIALS.get(_suit_label(suit), "")


def asset_key(card: "Card") -> str:
    """Return the sprite key for ``card`` (``"AS"``, ``"10H"``, ``"JOKER"``)."""

    if card.is_joker:
        return JOKER_ASSET_KEY
    return f"{value_abbreviation(card.value)}{suit_initial(card.suit)}"
