"""Card abstractions and helpers for deckkit."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Final, Iterator

from . import encoding


class Suit(str, Enum):
    """The four French suits plus the special Joker marker."""

    CLUBS = "Clubs"
    DIAMONDS = "Diamonds"
    HEARTS = "Hearts"
    SPADES = "Spades"
    JOKER = "Joker"

    @property
    def is_ranked(self) -> bool:
        """Return ``True`` for the four suits that carry values 1-13."""

        return self is not Suit.JOKER

    @classmethod
    def ranked(cls) -> tuple["Suit", ...]:
        """Return the ranked suits in canonical deck order."""

        return (cls.CLUBS, cls.DIAMONDS, cls.HEARTS, cls.SPADES)


class NameStyle(str, Enum):
    """Output styles accepted by :meth:`Card.format`."""

    FULL = "full"  # "Three of Diamonds"
    ABBREVIATED = "abbreviated"  # "3oD"
    VALUE_ONLY = "value_only"  # "Three"


INCOMPARABLE: Final[int] = 2


@dataclass(frozen=True, slots=True)
class Card:
    """Value object describing one playing card.

    ``value`` is 1-13 for ranked cards and 0 for the Joker. No range checks
    are made; unknown values and suits render as ``"?"``.
    """

    value: int = 1
    suit: Suit = Suit.SPADES

    @classmethod
    def joker(cls) -> "Card":
        """Return the shared Joker card."""

        return JOKER

    @property
    def is_joker(self) -> bool:
        """Return ``True`` when the card belongs to the Joker suit."""

        return self.suit == Suit.JOKER

    def format(self, style: NameStyle = NameStyle.FULL) -> str:
        """Return the card's name in ``style``."""

        value = encoding.value_name(self.value)
        if style == NameStyle.VALUE_ONLY:
            return value

        suit = encoding.suit_name(self.suit)
        if style == NameStyle.ABBREVIATED:
            return f"{encoding.value_abbreviation(self.value)}o{suit[0]}"
        return f"{value} of {suit}"

    @staticmethod
    def compare(a: "Card", b: "Card") -> int:
        """Return 1, 0 or -1 by value, or 2 when either card is a Joker."""

        return compare(a, b)

    def __str__(self) -> str:
        return self.format()


JOKER: Final[Card] = Card(encoding.JOKER_VALUE, Suit.JOKER)


def compare(a: Card, b: Card) -> int:
    """Compare two cards by value.

    Jokers have no value to compare, so any comparison involving one returns
    :data:`INCOMPARABLE` regardless of argument order.
    """

    if a.is_joker or b.is_joker:
        return INCOMPARABLE
    if a.value > b.value:
        return 1
    if a.value < b.value:
        return -1
    return 0


def iter_full_deck(use_jokers: bool = False) -> Iterator[Card]:
    """Yield every card of a fresh deck in suit-major rising order."""

    for suit in Suit.ranked():
        for value in encoding.VALUES:
            yield Card(value, suit)
    if use_jokers:
        yield JOKER
        yield JOKER
