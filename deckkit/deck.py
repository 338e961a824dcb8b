"""Ordered card collections: draw piles, hands and discard piles."""

from __future__ import annotations

import logging
import random
from typing import TYPE_CHECKING, Iterable, Iterator, MutableSequence, Protocol

from .cards import Card, iter_full_deck
from .errors import EmptyDeckError

if TYPE_CHECKING:  # pragma: no cover - typing helper
    from .config import DeckConfig

__all__ = ["Deck", "RandomSource", "fisher_yates_shuffle", "transfer"]

logger = logging.getLogger(__name__)


class RandomSource(Protocol):
    """Minimal protocol for the generator driving :func:`fisher_yates_shuffle`."""

    def randrange(self, stop: int) -> int:  # pragma: no cover - protocol only
        ...


# Seeded once per process from OS entropy.
_default_rng = random.Random()


def fisher_yates_shuffle(cards: MutableSequence[Card], rng: RandomSource) -> None:
    """Permute ``cards`` in place.

    For ``n`` from ``len(cards)`` down to 2 a uniform index ``k`` in
    ``[0, n - 1]`` is swapped with position ``n - 1``.
    """

    n = len(cards)
    while n > 1:
        n -= 1
        k = rng.randrange(n + 1)
        cards[k], cards[n] = cards[n], cards[k]


class Deck:
    """Mutable ordered multiset of cards.

    A deck is used for any pile of cards, a player's hand included. Use the
    wrapper methods to change its contents; :attr:`cards` is a snapshot.
    """

    __slots__ = ("_cards", "_rng")

    def __init__(self, cards: Iterable[Card] = (), *, rng: RandomSource | None = None) -> None:
        self._cards: list[Card] = list(cards)
        self._rng = rng

    @classmethod
    def full(
        cls,
        use_jokers: bool = False,
        shuffle: bool = True,
        *,
        rng: RandomSource | None = None,
    ) -> "Deck":
        """Return a 52-card deck, or 54 with two Jokers appended."""

        deck = cls(iter_full_deck(use_jokers), rng=rng)
        logger.debug("built full deck of %d cards", len(deck))
        if shuffle:
            deck.shuffle()
        return deck

    @classmethod
    def from_config(cls, config: "DeckConfig") -> "Deck":
        """Build a full deck as described by ``config``."""

        return cls.full(config.use_jokers, config.shuffle, rng=config.make_rng())

    @property
    def cards(self) -> tuple[Card, ...]:
        """Return the current contents, front first."""

        return tuple(self._cards)

    @property
    def total_value(self) -> int:
        """Return the sum of all card values; Jokers count as 0."""

        return sum(card.value for card in self._cards)

    def add(self, card: Card) -> None:
        """Append ``card`` to the back of the deck."""

        self._cards.append(card)

    def add_many(self, cards: Iterable[Card]) -> None:
        """Append ``cards`` to the back, keeping their relative order."""

        self._cards.extend(cards)

    def remove(self, card: Card) -> bool:
        """Remove the first card equal to ``card``; return ``False`` if absent."""

        try:
            self._cards.remove(card)
        except ValueError:
            return False
        return True

    def contains(self, card: Card) -> bool:
        return card in self._cards

    def count_of_value(self, value: int) -> int:
        """Return how many cards carry ``value``."""

        return sum(1 for card in self._cards if card.value == value)

    def peek_front(self) -> Card:
        return self._cards[self._index_of_end(0)]

    def peek_back(self) -> Card:
        return self._cards[self._index_of_end(-1)]

    def draw_front(self) -> Card:
        """Remove and return the front card."""

        return self._cards.pop(self._index_of_end(0))

    def draw_back(self) -> Card:
        """Remove and return the back card."""

        return self._cards.pop(self._index_of_end(-1))

    def shuffle(self, rng: RandomSource | None = None) -> None:
        """Shuffle in place with Fisher-Yates.

        ``rng`` overrides the generator given at construction; without either
        the process-wide generator is used.
        """

        if len(self._cards) < 2:
            return
        source = rng if rng is not None else self._rng
        if source is None:
            source = _default_rng
        fisher_yates_shuffle(self._cards, source)
        logger.debug("shuffled %d cards", len(self._cards))

    def _index_of_end(self, index: int) -> int:
        if not self._cards:
            raise EmptyDeckError("deck is empty")
        return index

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(tuple(self._cards))

    def __contains__(self, card: object) -> bool:
        return card in self._cards

    def __repr__(self) -> str:
        return f"Deck(cards={len(self._cards)}, total_value={self.total_value})"


def transfer(source: Deck, target: Deck, card: Card) -> bool:
    """Move one ``card`` from ``source`` to the back of ``target``.

    Returns ``False`` without touching either deck when ``source`` holds no
    equal card.
    """

    if not source.remove(card):
        return False
    target.add(card)
    logger.debug("transferred %s", card)
    return True
