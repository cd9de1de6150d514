"""
This module contains the Deck class, which represents a single-pass deck of cards.

Cards are never removed from the deck. A cursor marks the next undealt card,
and once it runs past the end the deck answers with
`DeckSignal.NO_CARDS_REMAIN` instead of a card.

>>> deck = Deck()
>>> deck.size
52
>>> deck.draw_next()
Card(Suit.HEARTS, Rank.TWO)
>>> deck.remaining
51
"""

import logging
import random
from enum import Enum
from typing import Iterable, List, Optional, Union

from twentyone.common.card import Card, Rank, Suit

logger = logging.getLogger(__name__)


class DeckSignal(Enum):
    """Non-card results of drawing from a deck."""

    NO_CARDS_REMAIN = "no_cards_remain"


DrawResult = Union[Card, DeckSignal]


class Deck:
    """
    A class representing a deck of cards.

    :param ranks: Ranks to build the deck from (optional, defaults to all thirteen).
    :param suits: Suits to build the deck from (optional, defaults to all four).
    """

    def __init__(
        self,
        ranks: Optional[Iterable[Rank]] = None,
        suits: Optional[Iterable[Suit]] = None,
    ):
        ranks = list(Rank) if ranks is None else list(ranks)
        suits = list(Suit) if suits is None else list(suits)
        if not ranks or not suits:
            raise ValueError("A deck needs at least one rank and one suit.")
        self._cards: List[Card] = self.build(ranks, suits)
        self._cursor = -1

    @staticmethod
    def build(ranks: List[Rank], suits: List[Suit]) -> List[Card]:
        """
        Construct one card per (rank, suit) pair, ranks in the outer loop.

        >>> Deck.build([Rank.TWO, Rank.THREE], [Suit.HEARTS, Suit.CLUBS])
        [Card(Suit.HEARTS, Rank.TWO), Card(Suit.CLUBS, Rank.TWO), Card(Suit.HEARTS, Rank.THREE), Card(Suit.CLUBS, Rank.THREE)]
        """
        return [Card(suit, rank) for rank in ranks for suit in suits]

    @property
    def cards(self) -> List[Card]:
        """The cards in their current order, dealt or not."""
        return list(self._cards)

    def shuffle(self, rng: Optional[random.Random] = None):
        """
        Shuffle the cards in the deck in place.

        :param rng: Random number generator to use, for reproducible games.
        :return: The deck itself, so calls can be chained.
        """
        (rng or random).shuffle(self._cards)
        logger.debug("Shuffled deck of %d cards", len(self._cards))
        return self

    def draw_next(self) -> DrawResult:
        """
        Advance the cursor and return the card under it.

        :return: The next card, or `DeckSignal.NO_CARDS_REMAIN` once every card
                 has been dealt.
        """
        if self._cursor < len(self._cards):
            self._cursor += 1
        if self._cursor < len(self._cards):
            return self._cards[self._cursor]
        logger.debug("Draw requested from an exhausted deck")
        return DeckSignal.NO_CARDS_REMAIN

    @property
    def size(self) -> int:
        """Total number of cards in the deck."""
        return len(self._cards)

    @property
    def remaining(self) -> int:
        """Number of cards that have not been dealt yet."""
        return max(len(self._cards) - self._cursor - 1, 0)

    def is_empty(self) -> bool:
        """
        Check if every card has been dealt.

        :return: True if the next draw yields no card, False otherwise.
        """
        return self.remaining == 0

    def __len__(self) -> int:
        return len(self._cards)

    def __repr__(self) -> str:
        return f"Deck({[repr(card) for card in self._cards]})"

    def __str__(self) -> str:
        return f"Deck of {len(self._cards)} cards ({self.remaining} remaining)"
