"""
This module defines the `Suit`, `Rank`, and `Card` classes, which are used to represent playing cards.

- `Suit`: An enum representing the four suits of a standard deck of playing
cards: Hearts, Diamonds, Clubs, and Spades.

- `Rank`: An enum representing the thirteen ranks of a standard deck of playing
cards: Two through Ten, Jack, Queen, King, and Ace. The value of each member is
the raw rank token printed on the card face.

- `Card`: An immutable playing card. A card has a suit and a rank, and knows
the low and high value it contributes to a blackjack hand.

This module is part of the `twentyone` package, a console blackjack game.
"""

from dataclasses import dataclass
from enum import Enum, unique
from typing import Union


@unique
class Suit(Enum):
    """
    Enum for suits in a card deck.
    """

    HEARTS = "♥"
    DIAMONDS = "♦"
    CLUBS = "♣"
    SPADES = "♠"

    def __str__(self) -> str:
        return self.value


@unique
class Rank(Enum):
    """
    Enum for ranks in a card deck.
    """

    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = "J"
    KING = "K"
    QUEEN = "Q"
    ACE = "A"

    @property
    def is_face(self) -> bool:
        return self in (Rank.JACK, Rank.QUEEN, Rank.KING)

    def __str__(self) -> str:
        return str(self.value)


FACE_VALUE = 10
ACE_LOW_VALUE = 1
ACE_HIGH_VALUE = 11


@dataclass(frozen=True)
class Card:
    """
    Class representing a playing card. Cards are immutable and compare by
    rank and suit.

    >>> card = Card(Suit.HEARTS, Rank.TWO)
    >>> print(card)
    2♥
    >>> Card(Suit.SPADES, Rank.ACE).high_value
    11
    """

    suit: Suit
    rank: Rank

    def __post_init__(self):
        if not isinstance(self.suit, Suit):
            raise TypeError(f"Invalid suit: {self.suit}")
        if not isinstance(self.rank, Rank):
            raise TypeError(f"Invalid rank: {self.rank}")

    @property
    def rank_value(self) -> Union[int, str]:
        """The raw rank token: 2 through 10, or the face letter."""
        return self.rank.value

    @property
    def low_value(self) -> int:
        """
        The value of the card with an Ace counted as 1.

        :return: 10 for Jack, Queen and King, 1 for an Ace, otherwise the number.
        """
        if self.rank.is_face:
            return FACE_VALUE
        if self.rank == Rank.ACE:
            return ACE_LOW_VALUE
        return self.rank.value

    @property
    def high_value(self) -> int:
        """
        The value of the card with an Ace counted as 11.

        :return: 11 for an Ace, otherwise the same as `low_value`.
        """
        if self.rank == Rank.ACE:
            return ACE_HIGH_VALUE
        return self.low_value

    @property
    def is_ace(self) -> bool:
        return self.rank == Rank.ACE

    def __repr__(self) -> str:
        """
        Provide a machine-readable representation of the card.

        :return: A string representation of the card.
        """
        return f"Card(Suit.{self.suit.name}, Rank.{self.rank.name})"

    def __str__(self) -> str:
        """
        Provide a human-readable representation of the card.

        :return: The rank token followed by the suit glyph.
        """
        return f"{self.rank}{self.suit}"
