"""
This module contains the Hand class, an ordered collection of the cards dealt
to one participant during a round.

A hand only grows: cards are appended in deal order and never removed.
"""

from typing import List, Tuple

from twentyone.common.card import Card

BLACKJACK = 21


class Hand:
    """
    A hand of cards that knows its blackjack score.

    >>> from twentyone.common.card import Rank, Suit
    >>> hand = Hand()
    >>> hand.add_card(Card(Suit.CLUBS, Rank.ACE))
    >>> hand.add_card(Card(Suit.HEARTS, Rank.SIX))
    >>> hand.score()
    17
    """

    def __init__(self):
        self._cards: List[Card] = []

    @property
    def cards(self) -> List[Card]:
        """Returns a copy of the cards in the hand, in deal order."""
        return list(self._cards)

    def add_card(self, card: Card) -> None:
        """
        Adds a card to the end of the hand.

        Args:
            card: The card to add.
        """
        self._cards.append(card)

    def _separate_aces(self) -> Tuple[List[Card], List[Card]]:
        aces = [card for card in self._cards if card.is_ace]
        others = [card for card in self._cards if not card.is_ace]
        return aces, others

    def score(self) -> int:
        """
        Calculate the best total of the hand.

        Non-Aces are summed first. Each Ace is then counted as 11 unless
        that would push the running total over 21, in which case it counts
        as 1. The result is over 21 only when no assignment avoids it.

        Returns:
            The score of the hand.
        """
        aces, others = self._separate_aces()
        total = sum(card.low_value for card in others)
        for ace in aces:
            if total + ace.high_value > BLACKJACK:
                total += ace.low_value
            else:
                total += ace.high_value
        return total

    def is_bust(self) -> bool:
        """True if the score is over 21."""
        return self.score() > BLACKJACK

    def __len__(self) -> int:
        return len(self._cards)

    def __repr__(self) -> str:
        """
        Returns a string representation of the hand for debugging.

        Returns:
            A string in the form "Hand([Card(...), ...])".
        """
        return f"Hand({self._cards!r})"

    def __str__(self) -> str:
        """
        Returns the cards separated by spaces, e.g. "3♣ 5♦".
        """
        return " ".join(str(card) for card in self._cards)
