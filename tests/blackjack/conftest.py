"""
Pytest fixtures for blackjack tests.
"""

import random

import pytest

from twentyone.blackjack.rules import Rules
from twentyone.common.card import Suit
from twentyone.common.deck import Deck
from twentyone.common.io_interface import TestIOInterface


class NoShuffle(random.Random):
    """A random source whose shuffle leaves the deck in construction order."""

    def shuffle(self, x):
        pass


class StubRound:
    """Stands in for a round: deals from a list of cards and counts stays."""

    def __init__(self, *cards, rules=None):
        self.cards = list(cards)
        self.rules = rules or Rules()
        self.stays = 0

    def deal_to(self, participant):
        if not self.cards:
            return None
        card = self.cards.pop(0)
        participant.add_card(card)
        return card

    def stay(self):
        self.stays += 1


def stacked_deck(*ranks):
    """A deck that deals the given ranks, all spades, in order."""
    return Deck(ranks=ranks, suits=[Suit.SPADES])


@pytest.fixture
def io():
    return TestIOInterface()


@pytest.fixture
def no_shuffle():
    return NoShuffle()


@pytest.fixture
def stub_round():
    return StubRound


@pytest.fixture
def make_deck():
    return stacked_deck
