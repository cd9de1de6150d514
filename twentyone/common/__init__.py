"""Cards, decks, hands and IO shared by the game."""

from .card import Card, Rank, Suit
from .deck import Deck, DeckSignal
from .hand import Hand

__all__ = ["Card", "Rank", "Suit", "Deck", "DeckSignal", "Hand"]
