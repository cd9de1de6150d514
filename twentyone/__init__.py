"""twentyone: a console game of blackjack between one player and the dealer."""

__version__ = "0.1.0"
