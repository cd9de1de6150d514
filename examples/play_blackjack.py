#!/usr/bin/env python3
"""Play one round of blackjack in the console."""

from twentyone.blackjack.actor import Dealer, Player
from twentyone.blackjack.blackjack import BlackjackRound
from twentyone.common.deck import Deck
from twentyone.common.io_interface import ConsoleIOInterface


def main():
    io_interface = ConsoleIOInterface()
    player = Player(io_interface)
    dealer = Dealer(io_interface)
    game = BlackjackRound(Deck(), player, dealer, io_interface=io_interface)
    game.start()


if __name__ == "__main__":
    main()
