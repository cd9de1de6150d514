"""
This module is used to play a round of Blackjack.

It can be used to play a round in different modes:
- Interactive console mode, where the user interacts with the game via the console.
- Simulation mode, where the game runs automatically and the player always stays.
- Logging mode, where game output is logged to a specified file.

To run the game in different modes, specific command line arguments are used.
With no arguments the round is played interactively in the console,
`--simulate` runs it in simulation mode and `--log_file` followed by a filename
runs it in logging mode. `--seed` makes the shuffle reproducible.
"""

import argparse
import logging
import os
import random
from typing import List, Optional

from twentyone.blackjack.actor import Dealer, Participant, Player
from twentyone.blackjack.rules import Rules, find_winner, is_bust
from twentyone.blackjack.state import (
    DealingState,
    PlayingState,
    ResolvedState,
    RoundResolvedError,
    RoundState,
)
from twentyone.common.card import Card
from twentyone.common.deck import Deck, DeckSignal
from twentyone.common.io_interface import (
    ConsoleIOInterface,
    DummyIOInterface,
    IOInterface,
    LoggingIOInterface,
)

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class BlackjackRound:
    """
    A class to represent a single round of Blackjack.

    Attributes
    ----------
    deck : Deck
        Deck the round deals from.
    participants : list
        Participants in turn order.
    io_interface : IOInterface
        Interface for round-level announcements.
    rules : Rules
        Object defining the round's rules.
    stays : int
        Number of participants that stayed during the current pass.
    current_state : RoundState
        Current state of the round.
    """

    def __init__(
        self,
        deck: Deck,
        *participants: Participant,
        io_interface: Optional[IOInterface] = None,
        rules: Optional[Rules] = None,
        rng: Optional[random.Random] = None,
    ):
        if not participants:
            raise ValueError("A round needs at least one participant.")
        self.deck = deck
        self.participants: List[Participant] = list(participants)
        self.io_interface = io_interface or ConsoleIOInterface()
        self.rules = rules or Rules()
        self.rng = rng
        self.stays = 0
        self.current_state: RoundState = DealingState()
        self._winner: Optional[Participant] = None

    @property
    def state(self) -> RoundState:
        return self.current_state

    @property
    def is_active(self) -> bool:
        """True until the round has been resolved."""
        return not isinstance(self.current_state, ResolvedState)

    @property
    def winner(self) -> Optional[Participant]:
        """The winning participant once resolved, otherwise None."""
        return self._winner

    def _ensure_active(self):
        if not self.is_active:
            raise RoundResolvedError("The round has already been resolved.")

    def set_state(self, state: RoundState):
        """Change the current state of the round."""
        logger.debug("Changing state from %s to %s", self.current_state, state)
        self.current_state = state

    def start(self):
        """Deal the opening cards and play until the round is resolved."""
        self._ensure_active()
        self.deal()
        self.play()

    def deal(self):
        """Shuffle and deal the opening cards without taking any turns."""
        self._ensure_active()
        if isinstance(self.current_state, DealingState):
            self.current_state.handle(self)

    def play(self):
        """Take passes of turns until the round reaches the resolved state."""
        while self.is_active:
            self.current_state.handle(self)

    def deal_to(self, participant: Participant) -> Optional[Card]:
        """
        Draw the next card from the deck into a participant's hand.

        Nothing is added when the deck is exhausted. The caller decides what
        that means: a participant on its turn stays, the opening deal skips
        the card.

        :return: The card dealt, or None if the deck had no cards left.
        """
        self._ensure_active()
        card = self.deck.draw_next()
        if card is DeckSignal.NO_CARDS_REMAIN:
            logger.warning("Deck exhausted while dealing to %s", participant.name)
            if isinstance(self.current_state, PlayingState):
                self.io_interface.output("No cards remain")
            return None
        participant.add_card(card)
        logger.debug("Dealt %s to %s", card, participant.name)
        return card

    def stay(self):
        """Record that a participant stayed this pass."""
        self._ensure_active()
        self.stays += 1

    def reset_stays(self):
        self.stays = 0

    def resolve(self):
        """Pick the winner, reveal every hand, and end the round."""
        self._ensure_active()
        self._winner = find_winner(self.participants)
        for participant in self.participants:
            participant.render_final_hand(
                winner=participant is self._winner,
                bust=is_bust(participant.score()),
            )
        logger.info(
            "Round resolved, winner: %s",
            self._winner.name if self._winner else "none",
        )
        self.set_state(ResolvedState())


def configure_logging(level=logging.WARNING):
    """Attach a console handler to the package logger once and set its level."""
    root = logging.getLogger("twentyone")
    if os.environ.get("TWENTYONE_DISABLE_LOGGING", "").lower() in (
        "1",
        "true",
        "yes",
    ):
        level = logging.ERROR
    root.setLevel(level)
    if not root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)
    return root


def create_io_interface(args) -> IOInterface:
    """Create the IOInterface matching the command line arguments."""
    if args.log_file:
        return LoggingIOInterface(args.log_file)
    if args.simulate:
        return DummyIOInterface()
    return ConsoleIOInterface()


def play_round(io_interface: IOInterface, rules: Optional[Rules] = None, seed=None):
    """Set up a player, a dealer and a fresh deck, and play one round."""
    rules = rules or Rules()
    rng = random.Random(seed) if seed is not None else None
    player = Player(io_interface)
    dealer = Dealer(io_interface)
    game = BlackjackRound(
        Deck(), player, dealer, io_interface=io_interface, rules=rules, rng=rng
    )
    game.start()
    return game


def main(argv=None):
    """
    Main function to start the game.

    It handles command-line arguments to determine the mode of operation,
    builds the round and plays it to the end.
    """
    parser = argparse.ArgumentParser(description="Play a round of Blackjack.")
    parser.add_argument(
        "--simulate",
        action="store_true",
        help="Run the round without a human; the player always stays.",
        default=False,
    )
    parser.add_argument(
        "--log_file",
        type=str,
        help="Log round output to the specified file instead of the console.",
    )
    parser.add_argument(
        "--seed", type=int, default=None, help="Seed for a reproducible shuffle"
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Show debug logging for deals and decisions.",
        default=False,
    )
    args = parser.parse_args(argv)

    configure_logging(logging.DEBUG if args.verbose else logging.WARNING)
    play_round(create_io_interface(args), seed=args.seed)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
