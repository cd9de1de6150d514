"""
This module provides the state machine behind a round of blackjack. It uses
the state design pattern: the round holds one state object at a time and asks
it to handle the next step.

Classes:

RoundState: An abstract base class for round states.
DealingState: The deck is shuffled and every participant receives its opening cards.
PlayingState: Participants take turns, one full pass per call to handle.
ResolvedState: The winner has been announced. Nothing may change any more.
"""

import logging
from abc import ABC, abstractmethod

from twentyone.blackjack.rules import is_bust, should_end

logger = logging.getLogger(__name__)


class RoundResolvedError(RuntimeError):
    """Raised when something tries to change a round that has already been resolved."""

    pass


class RoundState(ABC):
    """
    Abstract base class for round states.
    """

    @abstractmethod
    def handle(self, game) -> None:
        """The method that handles the round state."""

    def __str__(self) -> str:
        return self.__class__.__name__


class DealingState(RoundState):
    """
    The round state where the dealer shuffles and deals.
    """

    def handle(self, game):
        """
        Shuffles the deck, deals the opening cards in interleaved passes, shows
        every hand and moves on to PlayingState.
        """
        game.deck.shuffle(game.rng)
        for _ in range(game.rules.initial_cards):
            self.deal_all(game)
        for participant in game.participants:
            participant.render_hand()
        game.set_state(PlayingState())

    def deal_all(self, game):
        """Deals one card to each participant in turn order."""
        for participant in game.participants:
            game.deal_to(participant)


class PlayingState(RoundState):
    """
    The round state where participants take their turns.
    """

    def handle(self, game):
        """
        Runs one full pass of turns. Reports a bust right after the turn that
        caused it, then either resolves the round or starts a fresh pass.
        """
        for participant in game.participants:
            participant.take_turn(game)
            self.validate_score(game, participant)

        scores = [participant.score() for participant in game.participants]
        if should_end(game.stays, scores):
            logger.debug("Round over after pass: stays=%d scores=%s", game.stays, scores)
            game.resolve()
        else:
            game.reset_stays()

    def validate_score(self, game, participant):
        if is_bust(participant.score()):
            logger.debug("%s is bust with %d", participant.name, participant.score())
            game.io_interface.output("Bust!")


class ResolvedState(RoundState):
    """
    The terminal round state.
    """

    def handle(self, game):
        raise RoundResolvedError("The round has already been resolved.")
