"""
This module provides the `Participant` base class and its `Player` and `Dealer`
variants for a round of blackjack.

A participant owns exactly one hand, shows it through its IO interface, and
decides on its turn whether to draw a card or stay. The `Player` asks the
person at the console; the `Dealer` follows a fixed rule and hides its first
card until the round is over.

This module is part of the `twentyone` package, a console blackjack game.
"""

import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, List

from twentyone.blackjack.action import Action
from twentyone.blackjack.rules import Rules
from twentyone.common.card import Card
from twentyone.common.hand import Hand
from twentyone.common.io_interface import HandView, IOInterface

if TYPE_CHECKING:
    from twentyone.blackjack.blackjack import BlackjackRound

logger = logging.getLogger(__name__)

PLAYER_PROMPT = "Hit (h) or Stay (s)?: "


class Participant(ABC):
    """
    Abstract base class for anyone holding a hand in a round.

    :param name: Name of the participant
    :param io_interface: Where the participant shows its hand and reads input
    """

    label = "Hand"

    def __init__(self, name: str, io_interface: IOInterface):
        self.name = name
        self.io_interface = io_interface
        self.hand = Hand()

    @property
    def cards(self) -> List[Card]:
        return self.hand.cards

    def add_card(self, card: Card) -> None:
        self.hand.add_card(card)

    def score(self) -> int:
        return self.hand.score()

    def view(self, conceal_first: bool = False, **flags) -> HandView:
        """Build the structured view of this participant's hand."""
        return HandView(self.label, self.cards, conceal_first=conceal_first, **flags)

    def render_final_hand(self, winner: bool = False, bust: bool = False) -> None:
        """Show every card, with the end-of-round markers."""
        self.io_interface.render_hand(self.view(winner=winner, bust=bust))

    def _show_last_card(self) -> None:
        if self.cards:
            self.io_interface.output(str(self.cards[-1]))

    @abstractmethod
    def render_hand(self) -> None:
        """Show the hand as it may be seen mid-round."""

    @abstractmethod
    def take_turn(self, game: "BlackjackRound") -> Action:
        """
        Play one turn: either draw a card through the round or stay.

        :param game: The round being played
        :return: The action taken
        """

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.name!r}, {self.hand!r})"


class Player(Participant):
    """The human participant, deciding each turn from console input."""

    label = "Your Hand"

    def __init__(self, io_interface: IOInterface, name: str = "Player"):
        super().__init__(name, io_interface)

    def render_hand(self) -> None:
        self.io_interface.render_hand(self.view())

    def decide(self) -> Action:
        """Ask for a hit or stay and interpret the answer."""
        return Action.from_input(self.io_interface.input(PLAYER_PROMPT))

    def take_turn(self, game: "BlackjackRound") -> Action:
        self.io_interface.output("Next Turn")
        self.render_hand()
        action = self.decide()
        logger.debug("%s chose %s at score %d", self.name, action.value, self.score())
        if action == Action.HIT and game.deal_to(self) is not None:
            self._show_last_card()
            return Action.HIT
        game.stay()
        return Action.STAY


class Dealer(Participant):
    """
    The house. Draws while its score is at or below the rules' hit limit and
    keeps its first card face down until the final reveal.
    """

    label = "Dealer"

    def __init__(self, io_interface: IOInterface, name: str = "Dealer"):
        super().__init__(name, io_interface)

    def render_hand(self) -> None:
        self.io_interface.render_hand(self.view(conceal_first=True))

    def decide(self, rules: Rules) -> Action:
        if rules.should_dealer_hit(self.score()):
            return Action.HIT
        return Action.STAY

    def take_turn(self, game: "BlackjackRound") -> Action:
        self.io_interface.output("Dealers Turn")
        self.render_hand()
        action = self.decide(game.rules)
        logger.debug("%s %s at score %d", self.name, action.value, self.score())
        if action == Action.HIT:
            self.io_interface.output("Hit me")
            if game.deal_to(self) is not None:
                self._show_last_card()
                return Action.HIT
            game.stay()
            return Action.STAY
        self.io_interface.output("Stay")
        game.stay()
        return Action.STAY
