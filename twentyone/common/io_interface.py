"""
This module contains the IOInterface abstract base class and its implementations.

The game core never prints or reads directly. It hands plain messages and
`HandView` records to an IOInterface, and asks it for raw lines of input.
How a hand is turned into text is decided here, by `format_hand`.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import List

import aiofiles

from twentyone.common.card import Card

CONCEALED_CARD = "XX"
WINNER_MARKER = "Winner!"
BUST_MARKER = "Over!"


@dataclass(frozen=True)
class HandView:
    """
    What a participant shows of its hand at one moment.

    :param label: Caption printed before the cards, e.g. "Your Hand"
    :param cards: The cards, in deal order
    :param conceal_first: Hide the first card behind a placeholder
    :param winner: The participant won the round
    :param bust: The participant's score is over 21
    """

    label: str
    cards: List[Card] = field(default_factory=list)
    conceal_first: bool = False
    winner: bool = False
    bust: bool = False


def format_hand(view: HandView) -> str:
    """
    Render a hand view as one line of text.

    >>> from twentyone.common.card import Rank, Suit
    >>> format_hand(HandView("Dealer", [Card(Suit.CLUBS, Rank.THREE), Card(Suit.DIAMONDS, Rank.FIVE)], conceal_first=True))
    'Dealer: XX 5♦'
    """
    shown = [str(card) for card in view.cards]
    if view.conceal_first and shown:
        shown[0] = CONCEALED_CARD
    prefix = ""
    if view.winner:
        prefix = f"{WINNER_MARKER} "
    elif view.bust:
        prefix = f"{BUST_MARKER} "
    return f"{prefix}{view.label}: {' '.join(shown)}"


class IOInterface(ABC):
    """
    Abstract base class for an IO interface.

    This class defines the interface for input/output operations in the game.
    """

    @abstractmethod
    def output(self, message: str) -> None:
        """Output a message to the interface."""

    @abstractmethod
    def input(self, prompt: str) -> str:
        """Get one line of input from the user with a prompt."""

    def render_hand(self, view: HandView) -> None:
        """Display a participant's hand."""
        self.output(format_hand(view))


class DummyIOInterface(IOInterface):
    """
    A dummy IO interface for simulation purposes. Does not perform any actual IO.

    Every prompt is answered with an empty line, which a player treats as a stay.
    """

    def output(self, message: str) -> None:
        """Simulates output operation."""

    def input(self, prompt: str) -> str:
        """Simulates input operation."""
        return ""


class TestIOInterface(IOInterface):
    """
    A test IO interface for testing purposes. Collects output messages and
    answers prompts from a queue of scripted responses.

    Methods
    -------
    def output(self, message):
        Collect an output message.

    def input(self, prompt):
        Return the next scripted response, or "stay" when the queue is empty.

    def add_input(self, response):
        Add a response to the queue.
    """

    __test__ = False

    def __init__(self, *responses: str):
        self.sent_messages: List[str] = []
        self.prompts: List[str] = []
        self.hand_views: List[HandView] = []
        self.input_responses: List[str] = list(responses)

    def output(self, message: str) -> None:
        self.sent_messages.append(message)

    def input(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if self.input_responses:
            return self.input_responses.pop(0)
        return "stay"

    def add_input(self, response: str) -> None:
        """Add a response to the queue."""
        self.input_responses.append(response)

    def render_hand(self, view: HandView) -> None:
        self.hand_views.append(view)
        super().render_hand(view)


class ConsoleIOInterface(IOInterface):
    """
    A console IO interface for interactive gameplay.
    """

    def output(self, message: str) -> None:
        print(message)

    def input(self, prompt: str) -> str:
        return input(prompt)


class LoggingIOInterface(IOInterface):
    """
    A logging IO interface for recording purposes. Writes output messages to a log file.

    Prompts are recorded and answered with an empty line, so a player
    driven through this interface always stays.
    """

    def __init__(self, log_file_path: str):
        self.log_file_path = log_file_path

    def output(self, message: str) -> None:
        """Write an output message to the log file."""
        with open(self.log_file_path, "a", encoding="utf-8") as log_file:
            log_file.write(message + "\n")

    def input(self, prompt: str) -> str:
        """Log the prompt and return empty string."""
        self.output(f"[INPUT PROMPT] {prompt}")
        return ""

    async def output_async(self, message: str) -> None:
        """Async version of output for callers running in an event loop."""
        async with aiofiles.open(
            self.log_file_path, mode="a", encoding="utf-8"
        ) as log_file:
            await log_file.write(message + "\n")
