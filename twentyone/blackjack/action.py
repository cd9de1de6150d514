"""Defines the Action enum for the choices a participant makes on its turn."""
from enum import Enum

HIT_TOKENS = ("h", "hit")


class Action(Enum):
    """Enum for the possible actions a participant can take in a round of blackjack."""

    HIT = "hit"
    STAY = "stay"

    @classmethod
    def from_input(cls, text: str) -> "Action":
        """
        Interpret a line typed by the player.

        "h" and "hit" in any case mean HIT. Anything else, including an
        empty or unrecognised line, means STAY.
        """
        if text is not None and text.strip().lower() in HIT_TOKENS:
            return cls.HIT
        return cls.STAY
