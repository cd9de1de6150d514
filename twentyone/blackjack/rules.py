"""
Rules of a blackjack round, and the decisions a round takes on them.

`Rules` holds the tunable numbers. The module-level functions take every
piece of state they need as arguments so the round's end-of-pass logic can
be exercised without building a round.
"""

from typing import TYPE_CHECKING, Iterable, Optional, Sequence

from twentyone.common.hand import BLACKJACK

if TYPE_CHECKING:
    from twentyone.blackjack.actor import Participant


class Rules:
    def __init__(
        self,
        dealer_hit_limit: int = 12,
        initial_cards: int = 2,
    ):
        if initial_cards < 0:
            raise ValueError("initial_cards cannot be negative")
        self.dealer_hit_limit = dealer_hit_limit
        self.initial_cards = initial_cards

    def to_dict(self) -> dict:
        """Convert rules to a dictionary for serialization."""
        return {
            "dealer_hit_limit": self.dealer_hit_limit,
            "initial_cards": self.initial_cards,
        }

    def should_dealer_hit(self, score: int) -> bool:
        """The dealer draws while its score is at or below the hit limit."""
        return score <= self.dealer_hit_limit

    def __repr__(self) -> str:
        return f"Rules({self.to_dict()})"


def is_bust(score: int) -> bool:
    """Check if a score is over 21."""
    return score > BLACKJACK


def all_stayed(stays: int, participant_count: int) -> bool:
    """Every participant chose to stay during the current pass."""
    return stays == participant_count


def zero_or_one_valid(scores: Iterable[int]) -> bool:
    """At most one participant is still at or under 21."""
    return len([score for score in scores if not is_bust(score)]) <= 1


def should_end(stays: int, scores: Sequence[int]) -> bool:
    """
    Decide whether a round is over after a full pass of turns.

    Args:
        stays: How many participants stayed during the pass.
        scores: The score of every participant, in turn order.

    Returns:
        True if everyone stayed or no more than one participant is not bust.
    """
    return all_stayed(stays, len(scores)) or zero_or_one_valid(scores)


def find_winner(participants: Sequence["Participant"]) -> Optional["Participant"]:
    """
    Pick the participant with the highest score that is not bust.

    Ties go to whoever comes first in turn order. Returns None when every
    participant is bust.
    """
    winner = None
    for participant in participants:
        score = participant.score()
        if is_bust(score):
            continue
        if winner is None or score > winner.score():
            winner = participant
    return winner
