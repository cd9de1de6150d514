"""Blackjack participants, rules and the round orchestrator."""

from .action import Action
from .actor import Dealer, Participant, Player
from .rules import Rules

__all__ = ["Action", "Dealer", "Participant", "Player", "Rules"]
