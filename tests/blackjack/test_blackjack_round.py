import logging

import pytest

from twentyone.blackjack.actor import Dealer, Player
from twentyone.blackjack.blackjack import BlackjackRound, configure_logging, main
from twentyone.blackjack.rules import Rules
from twentyone.blackjack.state import (
    DealingState,
    PlayingState,
    ResolvedState,
    RoundResolvedError,
)
from twentyone.common.card import Rank
from twentyone.common.deck import Deck
from twentyone.common.io_interface import TestIOInterface


def new_round(deck, io, rng, *participants):
    if not participants:
        participants = (Player(io), Dealer(io))
    return BlackjackRound(deck, *participants, io_interface=io, rng=rng)


def test_round_stores_deck_and_participants(io):
    deck = Deck()
    player, dealer = Player(io), Dealer(io)
    game = BlackjackRound(deck, player, dealer, io_interface=io)
    assert game.deck is deck
    assert game.participants == [player, dealer]
    assert game.stays == 0
    assert isinstance(game.state, DealingState)
    assert game.is_active


def test_round_requires_participants():
    with pytest.raises(ValueError):
        BlackjackRound(Deck())


def test_deal_shuffles_the_deck(io, mocker):
    deck = Deck()
    spy = mocker.spy(deck, "shuffle")
    game = BlackjackRound(deck, Player(io), io_interface=io)
    game.deal()
    spy.assert_called_once()


def test_deal_interleaves_two_passes(io, no_shuffle, make_deck):
    deck = make_deck(Rank.TWO, Rank.THREE, Rank.FOUR, Rank.FIVE)
    player, dealer = Player(io), Dealer(io)
    game = new_round(deck, io, no_shuffle, player, dealer)

    game.deal()

    assert [card.rank for card in player.cards] == [Rank.TWO, Rank.FOUR]
    assert [card.rank for card in dealer.cards] == [Rank.THREE, Rank.FIVE]
    assert isinstance(game.state, PlayingState)
    assert io.sent_messages == ["Your Hand: 2♠ 4♠", "Dealer: XX 5♠"]


def test_deal_to_a_participant(io):
    player = Player(io)
    game = BlackjackRound(Deck(), player, io_interface=io)
    assert player.cards == []
    card = game.deal_to(player)
    assert player.cards == [card]


def test_stay_and_reset_stays(io):
    game = BlackjackRound(Deck(), Player(io), io_interface=io)
    game.stay()
    assert game.stays == 1
    game.reset_stays()
    assert game.stays == 0


def test_exhausted_deck_during_opening_deal_skips_card(io, no_shuffle, make_deck):
    deck = make_deck(Rank.TEN, Rank.TWO, Rank.NINE)
    player, dealer = Player(io), Dealer(io)
    game = new_round(deck, io, no_shuffle, player, dealer)

    game.deal()

    assert len(player.cards) == 2
    assert len(dealer.cards) == 1
    assert game.stays == 0


def test_both_stay_resolves_round(no_shuffle, make_deck):
    io = TestIOInterface("s")
    deck = make_deck(Rank.TEN, Rank.TEN, Rank.NINE, Rank.SEVEN)
    player, dealer = Player(io), Dealer(io)
    game = new_round(deck, io, no_shuffle, player, dealer)

    game.start()

    assert not game.is_active
    assert isinstance(game.state, ResolvedState)
    assert game.winner is player
    assert io.sent_messages[-2:] == ["Winner! Your Hand: 10♠ 9♠", "Dealer: 10♠ 7♠"]
    assert "Bust!" not in io.sent_messages


def test_player_bust_resolves_round_for_dealer(no_shuffle, make_deck):
    io = TestIOInterface("h")
    deck = make_deck(Rank.TEN, Rank.SEVEN, Rank.NINE, Rank.SIX, Rank.FIVE)
    player, dealer = Player(io), Dealer(io)
    game = new_round(deck, io, no_shuffle, player, dealer)

    game.start()

    assert player.score() == 24
    assert game.winner is dealer
    assert "Bust!" in io.sent_messages
    assert io.sent_messages[-2:] == ["Over! Your Hand: 10♠ 9♠ 5♠", "Winner! Dealer: 7♠ 6♠"]


def test_bust_is_reported_right_after_the_busting_turn(no_shuffle, make_deck):
    io = TestIOInterface("h")
    deck = make_deck(Rank.TEN, Rank.SEVEN, Rank.NINE, Rank.SIX, Rank.FIVE)
    game = new_round(deck, io, no_shuffle)

    game.start()

    bust = io.sent_messages.index("Bust!")
    assert io.sent_messages[bust - 1] == "5♠"
    assert io.sent_messages[bust + 1] == "Dealers Turn"
    assert io.sent_messages.count("Bust!") == 1


def test_round_rules_set_the_dealer_hit_limit(io, no_shuffle, make_deck):
    deck = make_deck(Rank.TEN, Rank.TEN, Rank.NINE, Rank.FOUR, Rank.TWO, Rank.SIX)
    player, dealer = Player(io), Dealer(io)
    game = BlackjackRound(
        deck, player, dealer, io_interface=io, rules=Rules(dealer_hit_limit=16), rng=no_shuffle
    )

    game.start()

    assert "Hit me" in io.sent_messages
    assert [card.rank for card in dealer.cards] == [Rank.TEN, Rank.FOUR, Rank.TWO, Rank.SIX]
    assert game.winner is player


def test_deal_to_outside_a_turn_does_not_count_a_stay(io, no_shuffle, make_deck):
    deck = make_deck(Rank.TEN, Rank.TWO, Rank.NINE, Rank.THREE)
    player = Player(io)
    game = new_round(deck, io, no_shuffle, player, Dealer(io))
    game.deal()

    assert game.deal_to(player) is None
    assert game.stays == 0
    assert len(player.cards) == 2
    assert io.sent_messages[-1] == "No cards remain"


def test_dealer_draws_until_over_twelve(no_shuffle, make_deck):
    io = TestIOInterface()
    deck = make_deck(Rank.TEN, Rank.TWO, Rank.NINE, Rank.THREE, Rank.EIGHT)
    player, dealer = Player(io), Dealer(io)
    game = new_round(deck, io, no_shuffle, player, dealer)

    game.start()

    assert dealer.score() == 13
    assert "Hit me" in io.sent_messages
    # One prompt per pass: the dealer hit in the first pass, so a second was needed.
    assert len(io.prompts) == 2
    assert game.winner is player


def test_exhausted_deck_during_play_forces_stay(no_shuffle, make_deck):
    io = TestIOInterface()
    deck = make_deck(Rank.TEN, Rank.TWO, Rank.NINE, Rank.THREE)
    player, dealer = Player(io), Dealer(io)
    game = new_round(deck, io, no_shuffle, player, dealer)

    game.start()

    assert "No cards remain" in io.sent_messages
    assert len(dealer.cards) == 2
    assert len(io.prompts) == 1
    assert game.winner is player


def test_everyone_bust_has_no_winner(no_shuffle, make_deck):
    io = TestIOInterface("h", "h")
    deck = make_deck(Rank.TEN, Rank.TEN, Rank.TEN, Rank.TEN, Rank.FIVE, Rank.FIVE)
    first, second = Player(io, "first"), Player(io, "second")
    game = new_round(deck, io, no_shuffle, first, second)

    game.start()

    assert game.winner is None
    assert io.sent_messages.count("Bust!") == 2
    assert io.sent_messages[-2:] == ["Over! Your Hand: 10♠ 10♠ 5♠", "Over! Your Hand: 10♠ 10♠ 5♠"]


def test_tie_goes_to_first_participant(no_shuffle, make_deck):
    io = TestIOInterface()
    deck = make_deck(Rank.TEN, Rank.KING, Rank.NINE, Rank.NINE)
    player, dealer = Player(io), Dealer(io)
    game = new_round(deck, io, no_shuffle, player, dealer)

    game.start()

    assert player.score() == dealer.score() == 19
    assert game.winner is player


def test_resolved_round_cannot_change(no_shuffle, make_deck, io):
    deck = make_deck(Rank.TEN, Rank.TEN, Rank.NINE, Rank.SEVEN, Rank.TWO)
    player = Player(io)
    game = new_round(deck, io, no_shuffle, player, Dealer(io))
    game.start()

    with pytest.raises(RoundResolvedError):
        game.stay()
    with pytest.raises(RoundResolvedError):
        game.deal_to(player)
    with pytest.raises(RoundResolvedError):
        game.start()
    assert len(player.cards) == 2


def test_exhaustion_is_logged(no_shuffle, make_deck, caplog):
    io = TestIOInterface()
    deck = make_deck(Rank.TEN, Rank.TWO, Rank.NINE, Rank.THREE)
    game = new_round(deck, io, no_shuffle)

    with caplog.at_level(logging.WARNING, logger="twentyone"):
        game.start()

    assert "Deck exhausted" in caplog.text


def test_configure_logging_honours_disable_flag(monkeypatch):
    monkeypatch.setenv("TWENTYONE_DISABLE_LOGGING", "1")
    logger = configure_logging(logging.DEBUG)
    assert logger.level == logging.ERROR
    monkeypatch.delenv("TWENTYONE_DISABLE_LOGGING")
    assert configure_logging(logging.WARNING).level == logging.WARNING


def test_main_simulate():
    assert main(["--simulate", "--seed", "7"]) == 0


def test_main_log_file(tmp_path):
    log_file = tmp_path / "round.log"
    assert main(["--log_file", str(log_file), "--seed", "3"]) == 0
    lines = log_file.read_text(encoding="utf-8").splitlines()
    assert "Next Turn" in lines
    assert any(line.startswith("[INPUT PROMPT] Hit (h) or Stay (s)?") for line in lines)
    assert any("Dealer: " in line and "XX" not in line for line in lines)
