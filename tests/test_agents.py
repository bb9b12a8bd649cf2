"""Tests for baseline agents."""

from cinch.agents import RandomAgent
from cinch.bidding import Bid
from cinch.card import Card, Rank, Suit
from cinch.constants import Phase
from cinch.game import CinchGame, GameConfig
from cinch.play import TrickPlay


def _game() -> CinchGame:
    game = CinchGame(GameConfig(seed=4))
    for i in range(4):
        game.add_player(f"id{i}", f"P{i}")
    game.start_new_hand()
    return game


def test_random_agent_bids_from_menu():
    game = _game()
    agent = RandomAgent(seed=123)
    player = game.get_current_player()
    for _ in range(50):
        assert agent.choose_bid(game, player) in game.current_valid_bids()
    game.current_bid = 11
    assert agent.choose_bid(game, player) == Bid.PASS


def test_random_agent_trump_is_longest_suit():
    game = _game()
    player = game.players[0]
    player.reset_for_new_hand()
    player.add_cards_to_hand(
        [Card(Suit.CLUBS, Rank.TWO), Card(Suit.CLUBS, Rank.NINE), Card(Suit.HEARTS, Rank.ACE)]
    )
    assert RandomAgent(seed=1).choose_trump(game, player) is Suit.CLUBS


def test_random_agent_discards_non_trump():
    game = _game()
    game.trump_suit = Suit.SPADES
    player = game.players[2]
    indices = RandomAgent().choose_discards(game, player)
    assert all(player.hand[i].suit != Suit.SPADES for i in indices)
    assert len(indices) == len(player.hand.get_non_trump_cards(Suit.SPADES))


def test_random_agent_plays_legal_cards():
    game = _game()
    game.phase = Phase.PLAYING
    game.current_player = 1
    player = game.players[1]
    lead = player.hand[0].suit
    game.trick_plays.append(TrickPlay(0, Card(lead, Rank.TWO), "P0"))
    agent = RandomAgent(seed=7)
    for _ in range(30):
        index = agent.choose_card(game, player)
        assert game.can_play_card(player, index).valid
