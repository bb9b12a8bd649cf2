"""Tests for players."""

from cinch.card import Card, Rank, Suit
from cinch.player import Player


def test_team_from_seat():
    assert [Player(f"id{i}", i).team for i in range(4)] == [1, 2, 1, 2]


def test_default_name():
    assert Player("x", 2).name == "Player 3"
    assert Player("x", 2, "Ann").name == "Ann"


def test_play_and_discard():
    p = Player("x", 0)
    cards = [
        Card(Suit.HEARTS, Rank.TWO),
        Card(Suit.CLUBS, Rank.THREE),
        Card(Suit.SPADES, Rank.FOUR),
        Card(Suit.DIAMONDS, Rank.FIVE),
    ]
    p.add_cards_to_hand(cards)
    assert p.play_card(1) == cards[1]
    discarded = p.discard_cards([0, 2])
    assert set(discarded) == {cards[0], cards[3]}
    assert list(p.hand) == [cards[2]]


def test_reset_for_new_hand():
    p = Player("x", 1)
    p.add_card_to_hand(Card(Suit.HEARTS, Rank.ACE))
    p.add_won_cards([Card(Suit.CLUBS, Rank.KING)])
    old_hand = p.hand
    p.reset_for_new_hand()
    assert p.hand.is_empty() and p.won_cards.is_empty()
    assert p.hand is not old_hand
    assert p.to_dict() == {"name": "Player 2", "team": 2, "seat": 1}
