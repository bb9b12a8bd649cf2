"""Tests for hand scoring and match scoring."""

from cinch.card import Card, Rank, Suit
from cinch.game import CinchGame
from cinch.scoring import (
    ScoreResult,
    describe_score,
    describe_settlement,
    settle_bid,
    winning_team,
)


def _game(trump: Suit = Suit.HEARTS) -> CinchGame:
    game = CinchGame()
    for i in range(4):
        game.add_player(f"id{i}", f"Player{i}")
    game.trump_suit = trump
    return game


def test_high_low_jack_game():
    game = _game(Suit.HEARTS)
    p = game.players
    p[0].add_won_cards(
        [Card(Suit.HEARTS, Rank.ACE), Card(Suit.SPADES, Rank.KING), Card(Suit.DIAMONDS, Rank.TEN), Card(Suit.CLUBS, Rank.THREE)]
    )
    p[1].add_won_cards(
        [Card(Suit.HEARTS, Rank.JACK), Card(Suit.HEARTS, Rank.TWO), Card(Suit.CLUBS, Rank.FIVE), Card(Suit.DIAMONDS, Rank.FOUR)]
    )

    score = game.calculate_score()
    assert score.high.card == Card(Suit.HEARTS, Rank.ACE)
    assert score.high.team == 1
    assert score.low.card == Card(Suit.HEARTS, Rank.TWO)
    assert score.low.team == 2
    assert score.jack.team == 2
    # A+K+10 = 17 vs J = 1
    assert score.game.team == 1
    assert score.game.points == {1: 17, 2: 1}
    assert score.team_points == {1: 2, 2: 2}


def test_partner_piles_count_for_the_team():
    game = _game(Suit.CLUBS)
    p = game.players
    p[0].add_won_cards([Card(Suit.CLUBS, Rank.KING)])
    p[2].add_won_cards([Card(Suit.CLUBS, Rank.FOUR), Card(Suit.CLUBS, Rank.JACK)])
    p[3].add_won_cards([Card(Suit.HEARTS, Rank.TEN)])
    score = game.calculate_score()
    assert score.high.team == 1
    assert score.low.team == 1
    assert score.jack.team == 1
    # team 1: K + J = 4, team 2: 10
    assert score.game.team == 2
    assert score.team_points == {1: 3, 2: 1}


def test_no_trump_played_and_tied_game():
    game = _game(Suit.HEARTS)
    game.players[0].add_won_cards([Card(Suit.SPADES, Rank.KING)])
    game.players[1].add_won_cards([Card(Suit.DIAMONDS, Rank.KING)])
    score = game.calculate_score()
    assert score.high is None and score.low is None and score.jack is None
    assert score.game.team is None
    assert score.game.points == {1: 3, 2: 3}
    assert score.team_points == {1: 0, 2: 0}
    assert "Tie (3 each)" in describe_score(score)[0]


def test_single_trump_is_both_high_and_low():
    game = _game(Suit.DIAMONDS)
    game.players[1].add_won_cards([Card(Suit.DIAMONDS, Rank.SEVEN)])
    score = game.calculate_score()
    assert score.high.team == 2 and score.low.team == 2
    assert score.jack is None
    assert score.team_points == {1: 0, 2: 2}


def test_find_card_team():
    game = _game()
    game.players[0].add_won_cards([Card(Suit.HEARTS, Rank.ACE)])
    game.players[1].add_won_cards([Card(Suit.SPADES, Rank.KING)])
    assert game.find_card_team(Card(Suit.SPADES, Rank.KING)) == 2
    assert game.find_card_team(Card(Suit.DIAMONDS, Rank.QUEEN)) is None


def test_apply_score_capped_award():
    game = _game()
    game.highest_bidder = game.players[0]
    game.bid_contract = 2
    result = game.apply_score(ScoreResult(team_points={1: 5, 2: 1}))
    assert result.success
    assert result.points_awarded == 4
    assert game.scores == {1: 4, 2: 1}
    assert result.to_dict() == {"success": True, "biddingTeam": 1, "pointsAwarded": 4}


def test_apply_score_failed_cinch():
    game = _game()
    game.highest_bidder = game.players[2]
    game.bid_contract = 11
    result = game.apply_score(ScoreResult(team_points={1: 3, 2: 1}))
    assert not result.success
    assert result.points_awarded is None
    assert game.scores == {1: -11, 2: 1}


def test_apply_score_made_cinch():
    game = _game()
    game.highest_bidder = game.players[0]
    game.bid_contract = 11
    result = game.apply_score(ScoreResult(team_points={1: 4, 2: 0}))
    assert result.success
    assert result.points_awarded == 11
    assert game.scores == {1: 11, 2: 0}


def test_apply_score_failed_numbered_bid():
    game = _game()
    game.highest_bidder = game.players[1]
    game.bid_contract = 3
    result = game.apply_score(ScoreResult(team_points={1: 2, 2: 2}))
    assert not result.success
    assert result.bidding_team == 2
    assert game.scores == {1: 2, 2: -3}


def test_settle_bid_exact_contract():
    result, deltas = settle_bid({1: 1, 2: 3}, 3, 2)
    assert result.success and result.points_awarded == 3
    assert deltas == {2: 3, 1: 1}


def test_game_completion_and_winner():
    game = _game()
    assert not game.is_game_complete()
    assert game.get_winning_team() is None

    game.scores = {1: 21, 2: 20}
    assert game.is_game_complete()
    assert game.get_winning_team() == 1

    game.scores = {1: 22, 2: 25}
    assert game.get_winning_team() == 2

    game.scores = {1: 23, 2: 23}
    assert game.is_game_complete()
    assert game.get_winning_team() is None

    game.scores = {1: -5, 2: 20}
    assert not game.is_game_complete()
    assert game.get_winning_team() is None


def test_winning_team_custom_target():
    assert winning_team({1: 11, 2: 3}, target=11) == 1
    assert winning_team({1: 11, 2: 3}) is None


def test_describe_settlement():
    score = ScoreResult(team_points={1: 4, 2: 0})
    result, _ = settle_bid(score.team_points, 11, 1)
    assert describe_settlement(result, score, 11).startswith("CINCH SUCCESS!")
    score = ScoreResult(team_points={1: 5, 2: 0})
    result, _ = settle_bid(score.team_points, 2, 1)
    assert "4 point maximum" in describe_settlement(result, score, 2)
    result, _ = settle_bid({1: 0, 2: 1}, 2, 1)
    assert describe_settlement(result, score, 2) == "Blue Team failed the bid and loses 2 points."
