"""
Full hands and matches driven through the public engine API, one call at a time,
exactly as a transport handler would: bid → trump → discard → play → score.
A hand where every seat passes is thrown in and redealt by the next dealer.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence

from loguru import logger

from .agents import CinchAgent
from .bidding import Bid, BidResult
from .card import Suit
from .constants import MAX_PLAYERS, Phase
from .game import CinchGame
from .scoring import ApplyResult, ScoreResult


@dataclass
class HandRecord:
    """What happened in one scored hand."""

    dealer: int
    bidder: int
    contract: int
    trump: Suit
    score: ScoreResult
    settlement: ApplyResult
    scores_after: dict[int, int]


@dataclass
class MatchSummary:
    winning_team: int | None
    scores: dict[int, int]
    hands: list[HandRecord] = field(default_factory=list)
    redeals: int = 0

    @property
    def hands_played(self) -> int:
        return len(self.hands)


def run_bidding(game: CinchGame, agents: Sequence[CinchAgent]) -> BidResult:
    """Ask seats for bids until bidding closes. Returns the closing result."""
    result = BidResult(finished=False)
    while game.phase == Phase.BIDDING:
        player = game.get_current_player()
        result = game.process_bid(player, agents[player.seat].choose_bid(game, player))
        if result.error is not None:
            # The seat cannot counter; treat it as a pass so the offer moves on.
            result = game.process_bid(player, Bid.PASS)
        if result.finished:
            break
    return result


def play_hand(game: CinchGame, agents: Sequence[CinchAgent]) -> HandRecord | None:
    """Deal and play one hand. Returns None if everybody passed."""
    game.start_new_hand()
    bidding = run_bidding(game, agents)
    if bidding.all_passed or game.highest_bidder is None:
        logger.debug(f"Everyone passed on dealer {game.dealer}; redealing.")
        return None

    bidder = game.highest_bidder
    if not game.set_trump(agents[bidder.seat].choose_trump(game, bidder)):
        raise ValueError(f"{bidder.name} named an invalid trump suit")

    for player in game.players:
        game.discard_cards(player, agents[player.seat].choose_discards(game, player))

    while not game.is_hand_complete():
        player = game.get_current_player()
        index = agents[player.seat].choose_card(game, player)
        check = game.can_play_card(player, index)
        if not check.valid:
            raise ValueError(f"{player.name} made an illegal play: {check.reason}")
        game.play_card(player, index)

    score = game.calculate_score()
    settlement = game.apply_score(score)
    return HandRecord(
        dealer=game.dealer,
        bidder=bidder.seat,
        contract=game.bid_contract,
        trump=game.trump_suit,
        score=score,
        settlement=settlement,
        scores_after=dict(game.scores),
    )


def play_match(
    game: CinchGame,
    agents: Sequence[CinchAgent],
    max_hands: int = 200,
) -> MatchSummary:
    """
    Play hands until a team reaches the target score or ``max_hands`` deals have
    been made (redeals count). The table must already have four players seated.
    """
    if len(game.players) != MAX_PLAYERS or len(agents) != MAX_PLAYERS:
        raise ValueError("A match needs exactly four seated players and four agents")

    summary = MatchSummary(winning_team=None, scores=game.scores)
    for _ in range(max_hands):
        record = play_hand(game, agents)
        if record is None:
            summary.redeals += 1
            continue
        summary.hands.append(record)
        if game.is_game_complete():
            break

    summary.winning_team = game.get_winning_team()
    summary.scores = dict(game.scores)
    return summary


__all__ = ["HandRecord", "MatchSummary", "run_bidding", "play_hand", "play_match"]
