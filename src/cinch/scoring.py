"""
Score calculation: High, Low, Jack and Game for each hand, then bid settlement.
Cinch (11) must take all four categories: +11 if made, -11 if not.
A numbered bid is made with at least that many categories: + earned (max 4), else - bid.
The defending team always keeps what it took.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable, Mapping

from .bidding import Bid
from .card import Card, Rank, Suit
from .constants import CINCH_POINTS, MAX_AWARD, WINNING_SCORE, other_team, team_name
from .player import Player


@dataclass(frozen=True)
class CategoryAward:
    """A scoring card (high, low or jack of trump) and the team that captured it."""

    card: Card
    team: int

    def to_dict(self) -> dict[str, Any]:
        return {"card": self.card.to_dict(), "team": self.team}


@dataclass(frozen=True)
class GameAward:
    """Game point: team with the strictly higher card total, None on a tie."""

    team: int | None
    points: dict[int, int]

    def to_dict(self) -> dict[str, Any]:
        return {"team": self.team, "points": dict(self.points)}


@dataclass
class ScoreResult:
    high: CategoryAward | None = None
    low: CategoryAward | None = None
    jack: CategoryAward | None = None
    game: GameAward | None = None
    team_points: dict[int, int] = field(default_factory=lambda: {1: 0, 2: 0})

    def to_dict(self) -> dict[str, Any]:
        return {
            "high": self.high.to_dict() if self.high else None,
            "low": self.low.to_dict() if self.low else None,
            "jack": self.jack.to_dict() if self.jack else None,
            "game": self.game.to_dict() if self.game else None,
            "teamPoints": dict(self.team_points),
        }


@dataclass(frozen=True)
class ApplyResult:
    """Bid settlement; ``points_awarded`` only when the bid was made."""

    success: bool
    bidding_team: int
    points_awarded: int | None = None

    def to_dict(self) -> dict[str, Any]:
        d: dict[str, Any] = {"success": self.success, "biddingTeam": self.bidding_team}
        if self.points_awarded is not None:
            d["pointsAwarded"] = self.points_awarded
        return d


def find_card_team(players: Iterable[Player], card: Card) -> int | None:
    """Team whose won pile holds ``card`` (first match), or None."""
    for player in players:
        if player.won_cards.has_card(card.suit, card.rank):
            return player.team
    return None


def calculate_score(players: Iterable[Player], trump: Suit | None) -> ScoreResult:
    """Award High, Low, Jack and Game from every player's won cards."""
    players = list(players)
    result = ScoreResult()
    team_points = result.team_points

    played: list[Card] = [c for p in players for c in p.won_cards]
    trumps = [c for c in played if c.is_suit(trump)]

    if trumps:
        high = max(trumps, key=lambda c: c.rank_index())
        team = find_card_team(players, high)
        if team is not None:
            team_points[team] += 1
            result.high = CategoryAward(high, team)

        low = min(trumps, key=lambda c: c.rank_index())
        team = find_card_team(players, low)
        if team is not None:
            team_points[team] += 1
            result.low = CategoryAward(low, team)

        jack = next((c for c in trumps if c.rank == Rank.JACK), None)
        if jack is not None:
            team = find_card_team(players, jack)
            if team is not None:
                team_points[team] += 1
                result.jack = CategoryAward(jack, team)

    # Game counts every won card, trump or not
    card_points = {1: 0, 2: 0}
    for p in players:
        card_points[p.team] += p.won_cards.get_total_point_value()
    if card_points[1] > card_points[2]:
        game_team: int | None = 1
    elif card_points[2] > card_points[1]:
        game_team = 2
    else:
        game_team = None
    if game_team is not None:
        team_points[game_team] += 1
    result.game = GameAward(game_team, card_points)

    return result


def settle_bid(
    team_points: Mapping[int, int],
    bid_contract: int,
    bidding_team: int,
) -> tuple[ApplyResult, dict[int, int]]:
    """
    Score changes for one hand. Returns (result, {team: delta}).
    """
    defending = other_team(bidding_team)
    earned = team_points.get(bidding_team, 0)
    deltas = {bidding_team: 0, defending: team_points.get(defending, 0)}

    if bid_contract == Bid.CINCH:
        success = earned == CINCH_POINTS
        awarded = int(Bid.CINCH) if success else None
    else:
        success = earned >= bid_contract
        awarded = min(earned, MAX_AWARD) if success else None

    deltas[bidding_team] = awarded if success else -bid_contract
    return ApplyResult(success, bidding_team, awarded), deltas


def winning_team(scores: Mapping[int, int], target: int = WINNING_SCORE) -> int | None:
    """Match winner once a team reaches ``target``; the higher score if both did, None on a tie."""
    t1, t2 = scores[1], scores[2]
    if t1 >= target and t2 >= target:
        if t1 > t2:
            return 1
        if t2 > t1:
            return 2
        return None
    if t1 >= target:
        return 1
    if t2 >= target:
        return 2
    return None


def describe_score(score: ScoreResult) -> list[str]:
    """Lines announcing each category of a finished hand."""
    lines: list[str] = []
    if score.high:
        lines.append(f"High trump: {score.high.card} - {team_name(score.high.team)}")
    if score.low:
        lines.append(f"Low trump: {score.low.card} - {team_name(score.low.team)}")
    if score.jack:
        lines.append(f"Jack of trump - {team_name(score.jack.team)}")
    if score.game is not None:
        pts = score.game.points
        if score.game.team is not None:
            winner = score.game.team
            lines.append(
                f"Game point: {team_name(winner)} ({pts[winner]} vs {pts[other_team(winner)]})"
            )
        else:
            lines.append(f"Game point: Tie ({pts[1]} each) - No one gets the point")
    lines.append(
        f"Final points - {team_name(1)}: {score.team_points[1]}, {team_name(2)}: {score.team_points[2]}"
    )
    return lines


def describe_settlement(result: ApplyResult, score: ScoreResult, bid_contract: int) -> str:
    team = team_name(result.bidding_team)
    if not result.success:
        return f"{team} failed the bid and loses {bid_contract} points."
    earned = score.team_points[result.bidding_team]
    if bid_contract == Bid.CINCH:
        return f"CINCH SUCCESS! {team} got all 4 points and gets {result.points_awarded} points!"
    if earned > MAX_AWARD:
        return (
            f"{team} made the bid! Earned {earned} points, "
            f"awarded {result.points_awarded} ({MAX_AWARD} point maximum)."
        )
    return f"{team} made the bid and gets {result.points_awarded} points!"
