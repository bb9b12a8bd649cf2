"""
Hand and match orchestration: deal → bid (with cinch override) → trump → discard/top-up
→ 6 tricks → score, repeated until a team reaches 21.

The engine is synchronous and does no I/O. A transport layer calls these methods one
event at a time and turns the returned result objects into messages for the players.
"""
from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Any, Iterable

from loguru import logger

from .bidding import Bid, BidResult, is_valid_bid, parse_bid, valid_bids
from .card import Card, Suit
from .constants import HAND_SIZE, MAX_PLAYERS, WINNING_SCORE, Phase, other_team
from .deal import deal_round_robin, first_to_bid, next_dealer, top_up
from .deck import Deck, secure_rng
from .play import (
    INVALID_CARD_INDEX,
    NOT_YOUR_TURN,
    PlayCheck,
    PlayResult,
    TrickPlay,
    check_follow_suit,
    legal_plays,
    resolve_trick,
)
from .player import Player
from .scoring import ApplyResult, ScoreResult, calculate_score, find_card_team, settle_bid, winning_team

ALREADY_BID = "Player has already bid this hand"


@dataclass(frozen=True)
class GameConfig:
    """Table settings. ``secure_shuffle`` swaps the seeded generator for the OS source."""

    target_score: int = WINNING_SCORE
    hand_size: int = HAND_SIZE
    secure_shuffle: bool = False
    seed: int | None = None

    def __post_init__(self) -> None:
        assert self.target_score > 0
        # 4 × hand_size must fit in the pack for the initial deal
        assert 0 < self.hand_size <= 52 // MAX_PLAYERS

    def make_rng(self) -> random.Random:
        if self.secure_shuffle:
            return secure_rng()
        return random.Random(self.seed)


@dataclass(frozen=True)
class DiscardResult:
    """Answer to ``discard_cards``. Once every seat has discarded, hands are topped up and play starts."""

    accepted: bool
    discarded: int = 0
    all_discarded: bool = False
    reason: str | None = None

    def to_dict(self) -> dict[str, Any]:
        d: dict[str, Any] = {"accepted": self.accepted}
        if self.accepted:
            d["discarded"] = self.discarded
            d["allDiscarded"] = self.all_discarded
        else:
            d["reason"] = self.reason
        return d


class CinchGame:
    """
    Mutable state for one table: roster, deck, phase, turn, bidding, trump, trick and scores.

    Example:
    game = CinchGame()
    for i in range(4):
        game.add_player(f"id{i}", f"P{i}")
    game.start_new_hand()
    game.process_bid(game.get_current_player(), "2")
    """

    def __init__(self, config: GameConfig | None = None, rng: random.Random | None = None):
        self.config = config if config is not None else GameConfig()
        self.rng = rng if rng is not None else self.config.make_rng()
        self.reset()

    # ------------------------------------------------------------------ lifecycle

    def reset(self) -> None:
        """Back to an empty table: no players, no hand dealt, scores at zero."""
        self.players: list[Player] = []
        self.deck = Deck(self.rng)
        self.phase = Phase.WAITING
        self.dealer = -1  # first start_new_hand makes seat 0 the dealer
        self.is_first_hand = True
        self.current_player = 0
        self.scores: dict[int, int] = {1: 0, 2: 0}
        self._clear_hand_state()

    def _clear_hand_state(self) -> None:
        self.current_bid = 0
        self.highest_bidder: Player | None = None
        self.bid_contract = 0
        self.trump_suit: Suit | None = None
        self.trick_plays: list[TrickPlay] = []
        self.bids = 0
        self.players_bid: set[int] = set()
        self.cinch_bidder: Player | None = None
        self.cinch_override_phase = False
        self.override_attempts = 0
        self.players_discarded = 0
        self.discarded_seats: set[int] = set()

    def add_player(self, id: str, name: str | None = None, session_id: str | None = None) -> Player | None:
        """Seat a new player in the next free seat; None when the table is full."""
        if len(self.players) >= MAX_PLAYERS:
            logger.warning(f"Trying to add player {name!r} but the table is full.")
            return None
        player = Player(id, len(self.players), name, session_id=session_id)
        self.players.append(player)
        logger.debug(f"{player.name} takes seat {player.seat} (team {player.team}).")
        return player

    def remove_all_players(self) -> None:
        self.players = []

    def start_new_hand(self) -> None:
        """Rotate the dealer, clear the last hand, shuffle a fresh deck and deal six each."""
        self.dealer = next_dealer(self.dealer)
        self.is_first_hand = False

        self.deck = Deck(self.rng)
        self.deck.shuffle()
        self._clear_hand_state()
        self.phase = Phase.BIDDING
        self.current_player = first_to_bid(self.dealer)

        for player in self.players:
            player.reset_for_new_hand()
        self.deal_cards()
        logger.debug(
            f"New hand: dealer seat {self.dealer}, seat {self.current_player} bids first."
        )

    def deal_cards(self, cards_each: int | None = None) -> None:
        """One card at a time in seat order; silently short if the deck runs out."""
        if cards_each is None:
            cards_each = self.config.hand_size
        deal_round_robin(self.deck, [p.hand for p in self.players], cards_each)

    def deal_new_cards(self) -> None:
        """Top every hand back up to the hand size after the discard."""
        top_up(self.deck, [p.hand for p in self.players], self.config.hand_size)

    # ------------------------------------------------------------------ lookups

    def get_player(self, id: str) -> Player | None:
        return next((p for p in self.players if p.id == id), None)

    def find_player_by_session(self, session_id: str) -> Player | None:
        if session_id is None:
            return None
        return next((p for p in self.players if p.session_id == session_id), None)

    def rejoin(self, session_id: str, new_id: str) -> Player | None:
        """Bind a returning session to its seat under a new transport id."""
        player = self.find_player_by_session(session_id)
        if player is None:
            logger.warning(f"Rejoin failed: no seat for session {session_id!r}.")
            return None
        player.id = new_id
        logger.debug(f"{player.name} reconnected to seat {player.seat}.")
        return player

    def get_current_player(self) -> Player | None:
        if 0 <= self.current_player < len(self.players):
            return self.players[self.current_player]
        return None

    def next_player(self) -> None:
        self.current_player = (self.current_player + 1) % MAX_PLAYERS

    # ------------------------------------------------------------------ bidding

    def is_valid_bid(self, bid: Any, current_bid: int | None = None) -> bool:
        return is_valid_bid(bid, self.current_bid if current_bid is None else current_bid)

    def current_valid_bids(self) -> list[Bid]:
        return valid_bids(self.current_bid, cinch_override=self.cinch_override_phase)

    def process_bid(self, player: Player, bid: Any) -> BidResult:
        """
        Record one bid. Normal bidding: each seat once, left of the dealer first.
        An early cinch offers the opposing seats that have not bid yet a chance to
        counter with their own cinch before bidding closes.
        """
        parsed = parse_bid(bid)
        if parsed is None:
            logger.warning(f"Ignoring unknown bid {bid!r} from {player.name}.")
            return BidResult(finished=False, error=f"Unknown bid: {bid!r}")

        if self.cinch_override_phase:
            return self._process_override(player, parsed)

        self.bids += 1
        self.players_bid.add(player.seat)
        logger.debug(f"{player.name} bids {parsed}.")

        if parsed != Bid.PASS:
            self.current_bid = int(parsed)
            self.highest_bidder = player
            self.bid_contract = int(parsed)

            if parsed == Bid.CINCH:
                self.cinch_bidder = player
                if self.bids == MAX_PLAYERS:
                    return self._close_bidding(BidResult(finished=True))

                eligible = self.get_eligible_opposing_players()
                if not eligible:
                    return self._close_bidding(BidResult(finished=True))

                self.cinch_override_phase = True
                self.override_attempts = 0
                self.find_next_eligible_opposing_team_member()
                logger.debug(
                    f"Cinch by {player.name}; override offered to seat {self.current_player}."
                )
                return BidResult(finished=False, cinch_override=True, cinch_offered=True)

        self.next_player()

        if self.bids == MAX_PLAYERS:
            return self._close_bidding(BidResult(finished=True, all_passed=self.highest_bidder is None))
        return BidResult(finished=False)

    def _process_override(self, player: Player, bid: Bid) -> BidResult:
        # Every answer uses up an attempt, including a rejected one.
        self.override_attempts += 1

        if bid == Bid.CINCH:
            if player.seat in self.players_bid:
                logger.warning(f"{player.name} already bid this hand and cannot counter the cinch.")
                return BidResult(finished=False, cinch_override=True, error=ALREADY_BID)

            self.highest_bidder = player
            self.bid_contract = int(Bid.CINCH)
            self.cinch_bidder = player
            self.players_bid.add(player.seat)
            logger.debug(f"{player.name} overrides the cinch.")
            return self._close_bidding(
                BidResult(finished=True, cinch_override=True, override_successful=True)
            )

        eligible = self.get_eligible_opposing_players()
        if self.override_attempts >= len(eligible):
            logger.debug("Cinch override declined by every eligible seat.")
            return self._close_bidding(
                BidResult(finished=True, cinch_override=True, override_successful=False)
            )

        self.find_next_eligible_opposing_team_member()
        return BidResult(finished=False, cinch_override=True)

    def _close_bidding(self, result: BidResult) -> BidResult:
        self.phase = Phase.CHOOSE_TRUMP
        self.cinch_override_phase = False
        self.override_attempts = 0
        if self.highest_bidder is not None:
            logger.debug(f"{self.highest_bidder.name} wins the bid with {self.bid_contract}.")
        else:
            logger.debug("All four seats passed.")
        return result

    def get_eligible_opposing_players(self) -> list[Player]:
        """Seats on the other team from the cinch bidder that have not bid this hand."""
        if self.cinch_bidder is None:
            return []
        if not 0 <= self.dealer < len(self.players):
            return []
        cinch_team = self.cinch_bidder.team
        return [
            p for p in self.players
            if p.team != cinch_team and p.seat not in self.players_bid
        ]

    def find_next_opposing_team_member(self) -> None:
        """Advance the turn to the next seat not on the cinch bidder's team (at most 4 steps)."""
        if self.cinch_bidder is None:
            return
        cinch_team = self.cinch_bidder.team
        attempts = 0
        while True:
            self.next_player()
            attempts += 1
            current = self.get_current_player()
            if current is None or current.team != cinch_team or attempts >= MAX_PLAYERS:
                break

    def find_next_eligible_opposing_team_member(self) -> None:
        """Advance the turn to the next eligible override seat; no-op when nobody is eligible."""
        eligible_seats = {p.seat for p in self.get_eligible_opposing_players()}
        if not eligible_seats:
            return
        for _ in range(MAX_PLAYERS):
            self.next_player()
            if self.current_player in eligible_seats:
                break

    # ------------------------------------------------------------------ trump and discard

    def set_trump(self, suit: Suit | str) -> bool:
        parsed = Suit.from_symbol(suit)
        if parsed is None:
            logger.warning(f"Rejecting unknown trump suit {suit!r}.")
            return False
        self.trump_suit = parsed
        self.phase = Phase.DISCARDING
        self.players_discarded = 0
        self.discarded_seats = set()
        logger.debug(f"Trump is {parsed}.")
        return True

    def discard_cards(self, player: Player, indices: Iterable[int]) -> DiscardResult:
        """
        Discard by position. When every seat has discarded, hands are topped up to
        the hand size and the highest bidder leads the first trick.
        """
        if self.phase != Phase.DISCARDING:
            return DiscardResult(False, reason="Not the discard phase")
        if player.seat in self.discarded_seats:
            logger.warning(f"{player.name} tried to discard twice.")
            return DiscardResult(False, reason="Already discarded this hand")

        removed = player.discard_cards(indices)
        self.discarded_seats.add(player.seat)
        self.players_discarded += 1
        logger.debug(f"{player.name} discarded {len(removed)} cards.")

        all_discarded = self.players_discarded >= len(self.players)
        if all_discarded:
            self.deal_new_cards()
            self.begin_play()
        return DiscardResult(True, discarded=len(removed), all_discarded=all_discarded)

    def begin_play(self) -> None:
        self.phase = Phase.PLAYING
        if self.highest_bidder is not None:
            self.current_player = self.highest_bidder.seat
        else:
            self.current_player = first_to_bid(self.dealer)
        logger.debug(f"Play starts with seat {self.current_player}.")

    # ------------------------------------------------------------------ trick play

    def can_play_card(self, player: Player, card_index: int) -> PlayCheck:
        if self.phase != Phase.PLAYING or player.seat != self.current_player:
            return PlayCheck(False, NOT_YOUR_TURN)
        if (
            not isinstance(card_index, int)
            or isinstance(card_index, bool)
            or not 0 <= card_index < player.hand.size()
        ):
            return PlayCheck(False, INVALID_CARD_INDEX)
        return check_follow_suit(player.hand, player.hand[card_index], self.trick_plays)

    def legal_card_indices(self, player: Player) -> list[int]:
        return legal_plays(player.hand, self.trick_plays)

    def play_card(self, player: Player, card_index: int) -> PlayResult:
        """Play a card already checked with ``can_play_card``."""
        card = player.play_card(card_index)
        self.trick_plays.append(TrickPlay(player.seat, card, player.name))
        self.next_player()

        if len(self.trick_plays) < MAX_PLAYERS:
            return PlayResult(trick_complete=False)

        winner = self.resolve_trick()
        self.players[winner.seat].add_won_cards([p.card for p in self.trick_plays])
        self.trick_plays = []
        self.current_player = winner.seat
        logger.debug(f"{winner.name} wins the trick with {winner.card}.")
        if self.is_hand_complete():
            self.phase = Phase.SCORING
        return PlayResult(trick_complete=True, winner=winner)

    def resolve_trick(self) -> TrickPlay:
        return resolve_trick(self.trick_plays, self.trump_suit)

    def is_hand_complete(self) -> bool:
        return all(p.hand.is_empty() for p in self.players)

    # ------------------------------------------------------------------ scoring

    def calculate_score(self) -> ScoreResult:
        return calculate_score(self.players, self.trump_suit)

    def find_card_team(self, card: Card) -> int | None:
        return find_card_team(self.players, card)

    def apply_score(self, score: ScoreResult) -> ApplyResult:
        """Settle the bid and add this hand's points to the match scores."""
        if self.highest_bidder is None:
            raise ValueError("No bid to settle: every seat passed this hand")
        bidding_team = self.highest_bidder.team
        result, deltas = settle_bid(score.team_points, self.bid_contract, bidding_team)
        for team, delta in deltas.items():
            self.scores[team] += delta
        logger.debug(
            f"Team {bidding_team} {'made' if result.success else 'failed'} {self.bid_contract}; "
            f"scores now {self.scores[1]}-{self.scores[2]} "
            f"(team {other_team(bidding_team)} banked {deltas[other_team(bidding_team)]})."
        )
        return result

    def is_game_complete(self) -> bool:
        target = self.config.target_score
        return self.scores[1] >= target or self.scores[2] >= target

    def get_winning_team(self) -> int | None:
        return winning_team(self.scores, self.config.target_score)

    def bidder_team(self) -> int | None:
        return self.highest_bidder.team if self.highest_bidder is not None else None

    def bid_status(self) -> dict[str, Any]:
        """Bid summary broadcast after each bid."""
        return {
            "currentBid": self.current_bid,
            "highestBidder": self.highest_bidder.name if self.highest_bidder else None,
            "bidContract": self.bid_contract,
            "bidderTeam": self.bidder_team(),
        }

    def scores_dict(self) -> dict[str, int]:
        return {"team1": self.scores[1], "team2": self.scores[2]}
