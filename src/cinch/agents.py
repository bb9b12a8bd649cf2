"""
Simple baseline agents and the generic decision interface.

A ``CinchAgent`` answers the four questions the table asks a player: what to bid,
which suit to name as trump, which cards to discard and which card to play. Agents
only see the engine through its public methods, the same way a transport handler does.
"""
from __future__ import annotations

import random
from collections import Counter
from dataclasses import dataclass
from typing import TYPE_CHECKING, List, Protocol

from .bidding import Bid
from .card import Suit

if TYPE_CHECKING:
    from .game import CinchGame
    from .player import Player


class CinchAgent(Protocol):
    """Decision policy for one seat."""

    def choose_bid(self, game: "CinchGame", player: "Player") -> Bid:
        """Return one of ``game.current_valid_bids()``."""

    def choose_trump(self, game: "CinchGame", player: "Player") -> Suit:
        """Return the trump suit; only asked of the winning bidder."""

    def choose_discards(self, game: "CinchGame", player: "Player") -> List[int]:
        """Return hand positions to throw away before the top-up deal."""

    def choose_card(self, game: "CinchGame", player: "Player") -> int:
        """Return a hand position accepted by ``game.can_play_card``."""


@dataclass
class RandomAgent:
    """
    Baseline policy: random legal bids and plays, trump = longest suit,
    discards every non-trump card.

    Usage:
        agent = RandomAgent(seed=42)
        bid = agent.choose_bid(game, player)
    """

    seed: int | None = None
    # Chance of passing when a higher bid is available; keeps cinch from dominating.
    pass_rate: float = 0.5

    def __post_init__(self) -> None:
        self._rng = random.Random(self.seed)

    def choose_bid(self, game: "CinchGame", player: "Player") -> Bid:
        options = game.current_valid_bids()
        raises = [b for b in options if b != Bid.PASS]
        if not raises or self._rng.random() < self.pass_rate:
            return Bid.PASS
        return self._rng.choice(raises)

    def choose_trump(self, game: "CinchGame", player: "Player") -> Suit:
        counts = Counter(c.suit for c in player.hand)
        if not counts:
            return self._rng.choice(list(Suit))
        # Longest suit, lowest suit order on ties
        return max(Suit, key=lambda s: (counts.get(s, 0), -int(s)))

    def choose_discards(self, game: "CinchGame", player: "Player") -> List[int]:
        return player.hand.get_non_trump_indices(game.trump_suit)

    def choose_card(self, game: "CinchGame", player: "Player") -> int:
        legal = game.legal_card_indices(player)
        if not legal:
            raise ValueError(f"No legal card for {player.name}")
        return self._rng.choice(legal)


__all__ = ["CinchAgent", "RandomAgent"]
