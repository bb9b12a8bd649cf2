"""
Game state serialization.

Snapshots a CinchGame to JSON-compatible dicts and restores it, so a table can be
saved between processes or handed to another worker. Player references (highest
bidder, cinch bidder) are stored as seat numbers.
"""
from __future__ import annotations

import json
from datetime import datetime, timezone
from typing import Any, Dict

from .card import Card, Suit
from .constants import Phase
from .deck import Deck
from .game import CinchGame, GameConfig
from .hand import Hand
from .play import TrickPlay
from .player import Player

SCHEMA_VERSION = 1


def _player_to_dict(player: Player) -> Dict[str, Any]:
    return {
        "id": player.id,
        "seat": player.seat,
        "name": player.name,
        "session_id": player.session_id,
        "hand": player.hand.to_list(),
        "won_cards": player.won_cards.to_list(),
    }


def _player_from_dict(d: Dict[str, Any]) -> Player:
    player = Player(d["id"], int(d["seat"]), d.get("name"), session_id=d.get("session_id"))
    player.hand = Hand(Card.from_dict(c) for c in d.get("hand", []))
    player.won_cards = Hand(Card.from_dict(c) for c in d.get("won_cards", []))
    return player


def _seat_of(player: Player | None) -> int | None:
    return player.seat if player is not None else None


def game_to_dict(
    game: CinchGame,
    *,
    metadata: Dict[str, Any] | None = None,
) -> Dict[str, Any]:
    """
    Serialize a CinchGame to a JSON-compatible dict.

    Args:
        game: The engine to snapshot.
        metadata: Optional extra metadata (e.g. room name).

    Returns:
        Dict with schema_version, exported_at, config, and every state field.
    """
    result: Dict[str, Any] = {
        "schema_version": SCHEMA_VERSION,
        "exported_at": datetime.now(timezone.utc).isoformat(),
        "config": {
            "target_score": game.config.target_score,
            "hand_size": game.config.hand_size,
            "secure_shuffle": game.config.secure_shuffle,
            "seed": game.config.seed,
        },
        "players": [_player_to_dict(p) for p in game.players],
        "deck": [c.to_dict() for c in game.deck.cards],
        "phase": game.phase.value,
        "dealer": game.dealer,
        "is_first_hand": game.is_first_hand,
        "current_player": game.current_player,
        "current_bid": game.current_bid,
        "highest_bidder": _seat_of(game.highest_bidder),
        "bid_contract": game.bid_contract,
        "trump_suit": game.trump_suit.symbol if game.trump_suit is not None else None,
        "trick_plays": [
            {"seat": t.seat, "card": t.card.to_dict(), "name": t.name} for t in game.trick_plays
        ],
        "scores": {"team1": game.scores[1], "team2": game.scores[2]},
        "bids": game.bids,
        "players_bid": sorted(game.players_bid),
        "cinch_bidder": _seat_of(game.cinch_bidder),
        "cinch_override_phase": game.cinch_override_phase,
        "override_attempts": game.override_attempts,
        "players_discarded": game.players_discarded,
        "discarded_seats": sorted(game.discarded_seats),
    }
    if metadata:
        result["metadata"] = metadata
    return result


def game_from_dict(d: Dict[str, Any], *, rng=None) -> CinchGame:
    """
    Restore a CinchGame from a dict produced by ``game_to_dict``.

    Raises:
        ValueError: unsupported schema version or malformed card/suit/phase values.
        KeyError: a required field is missing.
    """
    version = d.get("schema_version")
    if version != SCHEMA_VERSION:
        raise ValueError(f"Unsupported snapshot schema version: {version!r}")

    cfg = d.get("config", {})
    config = GameConfig(
        target_score=int(cfg.get("target_score", GameConfig.target_score)),
        hand_size=int(cfg.get("hand_size", GameConfig.hand_size)),
        secure_shuffle=bool(cfg.get("secure_shuffle", False)),
        seed=cfg.get("seed"),
    )
    game = CinchGame(config, rng=rng)

    game.players = [_player_from_dict(p) for p in d["players"]]
    for i, p in enumerate(game.players):
        if p.seat != i:
            raise ValueError(f"Seat {p.seat} stored at position {i}")

    def _player_at(seat: int | None) -> Player | None:
        return game.players[seat] if seat is not None else None

    game.deck = Deck(game.rng)
    game.deck.cards = [Card.from_dict(c) for c in d["deck"]]
    game.phase = Phase(d["phase"])
    game.dealer = int(d["dealer"])
    game.is_first_hand = bool(d["is_first_hand"])
    game.current_player = int(d["current_player"])
    game.current_bid = int(d["current_bid"])
    game.highest_bidder = _player_at(d.get("highest_bidder"))
    game.bid_contract = int(d["bid_contract"])
    trump = d.get("trump_suit")
    if trump is not None:
        game.trump_suit = Suit.from_symbol(trump)
        if game.trump_suit is None:
            raise ValueError(f"Unknown trump suit: {trump!r}")
    game.trick_plays = [
        TrickPlay(int(t["seat"]), Card.from_dict(t["card"]), t["name"]) for t in d["trick_plays"]
    ]
    game.scores = {1: int(d["scores"]["team1"]), 2: int(d["scores"]["team2"])}
    game.bids = int(d["bids"])
    game.players_bid = set(d["players_bid"])
    game.cinch_bidder = _player_at(d.get("cinch_bidder"))
    game.cinch_override_phase = bool(d["cinch_override_phase"])
    game.override_attempts = int(d["override_attempts"])
    game.players_discarded = int(d.get("players_discarded", 0))
    game.discarded_seats = set(d.get("discarded_seats", []))
    return game


def game_to_json(
    game: CinchGame,
    *,
    metadata: Dict[str, Any] | None = None,
) -> str:
    """Serialize a CinchGame to a JSON string."""
    return json.dumps(game_to_dict(game, metadata=metadata), indent=2, ensure_ascii=False)


def game_from_json(s: str, *, rng=None) -> CinchGame:
    """Deserialize a CinchGame from a JSON string."""
    return game_from_dict(json.loads(s), rng=rng)


__all__ = [
    "game_to_dict",
    "game_from_dict",
    "game_to_json",
    "game_from_json",
    "SCHEMA_VERSION",
]
