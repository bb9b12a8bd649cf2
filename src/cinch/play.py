"""
Trick-taking: legal plays and trick winner.
Follow the led suit if you can, otherwise play anything. The highest trump wins;
with no trump played, the highest card of the led suit wins.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Sequence

from .card import Card, Suit
from .hand import Hand

NOT_YOUR_TURN = "Not your turn"
INVALID_CARD_INDEX = "Invalid card index"


def must_follow_suit_reason(suit: Suit) -> str:
    return f"You must follow suit ({suit.symbol}) if you have one."


@dataclass(frozen=True)
class TrickPlay:
    """One card played to the current trick."""

    seat: int
    card: Card
    name: str

    def to_dict(self) -> dict[str, Any]:
        return {"player": self.seat, "card": self.card.to_dict(), "name": self.name}


@dataclass(frozen=True)
class PlayCheck:
    """Answer to ``can_play_card``: valid, or invalid with a reason for the player."""

    valid: bool
    reason: str | None = None

    def to_dict(self) -> dict[str, Any]:
        if self.valid:
            return {"valid": True}
        return {"valid": False, "reason": self.reason}


@dataclass(frozen=True)
class PlayResult:
    """Answer to ``play_card``; ``winner`` is set once the trick has four cards."""

    trick_complete: bool
    winner: TrickPlay | None = None

    def to_dict(self) -> dict[str, Any]:
        d: dict[str, Any] = {"trickComplete": self.trick_complete}
        if self.winner is not None:
            d["winner"] = self.winner.to_dict()
        return d


def led_suit(trick: Sequence[TrickPlay]) -> Suit | None:
    """Suit of the first card of the trick, or None before anything is played."""
    if not trick:
        return None
    return trick[0].card.suit


def check_follow_suit(hand: Hand, card: Card, trick: Sequence[TrickPlay]) -> PlayCheck:
    """Suit-following only; turn order and index are checked by the engine."""
    lead = led_suit(trick)
    if lead is not None and card.suit != lead and hand.has_suit(lead):
        return PlayCheck(False, must_follow_suit_reason(lead))
    return PlayCheck(True)


def legal_plays(hand: Hand, trick: Sequence[TrickPlay]) -> list[int]:
    """Indices of the cards in ``hand`` that may be played to ``trick``."""
    lead = led_suit(trick)
    if lead is not None and hand.has_suit(lead):
        return [i for i, c in enumerate(hand) if c.suit == lead]
    return list(range(len(hand)))


def _beats(card: Card, other: Card, trump: Suit | None) -> bool:
    """True if ``card`` takes over the trick from ``other``."""
    if card.is_suit(trump) and not other.is_suit(trump):
        return True
    return card.suit == other.suit and card.rank_index() > other.rank_index()


def resolve_trick(trick: Sequence[TrickPlay], trump: Suit | None) -> TrickPlay:
    """
    Winning play of a trick. Single left-to-right pass: the first card leads,
    a later card takes over if it is the first trump, or the same suit as the
    current winner and higher. Off-suit non-trump cards never win.
    """
    winning = trick[0]
    for play in trick[1:]:
        if _beats(play.card, winning.card, trump):
            winning = play
    return winning
