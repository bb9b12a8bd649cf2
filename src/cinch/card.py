"""
Cinch cards: standard 52-card pack (4 suits × 13 ranks).
Card values for the Game point: A=4, K=3, Q=2, J=1, 10=10.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum


class Suit(IntEnum):
    """Hearts, Diamonds, Clubs, Spades. Order used when building the pack."""
    HEARTS = 0
    DIAMONDS = 1
    CLUBS = 2
    SPADES = 3

    @property
    def symbol(self) -> str:
        return "♥♦♣♠"[self.value]

    @classmethod
    def from_symbol(cls, symbol: str) -> "Suit | None":
        """Suit for a wire symbol ("♥") or name ("hearts"); None if unknown."""
        if isinstance(symbol, Suit):
            return symbol
        for s in cls:
            if symbol == s.symbol or str(symbol).upper() == s.name:
                return s
        return None

    def __str__(self) -> str:
        return self.symbol


class Rank(IntEnum):
    """Ranks in ascending order; the value is the rank index used in tricks."""
    TWO = 0
    THREE = 1
    FOUR = 2
    FIVE = 3
    SIX = 4
    SEVEN = 5
    EIGHT = 6
    NINE = 7
    TEN = 8
    JACK = 9
    QUEEN = 10
    KING = 11
    ACE = 12

    @property
    def label(self) -> str:
        return RANK_LABELS[self.value]

    @classmethod
    def from_label(cls, label: str) -> "Rank | None":
        if isinstance(label, Rank):
            return label
        try:
            return cls(RANK_LABELS.index(str(label).upper()))
        except ValueError:
            return None

    def __str__(self) -> str:
        return self.label


RANK_LABELS = ("2", "3", "4", "5", "6", "7", "8", "9", "10", "J", "Q", "K", "A")

SUITS = tuple(Suit)
RANKS = tuple(Rank)

_POINT_VALUES = {
    Rank.ACE: 4,
    Rank.KING: 3,
    Rank.QUEEN: 2,
    Rank.JACK: 1,
    Rank.TEN: 10,
}


@dataclass(frozen=True)
class Card:
    """A single playing card. Equality is by suit and rank."""

    suit: Suit
    rank: Rank

    def __post_init__(self) -> None:
        assert isinstance(self.suit, Suit), self.suit
        assert isinstance(self.rank, Rank), self.rank

    def point_value(self) -> int:
        """Value counted towards the Game point."""
        return _POINT_VALUES.get(self.rank, 0)

    def rank_index(self) -> int:
        """Position in the 13-rank order (0 = lowest, 12 = Ace)."""
        return int(self.rank)

    def is_suit(self, suit: Suit | None) -> bool:
        return suit is not None and self.suit == suit

    def to_dict(self) -> dict[str, str]:
        return {"suit": self.suit.symbol, "rank": self.rank.label}

    @classmethod
    def from_dict(cls, d: dict[str, str]) -> "Card":
        suit = Suit.from_symbol(d["suit"])
        rank = Rank.from_label(d["rank"])
        if suit is None or rank is None:
            raise ValueError(f"Unknown card: {d!r}")
        return cls(suit, rank)

    def __str__(self) -> str:
        return f"{self.rank.label} of {self.suit.symbol}"

    def __repr__(self) -> str:
        return f"{self.rank.label}{self.suit.symbol}"


def make_card(suit: Suit, rank: Rank) -> Card:
    return Card(suit=suit, rank=rank)


def make_deck_52() -> list[Card]:
    """Build the full 52-card pack, suit-major then rank ascending."""
    deck: list[Card] = []
    for s in Suit:
        for r in Rank:
            deck.append(make_card(s, r))
    return deck
