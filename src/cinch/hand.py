"""
Ordered card container, used both for a player's hand and for the cards they won.
Positions are significant: callers address cards by their current index.
"""
from __future__ import annotations

from typing import Iterable, Iterator

from .card import Card, Rank, Suit


class Hand:
    """Mutable, insertion-ordered list of cards."""

    def __init__(self, cards: Iterable[Card] | None = None):
        self.cards: list[Card] = list(cards) if cards is not None else []

    def add_card(self, card: Card) -> None:
        self.cards.append(card)

    def add_cards(self, cards: Iterable[Card]) -> None:
        self.cards.extend(cards)

    def remove_card(self, index: int) -> Card | None:
        """Remove and return the card at ``index``; None if the index is out of range."""
        if not 0 <= index < len(self.cards):
            return None
        return self.cards.pop(index)

    def remove_cards(self, indices: Iterable[int]) -> list[Card]:
        """
        Remove several cards by position and return them (highest position first).

        Indices must be processed from highest to lowest: popping a low index
        first would shift every later card and remove the wrong ones.
        """
        removed: list[Card] = []
        for index in sorted(set(indices), reverse=True):
            card = self.remove_card(index)
            if card is not None:
                removed.append(card)
        return removed

    def has_card(self, suit: Suit, rank: Rank) -> bool:
        return any(c.suit == suit and c.rank == rank for c in self.cards)

    def has_suit(self, suit: Suit) -> bool:
        return any(c.suit == suit for c in self.cards)

    def get_cards_of_suit(self, suit: Suit) -> list[Card]:
        return [c for c in self.cards if c.suit == suit]

    def get_non_trump_cards(self, trump: Suit | None) -> list[Card]:
        return [c for c in self.cards if c.suit != trump]

    def get_non_trump_indices(self, trump: Suit | None) -> list[int]:
        """Positions (in current order) of every card not of the trump suit."""
        return [i for i, c in enumerate(self.cards) if c.suit != trump]

    def get_total_point_value(self) -> int:
        return sum(c.point_value() for c in self.cards)

    def size(self) -> int:
        return len(self.cards)

    def is_empty(self) -> bool:
        return not self.cards

    def to_list(self) -> list[dict[str, str]]:
        """Plain-data projection for transport."""
        return [c.to_dict() for c in self.cards]

    def __len__(self) -> int:
        return len(self.cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self.cards)

    def __getitem__(self, index: int) -> Card:
        return self.cards[index]

    def __repr__(self) -> str:
        return f"Hand({self.cards!r})"
