"""
The 52-card supply for one hand: build, shuffle (Fisher–Yates), deal from the top.
"""
from __future__ import annotations

import random

from .card import Card, make_deck_52


def secure_rng() -> random.Random:
    """OS-backed random source for shuffles that must not be predictable."""
    return random.SystemRandom()


class Deck:
    """Shuffled source of cards. A fresh Deck is built for every hand."""

    def __init__(self, rng: random.Random | None = None):
        self.rng = rng if rng is not None else random.Random()
        self.cards: list[Card] = []
        self.create_deck()

    def create_deck(self) -> None:
        """Refill with all 52 cards in pack order (suit-major, rank ascending)."""
        self.cards = make_deck_52()

    def shuffle(self) -> "Deck":
        """In-place uniform shuffle: for i from the last index down to 1, swap with j in [0, i]."""
        cards = self.cards
        for i in range(len(cards) - 1, 0, -1):
            j = self.rng.randint(0, i)
            cards[i], cards[j] = cards[j], cards[i]
        return self

    def deal(self, num_cards: int = 1) -> list[Card]:
        """Remove and return the top ``num_cards``; fewer if the deck runs out."""
        dealt = self.cards[:num_cards]
        del self.cards[:num_cards]
        return dealt

    def is_empty(self) -> bool:
        return not self.cards

    def size(self) -> int:
        return len(self.cards)

    def __len__(self) -> int:
        return len(self.cards)
