"""
Distribution for the 4-player table.
Dealer rotates each hand; the seat left of the dealer bids first.
Cards go out one at a time, in seat order, six per player; after the discard
each hand is topped back up to six from what is left of the deck.
"""
from __future__ import annotations

from typing import Sequence

from .constants import HAND_SIZE, MAX_PLAYERS
from .deck import Deck
from .hand import Hand


def next_dealer(dealer: int, num_seats: int = MAX_PLAYERS) -> int:
    """Dealer rotates in play direction (0 -> 1 -> 2 -> 3 -> 0). -1 means no hand dealt yet."""
    return (dealer + 1) % num_seats


def first_to_bid(dealer: int, num_seats: int = MAX_PLAYERS) -> int:
    """Player to the left of the dealer speaks first."""
    return (dealer + 1) % num_seats


def deal_round_robin(deck: Deck, hands: Sequence[Hand], cards_each: int = HAND_SIZE) -> int:
    """
    Deal ``cards_each`` rounds, one card per hand per round, in seat order.
    Hands are skipped once the deck is empty. Returns the number of cards dealt.
    """
    dealt = 0
    for _ in range(cards_each):
        for hand in hands:
            if deck.is_empty():
                continue
            hand.add_cards(deck.deal(1))
            dealt += 1
    return dealt


def top_up(deck: Deck, hands: Sequence[Hand], hand_size: int = HAND_SIZE) -> int:
    """
    Bring every hand back to ``hand_size`` by dealing only its shortfall, seat by seat.
    Stops silently when the deck runs dry. Returns the number of cards dealt.
    """
    dealt = 0
    for hand in hands:
        needed = hand_size - hand.size()
        for _ in range(needed):
            if deck.is_empty():
                break
            hand.add_cards(deck.deal(1))
            dealt += 1
    return dealt
