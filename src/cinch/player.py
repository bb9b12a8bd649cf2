"""A seat at the table: identity, team, current hand and the cards won this hand."""
from __future__ import annotations

from typing import Any, Iterable

from .card import Card
from .constants import team_for_seat
from .hand import Hand


class Player:
    """
    One of the four players.

    ``seat`` is fixed at creation and ``team`` follows from it (even seats are
    team 1). ``id`` is the transport identity and may change on reconnect;
    ``session_id`` is the token used to find the seat again.
    """

    def __init__(self, id: str, seat: int, name: str | None = None, session_id: str | None = None):
        self.id = id
        self._seat = seat
        self.name = name or f"Player {seat + 1}"
        self.session_id = session_id
        self.hand = Hand()
        self.won_cards = Hand()

    @property
    def seat(self) -> int:
        return self._seat

    @property
    def team(self) -> int:
        return team_for_seat(self._seat)

    def add_card_to_hand(self, card: Card) -> None:
        self.hand.add_card(card)

    def add_cards_to_hand(self, cards: Iterable[Card]) -> None:
        self.hand.add_cards(cards)

    def play_card(self, index: int) -> Card | None:
        """Remove and return the card at ``index``. The engine validates the index first."""
        return self.hand.remove_card(index)

    def discard_cards(self, indices: Iterable[int]) -> list[Card]:
        return self.hand.remove_cards(indices)

    def add_won_cards(self, cards: Iterable[Card]) -> None:
        self.won_cards.add_cards(cards)

    def reset_for_new_hand(self) -> None:
        """Fresh, empty hand and won pile; last hand's cards have already been scored."""
        self.hand = Hand()
        self.won_cards = Hand()

    def to_dict(self) -> dict[str, Any]:
        """Public view sent to every participant."""
        return {"name": self.name, "team": self.team, "seat": self.seat}

    def __repr__(self) -> str:
        return f"Player(seat={self.seat}, name={self.name!r}, team={self.team})"
