"""
Bidding vocabulary for Cinch.
Order: pass < 1 < 2 < 3 < 4 < cinch. Each seat bids once starting left of the dealer;
a bid must beat the current high bid, pass is always allowed.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Any


class Bid(IntEnum):
    """Bids in ascending order. The value is the contract in points."""
    PASS = 0
    ONE = 1
    TWO = 2
    THREE = 3
    FOUR = 4
    CINCH = 11

    @property
    def wire_name(self) -> str:
        return BID_NAMES[self]

    def __str__(self) -> str:
        return BID_NAMES[self]


BID_NAMES = {
    Bid.PASS: "pass",
    Bid.ONE: "1",
    Bid.TWO: "2",
    Bid.THREE: "3",
    Bid.FOUR: "4",
    Bid.CINCH: "cinch",
}

_BY_NAME = {name: bid for bid, name in BID_NAMES.items()}


def parse_bid(value: Any) -> Bid | None:
    """
    Bid for a wire name ("pass", "1".."4", "cinch"), a Bid, or its integer value.
    Returns None for anything else.
    """
    if isinstance(value, Bid):
        return value
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        try:
            return Bid(value)
        except ValueError:
            return None
    if isinstance(value, str):
        return _BY_NAME.get(value.strip().lower())
    return None


def is_valid_bid(bid: Any, current_bid: int) -> bool:
    """
    Structural check only: pass is always valid, any other bid must beat current_bid.
    Whose turn it is gets checked by the caller.
    """
    parsed = parse_bid(bid)
    if parsed is None:
        return False
    return parsed == Bid.PASS or int(parsed) > current_bid


def valid_bids(current_bid: int, cinch_override: bool = False) -> list[Bid]:
    """Bids offered to the seat on turn. During a cinch override only cinch or pass."""
    if cinch_override:
        return [Bid.CINCH, Bid.PASS]
    return [b for b in Bid if b == Bid.PASS or int(b) > current_bid]


@dataclass
class BidResult:
    """Outcome of one call to ``CinchGame.process_bid``."""

    finished: bool
    cinch_override: bool | None = None
    cinch_offered: bool = False
    override_successful: bool | None = None
    all_passed: bool = False
    error: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Transport shape; flags that were never set are left out."""
        d: dict[str, Any] = {"finished": self.finished}
        if self.cinch_override is not None:
            d["cinchOverride"] = self.cinch_override
        if self.cinch_offered:
            d["cinchOffered"] = True
        if self.override_successful is not None:
            d["overrideSuccessful"] = self.override_successful
        if self.all_passed:
            d["allPassed"] = True
        if self.error is not None:
            d["error"] = self.error
        return d


__all__ = [
    "Bid",
    "BID_NAMES",
    "BidResult",
    "parse_bid",
    "is_valid_bid",
    "valid_bids",
]
