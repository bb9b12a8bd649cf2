"""Table constants, game phases and team helpers."""
from __future__ import annotations

from enum import Enum

MAX_PLAYERS = 4
HAND_SIZE = 6
WINNING_SCORE = 21
# Categories per hand: High, Low, Jack, Game. A cinch must take all of them.
CINCH_POINTS = 4
# Largest award for a made numbered bid.
MAX_AWARD = 4

TEAM_NAMES = {1: "Blue Team", 2: "Red Team"}


class Phase(str, Enum):
    """Phases of one hand, in order. Values are the wire names."""
    WAITING = "waiting"
    BIDDING = "bidding"
    CHOOSE_TRUMP = "chooseTrump"
    DISCARDING = "discarding"
    PLAYING = "playing"
    SCORING = "scoring"

    def __str__(self) -> str:
        return self.value


def team_for_seat(seat: int) -> int:
    """Even seats are team 1, odd seats team 2."""
    return 1 if seat % 2 == 0 else 2


def other_team(team: int) -> int:
    return 2 if team == 1 else 1


def team_name(team: int | None) -> str:
    if team is None:
        return "No team"
    return TEAM_NAMES[team]
