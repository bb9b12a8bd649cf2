"""Cinch game engine (four players, two partnerships, play to 21)."""

__version__ = "0.1.0"

from loguru import logger

from .card import Card, Rank, Suit, make_deck_52
from .constants import HAND_SIZE, MAX_PLAYERS, WINNING_SCORE, Phase, team_for_seat
from .bidding import Bid, BidResult, is_valid_bid, parse_bid, valid_bids
from .hand import Hand
from .deck import Deck
from .player import Player
from .play import PlayCheck, PlayResult, TrickPlay, resolve_trick
from .scoring import ApplyResult, ScoreResult, calculate_score, winning_team
from .game import CinchGame, DiscardResult, GameConfig
from .persistence import game_from_dict, game_from_json, game_to_dict, game_to_json
from .agents import RandomAgent
from .match import MatchSummary, play_hand, play_match

# Library is silent until an application (e.g. the CLI) enables it.
logger.disable("cinch")
