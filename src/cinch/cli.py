"""
Command-line interface for running simulated Cinch matches.

Usage examples (after installing in editable mode):

    python -m cinch.cli play --seed 7
    python -m cinch.cli simulate --matches 200 --seed 1 --log-level WARNING
"""
from __future__ import annotations

import argparse
import sys
from collections import Counter

from loguru import logger

from .agents import RandomAgent
from .constants import team_name
from .game import CinchGame, GameConfig
from .match import MatchSummary, play_match
from .scoring import describe_score, describe_settlement


def _configure_logging(level: str) -> None:
    logger.remove()
    logger.add(sys.stderr, level=level.upper())
    logger.enable("cinch")


def _make_table(args: argparse.Namespace, seed: int | None) -> tuple[CinchGame, list[RandomAgent]]:
    config = GameConfig(
        target_score=args.target,
        secure_shuffle=args.secure_shuffle,
        seed=seed,
    )
    game = CinchGame(config)
    for i, name in enumerate(args.names):
        game.add_player(f"seat-{i}", name)
    base = seed if seed is not None else 0
    agents = [RandomAgent(seed=base * 10 + i, pass_rate=args.pass_rate) for i in range(4)]
    return game, agents


def _add_common_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--seed",
        type=int,
        default=42,
        help="Random seed for shuffles and agents.",
    )
    parser.add_argument(
        "--target",
        type=int,
        default=21,
        help="Score needed to win the match.",
    )
    parser.add_argument(
        "--secure-shuffle",
        action="store_true",
        help="Shuffle with the OS random source (ignores --seed for the deck).",
    )
    parser.add_argument(
        "--pass-rate",
        type=float,
        default=0.5,
        help="Probability that a random agent passes when it could raise.",
    )
    parser.add_argument(
        "--max-hands",
        type=int,
        default=200,
        help="Safety cap on deals per match.",
    )
    parser.add_argument(
        "--names",
        nargs=4,
        default=["North", "East", "South", "West"],
        help="Names for seats 0..3.",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default="WARNING",
        help='Log level for engine messages, e.g. "DEBUG" or "INFO".',
    )


def _print_match(game: CinchGame, summary: MatchSummary) -> None:
    for n, record in enumerate(summary.hands, start=1):
        bidder = game.players[record.bidder]
        print(
            f"[hand {n}] dealer={game.players[record.dealer].name} "
            f"bid={record.contract} by {bidder.name} trump={record.trump}"
        )
        for line in describe_score(record.score):
            print(f"  {line}")
        print(f"  {describe_settlement(record.settlement, record.score, record.contract)}")
        print(
            f"  {team_name(1)}: {record.scores_after[1]}, {team_name(2)}: {record.scores_after[2]}"
        )
    if summary.winning_team is not None:
        print(
            f"GAME OVER! {team_name(summary.winning_team)} wins "
            f"{summary.scores[1]}-{summary.scores[2]} "
            f"after {summary.hands_played} hands ({summary.redeals} redeals)."
        )
    elif game.is_game_complete():
        print(f"GAME OVER! It's a tie at {summary.scores[1]} points each!")
    else:
        print(f"No winner after {summary.hands_played} hands.")


def _cmd_play(args: argparse.Namespace) -> None:
    game, agents = _make_table(args, args.seed)
    summary = play_match(game, agents, max_hands=args.max_hands)
    _print_match(game, summary)


def _cmd_simulate(args: argparse.Namespace) -> None:
    wins: Counter = Counter()
    hands = 0
    redeals = 0
    for i in range(args.matches):
        game, agents = _make_table(args, args.seed + i)
        summary = play_match(game, agents, max_hands=args.max_hands)
        wins[summary.winning_team] += 1
        hands += summary.hands_played
        redeals += summary.redeals
    print(
        f"matches={args.matches} "
        f"{team_name(1)}={wins[1]} {team_name(2)}={wins[2]} undecided={wins[None]} "
        f"avg_hands={hands / max(args.matches, 1):.2f} redeals={redeals}",
        flush=True,
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Cinch rules engine: simulated matches.")
    subparsers = parser.add_subparsers(dest="command", required=True)

    play = subparsers.add_parser("play", help="Play one match with random agents and print every hand.")
    _add_common_arguments(play)
    play.set_defaults(func=_cmd_play)

    simulate = subparsers.add_parser("simulate", help="Play many matches and print aggregate results.")
    _add_common_arguments(simulate)
    simulate.add_argument(
        "--matches",
        type=int,
        default=100,
        help="Number of matches to play.",
    )
    simulate.set_defaults(func=_cmd_simulate)
    return parser


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)
    _configure_logging(args.log_level)
    args.func(args)


if __name__ == "__main__":
    main()
