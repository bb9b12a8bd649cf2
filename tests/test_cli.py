"""Smoke tests for the command-line interface."""

from cinch.cli import build_parser, main


def test_play_prints_hands(capsys):
    main(["play", "--seed", "3", "--log-level", "ERROR"])
    out = capsys.readouterr().out
    assert "[hand 1]" in out
    assert "GAME OVER" in out or "No winner" in out


def test_simulate_prints_summary(capsys):
    main(["simulate", "--matches", "3", "--seed", "5", "--log-level", "ERROR"])
    out = capsys.readouterr().out
    assert "matches=3" in out


def test_parser_defaults():
    args = build_parser().parse_args(["play"])
    assert args.target == 21
    assert args.names == ["North", "East", "South", "West"]
