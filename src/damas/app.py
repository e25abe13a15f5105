"""Application entry point: a seeded self-play match on the command line."""

from __future__ import annotations

import argparse
import logging
import random
import sys

from damas.core.board import Board
from damas.core.notation import board_from_placement, move_to_text
from damas.engine.policy import CapturePreferringPolicy
from damas.game.interfaces import MatchSettings
from damas.game.match import play_match
from damas.interchange.mapper import board_to_state

_LOGGER = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="damas",
        description="Spanish draughts rules engine - self-play demo",
    )
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument(
        "--max-plies", type=int, default=200, help="Stop after this many plies"
    )
    parser.add_argument(
        "--placement",
        default=None,
        help="Starting placement string (default: standard layout)",
    )
    parser.add_argument(
        "--json", action="store_true", help="Print the final board as JSON"
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Play one match between two capture-preferring policies."""
    args = _build_parser().parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        board = (
            board_from_placement(args.placement) if args.placement else Board.initial()
        )
        settings = MatchSettings(max_plies=args.max_plies, seed=args.seed)
    except ValueError as exc:
        _LOGGER.error("%s", exc)
        return 2

    rng = random.Random(settings.seed)
    policy = CapturePreferringPolicy(rng)

    def _log_ply(move, mover, _board) -> None:
        _LOGGER.info("%s plays %s", mover, move_to_text(move))

    outcome = play_match(policy, policy, settings, board=board, on_ply=_log_ply)

    if args.json:
        print(board_to_state(outcome.board).model_dump_json(indent=2))
        return 0

    print(repr(outcome.board))
    status = "game over" if outcome.finished else "ply limit reached"
    print(f"{status} after {outcome.plies} plies")
    return 0


if __name__ == "__main__":
    sys.exit(main())
