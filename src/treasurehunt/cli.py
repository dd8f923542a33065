import argparse
import logging
from pathlib import Path

from .core.rng import RNG
from .errors import SettingsError
from .game import TreasureHunt
from .settings import Settings
from .town import WinCondition
from .utils.logging import configure_logging

logger = logging.getLogger(__name__)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        prog="treasure-hunt",
        description="Treasure Hunt - travel from town to town and collect every gem",
    )
    parser.add_argument(
        "--settings",
        dest="settings_path",
        type=Path,
        default=None,
        help="Path to a user settings YAML file to load/override defaults.",
    )
    parser.add_argument("--name", default=None, help="Hunter name (skips the prompt)")
    parser.add_argument(
        "--hard",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Play in hard or normal mode (skips the prompt)",
    )
    parser.add_argument("--seed", type=int, default=None, help="Seed for reproducible hunts")
    parser.add_argument(
        "-v", "--verbose", action="count", default=0, help="Increase log verbosity (-v, -vv)"
    )
    return parser.parse_args(argv)


def _log_level(verbosity: int) -> int:
    if verbosity >= 2:
        return logging.DEBUG
    if verbosity == 1:
        return logging.INFO
    return logging.WARNING


def main(argv=None) -> int:
    args = parse_args(argv)
    configure_logging(level=_log_level(args.verbose))

    try:
        settings = Settings.load(user_path=args.settings_path)
    except SettingsError as exc:
        logger.error("%s", exc)
        return 2

    game = TreasureHunt(
        settings,
        rng=RNG(args.seed),
        hunter_name=args.name,
        hard_mode=args.hard,
    )
    outcome = game.play()
    return 1 if outcome is WinCondition.LOST else 0
