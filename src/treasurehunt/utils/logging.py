import logging
import os
import sys

LOG_LEVEL_ENV = "TH_LOG_LEVEL"


def configure_logging(level: int = logging.WARNING) -> None:
    """Send log records to stdout with a compact format.

    The TH_LOG_LEVEL environment variable, when set to a known level name,
    wins over ``level``; unknown names are ignored.
    """
    level_name = os.getenv(LOG_LEVEL_ENV)
    if level_name:
        env_level = logging.getLevelName(level_name.strip().upper())
        if isinstance(env_level, int):
            level = env_level

    handler = logging.StreamHandler(stream=sys.stdout)
    formatter = logging.Formatter(
        fmt="%(asctime)s | %(levelname)-8s | %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )
    handler.setFormatter(formatter)

    root = logging.getLogger()
    root.setLevel(level)
    # Remove existing handlers to avoid duplicates in repeated test runs
    for h in list(root.handlers):
        root.removeHandler(h)
    root.addHandler(handler)
