import logging

import pytest

from treasurehunt.utils.logging import LOG_LEVEL_ENV, configure_logging


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    level, handlers = root.level, list(root.handlers)
    yield root
    for h in list(root.handlers):
        root.removeHandler(h)
    for h in handlers:
        root.addHandler(h)
    root.setLevel(level)


def test_level_argument_used_without_env(monkeypatch, restore_root_logger):
    monkeypatch.delenv(LOG_LEVEL_ENV, raising=False)
    configure_logging(logging.INFO)
    assert restore_root_logger.level == logging.INFO
    assert len(restore_root_logger.handlers) == 1


def test_env_level_name_overrides_argument(monkeypatch, restore_root_logger):
    monkeypatch.setenv(LOG_LEVEL_ENV, "debug")
    configure_logging(logging.WARNING)
    assert restore_root_logger.level == logging.DEBUG


@pytest.mark.parametrize("value", ["basic_format", "loud", "getLogger"])
def test_unknown_env_level_is_ignored(monkeypatch, restore_root_logger, value):
    monkeypatch.setenv(LOG_LEVEL_ENV, value)
    configure_logging(logging.WARNING)
    assert restore_root_logger.level == logging.WARNING
