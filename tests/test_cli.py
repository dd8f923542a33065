import builtins
import logging

from treasurehunt import cli
from treasurehunt.town import WinCondition


def _no_input(prompt=""):
    raise EOFError


def test_parse_args_defaults():
    args = cli.parse_args([])
    assert args.settings_path is None
    assert args.name is None
    assert args.hard is None
    assert args.seed is None
    assert args.verbose == 0


def test_verbosity_maps_to_log_levels():
    assert cli._log_level(0) == logging.WARNING
    assert cli._log_level(1) == logging.INFO
    assert cli._log_level(3) == logging.DEBUG


def test_main_runs_until_input_ends(monkeypatch, capsys):
    monkeypatch.setattr(builtins, "input", _no_input)

    assert cli.main(["--name", "Ava", "--hard", "--seed", "5"]) == 0

    printed = capsys.readouterr().out
    assert "Welcome to TREASURE HUNTER!" in printed
    assert "Welcome to town, Ava." in printed
    assert "Fare thee well, Ava!" in printed


def test_main_exit_code_for_lost_game(monkeypatch):
    class LosingGame:
        def __init__(self, *args, **kwargs):
            pass

        def play(self):
            return WinCondition.LOST

    monkeypatch.setattr(cli, "TreasureHunt", LosingGame)
    assert cli.main(["--name", "Ava"]) == 1


def test_main_rejects_invalid_settings(tmp_path):
    bad = tmp_path / "bad.yaml"
    bad.write_text("starting_gold: -1\n", encoding="utf-8")
    assert cli.main(["--settings", str(bad), "--name", "Ava"]) == 2


def test_hard_flag_both_ways():
    assert cli.parse_args(["--hard"]).hard is True
    assert cli.parse_args(["--no-hard"]).hard is False


def test_no_hard_skips_the_mode_prompt(monkeypatch, capsys):
    prompts = []

    def record_then_end(prompt=""):
        prompts.append(prompt)
        raise EOFError

    monkeypatch.setattr(builtins, "input", record_then_end)

    assert cli.main(["--name", "Ava", "--no-hard", "--seed", "1"]) == 0
    assert prompts == ["What's your next move? "]
    assert "Fare thee well, Ava!" in capsys.readouterr().out
