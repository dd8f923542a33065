import sys
from pathlib import Path
from typing import Iterable, List

import pytest

# Ensure 'src' is on sys.path for test imports without installing the package
ROOT = Path(__file__).resolve().parents[1]
src = ROOT / "src"
if str(src) not in sys.path:
    sys.path.insert(0, str(src))


class ScriptedRNG:
    """Stand-in for treasurehunt.core.rng.RNG returning pre-set rolls in order."""

    def __init__(self, rolls: Iterable[float]) -> None:
        self.rolls: List[float] = list(rolls)

    def random(self) -> float:
        if not self.rolls:
            raise AssertionError("ScriptedRNG ran out of rolls")
        return self.rolls.pop(0)


class ScriptedInput:
    """Callable replacement for input() that replays canned answers."""

    def __init__(self, responses: Iterable[str]) -> None:
        self.responses: List[str] = list(responses)
        self.prompts: List[str] = []

    def __call__(self, prompt: str = "") -> str:
        self.prompts.append(prompt)
        if not self.responses:
            raise EOFError
        return self.responses.pop(0)


@pytest.fixture
def scripted_rng():
    return ScriptedRNG


@pytest.fixture
def scripted_input():
    return ScriptedInput
