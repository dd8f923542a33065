from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Optional


@dataclass
class RNG:
    """
    Injectable RNG wrapper around random.Random.

    Town, Terrain and Treasure draw every probability through an instance of
    this class, so tests can pass a seeded instance or a scripted fake that
    exposes the same ``random()`` method.
    """

    seed: Optional[int] = None

    def __post_init__(self) -> None:
        self._rng = random.Random(self.seed)

    def random(self) -> float:
        """Return the next random float in the range [0.0, 1.0)."""
        return self._rng.random()
