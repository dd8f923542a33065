from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Optional, Tuple

from treasurehunt.core.rng import RNG

logger = logging.getLogger(__name__)

NOTHING = "nothing"
GEM_TYPES: Tuple[str, ...] = ("Diamond", "Ruby", "Emerald")

# Every draw is uniform over the gems plus the empty find.
_DRAW_TABLE: Tuple[str, ...] = GEM_TYPES + (NOTHING,)


@dataclass(frozen=True)
class Treasure:
    """A single find from searching a town: a gem type or nothing."""

    type: str

    def __post_init__(self) -> None:
        if self.type not in _DRAW_TABLE:
            raise ValueError(f"Unknown treasure type: {self.type!r}")

    @property
    def is_nothing(self) -> bool:
        return self.type == NOTHING

    @classmethod
    def draw(cls, rng: Optional[RNG] = None) -> "Treasure":
        rng = rng or RNG()
        index = min(int(rng.random() * len(_DRAW_TABLE)), len(_DRAW_TABLE) - 1)
        treasure = cls(_DRAW_TABLE[index])
        logger.debug("Treasure drawn: %s", treasure.type)
        return treasure

    @staticmethod
    def all_collected(gem_bag: Iterable[str]) -> bool:
        """True when ``gem_bag`` holds every collectible gem type."""
        collected = set(gem_bag)
        return all(gem in collected for gem in GEM_TYPES)
