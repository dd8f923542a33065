from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional, Tuple

from treasurehunt.core.rng import RNG

if TYPE_CHECKING:  # pragma: no cover
    from .hunter import Hunter

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Terrain:
    """Terrain surrounding a town and the item needed to cross it."""

    name: str
    needed_item: str

    def can_cross_terrain(self, hunter: "Hunter") -> bool:
        return hunter.has_item(self.needed_item, hunter.kit)

    @classmethod
    def random(cls, rng: Optional[RNG] = None) -> "Terrain":
        """Pick one of the five terrains with a single uniform draw."""
        rng = rng or RNG()
        roll = rng.random()
        for upper, terrain in _TERRAIN_TABLE:
            if roll < upper:
                logger.debug("Terrain roll %.3f -> %s", roll, terrain.name)
                return terrain
        return TERRAINS[-1]

    def __str__(self) -> str:
        return self.name


TERRAINS: Tuple[Terrain, ...] = (
    Terrain("Mountains", "Rope"),
    Terrain("Ocean", "Boat"),
    Terrain("Plains", "Horse"),
    Terrain("Desert", "Water"),
    Terrain("Jungle", "Machete"),
)

# Upper bound of the roll for each terrain; Jungle takes the remainder.
_TERRAIN_TABLE: Tuple[Tuple[float, Terrain], ...] = (
    (0.2, TERRAINS[0]),
    (0.4, TERRAINS[1]),
    (0.6, TERRAINS[2]),
    (0.8, TERRAINS[3]),
    (1.0, TERRAINS[4]),
)
