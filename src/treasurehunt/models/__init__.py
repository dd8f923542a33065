from .hunter import Hunter, ItemSet
from .terrain import TERRAINS, Terrain
from .treasure import GEM_TYPES, NOTHING, Treasure

__all__ = [
    "Hunter",
    "ItemSet",
    "TERRAINS",
    "Terrain",
    "GEM_TYPES",
    "NOTHING",
    "Treasure",
]
