"""
Treasure Hunt core package.

Headless game logic for a small text adventure:
- Hunter with gold, a kit of tools and a gem bag
- Town visits with random terrain, brawls and gem hunting
- Shop for buying and selling kit items
- Console driver and CLI composing the above

UI layers should import and compose these services.
"""
from .core.rng import RNG
from .errors import NoHunterInTown, SessionOver, SettingsError, TreasureHuntError
from .game import TreasureHunt
from .models import GEM_TYPES, NOTHING, TERRAINS, Hunter, ItemSet, Terrain, Treasure
from .settings import Settings
from .shop import Shop, ShopItem
from .town import Town, WinCondition

__version__ = "1.0.0"

__all__ = [
    "RNG",
    "Hunter",
    "ItemSet",
    "Terrain",
    "TERRAINS",
    "Treasure",
    "GEM_TYPES",
    "NOTHING",
    "Shop",
    "ShopItem",
    "Town",
    "WinCondition",
    "TreasureHunt",
    "Settings",
    "TreasureHuntError",
    "NoHunterInTown",
    "SessionOver",
    "SettingsError",
]
