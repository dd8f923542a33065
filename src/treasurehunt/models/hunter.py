from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Dict, Iterable

if TYPE_CHECKING:  # pragma: no cover
    from .treasure import Treasure

logger = logging.getLogger(__name__)


class ItemSet:
    """Ordered set of distinct item names.

    Items keep the order in which they were added, which is the order they are
    shown to the player.
    """

    def __init__(self, items: Iterable[str] = ()) -> None:
        self._items: Dict[str, None] = dict.fromkeys(items)

    def add(self, item: str) -> bool:
        if item in self._items:
            return False
        self._items[item] = None
        return True

    def discard(self, item: str) -> bool:
        if item not in self._items:
            return False
        del self._items[item]
        return True

    def __contains__(self, item: object) -> bool:
        return item in self._items

    def __iter__(self):
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ItemSet):
            return set(self._items) == set(other._items)
        if isinstance(other, (set, frozenset)):
            return set(self._items) == other
        return NotImplemented

    def __repr__(self) -> str:
        return f"ItemSet({list(self._items)!r})"

    def render(self) -> str:
        return " ".join(self._items)


@dataclass
class Hunter:
    """The treasure hunter controlled by the player.

    Gold is never negative. Failed purchases and sales return False and leave
    the hunter untouched.
    """

    name: str
    gold: int = 0
    kit: ItemSet = field(default_factory=ItemSet)
    gem_bag: ItemSet = field(default_factory=ItemSet)

    def __post_init__(self) -> None:
        if self.gold < 0:
            logger.warning("Negative starting gold provided (%s). Clamping to 0.", self.gold)
            self.gold = 0

    # --- Gold ---
    def change_gold(self, delta: int) -> int:
        """Add ``delta`` to the hunter's gold, clamping the result at zero."""
        old = self.gold
        self.gold = max(0, self.gold + int(delta))
        logger.debug("Gold changed for %s: %s -> %s", self.name, old, self.gold)
        return self.gold

    # --- Kit ---
    def buy_item(self, item: str, cost: int) -> bool:
        """Buy ``item`` for ``cost`` gold.

        Fails when the cost is zero, the hunter can't afford it, or the item is
        already in the kit.
        """
        if cost == 0 or self.gold < cost or self.has_item(item, self.kit):
            logger.debug(
                "Purchase rejected for %s: item=%s cost=%s gold=%s",
                self.name,
                item,
                cost,
                self.gold,
            )
            return False

        self.gold -= cost
        self.kit.add(item)
        logger.debug("%s bought %s for %s gold (remaining: %s)", self.name, item, cost, self.gold)
        return True

    def sell_item(self, item: str, price: int) -> bool:
        """Sell ``item`` from the kit for ``price`` gold."""
        if price <= 0 or not self.has_item(item, self.kit):
            logger.debug("Sale rejected for %s: item=%s price=%s", self.name, item, price)
            return False

        self.gold += price
        self.kit.discard(item)
        logger.debug("%s sold %s for %s gold (total: %s)", self.name, item, price, self.gold)
        return True

    def remove_item_from_kit(self, item: str) -> bool:
        removed = self.kit.discard(item)
        if removed:
            logger.debug("Removed %s from %s's kit", item, self.name)
        return removed

    @staticmethod
    def has_item(item: str, inventory: Iterable[str]) -> bool:
        return item in inventory

    # --- Treasure ---
    def collect_treasure(self, treasure: "Treasure") -> bool:
        """Put the treasure's gem type in the gem bag.

        Returns True only when the gem type was not collected before.
        """
        added = self.gem_bag.add(treasure.type)
        if added:
            logger.debug("%s collected a %s", self.name, treasure.type)
        return added

    # --- Rendering ---
    def get_inventory(self) -> str:
        return self.kit.render()

    def get_gems(self) -> str:
        return self.gem_bag.render()

    def __str__(self) -> str:
        text = f"{self.name} has {self.gold} gold"
        if len(self.kit):
            text += f" and {self.get_inventory()}"
        text += "\nGems Collected: "
        text += self.get_gems() if len(self.gem_bag) else "none"
        return text
