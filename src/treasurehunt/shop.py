from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, Mapping, Optional

from .models.hunter import Hunter

logger = logging.getLogger(__name__)

BUY_CHOICES = ("b", "buy")
SELL_CHOICES = ("s", "sell")


@dataclass(frozen=True)
class ShopItem:
    """Static metadata for an item sold by the shop."""

    name: str
    cost: int


DEFAULT_CATALOG: Dict[str, int] = {
    "Water": 2,
    "Rope": 4,
    "Machete": 6,
    "Horse": 12,
    "Boat": 20,
}


class Shop:
    """The town shop where hunters buy and sell kit items.

    Items are bought at full cost and sold back at ``int(cost * markdown)``.
    Every visit is reported through ``latest_news``; a failed visit returns
    False rather than raising.

    Usage:
        shop = Shop(markdown=0.5)
        shop.enter(hunter, "B", "Rope")
        print(shop.latest_news)
    """

    def __init__(self, markdown: float = 0.5, catalog: Optional[Mapping[str, int]] = None) -> None:
        if not 0 <= markdown <= 1:
            raise ValueError("markdown must be between 0 and 1")
        self.markdown = markdown
        prices = catalog if catalog is not None else DEFAULT_CATALOG
        self._items: Dict[str, ShopItem] = {
            name.lower(): ShopItem(name=name, cost=int(cost)) for name, cost in prices.items()
        }
        self.latest_news = ""

    def get_item(self, name: str) -> Optional[ShopItem]:
        return self._items.get(name.strip().lower())

    def get_cost(self, name: str, buying: bool = True) -> int:
        """Cost of ``name`` when buying, or the buy-back price when selling.

        Unknown items cost 0, which the hunter always refuses.
        """
        item = self.get_item(name)
        if item is None:
            return 0
        if buying:
            return item.cost
        return int(item.cost * self.markdown)

    def inventory(self) -> str:
        return "\n".join(f"{item.name}: {item.cost} gold" for item in self._items.values())

    def enter(self, hunter: Hunter, choice: str, item: Optional[str] = None) -> bool:
        """Run one buy or sell transaction for ``hunter``.

        ``choice`` is "B"/"buy" or "S"/"sell" (any case).
        """
        action = (choice or "").strip().lower()
        if action in BUY_CHOICES:
            return self._buy(hunter, item)
        if action in SELL_CHOICES:
            return self._sell(hunter, item)
        self.latest_news = f"The shopkeeper doesn't understand '{choice}'."
        return False

    def _buy(self, hunter: Hunter, name: Optional[str]) -> bool:
        shop_item = self.get_item(name or "")
        if shop_item is None:
            self.latest_news = "We ain't got none of those."
            return False

        if hunter.buy_item(shop_item.name, shop_item.cost):
            self.latest_news = f"Ye' got yerself a {shop_item.name}. Come again soon."
            logger.info("%s bought %s for %s gold", hunter.name, shop_item.name, shop_item.cost)
            return True

        self.latest_news = "Hmm, either you don't have enough gold or you've already got one of those!"
        return False

    def _sell(self, hunter: Hunter, name: Optional[str]) -> bool:
        shop_item = self.get_item(name or "")
        if shop_item is None:
            self.latest_news = "We don't want none of those."
            return False

        price = self.get_cost(shop_item.name, buying=False)
        if hunter.sell_item(shop_item.name, price):
            self.latest_news = f"Pleasure doin' business with you. You get {price} gold."
            logger.info("%s sold %s for %s gold", hunter.name, shop_item.name, price)
            return True

        self.latest_news = "Stop stringin' me along!"
        return False
