"""A single town visit: terrain, shop, brawls and gem hunting."""

from __future__ import annotations

import logging
from enum import IntEnum
from typing import Optional

from .core.rng import RNG
from .errors import NoHunterInTown, SessionOver
from .models.hunter import Hunter
from .models.terrain import Terrain
from .models.treasure import Treasure
from .shop import Shop

logger = logging.getLogger(__name__)

ITEM_BREAK_CHANCE = 0.5
TOUGH_TOWN_TROUBLE_THRESHOLD = 0.66
CALM_TOWN_TROUBLE_THRESHOLD = 0.33
MAX_BRAWL_GOLD = 10


class WinCondition(IntEnum):
    ONGOING = 0
    WON = 1
    LOST = 2


class Town:
    """Everything a hunter can do while visiting one town.

    Life-cycle:
    - Construct with a Shop and a toughness in [0, 1]; terrain and toughness
      are rolled once here.
    - Call hunter_arrives() before any other action.
    - Read latest_news after each action; it only holds the last outcome.
    - Once win_condition is WON or LOST the session is over and further
      actions raise SessionOver.
    """

    def __init__(self, shop: Shop, toughness: float, rng: Optional[RNG] = None) -> None:
        self.shop = shop
        self._rng = rng or RNG()
        self.terrain = Terrain.random(self._rng)
        # higher toughness = more likely to be a tough town
        self.tough_town = self._rng.random() < toughness
        self.hunter: Optional[Hunter] = None
        self._latest_news = ""
        self._win_condition = WinCondition.ONGOING
        logger.debug(
            "Town created: terrain=%s tough=%s", self.terrain.name, self.tough_town
        )

    @property
    def latest_news(self) -> str:
        return self._latest_news

    @property
    def win_condition(self) -> WinCondition:
        return self._win_condition

    @property
    def is_over(self) -> bool:
        return self._win_condition is not WinCondition.ONGOING

    def _active_hunter(self) -> Hunter:
        if self.is_over:
            raise SessionOver(f"The game is over ({self._win_condition.name.lower()}).")
        if self.hunter is None:
            raise NoHunterInTown("No hunter in town. Call hunter_arrives() first.")
        return self.hunter

    def _end_session(self, outcome: WinCondition) -> None:
        self._win_condition = outcome
        logger.info("Session ended for %s: %s", self.hunter.name, outcome.name)

    def hunter_arrives(self, hunter: Hunter) -> None:
        if self.is_over:
            raise SessionOver(f"The game is over ({self._win_condition.name.lower()}).")
        self.hunter = hunter
        self._latest_news = f"Welcome to town, {hunter.name}."
        if self.tough_town:
            self._latest_news += "\nIt's pretty rough around here, so watch yourself."
        else:
            self._latest_news += "\nWe're just a sleepy little town with mild mannered folk."

    def leave_town(self) -> bool:
        """Try to cross the surrounding terrain.

        The needed item may break on the way and is then removed from the kit.
        """
        hunter = self._active_hunter()
        item = self.terrain.needed_item
        if not self.terrain.can_cross_terrain(hunter):
            self._latest_news = (
                f"You can't leave town, {hunter.name}. You don't have a {item}."
            )
            return False

        self._latest_news = f"You used your {item} to cross the {self.terrain.name}."
        if self._check_item_break():
            hunter.remove_item_from_kit(item)
            self._latest_news += f"\nUnfortunately, your {item} broke."
        logger.debug("%s left town across the %s", hunter.name, self.terrain.name)
        return True

    def enter_shop(self, choice: str, item: Optional[str] = None) -> bool:
        hunter = self._active_hunter()
        result = self.shop.enter(hunter, choice, item)
        self._latest_news = self.shop.latest_news
        return result

    def look_for_trouble(self) -> None:
        """Give the hunter a chance to brawl for gold.

        Tough towns make trouble easier to find and brawls harder to win. A lost
        brawl the hunter can't pay for ends the game.
        """
        hunter = self._active_hunter()
        threshold = (
            TOUGH_TOWN_TROUBLE_THRESHOLD if self.tough_town else CALM_TOWN_TROUBLE_THRESHOLD
        )

        if self._rng.random() > threshold:
            self._latest_news = "You couldn't find any trouble"
            return

        self._latest_news = "You want trouble, stranger!  You got it!\nOof! Umph! Ow!\n"
        gold_diff = int(self._rng.random() * MAX_BRAWL_GOLD) + 1
        if self._rng.random() > threshold:
            self._latest_news += "Okay, stranger! You proved yer mettle. Here, take my gold."
            self._latest_news += f"\nYou won the brawl and receive {gold_diff} gold."
            hunter.change_gold(gold_diff)
        elif hunter.gold - gold_diff < 0:
            self._latest_news += (
                "What's this? Where's the rest of the money? "
                "Get out of my town and never come back!"
            )
            self._end_session(WinCondition.LOST)
        else:
            self._latest_news += "That'll teach you to go lookin' fer trouble in MY town! Now pay up!"
            self._latest_news += f"\nYou lost the brawl and pay {gold_diff} gold."
            hunter.change_gold(-gold_diff)

    def hunt_for_gems(self) -> None:
        hunter = self._active_hunter()
        treasure = Treasure.draw(self._rng)

        self._latest_news = "You search the town and find..."
        if treasure.is_nothing:
            self._latest_news += "\nNada. That's unfortunate, better luck next time."
            return

        article = "an" if treasure.type[0].lower() in "aeiou" else "a"
        self._latest_news += f"\n{article} {treasure.type}!"
        if not hunter.collect_treasure(treasure):
            self._latest_news += (
                "\nAww, you already have one. You decide you don't need a spare and put it back."
            )
            return

        self._latest_news += "\nThat's one for the collection! You put it in your gem bag."
        if Treasure.all_collected(hunter.gem_bag):
            self._end_session(WinCondition.WON)

    def _check_item_break(self) -> bool:
        return self._rng.random() < ITEM_BREAK_CHANCE

    def __str__(self) -> str:
        return f"This nice little town is surrounded by {self.terrain.name}."
