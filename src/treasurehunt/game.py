from __future__ import annotations

import logging
from typing import Callable, Optional

from .core.rng import RNG
from .models.hunter import Hunter
from .settings import Settings
from .shop import Shop
from .town import Town, WinCondition

logger = logging.getLogger(__name__)

MENU = (
    "(B)uy something at the shop.",
    "(S)ell something at the shop.",
    "(M)ove on to a different town.",
    "(L)ook for trouble!",
    "(H)unt for gems!",
    "Give up the hunt and e(X)it.",
)


class TreasureHunt:
    """Console driver for a game of Treasure Hunt.

    Owns the hunter and the current town, prompts for commands and prints the
    town's latest news after every action. ``input_func`` and ``output_func``
    default to the builtins and can be replaced for scripted play.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        rng: Optional[RNG] = None,
        input_func: Optional[Callable[[str], str]] = None,
        output_func: Optional[Callable[[str], None]] = None,
        hunter_name: Optional[str] = None,
        hard_mode: Optional[bool] = None,
    ) -> None:
        self.settings = settings or Settings()
        self.rng = rng or RNG()
        self._input = input_func or input
        self._output = output_func or print
        self._hunter_name = hunter_name
        self.hard_mode = hard_mode
        self.hunter: Optional[Hunter] = None
        self.town: Optional[Town] = None
        self.towns_visited = 0

    def _ask(self, prompt: str) -> Optional[str]:
        """Prompt for a line of input; None means the input has ended."""
        try:
            return self._input(prompt)
        except EOFError:
            self._output("")
            return None

    def welcome(self) -> bool:
        """Set up the hunter. Returns False if input ended before that."""
        self._output("Welcome to TREASURE HUNTER!")
        self._output("Going hunting for the big treasure, eh?")
        name = self._hunter_name
        while not name:
            answer = self._ask("What's your name, Hunter? ")
            if answer is None:
                return False
            name = answer.strip()
        if self.hard_mode is None:
            answer = self._ask("Hard mode? (y/n): ")
            if answer is None:
                return False
            self.hard_mode = answer.strip().lower().startswith("y")
        self.hunter = Hunter(name, self.settings.starting_gold)
        logger.info("New hunt for %s (hard_mode=%s)", name, self.hard_mode)
        return True

    def enter_town(self) -> Town:
        shop = Shop(self.settings.markdown_for(self.hard_mode), self.settings.shop.prices)
        self.town = Town(shop, self.settings.toughness_for(self.hard_mode), self.rng)
        self.town.hunter_arrives(self.hunter)
        self.towns_visited += 1
        logger.debug("Entered town #%s", self.towns_visited)
        return self.town

    def show_menu(self) -> None:
        self._output("")
        self._output(self.town.latest_news)
        self._output("***")
        self._output(str(self.hunter))
        self._output(str(self.town))
        for line in MENU:
            self._output(line)

    def process_choice(self, choice: str) -> bool:
        """Run one menu command. Returns False when the player gives up."""
        choice = choice.strip().upper()
        if choice in ("B", "S"):
            if choice == "B":
                self._output(self.town.shop.inventory())
                item = self._ask("What're you lookin' to buy? ")
            else:
                item = self._ask("What're you lookin' to sell? ")
            if item is None:
                return self.process_choice("X")
            self.town.enter_shop(choice, item)
        elif choice == "M":
            if self.town.leave_town():
                news = self.town.latest_news
                self.enter_town()
                self._output(news)
        elif choice == "L":
            self.town.look_for_trouble()
        elif choice == "H":
            self.town.hunt_for_gems()
        elif choice == "X":
            self._output(f"Fare thee well, {self.hunter.name}!")
            return False
        else:
            self._output("Yikes! That's an invalid option! Try again.")
        return True

    def play(self) -> WinCondition:
        """Play until the player gives up or the game is won or lost."""
        if not self.welcome():
            self._output("Fare thee well!")
            return WinCondition.ONGOING
        self.enter_town()
        while True:
            self.show_menu()
            choice = self._ask("What's your next move? ")
            if choice is None:
                choice = "X"
            if not self.process_choice(choice):
                return WinCondition.ONGOING
            if self.town.is_over:
                return self._finish()

    def _finish(self) -> WinCondition:
        outcome = self.town.win_condition
        self._output(self.town.latest_news)
        if outcome is WinCondition.WON:
            self._output(f"Congratulations, {self.hunter.name}! You found every gem and won the hunt!")
        else:
            self._output(f"Game over, {self.hunter.name}. Better luck on your next hunt.")
        logger.info("Hunt finished after %s towns: %s", self.towns_visited, outcome.name)
        return outcome
