class TreasureHuntError(Exception):
    """Base error for Treasure Hunt domain exceptions."""


class NoHunterInTown(TreasureHuntError):
    """Raised when a town action is attempted before any hunter has arrived."""


class SessionOver(TreasureHuntError):
    """Raised when a town action is attempted after the game was won or lost."""


class SettingsError(TreasureHuntError):
    """Raised when a settings file cannot be parsed or fails validation."""
