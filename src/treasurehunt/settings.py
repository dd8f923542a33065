from __future__ import annotations

import dataclasses
import logging
from dataclasses import dataclass, field
from importlib import resources
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from jsonschema import Draft202012Validator

from .errors import SettingsError

logger = logging.getLogger(__name__)

SETTINGS_SCHEMA: Dict[str, Any] = {
    "type": "object",
    "additionalProperties": False,
    "properties": {
        "starting_gold": {"type": "integer", "minimum": 0},
        "toughness": {"type": "number", "minimum": 0, "maximum": 1},
        "hard_toughness": {"type": "number", "minimum": 0, "maximum": 1},
        "markdown": {"type": "number", "minimum": 0, "maximum": 1},
        "hard_markdown": {"type": "number", "minimum": 0, "maximum": 1},
        "shop": {
            "type": "object",
            "additionalProperties": False,
            "properties": {
                "prices": {
                    "type": "object",
                    "additionalProperties": {"type": "integer", "minimum": 1},
                },
            },
        },
    },
}


def _default_prices() -> Dict[str, int]:
    return {"Water": 2, "Rope": 4, "Machete": 6, "Horse": 12, "Boat": 20}


@dataclass
class ShopSettings:
    prices: Dict[str, int] = field(default_factory=_default_prices)


@dataclass
class Settings:
    """Game settings.

    Only the economy and the town toughness are configurable; event
    probabilities are fixed in the game code.
    """

    starting_gold: int = 10
    toughness: float = 0.4
    hard_toughness: float = 0.75
    markdown: float = 0.5
    hard_markdown: float = 0.25
    shop: ShopSettings = field(default_factory=ShopSettings)

    def toughness_for(self, hard_mode: bool) -> float:
        return self.hard_toughness if hard_mode else self.toughness

    def markdown_for(self, hard_mode: bool) -> float:
        return self.hard_markdown if hard_mode else self.markdown

    @staticmethod
    def _load_yaml(path: Path) -> dict:
        try:
            with path.open("r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as exc:
            raise SettingsError(f"Failed to parse settings file {path}: {exc}") from exc
        if not isinstance(data, dict):
            raise SettingsError(f"Settings file {path} must contain a mapping")
        return data

    @classmethod
    def _deep_merge(cls, base: dict, overlay: dict) -> dict:
        merged = dict(base)
        for k, v in (overlay or {}).items():
            if isinstance(v, dict) and isinstance(base.get(k), dict):
                merged[k] = cls._deep_merge(base[k], v)
            else:
                merged[k] = v
        return merged

    @staticmethod
    def validate(data: dict, source: str = "<settings>") -> None:
        validator = Draft202012Validator(SETTINGS_SCHEMA)
        errors = sorted(validator.iter_errors(data), key=lambda e: list(e.path))
        if errors:
            details = "; ".join(
                f"{'/'.join(str(p) for p in err.path) or '<root>'}: {err.message}" for err in errors
            )
            logger.warning("Rejected settings from %s: %s", source, details)
            raise SettingsError(f"Invalid settings in {source}: {details}")

    @classmethod
    def from_dict(cls, data: dict) -> "Settings":
        shop = ShopSettings(**data.get("shop", {}))
        top = {k: v for k, v in data.items() if k != "shop"}
        return cls(shop=shop, **top)

    @classmethod
    def load(cls, user_path: Optional[Path] = None) -> "Settings":
        """Load packaged defaults and overlay an optional user YAML file."""
        try:
            default_file = resources.files("treasurehunt.config").joinpath("default_settings.yaml")
            with default_file.open("r", encoding="utf-8") as f:
                default_data = yaml.safe_load(f) or {}
        except FileNotFoundError:
            logger.warning("Default settings not found; falling back to dataclass defaults.")
            default_data = dataclasses.asdict(Settings())

        user_data: dict = {}
        if user_path is not None:
            if user_path.exists():
                user_data = cls._load_yaml(user_path)
                logger.info("Loaded user settings from %s", user_path)
            else:
                logger.warning("User settings file not found: %s", user_path)

        merged = cls._deep_merge(default_data, user_data)
        cls.validate(merged, source=str(user_path) if user_path else "defaults")
        settings = cls.from_dict(merged)
        logger.debug("Settings merged: %s", settings)
        return settings
