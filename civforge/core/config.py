"""
Configuration loader for game settings.

This module handles loading and parsing of the YAML configuration file
that holds combat costs, starting power and logging settings.
"""
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

import yaml

from .data.game_enums import StrategyKind

PACKAGE_ROOT = Path(__file__).resolve().parent.parent
DEFAULT_CONFIG_PATH = "assets/config/game_config.yaml"


@dataclass(frozen=True)
class GameConfig:
    """Tunable settings for civilizations and logging."""
    attack_cost: int = 50
    military_power: int = 100
    default_strategy: StrategyKind = StrategyKind.BALANCED
    log_max_messages: int = 1000
    log_level: str = "INFO"


class ConfigLoader:
    """Loads and validates game configuration from a YAML file."""

    def __init__(self, config_path: Optional[str] = None):
        self.config_path = config_path or DEFAULT_CONFIG_PATH
        self._raw: dict[str, Any] = {}
        self._config = GameConfig()

    @property
    def config(self) -> GameConfig:
        return self._config

    def resolve_path(self) -> Path:
        """Resolve the config path, treating relative paths as package-relative."""
        if os.path.isabs(self.config_path):
            return Path(self.config_path)
        return PACKAGE_ROOT / self.config_path

    def load_config(self) -> bool:
        """
        Load configuration from the YAML file.

        Returns:
            bool: True if the file was found and loaded, False if defaults are used

        Raises:
            ValueError: If the file contains invalid values
        """
        config_file = self.resolve_path()
        if not config_file.exists():
            self._config = GameConfig()
            return False

        with open(config_file, 'r', encoding='utf-8') as f:
            self._raw = yaml.safe_load(f) or {}

        self._config = self._parse(self._raw, config_file)
        return True

    @staticmethod
    def _parse(data: dict[str, Any], source: Path) -> GameConfig:
        combat = data.get('combat', {}) or {}
        logging_section = data.get('logging', {}) or {}
        defaults = GameConfig()

        strategy_name = combat.get('default_strategy', defaults.default_strategy.name)
        try:
            default_strategy = StrategyKind[str(strategy_name).upper()]
        except KeyError:
            raise ValueError(f"Unknown default_strategy '{strategy_name}' in {source}")

        try:
            attack_cost = int(combat.get('attack_cost', defaults.attack_cost))
            military_power = int(combat.get('military_power', defaults.military_power))
            max_messages = int(logging_section.get('max_messages', defaults.log_max_messages))
        except (TypeError, ValueError) as e:
            raise ValueError(f"Invalid numeric setting in {source}: {e}")

        if attack_cost < 0 or military_power < 0 or max_messages <= 0:
            raise ValueError(f"Settings in {source} must be non-negative")

        log_level = str(logging_section.get('level', defaults.log_level)).upper()

        return GameConfig(
            attack_cost=attack_cost,
            military_power=military_power,
            default_strategy=default_strategy,
            log_max_messages=max_messages,
            log_level=log_level,
        )


_config_cache: Optional[GameConfig] = None


def get_game_config() -> GameConfig:
    """Get the packaged game configuration, loading it on first use."""
    global _config_cache
    if _config_cache is None:
        loader = ConfigLoader()
        loader.load_config()
        _config_cache = loader.config
    return _config_cache
