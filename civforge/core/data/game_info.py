"""Standardized Info classes for upgrades and combat strategies.

This module stores the static constant tables that drive upgrade composition
and strategy resolution, with a common interface for display and gameplay
properties.
"""

from dataclasses import dataclass
from abc import ABC, abstractmethod
from typing import Dict, Any

from .data_structures import UpgradeEffect
from .game_enums import (
    StrategyKind,
    UpgradeKind,
    STRATEGY_KIND_NAMES,
    UPGRADE_KIND_NAMES,
)


@dataclass(frozen=True)
class BaseInfo(ABC):
    """Base class for all static info records."""
    name: str

    @abstractmethod
    def get_display_properties(self) -> Dict[str, Any]:
        """Get properties used for display/rendering."""
        pass

    @abstractmethod
    def get_gameplay_properties(self) -> Dict[str, Any]:
        """Get properties used for game mechanics."""
        pass


@dataclass(frozen=True)
class UpgradeInfo(BaseInfo):
    """Static information about an upgrade kind."""
    effect: UpgradeEffect

    def get_display_properties(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "suffix": self.effect.description_suffix,
        }

    def get_gameplay_properties(self) -> Dict[str, Any]:
        return {
            "attack_delta": self.effect.attack_delta,
            "defense_delta": self.effect.defense_delta,
            "gold_cost_delta": self.effect.gold_cost_delta,
        }


@dataclass(frozen=True)
class StrategyInfo(BaseInfo):
    """Static information about a combat strategy."""
    attack_modifier: float
    defense_modifier: float
    narrative_template: str

    def get_display_properties(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "attack_percent": round(self.attack_modifier * 100),
            "defense_percent": round(self.defense_modifier * 100),
        }

    def get_gameplay_properties(self) -> Dict[str, Any]:
        return {
            "attack_modifier": self.attack_modifier,
            "defense_modifier": self.defense_modifier,
        }


UPGRADE_DATA: Dict[UpgradeKind, UpgradeInfo] = {
    UpgradeKind.ARMOR: UpgradeInfo(
        name="Armor",
        effect=UpgradeEffect(
            attack_delta=0,
            defense_delta=15,
            gold_cost_delta=100,
            description_suffix=UPGRADE_KIND_NAMES[UpgradeKind.ARMOR],
        ),
    ),
    UpgradeKind.WEAPON: UpgradeInfo(
        name="Weapon",
        effect=UpgradeEffect(
            attack_delta=20,
            defense_delta=0,
            gold_cost_delta=150,
            description_suffix=UPGRADE_KIND_NAMES[UpgradeKind.WEAPON],
        ),
    ),
    UpgradeKind.ELITE_TRAINING: UpgradeInfo(
        name="Elite Training",
        effect=UpgradeEffect(
            attack_delta=10,
            defense_delta=10,
            gold_cost_delta=200,
            description_suffix=UPGRADE_KIND_NAMES[UpgradeKind.ELITE_TRAINING],
        ),
    ),
    # Earned after battle, so it costs no gold
    UpgradeKind.VETERAN_STATUS: UpgradeInfo(
        name="Veteran Status",
        effect=UpgradeEffect(
            attack_delta=15,
            defense_delta=15,
            gold_cost_delta=0,
            description_suffix=UPGRADE_KIND_NAMES[UpgradeKind.VETERAN_STATUS],
        ),
    ),
}

STRATEGY_DATA: Dict[StrategyKind, StrategyInfo] = {
    StrategyKind.AGGRESSIVE: StrategyInfo(
        name=STRATEGY_KIND_NAMES[StrategyKind.AGGRESSIVE],
        attack_modifier=1.5,
        defense_modifier=0.7,
        narrative_template="Ataque AGRESSIVO com poder {power}! (+50% ataque, -30% defesa)",
    ),
    StrategyKind.BALANCED: StrategyInfo(
        name=STRATEGY_KIND_NAMES[StrategyKind.BALANCED],
        attack_modifier=1.0,
        defense_modifier=1.0,
        narrative_template="Ataque BALANCEADO com poder {power}! (ataque e defesa equilibrados)",
    ),
    StrategyKind.DEFENSIVE: StrategyInfo(
        name=STRATEGY_KIND_NAMES[StrategyKind.DEFENSIVE],
        attack_modifier=0.7,
        defense_modifier=1.5,
        narrative_template="Ataque DEFENSIVO com poder {power}! (-30% ataque, +50% defesa)",
    ),
}


def get_upgrade_effect(kind: UpgradeKind) -> UpgradeEffect:
    """Look up the effect for an upgrade kind.

    Raises:
        KeyError: If the upgrade kind has no table entry
    """
    if kind not in UPGRADE_DATA:
        raise KeyError(f"No upgrade defined for: {kind}")
    return UPGRADE_DATA[kind].effect
