"""Centralized game enums and display names.

This module contains the enums shared by the factory, upgrade and combat
modules, providing a single source of truth for their keys.
"""

from enum import Enum, auto


class Faction(Enum):
    """Civilizations that can train units."""
    BRITISH = auto()
    FRENCH = auto()


class UnitKind(Enum):
    """Unit kinds every faction can produce."""
    ARCHER = auto()
    SWORDSMAN = auto()
    KNIGHT = auto()


class UpgradeKind(Enum):
    """Upgrades that can be stacked on top of a unit."""
    ARMOR = auto()
    WEAPON = auto()
    ELITE_TRAINING = auto()
    VETERAN_STATUS = auto()


class StrategyKind(Enum):
    """Combat behaviors a civilization can adopt."""
    AGGRESSIVE = auto()
    BALANCED = auto()
    DEFENSIVE = auto()


class AttackOutcome(Enum):
    """Result of a civilization attack attempt."""
    SUCCESS = auto()
    INSUFFICIENT_RESOURCES = auto()


# Display names used in unit descriptions and console output
FACTION_NAMES = {
    Faction.BRITISH: "Britanico",
    Faction.FRENCH: "Frances",
}

UNIT_KIND_NAMES = {
    UnitKind.ARCHER: "Arqueiro",
    UnitKind.SWORDSMAN: "Espadachim",
    UnitKind.KNIGHT: "Cavaleiro",
}

UPGRADE_KIND_NAMES = {
    UpgradeKind.ARMOR: "Armadura Reforçada",
    UpgradeKind.WEAPON: "Arma Aprimorada",
    UpgradeKind.ELITE_TRAINING: "Treinamento Elite",
    UpgradeKind.VETERAN_STATUS: "Status Veterano",
}

STRATEGY_KIND_NAMES = {
    StrategyKind.AGGRESSIVE: "Agressiva",
    StrategyKind.BALANCED: "Balanceada",
    StrategyKind.DEFENSIVE: "Defensiva",
}
