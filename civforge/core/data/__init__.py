"""Core data structures and definitions.

This package contains fundamental data types and game definitions:
- data_structures.py: UnitStats, UpgradeEffect and roster aggregation
- game_enums.py: Centralized enums for factions, unit kinds, upgrades, strategies
- game_info.py: Static upgrade and strategy lookup tables
"""

from .data_structures import (
    UnitStats,
    UpgradeEffect,
    CombatResolution,
    ArmySummary,
    summarize_army,
)
from .game_enums import (
    Faction,
    UnitKind,
    UpgradeKind,
    StrategyKind,
    AttackOutcome,
    FACTION_NAMES,
    UNIT_KIND_NAMES,
    UPGRADE_KIND_NAMES,
    STRATEGY_KIND_NAMES,
)
from .game_info import (
    BaseInfo,
    UpgradeInfo,
    StrategyInfo,
    UPGRADE_DATA,
    STRATEGY_DATA,
    get_upgrade_effect,
)

__all__ = [
    "UnitStats",
    "UpgradeEffect",
    "CombatResolution",
    "ArmySummary",
    "summarize_army",
    "Faction",
    "UnitKind",
    "UpgradeKind",
    "StrategyKind",
    "AttackOutcome",
    "FACTION_NAMES",
    "UNIT_KIND_NAMES",
    "UPGRADE_KIND_NAMES",
    "STRATEGY_KIND_NAMES",
    "BaseInfo",
    "UpgradeInfo",
    "StrategyInfo",
    "UPGRADE_DATA",
    "STRATEGY_DATA",
    "get_upgrade_effect",
]
