"""Game logic for unit production, upgrades and combat.

This package contains:
- unit_factory.py: Faction stat table and UnitFactory
- upgrades.py: apply_upgrade and the immutable UpgradeChain
- strategies.py: Closed set of combat strategies
- civilization.py: Civilization combat context (resources, power, strategy)
- log_manager.py: Categorized logging fed by the event bus
"""

from .unit_factory import UnitFactory, UnitTemplate, load_unit_templates, UNIT_TEMPLATES
from .upgrades import UpgradeChain, apply_upgrade, apply_upgrades
from .strategies import (
    CombatStrategy,
    AGGRESSIVE,
    BALANCED,
    DEFENSIVE,
    create_strategy,
)
from .civilization import AttackResult, Civilization, CivilizationInfo
from .log_manager import LogCategory, LogLevel, LogManager

# Civilization is the combat context of the strategy pattern
CombatContext = Civilization

__all__ = [
    "UnitFactory",
    "UnitTemplate",
    "load_unit_templates",
    "UNIT_TEMPLATES",
    "UpgradeChain",
    "apply_upgrade",
    "apply_upgrades",
    "CombatStrategy",
    "AGGRESSIVE",
    "BALANCED",
    "DEFENSIVE",
    "create_strategy",
    "AttackResult",
    "Civilization",
    "CivilizationInfo",
    "CombatContext",
    "LogCategory",
    "LogLevel",
    "LogManager",
]
