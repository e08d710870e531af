"""Faction unit factory backed by a YAML stat table.

This module defines the base stats each faction gives its unit kinds.
Stat templates are loaded from YAML and converted to data structures that a
UnitFactory turns into UnitStats values (Archer, Swordsman, Knight).
"""

import os
from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

import yaml

from ..core.data import (
    Faction,
    UnitKind,
    UnitStats,
    FACTION_NAMES,
    UNIT_KIND_NAMES,
)
from ..core.events import ArmyTrained

if TYPE_CHECKING:
    from ..core.events import EventManager


@dataclass(frozen=True)
class UnitTemplate:
    """Base numbers for one faction/unit-kind pair."""
    attack: int
    defense: int
    gold_cost: int
    wood_cost: int


def _default_stats_path() -> str:
    package_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
    return os.path.join(package_root, "assets", "data", "units", "unit_stats.yaml")


def load_unit_templates(
    yaml_path: Optional[str] = None,
) -> dict[Faction, dict[UnitKind, UnitTemplate]]:
    """Load the faction stat table from a YAML file.

    Args:
        yaml_path: Path to the table, defaults to the packaged unit_stats.yaml

    Returns:
        Nested dictionary keyed by Faction then UnitKind

    Raises:
        FileNotFoundError: If the file does not exist
        KeyError: If a stat field is missing
        ValueError: If a faction or unit kind name is unknown, or a faction
            does not define every unit kind
    """
    yaml_path = yaml_path or _default_stats_path()

    try:
        with open(yaml_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except FileNotFoundError:
        raise FileNotFoundError(f"Unit stats file not found: {yaml_path}")

    try:
        templates: dict[Faction, dict[UnitKind, UnitTemplate]] = {}
        for faction_name, kinds in data["factions"].items():
            # Convert strings to enums
            faction = getattr(Faction, faction_name)
            templates[faction] = {}
            for kind_name, stats in kinds.items():
                kind = getattr(UnitKind, kind_name)
                templates[faction][kind] = UnitTemplate(
                    attack=int(stats["attack"]),
                    defense=int(stats["defense"]),
                    gold_cost=int(stats["gold_cost"]),
                    wood_cost=int(stats.get("wood_cost", 0)),
                )
    except KeyError as e:
        raise KeyError(f"Invalid unit stats structure in {yaml_path}: {e}")
    except AttributeError as e:
        raise ValueError(f"Invalid faction or unit kind name in {yaml_path}: {e}")

    for faction, kinds in templates.items():
        missing = [kind.name for kind in UnitKind if kind not in kinds]
        if missing:
            raise ValueError(
                f"Faction {faction.name} in {yaml_path} is missing unit kinds: {missing}"
            )

    return templates


# Load templates from YAML file
UNIT_TEMPLATES: dict[Faction, dict[UnitKind, UnitTemplate]] = load_unit_templates()


def describe_unit(faction: Faction, kind: UnitKind, template: UnitTemplate) -> str:
    """Build the display description of a freshly trained unit."""
    return (
        f"{UNIT_KIND_NAMES[kind]} {FACTION_NAMES[faction]} "
        f"(Ataque: {template.attack}, Defesa: {template.defense}, "
        f"Custo: {template.gold_cost} ouro, {template.wood_cost} madeira)"
    )


class UnitFactory:
    """Creates faction-specific units from the stat table."""

    def __init__(
        self,
        faction: Faction,
        templates: Optional[dict[Faction, dict[UnitKind, UnitTemplate]]] = None,
        event_manager: Optional["EventManager"] = None,
    ):
        """Initialize the factory.

        Args:
            faction: Faction whose stats this factory produces
            templates: Stat table override, defaults to the packaged table
            event_manager: Optional bus that receives ArmyTrained events
        """
        self.faction = faction
        self.templates = templates if templates is not None else UNIT_TEMPLATES
        self.event_manager = event_manager

        if faction not in self.templates:
            raise KeyError(f"No unit stats defined for faction: {faction}")

    def create_unit(self, kind: UnitKind) -> UnitStats:
        """Create a unit of the given kind.

        Raises:
            KeyError: If the kind is not defined for this faction
        """
        faction_table = self.templates[self.faction]
        if kind not in faction_table:
            raise KeyError(f"No template for {kind} in faction {self.faction}")

        template = faction_table[kind]
        return UnitStats(
            description=describe_unit(self.faction, kind, template),
            attack=template.attack,
            defense=template.defense,
            gold_cost=template.gold_cost,
            wood_cost=template.wood_cost,
        )

    def create_archer(self) -> UnitStats:
        return self.create_unit(UnitKind.ARCHER)

    def create_swordsman(self) -> UnitStats:
        return self.create_unit(UnitKind.SWORDSMAN)

    def create_knight(self) -> UnitStats:
        return self.create_unit(UnitKind.KNIGHT)

    def train_army(self) -> list[UnitStats]:
        """Create one archer, one swordsman and one knight, in that order."""
        army = [self.create_archer(), self.create_swordsman(), self.create_knight()]

        if self.event_manager is not None:
            self.event_manager.publish(
                ArmyTrained(faction=self.faction, units=tuple(army)),
                source="UnitFactory",
            )

        return army
