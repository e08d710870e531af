"""Immutable value types shared across the game modules.

Data Flow:
1. unit_stats.yaml -> UnitStats (factory) -> UnitStats (upgraded) -> display
2. UpgradeKind -> UpgradeEffect -> apply() -> new UnitStats

UnitStats and UpgradeEffect are frozen dataclasses: every upgrade produces a
new derived value and the original is never touched.
"""

from dataclasses import dataclass, replace
from typing import Any

import numpy as np
from numpy.typing import NDArray


# Field order of the numeric delta vector used by batch operations
DELTA_FIELDS = ("attack", "defense", "gold_cost")


def _check_non_negative_ints(obj: Any, field_names: tuple[str, ...]) -> None:
    for field_name in field_names:
        value = getattr(obj, field_name)
        if not isinstance(value, int) or isinstance(value, bool):
            raise ValueError(f"{field_name} must be an integer, got {value!r}")
        if value < 0:
            raise ValueError(f"{field_name} must be non-negative, got {value}")


@dataclass(frozen=True)
class UnitStats:
    """Numeric and descriptive profile of a unit.

    Attack, defense and both costs must be non-negative on construction.
    """
    description: str
    attack: int
    defense: int
    gold_cost: int
    wood_cost: int = 0

    def __post_init__(self):
        _check_non_negative_ints(self, ("attack", "defense", "gold_cost", "wood_cost"))

    def with_effect(self, effect: "UpgradeEffect") -> "UnitStats":
        """Return a new UnitStats with the effect's deltas added."""
        return replace(
            self,
            description=f"{self.description} + {effect.description_suffix}",
            attack=self.attack + effect.attack_delta,
            defense=self.defense + effect.defense_delta,
            gold_cost=self.gold_cost + effect.gold_cost_delta,
        )

    def to_numpy(self) -> NDArray[np.int64]:
        """Convert the additive fields to a numpy vector (attack, defense, gold_cost)."""
        return np.array([self.attack, self.defense, self.gold_cost], dtype=np.int64)

    def to_dict(self) -> dict[str, Any]:
        return {
            "description": self.description,
            "attack": self.attack,
            "defense": self.defense,
            "gold_cost": self.gold_cost,
            "wood_cost": self.wood_cost,
        }


@dataclass(frozen=True)
class UpgradeEffect:
    """Additive transform applied to a UnitStats value.

    Upgrades only ever add, so every delta must be non-negative. Applying a
    valid effect to a valid UnitStats therefore always succeeds.
    """
    attack_delta: int
    defense_delta: int
    gold_cost_delta: int
    description_suffix: str

    def __post_init__(self):
        _check_non_negative_ints(self, ("attack_delta", "defense_delta", "gold_cost_delta"))

    def apply(self, stats: UnitStats) -> UnitStats:
        """Apply this effect to stats, returning a new value."""
        return stats.with_effect(self)

    def to_numpy(self) -> NDArray[np.int64]:
        """Convert deltas to a numpy vector (attack, defense, gold_cost)."""
        return np.array(
            [self.attack_delta, self.defense_delta, self.gold_cost_delta],
            dtype=np.int64,
        )


@dataclass(frozen=True)
class CombatResolution:
    """Outcome of a strategy resolving a base power value."""
    computed_power: int
    narrative: str


@dataclass(frozen=True)
class ArmySummary:
    """Aggregated totals of a trained roster."""
    unit_count: int
    total_attack: int
    total_defense: int
    total_gold_cost: int
    total_wood_cost: int


def summarize_army(units: list[UnitStats]) -> ArmySummary:
    """Total the stats of a roster of units.

    Args:
        units: Unit stats to aggregate

    Returns:
        ArmySummary with per-field totals (all zero for an empty roster)
    """
    if not units:
        return ArmySummary(0, 0, 0, 0, 0)

    table = np.array(
        [[u.attack, u.defense, u.gold_cost, u.wood_cost] for u in units],
        dtype=np.int64,
    )
    totals = table.sum(axis=0)
    return ArmySummary(
        unit_count=len(units),
        total_attack=int(totals[0]),
        total_defense=int(totals[1]),
        total_gold_cost=int(totals[2]),
        total_wood_cost=int(totals[3]),
    )
