"""
Upgrade composition for unit stats.

Upgrades are plain data (UpgradeEffect) folded left-to-right over an
immutable base UnitStats. Numeric fields are additive, so any order of the
same upgrades gives the same numbers; descriptions keep application order.
"""
from typing import TYPE_CHECKING, Iterable, Optional, Union

import numpy as np
from numpy.typing import NDArray

from ..core.data import UnitStats, UpgradeEffect, UpgradeKind, get_upgrade_effect
from ..core.data.data_structures import DELTA_FIELDS
from ..core.events import UpgradeApplied

if TYPE_CHECKING:
    from ..core.events import EventManager


UpgradeLike = Union[UpgradeKind, UpgradeEffect]


def to_effect(upgrade: UpgradeLike) -> UpgradeEffect:
    """Normalize an upgrade kind or effect to an UpgradeEffect."""
    if isinstance(upgrade, UpgradeKind):
        return get_upgrade_effect(upgrade)
    return upgrade


def apply_upgrade(stats: UnitStats, effect: UpgradeLike) -> UnitStats:
    """Apply one upgrade to stats, returning a new value.

    Args:
        stats: Base stats (left untouched)
        effect: Upgrade kind or explicit effect

    Returns:
        New UnitStats with deltas added and the suffix appended. Effect
        deltas are non-negative, so this never fails for valid stats.
    """
    return to_effect(effect).apply(stats)


def apply_upgrades(stats: UnitStats, effects: Iterable[UpgradeLike]) -> UnitStats:
    """Fold a sequence of upgrades over stats. An empty sequence returns stats."""
    result = stats
    for effect in effects:
        result = apply_upgrade(result, effect)
    return result


class UpgradeChain:
    """Ordered, immutable sequence of upgrades over a base unit.

    Repeats are allowed and no combination is forbidden. add() returns a new
    chain so a shared base can branch into different upgrade paths.
    """

    def __init__(
        self,
        base: UnitStats,
        effects: Iterable[UpgradeLike] = (),
        event_manager: Optional["EventManager"] = None,
    ):
        self.base = base
        self.effects: tuple[UpgradeEffect, ...] = tuple(to_effect(e) for e in effects)
        self.event_manager = event_manager

    def __len__(self) -> int:
        return len(self.effects)

    def __repr__(self) -> str:
        return f"UpgradeChain({self.base.description!r}, {len(self.effects)} upgrades)"

    def add(self, upgrade: UpgradeLike) -> "UpgradeChain":
        """Return a new chain with one more upgrade at the end."""
        effect = to_effect(upgrade)
        chain = UpgradeChain(self.base, self.effects + (effect,), self.event_manager)

        if self.event_manager is not None:
            before = self.apply()
            self.event_manager.publish(
                UpgradeApplied(before=before, after=effect.apply(before), effect=effect),
                source="UpgradeChain",
            )

        return chain

    def apply(self) -> UnitStats:
        """Fold every upgrade over the base in order."""
        return apply_upgrades(self.base, self.effects)

    def stages(self) -> list[UnitStats]:
        """Every intermediate value, starting with the base."""
        stages = [self.base]
        for effect in self.effects:
            stages.append(effect.apply(stages[-1]))
        return stages

    def _delta_matrix(self) -> NDArray[np.int64]:
        if not self.effects:
            return np.zeros((0, len(DELTA_FIELDS)), dtype=np.int64)
        return np.stack([effect.to_numpy() for effect in self.effects])

    def total_deltas(self) -> dict[str, int]:
        """Summed deltas of the whole chain, keyed by stat name."""
        totals = self._delta_matrix().sum(axis=0)
        return {name: int(value) for name, value in zip(DELTA_FIELDS, totals)}

    def cost_progression(self) -> list[int]:
        """Gold cost after each stage, starting with the base cost."""
        gold_index = DELTA_FIELDS.index("gold_cost")
        steps = np.cumsum(self._delta_matrix()[:, gold_index])
        return [self.base.gold_cost] + [int(self.base.gold_cost + s) for s in steps]
