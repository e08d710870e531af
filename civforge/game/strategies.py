"""Combat Strategy Variants

This module implements the closed set of combat strategies a civilization can
adopt. Each variant is a constant bundle of modifiers and a narrative
template; resolve() multiplies base power by the attack modifier.

The defense modifier is informational: it is displayed but no resolution
logic consumes it.
"""

import math
from dataclasses import dataclass
from typing import Any

from ..core.data import CombatResolution, StrategyKind, STRATEGY_DATA
from ..core.data.game_info import StrategyInfo


@dataclass(frozen=True)
class CombatStrategy:
    """A stateless combat behavior keyed by StrategyKind."""
    kind: StrategyKind

    @property
    def info(self) -> StrategyInfo:
        return STRATEGY_DATA[self.kind]

    @property
    def name(self) -> str:
        return self.info.name

    @property
    def attack_modifier(self) -> float:
        return self.info.attack_modifier

    @property
    def defense_modifier(self) -> float:
        return self.info.defense_modifier

    def compute_power(self, base_power: int) -> int:
        """Floor of base_power scaled by the attack modifier."""
        return math.floor(base_power * self.attack_modifier)

    def resolve(self, base_power: int) -> CombatResolution:
        """Resolve an attack with this strategy.

        Args:
            base_power: Military power of the attacking civilization

        Returns:
            CombatResolution with computed power and narrative text
        """
        power = self.compute_power(base_power)
        return CombatResolution(
            computed_power=power,
            narrative=self.info.narrative_template.format(power=power),
        )

    def get_display_properties(self) -> dict[str, Any]:
        return self.info.get_display_properties()

    def __str__(self) -> str:
        return self.name


AGGRESSIVE = CombatStrategy(StrategyKind.AGGRESSIVE)
BALANCED = CombatStrategy(StrategyKind.BALANCED)
DEFENSIVE = CombatStrategy(StrategyKind.DEFENSIVE)

_STRATEGIES = {
    StrategyKind.AGGRESSIVE: AGGRESSIVE,
    StrategyKind.BALANCED: BALANCED,
    StrategyKind.DEFENSIVE: DEFENSIVE,
}


def create_strategy(kind: StrategyKind) -> CombatStrategy:
    """Get the strategy instance for a strategy kind.

    Raises:
        ValueError: If kind is not a supported strategy
    """
    if kind not in _STRATEGIES:
        raise ValueError(f"Unsupported strategy type: {kind}")
    return _STRATEGIES[kind]
