"""
Civilization combat context.

A Civilization holds resources, military power and the currently selected
combat strategy. Attacks cost resources and delegate the power calculation
to the active strategy, which may be swapped at any time.
"""
from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

from ..core.config import GameConfig, get_game_config
from ..core.data import AttackOutcome
from ..core.events import (
    AttackRejected,
    AttackResolved,
    ResourcesAdded,
    StrategyChanged,
)
from .strategies import CombatStrategy, create_strategy

if TYPE_CHECKING:
    from ..core.events import EventManager


INSUFFICIENT_RESOURCES_MESSAGE = "Recursos insuficientes para atacar!"


@dataclass(frozen=True)
class AttackResult:
    """What a single attack() call produced."""
    outcome: AttackOutcome
    remaining_resources: int
    computed_power: int = 0
    narrative: str = ""

    @property
    def succeeded(self) -> bool:
        return self.outcome == AttackOutcome.SUCCESS

    @property
    def message(self) -> str:
        """Narrative on success, the insufficient resources notice otherwise."""
        if self.succeeded:
            return self.narrative
        return INSUFFICIENT_RESOURCES_MESSAGE


@dataclass(frozen=True)
class CivilizationInfo:
    """Read-only snapshot of a civilization for display."""
    name: str
    military_power: int
    resources: int
    strategy_name: str
    attack_modifier_percent: int
    defense_modifier_percent: int


class Civilization:
    """Mutable combat context with a swappable strategy."""

    def __init__(
        self,
        name: str,
        resources: int,
        strategy: Optional[CombatStrategy] = None,
        config: Optional[GameConfig] = None,
        event_manager: Optional["EventManager"] = None,
    ):
        """Initialize a civilization.

        Args:
            name: Display name
            resources: Starting resources
            strategy: Initial strategy, defaults to the configured default (Balanced)
            config: Settings override, defaults to the packaged game config
            event_manager: Optional bus that receives civilization events
        """
        self.config = config or get_game_config()
        self.name = name
        self.resources = resources
        self.strategy = strategy or create_strategy(self.config.default_strategy)
        self.event_manager = event_manager
        self._military_power = self.config.military_power

    @property
    def military_power(self) -> int:
        return self._military_power

    @property
    def attack_cost(self) -> int:
        return self.config.attack_cost

    def can_attack(self) -> bool:
        return self.resources >= self.attack_cost

    def set_strategy(self, strategy: CombatStrategy) -> None:
        """Replace the active strategy; the next attack uses it."""
        previous = self.strategy
        self.strategy = strategy
        self._publish(StrategyChanged(
            civilization_name=self.name,
            previous=previous.kind,
            current=strategy.kind,
        ))

    def attack(self) -> AttackResult:
        """Pay for and resolve an attack with the active strategy.

        Returns:
            AttackResult with SUCCESS and the narrative, or
            INSUFFICIENT_RESOURCES with resources left unchanged
        """
        if not self.can_attack():
            self._publish(AttackRejected(
                civilization_name=self.name,
                resources=self.resources,
                required=self.attack_cost,
            ))
            return AttackResult(
                outcome=AttackOutcome.INSUFFICIENT_RESOURCES,
                remaining_resources=self.resources,
            )

        self.resources -= self.attack_cost
        resolution = self.strategy.resolve(self.military_power)

        self._publish(AttackResolved(
            civilization_name=self.name,
            strategy=self.strategy.kind,
            computed_power=resolution.computed_power,
            narrative=resolution.narrative,
            remaining_resources=self.resources,
        ))
        return AttackResult(
            outcome=AttackOutcome.SUCCESS,
            remaining_resources=self.resources,
            computed_power=resolution.computed_power,
            narrative=resolution.narrative,
        )

    def add_resources(self, amount: int) -> int:
        """Add resources (sign is not checked). Returns the new total."""
        self.resources += amount
        self._publish(ResourcesAdded(
            civilization_name=self.name,
            amount=amount,
            total=self.resources,
        ))
        return self.resources

    def display_info(self) -> CivilizationInfo:
        return CivilizationInfo(
            name=self.name,
            military_power=self.military_power,
            resources=self.resources,
            strategy_name=self.strategy.name,
            attack_modifier_percent=round(self.strategy.attack_modifier * 100),
            defense_modifier_percent=round(self.strategy.defense_modifier * 100),
        )

    def _publish(self, event) -> None:
        if self.event_manager is not None:
            self.event_manager.publish(event, source=f"Civilization:{self.name}")
