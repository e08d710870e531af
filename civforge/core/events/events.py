"""Domain events published by the factory, upgrade chain and civilizations.

Event Design Principles:
- Events are immutable dataclasses with rich object payloads
- Events use proper enums instead of magic strings
- Keep event types focused and avoid over-granular events
"""

from dataclasses import dataclass, field
from typing import TYPE_CHECKING
from abc import ABC
from enum import Enum, auto

from ..data import Faction, StrategyKind

if TYPE_CHECKING:
    from ..data import UnitStats, UpgradeEffect


class EventType(Enum):
    """Types of events that managers can subscribe to."""
    # Unit Events
    ARMY_TRAINED = auto()
    UPGRADE_APPLIED = auto()

    # Civilization Events
    STRATEGY_CHANGED = auto()
    ATTACK_RESOLVED = auto()
    ATTACK_REJECTED = auto()
    RESOURCES_ADDED = auto()


@dataclass(frozen=True)
class GameEvent(ABC):
    """Base class for all game events."""
    event_type: EventType = field(init=False)


@dataclass(frozen=True)
class ArmyTrained(GameEvent):
    """Event emitted when a factory trains a full army."""
    faction: Faction
    units: tuple["UnitStats", ...]

    def __post_init__(self):
        # Set event_type since dataclass frozen=True prevents normal assignment
        object.__setattr__(self, 'event_type', EventType.ARMY_TRAINED)


@dataclass(frozen=True)
class UpgradeApplied(GameEvent):
    """Event emitted when an upgrade chain adds an upgrade."""
    before: "UnitStats"
    after: "UnitStats"
    effect: "UpgradeEffect"

    def __post_init__(self):
        object.__setattr__(self, 'event_type', EventType.UPGRADE_APPLIED)


@dataclass(frozen=True)
class StrategyChanged(GameEvent):
    """Event emitted when a civilization swaps its combat strategy."""
    civilization_name: str
    previous: StrategyKind
    current: StrategyKind

    def __post_init__(self):
        object.__setattr__(self, 'event_type', EventType.STRATEGY_CHANGED)


@dataclass(frozen=True)
class AttackResolved(GameEvent):
    """Event emitted when an attack is paid for and resolved."""
    civilization_name: str
    strategy: StrategyKind
    computed_power: int
    narrative: str
    remaining_resources: int

    def __post_init__(self):
        object.__setattr__(self, 'event_type', EventType.ATTACK_RESOLVED)


@dataclass(frozen=True)
class AttackRejected(GameEvent):
    """Event emitted when an attack is refused for lack of resources."""
    civilization_name: str
    resources: int
    required: int

    def __post_init__(self):
        object.__setattr__(self, 'event_type', EventType.ATTACK_REJECTED)


@dataclass(frozen=True)
class ResourcesAdded(GameEvent):
    """Event emitted when a civilization gains resources."""
    civilization_name: str
    amount: int
    total: int

    def __post_init__(self):
        object.__setattr__(self, 'event_type', EventType.RESOURCES_ADDED)
