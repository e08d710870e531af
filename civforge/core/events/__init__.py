"""Event system for publisher-subscriber communication.

This package contains the complete event-driven architecture:
- event_manager.py: FIFO publisher-subscriber bus
- events.py: Event definitions for inter-system communication
"""

from .event_manager import EventManager, QueuedEvent
from .events import (
    GameEvent,
    EventType,
    ArmyTrained,
    UpgradeApplied,
    StrategyChanged,
    AttackResolved,
    AttackRejected,
    ResourcesAdded,
)

__all__ = [
    "EventManager",
    "QueuedEvent",
    "GameEvent",
    "EventType",
    "ArmyTrained",
    "UpgradeApplied",
    "StrategyChanged",
    "AttackResolved",
    "AttackRejected",
    "ResourcesAdded",
]
