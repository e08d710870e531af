"""
Log management system for combat messages.

This module provides centralized logging with categorization, filtering,
and bounded storage. The LogManager listens on the event bus and turns
factory, upgrade and civilization events into readable log lines.
"""
import os
from collections import deque
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum, auto
from typing import Optional, TYPE_CHECKING

from ..core.data import FACTION_NAMES, STRATEGY_KIND_NAMES
from ..core.events import (
    ArmyTrained,
    AttackRejected,
    AttackResolved,
    EventType,
    ResourcesAdded,
    StrategyChanged,
    UpgradeApplied,
)

if TYPE_CHECKING:
    from ..core.config import GameConfig
    from ..core.events import EventManager, GameEvent


class LogCategory(Enum):
    """Categories for log messages."""
    SYSTEM = auto()     # System messages (initialization, loading, etc.)
    FACTORY = auto()    # Unit training
    UPGRADE = auto()    # Upgrade chain changes
    STRATEGY = auto()   # Strategy swaps
    BATTLE = auto()     # Attack resolution
    RESOURCES = auto()  # Resource gains
    WARNING = auto()    # Warning messages
    ERROR = auto()      # Error messages


CATEGORY_TAGS = {
    LogCategory.SYSTEM: "SYS",
    LogCategory.FACTORY: "FAC",
    LogCategory.UPGRADE: "UPG",
    LogCategory.STRATEGY: "STR",
    LogCategory.BATTLE: "BTL",
    LogCategory.RESOURCES: "RES",
    LogCategory.WARNING: "WRN",
    LogCategory.ERROR: "ERR",
}


@dataclass
class LogMessage:
    """A single log message with metadata."""
    text: str
    category: LogCategory
    timestamp: datetime = field(default_factory=datetime.now)

    def format(self, include_timestamp: bool = False, include_category: bool = True) -> str:
        """Format the message for display."""
        parts = []

        if include_timestamp:
            parts.append(f"[{self.timestamp.strftime('%H:%M:%S')}]")

        if include_category:
            parts.append(f"[{CATEGORY_TAGS.get(self.category, '???')}]")

        parts.append(self.text)
        return " ".join(parts)


class LogLevel(Enum):
    """Log levels for filtering."""
    INFO = 1
    WARNING = 2
    ERROR = 3


class LogManager:
    """Manages game logging with categorization and filtering."""

    def __init__(
        self,
        event_manager: Optional["EventManager"] = None,
        max_messages: int = 1000,
        default_level: LogLevel = LogLevel.INFO
    ):
        """Initialize the log manager.

        Args:
            event_manager: Event bus to subscribe to, if any
            max_messages: Maximum number of messages to store in the buffer
            default_level: Default log level for filtering
        """
        self.messages: deque[LogMessage] = deque(maxlen=max_messages)
        self.log_level = default_level
        self.enabled_categories = set(LogCategory)
        self.event_manager = event_manager

        # Categories not listed here default to INFO
        self.category_levels = {
            LogCategory.WARNING: LogLevel.WARNING,
            LogCategory.ERROR: LogLevel.ERROR,
        }

        if self.event_manager is not None:
            self._setup_event_subscriptions()

    @classmethod
    def from_config(
        cls, config: "GameConfig", event_manager: Optional["EventManager"] = None
    ) -> "LogManager":
        """Build a log manager from the logging section of a GameConfig.

        Raises:
            ValueError: If the configured level name is unknown
        """
        try:
            level = LogLevel[config.log_level.upper()]
        except KeyError:
            raise ValueError(f"Unknown log level: {config.log_level}")
        return cls(event_manager, max_messages=config.log_max_messages, default_level=level)

    def _setup_event_subscriptions(self) -> None:
        assert self.event_manager is not None
        handlers = {
            EventType.ARMY_TRAINED: self._handle_army_trained,
            EventType.UPGRADE_APPLIED: self._handle_upgrade_applied,
            EventType.STRATEGY_CHANGED: self._handle_strategy_changed,
            EventType.ATTACK_RESOLVED: self._handle_attack_resolved,
            EventType.ATTACK_REJECTED: self._handle_attack_rejected,
            EventType.RESOURCES_ADDED: self._handle_resources_added,
        }
        for event_type, handler in handlers.items():
            self.event_manager.subscribe(event_type, handler)

        # Subscriber failures on the bus become error lines
        self.event_manager.set_error_callback(self.error)

    def _handle_army_trained(self, event: "GameEvent") -> None:
        if isinstance(event, ArmyTrained):
            self.factory(
                f"{FACTION_NAMES[event.faction]} treinou {len(event.units)} tropas"
            )

    def _handle_upgrade_applied(self, event: "GameEvent") -> None:
        if isinstance(event, UpgradeApplied):
            self.upgrade(
                f"{event.effect.description_suffix} aplicado: "
                f"ataque {event.before.attack}->{event.after.attack}, "
                f"defesa {event.before.defense}->{event.after.defense}, "
                f"custo {event.before.gold_cost}->{event.after.gold_cost}"
            )

    def _handle_strategy_changed(self, event: "GameEvent") -> None:
        if isinstance(event, StrategyChanged):
            self.strategy(
                f"{event.civilization_name} mudou de estratégia: "
                f"{STRATEGY_KIND_NAMES[event.current]}"
            )

    def _handle_attack_resolved(self, event: "GameEvent") -> None:
        if isinstance(event, AttackResolved):
            self.battle(f"{event.civilization_name} -> {event.narrative}")

    def _handle_attack_rejected(self, event: "GameEvent") -> None:
        if isinstance(event, AttackRejected):
            self.warning(
                f"{event.civilization_name}: recursos insuficientes para atacar "
                f"({event.resources}/{event.required})"
            )

    def _handle_resources_added(self, event: "GameEvent") -> None:
        if isinstance(event, ResourcesAdded):
            self.resources(f"{event.civilization_name} ganhou {event.amount} recursos!")

    def log(self, text: str, category: LogCategory = LogCategory.SYSTEM) -> None:
        """Add a message to the log.

        Args:
            text: The message text
            category: The category of the message
        """
        # Always store; filters apply on read
        self.messages.append(LogMessage(text=text, category=category))

    # Convenience methods for common categories
    def system(self, text: str) -> None:
        self.log(text, LogCategory.SYSTEM)

    def factory(self, text: str) -> None:
        self.log(text, LogCategory.FACTORY)

    def upgrade(self, text: str) -> None:
        self.log(text, LogCategory.UPGRADE)

    def strategy(self, text: str) -> None:
        self.log(text, LogCategory.STRATEGY)

    def battle(self, text: str) -> None:
        self.log(text, LogCategory.BATTLE)

    def resources(self, text: str) -> None:
        self.log(text, LogCategory.RESOURCES)

    def warning(self, text: str) -> None:
        self.log(text, LogCategory.WARNING)

    def error(self, text: str) -> None:
        self.log(text, LogCategory.ERROR)

    def get_messages(self, count: Optional[int] = None,
                     categories: Optional[set[LogCategory]] = None) -> list[LogMessage]:
        """Get recent messages, optionally filtered by category.

        Args:
            count: Maximum number of messages to return (None for all)
            categories: Set of categories to include (None for all enabled)

        Returns:
            List of recent messages
        """
        if categories:
            filtered = [msg for msg in self.messages
                        if msg.category in categories and msg.category in self.enabled_categories]
        else:
            filtered = []
            for msg in self.messages:
                if msg.category not in self.enabled_categories:
                    continue

                message_level = self.category_levels.get(msg.category, LogLevel.INFO)
                if message_level.value < self.log_level.value:
                    continue

                filtered.append(msg)

        if count is not None and count < len(filtered):
            return filtered[-count:]
        return filtered

    def get_formatted_messages(self, count: Optional[int] = None) -> list[str]:
        return [msg.format() for msg in self.get_messages(count)]

    def clear(self) -> None:
        """Clear all messages from the log."""
        self.messages.clear()

    def disable_category(self, category: LogCategory) -> None:
        self.enabled_categories.discard(category)

    def save_log_to_file(self, log_dir: str = "logs") -> Optional[str]:
        """Save all messages to a timestamped log file.

        Args:
            log_dir: Directory to write into, created if missing

        Returns:
            Path of the written file, or None if saving failed
        """
        try:
            timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
            os.makedirs(log_dir, exist_ok=True)
            filepath = os.path.join(log_dir, f"log_{timestamp}.log")

            with open(filepath, 'w', encoding='utf-8') as f:
                f.write("civforge - Combat Log\n")
                f.write(f"Generated: {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}\n")
                f.write("=" * 60 + "\n\n")

                if not self.messages:
                    f.write("No messages to save.\n")
                else:
                    # Every buffered message, ignoring current filters
                    for msg in self.messages:
                        timestamp_str = msg.timestamp.strftime("%Y-%m-%d %H:%M:%S.%f")[:-3]
                        f.write(f"[{timestamp_str}] [{msg.category.name}] {msg.text}\n")

            self.system(f"Combat log saved to {filepath}")
            return filepath

        except OSError as e:
            self.error(f"Failed to save log file: {e}")
            return None
