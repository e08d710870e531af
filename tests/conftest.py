"""
Basic test fixtures for the civforge test suite.

Provides simple fixtures for factories, civilizations and the event bus.
"""

import sys
import os
import pytest

# Add the project root to the Python path
project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, project_root)

from civforge.core.config import GameConfig
from civforge.core.data import Faction, UnitStats
from civforge.core.events import EventManager
from civforge.game import Civilization, LogManager, UnitFactory


@pytest.fixture
def event_manager():
    """Create an event manager for testing."""
    return EventManager()


@pytest.fixture
def log_manager(event_manager):
    """Create a log manager subscribed to the test event manager."""
    return LogManager(event_manager)


@pytest.fixture
def game_config():
    """Default settings, independent of the packaged YAML file."""
    return GameConfig()


@pytest.fixture
def british_factory():
    return UnitFactory(Faction.BRITISH)


@pytest.fixture
def french_factory():
    return UnitFactory(Faction.FRENCH)


@pytest.fixture
def base_swordsman():
    """Plain swordsman profile used by the upgrade tests."""
    return UnitStats(description="Espadachim", attack=25, defense=20, gold_cost=60, wood_cost=10)


@pytest.fixture
def civilization(game_config):
    """Civilization with enough resources for several attacks."""
    return Civilization("Romanos", 500, config=game_config)
