"""
Unit tests for the faction UnitFactory and its YAML stat table.
"""
from unittest.mock import Mock

import pytest

from civforge.core.data import Faction, UnitKind
from civforge.core.events import ArmyTrained, EventType
from civforge.game import UNIT_TEMPLATES, UnitFactory, load_unit_templates
from tests.test_constants import (
    BRITISH_ARCHER,
    BRITISH_KNIGHT,
    BRITISH_SWORDSMAN,
    FRENCH_ARCHER,
    FRENCH_KNIGHT,
    FRENCH_SWORDSMAN,
)


def numbers(stats):
    return (stats.attack, stats.defense, stats.gold_cost, stats.wood_cost)


class TestStatTable:
    """Test the packaged stat table."""

    def test_every_pair_defined(self):
        """Test that every faction defines every unit kind."""
        for faction in Faction:
            assert set(UNIT_TEMPLATES[faction]) == set(UnitKind)

    def test_missing_file_raises(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_unit_templates(str(tmp_path / "nope.yaml"))

    def test_unknown_faction_raises(self, tmp_path):
        path = tmp_path / "stats.yaml"
        path.write_text(
            "factions:\n  ROMAN:\n    ARCHER: {attack: 1, defense: 1, gold_cost: 1}\n",
            encoding="utf-8",
        )

        with pytest.raises(ValueError):
            load_unit_templates(str(path))

    def test_missing_stat_raises(self, tmp_path):
        path = tmp_path / "stats.yaml"
        path.write_text(
            "factions:\n  BRITISH:\n    ARCHER: {attack: 1, defense: 1}\n",
            encoding="utf-8",
        )

        with pytest.raises(KeyError):
            load_unit_templates(str(path))

    def test_incomplete_faction_raises(self, tmp_path):
        path = tmp_path / "stats.yaml"
        path.write_text(
            "factions:\n  BRITISH:\n    ARCHER: {attack: 1, defense: 1, gold_cost: 1}\n",
            encoding="utf-8",
        )

        with pytest.raises(ValueError, match="SWORDSMAN"):
            load_unit_templates(str(path))


class TestUnitFactory:
    """Test unit creation per faction."""

    @pytest.mark.parametrize("faction,kind,expected", [
        (Faction.BRITISH, UnitKind.ARCHER, BRITISH_ARCHER),
        (Faction.BRITISH, UnitKind.SWORDSMAN, BRITISH_SWORDSMAN),
        (Faction.BRITISH, UnitKind.KNIGHT, BRITISH_KNIGHT),
        (Faction.FRENCH, UnitKind.ARCHER, FRENCH_ARCHER),
        (Faction.FRENCH, UnitKind.SWORDSMAN, FRENCH_SWORDSMAN),
        (Faction.FRENCH, UnitKind.KNIGHT, FRENCH_KNIGHT),
    ])
    def test_create_unit(self, faction, kind, expected):
        assert numbers(UnitFactory(faction).create_unit(kind)) == expected

    def test_british_archer(self, british_factory):
        archer = british_factory.create_archer()

        assert numbers(archer) == (35, 10, 40, 20)
        assert archer.description == (
            "Arqueiro Britanico (Ataque: 35, Defesa: 10, Custo: 40 ouro, 20 madeira)"
        )

    def test_french_knight(self, french_factory):
        knight = french_factory.create_knight()

        assert numbers(knight) == (50, 35, 120, 0)
        assert knight.description.startswith("Cavaleiro Frances")

    def test_swordsman_description(self, french_factory):
        assert french_factory.create_swordsman().description.startswith("Espadachim Frances")

    def test_outputs_are_deterministic(self, british_factory):
        assert british_factory.create_knight() == british_factory.create_knight()

    def test_factions_differ(self, british_factory, french_factory):
        """Test that archers differ in attack between factions."""
        assert british_factory.create_archer().attack == 35
        assert french_factory.create_archer().attack == 30

    def test_train_army_order(self, british_factory):
        army = british_factory.train_army()

        assert [numbers(u) for u in army] == [BRITISH_ARCHER, BRITISH_SWORDSMAN, BRITISH_KNIGHT]

    def test_train_army_publishes_event(self, event_manager):
        subscriber = Mock()
        event_manager.subscribe(EventType.ARMY_TRAINED, subscriber)
        factory = UnitFactory(Faction.FRENCH, event_manager=event_manager)

        army = factory.train_army()
        event_manager.process_events()

        event = subscriber.call_args[0][0]
        assert isinstance(event, ArmyTrained)
        assert event.faction == Faction.FRENCH
        assert list(event.units) == army

    def test_custom_templates(self):
        templates = {Faction.BRITISH: {}}
        factory = UnitFactory(Faction.BRITISH, templates=templates)

        with pytest.raises(KeyError):
            factory.create_archer()

    def test_unknown_faction_in_templates(self):
        with pytest.raises(KeyError):
            UnitFactory(Faction.FRENCH, templates={})
