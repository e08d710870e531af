"""
Unit tests for the upgrade and strategy constant tables and enums.
"""
import pytest

from civforge.core.data import (
    STRATEGY_DATA,
    UPGRADE_DATA,
    Faction,
    StrategyKind,
    UnitKind,
    UpgradeKind,
    FACTION_NAMES,
    UNIT_KIND_NAMES,
    get_upgrade_effect,
)
from tests.test_constants import (
    ARMOR_DELTAS,
    ELITE_TRAINING_DELTAS,
    VETERAN_STATUS_DELTAS,
    WEAPON_DELTAS,
)


class TestEnums:
    """Test enum completeness."""

    def test_factions(self):
        assert {f.name for f in Faction} == {"BRITISH", "FRENCH"}

    def test_unit_kinds(self):
        assert [k.name for k in UnitKind] == ["ARCHER", "SWORDSMAN", "KNIGHT"]

    def test_every_faction_has_display_name(self):
        assert set(FACTION_NAMES) == set(Faction)

    def test_every_unit_kind_has_display_name(self):
        assert set(UNIT_KIND_NAMES) == set(UnitKind)


class TestUpgradeData:
    """Test the upgrade table."""

    def test_every_kind_defined(self):
        """Test that each UpgradeKind has an entry."""
        assert set(UPGRADE_DATA) == set(UpgradeKind)

    @pytest.mark.parametrize("kind,deltas,suffix", [
        (UpgradeKind.ARMOR, ARMOR_DELTAS, "Armadura Reforçada"),
        (UpgradeKind.WEAPON, WEAPON_DELTAS, "Arma Aprimorada"),
        (UpgradeKind.ELITE_TRAINING, ELITE_TRAINING_DELTAS, "Treinamento Elite"),
        (UpgradeKind.VETERAN_STATUS, VETERAN_STATUS_DELTAS, "Status Veterano"),
    ])
    def test_deltas_and_suffix(self, kind, deltas, suffix):
        """Test exact deltas and description suffix per upgrade."""
        effect = get_upgrade_effect(kind)

        assert (effect.attack_delta, effect.defense_delta, effect.gold_cost_delta) == deltas
        assert effect.description_suffix == suffix

    def test_gameplay_properties(self):
        """Test gameplay properties expose the deltas."""
        props = UPGRADE_DATA[UpgradeKind.WEAPON].get_gameplay_properties()

        assert props == {"attack_delta": 20, "defense_delta": 0, "gold_cost_delta": 150}

    def test_unknown_kind_raises(self):
        """Test lookup of a non-upgrade key."""
        with pytest.raises(KeyError):
            get_upgrade_effect("ARMOR")  # type: ignore[arg-type]


class TestStrategyData:
    """Test the strategy table."""

    def test_every_kind_defined(self):
        assert set(STRATEGY_DATA) == set(StrategyKind)

    @pytest.mark.parametrize("kind,attack,defense", [
        (StrategyKind.AGGRESSIVE, 1.5, 0.7),
        (StrategyKind.BALANCED, 1.0, 1.0),
        (StrategyKind.DEFENSIVE, 0.7, 1.5),
    ])
    def test_modifiers(self, kind, attack, defense):
        info = STRATEGY_DATA[kind]

        assert info.attack_modifier == attack
        assert info.defense_modifier == defense

    def test_display_properties_use_percentages(self):
        props = STRATEGY_DATA[StrategyKind.DEFENSIVE].get_display_properties()

        assert props == {"name": "Defensiva", "attack_percent": 70, "defense_percent": 150}
