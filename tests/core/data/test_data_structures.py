"""
Unit tests for the immutable value types.

Tests UnitStats validation, UpgradeEffect application and roster aggregation.
"""
import dataclasses

import numpy as np
import pytest

from civforge.core.data import (
    ArmySummary,
    UnitStats,
    UpgradeEffect,
    summarize_army,
)


class TestUnitStats:
    """Test UnitStats construction and derivation."""

    def test_creation_defaults_wood_cost(self):
        """Test that wood cost defaults to zero."""
        stats = UnitStats("Soldado", attack=20, defense=15, gold_cost=50)

        assert stats.wood_cost == 0

    def test_is_immutable(self, base_swordsman):
        """Test that fields cannot be reassigned."""
        with pytest.raises(dataclasses.FrozenInstanceError):
            base_swordsman.attack = 99  # type: ignore[misc]

    @pytest.mark.parametrize("field_name", ["attack", "defense", "gold_cost", "wood_cost"])
    def test_negative_values_rejected(self, field_name):
        """Test that negative stats raise ValueError."""
        values = {"attack": 1, "defense": 1, "gold_cost": 1, "wood_cost": 1}
        values[field_name] = -1

        with pytest.raises(ValueError, match=field_name):
            UnitStats("Invalido", **values)

    def test_non_integer_rejected(self):
        """Test that float stats raise ValueError."""
        with pytest.raises(ValueError):
            UnitStats("Invalido", attack=1.5, defense=1, gold_cost=1)  # type: ignore[arg-type]

    def test_with_effect_returns_new_value(self, base_swordsman):
        """Test that applying an effect leaves the original untouched."""
        effect = UpgradeEffect(5, 6, 7, "Teste")

        upgraded = base_swordsman.with_effect(effect)

        assert upgraded is not base_swordsman
        assert base_swordsman.attack == 25
        assert upgraded.attack == 30
        assert upgraded.defense == 26
        assert upgraded.gold_cost == 67
        assert upgraded.wood_cost == base_swordsman.wood_cost
        assert upgraded.description == "Espadachim + Teste"

    def test_equality_is_by_value(self):
        """Test that equal fields mean equal stats."""
        assert UnitStats("A", 1, 2, 3, 4) == UnitStats("A", 1, 2, 3, 4)

    def test_to_numpy(self, base_swordsman):
        """Test numeric vector conversion."""
        vector = base_swordsman.to_numpy()

        assert vector.dtype == np.int64
        assert vector.tolist() == [25, 20, 60]

    def test_to_dict(self, base_swordsman):
        """Test dictionary conversion includes every field."""
        assert base_swordsman.to_dict() == {
            "description": "Espadachim",
            "attack": 25,
            "defense": 20,
            "gold_cost": 60,
            "wood_cost": 10,
        }


class TestUpgradeEffect:
    """Test UpgradeEffect behavior."""

    def test_apply_matches_with_effect(self, base_swordsman):
        """Test that apply() delegates to UnitStats.with_effect()."""
        effect = UpgradeEffect(1, 2, 3, "X")

        assert effect.apply(base_swordsman) == base_swordsman.with_effect(effect)

    def test_to_numpy(self):
        """Test delta vector conversion."""
        effect = UpgradeEffect(10, 10, 200, "Treinamento Elite")

        assert effect.to_numpy().tolist() == [10, 10, 200]

    @pytest.mark.parametrize("deltas", [(-50, 0, 0), (0, -1, 0), (0, 0, -100)])
    def test_negative_deltas_rejected(self, deltas):
        """Test that an effect which would take stats away cannot be built."""
        with pytest.raises(ValueError, match="non-negative"):
            UpgradeEffect(*deltas, "Maldição")

    def test_non_integer_delta_rejected(self):
        with pytest.raises(ValueError):
            UpgradeEffect(1.5, 0, 0, "Meia Espada")  # type: ignore[arg-type]


class TestSummarizeArmy:
    """Test roster aggregation."""

    def test_empty_roster(self):
        """Test that an empty roster sums to zero."""
        assert summarize_army([]) == ArmySummary(0, 0, 0, 0, 0)

    def test_totals(self, british_factory):
        """Test totals of a trained British army."""
        summary = summarize_army(british_factory.train_army())

        assert summary.unit_count == 3
        assert summary.total_attack == 35 + 25 + 40
        assert summary.total_defense == 10 + 20 + 30
        assert summary.total_gold_cost == 40 + 60 + 120
        assert summary.total_wood_cost == 20 + 10 + 0

    def test_totals_are_plain_ints(self, french_factory):
        """Test that numpy scalars do not leak into the summary."""
        summary = summarize_army(french_factory.train_army())

        assert type(summary.total_attack) is int
