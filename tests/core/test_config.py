"""
Unit tests for the YAML configuration loader.
"""
import pytest

from civforge.core.config import ConfigLoader, GameConfig, get_game_config
from civforge.core.data import StrategyKind


class TestConfigLoader:
    """Test loading GameConfig from YAML."""

    def test_packaged_config_loads(self):
        """Test that the shipped config file is found and matches the defaults."""
        loader = ConfigLoader()

        assert loader.load_config() is True
        assert loader.config == GameConfig()

    def test_missing_file_falls_back_to_defaults(self, tmp_path):
        loader = ConfigLoader(str(tmp_path / "missing.yaml"))

        assert loader.load_config() is False
        assert loader.config == GameConfig()

    def test_custom_values(self, tmp_path):
        config_file = tmp_path / "game.yaml"
        config_file.write_text(
            "combat:\n"
            "  attack_cost: 75\n"
            "  military_power: 120\n"
            "  default_strategy: defensive\n"
            "logging:\n"
            "  max_messages: 10\n"
            "  level: warning\n",
            encoding="utf-8",
        )
        loader = ConfigLoader(str(config_file))

        assert loader.load_config()
        assert loader.config == GameConfig(
            attack_cost=75,
            military_power=120,
            default_strategy=StrategyKind.DEFENSIVE,
            log_max_messages=10,
            log_level="WARNING",
        )

    def test_partial_file_keeps_other_defaults(self, tmp_path):
        config_file = tmp_path / "game.yaml"
        config_file.write_text("combat:\n  attack_cost: 10\n", encoding="utf-8")
        loader = ConfigLoader(str(config_file))

        loader.load_config()

        assert loader.config.attack_cost == 10
        assert loader.config.military_power == 100

    def test_empty_file(self, tmp_path):
        config_file = tmp_path / "game.yaml"
        config_file.write_text("", encoding="utf-8")
        loader = ConfigLoader(str(config_file))

        assert loader.load_config()
        assert loader.config == GameConfig()

    def test_unknown_strategy_raises(self, tmp_path):
        config_file = tmp_path / "game.yaml"
        config_file.write_text("combat:\n  default_strategy: RECKLESS\n", encoding="utf-8")

        with pytest.raises(ValueError, match="RECKLESS"):
            ConfigLoader(str(config_file)).load_config()

    @pytest.mark.parametrize("content", [
        "combat:\n  attack_cost: lots\n",
        "combat:\n  attack_cost: -5\n",
        "logging:\n  max_messages: 0\n",
    ])
    def test_invalid_numbers_raise(self, tmp_path, content):
        config_file = tmp_path / "game.yaml"
        config_file.write_text(content, encoding="utf-8")

        with pytest.raises(ValueError):
            ConfigLoader(str(config_file)).load_config()

    def test_get_game_config_is_cached(self):
        assert get_game_config() is get_game_config()
