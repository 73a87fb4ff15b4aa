"""
Tests for Configuration
=======================
"""

import json
import pytest

from shipsim.config import AppConfig, ServerConfig, load_config
from shipsim.simulation.engine import EngineConfig
from shipsim.simulation.fleet import FleetType


class TestAppConfig:
    """Tests for AppConfig defaults and dict conversion."""

    def test_defaults(self):
        config = AppConfig()
        assert config.engine == EngineConfig()
        assert config.server == ServerConfig()
        assert config.server.port == 5000
        assert config.fleet == FleetType.DEFAULT
        assert config.fleet_seed is None

    def test_from_dict(self):
        config = AppConfig.from_dict({
            "engine": {"tick_interval_s": 0.05, "turn_rate_deg_s": 30.0},
            "server": {"host": "0.0.0.0", "port": 8080},
            "fleet": "random",
            "fleet_count": 25,
            "fleet_seed": 42,
        })
        assert config.engine.tick_interval_s == 0.05
        assert config.engine.turn_rate_deg_s == 30.0
        assert config.engine.arrival_tolerance == 5.0
        assert config.server.host == "0.0.0.0"
        assert config.server.port == 8080
        assert config.fleet == FleetType.RANDOM
        assert config.fleet_count == 25
        assert config.fleet_seed == 42

    def test_from_empty_dict(self):
        assert AppConfig.from_dict({}) == AppConfig()

    def test_unknown_top_level_key(self):
        with pytest.raises(ValueError, match="bogus"):
            AppConfig.from_dict({"bogus": 1})

    def test_unknown_engine_key(self):
        with pytest.raises(ValueError, match="tick_rate"):
            AppConfig.from_dict({"engine": {"tick_rate": 10}})

    def test_unknown_fleet(self):
        with pytest.raises(ValueError):
            AppConfig.from_dict({"fleet": "armada"})

    def test_to_dict_is_json_serializable(self):
        config = AppConfig(fleet=FleetType.RANDOM, fleet_seed=3)
        data = json.loads(json.dumps(config.to_dict()))
        assert data["fleet"] == "random"
        assert AppConfig.from_dict(data) == config


class TestLoadConfig:
    """Tests for loading config files."""

    def test_load(self, tmp_path):
        path = tmp_path / "sim.json"
        path.write_text(json.dumps({"server": {"port": 9000}, "fleet": "empty"}))

        config = load_config(path)
        assert config.server.port == 9000
        assert config.fleet == FleetType.EMPTY

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "missing.json")

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text("{not json")
        with pytest.raises(ValueError):
            load_config(path)
