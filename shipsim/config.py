"""
Configuration
=============

Application configuration: engine timing, HTTP server and starting fleet.
Loaded from an optional JSON file; command-line flags override it.

Example file:
    {
        "engine": {"tick_interval_s": 0.1, "turn_rate_deg_s": 20.0},
        "server": {"host": "0.0.0.0", "port": 8080},
        "fleet": "random",
        "fleet_count": 25,
        "fleet_seed": 42
    }
"""

import json
from dataclasses import dataclass, field, fields, asdict
from pathlib import Path
from typing import Optional, Union
import logging

from .simulation.engine import EngineConfig
from .simulation.fleet import FleetType

logger = logging.getLogger(__name__)


@dataclass
class ServerConfig:
    """HTTP server configuration."""
    host: str = "127.0.0.1"
    port: int = 5000


def _build(cls, data: dict, section: str):
    """Create a config dataclass from a dict, rejecting unknown keys."""
    known = {f.name for f in fields(cls)}
    for key in data:
        if key not in known:
            raise ValueError(f"Unknown {section} config key: {key!r}")
    return cls(**data)


@dataclass
class AppConfig:
    """Top-level application configuration."""
    engine: EngineConfig = field(default_factory=EngineConfig)
    server: ServerConfig = field(default_factory=ServerConfig)

    # Starting fleet
    fleet: FleetType = FleetType.DEFAULT
    fleet_count: int = 10              # RANDOM fleet size
    fleet_seed: Optional[int] = None   # RANDOM fleet seed

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "engine": asdict(self.engine),
            "server": asdict(self.server),
            "fleet": self.fleet.value,
            "fleet_count": self.fleet_count,
            "fleet_seed": self.fleet_seed,
        }

    @classmethod
    def from_dict(cls, data: dict) -> 'AppConfig':
        """
        Create from dictionary.

        Raises:
            ValueError: On unknown keys or an unknown fleet type
        """
        data = dict(data)
        engine = _build(EngineConfig, data.pop("engine", {}), "engine")
        server = _build(ServerConfig, data.pop("server", {}), "server")

        fleet = FleetType(data.pop("fleet", FleetType.DEFAULT.value))
        fleet_count = int(data.pop("fleet_count", 10))
        fleet_seed = data.pop("fleet_seed", None)

        if data:
            raise ValueError(f"Unknown config key: {next(iter(data))!r}")

        return cls(
            engine=engine,
            server=server,
            fleet=fleet,
            fleet_count=fleet_count,
            fleet_seed=fleet_seed,
        )


def load_config(path: Union[str, Path]) -> AppConfig:
    """
    Load application configuration from a JSON file.

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the file contents are invalid
    """
    path = Path(path)
    with open(path, 'r') as f:
        data = json.load(f)

    config = AppConfig.from_dict(data)
    logger.info(f"Loaded config from {path}")
    return config
