"""
Shared test fixtures for ship simulator unit tests.
"""

import time
import pytest

from shipsim.simulation.vessel import Vessel
from shipsim.simulation.engine import SimulationEngine, EngineConfig
from shipsim.server.app import create_app


def wait_for(condition, timeout: float = 2.0, interval: float = 0.01) -> bool:
    """Poll until condition() is true or the timeout expires."""
    deadline = time.monotonic() + timeout
    while time.monotonic() < deadline:
        if condition():
            return True
        time.sleep(interval)
    return condition()


@pytest.fixture
def engine_config():
    """Default engine configuration (0.1s tick, 20 deg/s)."""
    return EngineConfig()


@pytest.fixture
def engine(engine_config):
    """Stopped engine; stopped again on teardown in case a test started it."""
    eng = SimulationEngine(engine_config)
    yield eng
    eng.stop()


@pytest.fixture
def fast_engine():
    """Engine ticking every 10ms for scheduler tests."""
    eng = SimulationEngine(EngineConfig(tick_interval_s=0.01))
    yield eng
    eng.stop()


@pytest.fixture
def stationary_vessel():
    """Vessel at (100, 100) heading east, target at its own position."""
    return Vessel(100.0, 100.0, heading=90.0, speed=50.0, vessel_id="alpha")


@pytest.fixture
def origin_vessel():
    """Vessel at the origin heading north."""
    return Vessel(0.0, 0.0, heading=0.0, speed=50.0, vessel_id="bravo")


@pytest.fixture
def client(engine, stationary_vessel, origin_vessel):
    """Flask test client over an engine with two vessels."""
    engine.register(stationary_vessel)
    engine.register(origin_vessel)
    app = create_app(engine)
    app.config['TESTING'] = True
    return app.test_client()
