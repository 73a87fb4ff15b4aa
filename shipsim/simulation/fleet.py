"""
Fleet Module
============

Predefined vessel fleets for seeding the simulation.
"""

from enum import Enum
from typing import List, Optional, Tuple
import logging

import numpy as np

from .vessel import Vessel

logger = logging.getLogger(__name__)


class FleetType(Enum):
    """Types of starting fleet."""
    DEFAULT = "default"
    RANDOM = "random"
    EMPTY = "empty"


def default_fleet() -> List[Vessel]:
    """
    The two-ship boot fleet.

    Both ships start with their target at their own position, so they
    hold still until retargeted.
    """
    return [
        Vessel(100.0, 100.0, heading=90.0, speed=50.0),   # Pointing east
        Vessel(500.0, 500.0, heading=270.0, speed=70.0),  # Pointing west
    ]


def random_fleet(count: int, seed: Optional[int] = None,
                 bounds: Tuple[float, float] = (0.0, 1000.0),
                 speed_range: Tuple[float, float] = (20.0, 80.0)) -> List[Vessel]:
    """
    Generate a fleet with random positions, headings and speeds.

    Args:
        count: Number of vessels
        seed: Random seed for reproducibility
        bounds: (min, max) for both x and y
        speed_range: (min, max) speed

    Returns:
        List of stationary vessels (target = start position)
    """
    rng = np.random.default_rng(seed)

    positions = rng.uniform(bounds[0], bounds[1], size=(count, 2))
    headings = rng.uniform(0.0, 360.0, size=count)
    speeds = rng.uniform(speed_range[0], speed_range[1], size=count)

    return [
        Vessel(float(x), float(y), heading=float(h), speed=float(s))
        for (x, y), h, s in zip(positions, headings, speeds)
    ]


def get_fleet(fleet_type: FleetType, count: int = 10,
              seed: Optional[int] = None) -> List[Vessel]:
    """
    Get a starting fleet by type.

    Args:
        fleet_type: Type of fleet to create
        count: Number of vessels (RANDOM only)
        seed: Random seed (RANDOM only)

    Returns:
        List of vessels to register
    """
    if fleet_type == FleetType.DEFAULT:
        fleet = default_fleet()
    elif fleet_type == FleetType.RANDOM:
        fleet = random_fleet(count, seed=seed)
    else:
        fleet = []

    logger.info(f"Created {fleet_type.value} fleet with {len(fleet)} vessel(s)")
    return fleet
