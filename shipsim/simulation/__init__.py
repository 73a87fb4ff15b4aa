"""
Simulation Module
=================

Fixed-timestep kinematic simulation of vessels steering toward target
points under a bounded turn rate.
"""

from .vessel import (
    Vessel,
    VesselSnapshot,
    DEFAULT_ARRIVAL_TOLERANCE,
    normalize_heading,
    bearing_to,
    heading_difference,
)
from .engine import SimulationEngine, EngineConfig, EngineState, TargetResult
from .fleet import FleetType, default_fleet, random_fleet, get_fleet

__all__ = [
    'Vessel', 'VesselSnapshot', 'DEFAULT_ARRIVAL_TOLERANCE',
    'normalize_heading', 'bearing_to', 'heading_difference',
    'SimulationEngine', 'EngineConfig', 'EngineState', 'TargetResult',
    'FleetType', 'default_fleet', 'random_fleet', 'get_fleet',
]
