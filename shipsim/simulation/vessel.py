"""
Vessel Model
============

Kinematic model of a single vessel: constant speed, bounded turn rate,
steering toward a target point.

Heading convention: degrees in [0, 360), 0 = north (+Y), increasing
clockwise (90 = east, +X).
"""

import math
import threading
import uuid
from dataclasses import dataclass
from typing import Optional, Tuple
import logging

logger = logging.getLogger(__name__)


# Default arrival radius (distance units)
DEFAULT_ARRIVAL_TOLERANCE = 5.0


def normalize_heading(heading: float) -> float:
    """Normalize heading to [0, 360)."""
    heading = (heading + 360.0) % 360.0
    # Float modulo of a tiny negative value can round up to 360.0
    if heading >= 360.0:
        heading = 0.0
    return heading


def bearing_to(from_x: float, from_y: float, to_x: float, to_y: float) -> float:
    """
    Compass bearing from one point to another.

    Args:
        from_x, from_y: Origin point
        to_x, to_y: Destination point

    Returns:
        Bearing in degrees [0, 360), 0 = +Y, clockwise
    """
    trig_deg = math.degrees(math.atan2(to_y - from_y, to_x - from_x))
    return normalize_heading(90.0 - trig_deg)


def heading_difference(target: float, current: float) -> float:
    """
    Signed shortest turn from current heading to target heading.

    Returns:
        Difference in (-180, 180], positive = turn clockwise
    """
    diff = target - current
    if diff > 180.0:
        diff -= 360.0
    elif diff <= -180.0:
        diff += 360.0
    return diff


@dataclass(frozen=True)
class VesselSnapshot:
    """Consistent point-in-time copy of a vessel's state."""
    id: str
    position_x: float
    position_y: float
    heading: float
    speed: float
    target_x: float
    target_y: float

    def to_dict(self) -> dict:
        """Flat record for the transport layer."""
        return {
            'id': self.id,
            'positionX': self.position_x,
            'positionY': self.position_y,
            'heading': self.heading,
            'speed': self.speed,
            'targetX': self.target_x,
            'targetY': self.target_y,
        }


class Vessel:
    """
    A single moving vessel.

    Position and target are held as immutable (x, y) tuples and replaced
    whole, so a reader never observes half of an update. The per-vessel
    lock serializes a simulation step against target updates and snapshots.
    """

    def __init__(self, x: float, y: float, heading: float, speed: float,
                 vessel_id: Optional[str] = None):
        """
        Initialize vessel.

        Args:
            x, y: Initial position
            heading: Initial heading (degrees, normalized to [0, 360))
            speed: Constant speed (distance units per second)
            vessel_id: Identifier (random UUID string if not given)
        """
        self._id = vessel_id if vessel_id is not None else str(uuid.uuid4())
        self._position: Tuple[float, float] = (float(x), float(y))
        self._heading = normalize_heading(float(heading))
        self._speed = float(speed)

        # Target starts at the creation position, so the vessel holds still
        self._target: Tuple[float, float] = self._position

        self._lock = threading.Lock()

    def __repr__(self) -> str:
        x, y = self._position
        tx, ty = self._target
        return (f"Vessel(id={self._id!r}, position=({x:.1f}, {y:.1f}), "
                f"heading={self._heading:.1f}, speed={self._speed:.1f}, "
                f"target=({tx:.1f}, {ty:.1f}))")

    @property
    def id(self) -> str:
        return self._id

    @property
    def position(self) -> Tuple[float, float]:
        return self._position

    @property
    def heading(self) -> float:
        return self._heading

    @property
    def speed(self) -> float:
        return self._speed

    @property
    def target(self) -> Tuple[float, float]:
        return self._target

    # -- Physics ------------------------------------------------------------

    def advance(self, dt: float):
        """
        Move along the current heading for dt seconds.

        Args:
            dt: Elapsed time (seconds)
        """
        distance = self._speed * dt

        # Compass heading (north = 0, clockwise) to trig angle (east = 0, CCW)
        angle = math.radians(90.0 - self._heading)

        x, y = self._position
        self._position = (x + distance * math.cos(angle),
                          y + distance * math.sin(angle))

    def steer_toward(self, dt: float, turn_rate_per_second: float):
        """
        Turn toward the target, limited to turn_rate_per_second * dt degrees.

        Snaps onto the target bearing when it is within this step's turn
        budget, so the heading never overshoots.

        Args:
            dt: Elapsed time (seconds)
            turn_rate_per_second: Maximum heading change (deg/s)
        """
        x, y = self._position
        tx, ty = self._target
        bearing = bearing_to(x, y, tx, ty)

        diff = heading_difference(bearing, self._heading)
        max_turn = turn_rate_per_second * dt

        if abs(diff) <= max_turn:
            heading = bearing
        elif diff > 0:
            heading = self._heading + max_turn
        else:
            heading = self._heading - max_turn

        self._heading = normalize_heading(heading)

    def distance_to_target(self) -> float:
        """Euclidean distance from position to target."""
        x, y = self._position
        tx, ty = self._target
        return math.hypot(tx - x, ty - y)

    def has_reached_target(self, tolerance: float = DEFAULT_ARRIVAL_TOLERANCE) -> bool:
        """Check if the vessel is strictly within tolerance of its target."""
        return self.distance_to_target() < tolerance

    def step(self, dt: float, turn_rate_per_second: float,
             tolerance: float = DEFAULT_ARRIVAL_TOLERANCE) -> bool:
        """
        Run one simulation step: steer, then advance on the new heading.

        Vessels already at their target are left untouched.

        Returns:
            True if the vessel moved
        """
        with self._lock:
            if self.has_reached_target(tolerance):
                return False
            self.steer_toward(dt, turn_rate_per_second)
            self.advance(dt)
            if self.has_reached_target(tolerance):
                logger.debug(f"Vessel {self._id} reached target {self._target}")
            return True

    # -- External access ----------------------------------------------------

    def set_target(self, x: float, y: float):
        """Replace the target point. Heading and position are not touched."""
        with self._lock:
            self._target = (float(x), float(y))

    def snapshot(self) -> VesselSnapshot:
        """Get a consistent copy of the current state."""
        with self._lock:
            x, y = self._position
            tx, ty = self._target
            return VesselSnapshot(
                id=self._id,
                position_x=x,
                position_y=y,
                heading=self._heading,
                speed=self._speed,
                target_x=tx,
                target_y=ty,
            )

    def to_dict(self) -> dict:
        """Flat record of the current state."""
        return self.snapshot().to_dict()
