"""
Simulation Engine
=================

Owns the vessel collection and advances it at a fixed real-time cadence.

Manages:
- Thread-safe vessel registry (register, list, retarget)
- Fixed-timestep tick applying steering then motion to every vessel
- Background scheduler thread with explicit STOPPED/RUNNING state

Usage:
    engine = SimulationEngine()
    engine.register(Vessel(100, 100, 90, 50))
    engine.start()
    # ... serve list_all() / set_target() to clients
    engine.stop()
"""

import threading
import time
from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional, List, Dict
import logging

from .vessel import Vessel, VesselSnapshot, DEFAULT_ARRIVAL_TOLERANCE

logger = logging.getLogger(__name__)


@dataclass
class EngineConfig:
    """Configuration for the simulation engine."""
    tick_interval_s: float = 0.1       # Fixed timestep, also the real-time cadence
    turn_rate_deg_s: float = 20.0      # Maximum heading change, all vessels
    arrival_tolerance: float = DEFAULT_ARRIVAL_TOLERANCE

    @property
    def tick_rate_hz(self) -> float:
        """Ticks per second."""
        return 1.0 / self.tick_interval_s


class EngineState(Enum):
    """Scheduler state."""
    STOPPED = auto()
    RUNNING = auto()


class TargetResult(Enum):
    """Outcome of a retarget request."""
    UPDATED = "updated"
    NOT_FOUND = "not_found"

    def __bool__(self) -> bool:
        return self is TargetResult.UPDATED


class SimulationEngine:
    """
    Fixed-timestep vessel simulation.

    The registry is guarded by an engine lock and readers always receive
    copies. Each vessel guards its own fields, so a retarget never
    interleaves with that vessel's step. Ticks are serialized by a tick
    lock: a scheduled tick and a manual tick() call can never overlap.
    """

    def __init__(self, config: Optional[EngineConfig] = None):
        self.config = config or EngineConfig()

        self._vessels: Dict[str, Vessel] = {}
        self._lock = threading.Lock()
        self._tick_lock = threading.Lock()
        self._state_lock = threading.Lock()

        # Scheduler
        self._state = EngineState.STOPPED
        self._thread: Optional[threading.Thread] = None
        self._stop_event: Optional[threading.Event] = None

        # Statistics
        self._tick_count = 0
        self._skipped_ticks = 0
        self._error_count = 0

    def __len__(self) -> int:
        with self._lock:
            return len(self._vessels)

    def __enter__(self) -> 'SimulationEngine':
        self.start()
        return self

    def __exit__(self, exc_type, exc, tb):
        self.stop()

    # -- Vessel registry ----------------------------------------------------

    def register(self, vessel: Vessel) -> bool:
        """
        Add a vessel to the simulation.

        An identifier that is already registered keeps its existing vessel;
        the new one is ignored.

        Returns:
            True if the vessel was added
        """
        with self._lock:
            if vessel.id in self._vessels:
                logger.debug(f"Vessel {vessel.id} already registered, ignoring")
                return False
            self._vessels[vessel.id] = vessel
        logger.debug(f"Registered {vessel!r}")
        return True

    def list_all(self) -> List[VesselSnapshot]:
        """Get snapshots of all registered vessels."""
        with self._lock:
            vessels = list(self._vessels.values())
        return [v.snapshot() for v in vessels]

    def get(self, vessel_id: str) -> Optional[VesselSnapshot]:
        """Get a snapshot of one vessel, or None if unknown."""
        with self._lock:
            vessel = self._vessels.get(vessel_id)
        return vessel.snapshot() if vessel is not None else None

    def set_target(self, vessel_id: str, x: float, y: float) -> TargetResult:
        """
        Set a new target point for a vessel.

        Steering resumes from the vessel's current position and heading.

        Args:
            vessel_id: Vessel identifier
            x, y: New target point

        Returns:
            TargetResult.UPDATED, or TargetResult.NOT_FOUND for an unknown id
        """
        with self._lock:
            vessel = self._vessels.get(vessel_id)
        if vessel is None:
            return TargetResult.NOT_FOUND

        vessel.set_target(x, y)
        logger.info(f"Target set for vessel {vessel_id} to ({x}, {y})")
        return TargetResult.UPDATED

    # -- Lifecycle ----------------------------------------------------------

    @property
    def state(self) -> EngineState:
        return self._state

    @property
    def is_running(self) -> bool:
        """Check if the scheduler is active."""
        return self._state == EngineState.RUNNING

    def start(self):
        """Start the tick scheduler. First tick fires immediately."""
        with self._state_lock:
            if self._state == EngineState.RUNNING:
                return

            # Fresh event per thread, so a stopping thread is never revived
            self._stop_event = threading.Event()
            self._thread = threading.Thread(
                target=self._tick_loop,
                args=(self._stop_event,),
                daemon=True,
                name="sim-tick"
            )
            self._state = EngineState.RUNNING
            self._thread.start()

        logger.info("Simulation started.")

    def stop(self):
        """
        Stop the tick scheduler.

        A tick already in flight runs to completion; no tick starts after
        this returns (unless called from the tick thread itself).
        """
        with self._state_lock:
            if self._state == EngineState.STOPPED:
                return

            self._state = EngineState.STOPPED
            self._stop_event.set()
            thread = self._thread
            self._thread = None
            self._stop_event = None

        if thread is not None and thread is not threading.current_thread():
            thread.join()

        logger.info("Simulation stopped.")

    # -- Tick ---------------------------------------------------------------

    def tick(self):
        """Advance every vessel by one timestep."""
        dt = self.config.tick_interval_s
        turn_rate = self.config.turn_rate_deg_s
        tolerance = self.config.arrival_tolerance

        with self._tick_lock:
            with self._lock:
                vessels = list(self._vessels.values())

            for vessel in vessels:
                vessel.step(dt, turn_rate, tolerance)

            self._tick_count += 1

    def _tick_loop(self, stop_event: threading.Event):
        """Scheduler loop - runs at the configured tick interval."""
        interval = self.config.tick_interval_s
        next_tick = time.monotonic()

        while not stop_event.is_set():
            try:
                self.tick()
            except Exception as e:
                self._error_count += 1
                logger.exception(f"Tick error: {e}")

            next_tick += interval
            now = time.monotonic()

            # Skip firings missed while the tick overran, never catch up
            if next_tick < now:
                missed = int((now - next_tick) / interval) + 1
                self._skipped_ticks += missed
                next_tick += missed * interval
                logger.warning(f"Tick overran, skipped {missed} firing(s)")

            stop_event.wait(next_tick - now)

    @property
    def stats(self) -> dict:
        """Get scheduler statistics."""
        return {
            'state': self._state.name,
            'vessel_count': len(self),
            'tick_count': self._tick_count,
            'skipped_ticks': self._skipped_ticks,
            'error_count': self._error_count,
            'tick_interval_s': self.config.tick_interval_s,
            'turn_rate_deg_s': self.config.turn_rate_deg_s,
        }
