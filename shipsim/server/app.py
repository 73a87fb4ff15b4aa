"""
Ship Simulator HTTP API
=======================

Flask application exposing the simulation engine:
- GET  /api/ships                      All vessels as flat records
- GET  /api/ships/<ship_id>            One vessel
- POST /api/ships/<ship_id>/settarget  Retarget a vessel, body {"targetX", "targetY"}
- GET  /api/status                     Engine statistics

The app holds no simulation state of its own; the engine is passed in.
"""

import math
import logging
from typing import Optional, Tuple

from flask import Flask, jsonify, request

from ..simulation.engine import SimulationEngine, TargetResult

logger = logging.getLogger(__name__)


def _get_coordinate(body: dict, name: str) -> Optional[float]:
    """Look up a numeric field by case-insensitive name."""
    lowered = {str(k).lower(): v for k, v in body.items()}
    value = lowered.get(name.lower())
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    value = float(value)
    if not math.isfinite(value):
        return None
    return value


def parse_target_request(body) -> Tuple[Optional[float], Optional[float]]:
    """
    Extract target coordinates from a settarget request body.

    Returns:
        (x, y), with None for any missing or non-numeric coordinate
    """
    if not isinstance(body, dict):
        return None, None
    return _get_coordinate(body, 'targetX'), _get_coordinate(body, 'targetY')


def create_app(engine: SimulationEngine) -> Flask:
    """
    Create the Flask app bound to a simulation engine.

    Args:
        engine: Engine to serve (its lifecycle is managed by the caller)
    """
    app = Flask(__name__)
    app.config['ENGINE'] = engine

    @app.route('/api/ships', methods=['GET'])
    def get_ships():
        """All vessels' current state."""
        return jsonify([s.to_dict() for s in engine.list_all()])

    @app.route('/api/ships/<ship_id>', methods=['GET'])
    def get_ship(ship_id):
        """One vessel's current state."""
        snapshot = engine.get(ship_id)
        if snapshot is None:
            return jsonify({'error': f"Ship with ID {ship_id} not found."}), 404
        return jsonify(snapshot.to_dict())

    @app.route('/api/ships/<ship_id>/settarget', methods=['POST'])
    def set_ship_target(ship_id):
        """Set a new target position for a vessel."""
        x, y = parse_target_request(request.get_json(silent=True))
        if x is None or y is None:
            return jsonify({'error': 'Body must contain numeric targetX and targetY'}), 400

        if engine.set_target(ship_id, x, y) is TargetResult.NOT_FOUND:
            return jsonify({'error': f"Ship with ID {ship_id} not found."}), 404

        return jsonify({
            'message': f"Target set for ship {ship_id} to ({x:g},{y:g})"
        })

    @app.route('/api/status', methods=['GET'])
    def status():
        """Engine statistics."""
        return jsonify(engine.stats)

    return app
