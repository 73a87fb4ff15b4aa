"""
HTTP Server
===========

Flask transport for the simulation engine.
"""

from .app import create_app, parse_target_request

__all__ = [
    'create_app',
    'parse_target_request',
]
