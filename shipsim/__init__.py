"""
Ship Simulator
==============

Real-time kinematic vessel simulation with an HTTP API.
"""

__version__ = "0.1.0"
