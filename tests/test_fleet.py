"""
Tests for Fleet Module
======================
"""

import pytest

from shipsim.simulation.fleet import FleetType, default_fleet, random_fleet, get_fleet


class TestDefaultFleet:
    """Tests for the two-ship boot fleet."""

    def test_two_ships(self):
        fleet = default_fleet()
        assert len(fleet) == 2

    def test_initial_state(self):
        first, second = default_fleet()

        assert first.position == (100.0, 100.0)
        assert first.heading == 90.0
        assert first.speed == 50.0

        assert second.position == (500.0, 500.0)
        assert second.heading == 270.0
        assert second.speed == 70.0

    def test_ships_start_at_target(self):
        """Boot ships hold still until retargeted."""
        for vessel in default_fleet():
            assert vessel.target == vessel.position
            assert vessel.has_reached_target()

    def test_fresh_ids_each_call(self):
        ids_a = {v.id for v in default_fleet()}
        ids_b = {v.id for v in default_fleet()}
        assert ids_a.isdisjoint(ids_b)


class TestRandomFleet:
    """Tests for the random fleet generator."""

    def test_count(self):
        assert len(random_fleet(25, seed=1)) == 25

    def test_zero(self):
        assert random_fleet(0, seed=1) == []

    def test_within_bounds(self):
        fleet = random_fleet(100, seed=3, bounds=(-50.0, 50.0), speed_range=(1.0, 2.0))
        for v in fleet:
            x, y = v.position
            assert -50.0 <= x <= 50.0
            assert -50.0 <= y <= 50.0
            assert 0.0 <= v.heading < 360.0
            assert 1.0 <= v.speed <= 2.0
            assert v.target == v.position

    def test_seed_reproducible(self):
        """Same seed gives the same positions, headings and speeds."""
        a = random_fleet(10, seed=42)
        b = random_fleet(10, seed=42)
        for va, vb in zip(a, b):
            assert va.position == vb.position
            assert va.heading == vb.heading
            assert va.speed == vb.speed

    def test_different_seeds_differ(self):
        a = random_fleet(5, seed=1)
        b = random_fleet(5, seed=2)
        assert [v.position for v in a] != [v.position for v in b]

    def test_plain_floats(self):
        """Generated values are Python floats, not numpy scalars."""
        v = random_fleet(1, seed=0)[0]
        assert type(v.position[0]) is float
        assert type(v.heading) is float


class TestGetFleet:
    """Tests for fleet lookup."""

    @pytest.mark.parametrize("fleet_type,expected", [
        (FleetType.DEFAULT, 2),
        (FleetType.EMPTY, 0),
    ])
    def test_fixed_fleets(self, fleet_type, expected):
        assert len(get_fleet(fleet_type)) == expected

    def test_random_fleet_count(self):
        assert len(get_fleet(FleetType.RANDOM, count=7, seed=5)) == 7

    def test_fleet_type_values(self):
        assert FleetType("default") is FleetType.DEFAULT
        assert FleetType("random") is FleetType.RANDOM
        assert FleetType("empty") is FleetType.EMPTY
