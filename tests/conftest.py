"""Shared fixtures for the capacity simulator test suite."""

import pytest

from capacity_sim.domain import CapacityModel, CapacityParams, parse_schedule
from capacity_sim.validation import TrajectoryPoint


@pytest.fixture
def params() -> CapacityParams:
    return CapacityParams()


@pytest.fixture
def worker(params) -> CapacityModel:
    return CapacityModel(params, worker_id="test-worker")


@pytest.fixture
def short_day():
    return parse_schedule([
        {"type": "work", "duration": 60},
        {"type": "rest", "duration": 15},
        {"type": "work", "duration": 60},
    ])


def points(capacities, is_working=True):
    """Build a bare trajectory from a list of capacities."""
    return [
        TrajectoryPoint(tick=i, time=float(i), capacity=c, fatigue=1 - c,
                        is_working=is_working, session_time=float(i + 1))
        for i, c in enumerate(capacities)
    ]
