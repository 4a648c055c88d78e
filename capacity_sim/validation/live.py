"""Живая траектория: тот же график, но через CapacityModel и SimPy-раннер."""

from __future__ import annotations
from typing import Iterable, List

from ..domain import CapacityModel, CapacityParams, Segment
from ..simulation import run_schedule
from .golden import TrajectoryPoint


def run_live_simulation(params: CapacityParams,
                        schedule: Iterable[Segment],
                        time_steps: int,
                        delta_time: float = 1.0,
                        worker_id: str = "validator-worker") -> List[TrajectoryPoint]:
    worker = CapacityModel(params, worker_id=worker_id)
    snaps = run_schedule(worker, schedule, delta_time, max_ticks=time_steps)
    return [
        TrajectoryPoint(
            tick=i,
            time=i * delta_time,
            capacity=s.capacity,
            fatigue=s.fatigue,
            is_working=s.is_working,
            session_time=s.session_time,
        )
        for i, s in enumerate(snaps)
    ]
