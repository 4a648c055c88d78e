"""
«Golden data» — эталонная траектория из чистой математики Darwish (2023).

Никакого состояния модели: на каждой смене типа активности якорь
пересчитывается из усталости, накопленной к концу предыдущего сегмента,
а внутри сегмента значение берётся прямо из формулы.
"""

from __future__ import annotations
from dataclasses import dataclass
from math import exp
from typing import Iterable, List

from ..domain import CapacityParams, Segment


@dataclass(frozen=True, slots=True)
class TrajectoryPoint:
    tick: int
    time: float           # начало тика, tick·delta_time
    capacity: float
    fatigue: float
    is_working: bool
    session_time: float


def fatigue_growth(session_time: float, initial_fatigue: float, fatigue_rate: float) -> float:
    """Darwish (2): F(t) = 1 − (1 − F₀)·e^(−λt)"""
    return 1 - (1 - initial_fatigue) * exp(-fatigue_rate * session_time)


def fatigue_decay(session_time: float, fatigue_at_rest_start: float,
                  recovery_rate: float) -> float:
    """Darwish (4): R(t) = F_i·e^(−μt)"""
    return fatigue_at_rest_start * exp(-recovery_rate * session_time)


def generate_golden_data(params: CapacityParams,
                         schedule: Iterable[Segment],
                         time_steps: int,
                         delta_time: float = 1.0) -> List[TrajectoryPoint]:
    """
    Ровно min(Σ duration, time_steps) точек.
    Стартовый режим — отдых, как и у живой модели до первого тика.
    """
    golden: List[TrajectoryPoint] = []

    fatigue = 1 - params.initial_capacity
    session_start_fatigue = fatigue
    session_time = 0.0
    is_working = False
    tick = 0

    for seg in schedule:
        if seg.is_working != is_working:
            session_start_fatigue = fatigue
            session_time = 0.0
            is_working = seg.is_working

        for _ in range(seg.duration):
            if tick >= time_steps:
                return golden
            session_time += delta_time
            if is_working:
                fatigue = fatigue_growth(session_time, session_start_fatigue,
                                         params.fatigue_rate)
            else:
                fatigue = fatigue_decay(session_time, session_start_fatigue,
                                        params.recovery_rate)
            capacity = max(0.0, min(1.0, 1 - fatigue))

            golden.append(TrajectoryPoint(
                tick=tick,
                time=tick * delta_time,
                capacity=capacity,
                fatigue=fatigue,
                is_working=is_working,
                session_time=session_time,
            ))
            tick += 1

    return golden
