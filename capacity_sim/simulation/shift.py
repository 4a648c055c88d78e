"""
ShiftRunner:
* ведёт одного CapacityModel по расписанию смены, тик за тиком,
* между тиками ждёт delta_time сим-минут,
* складывает StateSnapshot в done_q для логера / сборщика трассы.
"""

from __future__ import annotations
import simpy
from dataclasses import asdict
from datetime import datetime
from typing import Iterable, List, Mapping

import pandas as pd

from ..domain import CapacityModel, CapacityParams, Segment, StateSnapshot
from ..infrastructure.logger import ParquetLogger
from .env import make_environment


def shift_process(env: simpy.Environment,
                  worker: CapacityModel,
                  schedule: Iterable[Segment],
                  delta_time: float,
                  done_q: simpy.Store,
                  max_ticks: int | None = None) -> simpy.events.Process:
    """
    :param schedule:  сегменты; duration = число тиков сегмента
    :param done_q:    SimPy.Store[StateSnapshot]
    :param max_ticks: обрезка по числу тиков (None — всё расписание)
    """
    tick = 0
    for seg in schedule:
        for _ in range(seg.duration):
            if max_ticks is not None and tick >= max_ticks:
                return
            snap = worker.tick(seg.is_working, delta_time)
            done_q.put(snap)
            tick += 1
            yield env.timeout(delta_time)


def _drain(done_q: simpy.Store, trace: List[StateSnapshot]):
    while True:
        snap = yield done_q.get()
        trace.append(snap)


# ──────────────────────────────────────────────────────────────────────────────
def run_schedule(worker: CapacityModel,
                 schedule: Iterable[Segment],
                 delta_time: float = 1.0,
                 max_ticks: int | None = None,
                 logger: ParquetLogger | None = None,
                 start_date: datetime | None = None) -> List[StateSnapshot]:
    """Прогоняет расписание до конца; возвращает снимки именно этого прогона."""
    env = make_environment(start_date)
    done_q = simpy.Store(env)
    trace: List[StateSnapshot] = []

    env.process(shift_process(env, worker, schedule, delta_time, done_q, max_ticks))
    if logger is not None:
        env.process(logger.collect(done_q, trace))
    else:
        env.process(_drain(done_q, trace))

    env.run()
    return trace


def compare_schedules(params: CapacityParams,
                      schedules: Mapping[str, Iterable[Segment]],
                      delta_time: float = 1.0) -> pd.DataFrame:
    """Свежий работник на каждое расписание → таблица сводок (строка = расписание)."""
    rows = []
    for name, schedule in schedules.items():
        worker = CapacityModel(params, worker_id=f"worker-{name}")
        run_schedule(worker, schedule, delta_time)
        rows.append({"schedule": name, **asdict(worker.summary())})
    return pd.DataFrame(rows).set_index("schedule")
