"""
Thin wrapper around SimPy Environment:
* часы среды считают минуты (один тик модели = delta_time минут),
* хранит дату старта,
* даёт helper   env.to_datetime(sim_minutes) → datetime,
* больше ничего не знает.
"""

from __future__ import annotations
import simpy
from datetime import timedelta, datetime


def make_environment(start_date: datetime | None = None) -> simpy.Environment:
    """
    Создаёт SimPy Environment и «впрыскивает» в него:
      - env.start_date: календарная дата начала (None — только сим-время)
      - env.tick_seconds: сколько секунд в одной единице сим-времени
      - env.to_datetime(minutes) → datetime
    """
    env = simpy.Environment(initial_time=0.0)
    env.tick_seconds = 60
    env.start_date = start_date

    def to_datetime(minutes: float) -> datetime:
        if start_date is None:
            raise ValueError("environment was created without start_date")
        return start_date + timedelta(minutes=minutes)

    env.to_datetime = to_datetime  # type: ignore[attr-defined]
    return env
