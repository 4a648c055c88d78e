"""
Счётчики безопасности как явная машина состояний.

Каждый тик monitor получает предикаты текущего тика и сравнивает их
с предикатом предыдущего — так фронт «безопасно → ниже пола» виден
в одном месте и тестируется отдельно от математики усталости.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum


class CriticalTimeUnit(str, Enum):
    TICKS = "ticks"       # +1 за тик (поведение исходной модели)
    ELAPSED = "elapsed"   # +delta_time за тик


@dataclass(slots=True)
class SafetyMonitor:
    """
    has_violated_min_capacity — липкий флаг, ставится один раз;
    emergency_shutdowns       — растёт на фронте входа под пол;
    time_in_critical_zone     — копится, пока работаем ниже critical_threshold.
    """

    min_capacity: float
    critical_threshold: float
    critical_time_unit: CriticalTimeUnit = CriticalTimeUnit.TICKS
    count_repeat_shutdowns: bool = False

    has_violated_min_capacity: bool = field(default=False, init=False)
    emergency_shutdowns: int = field(default=0, init=False)
    time_in_critical_zone: float = field(default=0.0, init=False)
    _below_floor: bool = field(default=False, init=False, repr=False)

    def evaluate(self, capacity: float, is_working: bool, delta_time: float) -> bool:
        """
        Один переход автомата.
        :return: True, если на этом тике зафиксирован аварийный останов
        """
        below = capacity < self.min_capacity
        entered = below and not self._below_floor
        self._below_floor = below

        shutdown = False
        if entered:
            first = not self.has_violated_min_capacity
            self.has_violated_min_capacity = True
            if first or self.count_repeat_shutdowns:
                self.emergency_shutdowns += 1
                shutdown = True

        if is_working and capacity < self.critical_threshold:
            if self.critical_time_unit is CriticalTimeUnit.ELAPSED:
                self.time_in_critical_zone += delta_time
            else:
                self.time_in_critical_zone += 1

        return shutdown

    def reset(self) -> None:
        self.has_violated_min_capacity = False
        self.emergency_shutdowns = 0
        self.time_in_critical_zone = 0.0
        self._below_floor = False
