"""
Биофизическая модель ёмкости работника (Darwish, 2023).

Ёмкость C = 1 − F.  Усталость растёт экспоненциально под нагрузкой
и так же экспоненциально спадает в отдыхе.  Значение на каждом тике
считается в замкнутой форме от якоря сессии, а не накоплением шагов —
поэтому модель совпадает с аналитическим эталоном тик в тик.

Модуль не знает о SimPy: любой цикл (SimPy, unit-тест, скрипт) просто
вызывает .tick(...).
"""

from __future__ import annotations
from dataclasses import dataclass, asdict, replace
from enum import Enum
from math import exp
from random import Random
from typing import Any, Dict, List, Tuple

from .errors import EmptyHistory, InvalidConfiguration, InvalidInput
from .safety import CriticalTimeUnit, SafetyMonitor


DEFAULT_FATIGUE_RATE = 0.0097      # λ
DEFAULT_RECOVERY_RATE = 0.0009     # μ
DEFAULT_MIN_CAPACITY = 0.10        # γ_min, биологический пол
DEFAULT_CRITICAL_THRESHOLD = 0.70
DEFAULT_INITIAL_CAPACITY = 1.0


class OperatingState(str, Enum):
    SHUTDOWN = "shutdown"
    CRITICAL = "critical"
    DEGRADED = "degraded"
    OPTIMAL = "optimal"


# ─────── параметры, приходящие из YAML (worker) ──────────────────────────────
@dataclass(slots=True, frozen=True)
class CapacityParams:
    fatigue_rate: float = DEFAULT_FATIGUE_RATE
    recovery_rate: float = DEFAULT_RECOVERY_RATE
    min_capacity: float = DEFAULT_MIN_CAPACITY
    critical_threshold: float = DEFAULT_CRITICAL_THRESHOLD
    initial_capacity: float = DEFAULT_INITIAL_CAPACITY
    optimal_threshold: float = DEFAULT_CRITICAL_THRESHOLD   # граница degraded/optimal
    critical_time_unit: CriticalTimeUnit = CriticalTimeUnit.TICKS
    count_repeat_shutdowns: bool = False

    def __post_init__(self) -> None:
        if not self.fatigue_rate > 0:
            raise InvalidConfiguration(f"fatigue_rate must be > 0, got {self.fatigue_rate}")
        if not self.recovery_rate > 0:
            raise InvalidConfiguration(f"recovery_rate must be > 0, got {self.recovery_rate}")
        if not 0 <= self.min_capacity < 1:
            raise InvalidConfiguration(f"min_capacity must be in [0, 1), got {self.min_capacity}")
        if not self.min_capacity < self.critical_threshold <= 1:
            raise InvalidConfiguration(
                f"critical_threshold must be in (min_capacity, 1], got {self.critical_threshold}"
            )
        if not self.critical_threshold <= self.optimal_threshold <= 1:
            raise InvalidConfiguration(
                f"optimal_threshold must be in [critical_threshold, 1], got {self.optimal_threshold}"
            )
        if not 0 <= self.initial_capacity <= 1:
            raise InvalidConfiguration(
                f"initial_capacity must be in [0, 1], got {self.initial_capacity}"
            )
        # YAML отдаёт строку — приводим к enum
        object.__setattr__(self, "critical_time_unit", CriticalTimeUnit(self.critical_time_unit))


# ─────── чистые функции ──────────────────────────────────────────────────────
def fatigue_during_work(session_time: float, start_fatigue: float, rate: float) -> float:
    """F(t) = 1 − (1 − F₀)·e^(−λt), не выше 1."""
    return min(1.0 - (1.0 - start_fatigue) * exp(-rate * session_time), 1.0)


def fatigue_during_rest(session_time: float, start_fatigue: float, rate: float) -> float:
    """R(t) = F₀·e^(−μt), не ниже 0."""
    return max(start_fatigue * exp(-rate * session_time), 0.0)


def performance_multiplier(capacity: float, min_capacity: float,
                           critical_threshold: float) -> float:
    """
    Три зоны:
      capacity ≥ threshold         → capacity
      min ≤ capacity < threshold   → min + d²·(threshold − min)
      capacity < min               → 0
    """
    if capacity >= critical_threshold:
        return capacity
    if capacity >= min_capacity:
        span = critical_threshold - min_capacity
        d = (capacity - min_capacity) / span
        return min_capacity + d * d * span
    return 0.0


def classify_capacity(capacity: float, params: CapacityParams) -> OperatingState:
    if capacity < params.min_capacity:
        return OperatingState.SHUTDOWN
    if capacity < params.critical_threshold:
        return OperatingState.CRITICAL
    if capacity < params.optimal_threshold:
        return OperatingState.DEGRADED
    return OperatingState.OPTIMAL


# ─────── выход одного тика ───────────────────────────────────────────────────
@dataclass(slots=True, frozen=True)
class StateSnapshot:
    worker_id: str
    time: float
    capacity: float
    fatigue: float
    performance_multiplier: float
    state: OperatingState
    is_working: bool
    is_safe: bool
    is_critical: bool
    current_session: int
    session_type: str
    session_time: float
    total_work_time: float
    total_rest_time: float
    time_in_critical_zone: float
    emergency_shutdowns: int
    has_violated_min_capacity: bool

    def to_row(self) -> Dict[str, Any]:
        row = asdict(self)
        row["state"] = self.state.value
        return row


@dataclass(slots=True, frozen=True)
class Summary:
    worker_id: str
    total_work_time: float
    total_rest_time: float
    avg_capacity: float
    avg_performance: float
    min_capacity: float
    max_fatigue: float
    time_in_critical_zone: float
    emergency_shutdowns: int
    violated_min_capacity: bool
    total_data_points: int


def _random_id() -> str:
    alphabet = "0123456789abcdefghijklmnopqrstuvwxyz"
    rng = Random()
    return "".join(rng.choice(alphabet) for _ in range(9))


# ─────── модель ──────────────────────────────────────────────────────────────
class CapacityModel:
    """
    Одна траектория ёмкости одного работника.

    Один вызов .tick() = один шаг времени (по умолчанию 1 минута).
    Состояние меняется только через tick() и reset().
    """

    __slots__ = (
        "worker_id", "params", "capacity", "fatigue", "is_working",
        "session_start_time", "session_start_capacity", "current_session",
        "total_work_time", "total_rest_time", "performance",
        "_safety", "_history",
    )

    def __init__(self, params: CapacityParams | None = None,
                 worker_id: str | None = None) -> None:
        self.worker_id = worker_id or _random_id()
        self.params = params or CapacityParams()
        self._safety = SafetyMonitor(
            min_capacity=self.params.min_capacity,
            critical_threshold=self.params.critical_threshold,
            critical_time_unit=self.params.critical_time_unit,
            count_repeat_shutdowns=self.params.count_repeat_shutdowns,
        )
        self.reset()

    # --- жизненный цикл -----------------------------------------------------------
    def reset(self) -> None:
        p = self.params
        self.capacity: float = p.initial_capacity
        self.fatigue: float = 1.0 - p.initial_capacity
        self.is_working: bool = False
        self.session_start_time: float = 0.0
        self.session_start_capacity: float = p.initial_capacity
        self.current_session: int = 1
        self.total_work_time: float = 0.0
        self.total_rest_time: float = 0.0
        self.performance: float = performance_multiplier(
            p.initial_capacity, p.min_capacity, p.critical_threshold)
        self._safety.reset()
        self._history: List[StateSnapshot] = []

    def set_initial_capacity(self, capacity: float) -> None:
        """Пред-уставший работник: новая стартовая ёмкость + reset."""
        capacity = max(0.0, min(1.0, capacity))
        self.params = replace(self.params, initial_capacity=capacity)
        self.reset()

    # --- динамика ------------------------------------------------------------------
    def tick(self, is_working: bool, delta_time: float = 1.0) -> StateSnapshot:
        """
        :param is_working: True = работает на этом тике, False = отдых
        :param delta_time: длительность тика (минуты), строго > 0
        :return: снимок состояния после тика
        """
        if not delta_time > 0:
            raise InvalidInput(f"delta_time must be > 0, got {delta_time}")
        p = self.params

        # ----- граница сессии: якорь от текущей ёмкости --------------------------
        first_tick = not self._history
        if first_tick or is_working != self.is_working:
            self.session_start_capacity = self.capacity
            self.session_start_time = 0.0
            if is_working and not first_tick:
                self.current_session += 1
        self.is_working = is_working
        self.session_start_time += delta_time

        # ----- замкнутая форма от начала сессии ----------------------------------
        start_fatigue = 1.0 - self.session_start_capacity
        if is_working:
            self.fatigue = fatigue_during_work(self.session_start_time, start_fatigue,
                                               p.fatigue_rate)
            self.total_work_time += delta_time
        else:
            self.fatigue = fatigue_during_rest(self.session_start_time, start_fatigue,
                                               p.recovery_rate)
            self.total_rest_time += delta_time
        self.capacity = max(1.0 - self.fatigue, 0.0)

        self._safety.evaluate(self.capacity, is_working, delta_time)
        self.performance = performance_multiplier(self.capacity, p.min_capacity,
                                                  p.critical_threshold)

        snap = self.snapshot()
        self._history.append(snap)
        return snap

    # --- индикаторы ----------------------------------------------------------------
    def is_safe(self) -> bool:
        return self.capacity >= self.params.min_capacity

    def is_critical(self) -> bool:
        return self.capacity < self.params.critical_threshold

    @property
    def state(self) -> OperatingState:
        return classify_capacity(self.capacity, self.params)

    @property
    def session_type(self) -> str:
        return "work" if self.is_working else "rest"

    @property
    def emergency_shutdowns(self) -> int:
        return self._safety.emergency_shutdowns

    @property
    def time_in_critical_zone(self) -> float:
        return self._safety.time_in_critical_zone

    @property
    def has_violated_min_capacity(self) -> bool:
        return self._safety.has_violated_min_capacity

    @property
    def history(self) -> Tuple[StateSnapshot, ...]:
        return tuple(self._history)

    # --- отчётность ----------------------------------------------------------------
    def snapshot(self) -> StateSnapshot:
        return StateSnapshot(
            worker_id=self.worker_id,
            time=self.total_work_time + self.total_rest_time,
            capacity=self.capacity,
            fatigue=self.fatigue,
            performance_multiplier=self.performance,
            state=self.state,
            is_working=self.is_working,
            is_safe=self.is_safe(),
            is_critical=self.is_critical(),
            current_session=self.current_session,
            session_type=self.session_type,
            session_time=self.session_start_time,
            total_work_time=self.total_work_time,
            total_rest_time=self.total_rest_time,
            time_in_critical_zone=self.time_in_critical_zone,
            emergency_shutdowns=self.emergency_shutdowns,
            has_violated_min_capacity=self.has_violated_min_capacity,
        )

    def summary(self) -> Summary:
        if not self._history:
            raise EmptyHistory("summary() needs at least one tick")
        n = len(self._history)
        return Summary(
            worker_id=self.worker_id,
            total_work_time=self.total_work_time,
            total_rest_time=self.total_rest_time,
            avg_capacity=sum(s.capacity for s in self._history) / n,
            avg_performance=sum(s.performance_multiplier for s in self._history) / n,
            min_capacity=min(s.capacity for s in self._history),
            max_fatigue=max(s.fatigue for s in self._history),
            time_in_critical_zone=self.time_in_critical_zone,
            emergency_shutdowns=self.emergency_shutdowns,
            violated_min_capacity=self.has_violated_min_capacity,
            total_data_points=n,
        )

    def export_time_series(self) -> List[Dict[str, Any]]:
        return [s.to_row() for s in self._history]
