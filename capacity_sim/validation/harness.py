"""
Валидатор: две независимые траектории на одном расписании + статистика.
Реализация считается верной, если MAE < mae_threshold.
"""

from __future__ import annotations
import time
from dataclasses import dataclass
from typing import List

from ..domain import CapacityParams
from ..infrastructure.config import ValidationConfig
from .golden import TrajectoryPoint, generate_golden_data
from .live import run_live_simulation
from .stats import ValidationStats, calculate_statistics


@dataclass(frozen=True)
class ValidationResult:
    passed: bool
    threshold: float
    stats: ValidationStats
    golden: List[TrajectoryPoint]
    live: List[TrajectoryPoint]
    golden_ms: float
    live_ms: float


def run_validation(params: CapacityParams,
                   run: ValidationConfig | None = None,
                   worker_id: str = "validator-worker") -> ValidationResult:
    run = run or ValidationConfig()

    t0 = time.perf_counter()
    golden = generate_golden_data(params, run.schedule, run.time_steps, run.delta_time)
    t1 = time.perf_counter()
    live = run_live_simulation(params, run.schedule, run.time_steps, run.delta_time,
                               worker_id=worker_id)
    t2 = time.perf_counter()

    stats = calculate_statistics(golden, live)
    return ValidationResult(
        passed=stats.passed(run.mae_threshold),
        threshold=run.mae_threshold,
        stats=stats,
        golden=golden,
        live=live,
        golden_ms=(t1 - t0) * 1000,
        live_ms=(t2 - t1) * 1000,
    )
