"""
Сравнение golden- и live-траекторий по каналу capacity.

MAE  = (1/n)·Σ|g − l|
RMSE = √((1/n)·Σ(g − l)²)
"""

from __future__ import annotations
from dataclasses import dataclass
from math import inf
from typing import List, Sequence, Tuple

import numpy as np
import pandas as pd

from ..domain import EmptyHistory, LengthMismatch
from .golden import TrajectoryPoint


@dataclass(frozen=True, slots=True)
class TickError:
    tick: int
    golden: float
    live: float
    error: float


@dataclass(frozen=True)
class ValidationStats:
    mae: float
    rmse: float
    max_error: float
    max_error_tick: int
    data_points: int
    errors: Tuple[TickError, ...]

    def passed(self, threshold: float) -> bool:
        return self.mae < threshold


def calculate_statistics(golden: Sequence[TrajectoryPoint],
                         live: Sequence[TrajectoryPoint]) -> ValidationStats:
    if len(golden) != len(live):
        raise LengthMismatch(len(golden), len(live))
    if not golden:
        raise EmptyHistory("no data points to compare")

    g = np.fromiter((p.capacity for p in golden), dtype=float, count=len(golden))
    lv = np.fromiter((p.capacity for p in live), dtype=float, count=len(live))
    diff = g - lv
    abs_err = np.abs(diff)

    # argmax берёт первое вхождение максимума
    worst = int(np.argmax(abs_err))
    errors = tuple(
        TickError(tick=i, golden=float(gi), live=float(li), error=float(ei))
        for i, (gi, li, ei) in enumerate(zip(g, lv, abs_err))
    )
    return ValidationStats(
        mae=float(abs_err.mean()),
        rmse=float(np.sqrt(np.mean(diff ** 2))),
        max_error=float(abs_err[worst]),
        max_error_tick=worst,
        data_points=len(golden),
        errors=errors,
    )


# ─────── гистограмма ошибок ──────────────────────────────────────────────────
ERROR_BINS: Tuple[Tuple[str, float, float], ...] = (
    ("< 0.0001", 0.0, 0.0001),
    ("0.0001 - 0.0005", 0.0001, 0.0005),
    ("0.0005 - 0.001", 0.0005, 0.001),
    ("0.001 - 0.005", 0.001, 0.005),
    ("> 0.005", 0.005, inf),
)


@dataclass(frozen=True, slots=True)
class ErrorBin:
    label: str
    lower: float
    upper: float
    count: int
    share: float      # доля от всех точек, 0…1


def error_distribution(stats: ValidationStats) -> List[ErrorBin]:
    """Раскладка ошибок по полуинтервалам [lower, upper)."""
    errs = np.fromiter((e.error for e in stats.errors), dtype=float,
                       count=len(stats.errors))
    total = len(errs)
    bins = []
    for label, lower, upper in ERROR_BINS:
        count = int(np.count_nonzero((errs >= lower) & (errs < upper)))
        bins.append(ErrorBin(label, lower, upper, count,
                             count / total if total else 0.0))
    return bins


# ─────── табличные представления ─────────────────────────────────────────────
def errors_frame(stats: ValidationStats) -> pd.DataFrame:
    return pd.DataFrame(
        [(e.tick, e.golden, e.live, e.error) for e in stats.errors],
        columns=["Tick", "Golden_Capacity", "Live_Capacity", "Absolute_Error"],
    )


def sample_comparisons(golden: Sequence[TrajectoryPoint],
                       live: Sequence[TrajectoryPoint],
                       every: int = 100) -> pd.DataFrame:
    """Каждая every-я точка: golden vs live и режим."""
    if len(golden) != len(live):
        raise LengthMismatch(len(golden), len(live))
    rows = [
        {
            "tick": g.tick,
            "golden_capacity": g.capacity,
            "live_capacity": lv.capacity,
            "error": abs(g.capacity - lv.capacity),
            "state": "WORK" if lv.is_working else "REST",
        }
        for g, lv in zip(golden[::every], live[::every])
    ]
    return pd.DataFrame(rows, columns=["tick", "golden_capacity", "live_capacity",
                                       "error", "state"])
