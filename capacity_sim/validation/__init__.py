"""Public helpers for the validation layer (golden data vs live model)."""
from .golden import (TrajectoryPoint, fatigue_decay, fatigue_growth,     # noqa: F401
                     generate_golden_data)
from .live import run_live_simulation                                    # noqa: F401
from .stats import (ErrorBin, TickError, ValidationStats,                # noqa: F401
                    calculate_statistics, error_distribution, errors_frame,
                    sample_comparisons)
from .harness import ValidationResult, run_validation                    # noqa: F401

__all__ = [
    "TrajectoryPoint",
    "fatigue_decay",
    "fatigue_growth",
    "generate_golden_data",
    "run_live_simulation",
    "ErrorBin",
    "TickError",
    "ValidationStats",
    "calculate_statistics",
    "error_distribution",
    "errors_frame",
    "sample_comparisons",
    "ValidationResult",
    "run_validation",
]
