"""Public helpers for the simulation layer."""
from .env import make_environment                                   # noqa: F401
from .shift import shift_process, run_schedule, compare_schedules   # noqa: F401

__all__ = ["make_environment", "shift_process", "run_schedule",
           "compare_schedules"]
