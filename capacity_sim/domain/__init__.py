"""
Domain public API.

Внешний мир видит ровно эти классы; детали (замкнутые формулы усталости,
автомат безопасности) инкапсулированы внутри.
"""
from .errors import (CapacityModelError, InvalidConfiguration,           # noqa: F401
                     InvalidInput, LengthMismatch, EmptyHistory)
from .safety import CriticalTimeUnit, SafetyMonitor                      # noqa: F401
from .capacity import (CapacityParams, CapacityModel, OperatingState,    # noqa: F401
                       StateSnapshot, Summary, classify_capacity,
                       fatigue_during_rest, fatigue_during_work,
                       performance_multiplier)
from .schedule import (Activity, Segment, Schedule, PRESETS,             # noqa: F401
                       iter_activity, parse_schedule, total_duration)

__all__ = [
    "CapacityModelError",
    "InvalidConfiguration",
    "InvalidInput",
    "LengthMismatch",
    "EmptyHistory",
    "CriticalTimeUnit",
    "SafetyMonitor",
    "CapacityParams",
    "CapacityModel",
    "OperatingState",
    "StateSnapshot",
    "Summary",
    "classify_capacity",
    "fatigue_during_rest",
    "fatigue_during_work",
    "performance_multiplier",
    "Activity",
    "Segment",
    "Schedule",
    "PRESETS",
    "iter_activity",
    "parse_schedule",
    "total_duration",
]
