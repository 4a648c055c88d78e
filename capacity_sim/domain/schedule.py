"""
Расписание = упорядоченный список сегментов {activity, duration}.
Один сегмент = одна непрерывная сессия работы или отдыха, duration — в тиках
(по умолчанию тик = 1 минута).
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Iterable, Iterator, Mapping, Tuple

from .errors import InvalidInput


class Activity(str, Enum):
    WORK = "work"
    REST = "rest"


@dataclass(frozen=True, slots=True)
class Segment:
    activity: Activity
    duration: int

    def __post_init__(self) -> None:
        try:
            activity = Activity(self.activity)
        except ValueError as exc:
            raise InvalidInput(f"Unknown activity {self.activity!r}") from exc
        object.__setattr__(self, "activity", activity)
        if isinstance(self.duration, bool) or not isinstance(self.duration, int):
            raise InvalidInput(f"duration must be an int, got {self.duration!r}")
        if self.duration <= 0:
            raise InvalidInput(f"duration must be > 0, got {self.duration}")

    @property
    def is_working(self) -> bool:
        return self.activity is Activity.WORK


Schedule = Tuple[Segment, ...]


def _segment(raw: Segment | Mapping[str, Any]) -> Segment:
    if isinstance(raw, Segment):
        return raw
    activity = raw.get("type", raw.get("activity"))
    duration = raw.get("duration", raw.get("duration_minutes"))
    if activity is None or duration is None:
        raise InvalidInput(f"Segment needs 'type' and 'duration', got {dict(raw)!r}")
    return Segment(activity=activity, duration=duration)


def parse_schedule(raw: Iterable[Segment | Mapping[str, Any]]) -> Schedule:
    """YAML-список словарей (или готовые Segment) → кортеж Segment."""
    return tuple(_segment(item) for item in raw)


def total_duration(schedule: Iterable[Segment]) -> int:
    return sum(seg.duration for seg in schedule)


def iter_activity(schedule: Iterable[Segment], limit: int | None = None) -> Iterator[bool]:
    """
    Разворачивает расписание в поток is_working по тикам.
    :param limit: максимум тиков (None — всё расписание)
    """
    emitted = 0
    for seg in schedule:
        for _ in range(seg.duration):
            if limit is not None and emitted >= limit:
                return
            yield seg.is_working
            emitted += 1


# ─────── готовые смены ───────────────────────────────────────────────────────
def _preset(*pairs: Tuple[str, int]) -> Schedule:
    return tuple(Segment(Activity(kind), minutes) for kind, minutes in pairs)


PRESETS: Dict[str, Schedule] = {
    "shift_8h": _preset(("work", 240), ("rest", 30), ("work", 240)),
    "shift_6h": _preset(("work", 180), ("rest", 30), ("work", 180)),
    "sprint_4h": _preset(("work", 120), ("rest", 30), ("work", 120)),
    "validation_day": _preset(("work", 240), ("rest", 30), ("work", 240), ("rest", 490)),
}
