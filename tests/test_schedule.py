"""Schedule parsing, expansion and presets."""

import pytest

from capacity_sim.domain import (
    PRESETS,
    Activity,
    InvalidInput,
    Segment,
    iter_activity,
    parse_schedule,
    total_duration,
)


def test_parse_both_key_spellings():
    sched = parse_schedule([
        {"type": "work", "duration": 10},
        {"activity": "rest", "duration_minutes": 5},
        Segment(Activity.WORK, 3),
    ])
    assert [s.activity for s in sched] == [Activity.WORK, Activity.REST, Activity.WORK]
    assert [s.duration for s in sched] == [10, 5, 3]
    assert sched[0].is_working and not sched[1].is_working


@pytest.mark.parametrize("raw", [
    {"type": "nap", "duration": 10},
    {"type": "work", "duration": 0},
    {"type": "work", "duration": -5},
    {"type": "work", "duration": 1.5},
    {"type": "work", "duration": True},
    {"type": "work"},
    {"duration": 10},
])
def test_malformed_segments(raw):
    with pytest.raises(InvalidInput):
        parse_schedule([raw])


def test_total_duration_and_expansion():
    sched = parse_schedule([{"type": "work", "duration": 3},
                            {"type": "rest", "duration": 2}])
    assert total_duration(sched) == 5
    assert list(iter_activity(sched)) == [True, True, True, False, False]
    assert list(iter_activity(sched, limit=4)) == [True, True, True, False]
    assert list(iter_activity(sched, limit=0)) == []


@pytest.mark.parametrize("name, minutes", [
    ("shift_8h", 510),
    ("shift_6h", 390),
    ("sprint_4h", 270),
    ("validation_day", 1000),
])
def test_presets(name, minutes):
    assert total_duration(PRESETS[name]) == minutes
