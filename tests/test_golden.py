"""Closed-form golden trajectory."""

import math

import pytest

from capacity_sim.domain import CapacityParams, parse_schedule
from capacity_sim.validation import fatigue_decay, fatigue_growth, generate_golden_data


def test_equations():
    assert fatigue_growth(0, 0.3, 0.01) == pytest.approx(0.3)
    assert fatigue_growth(10, 0.0, 0.01) == pytest.approx(1 - math.exp(-0.1))
    assert fatigue_decay(0, 0.6, 0.01) == pytest.approx(0.6)
    assert fatigue_decay(100, 0.6, 0.01) == pytest.approx(0.6 * math.exp(-1))


@pytest.mark.parametrize("time_steps, expected", [(1000, 135), (50, 50), (135, 135)])
def test_point_count(params, short_day, time_steps, expected):
    assert len(generate_golden_data(params, short_day, time_steps)) == expected


def test_first_points(params, short_day):
    golden = generate_golden_data(params, short_day, 1000, delta_time=2.0)
    first = golden[0]
    assert first.tick == 0
    assert first.time == 0.0
    assert first.session_time == 2.0
    assert first.is_working
    assert first.capacity == pytest.approx(math.exp(-0.0097 * 2))
    assert golden[1].time == 2.0


def test_re_anchors_on_activity_change(params, short_day):
    golden = generate_golden_data(params, short_day, 1000)
    f60 = golden[59].fatigue
    rest = golden[60]
    assert not rest.is_working
    assert rest.session_time == 1
    assert rest.fatigue == pytest.approx(f60 * math.exp(-0.0009))

    f75 = golden[74].fatigue
    back = golden[75]
    assert back.session_time == 1
    assert back.fatigue == pytest.approx(1 - (1 - f75) * math.exp(-0.0097))


def test_same_activity_segments_share_a_session(params):
    sched = parse_schedule([{"type": "work", "duration": 5},
                            {"type": "work", "duration": 5}])
    golden = generate_golden_data(params, sched, 100)
    assert [p.session_time for p in golden] == list(range(1, 11))


def test_starting_with_rest_keeps_initial_anchor():
    p = CapacityParams(initial_capacity=0.4)
    sched = parse_schedule([{"type": "rest", "duration": 3}])
    golden = generate_golden_data(p, sched, 10)
    assert golden[2].fatigue == pytest.approx(0.6 * math.exp(-0.0009 * 3))
