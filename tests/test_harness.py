"""Oracle agreement between the golden trajectory and the live model."""

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from capacity_sim.domain import CapacityParams, Segment, Activity
from capacity_sim.infrastructure.config import ValidationConfig
from capacity_sim.validation import (
    generate_golden_data,
    run_live_simulation,
    run_validation,
)


def test_default_run_passes(params):
    result = run_validation(params)
    assert result.passed
    assert result.threshold == 0.001
    assert result.stats.data_points == 1000
    assert result.stats.mae < 1e-9
    assert result.stats.max_error < 1e-9
    assert len(result.golden) == len(result.live) == 1000


def test_tick_cap_longer_than_schedule(params, short_day):
    run = ValidationConfig(time_steps=5000, schedule=short_day)
    result = run_validation(params, run)
    assert result.stats.data_points == 135


def test_live_trajectory_fields(params, short_day):
    live = run_live_simulation(params, short_day, 100, delta_time=0.5)
    assert len(live) == 100
    assert live[0].session_time == 0.5
    assert live[60].is_working is False
    assert live[60].session_time == 0.5
    assert live[99].time == pytest.approx(49.5)


def test_sessions_match_golden(params, short_day):
    golden = generate_golden_data(params, short_day, 1000)
    live = run_live_simulation(params, short_day, 1000)
    assert [g.is_working for g in golden] == [lv.is_working for lv in live]
    assert [g.session_time for g in golden] == [lv.session_time for lv in live]


segments = st.lists(
    st.builds(Segment,
              activity=st.sampled_from([Activity.WORK, Activity.REST]),
              duration=st.integers(min_value=1, max_value=120)),
    min_size=1, max_size=8,
)


@settings(max_examples=30, deadline=None)
@given(
    schedule=segments,
    initial=st.floats(min_value=0.0, max_value=1.0),
    fatigue_rate=st.floats(min_value=1e-4, max_value=0.1),
    recovery_rate=st.floats(min_value=1e-4, max_value=0.1),
    dt=st.sampled_from([0.5, 1.0, 2.0]),
)
def test_oracle_agreement_on_random_schedules(schedule, initial, fatigue_rate,
                                              recovery_rate, dt):
    params = CapacityParams(fatigue_rate=fatigue_rate, recovery_rate=recovery_rate,
                            initial_capacity=initial)
    run = ValidationConfig(time_steps=400, delta_time=dt, schedule=tuple(schedule))
    result = run_validation(params, run)
    assert result.stats.mae < 1e-9
    assert result.passed
