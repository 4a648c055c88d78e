"""Comparison statistics and error binning."""

import math

import pytest

from capacity_sim.domain import EmptyHistory, LengthMismatch
from capacity_sim.validation import (
    calculate_statistics,
    error_distribution,
    errors_frame,
    sample_comparisons,
)

from conftest import points


def test_known_values():
    st = calculate_statistics(points([1.0, 0.5, 0.2]), points([1.0, 0.4, 0.5]))
    assert st.data_points == 3
    assert st.mae == pytest.approx(0.4 / 3)
    assert st.rmse == pytest.approx(math.sqrt(0.1 / 3))
    assert st.max_error == pytest.approx(0.3)
    assert st.max_error_tick == 2
    assert [e.tick for e in st.errors] == [0, 1, 2]
    assert st.errors[1].golden == 0.5
    assert st.errors[1].live == 0.4
    assert st.errors[1].error == pytest.approx(0.1)


def test_first_maximum_wins():
    st = calculate_statistics(points([0.5, 0.5, 0.5]), points([0.4, 0.6, 0.4]))
    assert st.max_error_tick == 0


def test_identical_trajectories():
    st = calculate_statistics(points([0.9, 0.8]), points([0.9, 0.8]))
    assert st.mae == 0
    assert st.rmse == 0
    assert st.max_error == 0
    assert st.max_error_tick == 0


def test_length_mismatch():
    with pytest.raises(LengthMismatch) as exc:
        calculate_statistics(points([1.0, 0.9]), points([1.0]))
    assert exc.value.golden == 2
    assert exc.value.live == 1


def test_empty():
    with pytest.raises(EmptyHistory):
        calculate_statistics([], [])


def test_gate_is_strict():
    st = calculate_statistics(points([0.5]), points([0.25]))
    assert st.passed(0.3)
    assert not st.passed(0.25)


def test_error_distribution():
    golden = points([0.5] * 5)
    live = points([0.5, 0.5003, 0.5007, 0.503, 0.51])
    bins = error_distribution(calculate_statistics(golden, live))
    assert [b.label for b in bins] == [
        "< 0.0001", "0.0001 - 0.0005", "0.0005 - 0.001", "0.001 - 0.005", "> 0.005",
    ]
    assert [b.count for b in bins] == [1, 1, 1, 1, 1]
    assert [b.share for b in bins] == pytest.approx([0.2] * 5)


def test_errors_frame():
    df = errors_frame(calculate_statistics(points([1.0, 0.5]), points([1.0, 0.4])))
    assert list(df.columns) == ["Tick", "Golden_Capacity", "Live_Capacity", "Absolute_Error"]
    assert df["Tick"].tolist() == [0, 1]


def test_sample_comparisons():
    golden = points([1.0, 0.9, 0.8, 0.7, 0.6])
    live = points([1.0, 0.9, 0.8, 0.7, 0.6], is_working=False)
    df = sample_comparisons(golden, live, every=2)
    assert df["tick"].tolist() == [0, 2, 4]
    assert set(df["state"]) == {"REST"}
    assert df["error"].max() == 0
