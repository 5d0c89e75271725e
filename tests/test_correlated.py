"""Tests for correlated series generation."""

import numpy as np
import pytest

from context_synth.core.random_source import RandomSource
from context_synth.structured import CorrelatedSeriesConfig, generate_correlated_series
from context_synth.validation import check_series_correlation


def test_two_series_reach_target_correlation():
    data = generate_correlated_series(
        series_names=["a", "b"],
        correlation_matrix=[[1.0, 0.8], [0.8, 1.0]],
        count=2000,
        source=RandomSource(seed=21),
    )
    assert len(data["a"]) == len(data["b"]) == 2000
    r = np.corrcoef(data["a"], data["b"])[0, 1]
    assert abs(r - 0.8) < 0.15
    assert check_series_correlation(data["a"], data["b"], 0.8).ok


def test_negative_correlation():
    data = generate_correlated_series(
        series_names=["x", "y"],
        correlation_matrix=[[1.0, -0.6], [-0.6, 1.0]],
        count=3000,
        source=RandomSource(seed=5),
    )
    assert abs(np.corrcoef(data["x"], data["y"])[0, 1] + 0.6) < 0.15


def test_means_and_standard_deviations_applied():
    data = generate_correlated_series(
        series_names=["revenue", "cost"],
        correlation_matrix=[[1.0, 0.0], [0.0, 1.0]],
        means=[1000.0, 50.0],
        standard_deviations=[100.0, 10.0],
        count=5000,
        source=RandomSource(seed=8),
    )
    revenue = np.array(data["revenue"])
    cost = np.array(data["cost"])
    assert revenue.mean() == pytest.approx(1000.0, abs=10.0)
    assert revenue.std() == pytest.approx(100.0, rel=0.1)
    assert cost.mean() == pytest.approx(50.0, abs=1.0)
    # later series are scaled down by sqrt(j + 1)
    assert cost.std() == pytest.approx(10.0 / np.sqrt(2), rel=0.1)


def test_values_rounded_to_three_decimals():
    data = generate_correlated_series(
        series_names=["a"], correlation_matrix=[[1.0]], count=50, source=RandomSource(seed=1)
    )
    assert all(round(v, 3) == v for v in data["a"])


def test_three_series_keep_order_and_length():
    data = generate_correlated_series(
        series_names=["a", "b", "c"],
        correlation_matrix=[[1.0, 0.5, 0.2], [0.5, 1.0, 0.3], [0.2, 0.3, 1.0]],
        count=10,
    )
    assert list(data) == ["a", "b", "c"]
    assert all(len(values) == 10 for values in data.values())


def test_zero_count_gives_empty_series():
    data = generate_correlated_series(series_names=["a"], correlation_matrix=[[1.0]], count=0)
    assert data == {"a": []}


@pytest.mark.parametrize(
    "options",
    [
        {"series_names": ["a", "b"], "correlation_matrix": [[1.0]]},
        {"series_names": ["a", "b"], "correlation_matrix": [[1.0, 0.5], [0.5]]},
        {
            "series_names": ["a", "b"],
            "correlation_matrix": [[1.0, 0.5], [0.5, 1.0]],
            "means": [0.0],
        },
        {
            "series_names": ["a"],
            "correlation_matrix": [[1.0]],
            "standard_deviations": [1.0, 2.0],
        },
    ],
)
def test_dimension_mismatch_raises(options):
    with pytest.raises(ValueError):
        CorrelatedSeriesConfig(**options)
