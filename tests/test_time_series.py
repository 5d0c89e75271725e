"""Tests for time series generation."""

import math
from datetime import datetime, timedelta

import pytest

from context_synth.core.random_source import RandomSource
from context_synth.structured import TimeSeriesConfig, generate_time_series
from context_synth.validation import check_strictly_increasing_timestamps


def test_ten_daily_points_inclusive_of_end():
    points = generate_time_series(
        start_date=datetime(2023, 1, 1),
        end_date=datetime(2023, 1, 10),
        interval=timedelta(days=1),
        source=RandomSource(seed=1),
    )
    assert len(points) == 10
    assert points[0].timestamp == datetime(2023, 1, 1)
    assert points[-1].timestamp == datetime(2023, 1, 10)
    assert all(math.isfinite(p.value) for p in points)
    assert check_strictly_increasing_timestamps(points).ok


def test_trend_without_noise_is_linear():
    config = TimeSeriesConfig(
        start_date=datetime(2024, 1, 1),
        end_date=datetime(2024, 1, 5),
        base_value=50.0,
        trend=2.5,
        noise=0.0,
    )
    values = [p.value for p in generate_time_series(config)]
    assert values == [50.0, 52.5, 55.0, 57.5, 60.0]


def test_seasonality_term():
    start = datetime(2024, 3, 31)
    points = generate_time_series(
        start_date=start, end_date=start, base_value=100.0, seasonality=0.5, noise=0.0
    )
    day_of_year = start.timetuple().tm_yday
    expected = round(100.0 + 0.5 * 100.0 * math.sin(2 * math.pi * day_of_year / 365.25), 2)
    assert points[0].value == expected


def test_noise_bounded_by_amplitude():
    points = generate_time_series(
        start_date=datetime(2024, 1, 1),
        end_date=datetime(2024, 12, 31),
        base_value=200.0,
        noise=0.1,
        source=RandomSource(seed=5),
    )
    assert len(points) == 366
    assert all(180.0 <= p.value <= 220.0 for p in points)


def test_hourly_interval():
    points = generate_time_series(
        start_date=datetime(2024, 1, 1, 0),
        end_date=datetime(2024, 1, 1, 23),
        interval=timedelta(hours=1),
    )
    assert len(points) == 24


def test_keyword_options_override_config():
    config = TimeSeriesConfig(start_date=datetime(2024, 1, 1), end_date=datetime(2024, 1, 3))
    points = generate_time_series(config, end_date=datetime(2024, 1, 1), noise=0.0)
    assert [p.value for p in points] == [100.0]


def test_to_map_contains_timestamp_date_and_value():
    point = generate_time_series(
        start_date=datetime(2024, 2, 1, 8), end_date=datetime(2024, 2, 1, 8), noise=0.0
    )[0]
    assert point.to_map() == {
        "timestamp": "2024-02-01T08:00:00",
        "date": "2024-02-01",
        "value": 100.0,
    }


@pytest.mark.parametrize(
    "options",
    [
        {"interval": timedelta(0)},
        {"interval": timedelta(days=-1)},
        {"start_date": datetime(2024, 2, 1)},
    ],
)
def test_invalid_configuration_raises(options):
    base = {"start_date": datetime(2024, 1, 1), "end_date": datetime(2024, 1, 10)}
    with pytest.raises(ValueError):
        generate_time_series(**{**base, **options})
