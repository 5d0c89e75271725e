"""Time series with trend, yearly seasonality and uniform noise."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Any, Optional

from pydantic import BaseModel, Field, model_validator

from context_synth.core.random_source import RandomSource
from context_synth.structured.base import ensure_source, resolve_config

logger = logging.getLogger(__name__)

DAYS_PER_YEAR = 365.25


class TimeSeriesConfig(BaseModel):
    """Options for :func:`generate_time_series`."""

    start_date: datetime = Field(description="First timestamp of the series")
    end_date: datetime = Field(description="Last timestamp (inclusive)")
    interval: timedelta = Field(
        default=timedelta(days=1), description="Fixed step between points"
    )
    base_value: float = Field(default=100.0, description="Level of the series")
    trend: float = Field(default=0.0, description="Additive change per step")
    seasonality: float = Field(
        default=0.0, description="Amplitude of the yearly cycle as a fraction of base_value"
    )
    noise: float = Field(
        default=0.1, description="Amplitude of uniform noise as a fraction of base_value"
    )

    @model_validator(mode="after")
    def _check_range(self) -> "TimeSeriesConfig":
        if self.interval <= timedelta(0):
            raise ValueError("interval must be positive")
        if self.start_date > self.end_date:
            raise ValueError("start_date must be <= end_date")
        return self


@dataclass(frozen=True)
class TimeSeriesPoint:
    timestamp: datetime
    value: float

    def to_map(self) -> dict[str, Any]:
        return {
            "timestamp": self.timestamp.isoformat(),
            "date": self.timestamp.date().isoformat(),
            "value": self.value,
        }


def generate_time_series(
    config: Optional[TimeSeriesConfig] = None,
    *,
    source: Optional[RandomSource] = None,
    **options: Any,
) -> list[TimeSeriesPoint]:
    """Generate one point per ``interval`` from ``start_date`` to ``end_date``.

    Each value is::

        base + trend * step
             + seasonality * base * sin(2 * pi * day_of_year / 365.25)
             + noise * base * U(-1, 1)

    rounded to two decimals.

    Parameters
    ----------
    config:
        A :class:`TimeSeriesConfig`. Keyword ``options`` build or override it.
    source:
        Random source for the noise term.

    Examples
    --------
    >>> points = generate_time_series(
    ...     start_date=datetime(2023, 1, 1), end_date=datetime(2023, 1, 10)
    ... )
    >>> len(points)
    10
    """
    cfg = resolve_config(TimeSeriesConfig, config, options)
    src = ensure_source(source)

    points: list[TimeSeriesPoint] = []
    current = cfg.start_date
    step = 0
    while current <= cfg.end_date:
        day_of_year = current.timetuple().tm_yday
        seasonal = cfg.seasonality * cfg.base_value * math.sin(
            2 * math.pi * day_of_year / DAYS_PER_YEAR
        )
        jitter = cfg.noise * cfg.base_value * src.random_double(-1.0, 1.0)
        value = cfg.base_value + cfg.trend * step + seasonal + jitter
        points.append(TimeSeriesPoint(timestamp=current, value=round(value, 2)))
        current += cfg.interval
        step += 1

    logger.debug(f"Generated time series with {len(points)} points")
    return points
