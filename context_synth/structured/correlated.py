"""Correlated numeric series from a lower-triangular mixing approximation.

This is not a multivariate normal sampler. Series ``j`` mixes the independent
normals of the series before it with the coefficients of row ``j`` of the
correlation matrix, and its own normal with ``sqrt(1 - sum of squares)``.
Correlations with the first series are reproduced. Correlations between
later series are only approximate.
"""

from __future__ import annotations

import logging
import math
from typing import Any, Optional

from pydantic import BaseModel, Field, model_validator

from context_synth.core.random_source import RandomSource
from context_synth.structured.base import ensure_source, resolve_config

logger = logging.getLogger(__name__)


class CorrelatedSeriesConfig(BaseModel):
    series_names: list[str] = Field(description="Name of each series")
    correlation_matrix: list[list[float]] = Field(
        description="n x n matrix; only the lower triangle is used"
    )
    means: list[float] = Field(default_factory=list, description="Defaults to 0.0")
    standard_deviations: list[float] = Field(
        default_factory=list, description="Defaults to 1.0"
    )
    count: int = Field(default=100, ge=0)

    @model_validator(mode="after")
    def _check_dimensions(self) -> "CorrelatedSeriesConfig":
        n = len(self.series_names)
        if len(self.correlation_matrix) != n:
            raise ValueError(
                f"correlation_matrix has {len(self.correlation_matrix)} rows "
                f"for {n} series"
            )
        for row in self.correlation_matrix:
            if len(row) != n:
                raise ValueError("correlation_matrix must be square")
        if self.means and len(self.means) != n:
            raise ValueError("means must have one entry per series")
        if self.standard_deviations and len(self.standard_deviations) != n:
            raise ValueError("standard_deviations must have one entry per series")
        return self

    def mean(self, j: int) -> float:
        return self.means[j] if self.means else 0.0

    def std(self, j: int) -> float:
        return self.standard_deviations[j] if self.standard_deviations else 1.0


def generate_correlated_series(
    config: Optional[CorrelatedSeriesConfig] = None,
    *,
    source: Optional[RandomSource] = None,
    **options: Any,
) -> dict[str, list[float]]:
    """Return ``{series name: count values}`` rounded to three decimals.

    Examples
    --------
    >>> data = generate_correlated_series(
    ...     series_names=["a", "b"],
    ...     correlation_matrix=[[1.0, 0.8], [0.8, 1.0]],
    ...     count=5,
    ... )
    >>> sorted(data), len(data["a"])
    (['a', 'b'], 5)
    """
    cfg = resolve_config(CorrelatedSeriesConfig, config, options)
    src = ensure_source(source)
    n = len(cfg.series_names)
    matrix = cfg.correlation_matrix

    own_weight = []
    for j in range(n):
        shared = sum(matrix[j][k] ** 2 for k in range(j))
        own_weight.append(math.sqrt(max(0.0, 1.0 - shared)))

    result: dict[str, list[float]] = {name: [] for name in cfg.series_names}
    for _ in range(cfg.count):
        independent = [src.standard_normal() for _ in range(n)]
        for j, name in enumerate(cfg.series_names):
            mixed = sum(matrix[j][k] * independent[k] for k in range(j))
            mixed += own_weight[j] * independent[j]
            value = mixed * cfg.std(j) / math.sqrt(j + 1) + cfg.mean(j)
            result[name].append(round(value, 3))

    logger.debug(f"Generated {n} correlated series of length {cfg.count}")
    return result
