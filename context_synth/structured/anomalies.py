"""Schema records with a fixed fraction of injected anomalies."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Callable, Optional

from pydantic import BaseModel, Field, field_validator

from context_synth.core.field_inference import FieldInferenceGenerator
from context_synth.core.random_source import RandomSource
from context_synth.core.schema import FieldType, SchemaSpec
from context_synth.structured.base import coerce_schema, ensure_source, resolve_config

logger = logging.getLogger(__name__)

INVALID_EMAIL = "invalid-email-format"
IMPLAUSIBLE_DATE = datetime(1900, 1, 1)

Injector = Callable[[dict[str, Any], SchemaSpec, RandomSource], None]


def _extreme_values(record: dict[str, Any], schema: SchemaSpec, src: RandomSource) -> None:
    for name, field_type in schema.items():
        value = record.get(name)
        if value is None or isinstance(value, bool):
            continue
        grow = src.random_bool()
        if field_type is FieldType.INTEGER:
            record[name] = value * 10 if grow else value // 10
        elif field_type is FieldType.REAL:
            record[name] = value * 10 if grow else value / 10


def _missing_data(record: dict[str, Any], schema: SchemaSpec, src: RandomSource) -> None:
    if schema:
        record[src.choice(list(schema))] = None


def _inconsistent_patterns(
    record: dict[str, Any], schema: SchemaSpec, src: RandomSource
) -> None:
    for name, field_type in schema.items():
        if field_type is FieldType.TEXT and "email" in name.lower():
            record[name] = INVALID_EMAIL
        elif field_type is FieldType.TIMESTAMP:
            record[name] = IMPLAUSIBLE_DATE


ANOMALY_INJECTORS: dict[str, Injector] = {
    "extreme_values": _extreme_values,
    "missing_data": _missing_data,
    "inconsistent_patterns": _inconsistent_patterns,
}


class AnomalyConfig(BaseModel):
    record_schema: SchemaSpec = Field(
        default_factory=dict, description="Schema of every generated record"
    )
    count: int = Field(default=100, ge=0)
    anomaly_rate: float = Field(default=0.05, ge=0.0, le=1.0)
    anomaly_types: list[str] = Field(default_factory=lambda: list(ANOMALY_INJECTORS))

    @field_validator("record_schema", mode="before")
    @classmethod
    def _parse_schema(cls, value: Any) -> SchemaSpec:
        return coerce_schema(value)

    @field_validator("anomaly_types")
    @classmethod
    def _check_types(cls, value: list[str]) -> list[str]:
        if not value:
            raise ValueError("anomaly_types cannot be empty")
        unknown = [name for name in value if name not in ANOMALY_INJECTORS]
        if unknown:
            raise ValueError(f"Unknown anomaly types: {unknown}")
        return value

    @property
    def anomaly_count(self) -> int:
        """``round(count * anomaly_rate)`` with halves rounded up."""
        return math.floor(self.count * self.anomaly_rate + 0.5)


@dataclass(frozen=True)
class AnomalyRecord:
    data: dict[str, Any]
    is_anomaly: bool
    anomaly_type: Optional[str]
    index: int

    def to_map(self) -> dict[str, Any]:
        return {
            "data": dict(self.data),
            "is_anomaly": self.is_anomaly,
            "anomaly_type": self.anomaly_type,
            "index": self.index,
        }


def generate_with_anomalies(
    config: Optional[AnomalyConfig] = None,
    *,
    source: Optional[RandomSource] = None,
    **options: Any,
) -> list[AnomalyRecord]:
    """Generate ``count`` records, exactly ``anomaly_count`` of them corrupted.

    Anomalous indices are drawn uniformly without replacement. Each one gets
    a single anomaly type picked uniformly from ``anomaly_types``:

    - ``extreme_values`` multiplies or divides each numeric field by 10
      (coin flip per field; integers use floor division)
    - ``missing_data`` sets one random field to ``None``
    - ``inconsistent_patterns`` overwrites text fields named like ``email``
      with an invalid address and every timestamp with 1900-01-01
    """
    cfg = resolve_config(AnomalyConfig, config, options)
    src = ensure_source(source)
    fields = FieldInferenceGenerator(src)

    anomalous = set(src.sample_indices(cfg.count, cfg.anomaly_count))
    records: list[AnomalyRecord] = []
    for index in range(cfg.count):
        data = fields.generate(cfg.record_schema)
        if index not in anomalous:
            records.append(AnomalyRecord(data, False, None, index))
            continue
        kind = src.choice(cfg.anomaly_types)
        ANOMALY_INJECTORS[kind](data, cfg.record_schema, src)
        records.append(AnomalyRecord(data, True, kind, index))

    logger.info(f"Generated {cfg.count} records with {len(anomalous)} anomalies")
    return records
