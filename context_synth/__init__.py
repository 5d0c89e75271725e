"""Context-aware synthetic data generation.

Records are generated from a field schema with values inferred from field
names, entities follow behavior archetypes and seasonal patterns, and
structured datasets (time series, trees, graphs, correlated series and
anomalous records) come from flat configuration models.
"""

from .core import (
    FieldInferenceGenerator,
    FieldType,
    GenerationContext,
    PatternEngine,
    RandomSource,
    RelationshipStore,
    parse_schema,
)
from .config import SynthSettings
from .exports import export_records
from .scenarios import EcommerceScenario
from .structured import (
    AnomalyConfig,
    CorrelatedSeriesConfig,
    GraphConfig,
    HierarchyConfig,
    TimeSeriesConfig,
    generate_correlated_series,
    generate_graph,
    generate_hierarchy,
    generate_time_series,
    generate_with_anomalies,
)

__all__ = [
    "FieldInferenceGenerator",
    "FieldType",
    "GenerationContext",
    "PatternEngine",
    "RandomSource",
    "RelationshipStore",
    "parse_schema",
    "SynthSettings",
    "export_records",
    "EcommerceScenario",
    "AnomalyConfig",
    "CorrelatedSeriesConfig",
    "GraphConfig",
    "HierarchyConfig",
    "TimeSeriesConfig",
    "generate_correlated_series",
    "generate_graph",
    "generate_hierarchy",
    "generate_time_series",
    "generate_with_anomalies",
]
