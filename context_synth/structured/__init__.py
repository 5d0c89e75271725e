"""Structured dataset generators.

Each generator takes a flat pydantic config (or the same options as keyword
arguments) and returns a fully materialized result.
"""

from .anomalies import (
    ANOMALY_INJECTORS,
    AnomalyConfig,
    AnomalyRecord,
    generate_with_anomalies,
)
from .correlated import CorrelatedSeriesConfig, generate_correlated_series
from .graph import Graph, GraphConfig, GraphEdge, GraphNode, edge_key, generate_graph
from .hierarchy import HierarchyConfig, generate_hierarchy, root_count
from .time_series import TimeSeriesConfig, TimeSeriesPoint, generate_time_series

__all__ = [
    "ANOMALY_INJECTORS",
    "AnomalyConfig",
    "AnomalyRecord",
    "generate_with_anomalies",
    "CorrelatedSeriesConfig",
    "generate_correlated_series",
    "Graph",
    "GraphConfig",
    "GraphEdge",
    "GraphNode",
    "edge_key",
    "generate_graph",
    "HierarchyConfig",
    "generate_hierarchy",
    "root_count",
    "TimeSeriesConfig",
    "TimeSeriesPoint",
    "generate_time_series",
]
