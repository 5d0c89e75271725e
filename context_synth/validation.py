"""Checks that generated datasets honour their structural guarantees."""

from __future__ import annotations

import math
from collections import Counter
from dataclasses import dataclass
from typing import Any, Mapping, Sequence

import numpy as np
from scipy.stats import pearsonr

from context_synth.core.schema import matches_type, parse_schema
from context_synth.structured.anomalies import AnomalyRecord
from context_synth.structured.graph import Graph, edge_key
from context_synth.structured.time_series import TimeSeriesPoint


@dataclass(frozen=True)
class ValidationResult:
    ok: bool
    message: str = ""


def check_record_matches_schema(
    record: Mapping[str, Any], schema: Mapping[str, Any]
) -> ValidationResult:
    spec = parse_schema(schema)
    if set(record) != set(spec):
        return ValidationResult(
            False, f"keys differ: {sorted(set(record) ^ set(spec))}"
        )
    for name, field_type in spec.items():
        if not matches_type(record[name], field_type):
            return ValidationResult(
                False,
                f"field {name!r} has {type(record[name]).__name__}, expected {field_type.value}",
            )
    return ValidationResult(True, "record matches schema")


def check_graph_invariants(
    graph: Graph, *, min_degree: int = 0, max_degree: int | None = None
) -> ValidationResult:
    index = {node.id: node.index for node in graph.nodes}
    seen: set[tuple[int, int]] = set()
    for edge in graph.edges:
        if edge.source == edge.target:
            return ValidationResult(False, f"self-loop on {edge.source}")
        key = edge_key(index[edge.source], index[edge.target], graph.directed)
        if key in seen:
            return ValidationResult(False, f"duplicate edge {key}")
        seen.add(key)
        if not 0.1 <= edge.weight <= 1.0:
            return ValidationResult(False, f"edge weight out of range: {edge.weight}")

    for node_id, degree in graph.degrees().items():
        if degree < min_degree or (max_degree is not None and degree > max_degree):
            return ValidationResult(False, f"node {node_id} has degree {degree}")
    return ValidationResult(True, f"{len(graph.edges)} edges ok")


def check_hierarchy_invariants(
    nodes: Sequence[Mapping[str, Any]], *, max_depth: int, total_nodes: int
) -> ValidationResult:
    if len(nodes) > total_nodes:
        return ValidationResult(False, f"{len(nodes)} nodes exceeds {total_nodes}")
    ids = {node["id"] for node in nodes}
    roots = 0
    for node in nodes:
        if node["depth"] >= max_depth:
            return ValidationResult(False, f"node {node['id']} at depth {node['depth']}")
        if node["parent_id"] is None:
            roots += 1
        elif node["parent_id"] not in ids:
            return ValidationResult(False, f"dangling parent_id {node['parent_id']}")
    if nodes and roots == 0:
        return ValidationResult(False, "no root node")
    return ValidationResult(True, f"{len(nodes)} nodes, {roots} roots")


def check_series_correlation(
    x: Sequence[float], y: Sequence[float], expected: float, *, tolerance: float = 0.15
) -> ValidationResult:
    """Compare the Pearson correlation of two series against ``expected``.

    Parameters
    ----------
    x, y:
        Equal-length numeric series with at least two points each.
    expected:
        Target correlation coefficient.
    tolerance:
        Maximum absolute difference accepted between the sample and target.
    """
    xs = np.asarray(x, dtype=float)
    ys = np.asarray(y, dtype=float)
    if xs.shape != ys.shape or xs.size < 2:
        return ValidationResult(False, f"series shapes {xs.shape} and {ys.shape} not comparable")
    if not (np.isfinite(xs).all() and np.isfinite(ys).all()):
        return ValidationResult(False, "series contain non-finite values")
    if xs.std() == 0 or ys.std() == 0:
        return ValidationResult(False, "constant series has no correlation")
    r, _ = pearsonr(xs, ys)
    if abs(r - expected) > tolerance:
        return ValidationResult(
            False, f"correlation {r:.3f} outside {expected} +/- {tolerance}"
        )
    return ValidationResult(True, f"correlation {r:.3f}")


def check_anomaly_count(records: Sequence[AnomalyRecord], expected: int) -> ValidationResult:
    flagged = Counter(record.is_anomaly for record in records)[True]
    if flagged != expected:
        return ValidationResult(False, f"{flagged} anomalies, expected {expected}")
    for record in records:
        if not record.is_anomaly and record.anomaly_type is not None:
            return ValidationResult(False, f"clean record {record.index} has a type")
    return ValidationResult(True, f"{flagged} anomalies")


def check_strictly_increasing_timestamps(
    points: Sequence[TimeSeriesPoint],
) -> ValidationResult:
    for idx in range(1, len(points)):
        if points[idx].timestamp <= points[idx - 1].timestamp:
            return ValidationResult(False, f"timestamp not increasing at index {idx}")
    for point in points:
        if not math.isfinite(point.value):
            return ValidationResult(False, f"non-finite value at {point.timestamp}")
    return ValidationResult(True, f"{len(points)} points increasing")
