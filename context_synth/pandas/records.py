"""Pandas DataFrame adapters for generated records and structured datasets."""

from typing import Any, Iterable, Mapping, Sequence

import pandas as pd  # type: ignore

from context_synth.exports import to_rows
from context_synth.structured.anomalies import AnomalyRecord
from context_synth.structured.graph import Graph
from context_synth.structured.time_series import TimeSeriesPoint


def records_to_dataframe(records: Iterable[Any]) -> pd.DataFrame:
    """Convert records (mappings or entities with ``to_map()``) to a DataFrame.

    Hierarchy nodes are accepted too; their ``children`` references are
    replaced by a ``child_count`` column.

    Example:
        >>> df = records_to_dataframe(generator.generate_many(schema, 100))
        >>> df.columns.tolist() == list(schema)
        True
    """
    rows = []
    for row in to_rows(records):
        if isinstance(row.get("children"), list):
            row["child_count"] = len(row.pop("children"))
        rows.append(row)
    return pd.DataFrame(rows)


def time_series_to_dataframe(points: Sequence[TimeSeriesPoint]) -> pd.DataFrame:
    """DataFrame with ``timestamp`` (datetime64) and ``value`` columns."""
    if not points:
        return pd.DataFrame(columns=["timestamp", "value"])
    df = pd.DataFrame(
        {"timestamp": [p.timestamp for p in points], "value": [p.value for p in points]}
    )
    df["timestamp"] = pd.to_datetime(df["timestamp"])
    return df


def correlated_series_to_dataframe(series: Mapping[str, Sequence[float]]) -> pd.DataFrame:
    """One column per series, in series order."""
    return pd.DataFrame({name: list(values) for name, values in series.items()})


def graph_to_dataframes(graph: Graph) -> tuple[pd.DataFrame, pd.DataFrame]:
    """Return ``(nodes_df, edges_df)``.

    Node attributes are flattened into columns next to ``id`` and ``index``.
    """
    nodes_df = pd.DataFrame(
        [{"id": n.id, "index": n.index, **n.attributes} for n in graph.nodes],
        columns=None if graph.nodes else ["id", "index"],
    )
    edges_df = pd.DataFrame(
        [e.to_map() for e in graph.edges],
        columns=None if graph.edges else ["id", "source", "target", "weight", "directed"],
    )
    return nodes_df, edges_df


def anomalies_to_dataframe(records: Sequence[AnomalyRecord]) -> pd.DataFrame:
    """Record fields plus ``index``, ``is_anomaly`` and ``anomaly_type`` columns."""
    rows = [
        {
            **r.data,
            "index": r.index,
            "is_anomaly": r.is_anomaly,
            "anomaly_type": r.anomaly_type,
        }
        for r in records
    ]
    if not rows:
        return pd.DataFrame(columns=["index", "is_anomaly", "anomaly_type"])
    return pd.DataFrame(rows).sort_values("index").reset_index(drop=True)
