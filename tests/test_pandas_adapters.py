"""Tests for pandas DataFrame adapters."""

from datetime import datetime

import pandas as pd

from context_synth.core.field_inference import FieldInferenceGenerator
from context_synth.core.random_source import RandomSource
from context_synth.pandas import (
    anomalies_to_dataframe,
    correlated_series_to_dataframe,
    graph_to_dataframes,
    records_to_dataframe,
    time_series_to_dataframe,
)
from context_synth.structured import (
    generate_correlated_series,
    generate_graph,
    generate_hierarchy,
    generate_time_series,
    generate_with_anomalies,
)


class TestRecordsToDataFrame:
    """Generated records convert with schema-ordered columns."""

    def test_columns_follow_schema_order(self):
        schema = {"name": "text", "age": "integer", "price": "real"}
        records = FieldInferenceGenerator(RandomSource(seed=1)).generate_many(schema, 10)
        df = records_to_dataframe(records)
        assert list(df.columns) == ["name", "age", "price"]
        assert len(df) == 10
        assert df["age"].between(18, 65).all()

    def test_hierarchy_children_become_counts(self):
        nodes = generate_hierarchy(total_nodes=10, source=RandomSource(seed=2))
        df = records_to_dataframe(nodes)
        assert "children" not in df.columns
        assert df["child_count"].sum() == df["parent_id"].notna().sum()
        # the original nodes keep their references
        assert all(isinstance(node["children"], list) for node in nodes)

    def test_empty(self):
        assert records_to_dataframe([]).empty


def test_time_series_to_dataframe():
    points = generate_time_series(start_date=datetime(2024, 1, 1), end_date=datetime(2024, 1, 5))
    df = time_series_to_dataframe(points)
    assert list(df.columns) == ["timestamp", "value"]
    assert pd.api.types.is_datetime64_any_dtype(df["timestamp"])
    assert df["timestamp"].is_monotonic_increasing
    assert time_series_to_dataframe([]).empty


def test_correlated_series_to_dataframe():
    data = generate_correlated_series(
        series_names=["a", "b"], correlation_matrix=[[1.0, 0.5], [0.5, 1.0]], count=20
    )
    df = correlated_series_to_dataframe(data)
    assert list(df.columns) == ["a", "b"]
    assert df.shape == (20, 2)


def test_graph_to_dataframes():
    graph = generate_graph(
        node_count=8, node_schema={"label": "text"}, connection_probability=0.4,
        source=RandomSource(seed=3),
    )
    nodes_df, edges_df = graph_to_dataframes(graph)
    assert list(nodes_df.columns) == ["id", "index", "label"]
    assert len(nodes_df) == 8
    assert len(edges_df) == len(graph.edges)
    assert set(edges_df["source"]) <= set(nodes_df["id"])


def test_graph_to_dataframes_empty():
    nodes_df, edges_df = graph_to_dataframes(generate_graph(node_count=0))
    assert nodes_df.empty and list(nodes_df.columns) == ["id", "index"]
    assert edges_df.empty and "weight" in edges_df.columns


def test_anomalies_to_dataframe():
    records = generate_with_anomalies(
        record_schema={"age": "integer"}, count=20, anomaly_rate=0.25,
        source=RandomSource(seed=4),
    )
    df = anomalies_to_dataframe(records)
    assert list(df.columns) == ["age", "index", "is_anomaly", "anomaly_type"]
    assert df["is_anomaly"].sum() == 5
    assert df.loc[~df["is_anomaly"], "anomaly_type"].isna().all()
