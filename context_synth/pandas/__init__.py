"""Pandas DataFrame adapters for generated data."""

from .records import (
    anomalies_to_dataframe,
    correlated_series_to_dataframe,
    graph_to_dataframes,
    records_to_dataframe,
    time_series_to_dataframe,
)

__all__ = [
    "records_to_dataframe",
    "time_series_to_dataframe",
    "correlated_series_to_dataframe",
    "graph_to_dataframes",
    "anomalies_to_dataframe",
]
