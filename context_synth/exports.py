"""Render generated records as CSV, JSON or SQL ``INSERT`` statements.

Records may be plain mappings or entities exposing ``to_map()``. Column order
follows the keys of the first record.
"""

from __future__ import annotations

import json
import logging
from datetime import date, datetime
from pathlib import Path
from typing import Any, Iterable, Mapping

import pandas as pd

logger = logging.getLogger(__name__)

EXPORT_FORMATS = ("csv", "json", "sql")


def to_rows(records: Iterable[Any]) -> list[dict[str, Any]]:
    rows = []
    for record in records:
        if isinstance(record, Mapping):
            rows.append(dict(record))
        elif callable(getattr(record, "to_map", None)):
            rows.append(record.to_map())
        else:
            raise TypeError(
                f"Records must be mappings or expose to_map(), got {type(record).__name__}"
            )
    return rows


def _json_default(value: Any) -> Any:
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    if callable(getattr(value, "to_map", None)):
        return value.to_map()
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def _flat(value: Any) -> Any:
    """Scalar form of a value for a tabular cell."""
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    if isinstance(value, (list, tuple, dict)):
        return json.dumps(value, default=_json_default, ensure_ascii=False)
    return value


def _sql_literal(value: Any) -> str:
    if value is None:
        return "NULL"
    if isinstance(value, bool):
        return "TRUE" if value else "FALSE"
    if isinstance(value, (int, float)):
        return repr(value)
    text = str(_flat(value))
    return "'" + text.replace("'", "''") + "'"


def export_csv(records: Iterable[Any]) -> str:
    rows = to_rows(records)
    if not rows:
        return ""
    df = pd.DataFrame([{key: _flat(value) for key, value in row.items()} for row in rows])
    return df.to_csv(index=False)


def export_json(records: Iterable[Any]) -> str:
    return json.dumps(to_rows(records), default=_json_default, indent=2, ensure_ascii=False)


def export_sql(records: Iterable[Any], table_name: str = "data") -> str:
    """One ``INSERT INTO`` statement per record; empty input gives ``""``."""
    rows = to_rows(records)
    if not rows:
        return ""
    columns = list(rows[0])
    column_list = ", ".join(columns)
    lines = []
    for row in rows:
        values = ", ".join(_sql_literal(row.get(column)) for column in columns)
        lines.append(f"INSERT INTO {table_name} ({column_list}) VALUES ({values});")
    return "\n".join(lines) + "\n"


def export_records(records: Iterable[Any], to: str = "json", table_name: str = "data") -> str:
    """Render ``records`` in the named format.

    Unknown format names fall back to JSON.

    Examples
    --------
    >>> print(export_records([{"id": 1, "name": "O'Neil"}], to="sql", table_name="users"))
    INSERT INTO users (id, name) VALUES (1, 'O''Neil');
    <BLANKLINE>
    """
    fmt = to.strip().lower()
    if fmt == "csv":
        return export_csv(records)
    if fmt == "sql":
        return export_sql(records, table_name)
    if fmt != "json":
        logger.warning(f"Unknown export format '{to}', falling back to json")
    return export_json(records)


def write_export(text: str, output_path: str | Path) -> Path:
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(text, encoding="utf-8")
    logger.info(f"Export written to {output_path}")
    return output_path
