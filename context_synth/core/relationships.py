"""In-memory registry joining independently generated entity collections."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Iterable, Mapping, Optional

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Relationship:
    parent_type: str
    child_type: str
    parent_key: str
    child_key: str


def _as_row(item: Any) -> dict[str, Any]:
    if isinstance(item, Mapping):
        return dict(item)
    to_map = getattr(item, "to_map", None)
    if callable(to_map):
        return to_map()
    raise TypeError(
        f"Rows must be mappings or expose to_map(), got {type(item).__name__}"
    )


class RelationshipStore:
    """Rows per entity type plus declared parent/child key pairs.

    Joins are computed on demand by a linear scan of the child rows and are
    never cached. State lives until :meth:`reset` is called.
    """

    def __init__(self) -> None:
        self._rows: dict[str, list[dict[str, Any]]] = {}
        self._relationships: dict[tuple[str, str], Relationship] = {}

    def store(self, entity_type: str, rows: Iterable[Any]) -> None:
        """Store rows for ``entity_type``; a later call replaces earlier rows."""
        self._rows[entity_type] = [_as_row(row) for row in rows]
        logger.debug("Stored %d %s rows", len(self._rows[entity_type]), entity_type)

    def rows(self, entity_type: str) -> Optional[list[dict[str, Any]]]:
        return self._rows.get(entity_type)

    def types(self) -> list[str]:
        return list(self._rows)

    def declare_relationship(
        self, parent_type: str, child_type: str, parent_key: str, child_key: str
    ) -> None:
        self._relationships[(parent_type, child_type)] = Relationship(
            parent_type, child_type, parent_key, child_key
        )

    def relationship(self, parent_type: str, child_type: str) -> Optional[Relationship]:
        return self._relationships.get((parent_type, child_type))

    def related(
        self, parent_type: str, child_type: str, parent_id: Any
    ) -> list[dict[str, Any]]:
        """Child rows whose child key equals ``parent_id``.

        Returns an empty list when the relationship is undeclared or no child
        rows are stored.
        """
        relationship = self.relationship(parent_type, child_type)
        if relationship is None:
            return []
        children = self._rows.get(child_type)
        if children is None:
            return []
        return [row for row in children if row.get(relationship.child_key) == parent_id]

    def reset(self) -> None:
        self._rows.clear()
        self._relationships.clear()
