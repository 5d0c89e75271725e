"""Capacity-bounded random trees built depth first."""

from __future__ import annotations

import logging
import math
from typing import Any, Optional

from pydantic import BaseModel, Field, field_validator, model_validator

from context_synth.core.field_inference import FieldInferenceGenerator
from context_synth.core.random_source import RandomSource
from context_synth.core.schema import SchemaSpec
from context_synth.structured.base import coerce_schema, ensure_source, resolve_config

logger = logging.getLogger(__name__)

MAX_ROOTS = 5


class HierarchyConfig(BaseModel):
    node_schema: SchemaSpec = Field(
        default_factory=dict, description="Field schema generated for every node"
    )
    max_depth: int = Field(default=3, ge=1, description="Nodes have depth < max_depth")
    total_nodes: int = Field(default=20, ge=0, description="Upper bound on node count")
    min_children: int = Field(default=1, ge=0)
    max_children: int = Field(default=3, ge=0)

    @field_validator("node_schema", mode="before")
    @classmethod
    def _parse_schema(cls, value: Any) -> SchemaSpec:
        return coerce_schema(value)

    @model_validator(mode="after")
    def _check_children(self) -> "HierarchyConfig":
        if self.min_children > self.max_children:
            raise ValueError("min_children must be <= max_children")
        return self


def root_count(total_nodes: int) -> int:
    """``clamp(ceil(0.1 * total_nodes), 1, 5)``."""
    return min(MAX_ROOTS, max(1, math.ceil(0.1 * total_nodes)))


def generate_hierarchy(
    config: Optional[HierarchyConfig] = None,
    *,
    source: Optional[RandomSource] = None,
    **options: Any,
) -> list[dict[str, Any]]:
    """Generate a forest of nodes as a flat, creation-ordered list.

    Every node is a dict with ``id``, ``parent_id`` (``None`` for roots),
    ``depth`` and ``children`` plus the fields of ``node_schema``. The flat
    list owns the nodes; ``children`` holds references to other entries of
    the same list and is filled in after generation.
    """
    cfg = resolve_config(HierarchyConfig, config, options)
    src = ensure_source(source)
    fields = FieldInferenceGenerator(src)
    nodes: list[dict[str, Any]] = []

    def build(parent_id: Optional[str], depth: int) -> None:
        if len(nodes) >= cfg.total_nodes:
            return
        node = fields.generate(cfg.node_schema)
        node.update(id=src.generate_id(), parent_id=parent_id, depth=depth, children=[])
        nodes.append(node)
        if depth >= cfg.max_depth - 1:
            return
        for _ in range(src.random_int(cfg.min_children, cfg.max_children)):
            if len(nodes) >= cfg.total_nodes:
                break
            build(node["id"], depth + 1)

    for _ in range(root_count(cfg.total_nodes)):
        build(None, 0)

    index = {node["id"]: node for node in nodes}
    for node in nodes:
        parent = index.get(node["parent_id"]) if node["parent_id"] is not None else None
        if parent is not None:
            parent["children"].append(node)

    logger.debug(f"Generated hierarchy with {len(nodes)} nodes")
    return nodes
