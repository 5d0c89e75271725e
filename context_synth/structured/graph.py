"""Degree-constrained random graphs."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Optional

from pydantic import BaseModel, Field, field_validator, model_validator

from context_synth.core.field_inference import FieldInferenceGenerator
from context_synth.core.random_source import RandomSource
from context_synth.core.schema import SchemaSpec
from context_synth.structured.base import coerce_schema, ensure_source, resolve_config

logger = logging.getLogger(__name__)

MIN_WEIGHT = 0.1
MAX_WEIGHT = 1.0


class GraphConfig(BaseModel):
    node_count: int = Field(default=10, ge=0)
    node_schema: SchemaSpec = Field(
        default_factory=dict, description="Attribute schema for every node"
    )
    connection_probability: float = Field(default=0.1, ge=0.0, le=1.0)
    min_degree: int = Field(default=1, ge=0)
    max_degree: int = Field(default=10, ge=0)
    directed: bool = False

    @field_validator("node_schema", mode="before")
    @classmethod
    def _parse_schema(cls, value: Any) -> SchemaSpec:
        return coerce_schema(value)

    @model_validator(mode="after")
    def _check_degrees(self) -> "GraphConfig":
        if self.min_degree > self.max_degree:
            raise ValueError("min_degree must be <= max_degree")
        return self


@dataclass(frozen=True)
class GraphNode:
    id: str
    index: int
    attributes: dict[str, Any] = field(default_factory=dict)

    def to_map(self) -> dict[str, Any]:
        return {"id": self.id, "index": self.index, "attributes": dict(self.attributes)}


@dataclass(frozen=True)
class GraphEdge:
    id: str
    source: str
    target: str
    weight: float
    directed: bool

    def to_map(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "source": self.source,
            "target": self.target,
            "weight": self.weight,
            "directed": self.directed,
        }


@dataclass(frozen=True)
class Graph:
    nodes: list[GraphNode]
    edges: list[GraphEdge]
    directed: bool

    @property
    def average_degree(self) -> float:
        if not self.nodes:
            return 0.0
        return len(self.edges) * (1 if self.directed else 2) / len(self.nodes)

    @property
    def metadata(self) -> dict[str, Any]:
        return {
            "node_count": len(self.nodes),
            "edge_count": len(self.edges),
            "directed": self.directed,
            "average_degree": self.average_degree,
        }

    def degrees(self) -> dict[str, int]:
        """Number of incident edges per node id (in plus out when directed)."""
        counts = {node.id: 0 for node in self.nodes}
        for edge in self.edges:
            counts[edge.source] += 1
            counts[edge.target] += 1
        return counts

    def to_map(self) -> dict[str, Any]:
        return {
            "nodes": [node.to_map() for node in self.nodes],
            "edges": [edge.to_map() for edge in self.edges],
            "metadata": self.metadata,
        }


def edge_key(i: int, j: int, directed: bool) -> tuple[int, int]:
    """Canonical deduplication key: ordered pair if directed, sorted pair otherwise."""
    if directed:
        return (i, j)
    return (i, j) if i < j else (j, i)


class _EdgeBuilder:
    def __init__(self, cfg: GraphConfig, src: RandomSource, nodes: list[GraphNode]) -> None:
        self.cfg = cfg
        self.src = src
        self.nodes = nodes
        self.degree = [0] * len(nodes)
        self.seen: set[tuple[int, int]] = set()
        self.edges: list[GraphEdge] = []

    def can_connect(self, i: int, j: int) -> bool:
        if i == j:
            return False
        if self.degree[i] >= self.cfg.max_degree or self.degree[j] >= self.cfg.max_degree:
            return False
        return edge_key(i, j, self.cfg.directed) not in self.seen

    def connect(self, i: int, j: int) -> None:
        self.seen.add(edge_key(i, j, self.cfg.directed))
        self.degree[i] += 1
        self.degree[j] += 1
        self.edges.append(
            GraphEdge(
                id=self.src.generate_id(),
                source=self.nodes[i].id,
                target=self.nodes[j].id,
                weight=round(self.src.random_double(MIN_WEIGHT, MAX_WEIGHT), 3),
                directed=self.cfg.directed,
            )
        )

    def random_pass(self) -> None:
        n = len(self.nodes)
        for i in range(n):
            for j in range(n):
                if self.degree[i] >= self.cfg.max_degree:
                    break
                if self.can_connect(i, j) and self.src.random_bool(
                    self.cfg.connection_probability
                ):
                    self.connect(i, j)

    def fill_min_degree(self) -> None:
        n = len(self.nodes)
        bound = n * self.cfg.max_degree
        for i in range(n):
            attempts = 0
            while (
                self.degree[i] < self.cfg.min_degree
                and len(self.edges) < bound
                and attempts < bound
            ):
                attempts += 1
                j = self.src.random_int(0, n - 1)
                if self.can_connect(i, j):
                    self.connect(i, j)


def generate_graph(
    config: Optional[GraphConfig] = None,
    *,
    source: Optional[RandomSource] = None,
    **options: Any,
) -> Graph:
    """Generate a random graph honouring degree bounds on a best-effort basis.

    Every ordered pair ``(i, j)`` is accepted with ``connection_probability``
    unless it would be a self-loop, a duplicate under :func:`edge_key`, or
    push either endpoint above ``max_degree``. Nodes left below
    ``min_degree`` are then connected to random targets until the minimum
    is met or the attempt budget ``node_count * max_degree`` runs out.
    Infeasible minimums are logged, not raised.
    """
    cfg = resolve_config(GraphConfig, config, options)
    src = ensure_source(source)
    fields = FieldInferenceGenerator(src)

    nodes = [
        GraphNode(id=src.generate_id(), index=i, attributes=fields.generate(cfg.node_schema))
        for i in range(cfg.node_count)
    ]
    builder = _EdgeBuilder(cfg, src, nodes)
    builder.random_pass()
    builder.fill_min_degree()

    short = sum(1 for d in builder.degree if d < cfg.min_degree)
    if short:
        logger.warning(f"{short} graph nodes remain below min_degree={cfg.min_degree}")

    graph = Graph(nodes=nodes, edges=builder.edges, directed=cfg.directed)
    logger.debug(f"Generated graph {graph.metadata}")
    return graph
