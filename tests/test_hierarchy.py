"""Tests for hierarchical tree generation."""

import pytest

from context_synth.core.random_source import RandomSource
from context_synth.structured import HierarchyConfig, generate_hierarchy, root_count
from context_synth.validation import check_hierarchy_invariants


def test_default_tree_invariants():
    nodes = generate_hierarchy(
        max_depth=3,
        total_nodes=20,
        node_schema={"name": "text", "budget": "real"},
        source=RandomSource(seed=11),
    )
    assert 1 <= len(nodes) <= 20
    ids = {node["id"] for node in nodes}
    assert all(node["depth"] < 3 for node in nodes)
    assert any(node["parent_id"] is None for node in nodes)
    for node in nodes:
        if node["parent_id"] is not None:
            assert node["parent_id"] in ids
        assert isinstance(node["name"], str)
        assert isinstance(node["budget"], float)
    assert check_hierarchy_invariants(nodes, max_depth=3, total_nodes=20).ok


def test_parents_precede_children():
    nodes = generate_hierarchy(total_nodes=50, source=RandomSource(seed=3))
    position = {node["id"]: i for i, node in enumerate(nodes)}
    for i, node in enumerate(nodes):
        if node["parent_id"] is not None:
            assert position[node["parent_id"]] < i


def test_children_are_references_into_flat_list():
    nodes = generate_hierarchy(total_nodes=30, source=RandomSource(seed=8))
    by_id = {node["id"]: node for node in nodes}
    for node in nodes:
        for child in node["children"]:
            assert child["parent_id"] == node["id"]
            assert by_id[child["id"]] is child
    assert sum(len(node["children"]) for node in nodes) == sum(
        1 for node in nodes if node["parent_id"] is not None
    )


def test_fixed_fanout_builds_full_trees():
    nodes = generate_hierarchy(
        max_depth=3, total_nodes=100, min_children=2, max_children=2,
        source=RandomSource(seed=1),
    )
    # 5 roots, each with 2 children and 4 grandchildren
    assert len(nodes) == 35
    assert sum(1 for node in nodes if node["parent_id"] is None) == 5
    assert max(node["depth"] for node in nodes) == 2


def test_total_nodes_caps_output():
    nodes = generate_hierarchy(
        max_depth=6, total_nodes=7, min_children=3, max_children=3,
        source=RandomSource(seed=2),
    )
    assert len(nodes) == 7


def test_single_level_has_only_roots():
    nodes = generate_hierarchy(max_depth=1, total_nodes=40, source=RandomSource(seed=4))
    assert len(nodes) == 4
    assert all(node["parent_id"] is None and node["children"] == [] for node in nodes)


@pytest.mark.parametrize(
    "total, expected", [(0, 1), (1, 1), (10, 1), (11, 2), (20, 2), (45, 5), (1000, 5)]
)
def test_root_count_is_clamped(total, expected):
    assert root_count(total) == expected


def test_invalid_configuration_raises():
    with pytest.raises(ValueError):
        HierarchyConfig(min_children=3, max_children=1)
    with pytest.raises(ValueError):
        HierarchyConfig(max_depth=0)
    with pytest.raises(ValueError):
        HierarchyConfig(node_schema={"x": "uuid"})
