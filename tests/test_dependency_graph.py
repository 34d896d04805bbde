from __future__ import annotations

import pytest

from errors import ConfigurationError
from graph.model import DependencyGraph
from graph.topologies import TopologyKind, generate


def test_build_merges_explicit_edges_before_generated_and_keeps_duplicates() -> None:
    graph = DependencyGraph.build([(3, 2), (0, 1)], [(0, 1), (1, 2)], 4)

    assert list(graph.edges) == [(3, 2), (0, 1), (0, 1), (1, 2)]
    assert len(graph) == 4


@pytest.mark.parametrize("edge", [(0, 5), (5, 0), (-1, 2)])
def test_build_rejects_out_of_range_endpoints(edge: tuple[int, int]) -> None:
    with pytest.raises(ConfigurationError, match="valid indices are 0..4"):
        DependencyGraph.build([edge], [], 5)


def test_build_rejects_out_of_range_generated_edges() -> None:
    with pytest.raises(ConfigurationError):
        DependencyGraph.build([], generate(TopologyKind.LINEAR, {}, 6), 5)


def test_build_requires_modules() -> None:
    with pytest.raises(ConfigurationError, match="numModules"):
        DependencyGraph.build([], [], 0)


def test_dependencies_and_dependents_slices() -> None:
    graph = DependencyGraph.build([(4, 2)], [(0, 2), (2, 3), (0, 2)], 5)

    assert graph.dependencies_of(2) == [(4, 2), (0, 2), (0, 2)]
    assert graph.dependents_of(2) == [(2, 3)]
    assert graph.dependents_of(0) == [(0, 2), (0, 2)]
    assert graph.dependencies_of(1) == []


def test_cycle_is_reported_not_rejected() -> None:
    graph = DependencyGraph.build([(0, 1), (1, 2), (2, 0)], [], 3)

    assert graph.has_circular_dependencies() is True
    assert graph.find_cycles() == [[0, 1, 2]]


@pytest.mark.parametrize(
    ("kind", "parameters"),
    [
        (TopologyKind.FULL, {}),
        (TopologyKind.LINEAR, {}),
        (TopologyKind.STAR, {}),
        (TopologyKind.BINARY_TREE, {}),
        (TopologyKind.RECTANGLE, {"width": "3"}),
        (TopologyKind.RANDOM, {"seed": "4"}),
        (TopologyKind.RANDOM_CONNECTED_RECTANGLE, {"width": "2", "seed": "4"}),
    ],
)
def test_generated_topologies_are_acyclic(
    kind: TopologyKind, parameters: dict[str, str]
) -> None:
    graph = DependencyGraph.build([], generate(kind, parameters, 10), 10)

    assert graph.has_circular_dependencies() is False


def test_describe_lists_distinct_dependencies_in_index_order() -> None:
    graph = DependencyGraph.build([(3, 1)], [(0, 1), (0, 1), (1, 2)], 4)

    assert graph.describe() == [
        "module0 -> (none)",
        "module1 -> module0, module3",
        "module2 -> module1",
        "module3 -> (none)",
    ]


def test_summary_reports_fan_stats_and_top_modules() -> None:
    graph = DependencyGraph.build([], [(0, 1), (0, 2), (1, 2)], 3)

    summary = graph.summary()

    assert summary.node_count == 3
    assert summary.edge_count == 3
    assert summary.cycles == []
    assert summary.fan_in == {1: 1, 2: 2}
    assert summary.fan_out == {0: 2, 1: 1}
    assert summary.top_modules == [2, 1]


@pytest.mark.parametrize("edges", [[(-1, 2)], [(0, 1), (1, 3)]])
def test_constructor_range_checks_edges(edges: list[tuple[int, int]]) -> None:
    with pytest.raises(ConfigurationError, match="valid indices are 0..2"):
        DependencyGraph(3, edges)


def test_constructor_requires_modules() -> None:
    with pytest.raises(ConfigurationError, match="numModules"):
        DependencyGraph(0, [])
