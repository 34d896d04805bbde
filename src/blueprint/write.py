"""Build project blueprints from a config and write them as deterministic JSON."""

from __future__ import annotations

from typing import TYPE_CHECKING

import orjson
from loguru import logger

from blueprint.partition import partition
from graph.model import DependencyGraph
from graph.topologies import DependencyEdge, generate

if TYPE_CHECKING:
    from pathlib import Path

    from blueprint.models import ProjectBlueprint
    from config.models import GenerationConfig

BLUEPRINT_JSON = "blueprint.json"


def generate_edges(config: GenerationConfig) -> list[DependencyEdge]:
    """Run every configured topology pass and concatenate their edges in order."""
    edges: list[DependencyEdge] = []
    for topology in config.topologies:
        edges.extend(generate(topology.kind, topology.parameters, config.num_modules))
    return edges


def build_project_blueprint(config: GenerationConfig) -> ProjectBlueprint:
    """Build the project blueprint for one generation run.

    Topology passes run first, then explicit and generated edges are merged
    into the dependency graph, and only then is code mass partitioned.

    Args:
        config: Validated configuration snapshot

    Returns:
        ProjectBlueprint with one ModuleBlueprint per module.

    Raises:
        ConfigurationError: If a topology parameter, edge endpoint or
            code-mass total is invalid.
    """
    graph = DependencyGraph.build(
        config.explicit_edges(),
        generate_edges(config),
        config.num_modules,
    )
    blueprint = partition(config, graph)

    if blueprint.has_circular_dependencies():
        logger.warning(
            "circular dependencies between modules: {}",
            graph.find_cycles(),
        )

    return blueprint


def blueprint_bytes(blueprint: ProjectBlueprint) -> bytes:
    opts = orjson.OPT_SORT_KEYS | orjson.OPT_INDENT_2
    return orjson.dumps(blueprint.to_dict(), option=opts)


def write_blueprint(path: Path, blueprint: ProjectBlueprint) -> Path:
    """Write ``blueprint`` as sorted-key JSON; identical configs give identical bytes."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(blueprint_bytes(blueprint))
    return path


__all__ = [
    "BLUEPRINT_JSON",
    "blueprint_bytes",
    "build_project_blueprint",
    "generate_edges",
    "write_blueprint",
]
