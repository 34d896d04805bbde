"""Blueprint records handed to the file-writing collaborator.

A ``ModuleBlueprint`` is the ready-to-render description of one module: its
dependency edges and its share of the configured code mass. A
``ProjectBlueprint`` owns the dependency graph and one module blueprint per
index, in index order.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, ConfigDict, Field

from graph.topologies import DependencyEdge  # noqa: TC001

if TYPE_CHECKING:
    from config.models import GenerationConfig
    from graph.model import DependencyGraph


class ModuleBlueprint(BaseModel):
    """Dependencies and code-mass allocation for a single module."""

    model_config = ConfigDict(frozen=True)

    index: int
    name: str
    is_android: bool = False
    dependencies: list[DependencyEdge] = Field(
        default_factory=list,
        description="Edges where this module is the `to` endpoint",
    )
    dependents: list[DependencyEdge] = Field(
        default_factory=list,
        description="Edges where this module is the `from` endpoint",
    )
    java_package_count: int = 0
    java_class_count: int = 0
    java_method_count: int = 0
    kotlin_package_count: int = 0
    kotlin_class_count: int = 0
    activity_count: int = 0
    product_flavors: list[int] | None = None
    build_types: int | None = None

    @property
    def dependency_indices(self) -> list[int]:
        """Distinct modules this module depends on, ascending."""
        return sorted({edge.from_index for edge in self.dependencies})


@dataclass(frozen=True)
class ProjectBlueprint:
    config: GenerationConfig
    graph: DependencyGraph
    modules: tuple[ModuleBlueprint, ...]

    def has_circular_dependencies(self) -> bool:
        return self.graph.has_circular_dependencies()

    def describe(self) -> list[str]:
        return self.graph.describe()

    def to_dict(self) -> dict[str, Any]:
        return {
            "config": self.config.to_dict(),
            "graph": {
                "edges": [list(edge) for edge in self.graph.edges],
                "summary": self.graph.summary().model_dump(mode="json"),
            },
            "modules": [module.model_dump(mode="json") for module in self.modules],
        }


__all__ = ["ModuleBlueprint", "ProjectBlueprint"]
