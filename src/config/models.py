from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel

from errors import ConfigurationError
from graph.topologies import DependencyEdge, TopologyKind, validate_parameters


class TopologyConfig(BaseModel):
    """One topology pass: its algorithm plus algorithm-specific parameters.

    Keys other than ``type`` are kept as string-valued parameters, e.g.
    ``{"type": "random_rectangle", "width": "3", "seed": "7"}``.
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True, frozen=True)

    kind: TopologyKind = Field(alias="type", description="Topology algorithm")

    @field_validator("kind", mode="before")
    @classmethod
    def normalize_kind(cls, v: Any) -> Any:
        """Accept ``"RANDOM"``, ``"random"`` and ``"random-connected"`` alike."""
        if isinstance(v, str):
            return v.strip().lower().replace("-", "_")
        return v

    @property
    def parameters(self) -> dict[str, str]:
        extra = self.model_extra or {}
        return {key: str(value) for key, value in extra.items()}

    @model_validator(mode="after")
    def validate_topology_parameters(self) -> TopologyConfig:
        """Reject missing or malformed parameters before any edge is generated."""
        validate_parameters(self.kind, self.parameters)
        return self


class DependencyConfig(BaseModel):
    """An explicitly declared edge: module ``to`` depends on module ``from``."""

    model_config = ConfigDict(extra="forbid", populate_by_name=True, frozen=True)

    from_index: int = Field(alias="from", description="Module depended upon")
    to_index: int = Field(alias="to", description="Dependent module")

    @property
    def edge(self) -> DependencyEdge:
        return DependencyEdge(self.from_index, self.to_index)


class GenerationConfig(BaseModel):
    """Configuration snapshot for one generation run.

    Field names follow the generator's JSON format (camelCase), and numeric
    strings such as ``"5"`` are accepted for numeric fields.
    """

    model_config = ConfigDict(
        extra="forbid",
        populate_by_name=True,
        alias_generator=to_camel,
        frozen=True,
    )

    project_name: str = Field(default="genny", description="Generated project name")
    root: str = Field(
        default="./modules/",
        description="Output root used by the file-writing collaborator",
    )
    gradle_version: str | None = Field(default=None)
    android_gradle_plugin_version: str | None = Field(default=None)
    kotlin_version: str | None = Field(default=None)
    all_methods: int | None = Field(
        default=None,
        description="Total method budget, passed through unchanged",
    )

    num_modules: int = Field(gt=0, description="Number of modules to generate")
    java_package_count: int = Field(default=0)
    java_class_count: int = Field(default=0)
    java_method_count: int = Field(default=0)
    kotlin_package_count: int = Field(default=0)
    kotlin_class_count: int = Field(default=0)
    android_modules: int = Field(
        default=0,
        description="How many modules (the highest indices) are Android modules",
    )
    num_activities_per_android_module: int = Field(default=0)

    product_flavors: list[int] | None = Field(
        default=None,
        description="Flavor counts per dimension, passed through unchanged",
    )
    build_types: int | None = Field(
        default=None,
        description="Build type count, passed through unchanged",
    )

    topologies: list[TopologyConfig] = Field(
        default_factory=list,
        description="Topology passes; their edges are concatenated in order",
    )
    dependencies: list[DependencyConfig] = Field(
        default_factory=list,
        description="Explicit edges merged ahead of generated edges",
    )

    @model_validator(mode="after")
    def validate_android_modules(self) -> GenerationConfig:
        if self.android_modules > self.num_modules:
            msg = (
                f"androidModules must not exceed numModules ({self.num_modules}) "
                f"but {self.android_modules} was given"
            )
            raise ConfigurationError(msg)
        return self

    def explicit_edges(self) -> list[DependencyEdge]:
        return [dependency.edge for dependency in self.dependencies]

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


__all__ = ["DependencyConfig", "GenerationConfig", "TopologyConfig"]
