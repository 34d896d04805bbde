"""Partition configured code mass across modules.

Every dimension is split with the same rule: each module gets
``total // parts`` and the first ``total % parts`` modules (lowest indices) get
one more, so shares always sum to the configured total and differ by at most
one.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from loguru import logger

from blueprint.models import ModuleBlueprint, ProjectBlueprint
from errors import ConfigurationError
from utils import module_name

if TYPE_CHECKING:
    from config.models import GenerationConfig
    from graph.model import DependencyGraph

# Per-project totals split across every module, keyed by config field name.
CODE_MASS_FIELDS = (
    "java_package_count",
    "java_class_count",
    "java_method_count",
    "kotlin_package_count",
    "kotlin_class_count",
)

# Counts that must also be non-negative but are not split across all modules.
ANDROID_FIELDS = (
    "android_modules",
    "num_activities_per_android_module",
)


def split_evenly(total: int, parts: int, *, name: str = "total") -> list[int]:
    """Split ``total`` units into ``parts`` shares, remainder to the lowest indices.

    Examples:
        >>> split_evenly(10, 4)
        [3, 3, 2, 2]
        >>> split_evenly(0, 3)
        [0, 0, 0]

    Raises:
        ConfigurationError: If ``total`` is negative or not an integer, or if
            a positive total has no parts to go to.
    """
    _check_count(name, total)
    if parts < 0:
        msg = f"cannot split {name} into {parts} parts"
        raise ConfigurationError(msg)
    if parts == 0:
        if total:
            msg = f"cannot split {name}={total} across 0 modules"
            raise ConfigurationError(msg)
        return []

    per_part, remainder = divmod(total, parts)
    return [per_part + 1 if i < remainder else per_part for i in range(parts)]


def _check_count(name: str, value: object) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        msg = f"{name} must be a non-negative integer but {value!r} was given"
        raise ConfigurationError(msg)
    if value < 0:
        msg = f"{name} must be a non-negative integer but {value} was given"
        raise ConfigurationError(msg)


def _validate_totals(config: GenerationConfig, graph: DependencyGraph) -> None:
    """Check every input up front so no partial blueprint is ever built."""
    for field_name in (*CODE_MASS_FIELDS, *ANDROID_FIELDS):
        _check_count(field_name, getattr(config, field_name))

    if config.android_modules > config.num_modules:
        msg = (
            f"android_modules must not exceed num_modules ({config.num_modules}) "
            f"but {config.android_modules} was given"
        )
        raise ConfigurationError(msg)

    if graph.num_modules != config.num_modules:
        msg = (
            f"graph has {graph.num_modules} modules but the config "
            f"declares {config.num_modules}"
        )
        raise ConfigurationError(msg)


def android_indices(num_modules: int, android_modules: int) -> range:
    """Android modules are the last ``android_modules`` indices."""
    return range(num_modules - android_modules, num_modules)


def partition(config: GenerationConfig, graph: DependencyGraph) -> ProjectBlueprint:
    """Build one ``ModuleBlueprint`` per module from ``config`` and ``graph``.

    Raises:
        ConfigurationError: If any total is negative or non-numeric, or the
            graph does not match the configured module count. Raised before
            any blueprint is built.
    """
    _validate_totals(config, graph)

    num_modules = config.num_modules
    shares: dict[str, list[int]] = {}
    for field_name in CODE_MASS_FIELDS:
        shares[field_name] = split_evenly(
            getattr(config, field_name), num_modules, name=field_name
        )
        logger.debug("{} shares: {}", field_name, shares[field_name])

    android = android_indices(num_modules, config.android_modules)
    activity_total = config.android_modules * config.num_activities_per_android_module
    activity_shares = dict(
        zip(
            android,
            split_evenly(activity_total, len(android), name="activities"),
            strict=True,
        )
    )

    modules = tuple(
        ModuleBlueprint(
            index=index,
            name=module_name(index),
            is_android=index in activity_shares,
            dependencies=graph.dependencies_of(index),
            dependents=graph.dependents_of(index),
            activity_count=activity_shares.get(index, 0),
            product_flavors=config.product_flavors,
            build_types=config.build_types,
            **{field_name: shares[field_name][index] for field_name in CODE_MASS_FIELDS},
        )
        for index in range(num_modules)
    )

    return ProjectBlueprint(config=config, graph=graph, modules=modules)


__all__ = [
    "CODE_MASS_FIELDS",
    "android_indices",
    "partition",
    "split_evenly",
]
