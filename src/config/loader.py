"""Load generation configs from JSON or TOML files."""

from __future__ import annotations

import tomllib
from typing import TYPE_CHECKING, Any

import orjson
from pydantic import ValidationError

from config.models import GenerationConfig
from errors import ConfigurationError

if TYPE_CHECKING:
    from pathlib import Path

SAMPLE_CONFIG = """\
{
  "projectName": "genny",
  "root": "./modules/",
  "gradleVersion": "4.3.1",
  "androidGradlePluginVersion": "3.0.1",
  "kotlinVersion": "1.1.60",
  "numModules": "5",
  "allMethods": "4000",
  "javaPackageCount": "20",
  "javaClassCount": "8",
  "javaMethodCount": "2000",
  "kotlinPackageCount": "20",
  "kotlinClassCount": "8",
  "androidModules": "2",
  "numActivitiesPerAndroidModule": "8",
  "productFlavors": [
    2, 3
  ],
  "topologies": [
    {"type": "random", "seed": "2"}
  ],
  "dependencies": [
    {"from": 3, "to": 2},
    {"from": 4, "to": 2},
    {"from": 4, "to": 3}
  ],
  "buildTypes": 6
}
"""


def parse_config(data: Any, *, source: str = "<config>") -> GenerationConfig:
    """Validate already-decoded config data.

    Raises:
        ConfigurationError: If the data does not describe a valid config.
    """
    if not isinstance(data, dict):
        msg = f"Invalid config in {source}: expected an object at the top level"
        raise ConfigurationError(msg)

    try:
        return GenerationConfig.model_validate(data)
    except ValidationError as e:
        msg = f"Invalid config in {source}: {e}"
        raise ConfigurationError(msg) from e


def parse_config_text(text: str, *, source: str = "<config>") -> GenerationConfig:
    """Decode and validate a JSON config document."""
    try:
        data = orjson.loads(text)
    except orjson.JSONDecodeError as e:
        msg = f"Invalid JSON in {source}: {e}"
        raise ConfigurationError(msg) from e
    return parse_config(data, source=source)


def load_config(config_path: Path) -> GenerationConfig:
    """Load a config file; ``.toml`` files are read as TOML, anything else as JSON."""
    if not config_path.is_file():
        msg = f"Config file not found: {config_path}"
        raise ConfigurationError(msg)

    if config_path.suffix == ".toml":
        try:
            with config_path.open("rb") as f:
                data = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            msg = f"Invalid TOML in {config_path}: {e}"
            raise ConfigurationError(msg) from e
        return parse_config(data, source=str(config_path))

    return parse_config_text(
        config_path.read_text(encoding="utf-8"), source=str(config_path)
    )


def sample_config() -> GenerationConfig:
    return parse_config_text(SAMPLE_CONFIG, source="sample config")


__all__ = [
    "SAMPLE_CONFIG",
    "load_config",
    "parse_config",
    "parse_config_text",
    "sample_config",
]
