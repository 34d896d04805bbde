"""Configuration for module-poet generation runs."""

from config.loader import SAMPLE_CONFIG, load_config, parse_config, sample_config
from config.models import DependencyConfig, GenerationConfig, TopologyConfig
from errors import ConfigurationError

__all__ = [
    "SAMPLE_CONFIG",
    "ConfigurationError",
    "DependencyConfig",
    "GenerationConfig",
    "TopologyConfig",
    "load_config",
    "parse_config",
    "sample_config",
]
