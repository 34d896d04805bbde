"""Determinism verification for written blueprints."""

from __future__ import annotations

import filecmp
import tempfile
from dataclasses import dataclass, field
from pathlib import Path

from blueprint.write import BLUEPRINT_JSON, build_project_blueprint, write_blueprint
from config.loader import load_config


@dataclass(frozen=True)
class DeterminismResult:
    ok: bool
    mismatches: tuple[str, ...] = field(default_factory=tuple)


def verify_blueprint(*, config_path: Path, blueprint_path: Path) -> DeterminismResult:
    """Verify that a written blueprint matches a fresh run of its config.

    Regenerates the blueprint into a temporary directory and compares it
    byte-for-byte with ``blueprint_path``. Randomized topologies must reproduce
    the same edges for the same seed, so any difference is a mismatch.

    Args:
        config_path: Config file the blueprint was generated from.
        blueprint_path: Previously written blueprint JSON.

    Returns:
        DeterminismResult with ok status and the mismatched path, if any.

    Raises:
        FileNotFoundError: If blueprint_path does not exist.
        ConfigurationError: If the config cannot be loaded or built.
    """
    if not blueprint_path.is_file():
        msg = f"Blueprint file does not exist: {blueprint_path}"
        raise FileNotFoundError(msg)

    config = load_config(config_path)
    with tempfile.TemporaryDirectory() as temp_dir:
        regenerated = write_blueprint(
            Path(temp_dir) / BLUEPRINT_JSON, build_project_blueprint(config)
        )
        same = filecmp.cmp(blueprint_path, regenerated, shallow=False)

    mismatches = () if same else (str(blueprint_path),)
    return DeterminismResult(ok=same, mismatches=mismatches)
