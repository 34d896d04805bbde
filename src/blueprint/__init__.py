"""Module blueprints for module-poet projects."""

from blueprint.models import ModuleBlueprint, ProjectBlueprint
from blueprint.partition import partition, split_evenly
from blueprint.write import build_project_blueprint, write_blueprint

__all__ = [
    "ModuleBlueprint",
    "ProjectBlueprint",
    "build_project_blueprint",
    "partition",
    "split_evenly",
    "write_blueprint",
]
