"""Application layer - use cases and orchestration."""

from .commands import PlanProjectCommand, QuickPlanCommand
from .services import MaterialGroup, ProjectResult, generate_project_result

__all__ = [
    "MaterialGroup",
    "PlanProjectCommand",
    "ProjectResult",
    "QuickPlanCommand",
    "generate_project_result",
]
