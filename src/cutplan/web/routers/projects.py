"""Project planning endpoint."""

from fastapi import APIRouter

from cutplan.application.config import load_config_from_dict
from cutplan.infrastructure import JsonExporter
from cutplan.web.dependencies import PlanCommandDep
from cutplan.web.schemas.requests import ProjectPlanRequest
from cutplan.web.schemas.responses import ProjectPlanResponse

router = APIRouter(prefix="/projects", tags=["projects"])


@router.post("/plan", response_model=ProjectPlanResponse)
async def plan_project(
    request: ProjectPlanRequest,
    command: PlanCommandDep,
) -> ProjectPlanResponse:
    """Plan a whole project from its configuration.

    Raises:
        ConfigError: If the configuration is invalid (handled as 422).
    """
    config = load_config_from_dict(request.config)
    result = command.execute(config, use_scrap=request.use_scrap)
    return ProjectPlanResponse(
        name=config.name,
        is_complete=result.is_complete,
        result=JsonExporter().to_dict(result),
    )
