"""Configuration validation endpoint."""

from fastapi import APIRouter

from cutplan.application.config import load_config_from_dict, validate_config
from cutplan.web.schemas.requests import ConfigValidateRequest
from cutplan.web.schemas.responses import ValidationIssueSchema, ValidationResultSchema

router = APIRouter(prefix="/validate", tags=["validate"])


@router.post("", response_model=ValidationResultSchema)
async def validate_configuration(
    request: ConfigValidateRequest,
) -> ValidationResultSchema:
    """Validate a project configuration without planning it.

    Schema errors are reported as 422 by the ConfigError handler; catalog
    errors and advisories are returned in the body.
    """
    config = load_config_from_dict(request.config)
    result = validate_config(config)

    return ValidationResultSchema(
        is_valid=result.is_valid,
        exit_code=result.exit_code,
        errors=[
            ValidationIssueSchema(path=e.path, message=e.message) for e in result.errors
        ],
        warnings=[
            ValidationIssueSchema(
                path=w.path, message=w.message, suggestion=w.suggestion
            )
            for w in result.warnings
        ],
    )
