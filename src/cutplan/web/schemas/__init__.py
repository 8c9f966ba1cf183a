"""Pydantic schemas for the REST API."""

from cutplan.web.schemas.requests import (
    ConfigValidateRequest,
    CutRequirementSchema,
    OptimizeOptionsSchema,
    OptimizeRequest,
    ProjectPlanRequest,
    ScrapBoardSchema,
    StockSpecSchema,
)
from cutplan.web.schemas.responses import (
    ErrorResponseSchema,
    OptimizedBoardSchema,
    OptimizeResponse,
    ProjectPlanResponse,
    StockProfileListSchema,
    StockProfileSchema,
    TemplateContentSchema,
    TemplateListItemSchema,
    TemplateListSchema,
    ValidationIssueSchema,
    ValidationResultSchema,
)

__all__ = [
    # Requests
    "ConfigValidateRequest",
    "CutRequirementSchema",
    "OptimizeOptionsSchema",
    "OptimizeRequest",
    "ProjectPlanRequest",
    "ScrapBoardSchema",
    "StockSpecSchema",
    # Responses
    "ErrorResponseSchema",
    "OptimizedBoardSchema",
    "OptimizeResponse",
    "ProjectPlanResponse",
    "StockProfileListSchema",
    "StockProfileSchema",
    "TemplateContentSchema",
    "TemplateListItemSchema",
    "TemplateListSchema",
    "ValidationIssueSchema",
    "ValidationResultSchema",
]
