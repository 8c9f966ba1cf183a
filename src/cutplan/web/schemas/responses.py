"""Pydantic response schemas for the REST API."""

from typing import Any

from pydantic import BaseModel, Field


class OptimizedBoardSchema(BaseModel):
    """One finished board."""

    stock_length: float = Field(..., description="Board length in inches")
    cuts: list[float] = Field(..., description="Piece lengths in placement order")
    remaining_waste: float = Field(..., description="Unused length")
    scrap_remaining: float = Field(..., description="Reusable part of the leftover")
    waste_remaining: float = Field(..., description="Waste part of the leftover")
    source: str = Field(..., description="'scrap' or 'new'")


class OptimizeResponse(BaseModel):
    """Response for a single optimizer run."""

    boards: list[OptimizedBoardSchema] = Field(
        default_factory=list, description="Scrap boards first, then new boards"
    )
    unassigned: list[float] = Field(
        default_factory=list, description="Piece lengths that could not be placed"
    )
    new_board_count: int = Field(default=0, description="Boards to buy")
    scrap_board_count: int = Field(default=0, description="Scrap boards used")


class ProjectPlanResponse(BaseModel):
    """Response for project planning."""

    name: str = Field(..., description="Project name")
    is_complete: bool = Field(..., description="Whether every piece was placed")
    result: dict[str, Any] = Field(
        ..., description="Shopping list, recap, diagrams and unplaced pieces"
    )


class ValidationIssueSchema(BaseModel):
    """One validation error or warning."""

    path: str = Field(..., description="JSON path to the field")
    message: str = Field(..., description="Description of the issue")
    suggestion: str | None = Field(default=None, description="Suggested fix")


class ValidationResultSchema(BaseModel):
    """Response for configuration validation."""

    is_valid: bool = Field(..., description="Whether configuration is valid")
    exit_code: int = Field(..., description="0 valid, 1 errors, 2 warnings")
    errors: list[ValidationIssueSchema] = Field(
        default_factory=list, description="Validation errors"
    )
    warnings: list[ValidationIssueSchema] = Field(
        default_factory=list, description="Validation warnings"
    )


class StockProfileSchema(BaseModel):
    """A stock profile in the catalog."""

    id: str = Field(..., description="Profile identifier")
    name: str = Field(..., description="Display name")
    allowed_lengths: list[float] = Field(..., description="Purchasable lengths")
    kerf: float = Field(..., description="Saw kerf in inches")


class StockProfileListSchema(BaseModel):
    """Response for profile listing."""

    profiles: list[StockProfileSchema] = Field(..., description="Catalog profiles")


class TemplateListItemSchema(BaseModel):
    """Single template in the list."""

    name: str = Field(..., description="Template name")
    description: str = Field(..., description="Template description")


class TemplateListSchema(BaseModel):
    """Response for template listing."""

    templates: list[TemplateListItemSchema] = Field(
        ..., description="Available templates"
    )


class TemplateContentSchema(BaseModel):
    """Response for template content."""

    name: str = Field(..., description="Template name")
    description: str = Field(..., description="Template description")
    content: dict[str, Any] = Field(..., description="Project configuration content")


class ErrorResponseSchema(BaseModel):
    """Standard error response."""

    error: str = Field(..., description="Error message")
    error_type: str = Field(..., description="Error type identifier")
    details: list[dict[str, Any]] | dict[str, Any] | None = Field(
        default=None, description="Additional error details"
    )
