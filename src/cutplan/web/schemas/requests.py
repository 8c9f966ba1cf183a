"""Pydantic request schemas for the REST API.

Engine payload fields accept both snake_case names and the camelCase aliases
used by browser clients; unknown keys are rejected. Lengths are not
range-checked here: the optimizer drops invalid entries itself. Counts are
capped at ``MAX_QUANTITY``.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from cutplan.domain.services.requirements import MAX_QUANTITY
from cutplan.domain.value_objects import MaterialType


class CutRequirementSchema(BaseModel):
    """A required piece length and its quantity."""

    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    length: float = Field(..., description="Piece length in inches")
    quantity: int = Field(..., le=MAX_QUANTITY, description="Number of pieces")
    material_type: MaterialType = Field(
        default=MaterialType.BOARD,
        alias="materialType",
        description="Material the piece is cut from",
    )


class StockSpecSchema(BaseModel):
    """Stock the optimizer may buy."""

    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    id: str = Field(default="", description="Profile identifier")
    name: str = Field(default="", description="Display name")
    material_type: MaterialType = Field(
        default=MaterialType.BOARD,
        alias="materialType",
        description="Board (optimized) or sheet (not optimized yet)",
    )
    allowed_lengths: list[float] = Field(
        default_factory=list,
        alias="allowedLengths",
        description="Purchasable board lengths in inches",
    )
    kerf: float = Field(default=0.125, description="Saw kerf in inches")


class ScrapBoardSchema(BaseModel):
    """Boards already on hand."""

    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    stock_length: float = Field(..., alias="stockLength", description="Board length")
    quantity: int = Field(..., le=MAX_QUANTITY, description="Number of boards")
    nominal_size_id: str | None = Field(
        default=None, alias="nominalSizeId", description="Profile id, if known"
    )


class OptimizeOptionsSchema(BaseModel):
    """Scrap on hand and the new board length preference."""

    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    scrap: list[ScrapBoardSchema] = Field(
        default_factory=list, description="Scrap on hand, used first"
    )
    preferred_max_length: float | None = Field(
        default=None,
        alias="preferredMaxLength",
        description="Soft preference for new board length",
    )


class OptimizeRequest(BaseModel):
    """Request for a single optimizer run."""

    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    required_cuts: list[CutRequirementSchema] = Field(
        ..., alias="requiredCuts", description="Pieces to cut"
    )
    stock_spec: StockSpecSchema = Field(
        ..., alias="stockSpec", description="Stock that may be purchased"
    )
    options: OptimizeOptionsSchema = Field(
        default_factory=OptimizeOptionsSchema,
        description="Scrap pool and length preference",
    )


class ProjectPlanRequest(BaseModel):
    """Request for planning a whole project."""

    model_config = ConfigDict(extra="forbid")

    config: dict[str, Any] = Field(..., description="Full project configuration JSON")
    use_scrap: bool | None = Field(
        default=None, description="Override the configuration's use_scrap"
    )


class ConfigValidateRequest(BaseModel):
    """Request for validating a configuration."""

    model_config = ConfigDict(extra="forbid")

    config: dict[str, Any] = Field(..., description="Project configuration JSON")
