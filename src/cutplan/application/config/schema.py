"""Pydantic models for cut project configuration files.

A project file lists material groups (each a cut list on one kind of stock),
optional custom stock profiles, and the scrap already on hand.
"""

from __future__ import annotations

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    field_validator,
    model_validator,
)

from cutplan.domain.services.requirements import MAX_QUANTITY
from cutplan.domain.value_objects import MaterialType

# Supported schema versions for configuration files
# Version 1.0: Initial schema with groups, profiles and scrap
SUPPORTED_VERSIONS: frozenset[str] = frozenset({"1.0"})


class CutConfig(BaseModel):
    """A required piece length and its quantity.

    Attributes:
        length: Piece length in inches.
        quantity: Number of pieces (at least 1).
    """

    model_config = ConfigDict(extra="forbid")

    length: float = Field(..., gt=0, description="Piece length in inches")
    quantity: int = Field(
        default=1, ge=1, le=MAX_QUANTITY, description="Number of pieces"
    )


class ScrapBoardConfig(BaseModel):
    """Boards already on hand.

    Attributes:
        stock_length: Length of each board in inches.
        quantity: Number of boards of this length.
        nominal_size_id: Profile the boards belong to. When omitted the boards
            are offered to every board group.
    """

    model_config = ConfigDict(extra="forbid")

    stock_length: float = Field(..., gt=0, description="Board length in inches")
    quantity: int = Field(default=1, ge=1, le=MAX_QUANTITY)
    nominal_size_id: str | None = Field(
        default=None, description="Stock profile id (e.g. '2x4')"
    )


class StockProfileConfig(BaseModel):
    """A custom stock profile, added to or replacing a built-in one.

    Attributes:
        id: Profile identifier referenced by groups.
        name: Display name. Defaults to the id.
        allowed_lengths: Purchasable lengths in inches.
        kerf: Saw kerf in inches.
    """

    model_config = ConfigDict(extra="forbid")

    id: str = Field(..., min_length=1)
    name: str | None = None
    allowed_lengths: list[float] = Field(..., min_length=1)
    kerf: float = Field(default=0.125, ge=0, le=1.0)

    @field_validator("allowed_lengths")
    @classmethod
    def validate_lengths_positive(cls, v: list[float]) -> list[float]:
        """Ensure every purchasable length is positive."""
        for length in v:
            if length <= 0:
                raise ValueError(f"Stock lengths must be positive, got {length}")
        return v


class SheetPieceConfig(BaseModel):
    """A piece requested from sheet stock."""

    model_config = ConfigDict(extra="forbid")

    width: float = Field(..., gt=0)
    height: float = Field(..., gt=0)
    quantity: int = Field(default=1, ge=1)
    label: str = ""


class MaterialGroupConfig(BaseModel):
    """One cut list on one kind of stock.

    Attributes:
        id: Group identifier. Generated from the position when omitted.
        label: Display label (e.g. "legs").
        material_type: "board" (optimized) or "sheet" (recap only).
        board_spec_id: Stock profile id for board groups.
        preferred_max_length: New boards at or under this length are tried first.
        cuts: Required pieces for board groups.
        scrap: Scrap for this group only. Replaces project scrap when given.
        sheet_pieces: Required pieces for sheet groups.
        sheet_width: Stock sheet width for sheet groups.
        sheet_height: Stock sheet height for sheet groups.
        sheet_thickness: Stock sheet thickness label for sheet groups.
    """

    model_config = ConfigDict(extra="forbid")

    id: str | None = None
    label: str = Field(..., min_length=1)
    material_type: MaterialType = MaterialType.BOARD
    board_spec_id: str = "2x4"
    preferred_max_length: float | None = Field(default=None, gt=0)
    cuts: list[CutConfig] = Field(default_factory=list)
    scrap: list[ScrapBoardConfig] | None = None
    sheet_pieces: list[SheetPieceConfig] = Field(default_factory=list)
    sheet_width: float = Field(default=48.0, gt=0)
    sheet_height: float = Field(default=96.0, gt=0)
    sheet_thickness: str = '3/4"'

    @model_validator(mode="after")
    def validate_pieces_match_material(self) -> "MaterialGroupConfig":
        """Board groups take cuts, sheet groups take sheet pieces."""
        if self.material_type is MaterialType.BOARD and self.sheet_pieces:
            raise ValueError("'sheet_pieces' is only allowed for sheet groups")
        if self.material_type is MaterialType.SHEET and self.cuts:
            raise ValueError("'cuts' is only allowed for board groups")
        return self


class ProjectConfiguration(BaseModel):
    """Root configuration model for a cut project.

    Attributes:
        schema_version: Version string in format "major.minor" (e.g., "1.0")
        name: Project name
        use_scrap: Whether project scrap is offered to the optimizer
        scrap: Scrap on hand for the whole project
        profiles: Custom stock profiles layered over the built-in catalog
        groups: Material groups, at least one

    Example:
        >>> config = ProjectConfiguration(
        ...     schema_version="1.0",
        ...     groups=[MaterialGroupConfig(label="legs", cuts=[CutConfig(length=30)])],
        ... )
    """

    model_config = ConfigDict(extra="forbid")

    schema_version: str = Field(..., pattern=r"^\d+\.\d+$")
    name: str = "Untitled project"
    use_scrap: bool = True
    scrap: list[ScrapBoardConfig] = Field(default_factory=list)
    profiles: list[StockProfileConfig] = Field(default_factory=list)
    groups: list[MaterialGroupConfig] = Field(..., min_length=1)

    @field_validator("schema_version")
    @classmethod
    def validate_supported_version(cls, v: str) -> str:
        """Validate that schema version is supported.

        Newer minor versions within a supported major version are accepted.
        """
        if v in SUPPORTED_VERSIONS:
            return v

        major_version = int(v.split(".")[0])
        supported_majors = {int(sv.split(".")[0]) for sv in SUPPORTED_VERSIONS}
        if major_version in supported_majors:
            return v

        raise ValueError(
            f"Unsupported schema version '{v}'. "
            f"Supported versions: {sorted(SUPPORTED_VERSIONS)}"
        )

    @field_validator("profiles")
    @classmethod
    def validate_unique_profile_ids(
        cls, v: list[StockProfileConfig]
    ) -> list[StockProfileConfig]:
        """Ensure custom profile ids are unique within the file."""
        seen: set[str] = set()
        for profile in v:
            if profile.id in seen:
                raise ValueError(f"Duplicate profile id '{profile.id}'")
            seen.add(profile.id)
        return v
