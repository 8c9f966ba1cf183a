"""Adapter from ProjectConfiguration to domain objects.

Converts the Pydantic configuration into the frozen domain types consumed by
project aggregation: a stock catalog, a scrap snapshot and material groups.
"""

from cutplan.application.config.schema import (
    MaterialGroupConfig,
    ProjectConfiguration,
    ScrapBoardConfig,
    StockProfileConfig,
)
from cutplan.application.services.project_result import MaterialGroup, SheetPiece
from cutplan.domain.services.requirements import merge_scrap_boards
from cutplan.domain.stock_profiles import StockCatalog
from cutplan.domain.value_objects import (
    BoardSpec,
    CutRequirement,
    ScrapBoard,
    ScrapInventory,
)


def group_id_for(index: int, group: MaterialGroupConfig) -> str:
    """Id of a configured group; positional when the file has none."""
    return group.id or f"group-{index + 1}"


def _profile_to_spec(profile: StockProfileConfig) -> BoardSpec:
    return BoardSpec(
        id=profile.id,
        name=profile.name or profile.id,
        allowed_lengths=tuple(float(length) for length in profile.allowed_lengths),
        kerf=profile.kerf,
    )


def _scrap_to_domain(scrap: list[ScrapBoardConfig]) -> tuple[ScrapBoard, ...]:
    """Domain scrap with repeated (size, length) entries merged."""
    return tuple(
        merge_scrap_boards(
            ScrapBoard(
                stock_length=entry.stock_length,
                quantity=entry.quantity,
                nominal_size_id=entry.nominal_size_id,
            )
            for entry in scrap
        )
    )


def config_to_catalog(
    config: ProjectConfiguration, base: StockCatalog | None = None
) -> StockCatalog:
    """Built-in catalog with the file's custom profiles layered on top.

    Args:
        config: Validated project configuration.
        base: Catalog to extend. Defaults to the built-in profiles.

    Returns:
        Catalog in which custom profiles replace built-ins with the same id.
    """
    if base is None:
        base = StockCatalog()
    return base.with_profiles(_profile_to_spec(p) for p in config.profiles)


def config_to_scrap(config: ProjectConfiguration) -> ScrapInventory:
    """Project scrap snapshot; empty when ``use_scrap`` is off."""
    if not config.use_scrap:
        return ScrapInventory()
    return ScrapInventory().with_boards(_scrap_to_domain(config.scrap))


def config_to_groups(config: ProjectConfiguration) -> list[MaterialGroup]:
    """Convert configured groups to domain material groups, in file order.

    With ``use_scrap`` off, inline group scrap is ignored as well.
    """
    groups: list[MaterialGroup] = []
    for index, group in enumerate(config.groups):
        scrap = None
        if group.scrap is not None and config.use_scrap:
            scrap = _scrap_to_domain(group.scrap)
        groups.append(
            MaterialGroup(
                id=group_id_for(index, group),
                label=group.label,
                board_spec_id=group.board_spec_id,
                cuts=tuple(
                    CutRequirement(length=c.length, quantity=c.quantity)
                    for c in group.cuts
                ),
                scrap=scrap,
                preferred_max_length=group.preferred_max_length,
                material_type=group.material_type,
                sheet_pieces=tuple(
                    SheetPiece(
                        width=p.width,
                        height=p.height,
                        quantity=p.quantity,
                        label=p.label,
                    )
                    for p in group.sheet_pieces
                ),
                sheet_stock_width=group.sheet_width,
                sheet_stock_height=group.sheet_height,
                sheet_thickness=group.sheet_thickness,
            )
        )
    return groups
