"""Single optimizer run endpoint."""

from fastapi import APIRouter

from cutplan.domain.value_objects import (
    BoardSpec,
    CutRequirement,
    MaterialSpec,
    MaterialType,
    ScrapBoard,
    SheetSpec,
)
from cutplan.infrastructure import JsonExporter, OptimizeOptions, plan_cuts
from cutplan.web.schemas.requests import OptimizeRequest, StockSpecSchema
from cutplan.web.schemas.responses import OptimizedBoardSchema, OptimizeResponse

router = APIRouter(prefix="/optimize", tags=["optimize"])


def _to_spec(schema: StockSpecSchema) -> MaterialSpec:
    if schema.material_type is MaterialType.SHEET:
        return SheetSpec(id=schema.id, name=schema.name, kerf=schema.kerf)
    return BoardSpec(
        id=schema.id,
        name=schema.name,
        allowed_lengths=tuple(schema.allowed_lengths),
        kerf=schema.kerf,
    )


@router.post("", response_model=OptimizeResponse)
async def optimize_cuts(request: OptimizeRequest) -> OptimizeResponse:
    """Plan cuts for one cut list on one stock spec.

    Scrap is used first, then new boards. Invalid entries are dropped and an
    unusable stock spec yields an empty plan; this endpoint does not fail on
    engine input.

    Args:
        request: Cuts, stock spec, scrap and length preference.

    Returns:
        Finished boards and the piece lengths that could not be placed.
    """
    cuts = [
        CutRequirement(length=c.length, quantity=c.quantity, material_type=c.material_type)
        for c in request.required_cuts
    ]
    scrap = tuple(
        ScrapBoard(
            stock_length=s.stock_length,
            quantity=s.quantity,
            nominal_size_id=s.nominal_size_id,
        )
        for s in request.options.scrap
    )
    result = plan_cuts(
        cuts,
        _to_spec(request.stock_spec),
        OptimizeOptions(
            scrap=scrap, preferred_max_length=request.options.preferred_max_length
        ),
    )

    exporter = JsonExporter()
    return OptimizeResponse(
        boards=[OptimizedBoardSchema(**exporter.board_to_dict(b)) for b in result.boards],
        unassigned=list(result.unassigned),
        new_board_count=len(result.new_boards),
        scrap_board_count=len(result.scrap_boards),
    )
