"""Stock profile catalog endpoints."""

from fastapi import APIRouter

from cutplan.domain.value_objects import BoardSpec
from cutplan.web.dependencies import CatalogDep
from cutplan.web.schemas.responses import StockProfileListSchema, StockProfileSchema

router = APIRouter(prefix="/profiles", tags=["profiles"])


def _to_schema(spec: BoardSpec) -> StockProfileSchema:
    return StockProfileSchema(
        id=spec.id,
        name=spec.name,
        allowed_lengths=list(spec.allowed_lengths),
        kerf=spec.kerf,
    )


@router.get("", response_model=StockProfileListSchema)
async def list_profiles(catalog: CatalogDep) -> StockProfileListSchema:
    """List the built-in stock profiles."""
    return StockProfileListSchema(profiles=[_to_schema(spec) for spec in catalog])


@router.get("/{profile_id}", response_model=StockProfileSchema)
async def get_profile(profile_id: str, catalog: CatalogDep) -> StockProfileSchema:
    """Get one stock profile.

    Raises:
        StockProfileNotFoundError: If the id is unknown (handled as 404).
    """
    return _to_schema(catalog.get(profile_id))
