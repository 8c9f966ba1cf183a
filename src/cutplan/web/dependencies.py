"""FastAPI dependency injection for cut planning services."""

from functools import lru_cache
from typing import Annotated

from fastapi import Depends

from cutplan.application.commands import PlanProjectCommand
from cutplan.application.templates.manager import TemplateManager
from cutplan.domain.stock_profiles import StockCatalog


@lru_cache(maxsize=1)
def get_catalog() -> StockCatalog:
    """Get the cached built-in stock catalog."""
    return StockCatalog()


def get_plan_command(
    catalog: Annotated[StockCatalog, Depends(get_catalog)],
) -> PlanProjectCommand:
    """Dependency for PlanProjectCommand."""
    return PlanProjectCommand(catalog)


def get_template_manager() -> TemplateManager:
    """Dependency for TemplateManager."""
    return TemplateManager()


# Type aliases for cleaner endpoint signatures
CatalogDep = Annotated[StockCatalog, Depends(get_catalog)]
PlanCommandDep = Annotated[PlanProjectCommand, Depends(get_plan_command)]
TemplateManagerDep = Annotated[TemplateManager, Depends(get_template_manager)]
