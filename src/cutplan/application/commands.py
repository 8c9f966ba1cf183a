"""Application commands (use cases) for cut planning."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from cutplan.application.config import (
    ProjectConfiguration,
    config_to_catalog,
    config_to_groups,
    config_to_scrap,
)
from cutplan.application.services.project_result import (
    MaterialGroup,
    ProjectResult,
    generate_project_result,
)
from cutplan.domain.stock_profiles import DEFAULT_KERF, StockCatalog
from cutplan.domain.value_objects import BoardSpec, CutRequirement, ScrapBoard

logger = logging.getLogger(__name__)

QUICK_PROFILE_ID = "custom"


class PlanProjectCommand:
    """Command to plan a whole project from its configuration."""

    def __init__(self, catalog: StockCatalog | None = None) -> None:
        self.catalog = catalog if catalog is not None else StockCatalog()

    def execute(
        self, config: ProjectConfiguration, use_scrap: bool | None = None
    ) -> ProjectResult:
        """Plan every group of a project.

        Args:
            config: Validated project configuration.
            use_scrap: Overrides the file's ``use_scrap`` when not None.

        Returns:
            ProjectResult for the project.
        """
        if use_scrap is not None and use_scrap != config.use_scrap:
            config = config.model_copy(update={"use_scrap": use_scrap})

        catalog = config_to_catalog(config, self.catalog)
        groups = config_to_groups(config)
        scrap = config_to_scrap(config)
        logger.debug(
            "Planning '%s': %d groups, %d scrap boards on hand",
            config.name,
            len(groups),
            scrap.board_count,
        )
        return generate_project_result(groups, catalog, scrap)


class QuickPlanCommand:
    """Command to plan a single cut list without a configuration file.

    Either a catalog profile or an ad hoc set of stock lengths is used.
    """

    def __init__(self, catalog: StockCatalog | None = None) -> None:
        self.catalog = catalog if catalog is not None else StockCatalog()

    def execute(
        self,
        cuts: Iterable[CutRequirement],
        profile_id: str | None = None,
        lengths: Iterable[float] = (),
        kerf: float = DEFAULT_KERF,
        scrap: Iterable[ScrapBoard] = (),
        preferred_max_length: float | None = None,
        label: str = "Cut list",
    ) -> ProjectResult:
        """Plan one group of cuts.

        Args:
            cuts: Required pieces.
            profile_id: Catalog profile. Ignored when ``lengths`` is given.
            lengths: Ad hoc purchasable lengths.
            kerf: Kerf for ad hoc lengths.
            scrap: Boards on hand. All of them are offered to the group.
            preferred_max_length: Soft preference for new board length.
            label: Group label for output.

        Returns:
            ProjectResult holding the single group.

        Raises:
            StockProfileNotFoundError: If ``profile_id`` is not in the catalog.
        """
        lengths = tuple(float(length) for length in lengths)
        if lengths:
            spec = BoardSpec(
                id=QUICK_PROFILE_ID,
                name=f"{QUICK_PROFILE_ID} stock",
                allowed_lengths=lengths,
                kerf=kerf,
            )
            catalog = self.catalog.with_profiles([spec])
        else:
            spec = self.catalog.get(profile_id or "2x4")
            catalog = self.catalog

        group = MaterialGroup(
            id="quick",
            label=label,
            board_spec_id=spec.id,
            cuts=tuple(cuts),
            scrap=tuple(scrap),
            preferred_max_length=preferred_max_length,
        )
        return generate_project_result([group], catalog)
