"""Service protocols shared between layers.

Infrastructure implementations satisfy these protocols; the application
layer depends only on the protocol.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Iterable

    from cutplan.domain.value_objects import MaterialSpec, MaterialType
    from cutplan.infrastructure.bin_packing import OptimizeOptions, PackingResult


@runtime_checkable
class MaterialSolver(Protocol):
    """Cut optimizer for one kind of material.

    Implementations never raise for bad input; anything they cannot place is
    reported in ``PackingResult.unassigned``.

    Example:
        ```python
        class BoardCutSolver:
            material_type = MaterialType.BOARD

            def solve(self, required_cuts, spec, options=None) -> PackingResult:
                ...
        ```
    """

    material_type: "MaterialType"

    def solve(
        self,
        required_cuts: "Iterable[Any]",
        spec: "MaterialSpec",
        options: "OptimizeOptions | None" = None,
    ) -> "PackingResult":
        """Plan cuts for ``required_cuts`` on material ``spec``.

        Args:
            required_cuts: Cut requirements in any shape ``merge_cuts`` accepts.
            spec: Material specification matching ``material_type``.
            options: Scrap pool and length preference.

        Returns:
            PackingResult with finished boards and unplaced cut lengths.
        """
        ...
