"""Contracts between layers."""

from cutplan.contracts.protocols import MaterialSolver

__all__ = ["MaterialSolver"]
