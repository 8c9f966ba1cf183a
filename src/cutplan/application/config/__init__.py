"""Configuration schema and loading system for cut projects.

This package provides JSON-based configuration loading and validation for
cut projects. It includes Pydantic models for schema validation, a loader
with comprehensive error handling, catalog-aware advisory checks, and an
adapter to the domain types.

Example:
    >>> from pathlib import Path
    >>> from cutplan.application.config import load_config, ConfigError
    >>>
    >>> try:
    ...     config = load_config(Path("bench.json"))
    ...     print(f"{config.name}: {len(config.groups)} groups")
    ... except ConfigError as e:
    ...     print(f"Error: {e}")
"""

from cutplan.application.config.adapter import (
    config_to_catalog,
    config_to_groups,
    config_to_scrap,
)
from cutplan.application.config.loader import (
    ConfigError,
    describe_location,
    load_config,
    load_config_from_dict,
)
from cutplan.application.config.schema import (
    SUPPORTED_VERSIONS,
    CutConfig,
    MaterialGroupConfig,
    ProjectConfiguration,
    ScrapBoardConfig,
    SheetPieceConfig,
    StockProfileConfig,
)
from cutplan.application.config.validator import (
    ValidationError,
    ValidationResult,
    ValidationWarning,
    validate_config,
)

__all__ = [
    "SUPPORTED_VERSIONS",
    "ConfigError",
    "CutConfig",
    "MaterialGroupConfig",
    "ProjectConfiguration",
    "ScrapBoardConfig",
    "SheetPieceConfig",
    "StockProfileConfig",
    "ValidationError",
    "ValidationResult",
    "ValidationWarning",
    "config_to_catalog",
    "config_to_groups",
    "config_to_scrap",
    "describe_location",
    "load_config",
    "load_config_from_dict",
    "validate_config",
]
