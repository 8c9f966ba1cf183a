"""Validation structures and cut planning advisory checks.

Pydantic handles structure. The checks here need the stock catalog: they
catch references to unknown profiles and flag pieces the optimizer will not
be able to place.
"""

from dataclasses import dataclass, field
from typing import Any

from cutplan.application.config.adapter import config_to_catalog
from cutplan.application.config.schema import ProjectConfiguration
from cutplan.domain.value_objects import MaterialType


@dataclass
class ValidationError:
    """A blocking validation error.

    Attributes:
        path: JSON path to the invalid field (e.g., "groups[0].board_spec_id")
        message: Human-readable description of the error
        value: The invalid value that caused the error
    """

    path: str
    message: str
    value: Any = None


@dataclass
class ValidationWarning:
    """A non-blocking validation warning.

    The configuration can still be planned, but the plan may not be what the
    user expects.

    Attributes:
        path: JSON path to the concerning field
        message: Human-readable description of the concern
        suggestion: Optional suggested remediation
    """

    path: str
    message: str
    suggestion: str | None = None


@dataclass
class ValidationResult:
    """Container for validation errors and warnings."""

    errors: list[ValidationError] = field(default_factory=list)
    warnings: list[ValidationWarning] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        """Check if the configuration has no blocking errors."""
        return len(self.errors) == 0

    @property
    def has_warnings(self) -> bool:
        return len(self.warnings) > 0

    @property
    def exit_code(self) -> int:
        """Get the CLI exit code based on validation status.

        Returns:
            0 if valid with no warnings
            1 if there are errors
            2 if valid but has warnings
        """
        if self.errors:
            return 1
        if self.warnings:
            return 2
        return 0

    def add_error(
        self, path: str, message: str, value: Any = None
    ) -> "ValidationResult":
        """Add a validation error and return self for chaining."""
        self.errors.append(ValidationError(path=path, message=message, value=value))
        return self

    def add_warning(
        self, path: str, message: str, suggestion: str | None = None
    ) -> "ValidationResult":
        """Add a validation warning and return self for chaining."""
        self.warnings.append(
            ValidationWarning(path=path, message=message, suggestion=suggestion)
        )
        return self


def check_group_advisories(config: ProjectConfiguration) -> ValidationResult:
    """Check every group against the catalog.

    Errors:
        - unknown ``board_spec_id`` on a board group
        - duplicate group label

    Warnings:
        - a cut longer than the profile's shortest stock length; such pieces
          are left out of the plan
        - ``preferred_max_length`` shorter than every stock length
        - a board group with no cuts
        - a sheet group; sheet goods are listed but not optimized
    """
    result = ValidationResult()
    catalog = config_to_catalog(config)
    labels: set[str] = set()

    for i, group in enumerate(config.groups):
        path = f"groups[{i}]"

        key = group.label.strip().lower()
        if key in labels:
            result.add_error(
                f"{path}.label", f"Duplicate group label '{group.label}'", group.label
            )
        labels.add(key)

        if group.material_type is MaterialType.SHEET:
            result.add_warning(
                path,
                f"Group '{group.label}' is sheet goods; sheet layouts are not "
                "optimized yet",
                "Only the recap and the sheet entry are produced for this group",
            )
            continue

        spec = catalog.find(group.board_spec_id)
        if spec is None:
            result.add_error(
                f"{path}.board_spec_id",
                f"Unknown stock profile '{group.board_spec_id}'. "
                f"Available: {', '.join(catalog.ids)}",
                group.board_spec_id,
            )
            continue

        if not group.cuts:
            result.add_warning(f"{path}.cuts", f"Group '{group.label}' has no cuts")

        shortest = spec.min_length
        if shortest is not None:
            for j, cut in enumerate(group.cuts):
                if cut.length > shortest:
                    result.add_warning(
                        f"{path}.cuts[{j}].length",
                        f'Cut of {cut.length:g}" is longer than the shortest '
                        f'{spec.id} stock length ({shortest:g}") and will not be '
                        "placed on new boards",
                        "Split the piece or use a profile whose shortest length "
                        "covers it",
                    )

        preferred = group.preferred_max_length
        if preferred is not None and spec.allowed_lengths:
            if all(preferred < length for length in spec.allowed_lengths):
                result.add_warning(
                    f"{path}.preferred_max_length",
                    f'Preferred maximum {preferred:g}" is shorter than every '
                    f"{spec.id} stock length; it has no effect",
                )

    return result


def check_scrap_advisories(config: ProjectConfiguration) -> ValidationResult:
    """Warn about scrap that can never be offered to any group."""
    result = ValidationResult()
    catalog = config_to_catalog(config)
    for i, entry in enumerate(config.scrap):
        size = entry.nominal_size_id
        if size is not None and size not in catalog:
            result.add_warning(
                f"scrap[{i}].nominal_size_id",
                f"Scrap nominal size '{size}' matches no stock profile",
            )
    if config.scrap and not config.use_scrap:
        result.add_warning(
            "use_scrap",
            "Scrap is listed but 'use_scrap' is false; it will be ignored",
        )
    return result


def validate_config(config: ProjectConfiguration) -> ValidationResult:
    """Perform full validation of a project configuration.

    Args:
        config: A ProjectConfiguration instance (already validated by Pydantic)

    Returns:
        ValidationResult containing any errors or warnings
    """
    result = ValidationResult()
    for partial in (check_group_advisories(config), check_scrap_advisories(config)):
        result.errors.extend(partial.errors)
        result.warnings.extend(partial.warnings)
    return result
