"""Configuration file loader with comprehensive error handling.

This module loads and parses JSON project files. It turns file system errors,
JSON parsing errors and Pydantic validation errors into a single
``ConfigError`` with clear, actionable messages.
"""

import json
from pathlib import Path
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from cutplan.application.config.schema import ProjectConfiguration


class ConfigError(Exception):
    """Exception raised for configuration-related errors.

    Attributes:
        message: The primary error message
        error_type: Category of error (file_not_found, permission_denied,
            file_read_error, json_parse, validation)
        path: Path to the configuration file (if applicable)
        details: Additional error details (line/column for JSON, per-field
            validation errors)
    """

    def __init__(
        self,
        message: str,
        error_type: str = "unknown",
        path: Path | None = None,
        details: list[dict[str, Any]] | None = None,
    ) -> None:
        self.message = message
        self.error_type = error_type
        self.path = path
        self.details = details or []
        super().__init__(message)

    def __str__(self) -> str:
        return self.message


def _format_json_path(loc: tuple[str | int, ...]) -> str:
    """Format a Pydantic location tuple as a JSON path string.

    Examples:
        >>> _format_json_path(("groups", 0, "cuts", 2, "length"))
        'groups[0].cuts[2].length'
        >>> _format_json_path(("schema_version",))
        'schema_version'
    """
    parts: list[str] = []
    for segment in loc:
        if isinstance(segment, int):
            if parts:
                parts[-1] = f"{parts[-1]}[{segment}]"
            else:
                parts.append(f"[{segment}]")
        else:
            parts.append(str(segment))
    return ".".join(parts)


def _group_label(data: Any, loc: tuple[str | int, ...]) -> str | None:
    """Label of the group a location points into, when the file gives one."""
    if len(loc) < 2 or loc[0] != "groups" or not isinstance(loc[1], int):
        return None
    groups = data.get("groups") if isinstance(data, dict) else None
    if not isinstance(groups, list) or not 0 <= loc[1] < len(groups):
        return None
    group = groups[loc[1]]
    label = group.get("label") if isinstance(group, dict) else None
    return label if isinstance(label, str) and label.strip() else None


def _extract_validation_errors(
    error: PydanticValidationError, data: Any
) -> list[dict[str, Any]]:
    """Flatten a Pydantic ValidationError into path/message/value dicts.

    Errors inside a group also carry the group's label under ``group``, so
    that a message can name "legs" rather than only ``groups[0]``.
    """
    details: list[dict[str, Any]] = []
    for err in error.errors():
        detail: dict[str, Any] = {
            "path": _format_json_path(err["loc"]),
            "message": err["msg"],
            "value": err.get("input"),
            "error_type": err["type"],
        }
        label = _group_label(data, err["loc"])
        if label is not None:
            detail["group"] = label
        details.append(detail)
    return details


def describe_location(detail: dict[str, Any]) -> str:
    """JSON path of an error detail, followed by its group label if known.

    Example:
        >>> describe_location({"path": "groups[0].cuts[1].length", "group": "legs"})
        "groups[0].cuts[1].length (group 'legs')"
    """
    path = detail.get("path", "unknown")
    group = detail.get("group")
    return f"{path} (group {group!r})" if group else path


def _format_validation_error_message(details: list[dict[str, Any]]) -> str:
    lines = ["Configuration validation failed:"]
    for detail in details:
        value = detail.get("value")
        line = f"  - {describe_location(detail)}: {detail['message']}"
        if value is not None and not isinstance(value, (dict, list)):
            line += f" (got: {value!r})"
        lines.append(line)
    return "\n".join(lines)


def _validate(data: Any, path: Path | None = None) -> ProjectConfiguration:
    try:
        return ProjectConfiguration.model_validate(data)
    except PydanticValidationError as e:
        details = _extract_validation_errors(e, data)
        raise ConfigError(
            message=_format_validation_error_message(details),
            error_type="validation",
            path=path,
            details=details,
        )


def load_config(path: Path) -> ProjectConfiguration:
    """Load and validate a project configuration from a JSON file.

    Args:
        path: Path to the JSON configuration file

    Returns:
        A validated ProjectConfiguration instance

    Raises:
        ConfigError: If the file cannot be loaded or validated.
            The error_type attribute indicates the specific error category:
            - "file_not_found": File does not exist
            - "permission_denied": File cannot be read
            - "file_read_error": Other OS error while reading
            - "json_parse": Invalid JSON syntax
            - "validation": Schema validation failed

    Example:
        >>> try:
        ...     config = load_config(Path("bench.json"))
        ... except ConfigError as e:
        ...     for detail in e.details:
        ...         print(f"  {detail['path']}: {detail['message']}")
    """
    if not path.exists():
        raise ConfigError(
            message=f"Config file not found: {path}",
            error_type="file_not_found",
            path=path,
        )

    try:
        content = path.read_text(encoding="utf-8")
    except PermissionError:
        raise ConfigError(
            message=f"Permission denied reading config file: {path}",
            error_type="permission_denied",
            path=path,
        )
    except OSError as e:
        raise ConfigError(
            message=f"Error reading config file: {path}: {e}",
            error_type="file_read_error",
            path=path,
        )

    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        raise ConfigError(
            message=(
                f"Invalid JSON in config file: {path} "
                f"(line {e.lineno}, column {e.colno}): {e.msg}"
            ),
            error_type="json_parse",
            path=path,
            details=[{"line": e.lineno, "column": e.colno, "message": e.msg}],
        )

    return _validate(data, path)


def load_config_from_dict(data: dict[str, Any]) -> ProjectConfiguration:
    """Load and validate a project configuration from a dictionary.

    Used for API requests and bundled templates.

    Raises:
        ConfigError: If the data fails validation.
    """
    return _validate(data)
