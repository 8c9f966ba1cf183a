"""Bundled example projects.

Templates are ordinary project files shipped inside the package. They can be
printed, copied to disk as a starting point, or loaded straight into a
validated ProjectConfiguration.
"""

import json
from importlib import resources
from pathlib import Path

from cutplan.application.config import ProjectConfiguration, load_config_from_dict


class TemplateNotFoundError(Exception):
    """Raised when a requested template does not exist."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Template not found: {name}")


# Template metadata: name -> description
TEMPLATE_METADATA: dict[str, str] = {
    "garden-bench": "2x4 frame and 2x6 seat slats, with a scrap board on hand",
    "workbench": "2x4 workbench frame from scrap plus a plywood top",
    "bookshelf": "Hardwood bookshelf using a custom 1x10 profile",
}


class TemplateManager:
    """Manager for bundled project templates.

    Example:
        manager = TemplateManager()
        for name, description in manager.list_templates():
            print(f"{name}: {description}")

        manager.init_template("garden-bench", Path("bench.json"))
    """

    def __init__(self) -> None:
        self._data_package = "cutplan.application.templates.data"

    def list_templates(self) -> list[tuple[str, str]]:
        """List all available templates as (name, description) tuples."""
        return list(TEMPLATE_METADATA.items())

    def get_template(self, name: str) -> str:
        """Get the JSON content of a template.

        Args:
            name: The template name (without .json extension).

        Returns:
            The template JSON content as a string.

        Raises:
            TemplateNotFoundError: If the template does not exist.
        """
        if name not in TEMPLATE_METADATA:
            raise TemplateNotFoundError(name)

        try:
            data_files = resources.files(self._data_package)
            return data_files.joinpath(f"{name}.json").read_text(encoding="utf-8")
        except FileNotFoundError as e:
            raise TemplateNotFoundError(name) from e

    def load_template(self, name: str) -> ProjectConfiguration:
        """Parse and validate a template as a project.

        Raises:
            TemplateNotFoundError: If the template does not exist.
            ConfigError: If the bundled file does not validate.
        """
        return load_config_from_dict(json.loads(self.get_template(name)))

    def group_labels(self, name: str) -> list[str]:
        """Labels of the material groups in a template, in file order."""
        return [group.label for group in self.load_template(name).groups]

    def init_template(self, name: str, output_path: Path) -> None:
        """Copy a template to the specified output path.

        Raises:
            TemplateNotFoundError: If the template does not exist.
        """
        content = self.get_template(name)
        output_path.write_text(content, encoding="utf-8")

    def template_exists(self, name: str) -> bool:
        return name in TEMPLATE_METADATA
