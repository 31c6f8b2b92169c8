"""Node.js manifest parser."""

import json
import os
from pathlib import Path
from typing import Any, Dict

from ...utils.logging import get_logger
from .base import ParsedManifest


class NodeJSPackageParser:
    """Parser for Node.js package.json files."""

    DEPENDENCY_SECTION = "dependencies"

    def __init__(self) -> None:
        """Initialize the package.json parser."""
        self.logger = get_logger("NodeJSPackageParser")

    def parse(self, file_path: Path) -> ParsedManifest:
        """Parse a package.json file.

        Args:
            file_path: Path to the package.json file

        Returns:
            Parsed manifest

        Raises:
            json.JSONDecodeError: If the file is not valid JSON
            ValueError: If the document is not a JSON object
        """
        self.validate_file(file_path)

        with open(file_path, 'r', encoding='utf-8') as f:
            data = json.load(f)

        if not isinstance(data, dict):
            raise ValueError(f"Manifest is not a JSON object: {file_path}")

        result = ParsedManifest(
            source_file=file_path,
            name=data.get("name"),
            version=data.get("version")
        )

        for name, version_spec in self._extract_dependencies(data).items():
            result.add_dependency(name, version_spec)

        self.logger.debug(f"Parsed {len(result.dependencies)} dependencies from {file_path}")
        return result

    def validate_file(self, file_path: Path) -> None:
        """Validate that the file exists and is readable.

        Args:
            file_path: Path to validate

        Raises:
            FileNotFoundError: If file doesn't exist
            ValueError: If the path is not a regular file
            PermissionError: If file is not readable
        """
        if not file_path.exists():
            raise FileNotFoundError(f"File not found: {file_path}")

        if not file_path.is_file():
            raise ValueError(f"Path is not a file: {file_path}")

        if not os.access(file_path, os.R_OK):
            raise PermissionError(f"File is not readable: {file_path}")

    def _extract_dependencies(self, data: Dict[str, Any]) -> Dict[str, str]:
        """Extract the dependency section from package.json data.

        Args:
            data: Parsed JSON data

        Returns:
            Mapping of package name to version specifier
        """
        section = data.get(self.DEPENDENCY_SECTION)
        if not isinstance(section, dict):
            return {}

        # A null specifier reads as empty rather than the text "None"
        return {
            name: "" if version_spec is None else str(version_spec)
            for name, version_spec in section.items()
        }


def load_dependencies(file_path: Path) -> Dict[str, str]:
    """Convenience function to read the dependencies of a package.json file.

    Args:
        file_path: Path to the package.json file

    Returns:
        Mapping of package name to version specifier
    """
    return NodeJSPackageParser().parse(file_path).dependencies
