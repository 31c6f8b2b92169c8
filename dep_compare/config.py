"""Configuration for locating manifests and writing reports."""

from dataclasses import dataclass
from pathlib import Path

DEFAULT_MANIFEST_PATTERN = "../{name}/package.json"
DEFAULT_OUTPUT_FILE = Path("comparison-results.md")


@dataclass
class ComparisonConfig:
    """Where project manifests live and where the report goes."""

    manifest_pattern: str = DEFAULT_MANIFEST_PATTERN
    output_file: Path = DEFAULT_OUTPUT_FILE
    base_dir: Path = Path(".")

    def __post_init__(self) -> None:
        """Validate configuration."""
        if "{name}" not in self.manifest_pattern:
            raise ValueError(f"Manifest pattern must contain '{{name}}': {self.manifest_pattern}")

    def manifest_path(self, name: str) -> Path:
        """Resolve the manifest path of a project.

        Args:
            name: Project name

        Returns:
            Path to the project's manifest
        """
        return self.base_dir / self.manifest_pattern.format(name=name)

    def output_path(self) -> Path:
        """Resolve the report output path."""
        return self.base_dir / self.output_file
