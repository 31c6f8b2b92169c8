"""Data models for manifest parsing."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Optional


@dataclass
class ParsedManifest:
    """Container for the dependencies declared by a manifest file."""

    dependencies: Dict[str, str] = field(default_factory=dict)
    source_file: Optional[Path] = None
    name: Optional[str] = None
    version: Optional[str] = None

    def add_dependency(self, name: str, version_specifier: str) -> None:
        """Add a dependency to the manifest.

        Args:
            name: Package name
            version_specifier: Declared version specifier
        """
        self.dependencies[name] = version_specifier
