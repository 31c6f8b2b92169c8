"""Manifest parsers."""

from .base import ParsedManifest
from .nodejs import NodeJSPackageParser, load_dependencies

__all__ = [
    "ParsedManifest",
    "NodeJSPackageParser",
    "load_dependencies",
]
