"""DepCompare - A CLI tool for comparing the dependency versions of two projects."""

__version__ = "0.1.0"

from .config import ComparisonConfig
from .core.comparison import ComparisonBucket, ComparisonResult, compare_dependencies
from .core.parsers import NodeJSPackageParser, load_dependencies
from .core.versions import VersionComparator, are_versions_compatible
from .output.formatters import MarkdownFormatter

__all__ = [
    "ComparisonConfig",
    "ComparisonBucket",
    "ComparisonResult",
    "compare_dependencies",
    "NodeJSPackageParser",
    "load_dependencies",
    "VersionComparator",
    "are_versions_compatible",
    "MarkdownFormatter",
]
