"""Core comparison logic for DepCompare."""

from .comparison import ComparisonBucket, ComparisonResult, compare_dependencies
from .versions import VersionComparator, VersionSpecifier, are_versions_compatible

__all__ = [
    "ComparisonBucket",
    "ComparisonResult",
    "compare_dependencies",
    "VersionComparator",
    "VersionSpecifier",
    "are_versions_compatible",
]
