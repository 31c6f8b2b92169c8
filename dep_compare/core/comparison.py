"""Dependency set comparison for DepCompare."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional

from ..utils.logging import get_logger
from .versions import VersionComparator


DependencyMap = Dict[str, str]


class ComparisonBucket(Enum):
    """Classification of a dependency name across two projects."""

    MATCH = "match"
    MISMATCH = "mismatch"
    UNIQUE_TO_FIRST = "unique_to_first"
    UNIQUE_TO_SECOND = "unique_to_second"


@dataclass
class DependencyEntry:
    """A dependency name with the specifier declared by each project."""

    name: str
    bucket: ComparisonBucket
    version1: Optional[str] = None
    version2: Optional[str] = None


@dataclass
class MajorVersionDifference:
    """A mismatched dependency whose major versions differ."""

    package: str
    version1: str
    version2: str


@dataclass
class ComparisonResult:
    """Outcome of comparing two dependency maps."""

    name1: str
    name2: str
    total_packages1: int = 0
    total_packages2: int = 0
    matches: List[DependencyEntry] = field(default_factory=list)
    mismatches: List[DependencyEntry] = field(default_factory=list)
    unique_to1: List[DependencyEntry] = field(default_factory=list)
    unique_to2: List[DependencyEntry] = field(default_factory=list)
    major_differences: List[MajorVersionDifference] = field(default_factory=list)

    @property
    def matches_count(self) -> int:
        return len(self.matches)

    @property
    def mismatches_count(self) -> int:
        return len(self.mismatches)

    @property
    def both_count(self) -> int:
        return self.matches_count + self.mismatches_count

    @property
    def unique_to1_count(self) -> int:
        return len(self.unique_to1)

    @property
    def unique_to2_count(self) -> int:
        return len(self.unique_to2)

    @property
    def major_differences_count(self) -> int:
        return len(self.major_differences)

    def add_entry(self, entry: DependencyEntry) -> None:
        """Append an entry to the list for its bucket.

        Args:
            entry: Classified dependency entry
        """
        self._bucket_list(entry.bucket).append(entry)

    def bucket_of(self, name: str) -> Optional[ComparisonBucket]:
        """Find the bucket a dependency name was assigned to.

        Args:
            name: Dependency name

        Returns:
            The bucket, or None if neither project declares the name
        """
        for bucket in ComparisonBucket:
            if any(entry.name == name for entry in self._bucket_list(bucket)):
                return bucket
        return None

    def _bucket_list(self, bucket: ComparisonBucket) -> List[DependencyEntry]:
        return {
            ComparisonBucket.MATCH: self.matches,
            ComparisonBucket.MISMATCH: self.mismatches,
            ComparisonBucket.UNIQUE_TO_FIRST: self.unique_to1,
            ComparisonBucket.UNIQUE_TO_SECOND: self.unique_to2,
        }[bucket]


def compare_dependencies(
    deps1: DependencyMap,
    deps2: DependencyMap,
    name1: str = "first",
    name2: str = "second",
    comparator: Optional[VersionComparator] = None
) -> ComparisonResult:
    """Classify every dependency of two projects into comparison buckets.

    Each map is walked once. Matches, mismatches and packages unique to the
    first project come out in the first map's order; packages unique to the
    second project in the second map's order.

    Args:
        deps1: Dependencies of the first project
        deps2: Dependencies of the second project
        name1: Display name of the first project
        name2: Display name of the second project
        comparator: Version comparator (a fresh one if None)

    Returns:
        Comparison result with all buckets filled
    """
    comparator = comparator or VersionComparator()
    logger = get_logger("Comparison")

    result = ComparisonResult(
        name1=name1,
        name2=name2,
        total_packages1=len(deps1),
        total_packages2=len(deps2)
    )

    for name, version1 in deps1.items():
        if name not in deps2:
            result.add_entry(DependencyEntry(name, ComparisonBucket.UNIQUE_TO_FIRST, version1=version1))
            continue

        version2 = deps2[name]
        if comparator.is_compatible(version1, version2):
            result.add_entry(DependencyEntry(name, ComparisonBucket.MATCH, version1, version2))
            continue

        result.add_entry(DependencyEntry(name, ComparisonBucket.MISMATCH, version1, version2))
        if comparator.is_major_difference(version1, version2):
            result.major_differences.append(MajorVersionDifference(name, version1, version2))

    for name, version2 in deps2.items():
        if name not in deps1:
            result.add_entry(DependencyEntry(name, ComparisonBucket.UNIQUE_TO_SECOND, version2=version2))

    logger.debug(
        f"Compared {name1} and {name2}: {result.matches_count} matches, "
        f"{result.mismatches_count} mismatches, {result.unique_to1_count} unique to {name1}, "
        f"{result.unique_to2_count} unique to {name2}"
    )

    return result
