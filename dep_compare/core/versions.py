"""Version specifier parsing and compatibility checks."""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, Tuple

from ..utils.logging import get_logger


_NON_VERSION_CHARS = re.compile(r'[^0-9.]')


class RangeKind(Enum):
    """Range marker carried by the leading character of a specifier."""

    EXACT = "exact"
    CARET = "caret"
    TILDE = "tilde"


def normalize_version(version: str) -> str:
    """Strip every character that is not a digit or a dot.

    Args:
        version: Raw version specifier

    Returns:
        Normalized version string
    """
    return _NON_VERSION_CHARS.sub('', version)


def _component(normalized: str, index: int) -> str:
    parts = normalized.split('.')
    if index < len(parts):
        return parts[index]
    return ''


class VersionComponent(str):
    """Digits of one version component, ordered numerically.

    Leading zeros are dropped and an empty component reads as ``0``. Ordering
    compares length first and then the digits, so arbitrarily long components
    never go through ``int()``.
    """

    def __new__(cls, digits: str) -> "VersionComponent":
        return super().__new__(cls, digits.lstrip("0") or "0")

    def _key(self) -> Tuple[int, str]:
        return (len(self), str(self))

    def __lt__(self, other: str) -> bool:
        return self._key() < VersionComponent(other)._key()

    def __le__(self, other: str) -> bool:
        return self._key() <= VersionComponent(other)._key()

    def __gt__(self, other: str) -> bool:
        return self._key() > VersionComponent(other)._key()

    def __ge__(self, other: str) -> bool:
        return self._key() >= VersionComponent(other)._key()

    __hash__ = str.__hash__


@dataclass(frozen=True)
class VersionSpecifier:
    """A version specifier such as ``1.2.3``, ``^1.2.3`` or ``~1.2.0``."""

    raw: str

    @property
    def normalized(self) -> str:
        return normalize_version(self.raw)

    @property
    def major_component(self) -> str:
        """First dot-separated component of the normalized string, unparsed."""
        return _component(self.normalized, 0)

    @property
    def major(self) -> VersionComponent:
        return VersionComponent(self.major_component)

    @property
    def minor(self) -> VersionComponent:
        return VersionComponent(_component(self.normalized, 1))

    @property
    def patch(self) -> VersionComponent:
        return VersionComponent(_component(self.normalized, 2))

    @property
    def range_kind(self) -> RangeKind:
        if self.raw.startswith('^'):
            return RangeKind.CARET
        if self.raw.startswith('~'):
            return RangeKind.TILDE
        return RangeKind.EXACT

    def __str__(self) -> str:
        return self.raw


RangeRule = Callable[[VersionSpecifier, VersionSpecifier], bool]

# Rules are order sensitive: the first specifier is not interchangeable
# with the second in the tilde and caret pairings.
RANGE_RULES: Dict[Tuple[RangeKind, RangeKind], RangeRule] = {
    (RangeKind.TILDE, RangeKind.TILDE): lambda v1, v2: (
        v1.minor == v2.minor and v1.patch >= v2.patch
    ),
    (RangeKind.CARET, RangeKind.CARET): lambda v1, v2: (
        v1.major == v2.major and v1.minor == v2.minor and v1.patch == v2.patch
    ),
    (RangeKind.TILDE, RangeKind.CARET): lambda v1, v2: (
        v1.major == v2.major and v1.minor == v2.minor and v1.patch >= v2.patch
    ),
    (RangeKind.CARET, RangeKind.TILDE): lambda v1, v2: (
        v1.major == v2.major and v1.minor == v2.minor and v2.patch >= v1.patch
    ),
}


def are_versions_compatible(version1: str, version2: str) -> bool:
    """Check whether two version specifiers are compatible.

    Identical normalized versions always match and differing major versions
    never do. Otherwise the pair of range markers selects a rule from
    ``RANGE_RULES``; pairs without a rule fall back to comparing the raw
    strings.

    Args:
        version1: Specifier from the first project
        version2: Specifier from the second project

    Returns:
        True if the specifiers are compatible
    """
    spec1 = VersionSpecifier(version1)
    spec2 = VersionSpecifier(version2)

    if spec1.normalized == spec2.normalized:
        return True

    if spec1.major != spec2.major:
        return False

    rule = RANGE_RULES.get((spec1.range_kind, spec2.range_kind))
    if rule is None:
        return version1 == version2

    return rule(spec1, spec2)


def has_major_version_difference(version1: str, version2: str) -> bool:
    """Check whether the normalized major components differ as strings."""
    return VersionSpecifier(version1).major_component != VersionSpecifier(version2).major_component


class VersionComparator:
    """Compares version specifiers and logs each decision."""

    def __init__(self) -> None:
        """Initialize the comparator."""
        self.logger = get_logger("VersionComparator")

    def is_compatible(self, version1: str, version2: str) -> bool:
        """Check whether two version specifiers are compatible.

        Args:
            version1: Specifier from the first project
            version2: Specifier from the second project

        Returns:
            True if the specifiers are compatible
        """
        compatible = are_versions_compatible(version1, version2)
        self.logger.debug(
            f"{'COMPATIBLE' if compatible else 'INCOMPATIBLE'}: {version1} vs {version2}"
        )
        return compatible

    def is_major_difference(self, version1: str, version2: str) -> bool:
        """Check whether two specifiers differ in their major component.

        Args:
            version1: Specifier from the first project
            version2: Specifier from the second project

        Returns:
            True if the major components differ
        """
        return has_major_version_difference(version1, version2)
