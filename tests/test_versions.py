"""Tests for version specifier parsing and compatibility."""

import pytest

from dep_compare.core.versions import (
    RangeKind,
    VersionComparator,
    VersionComponent,
    VersionSpecifier,
    are_versions_compatible,
    has_major_version_difference,
    normalize_version,
)


class TestVersionSpecifier:
    """Test the VersionSpecifier model."""

    def test_normalize_strips_markers(self):
        """Test that range markers and other characters are removed."""
        assert normalize_version("^1.2.3") == "1.2.3"
        assert normalize_version("~1.2.0") == "1.2.0"
        assert normalize_version(">=2.0.0-beta") == "2.0.0"
        assert normalize_version("latest") == ""

    def test_components(self):
        """Test major, minor and patch extraction."""
        spec = VersionSpecifier("^4.17.21")
        assert spec.major == "4"
        assert spec.minor == "17"
        assert spec.patch == "21"

    def test_missing_components_default_to_zero(self):
        """Test that absent components parse as zero."""
        spec = VersionSpecifier("~3")
        assert (spec.major, spec.minor, spec.patch) == ("3", "0", "0")

        empty = VersionSpecifier("")
        assert (empty.major, empty.minor, empty.patch) == ("0", "0", "0")

    @pytest.mark.parametrize("raw,kind", [
        ("^1.2.3", RangeKind.CARET),
        ("~1.2.3", RangeKind.TILDE),
        ("1.2.3", RangeKind.EXACT),
        (">=1.2.3", RangeKind.EXACT),
        (" ^1.2.3", RangeKind.EXACT),
    ])
    def test_range_kind(self, raw, kind):
        """Test that the range kind comes from the leading character."""
        assert VersionSpecifier(raw).range_kind is kind


class TestAreVersionsCompatible:
    """Test the version compatibility rules."""

    @pytest.mark.parametrize("version", ["1.0.0", "^1.2.3", "~0.1.0", "", "latest", "2"])
    def test_identical_specifiers_are_compatible(self, version):
        """Test the exact-match short circuit."""
        assert are_versions_compatible(version, version)

    @pytest.mark.parametrize("version1,version2", [
        ("^1.2.3", "^2.2.3"),
        ("~1.2.3", "~2.2.3"),
        ("~1.2.3", "^2.2.3"),
        ("1.0.0", "2.0.0"),
    ])
    def test_major_difference_is_incompatible(self, version1, version2):
        """Test that differing majors never match regardless of markers."""
        assert not are_versions_compatible(version1, version2)

    def test_normalized_equality_ignores_markers(self):
        """Test that markers are ignored when normalized versions match."""
        assert are_versions_compatible("^1.2.3", "1.2.3")
        assert are_versions_compatible("~1.2.3", "^1.2.3")

    def test_tilde_tilde(self):
        """Test tilde against tilde requires first patch >= second patch."""
        assert are_versions_compatible("~1.2.5", "~1.2.3")
        assert not are_versions_compatible("~1.2.3", "~1.2.5")
        assert not are_versions_compatible("~1.3.5", "~1.2.3")

    def test_caret_caret(self):
        """Test caret against caret requires equal components."""
        assert are_versions_compatible("^1.2.3", "^1.2.3")
        assert not are_versions_compatible("^1.2.3", "^1.3.3")
        assert not are_versions_compatible("^1.2.3", "^1.2.4")

    def test_tilde_caret(self):
        """Test tilde against caret requires first patch >= second patch."""
        assert are_versions_compatible("~1.2.5", "^1.2.3")
        assert not are_versions_compatible("~1.2.3", "^1.2.5")
        assert not are_versions_compatible("~1.3.5", "^1.2.3")

    def test_caret_tilde(self):
        """Test caret against tilde requires second patch >= first patch."""
        assert are_versions_compatible("^1.2.3", "~1.2.5")
        assert not are_versions_compatible("^1.2.5", "~1.2.3")

    def test_rules_are_order_sensitive(self):
        """Test that swapping the specifiers can change the outcome."""
        assert are_versions_compatible("~1.2.5", "~1.2.3")
        assert not are_versions_compatible("~1.2.3", "~1.2.5")

    def test_fallback_uses_raw_equality(self):
        """Test that unmatched marker pairs compare raw strings."""
        assert are_versions_compatible("1.0.0", "1.0.0")
        assert not are_versions_compatible("1.0.0", "1.0.1")
        assert not are_versions_compatible("1.2.5", "~1.2.3")
        assert not are_versions_compatible("^1.2.5", "1.2.3")

    def test_malformed_specifiers_never_raise(self):
        """Test that malformed input returns a boolean."""
        assert are_versions_compatible("latest", "*")
        assert not are_versions_compatible("latest", "1.0.0")
        assert not are_versions_compatible("", "0.0.1")
        assert are_versions_compatible("^", "~")

    def test_oversized_components_never_raise(self):
        """Test components longer than the int conversion limit."""
        big = "1" * 5000
        assert not are_versions_compatible(big + ".1", big + ".2")
        assert are_versions_compatible("~" + big + ".2.5", "~" + big + ".2.3")
        assert not are_versions_compatible("~1." + big + ".3", "~1.2.3")
        assert not are_versions_compatible("^" + big + "1.0.0", "^" + big + "2.0.0")

    def test_leading_zeros_compare_numerically(self):
        """Test that zero padding does not change a component's value."""
        assert are_versions_compatible("~1.02.5", "~1.2.3")
        assert are_versions_compatible("^1.2.3", "~01.2.3")


class TestVersionComponent:
    """Test numeric ordering of version components."""

    def test_ordering_by_value(self):
        """Test that longer digit strings compare as larger numbers."""
        assert VersionComponent("10") > VersionComponent("9")
        assert VersionComponent("9") < VersionComponent("10")
        assert VersionComponent("5") >= VersionComponent("5")
        assert VersionComponent("3") <= VersionComponent("4")

    def test_canonical_form(self):
        """Test that leading zeros are dropped and empty reads as zero."""
        assert VersionComponent("007") == "7"
        assert VersionComponent("") == "0"
        assert VersionComponent("000") == VersionComponent("0")


class TestVersionComparator:
    """Test the VersionComparator wrapper."""

    def test_is_compatible_delegates(self):
        """Test that the comparator applies the same rules."""
        comparator = VersionComparator()
        assert comparator.is_compatible("~1.2.5", "^1.2.3")
        assert not comparator.is_compatible("^1.2.3", "^1.3.3")

    def test_major_difference(self):
        """Test major difference detection on normalized components."""
        comparator = VersionComparator()
        assert comparator.is_major_difference("^1.0.0", "^2.0.0")
        assert not comparator.is_major_difference("^1.0.0", "~1.5.0")
        assert has_major_version_difference("1.0.0", "latest")
