"""
Tests for version normalization and ordering (kubeversion/versions.py).
"""

import itertools

import pytest

from kubeversion.versions import compare_versions, normalize_version, sort_versions_desc


class TestNormalizeVersion:
    """Tests for normalize_version."""

    def test_adds_prefix(self):
        """Test that a bare version gets the tag marker."""
        assert normalize_version("1.29.0") == "v1.29.0"

    def test_keeps_tagged_version(self):
        """Test that an already tagged version is unchanged."""
        assert normalize_version("v1.29.0") == "v1.29.0"

    def test_malformed_versions_pass_through(self):
        """Test that no validation is applied beyond the prefix."""
        assert normalize_version("banana") == "vbanana"
        assert normalize_version("") == "v"

    @pytest.mark.parametrize("raw", ["1.29.0", "v1.29.0", "", "v", "vv1", "1.30.0-rc.1", " 1.2"])
    def test_idempotent(self, raw):
        """Test normalize(normalize(x)) == normalize(x)."""
        once = normalize_version(raw)
        assert normalize_version(once) == once


class TestCompareVersions:
    """Tests for compare_versions."""

    def test_ordering(self):
        """Test semantic comparison of tagged versions."""
        assert compare_versions("v1.29.0", "v1.30.0") == -1
        assert compare_versions("v1.30.0", "v1.29.0") == 1
        assert compare_versions("v1.29.0", "v1.29.0") == 0

    def test_double_digit_components(self):
        """Test that v1.10.0 is newer than v1.9.0."""
        assert compare_versions("v1.10.0", "v1.9.0") == 1

    def test_prerelease_is_older(self):
        """Test that release candidates sort below the release."""
        assert compare_versions("v1.30.0-rc.1", "v1.30.0") == -1

    def test_unparseable_falls_back_to_strings(self):
        """Test string comparison for tags packaging cannot parse."""
        assert compare_versions("vfoo", "vbar") == 1
        assert compare_versions("vbar", "vbar") == 0

    def test_unparseable_ranks_below_parseable(self):
        """Test tags that do not parse compare below every real version."""
        assert compare_versions("vfoo", "v1.0.0") == -1
        assert compare_versions("v0.0.1", "vzzz") == 1


class TestSortVersionsDesc:
    """Tests for sort_versions_desc."""

    def test_unsorted_catalog(self):
        """Test that an unsorted list comes back newest first."""
        versions = ["v1.29.0", "v1.28.0", "v1.30.0"]
        assert sort_versions_desc(versions) == ["v1.30.0", "v1.29.0", "v1.28.0"]

    def test_semantic_not_lexicographic(self):
        """Test ordering across double-digit minor versions."""
        versions = ["v1.9.0", "v1.10.0", "v1.8.3"]
        assert sort_versions_desc(versions) == ["v1.10.0", "v1.9.0", "v1.8.3"]

    def test_prereleases_below_release(self):
        """Test that pre-releases follow their final release."""
        versions = ["v1.30.0-alpha.1", "v1.30.0", "v1.30.0-rc.0", "v1.29.4"]
        assert sort_versions_desc(versions) == [
            "v1.30.0",
            "v1.30.0-rc.0",
            "v1.30.0-alpha.1",
            "v1.29.4",
        ]

    @pytest.mark.parametrize("versions", list(itertools.permutations(["vfoo", "v1.10.0", "vbar", "v1.9.0"])))
    def test_mixed_tags_total_order(self, versions):
        """Test mixed parseable and unparseable tags sort the same from any input order."""
        assert sort_versions_desc(versions) == ["v1.10.0", "v1.9.0", "vfoo", "vbar"]

    def test_empty(self):
        """Test sorting an empty list."""
        assert sort_versions_desc([]) == []
