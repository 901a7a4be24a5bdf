"""
Tests for versionkit.versioning.semver module.

Tests strict semantic versions including:
- Construction and validation of components
- The strict grammar (accepted and rejected strings)
- Stability
- Precedence, including natural ordering of pre-release tags
- Equality and hashing
- Update checks
"""

from __future__ import annotations

import pytest

from versionkit.exceptions import InvalidIdentifier, InvalidVersionFormat, VersionError
from versionkit.versioning import SemanticVersion, is_well_formed


def v(text: str) -> SemanticVersion:
    return SemanticVersion.parse(text)


class TestConstruction:
    """Tests for building versions from components."""

    def test_render_plain(self):
        """Test rendering a version without labels."""
        assert str(SemanticVersion(1, 2, 2)) == "1.2.2"

    def test_render_prerelease(self):
        """Test rendering with pre-release tags."""
        assert str(SemanticVersion(1, 2, 2, "alpha.1")) == "1.2.2-alpha.1"
        assert str(SemanticVersion(1, 2, 2, "alpha.1-alpha")) == "1.2.2-alpha.1-alpha"

    def test_render_prerelease_and_build(self):
        """Test rendering with pre-release and build metadata."""
        assert str(SemanticVersion(1, 2, 2, "alpha.1", "546")) == "1.2.2-alpha.1+546"

    def test_render_build_only(self):
        """Test rendering with build metadata only."""
        assert str(SemanticVersion(4, 3, 22, build="mybuild")) == "4.3.22+mybuild"

    def test_prerelease_sequence(self):
        """Test that a list of tags is accepted and stored as a tuple."""
        version = SemanticVersion(1, 0, 0, ["alpha", "1"])
        assert version.prerelease == ("alpha", "1")
        assert str(version) == "1.0.0-alpha-1"

    @pytest.mark.parametrize(
        "prerelease, build",
        [
            ("rele..ase", "build"),
            ("release-something", "..build"),
            ("rele--ase", "build"),
            ("release-something", "--build"),
            ("release", "+build"),
            ("1.2.3-rele--ase", "build"),
        ],
    )
    def test_invalid_labels(self, prerelease, build):
        """Test that malformed labels are rejected at construction."""
        with pytest.raises(InvalidIdentifier):
            SemanticVersion(1, 2, 2, prerelease, build)

    @pytest.mark.parametrize("parts", [(-1, 0, 0), (0, -2, 0), (0, 0, -3)])
    def test_negative_components(self, parts):
        """Test that negative numbers are rejected."""
        with pytest.raises(InvalidVersionFormat):
            SemanticVersion(*parts)

    @pytest.mark.parametrize("bad", ["1", 1.0, True, None])
    def test_non_int_components(self, bad):
        """Test that non-integer numbers (bool included) are rejected."""
        with pytest.raises(InvalidVersionFormat):
            SemanticVersion(bad, 0, 0)

    def test_immutable(self):
        """Test that versions cannot be mutated."""
        version = SemanticVersion(1, 0, 0)
        with pytest.raises(AttributeError):
            version.major = 2  # type: ignore[misc]


class TestGrammar:
    """Tests for is_well_formed and parse."""

    @pytest.mark.parametrize(
        "text",
        [
            "0.1.2",
            "1.2.3",
            "10.20.3",
            "1.2.3-alpha.23-pre",
            "12.12.3-123.hexagon+dontmakemecompileplea.se",
            "1.2.3-alpha-dev.51-something+mybuild-1-4-1975-clang",
            "4.3.22+mybuild",
            "4.1.405+hexa.13331-objectfiles",
        ],
    )
    def test_accepted(self, text):
        """Test compliant strings."""
        assert is_well_formed(text)
        assert SemanticVersion.try_parse(text) is not None

    @pytest.mark.parametrize(
        "text",
        [
            "1.0",
            "01.2.3",
            "1.02.3",
            "2.3.04",
            "a.1.1",
            "1.a.1",
            "1.1.a",
            "1.2.3-rele..ase+build",
            "1.2.3-release-something+..build",
            "1.2.3-rele--ase+build",
            "1.2.3-release-something+--build",
            "1.2.3-release++build",
            "1.2.3+-release-something-build",
            "v1.0.0",
            "1.2.3-",
            "1.2.3+",
            " 1.2.3",
            "1.2.3\n",
            "",
        ],
    )
    def test_rejected(self, text):
        """Test non-compliant strings."""
        assert not is_well_formed(text)
        assert SemanticVersion.try_parse(text) is None
        with pytest.raises(InvalidVersionFormat) as exc_info:
            SemanticVersion.parse(text)
        assert exc_info.value.version == text

    def test_non_ascii_digits_rejected(self):
        """Test that only ASCII digits count as numbers."""
        assert not is_well_formed("١.2.3")

    def test_non_string(self):
        """Test that non-string input is not well formed."""
        assert not is_well_formed(None)
        assert not is_well_formed(123)

    def test_parse_components(self):
        """Test that parsing extracts every component."""
        version = v("1.2.3-alpha-dev.51-something+mybuild-1-4-1975-clang")
        assert version.release == (1, 2, 3)
        assert version.prerelease == ("alpha", "dev.51", "something")
        assert version.build == "mybuild-1-4-1975-clang"

    def test_parse_round_trip(self):
        """Test that rendering a parsed compliant string gives it back."""
        text = "12.12.3-123.hexagon+dontmakemecompileplea.se"
        assert str(v(text)) == text

    def test_errors_share_base(self):
        """Test that version errors can be caught through VersionError."""
        with pytest.raises(VersionError):
            v("nope")


class TestStability:
    """Tests for is_stable and label queries."""

    @pytest.mark.parametrize(
        "text", ["1.2.3", "10.20.3", "4.3.22+mybuild", "4.1.405+hexa.13331-objectfiles"]
    )
    def test_stable(self, text):
        """Test versions above 1.0.0 without pre-release tags."""
        assert v(text).is_stable()

    @pytest.mark.parametrize(
        "text",
        [
            "0.1.2",
            "1.2.3-alpha.23-pre",
            "12.12.3-123.hexagon+dontmakemecompileplea.se",
            "1.2.3-alpha-dev.51-something+mybuild-1-4-1975-clang",
        ],
    )
    def test_unstable(self, text):
        """Test zero-major and pre-release versions."""
        assert not v(text).is_stable()

    def test_has_tags(self):
        """Test querying pre-release tags and build metadata."""
        version = v("1.0.0-alpha-rc.1+exp.sha.5114f85")
        assert version.has_prerelease_tag("rc.1")
        assert not version.has_prerelease_tag("beta")
        assert version.has_build_meta_tag("exp.sha.5114f85")
        assert not version.has_build_meta_tag("exp")


class TestPrecedence:
    """Tests for compare() and the ordering operators."""

    def test_release_ordering(self):
        """Test 1.0.0 < 2.0.0 < 2.1.0 < 2.1.1."""
        assert v("1.0.0").is_less_than(v("2.0.0"))
        assert v("2.0.0").is_less_than(v("2.1.0"))
        assert v("2.1.0").is_less_than(v("2.1.1"))
        assert v("2.1.1").is_greater_than(v("2.1.0"))
        assert v("2.1.0").is_greater_than(v("2.0.0"))
        assert v("2.0.0").is_greater_than(v("1.0.0"))

    def test_numeric_not_lexical(self):
        """Test that components compare as numbers."""
        assert v("1.10.0") > v("1.9.0")

    def test_prerelease_chain(self):
        """Test the standard pre-release ordering chain."""
        chain = [
            "1.0.0-alpha",
            "1.0.0-alpha.1",
            "1.0.0-alpha.beta",
            "1.0.0-beta",
            "1.0.0-beta.2",
            "1.0.0-beta.11",
            "1.0.0-rc.1",
            "1.0.0",
        ]
        for lower, higher in zip(chain, chain[1:]):
            assert v(lower).is_less_than(v(higher)), f"{lower} < {higher}"
            assert v(higher).is_greater_than(v(lower)), f"{higher} > {lower}"

    def test_sorted_chain(self):
        """Test that sorted() orders shuffled versions by precedence."""
        shuffled = ["1.0.0", "1.0.0-beta.11", "1.0.0-alpha", "1.0.0-beta.2", "1.0.0-rc.1"]
        assert [str(x) for x in sorted(v(s) for s in shuffled)] == [
            "1.0.0-alpha",
            "1.0.0-beta.2",
            "1.0.0-beta.11",
            "1.0.0-rc.1",
            "1.0.0",
        ]

    def test_longer_tag_list_wins(self):
        """Test that more tags win when the shared ones tie."""
        assert v("1.0.0-alpha-alpha.1").is_less_than(v("1.0.0-alpha-alpha.1-test"))
        assert v("1.0.0-alpha-alpha.1-test").is_greater_than(v("1.0.0-alpha-alpha.1"))

    def test_numeric_tag_sorts_first(self):
        """Test that an added numeric tag moves to the front of the sorted tags."""
        assert v("1.0.0-alpha-alpha.1").is_greater_than(v("1.0.0-alpha-alpha.1-0"))
        assert v("1.0.0-alpha-alpha.1-0").is_less_than(v("1.0.0-alpha-alpha.1"))

    def test_equal_length_uses_first_sorted_tag(self):
        """Test that equal-length tag lists compare on their first sorted tags."""
        assert v("1.0.0-alpha-zeta").compare(v("1.0.0-alpha-beta")) == 0

    def test_build_ignored(self):
        """Test that build metadata never affects precedence."""
        assert v("1.0.0+a").compare(v("1.0.0+b")) == 0
        assert not v("1.0.0+b").is_greater_than(v("1.0.0+a"))

    def test_compare_values(self):
        """Test compare() returns -1, 0 and 1."""
        assert v("1.0.0").compare(v("2.0.0")) == -1
        assert v("2.0.0").compare(v("2.0.0")) == 0
        assert v("2.0.0").compare(v("1.0.0")) == 1

    def test_operators(self):
        """Test the rich comparison operators."""
        assert v("1.0.0") < v("1.0.1")
        assert v("1.0.0") <= v("1.0.0")
        assert v("1.0.1") > v("1.0.0")
        assert v("1.0.1") >= v("1.0.1")

    def test_unrelated_type(self):
        """Test that ordering against other types raises TypeError."""
        with pytest.raises(TypeError):
            v("1.0.0") < "1.0.1"  # noqa: B015


class TestEquality:
    """Tests for == and hashing."""

    def test_equal(self):
        """Test equal versions."""
        assert v("1.2.3") == v("1.2.3")
        assert v("1.0.0-alpha") == v("1.0.0-alpha")
        assert v("1.0.0-alpha-alpha.1") == v("1.0.0-alpha-alpha.1")

    def test_equal_with_reordered_tags(self):
        """Test that the same tags in another order are equal."""
        assert v("1.0.0-alpha-alpha.1") == v("1.0.0-alpha.1-alpha")

    def test_equal_with_one_shared_tag(self):
        """Test that one shared tag is enough for equality."""
        assert v("1.0.0-alpha-rc") == v("1.0.0-rc")

    def test_not_equal(self):
        """Test unequal versions."""
        v1 = v("1.0.0")
        assert v1 == v1
        assert v1 != v("2.0.0")
        assert v1 != v("1.0.0-alpha")
        assert v1 != v("1.0.0+build")
        assert v("1.0.0-alpha") != v("1.0.0-beta")

    def test_not_equal_to_other_types(self):
        """Test comparison with None and strings."""
        assert v("1.0.0") != None  # noqa: E711
        assert v("1.0.0") != "1.0.0"

    def test_hash_consistent_with_eq(self):
        """Test that equal versions hash alike and collapse in a set."""
        a = v("1.0.0-alpha-alpha.1")
        b = v("1.0.0-alpha.1-alpha")
        assert hash(a) == hash(b)
        assert len({a, b, v("1.0.0")}) == 2


class TestUpdates:
    """Tests for is_update_for and is_update_compatible_for."""

    def test_is_update_for(self):
        """Test plain update checks."""
        assert v("1.0.0").is_update_for(v("0.1.0"))
        assert v("1.1.0").is_update_for(v("1.0.0"))
        assert v("2.1.0").is_update_for(v("1.1.0"))
        assert not v("1.0.0").is_update_for(v("2.0.0"))
        assert not v("1.0.0").is_update_for(v("1.0.0"))

    def test_is_update_compatible_for(self):
        """Test that compatible updates keep the major version."""
        assert v("1.1.0").is_update_compatible_for(v("1.0.0"))
        assert not v("1.0.0").is_update_compatible_for(v("0.1.0"))
        assert not v("2.1.0").is_update_compatible_for(v("1.1.0"))
