"""
Tests for versionkit.versioning.natural module.

Tests numeric-aware string ordering including:
- Equality with and without leading zeros
- Digit runs sorting before letters
- Numeric (not lexical) ordering of embedded numbers
- Sort keys built from the comparator
"""

from __future__ import annotations

import pytest

from versionkit.versioning import natural_compare, natural_key


class TestNaturalCompareEqual:
    """Tests for strings the comparator treats as equal."""

    @pytest.mark.parametrize(
        "a, b",
        [
            ("", ""),
            ("test1", "test1"),
            ("test.1", "test.1"),
            ("test01", "test1"),
            ("test1", "test01"),
        ],
    )
    def test_equal(self, a, b):
        """Test strings that differ at most in leading zeros compare equal."""
        assert natural_compare(a, b) == 0


class TestNaturalCompareOrder:
    """Tests for ordering between different strings."""

    @pytest.mark.parametrize(
        "smaller, larger",
        [
            ("", "a"),
            ("0", "a"),
            ("a", "b"),
            ("1", "2"),
            ("test", "test1"),
            ("test1", "test2"),
            ("test1-1", "test2-1"),
            ("test01-01", "test02-01"),
            ("test1", "test10"),
            ("test2", "test10"),
        ],
    )
    def test_less_than(self, smaller, larger):
        """Test that the smaller string sorts first."""
        assert natural_compare(smaller, larger) < 0

    @pytest.mark.parametrize(
        "larger, smaller",
        [
            ("a", "0"),
            ("b", "a"),
            ("2", "1"),
            ("test1", "test"),
            ("test2", "test1"),
            ("test2-1", "test1-1"),
            ("test02-01", "test01-01"),
            ("test10", "test1"),
            ("test10", "test2"),
        ],
    )
    def test_greater_than(self, larger, smaller):
        """Test that the larger string sorts last."""
        assert natural_compare(larger, smaller) > 0

    def test_huge_numbers(self):
        """Test digit runs far beyond machine integer size still compare by value."""
        big = "9" * 400
        assert natural_compare(f"rc{big}", f"rc1{big}") < 0
        assert natural_compare(f"rc0{big}", f"rc{big}") == 0

    def test_prefix_word_sorts_first(self):
        """Test that a word sorts before a longer word it prefixes."""
        assert natural_compare("alpha.1", "alpha.beta") < 0
        assert natural_compare("alpha", "alpha.1") < 0


class TestNaturalKey:
    """Tests for the natural_key sort key."""

    def test_sort_prerelease_labels(self):
        """Test sorting typical pre-release labels."""
        labels = ["rc.1", "beta.11", "alpha", "beta.2", "beta", "alpha.1"]
        assert sorted(labels, key=natural_key) == [
            "alpha",
            "alpha.1",
            "beta",
            "beta.2",
            "beta.11",
            "rc.1",
        ]

    def test_sort_digits_first(self):
        """Test that purely numeric labels sort before words."""
        assert sorted(["alpha", "10", "2"], key=natural_key) == ["2", "10", "alpha"]
