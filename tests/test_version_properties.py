# SPDX-License-Identifier: MIT
"""Property-based tests for version parsing and comparison.

These tests verify that:
- Formatting then parsing returns the same Version
- is_newer agrees with compare_versions
- compare_versions is antisymmetric
- Inputs without two or three numeric components are rejected
"""

from __future__ import annotations

import pytest
from hypothesis import assume, given, settings, strategies as st

from tinyver import (
    MAX_COMPONENT,
    LengthError,
    Version,
    compare_versions,
    parse_version,
)


# =============================================================================
# Strategies for generating test data
# =============================================================================

components = st.integers(min_value=0, max_value=MAX_COMPONENT)

# Suffixes that survive a round trip: no "-" and at least one visible character
round_trip_suffixes = st.from_regex(r"[A-Za-z0-9_+]{1,12}", fullmatch=True)

any_suffixes = st.one_of(st.just(""), st.just("  "), st.text(max_size=12))


@st.composite
def versions(draw, suffixes=any_suffixes):
    """Generate a Version, biased towards shared numeric triples."""
    small = st.integers(min_value=0, max_value=3)
    number = st.one_of(small, components)
    return Version(draw(number), draw(number), draw(number), draw(suffixes))


# =============================================================================
# Properties
# =============================================================================


class TestRoundTrip:
    """Formatting then parsing yields an equal Version."""

    @given(major=components, minor=components, patch=components, suffix=round_trip_suffixes)
    @settings(max_examples=100)
    def test_with_suffix(self, major, minor, patch, suffix):
        version = Version(major, minor, patch, suffix)
        assert parse_version(version.to_display_string()) == version

    @given(major=components, minor=components, patch=components)
    @settings(max_examples=100)
    def test_release(self, major, minor, patch):
        version = Version(major, minor, patch)
        assert parse_version(str(version)) == version


class TestOrdering:
    """is_newer and compare_versions agree."""

    @given(a=versions(), b=versions())
    @settings(max_examples=200)
    def test_is_newer_matches_compare(self, a, b):
        assert a.is_newer(b) == (compare_versions(a, b) == 1)

    @given(a=versions(), b=versions())
    @settings(max_examples=200)
    def test_antisymmetric(self, a, b):
        assert compare_versions(a, b) == -compare_versions(b, a)

    @given(a=versions(), b=versions())
    @settings(max_examples=200)
    def test_never_both_newer(self, a, b):
        assert not (a.is_newer(b) and b.is_newer(a))

    @given(v=versions())
    @settings(max_examples=100)
    def test_irreflexive(self, v):
        assert v.is_newer(v) is False


class TestLengthValidation:
    """Numeric parts with the wrong component count are rejected."""

    @given(parts=st.lists(st.integers(min_value=0, max_value=255), min_size=1, max_size=8))
    @settings(max_examples=100)
    def test_component_count(self, parts):
        assume(len(parts) not in (2, 3))
        with pytest.raises(LengthError):
            parse_version(".".join(str(p) for p in parts))
