# SPDX-License-Identifier: MIT
"""Property-based tests for parsing, formatting and precedence.

These tests verify that:
- Formatting a constructed version and parsing it back yields the same version
- Formatting is idempotent on parsed output
- compare_versions is a total order that ignores build metadata
- version_key orders exactly like compare_versions
- SEMVER_PATTERN accepts exactly the strings the parser accepts
"""

from __future__ import annotations

from hypothesis import given, settings, strategies as st

from semver_core import (
    MAX_NUMBER,
    SEMVER_PATTERN,
    Version,
    compare_versions,
    format_version,
    is_valid_semver,
    parse_version,
    version_key,
)


# =============================================================================
# Strategies for generating test data
# =============================================================================

core_numbers = st.integers(min_value=0, max_value=MAX_NUMBER)

# Small alphabets so that generated identifiers collide often enough to
# exercise tie-breaking.
alphanumeric_texts = st.from_regex(r"[0-9]{0,2}[a-cA-C-][0-9a-cA-C-]{0,3}", fullmatch=True)
numeric_values = st.integers(min_value=0, max_value=20)

prerelease_parts = st.one_of(numeric_values, alphanumeric_texts)
build_parts = st.from_regex(r"[0-9a-zA-Z-]{1,6}", fullmatch=True)


@st.composite
def versions(draw, max_core: int | None = None):
    """Generate a valid Version."""
    numbers = st.integers(0, max_core) if max_core is not None else core_numbers
    return Version.of(
        draw(numbers),
        draw(numbers),
        draw(numbers),
        draw(st.lists(prerelease_parts, max_size=4)),
        draw(st.lists(build_parts, max_size=3)),
    )


# Versions drawn from a narrow range, to produce many equal-core pairs
close_versions = versions(max_core=1)

# Raw strings built from the characters that matter to the grammar
_GRAMMAR_ALPHABET = "0123a-+.é "
grammar_strings = st.text(alphabet=_GRAMMAR_ALPHABET, max_size=14)


@st.composite
def mutated_versions(draw):
    """Generate a formatted version with one character inserted, removed or replaced."""
    text = format_version(draw(versions(max_core=12)))
    index = draw(st.integers(0, len(text)))
    char = draw(st.sampled_from(_GRAMMAR_ALPHABET))
    action = draw(st.sampled_from(["insert", "delete", "replace"]))
    if action == "insert":
        return text[:index] + char + text[index:]
    if action == "delete":
        return text[:index] + text[index + 1 :]
    return text[:index] + char + text[index + 1 :]


# Strings close to the grammar, valid or not
near_versions = st.one_of(grammar_strings, versions().map(format_version), mutated_versions())


# =============================================================================
# Round trip
# =============================================================================


class TestRoundTrip:
    """Property tests for formatting and parsing."""

    @given(version=versions())
    @settings(max_examples=200)
    def test_parse_format_round_trip(self, version: Version):
        """parse(format(v)) == v for every valid version."""
        assert parse_version(format_version(version)) == version

    @given(version=versions())
    @settings(max_examples=100)
    def test_format_idempotent(self, version: Version):
        """format(parse(format(v))) == format(v)."""
        text = format_version(version)
        assert format_version(parse_version(text)) == text

    @given(text=near_versions)
    @settings(max_examples=300)
    def test_valid_strings_round_trip(self, text: str):
        """Any accepted string formats back to itself."""
        if is_valid_semver(text):
            assert str(parse_version(text)) == text


# =============================================================================
# Ordering laws
# =============================================================================


class TestOrderingLaws:
    """Property tests for compare_versions."""

    @given(a=close_versions)
    @settings(max_examples=100)
    def test_reflexive(self, a: Version):
        """Every version has the same precedence as itself."""
        assert compare_versions(a, a) == 0

    @given(a=close_versions, b=close_versions)
    @settings(max_examples=300)
    def test_antisymmetric(self, a: Version, b: Version):
        """compare(a, b) == -compare(b, a)."""
        assert compare_versions(a, b) == -compare_versions(b, a)

    @given(a=close_versions, b=close_versions, c=close_versions)
    @settings(max_examples=300)
    def test_transitive(self, a: Version, b: Version, c: Version):
        """a <= b and b <= c imply a <= c."""
        if compare_versions(a, b) <= 0 and compare_versions(b, c) <= 0:
            assert compare_versions(a, c) <= 0

    @given(a=close_versions, build=st.lists(build_parts, max_size=3))
    @settings(max_examples=100)
    def test_build_ignored(self, a: Version, build: list[str]):
        """Replacing build metadata never changes precedence."""
        assert compare_versions(a, a.with_build(build)) == 0

    @given(a=close_versions, b=close_versions)
    @settings(max_examples=300)
    def test_version_key_agrees(self, a: Version, b: Version):
        """version_key orders exactly like compare_versions."""
        ka, kb = version_key(a), version_key(b)
        expected = (ka > kb) - (ka < kb)
        assert compare_versions(a, b) == expected

    @given(a=close_versions, b=close_versions)
    @settings(max_examples=200)
    def test_equality_implies_equal_precedence(self, a: Version, b: Version):
        """Structurally equal versions always share precedence."""
        if a == b:
            assert compare_versions(a, b) == 0
            assert hash(a) == hash(b)


# =============================================================================
# Grammar agreement
# =============================================================================


class TestGrammarAgreement:
    """The reference regex and the scanning parser accept the same language."""

    @given(text=near_versions)
    @settings(max_examples=1000)
    def test_pattern_matches_parser(self, text: str):
        """SEMVER_PATTERN matches exactly when parse_version succeeds."""
        assert (SEMVER_PATTERN.match(text) is not None) == is_valid_semver(text)

    @given(version=versions())
    @settings(max_examples=100)
    def test_pattern_accepts_formatted(self, version: Version):
        """Every formatted version matches SEMVER_PATTERN."""
        assert SEMVER_PATTERN.match(format_version(version)) is not None
