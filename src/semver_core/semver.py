# SPDX-License-Identifier: MIT
"""Semantic version parsing and formatting.

Supports MAJOR.MINOR.PATCH format with optional pre-release and build metadata:
- Pre-release: -alpha, -alpha.1, -beta, -beta.2, -rc, -rc.1, -0.3.7
- Build metadata: +build, +build.123, +20240101, +exp.sha.5114f85

Equality of Version objects is structural and includes build metadata.
Precedence, which ignores build metadata, is available through
Version.compare_to() and the functions in semver_core.compare.
"""

from __future__ import annotations

import dataclasses
import logging
import re
from dataclasses import dataclass
from typing import Any, Final, Iterable, Optional, Union

from .errors import InvalidVersionError
from .identifiers import (
    IDENTIFIER_CHARS,
    MAX_NUMBER,
    Identifier,
    compare_prerelease,
    describe_number,
    fits_number,
    is_build_identifier,
    is_numeric_identifier,
    parse_identifier,
    to_build,
    to_prerelease,
)

logger = logging.getLogger(__name__)

# Semantic versioning regex pattern (SemVer 2.0.0 compliant)
# https://semver.org/#is-there-a-suggested-regular-expression-regex-to-check-a-semver-string
# Accepts exactly the strings parse_version() accepts, except that it does
# not bound numbers to MAX_NUMBER.
SEMVER_PATTERN = re.compile(
    r"^(?P<major>0|[1-9][0-9]*)"
    r"\.(?P<minor>0|[1-9][0-9]*)"
    r"\.(?P<patch>0|[1-9][0-9]*)"
    r"(?:-(?P<prerelease>(?:0|[1-9][0-9]*|[0-9]*[a-zA-Z-][0-9a-zA-Z-]*)"
    r"(?:\.(?:0|[1-9][0-9]*|[0-9]*[a-zA-Z-][0-9a-zA-Z-]*))*))?"
    r"(?:\+(?P<buildmetadata>[0-9a-zA-Z-]+(?:\.[0-9a-zA-Z-]+)*))?\Z"
)

_CORE_FIELDS = ("major", "minor", "patch")

# Scanner states. Once left, a state is never re-entered.
_IN_CORE = "core"
_IN_PRERELEASE = "pre-release"
_IN_BUILD = "build"


def _invalid(version: str, message: str, segment: Optional[str] = None) -> InvalidVersionError:
    logger.debug("Rejected version %r (%s): %s", version, segment or "input", message)
    return InvalidVersionError(version, message, segment=segment)


@dataclass(frozen=True, slots=True)
class Version:
    """Represents a semantic version.

    Attributes:
        major: Major version number (breaking changes)
        minor: Minor version number (new features, backward compatible)
        patch: Patch version number (bug fixes, backward compatible)
        prerelease: Pre-release identifiers, e.g. (alpha, 1) for "alpha.1"
        build: Build metadata identifiers, e.g. ("build", "123")

    The constructor accepts pre-release and build metadata either as dotted
    strings or as iterables, and validates every field. Instances are immutable.
    """

    major: int
    minor: int
    patch: int
    prerelease: tuple[Identifier, ...] = ()
    build: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        for name in _CORE_FIELDS:
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise InvalidVersionError(
                    str(value),
                    f"Invalid {name.upper()} version: expected int, got {type(value).__name__}",
                    segment=name,
                )
        for name in _CORE_FIELDS:
            value = getattr(self, name)
            if not 0 <= value <= MAX_NUMBER:
                fields = ".".join(describe_number(getattr(self, f)) for f in _CORE_FIELDS)
                raise InvalidVersionError(
                    fields,
                    f"Invalid {name.upper()} version: {describe_number(value)} "
                    f"(must be between 0 and {MAX_NUMBER})",
                    segment=name,
                )
        object.__setattr__(self, "prerelease", to_prerelease(self.prerelease))
        object.__setattr__(self, "build", to_build(self.build))

    @classmethod
    def of(
        cls,
        major: int,
        minor: int,
        patch: int,
        prerelease: Union[str, Iterable[Union[Identifier, int, str]], None] = None,
        build: Union[str, Iterable[str], None] = None,
    ) -> Version:
        """Build a Version from its fields.

        Examples:
            >>> str(Version.of(1, 0, 0, ["alpha", 1]))
            '1.0.0-alpha.1'
            >>> str(Version.of(1, 0, 0, "rc.1", "build.5"))
            '1.0.0-rc.1+build.5'
        """
        return cls(major, minor, patch, prerelease, build)  # type: ignore[arg-type]

    @classmethod
    def parse(cls, version_string: str) -> Version:
        """Parse a version string. See parse_version()."""
        return parse_version(version_string)

    def __str__(self) -> str:
        """Return the canonical string representation of the version."""
        version = f"{self.major}.{self.minor}.{self.patch}"
        if self.prerelease:
            version += "-" + ".".join(str(part) for part in self.prerelease)
        if self.build:
            version += "+" + ".".join(self.build)
        return version

    @property
    def has_prerelease(self) -> bool:
        """Return True if the version carries pre-release identifiers."""
        return bool(self.prerelease)

    @property
    def is_initial_development(self) -> bool:
        """Return True for major version zero, where anything may change."""
        return self.major == 0

    @property
    def is_prerelease(self) -> bool:
        """Return True if this is a pre-release or an initial development version.

        Use has_prerelease to check only for pre-release identifiers.
        """
        return self.has_prerelease or self.is_initial_development

    @property
    def base_version(self) -> str:
        """Return the base version without pre-release or build metadata."""
        return f"{self.major}.{self.minor}.{self.patch}"

    def compare_to(self, other: Version) -> int:
        """Compare precedence with another version, ignoring build metadata.

        Returns:
            -1 if self < other
            0 if self and other have the same precedence
            1 if self > other
        """
        for attr in _CORE_FIELDS:
            val1 = getattr(self, attr)
            val2 = getattr(other, attr)
            if val1 != val2:
                return -1 if val1 < val2 else 1

        return compare_prerelease(self.prerelease, other.prerelease)

    def precedence_equals(self, other: Version) -> bool:
        """Return True if both versions have the same precedence, ignoring build metadata."""
        return self.compare_to(other) == 0

    def is_newer_than(self, other: Version) -> bool:
        """Return True if this version has higher precedence than ``other``."""
        return self.compare_to(other) > 0

    def is_older_than(self, other: Version) -> bool:
        """Return True if this version has lower precedence than ``other``."""
        return self.compare_to(other) < 0

    def is_compatible_with(self, other: Version) -> bool:
        """Return True if this version can stand in for ``other``.

        Versions are compatible when they share a non-zero major version and
        this version has at least the precedence of ``other``. With major
        version zero, only versions of equal precedence are compatible.
        """
        if self.major == 0 or other.major == 0:
            return self.compare_to(other) == 0

        return self.major == other.major and self.compare_to(other) >= 0

    def with_major(self, major: int) -> Version:
        """Return a copy with the major version replaced."""
        return dataclasses.replace(self, major=major)

    def with_minor(self, minor: int) -> Version:
        """Return a copy with the minor version replaced."""
        return dataclasses.replace(self, minor=minor)

    def with_patch(self, patch: int) -> Version:
        """Return a copy with the patch version replaced."""
        return dataclasses.replace(self, patch=patch)

    def with_prerelease(self, prerelease: Union[str, Iterable[Union[Identifier, int, str]], None]) -> Version:
        """Return a copy with the pre-release identifiers replaced (None removes them)."""
        return dataclasses.replace(self, prerelease=prerelease)

    def with_build(self, build: Union[str, Iterable[str], None]) -> Version:
        """Return a copy with the build metadata replaced (None removes it)."""
        return dataclasses.replace(self, build=build)


def _parse_core_field(version_string: str, token: str, segment: str) -> int:
    if not token:
        raise _invalid(version_string, f"Missing {segment} version", segment)
    if not (token.isascii() and token.isdigit()):
        raise _invalid(version_string, f"Non-numeric {segment} version: {token!r}", segment)
    if not is_numeric_identifier(token):
        raise _invalid(version_string, f"Leading zero in {segment} version: {token!r}", segment)
    if not fits_number(token):
        raise _invalid(version_string, f"{segment.capitalize()} version exceeds {MAX_NUMBER}", segment)
    return int(token)


def _check_prerelease_token(version_string: str, token: str) -> None:
    segment = _IN_PRERELEASE
    if not token:
        raise _invalid(version_string, "Empty pre-release identifier", segment)
    if any(c not in IDENTIFIER_CHARS for c in token):
        raise _invalid(version_string, f"Invalid character in pre-release identifier: {token!r}", segment)
    if token.isdigit() and not is_numeric_identifier(token):
        raise _invalid(
            version_string, f"Leading zero in numeric pre-release identifier: {token!r}", segment
        )
    if token.isdigit() and not fits_number(token):
        raise _invalid(
            version_string, f"Numeric pre-release identifier exceeds {MAX_NUMBER}", segment
        )


def _check_build_token(version_string: str, token: str) -> None:
    if not token:
        raise _invalid(version_string, "Empty build identifier", _IN_BUILD)
    if not is_build_identifier(token):
        raise _invalid(version_string, f"Invalid character in build identifier: {token!r}", _IN_BUILD)


def parse_version(version_string: str) -> Version:
    """Parse a semantic version string into a Version object.

    The string is scanned once from left to right. Only the first "-" after
    the patch number starts the pre-release and only the first "+" starts the
    build metadata; any later "-" is part of an identifier.

    Args:
        version_string: A string following semantic versioning format
            (MAJOR.MINOR.PATCH[-prerelease][+build])

    Returns:
        A Version object with parsed components

    Raises:
        InvalidVersionError: If the string does not follow semantic versioning

    Examples:
        >>> str(parse_version("1.2.3"))
        '1.2.3'

        >>> parse_version("1.0.0-alpha.1").prerelease
        (AlphanumericIdentifier(value='alpha'), NumericIdentifier(value=1))

        >>> parse_version("2.0.0-rc.1+build.456").build
        ('build', '456')
    """
    if version_string is None or version_string == "":
        raise _invalid("" if version_string is None else version_string, "Version string cannot be empty")
    if not isinstance(version_string, str):
        raise _invalid(
            str(version_string), f"Version must be a string, got {type(version_string).__name__}"
        )

    core: list[int] = []
    prerelease: list[str] = []
    build: list[str] = []
    state = _IN_CORE

    def finish(token: str) -> None:
        if state == _IN_CORE:
            if len(core) == len(_CORE_FIELDS):
                raise _invalid(version_string, "Too many core version fields", "patch")
            core.append(_parse_core_field(version_string, token, _CORE_FIELDS[len(core)]))
        elif state == _IN_PRERELEASE:
            _check_prerelease_token(version_string, token)
            prerelease.append(token)
        else:
            _check_build_token(version_string, token)
            build.append(token)

    def leave_core() -> None:
        if len(core) != len(_CORE_FIELDS):
            segment = _CORE_FIELDS[len(core)]
            raise _invalid(version_string, f"Missing {segment} version", segment)

    start = 0
    for index, char in enumerate(version_string):
        if char == ".":
            finish(version_string[start:index])
            start = index + 1
        elif char == "-" and state == _IN_CORE:
            finish(version_string[start:index])
            leave_core()
            state = _IN_PRERELEASE
            start = index + 1
        elif char == "+" and state != _IN_BUILD:
            finish(version_string[start:index])
            if state == _IN_CORE:
                leave_core()
            state = _IN_BUILD
            start = index + 1

    finish(version_string[start:])
    if state == _IN_CORE:
        leave_core()

    return Version(
        major=core[0],
        minor=core[1],
        patch=core[2],
        prerelease=tuple(parse_identifier(token) for token in prerelease),
        build=tuple(build),
    )


def is_valid_semver(version_string: Any) -> bool:
    """Check if a string is a valid semantic version.

    Args:
        version_string: The string to validate

    Returns:
        True if the string is a valid semantic version, False otherwise

    Examples:
        >>> is_valid_semver("1.0.0")
        True
        >>> is_valid_semver("1.0")
        False
        >>> is_valid_semver("1.0.0-alpha")
        True
    """
    try:
        parse_version(version_string)
    except InvalidVersionError:
        return False
    return True


def format_version(version: Version) -> str:
    """Return the canonical string form of a version."""
    return str(version)


# Default version for projects that have not released anything yet.
INITIAL: Final[Version] = Version.of(0, 0, 1, "SNAPSHOT")
