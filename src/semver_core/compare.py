# SPDX-License-Identifier: MIT
"""Version comparison following SemVer 2.0.0 precedence rules.

Pre-release ordering: numeric identifiers < alphanumeric identifiers,
longer identifier lists win ties, and any pre-release < the normal release.
Build metadata is ignored in comparisons per SemVer spec.
"""

from __future__ import annotations

from typing import Union

from .identifiers import identifier_key
from .semver import Version, parse_version


def _as_version(version: Union[str, Version]) -> Version:
    return parse_version(version) if isinstance(version, str) else version


def compare_versions(version1: Union[str, Version], version2: Union[str, Version]) -> int:
    """Compare two semantic versions by precedence.

    Args:
        version1: First version (string or Version object)
        version2: Second version (string or Version object)

    Returns:
        -1 if version1 < version2
        0 if version1 == version2
        1 if version1 > version2

    Raises:
        InvalidVersionError: If either version string is invalid

    Note:
        Build metadata is ignored in comparisons per SemVer specification.

    Examples:
        >>> compare_versions("1.0.0", "2.0.0")
        -1
        >>> compare_versions("1.0.0", "1.0.0+build.7")
        0
        >>> compare_versions("1.0.0-beta.11", "1.0.0-beta.2")
        1
        >>> compare_versions("1.0.0-rc.1", "1.0.0")
        -1
    """
    return _as_version(version1).compare_to(_as_version(version2))


def compare_compatibility(version1: Union[str, Version], version2: Union[str, Version]) -> int:
    """Compare two versions for compatibility rather than exact precedence.

    Versions sharing a non-zero major version are backward compatible and
    compare equal. Major version zero means initial development, where
    anything may change, so such versions fall back to full precedence.

    Examples:
        >>> compare_compatibility("1.0.0-alpha", "1.9.3")
        0
        >>> compare_compatibility("0.1.0", "0.2.0")
        -1
        >>> import functools
        >>> sorted(["2.0.0", "1.4.0", "0.1.0"], key=functools.cmp_to_key(compare_compatibility))
        ['0.1.0', '1.4.0', '2.0.0']
    """
    v1 = _as_version(version1)
    v2 = _as_version(version2)

    # initial development
    if v1.major == 0 or v2.major == 0:
        return v1.compare_to(v2)

    if v1.major == v2.major:
        return 0
    return -1 if v1.major < v2.major else 1


def is_newer(version1: Union[str, Version], version2: Union[str, Version]) -> bool:
    """Return True if version1 has higher precedence than version2."""
    return compare_versions(version1, version2) > 0


def is_older(version1: Union[str, Version], version2: Union[str, Version]) -> bool:
    """Return True if version1 has lower precedence than version2."""
    return compare_versions(version1, version2) < 0


def is_compatible(version1: Union[str, Version], version2: Union[str, Version]) -> bool:
    """Return True if version1 can stand in for version2.

    See Version.is_compatible_with().
    """
    return _as_version(version1).is_compatible_with(_as_version(version2))


def version_key(version: Union[str, Version]) -> tuple:
    """Return a sort key for a version, suitable for sorting.

    Two versions get equal keys exactly when they have the same precedence.

    Args:
        version: Version string or Version object

    Returns:
        A tuple that can be used for sorting versions

    Examples:
        >>> sorted(["1.0.0", "2.0.0", "1.0.0-alpha"], key=version_key)
        ['1.0.0-alpha', '1.0.0', '2.0.0']
    """
    v = _as_version(version)

    # Pre-release key: a release becomes (1,) to sort after pre-releases
    # Pre-release identifiers become (0, parsed_parts...)
    if not v.prerelease:
        prerelease_key: tuple = (1,)
    else:
        prerelease_key = (0, tuple(identifier_key(part) for part in v.prerelease))

    return (v.major, v.minor, v.patch, prerelease_key)
