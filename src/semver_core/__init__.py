# SPDX-License-Identifier: MIT
"""Semantic Versioning 2.0.0 parsing, formatting and comparison.

This package provides utilities for parsing, validating, formatting and
comparing semantic versions following the SemVer 2.0.0 specification.

Example:
    >>> from semver_core import parse_version, compare_versions, is_valid_semver
    >>>
    >>> version = parse_version("1.2.3-alpha.1+build.456")
    >>> version.major
    1
    >>> str(version)
    '1.2.3-alpha.1+build.456'
    >>>
    >>> is_valid_semver("1.0.0")
    True
    >>>
    >>> compare_versions("1.0.0", "2.0.0")
    -1
"""

__version__ = "0.1.0"

from .errors import InvalidVersion, InvalidVersionError
from .identifiers import (
    MAX_NUMBER,
    AlphanumericIdentifier,
    Identifier,
    NumericIdentifier,
    compare_identifiers,
    parse_identifier,
)
from .semver import (
    INITIAL,
    SEMVER_PATTERN,
    Version,
    format_version,
    is_valid_semver,
    parse_version,
)
from .compare import (
    compare_compatibility,
    compare_versions,
    is_compatible,
    is_newer,
    is_older,
    version_key,
)

__all__ = [
    # Errors
    "InvalidVersionError",
    "InvalidVersion",
    # Identifiers
    "Identifier",
    "NumericIdentifier",
    "AlphanumericIdentifier",
    "parse_identifier",
    "compare_identifiers",
    "MAX_NUMBER",
    # Version parsing and formatting
    "Version",
    "parse_version",
    "is_valid_semver",
    "format_version",
    "INITIAL",
    "SEMVER_PATTERN",
    # Version comparison
    "compare_versions",
    "compare_compatibility",
    "is_newer",
    "is_older",
    "is_compatible",
    "version_key",
]
