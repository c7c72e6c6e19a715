# SPDX-License-Identifier: MIT
"""Exceptions raised by semver_core."""

from __future__ import annotations

from typing import Any, Optional


class InvalidVersionError(Exception):
    """Raised when a version string or version field does not follow semantic versioning.

    Attributes:
        version: The offending input, as a string
        message: Human readable description of the failure
        segment: The part of the version that failed ("major", "minor",
            "patch", "pre-release" or "build"), or None if the failure is
            not tied to a single segment
    """

    def __init__(self, version: Any, message: str = "", segment: Optional[str] = None):
        self.version = version if isinstance(version, str) else str(version)
        self.message = message or f"Invalid semantic version: {self.version}"
        self.segment = segment
        super().__init__(self.message)


InvalidVersion = InvalidVersionError
