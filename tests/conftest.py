# SPDX-License-Identifier: MIT
"""Pytest configuration and fixtures for semver_core tests."""

from __future__ import annotations

import pytest


@pytest.fixture
def precedence_chain() -> list[str]:
    """The ascending example chain from the SemVer 2.0.0 specification."""
    return [
        "1.0.0-alpha",
        "1.0.0-alpha.1",
        "1.0.0-alpha.beta",
        "1.0.0-beta",
        "1.0.0-beta.2",
        "1.0.0-beta.11",
        "1.0.0-rc.1",
        "1.0.0",
    ]


@pytest.fixture
def precedence_chain_with_build() -> list[list[str]]:
    """The ascending chain grouped by equal precedence; build metadata differs within a group."""
    return [
        ["1.0.0-alpha", "1.0.0-alpha+001"],
        ["1.0.0-alpha.1"],
        ["1.0.0-alpha.beta"],
        ["1.0.0-beta", "1.0.0-beta+exp.sha.5114f85"],
        ["1.0.0-beta.2"],
        ["1.0.0-beta.11"],
        ["1.0.0-rc.1"],
        ["1.0.0", "1.0.0+20130313144700"],
    ]
