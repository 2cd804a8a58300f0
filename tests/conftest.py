"""Shared pytest fixtures for the pluscode test suite."""

import pytest

# ---------------------------------------------------------------------------
# Reference codes
# ---------------------------------------------------------------------------

# 10-digit code used throughout the boundary scenarios.
REFERENCE_CODE = "8FWC2345+G6"

# 11-digit code whose center is (51.3701125, -1.217765625).
SHORTENABLE_CODE = "9C3W9QCJ+2VX"


@pytest.fixture()
def reference_code() -> str:
    """A 10-digit full code in Switzerland."""
    return REFERENCE_CODE


@pytest.fixture()
def shortenable_code() -> str:
    """An 11-digit full code in southern England."""
    return SHORTENABLE_CODE


@pytest.fixture()
def shortenable_center() -> tuple[float, float]:
    """Center of ``shortenable_code`` as ``(lat, lng)``."""
    return (51.3701125, -1.217765625)
