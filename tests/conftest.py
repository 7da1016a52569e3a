# ============================================================================
# Planimetry - Test Configuration and Fixtures
#
# Purpose: Shared pytest fixtures for testing
# Inputs: None
# Outputs: Fixtures for use in tests
# Dependencies: pytest
# Usage: pytest tests/ (fixtures are automatically available)
#
# Changelog:
#   2026-03-04: Initial fixtures (fixed clock, temporary log path)
#   2026-03-11: Strip PLANIMETRY_* env vars so config tests are hermetic
# ============================================================================

import os
from datetime import datetime

import pytest


FIXED_MOMENT = datetime(2026, 3, 4, 14, 5, 9)


@pytest.fixture
def fixed_clock():
    """Clock that always returns 2026-03-04 14:05:09."""
    return lambda: FIXED_MOMENT


@pytest.fixture
def log_path(tmp_path):
    """Path to a not-yet-existing log file in a temporary directory."""
    return tmp_path / "log.txt"


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Remove PLANIMETRY_* overrides inherited from the outer environment."""
    for key in list(os.environ):
        if key.startswith("PLANIMETRY_"):
            monkeypatch.delenv(key, raising=False)
