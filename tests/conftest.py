#!/usr/bin/env python3
"""
Shared pytest fixtures for seatbot tests.

Every test gets its own settings file so thresholds always start from
their defaults and never leak between tests.
"""

import pytest

from seatbot.config.settings import Settings


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path):
    """Point the Settings singleton at a per-test file."""
    Settings._instance = None
    settings = Settings(tmp_path / "settings.json")
    yield settings
    Settings._instance = None
