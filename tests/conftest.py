"""Pytest configuration and shared fixtures."""
from __future__ import annotations

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent))

from todo_api.config import reset_settings


@pytest.fixture(autouse=True)
def _fresh_settings():
    """Drop cached settings so environment changes in one test never leak."""
    reset_settings()
    yield
    reset_settings()
