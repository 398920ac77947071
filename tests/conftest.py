"""Pytest configuration and fixtures."""

import random
import sys
from datetime import datetime, timezone
from pathlib import Path

import pytest

# Ensure the package is on path when running tests without installing it
root = Path(__file__).resolve().parent.parent
if str(root) not in sys.path:
    sys.path.insert(0, str(root))

FIXED_NOW = datetime(2025, 6, 1, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def now() -> datetime:
    return FIXED_NOW


@pytest.fixture
def clock():
    """Clock pinned to FIXED_NOW."""
    return lambda: FIXED_NOW


@pytest.fixture
def rng() -> random.Random:
    return random.Random(1234)
