"""
Pytest fixtures for sleep plan tests.
"""

import sys
from pathlib import Path

import pytest

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from sleepplan import generate_shift_plan, generate_wake_plan, get_protocol


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep a developer's SLEEPPLAN_* settings out of the tests."""
    monkeypatch.delenv("SLEEPPLAN_PROTOCOL", raising=False)
    monkeypatch.delenv("SLEEPPLAN_LOG_LEVEL", raising=False)


@pytest.fixture
def standard_protocol():
    """The default protocol."""
    return get_protocol("standard")


@pytest.fixture
def day_shift_plan():
    """08:00-16:00 day shift."""
    return generate_shift_plan("08:00", "16:00")


@pytest.fixture
def night_shift_plan():
    """22:00-06:00 night shift (crosses midnight)."""
    return generate_shift_plan("22:00", "06:00")


@pytest.fixture
def long_night_shift_plan():
    """19:00-07:00 12-hour night shift; main sleep runs past the display cycle."""
    return generate_shift_plan("19:00", "07:00")


@pytest.fixture
def wake_plan():
    """07:00 target wake time, no shift overlay."""
    return generate_wake_plan("07:00")
