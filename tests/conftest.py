"""Pytest configuration and shared fixtures."""

from unittest.mock import Mock

import pytest

from tagmark.config import settings
from tagmark.placeholders import Replacement, combining, dynamic, map_resolver


@pytest.fixture
def mock_settings(monkeypatch):
    """Restore library settings after a test changes them."""
    monkeypatch.setattr(settings, "warn_duplicate_keys", False)
    return settings


@pytest.fixture
def user_mapping() -> dict:
    """Create a mutable mapping with a couple of user placeholders."""
    return {
        "name": Replacement.raw("Steve"),
        "rank": Replacement.mini_message("<gold>Admin</gold>"),
    }


@pytest.fixture
def time_generator() -> Mock:
    """Create a generator that only knows the 'time' key."""

    def generate(key):
        if key == "time":
            return Replacement.raw("12:00")
        return None

    return Mock(side_effect=generate)


@pytest.fixture
def scenario_resolver(user_mapping, time_generator):
    """Combine a mapping resolver with a dynamic one."""
    return combining(map_resolver(user_mapping), dynamic(time_generator))
