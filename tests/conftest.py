"""Core test fixtures for dice pool tests."""

import os

import pytest

from dicepool.config import get_settings
from dicepool.random_source import (
    MaxRandomSource,
    SequenceRandomSource,
    get_default_source,
)


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch):
    """Clear DICEPOOL_* variables and cached singletons around each test."""
    for key in list(os.environ):
        if key.upper().startswith("DICEPOOL_"):
            monkeypatch.delenv(key)
    get_settings.cache_clear()
    get_default_source.cache_clear()
    yield
    get_settings.cache_clear()
    get_default_source.cache_clear()


@pytest.fixture
def max_source() -> MaxRandomSource:
    """Source that always rolls the top face."""
    return MaxRandomSource()


@pytest.fixture
def sequence_source() -> SequenceRandomSource:
    """Source that rolls 1, 2, 3, ... on a d20."""
    return SequenceRandomSource()
