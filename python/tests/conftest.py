"""Shared fixtures for the grid engine test suite."""

from __future__ import annotations

import random

import pytest

from helpers import FakeClock
from tilegrid.engine.gridengine import GridEngine


@pytest.fixture
def engine() -> GridEngine:
    """A solved 3×3 engine with a fixed seed."""
    return GridEngine(3, rng=random.Random(1234))


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()
