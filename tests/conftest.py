"""
Fair Dice - Test Configuration and Fixtures

Common fixtures and test doubles for all test modules.
"""

import random

import pytest

from src.config.settings import Settings
from src.engine.fair_random import FairRandomProtocol
from src.engine.session import GameSession


class ScriptedRng:
    """Random source that returns preset indices from ``randrange``."""

    def __init__(self, indices):
        self._indices = iter(indices)

    def randrange(self, stop):
        index = next(self._indices)
        assert 0 <= index < stop
        return index


# =============================================================================
# DICE DATA
# =============================================================================

@pytest.fixture
def preset_faces() -> tuple[tuple[int, ...], ...]:
    """The fixed non-transitive dice, in pool order."""
    return (
        (2, 2, 4, 4, 9, 9),
        (1, 1, 6, 6, 8, 8),
        (3, 3, 5, 5, 7, 7),
    )


# =============================================================================
# ENGINE FIXTURES
# =============================================================================

@pytest.fixture
def settings() -> Settings:
    """Settings isolated from the environment, with a short help simulation."""
    return Settings(_env_file=None, help_trials=500)


@pytest.fixture
def protocol() -> FairRandomProtocol:
    return FairRandomProtocol()


@pytest.fixture
def seeded_rng() -> random.Random:
    return random.Random(20241019)


@pytest.fixture
def started_session(settings, seeded_rng):
    """A session that has just entered FIRST_MOVE, with its start events."""
    return GameSession.start("2,2,4,4,9,9", settings=settings, rng=seeded_rng)


@pytest.fixture
def scripted_rng():
    """Factory for a random source returning the given face indices."""
    return ScriptedRng
