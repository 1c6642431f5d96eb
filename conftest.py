"""
Shared pytest fixtures for the Footy Career test suite.
"""
import pytest

from generation.generate import create_profile, generate_league
from models.constants import TIER_LOCAL
from simulation.rng import RandomOutcomeProvider


@pytest.fixture
def rng():
    return RandomOutcomeProvider(42)


@pytest.fixture
def profile():
    return create_profile(
        "Jack Riley",
        "Midfielder",
        {"kicking": 5, "handball": 5, "stamina": 5},
    )


@pytest.fixture
def league(rng):
    return generate_league(TIER_LOCAL, rng, 8)
