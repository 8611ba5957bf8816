"""
Shared pytest fixtures for all tests.

This module provides common fixtures including:
- Seeded random generators
- Sample challenge parameters and yardages
- Challenge builder with deterministic placement
- FastAPI test clients
"""
import pytest
import numpy as np
from fastapi.testclient import TestClient

from fsx_challenge.main import app
from fsx_challenge.api.dependencies import get_challenge_builder, limiter
from fsx_challenge.domain.units import Yards
from fsx_challenge.services.domain.challenge_builder import (
    ChallengeBuilder,
    ChallengeParameters,
)


SEED = 20240611


class ScriptedRng:
    """Random source replaying a fixed list of milli-yard draws."""

    def __init__(self, draws):
        self.draws = list(draws)
        self.calls = []

    def integers(self, low, high):
        self.calls.append((low, high))
        return self.draws.pop(0)


# ============================================================
# Sample Data Fixtures
# ============================================================

@pytest.fixture
def rng() -> np.random.Generator:
    """Deterministic numpy generator."""
    return np.random.default_rng(SEED)


@pytest.fixture
def scripted_rng():
    """Factory for random sources that replay given milli-yard draws."""
    return ScriptedRng


@pytest.fixture
def default_params() -> ChallengeParameters:
    """20-40 yard challenge with default gap, rings and scores."""
    return ChallengeParameters(dist_min=Yards.new(20), dist_max=Yards.new(40))


@pytest.fixture
def sample_yardages() -> list[Yards]:
    """Twenty yardages alternating across a 20-40 yard range."""
    return [Yards.from_real(20.5 + (i % 2) * 15 + i * 0.125) for i in range(20)]


@pytest.fixture
def seeded_builder() -> ChallengeBuilder:
    """Builder whose every build starts from the same seed."""
    return ChallengeBuilder(rng_factory=lambda: np.random.default_rng(SEED))


# ============================================================
# FastAPI Test Client Fixtures
# ============================================================

@pytest.fixture(autouse=True)
def reset_rate_limiter():
    """Start every test with an empty rate limit window."""
    limiter.reset()
    yield


@pytest.fixture
def test_client() -> TestClient:
    """Create a synchronous test client for FastAPI."""
    return TestClient(app)


@pytest.fixture
def seeded_client(seeded_builder):
    """Test client whose challenges are placed from a fixed seed."""
    app.dependency_overrides[get_challenge_builder] = lambda: seeded_builder
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
