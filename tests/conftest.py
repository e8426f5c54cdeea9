"""Shared test fixtures."""

import pytest

from trust_game.config import Settings
from trust_game.core.state import GameState, new_game
from trust_game.models.game import PayoffMatrix
from trust_game.models.governance import GovernanceState


@pytest.fixture
def settings() -> Settings:
    """Test settings with defaults."""
    return Settings()


@pytest.fixture
def matrix() -> PayoffMatrix:
    return PayoffMatrix.default()


@pytest.fixture
def game(matrix: PayoffMatrix) -> GameState:
    """A fresh three-round game with the default payoffs."""
    return new_game(3, matrix)


@pytest.fixture
def gov() -> GovernanceState:
    return GovernanceState()
