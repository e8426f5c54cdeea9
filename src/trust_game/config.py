"""Application settings via pydantic-settings. Loads from environment and .env file."""

from __future__ import annotations

import logging

from pydantic import model_validator
from pydantic_settings import BaseSettings

from trust_game.core.governance import create_proposal
from trust_game.core.state import GameState, new_game
from trust_game.models.game import PayoffMatrix
from trust_game.models.governance import DEFAULT_VOTING_ROUNDS, GovernanceState, ProposalType

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class Settings(BaseSettings):
    """Trust Game configuration.

    These values only seed defaults for the host. Engine functions take
    their parameters explicitly, so results never depend on the environment.
    """

    # Games
    trust_game_total_rounds: int = 10
    trust_game_payoff_r: int = 2  # Both cooperate
    trust_game_payoff_s: int = -1  # Cooperated against a defector
    trust_game_payoff_t: int = 3  # Defected against a cooperator
    trust_game_payoff_p: int = 0  # Both defect

    # Governance
    trust_game_voting_rounds: int = DEFAULT_VOTING_ROUNDS

    # Logging
    trust_game_log_level: str = "INFO"

    model_config = {"env_prefix": "", "env_file": ".env", "extra": "ignore"}

    @model_validator(mode="after")
    def _require_well_formed_payoffs(self) -> Settings:
        """A configured matrix must be a real Prisoner's Dilemma: T > R > P > S."""
        if not self.payoff_matrix().is_well_formed():
            msg = (
                "Payoff matrix must satisfy T > R > P > S, got "
                f"R={self.trust_game_payoff_r} S={self.trust_game_payoff_s} "
                f"T={self.trust_game_payoff_t} P={self.trust_game_payoff_p}"
            )
            raise ValueError(msg)
        return self

    @model_validator(mode="after")
    def _require_positive_rounds(self) -> Settings:
        if self.trust_game_total_rounds < 1 or self.trust_game_voting_rounds < 1:
            raise ValueError("Round counts must be at least 1")
        return self

    def payoff_matrix(self) -> PayoffMatrix:
        return PayoffMatrix(
            r=self.trust_game_payoff_r,
            s=self.trust_game_payoff_s,
            t=self.trust_game_payoff_t,
            p=self.trust_game_payoff_p,
        )

    def new_game(self) -> GameState:
        """A fresh game using the configured round count and payoffs."""
        return new_game(self.trust_game_total_rounds, self.payoff_matrix())

    def create_proposal(
        self,
        state: GovernanceState,
        proposal_type: ProposalType,
        description: str,
    ) -> int:
        """Open a proposal whose voting window is the configured length."""
        return create_proposal(
            state,
            proposal_type,
            description,
            total_voting_rounds=self.trust_game_voting_rounds,
        )


def configure_logging(settings: Settings | None = None) -> None:
    """Apply the configured log level and format to the root logger."""
    settings = settings or Settings()
    logging.basicConfig(
        level=getattr(logging, settings.trust_game_log_level.upper(), logging.INFO),
        format=LOG_FORMAT,
    )
