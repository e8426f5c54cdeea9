"""Game models — moves, strategies, payoff matrix, and round outcomes."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict


class Move(Enum):
    """A player's action in one round. Codes match the prover's raw encoding."""

    COOPERATE = 0
    DEFECT = 1


class Strategy(Enum):
    """The closed set of strategies a move can be checked against."""

    TIT_FOR_TAT = "tit_for_tat"
    ALWAYS_DEFECT = "always_defect"
    ALWAYS_COOPERATE = "always_cooperate"
    GRUDGE = "grudge"


class PayoffMatrix(BaseModel):
    """Prisoner's Dilemma payoffs: reward, sucker, temptation, punishment.

    A well-formed matrix satisfies T > R > P > S. Construction does not
    enforce it; the round engine only rejects R <= P and the attestation
    boundary rejects the full ordering.
    """

    model_config = ConfigDict(frozen=True)

    r: int
    s: int
    t: int
    p: int

    @classmethod
    def default(cls) -> PayoffMatrix:
        """Both cooperate +2, sucker -1, temptation +3, both defect 0."""
        return cls(r=2, s=-1, t=3, p=0)

    def is_well_formed(self) -> bool:
        return self.t > self.r > self.p > self.s


DEFAULT_PAYOFF_MATRIX = PayoffMatrix.default()


class RoundOutcome(BaseModel):
    """Immutable snapshot of one played round."""

    model_config = ConfigDict(frozen=True)

    move_1: Move
    move_2: Move
    payoff_1: int
    payoff_2: int
