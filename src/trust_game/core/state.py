"""Mutable game state for the round engine.

GameState is the working memory of one game in progress. It is only
mutated by rounds.play_round(); RoundOutcome is the immutable output.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from trust_game.models.game import DEFAULT_PAYOFF_MATRIX, Move, PayoffMatrix


@dataclass
class GameState:
    """Mutable state of a repeated game between two players."""

    total_rounds: int
    payoff_matrix: PayoffMatrix = DEFAULT_PAYOFF_MATRIX
    round: int = 0
    score_1: int = 0
    score_2: int = 0
    history_1: list[Move] = field(default_factory=list)
    history_2: list[Move] = field(default_factory=list)

    @property
    def is_finished(self) -> bool:
        return self.round >= self.total_rounds

    @property
    def rounds_remaining(self) -> int:
        return max(0, self.total_rounds - self.round)


def new_game(total_rounds: int, payoff_matrix: PayoffMatrix | None = None) -> GameState:
    """Create a fresh game at round 0 with empty histories."""
    return GameState(
        total_rounds=total_rounds,
        payoff_matrix=payoff_matrix or DEFAULT_PAYOFF_MATRIX,
    )
