"""Round engine — payoff lookup, claimed-result validation, round execution.

play_round() is the only function that mutates a GameState. validate_move()
is advisory: callers may run it first, play_round() never re-runs it.
"""

from __future__ import annotations

import logging

from trust_game.core.errors import GameFinishedError
from trust_game.core.state import GameState
from trust_game.models.game import Move, PayoffMatrix, RoundOutcome

logger = logging.getLogger(__name__)


def get_payoffs(move_1: Move, move_2: Move, payoff_matrix: PayoffMatrix) -> tuple[int, int]:
    """Payoffs for (player 1, player 2) from the 2x2 joint-move table."""
    if move_1 is Move.COOPERATE and move_2 is Move.COOPERATE:
        return payoff_matrix.r, payoff_matrix.r
    if move_1 is Move.COOPERATE:
        return payoff_matrix.s, payoff_matrix.t
    if move_2 is Move.COOPERATE:
        return payoff_matrix.t, payoff_matrix.s
    return payoff_matrix.p, payoff_matrix.p


def validate_move(
    state: GameState,
    move_1: Move,
    move_2: Move,
    claimed_payoff_1: int,
    claimed_payoff_2: int,
) -> bool:
    """Check a claimed round result against recomputation. Read-only.

    Invalid when the game is already over, when the claimed payoffs differ
    from the matrix, or when the matrix does not reward mutual cooperation
    over mutual defection (R <= P).
    """
    if state.round >= state.total_rounds:
        logger.debug("move_rejected reason=game_finished round=%d", state.round)
        return False

    actual_1, actual_2 = get_payoffs(move_1, move_2, state.payoff_matrix)
    if claimed_payoff_1 != actual_1 or claimed_payoff_2 != actual_2:
        logger.debug(
            "move_rejected reason=payoff_mismatch claimed=(%d,%d) actual=(%d,%d)",
            claimed_payoff_1,
            claimed_payoff_2,
            actual_1,
            actual_2,
        )
        return False

    if state.payoff_matrix.r <= state.payoff_matrix.p:
        logger.debug("move_rejected reason=degenerate_matrix")
        return False

    return True


def is_finished(state: GameState) -> bool:
    return state.is_finished


def play_round(state: GameState, move_1: Move, move_2: Move) -> RoundOutcome:
    """Execute one round: record both moves, add payoffs, advance the round.

    Raises GameFinishedError once all rounds have been played.
    """
    if state.round >= state.total_rounds:
        raise GameFinishedError(
            f"Game already finished after {state.total_rounds} rounds"
        )

    payoff_1, payoff_2 = get_payoffs(move_1, move_2, state.payoff_matrix)

    state.history_1.append(move_1)
    state.history_2.append(move_2)
    state.score_1 += payoff_1
    state.score_2 += payoff_2
    state.round += 1

    logger.info(
        "round_played round=%d/%d moves=%s,%s payoffs=%d,%d",
        state.round,
        state.total_rounds,
        move_1.name,
        move_2.name,
        payoff_1,
        payoff_2,
    )

    return RoundOutcome(move_1=move_1, move_2=move_2, payoff_1=payoff_1, payoff_2=payoff_2)
