"""Strategy consistency checks and move generation.

Four fixed strategies:
- Tit-for-Tat: cooperate first, then copy the opponent's previous move.
- Always Defect / Always Cooperate: a constant move regardless of history.
- Grudge: cooperate until the opponent defects once, then defect forever.

The checks are pure predicates over a proposed move and the opponent's
history. Adding a strategy means adding a Strategy member and its check.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from trust_game.core.rounds import play_round
from trust_game.core.state import GameState, new_game
from trust_game.models.game import Move, PayoffMatrix, Strategy

logger = logging.getLogger(__name__)


# --- Consistency checks ---


def validate_tft_strategy(
    proposed_move: Move,
    opponent_history: Sequence[Move],
    round_number: int,
) -> bool:
    """Round 0 must cooperate; later rounds must echo the opponent's last move.

    A later round with no opponent history is malformed and fails.
    """
    if round_number == 0:
        return proposed_move is Move.COOPERATE
    if not opponent_history:
        return False
    return proposed_move is opponent_history[-1]


def validate_always_defect_strategy(proposed_move: Move) -> bool:
    return proposed_move is Move.DEFECT


def validate_always_cooperate_strategy(proposed_move: Move) -> bool:
    return proposed_move is Move.COOPERATE


def validate_grudge_strategy(proposed_move: Move, opponent_history: Sequence[Move]) -> bool:
    """Defect if the opponent has ever defected, otherwise cooperate.

    Scans the full history on every call; there is no cached grudge flag.
    """
    for opponent_move in opponent_history:
        if opponent_move is Move.DEFECT:
            return proposed_move is Move.DEFECT
    return proposed_move is Move.COOPERATE


def validate_strategy(
    strategy: Strategy,
    proposed_move: Move,
    opponent_history: Sequence[Move],
    round_number: int,
) -> bool:
    """Dispatch to the consistency check for ``strategy``."""
    if strategy is Strategy.TIT_FOR_TAT:
        valid = validate_tft_strategy(proposed_move, opponent_history, round_number)
    elif strategy is Strategy.ALWAYS_DEFECT:
        valid = validate_always_defect_strategy(proposed_move)
    elif strategy is Strategy.ALWAYS_COOPERATE:
        valid = validate_always_cooperate_strategy(proposed_move)
    elif strategy is Strategy.GRUDGE:
        valid = validate_grudge_strategy(proposed_move, opponent_history)
    else:
        raise ValueError(f"Unknown strategy: {strategy}")

    if not valid:
        logger.debug(
            "strategy_mismatch strategy=%s move=%s round=%d",
            strategy.value,
            proposed_move.name,
            round_number,
        )
    return valid


def validate_player_strategy(
    state: GameState,
    player: int,
    strategy: Strategy,
    proposed_move: Move,
) -> bool:
    """Check player 1's or player 2's next move against the other's history."""
    if player == 1:
        opponent_history = state.history_2
    elif player == 2:
        opponent_history = state.history_1
    else:
        raise ValueError(f"player must be 1 or 2, got {player}")
    return validate_strategy(strategy, proposed_move, opponent_history, state.round)


# --- Move generation ---


def choose_move(strategy: Strategy, opponent_history: Sequence[Move]) -> Move:
    """The one move ``strategy`` plays given the opponent's history so far."""
    if strategy is Strategy.TIT_FOR_TAT:
        return opponent_history[-1] if opponent_history else Move.COOPERATE
    if strategy is Strategy.ALWAYS_DEFECT:
        return Move.DEFECT
    if strategy is Strategy.ALWAYS_COOPERATE:
        return Move.COOPERATE
    if strategy is Strategy.GRUDGE:
        return Move.DEFECT if Move.DEFECT in opponent_history else Move.COOPERATE
    raise ValueError(f"Unknown strategy: {strategy}")


def simulate_match(
    strategy_1: Strategy,
    strategy_2: Strategy,
    total_rounds: int,
    payoff_matrix: PayoffMatrix | None = None,
) -> GameState:
    """Play two strategies against each other for every round.

    Pure function: same inputs, same final GameState.
    """
    state = new_game(total_rounds, payoff_matrix)
    while not state.is_finished:
        move_1 = choose_move(strategy_1, state.history_2)
        move_2 = choose_move(strategy_2, state.history_1)
        play_round(state, move_1, move_2)

    logger.info(
        "match_simulated strategies=%s,%s rounds=%d scores=%d,%d",
        strategy_1.value,
        strategy_2.value,
        total_rounds,
        state.score_1,
        state.score_2,
    )
    return state
