"""Tests for strategy consistency checks, move generation, and match simulation."""

import pytest

from trust_game.core.rounds import play_round
from trust_game.core.state import GameState
from trust_game.core.strategies import (
    choose_move,
    simulate_match,
    validate_always_cooperate_strategy,
    validate_always_defect_strategy,
    validate_grudge_strategy,
    validate_player_strategy,
    validate_strategy,
    validate_tft_strategy,
)
from trust_game.models.game import Move, PayoffMatrix, Strategy

C = Move.COOPERATE
D = Move.DEFECT


class TestTitForTat:
    def test_round_zero_cooperates(self):
        assert validate_tft_strategy(C, [], 0) is True
        assert validate_tft_strategy(D, [], 0) is False

    def test_copies_last_opponent_move(self):
        assert validate_tft_strategy(C, [C], 1) is True
        assert validate_tft_strategy(D, [C], 1) is False
        assert validate_tft_strategy(D, [C, D], 2) is True
        assert validate_tft_strategy(C, [C, D], 2) is False

    def test_forgives_after_opponent_cooperates(self):
        assert validate_tft_strategy(C, [D, D, C], 3) is True

    def test_empty_history_after_round_zero_is_malformed(self):
        assert validate_tft_strategy(C, [], 1) is False
        assert validate_tft_strategy(D, [], 4) is False


class TestConstantStrategies:
    def test_always_defect(self):
        assert validate_always_defect_strategy(D) is True
        assert validate_always_defect_strategy(C) is False

    def test_always_cooperate(self):
        assert validate_always_cooperate_strategy(C) is True
        assert validate_always_cooperate_strategy(D) is False

    @pytest.mark.parametrize("history", [[], [C], [D, D], [C, D, C]])
    def test_ignore_history(self, history: list[Move]):
        assert validate_strategy(Strategy.ALWAYS_DEFECT, D, history, len(history)) is True
        assert validate_strategy(Strategy.ALWAYS_COOPERATE, C, history, len(history)) is True


class TestGrudge:
    def test_cooperates_without_defection(self):
        assert validate_grudge_strategy(C, []) is True
        assert validate_grudge_strategy(C, [C, C, C]) is True
        assert validate_grudge_strategy(D, [C, C]) is False

    def test_never_forgives(self):
        """A single past defection locks in defect even after the opponent cooperates."""
        history = [C, D, C, C, C]
        assert validate_grudge_strategy(D, history) is True
        assert validate_grudge_strategy(C, history) is False

    def test_sequence_through_a_game(self):
        opponent = [C, C, D, C, C]
        expected = [C, C, C, D, D]
        for round_number, move in enumerate(expected):
            seen = opponent[:round_number]
            assert validate_strategy(Strategy.GRUDGE, move, seen, round_number) is True


class TestPlayerStrategy:
    def test_checks_against_the_other_players_history(self, game: GameState):
        play_round(game, C, D)
        assert validate_player_strategy(game, 1, Strategy.TIT_FOR_TAT, D) is True
        assert validate_player_strategy(game, 2, Strategy.TIT_FOR_TAT, C) is True
        assert validate_player_strategy(game, 1, Strategy.GRUDGE, D) is True
        assert validate_player_strategy(game, 2, Strategy.GRUDGE, C) is True

    def test_rejects_unknown_player(self, game: GameState):
        with pytest.raises(ValueError):
            validate_player_strategy(game, 3, Strategy.GRUDGE, C)


class TestChooseMove:
    def test_tit_for_tat(self):
        assert choose_move(Strategy.TIT_FOR_TAT, []) is C
        assert choose_move(Strategy.TIT_FOR_TAT, [C, D]) is D

    def test_grudge(self):
        assert choose_move(Strategy.GRUDGE, [C, C]) is C
        assert choose_move(Strategy.GRUDGE, [D, C]) is D

    def test_constants(self):
        assert choose_move(Strategy.ALWAYS_DEFECT, [C]) is D
        assert choose_move(Strategy.ALWAYS_COOPERATE, [D]) is C


class TestSimulateMatch:
    def test_tft_against_always_defect(self):
        state = simulate_match(Strategy.TIT_FOR_TAT, Strategy.ALWAYS_DEFECT, 3)
        assert state.history_1 == [C, D, D]
        assert state.history_2 == [D, D, D]
        assert (state.score_1, state.score_2) == (-1, 3)
        assert state.is_finished

    def test_mutual_cooperation(self):
        state = simulate_match(Strategy.GRUDGE, Strategy.TIT_FOR_TAT, 5)
        assert state.history_1 == [C] * 5
        assert (state.score_1, state.score_2) == (10, 10)

    def test_custom_matrix(self):
        matrix = PayoffMatrix(r=3, s=0, t=5, p=1)
        state = simulate_match(Strategy.ALWAYS_COOPERATE, Strategy.ALWAYS_DEFECT, 4, matrix)
        assert (state.score_1, state.score_2) == (0, 20)

    def test_deterministic(self):
        a = simulate_match(Strategy.GRUDGE, Strategy.ALWAYS_DEFECT, 6)
        b = simulate_match(Strategy.GRUDGE, Strategy.ALWAYS_DEFECT, 6)
        assert a == b

    @pytest.mark.parametrize("strategy_1", list(Strategy))
    @pytest.mark.parametrize("strategy_2", list(Strategy))
    def test_generated_moves_pass_consistency_checks(
        self, strategy_1: Strategy, strategy_2: Strategy
    ):
        state = simulate_match(strategy_1, strategy_2, 6)
        for round_number in range(state.total_rounds):
            assert validate_strategy(
                strategy_1,
                state.history_1[round_number],
                state.history_2[:round_number],
                round_number,
            )
            assert validate_strategy(
                strategy_2,
                state.history_2[round_number],
                state.history_1[:round_number],
                round_number,
            )
