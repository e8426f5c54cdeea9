"""Tests for prover-boundary re-validation and the attested reputation triple."""

import pytest

from trust_game.core.attestation import (
    ProveInput,
    ProveOutput,
    decode_moves,
    decode_payoffs,
    prove_reputation,
)
from trust_game.core.errors import AttestationError, TrustGameError
from trust_game.models.game import Move, PayoffMatrix

# [R, T, S, P]
DEFAULT_PAYOFFS = (2, 3, -1, 0)


def _input(moves: list[int], opponent: list[int] | None = None, payoffs=DEFAULT_PAYOFFS):
    return ProveInput(
        player_address="tb1qplayer",
        moves=moves,
        opponent_moves=opponent if opponent is not None else [0] * len(moves),
        payoffs=payoffs,
    )


class TestProveReputation:
    def test_triple(self):
        output = prove_reputation(_input([0, 0, 1, 0]))
        assert output == ProveOutput(
            player_address="tb1qplayer",
            total_moves=4,
            cooperative_moves=3,
            reputation_score=75,
            tier=2,
            voting_power=113,
        )

    def test_no_moves_is_neutral(self):
        output = prove_reputation(_input([]))
        assert output.reputation_score == 50
        assert output.tier == 1
        assert output.voting_power == 50

    def test_payload_round_trip(self):
        raw = {
            "player_address": "tb1qplayer",
            "moves": [1, 1, 1, 0],
            "opponent_moves": [0, 1, 1, 1],
            "payoffs": [2, 3, -1, 0],
        }
        output = prove_reputation(ProveInput.model_validate(raw))
        assert output.model_dump() == {
            "player_address": "tb1qplayer",
            "total_moves": 4,
            "cooperative_moves": 1,
            "reputation_score": 25,
            "tier": 0,
            "voting_power": 13,
        }

    @pytest.mark.parametrize("bad_code", [2, -1, 7])
    def test_invalid_move_code_halts(self, bad_code: int):
        with pytest.raises(AttestationError, match="Invalid move"):
            prove_reputation(_input([0, bad_code, 0]))

    def test_invalid_opponent_code_halts(self):
        with pytest.raises(AttestationError):
            prove_reputation(_input([0, 0], opponent=[0, 3]))

    @pytest.mark.parametrize(
        ("payoffs", "message"),
        [
            ((3, 2, -1, 0), "Temptation"),
            ((2, 3, -1, 2), "Reward"),
            ((2, 3, 1, 0), "Punishment"),
        ],
    )
    def test_bad_matrix_halts(self, payoffs: tuple[int, int, int, int], message: str):
        with pytest.raises(AttestationError, match=message):
            prove_reputation(_input([0], payoffs=payoffs))

    def test_attestation_error_is_a_value_error(self):
        with pytest.raises(ValueError):
            prove_reputation(_input([9]))
        assert issubclass(AttestationError, TrustGameError)


class TestDecoders:
    def test_decode_moves(self):
        assert decode_moves([0, 1, 0]) == [Move.COOPERATE, Move.DEFECT, Move.COOPERATE]

    def test_decode_payoffs_reorders(self):
        assert decode_payoffs((2, 3, -1, 0)) == PayoffMatrix(r=2, s=-1, t=3, p=0)
