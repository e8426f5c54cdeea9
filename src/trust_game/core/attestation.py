"""Prover boundary. Re-validates raw game input and derives a reputation triple.

The hosting environment hands over raw move codes and a payoff array; this
module is the last gate before typed values reach the engine. Any invalid
code or mis-ordered matrix raises AttestationError and processing halts.
Reading and writing the payloads is left to the host.

Opponent move codes are held to the same 0/1 rule as the player's own,
even though only the player's moves feed the reputation. A malformed
opponent history halts attestation rather than passing through unchecked.
"""

from __future__ import annotations

import logging

from pydantic import BaseModel, Field

from trust_game.core.errors import AttestationError
from trust_game.core.reputation import calculate_from_moves, summarize_moves
from trust_game.models.game import Move, PayoffMatrix

logger = logging.getLogger(__name__)


class ProveInput(BaseModel):
    """Raw prover input. Moves are 0 (cooperate) / 1 (defect); payoffs are [R, T, S, P]."""

    player_address: str
    moves: list[int] = Field(default_factory=list)
    opponent_moves: list[int] = Field(default_factory=list)
    payoffs: tuple[int, int, int, int]


class ProveOutput(BaseModel):
    """The reputation triple attested for one player."""

    player_address: str
    total_moves: int
    cooperative_moves: int
    reputation_score: int
    tier: int
    voting_power: int


def decode_moves(codes: list[int]) -> list[Move]:
    """Convert raw move codes to Moves. Raises AttestationError on any other code."""
    moves: list[Move] = []
    for index, code in enumerate(codes):
        if code not in (0, 1):
            raise AttestationError(
                f"Invalid move at index {index}: {code} (must be 0 Cooperate or 1 Defect)"
            )
        moves.append(Move(code))
    return moves


def decode_payoffs(payoffs: tuple[int, int, int, int]) -> PayoffMatrix:
    """Build a PayoffMatrix from [R, T, S, P], enforcing T > R > P > S."""
    r, t, s, p = payoffs
    if not t > r:
        raise AttestationError("Temptation (T) must be > Reward (R)")
    if not r > p:
        raise AttestationError("Reward (R) must be > Punishment (P)")
    if not p > s:
        raise AttestationError("Punishment (P) must be > Sucker (S)")
    return PayoffMatrix(r=r, s=s, t=t, p=p)


def prove_reputation(prove_input: ProveInput) -> ProveOutput:
    """Validate raw input and compute the player's reputation triple."""
    moves = decode_moves(prove_input.moves)
    decode_moves(prove_input.opponent_moves)
    decode_payoffs(prove_input.payoffs)

    total, cooperative = summarize_moves(moves)
    reputation = calculate_from_moves(prove_input.player_address, total, cooperative)

    logger.info(
        "reputation_attested address=%s moves=%d score=%d tier=%d",
        reputation.address,
        reputation.total_moves,
        reputation.reputation_score,
        reputation.tier,
    )
    return ProveOutput(
        player_address=reputation.address,
        total_moves=reputation.total_moves,
        cooperative_moves=reputation.cooperative_moves,
        reputation_score=reputation.reputation_score,
        tier=reputation.tier,
        voting_power=reputation.voting_power,
    )
