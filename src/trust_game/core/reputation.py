"""Reputation calculator — score, tier, and voting power from move counts.

reputation_score = round(cooperative / total * 100), 50 with no history.
Tier multipliers: Trusted 1.5x, Neutral 1x, Suspicious 0.5x.
"""

from __future__ import annotations

import math
from collections.abc import Iterable

from trust_game.models.game import Move
from trust_game.models.reputation import (
    TIER_NEUTRAL,
    TIER_SUSPICIOUS,
    TIER_TRUSTED,
    PlayerReputation,
)

NEUTRAL_SCORE = 50
TRUSTED_THRESHOLD = 75
NEUTRAL_THRESHOLD = 50

TIER_MULTIPLIERS: dict[int, float] = {
    TIER_SUSPICIOUS: 0.5,
    TIER_NEUTRAL: 1.0,
    TIER_TRUSTED: 1.5,
}


def round_half_away(value: float) -> int:
    """Round to nearest integer, halves away from zero (2.5 -> 3, -2.5 -> -3)."""
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def tier_for_score(score: int) -> int:
    if score >= TRUSTED_THRESHOLD:
        return TIER_TRUSTED
    if score >= NEUTRAL_THRESHOLD:
        return TIER_NEUTRAL
    return TIER_SUSPICIOUS


def summarize_moves(history: Iterable[Move]) -> tuple[int, int]:
    """Return (total_moves, cooperative_moves) for a move history."""
    total = 0
    cooperative = 0
    for move in history:
        total += 1
        if move is Move.COOPERATE:
            cooperative += 1
    return total, cooperative


def calculate_from_moves(
    address: str,
    total_moves: int,
    cooperative_moves: int,
) -> PlayerReputation:
    """Derive a fresh PlayerReputation. Pure, and total over non-negative counts.

    Inputs are not cross-checked: cooperative_moves > total_moves is the
    caller's problem, not an error here. Counts are unsigned move tallies,
    so a negative count is outside the input domain and PlayerReputation
    rejects it with a pydantic ValidationError.
    """
    if total_moves == 0:
        score = NEUTRAL_SCORE
    else:
        score = round_half_away(cooperative_moves / total_moves * 100.0)

    tier = tier_for_score(score)
    voting_power = round_half_away(score * TIER_MULTIPLIERS[tier])

    return PlayerReputation(
        address=address,
        total_moves=total_moves,
        cooperative_moves=cooperative_moves,
        reputation_score=score,
        tier=tier,
        voting_power=voting_power,
    )


def calculate_from_history(address: str, history: Iterable[Move]) -> PlayerReputation:
    total, cooperative = summarize_moves(history)
    return calculate_from_moves(address, total, cooperative)
