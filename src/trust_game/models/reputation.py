"""Reputation model — derived trust record for one address."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

TIER_SUSPICIOUS = 0
TIER_NEUTRAL = 1
TIER_TRUSTED = 2

TIER_LABELS: dict[int, str] = {
    TIER_SUSPICIOUS: "Suspicious",
    TIER_NEUTRAL: "Neutral",
    TIER_TRUSTED: "Trusted",
}


class PlayerReputation(BaseModel):
    """Reputation derived from move counts. Never stored, always recomputed."""

    model_config = ConfigDict(frozen=True)

    address: str
    total_moves: int = Field(ge=0)
    cooperative_moves: int = Field(ge=0)
    reputation_score: int = Field(ge=0)
    tier: int = Field(ge=0, le=2)
    voting_power: int = Field(ge=0)

    @property
    def tier_label(self) -> str:
        return TIER_LABELS.get(self.tier, "Unknown")
