"""Governance models — Proposals, Votes, Voting Rounds, Dependent Apps."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_VOTING_ROUNDS = 3


class ProposalType(Enum):
    """What a proposal would change if executed."""

    CHANGE_PAYOFF = "change_payoff"
    ADD_STRATEGY = "add_strategy"
    CHANGE_GOVERNANCE = "change_governance"


class VoteChoice(Enum):
    YES = "yes"
    NO = "no"
    ABSTAIN = "abstain"


class GovernanceProposal(BaseModel):
    """A rule change put to a reputation-weighted vote.

    Counters are owned by the tally: they are zeroed and recomputed from the
    full vote log after every accepted vote. ``executed`` flips to True at
    most once.
    """

    id: int
    proposal_type: ProposalType
    description: str
    voting_round: int = 0
    total_voting_rounds: int = DEFAULT_VOTING_ROUNDS
    yes_votes: int = 0
    no_votes: int = 0
    abstain_votes: int = 0
    yes_voting_power: int = 0
    no_voting_power: int = 0
    abstain_voting_power: int = 0
    executed: bool = False

    @property
    def total_voting_power(self) -> int:
        return self.yes_voting_power + self.no_voting_power + self.abstain_voting_power

    def is_voting_open(self) -> bool:
        return not self.executed and self.voting_round < self.total_voting_rounds

    def has_passed(self) -> bool:
        """Simple weighted majority of all cast power, abstentions included.

        Strictly greater than half (integer division): ties fail, and no votes
        at all never passes.
        """
        total = self.total_voting_power
        if total == 0:
            return False
        return self.yes_voting_power > total // 2

    def advance_round(self) -> None:
        """Move the voting clock forward one step, capped at the window length."""
        if self.voting_round < self.total_voting_rounds:
            self.voting_round += 1


class PlayerVote(BaseModel):
    """One address's vote on one proposal, with its reputation snapshot."""

    model_config = ConfigDict(frozen=True)

    address: str
    proposal_id: int
    choice: VoteChoice
    voter_reputation: int
    voting_power: int
    timestamp: int


class VotingRound(BaseModel):
    """Vote log for a single proposal. Shares the proposal's id."""

    proposal_id: int
    votes: list[PlayerVote] = Field(default_factory=list)
    voted_addresses: list[str] = Field(default_factory=list)

    def has_voted(self, address: str) -> bool:
        return address in self.voted_addresses


class VoteTally(BaseModel):
    """Counts and weighted power recomputed from a proposal's vote log."""

    proposal_id: int
    yes_votes: int = 0
    no_votes: int = 0
    abstain_votes: int = 0
    yes_voting_power: int = 0
    no_voting_power: int = 0
    abstain_voting_power: int = 0


class DependentApp(BaseModel):
    """An external consumer gated on a minimum reputation tier."""

    model_config = ConfigDict(frozen=True)

    app_id: str
    app_name: str
    min_reputation_tier: int
    registered_at: int


class GovernanceState(BaseModel):
    """Root of all governance data. Mutated only through core.governance."""

    next_proposal_id: int = 1
    proposals: list[GovernanceProposal] = Field(default_factory=list)
    voting_rounds: list[VotingRound] = Field(default_factory=list)
    dependent_apps: list[DependentApp] = Field(default_factory=list)
