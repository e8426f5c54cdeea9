"""Governance lifecycle — proposals, reputation-weighted votes, tallying, execution.

All governance data lives in one GovernanceState. Every function here that
mutates it restores proposal <-> voting round <-> tally consistency before
returning. Nothing generates its own timestamps; block heights or clock
values always come from the caller.

The ledger is single-owner: callers that share a GovernanceState across
threads must serialize these calls themselves.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from trust_game.core.errors import (
    AlreadyExecutedError,
    AlreadyVotedError,
    AppNotFoundError,
    DuplicateAppError,
    ProposalNotFoundError,
    VotingClosedError,
)
from trust_game.models.governance import (
    DEFAULT_VOTING_ROUNDS,
    DependentApp,
    GovernanceProposal,
    GovernanceState,
    PlayerVote,
    ProposalType,
    VoteChoice,
    VoteTally,
    VotingRound,
)
from trust_game.models.reputation import PlayerReputation

logger = logging.getLogger(__name__)


# --- Lookups ---


def get_proposal(state: GovernanceState, proposal_id: int) -> GovernanceProposal | None:
    for proposal in state.proposals:
        if proposal.id == proposal_id:
            return proposal
    return None


def get_voting_round(state: GovernanceState, proposal_id: int) -> VotingRound | None:
    for voting_round in state.voting_rounds:
        if voting_round.proposal_id == proposal_id:
            return voting_round
    return None


def _require_proposal(state: GovernanceState, proposal_id: int) -> GovernanceProposal:
    proposal = get_proposal(state, proposal_id)
    if proposal is None:
        raise ProposalNotFoundError(proposal_id)
    return proposal


def _find_app(state: GovernanceState, app_id: str) -> DependentApp | None:
    for app in state.dependent_apps:
        if app.app_id == app_id:
            return app
    return None


# --- Proposal Lifecycle ---


def create_proposal(
    state: GovernanceState,
    proposal_type: ProposalType,
    description: str,
    total_voting_rounds: int = DEFAULT_VOTING_ROUNDS,
) -> int:
    """Open a new proposal and its empty voting round. Returns the new id.

    Ids start at 1 and are never reused.
    """
    proposal_id = state.next_proposal_id
    state.next_proposal_id += 1

    state.proposals.append(
        GovernanceProposal(
            id=proposal_id,
            proposal_type=proposal_type,
            description=description,
            total_voting_rounds=total_voting_rounds,
        )
    )
    state.voting_rounds.append(VotingRound(proposal_id=proposal_id))

    logger.info(
        "proposal_created id=%d type=%s voting_rounds=%d",
        proposal_id,
        proposal_type.value,
        total_voting_rounds,
    )
    return proposal_id


def tally_votes(proposal_id: int, votes: Iterable[PlayerVote]) -> VoteTally:
    """Count votes and sum voting power per choice from a full vote log."""
    tally = VoteTally(proposal_id=proposal_id)
    for vote in votes:
        if vote.choice is VoteChoice.YES:
            tally.yes_votes += 1
            tally.yes_voting_power += vote.voting_power
        elif vote.choice is VoteChoice.NO:
            tally.no_votes += 1
            tally.no_voting_power += vote.voting_power
        else:
            tally.abstain_votes += 1
            tally.abstain_voting_power += vote.voting_power
    return tally


def _apply_tally(proposal: GovernanceProposal, tally: VoteTally) -> None:
    proposal.yes_votes = tally.yes_votes
    proposal.no_votes = tally.no_votes
    proposal.abstain_votes = tally.abstain_votes
    proposal.yes_voting_power = tally.yes_voting_power
    proposal.no_voting_power = tally.no_voting_power
    proposal.abstain_voting_power = tally.abstain_voting_power


def cast_vote(
    state: GovernanceState,
    proposal_id: int,
    address: str,
    choice: VoteChoice,
    voter_reputation: int,
    voting_power: int,
    timestamp: int,
) -> PlayerVote:
    """Record one address's vote and retally the proposal from scratch.

    Raises ProposalNotFoundError, VotingClosedError, or AlreadyVotedError.
    The retally recomputes every counter from the whole vote log, so the
    counters can never drift from the votes.
    """
    proposal = _require_proposal(state, proposal_id)
    if not proposal.is_voting_open():
        raise VotingClosedError(proposal_id)

    voting_round = get_voting_round(state, proposal_id)
    if voting_round is None:
        # Proposals and voting rounds are created together
        raise ProposalNotFoundError(proposal_id)
    if voting_round.has_voted(address):
        raise AlreadyVotedError(address, proposal_id)

    vote = PlayerVote(
        address=address,
        proposal_id=proposal_id,
        choice=choice,
        voter_reputation=voter_reputation,
        voting_power=voting_power,
        timestamp=timestamp,
    )
    voting_round.votes.append(vote)
    voting_round.voted_addresses.append(address)

    _apply_tally(proposal, tally_votes(proposal_id, voting_round.votes))

    logger.info(
        "vote_cast proposal=%d address=%s choice=%s power=%d yes_power=%d total_power=%d",
        proposal_id,
        address,
        choice.value,
        voting_power,
        proposal.yes_voting_power,
        proposal.total_voting_power,
    )
    return vote


def cast_reputation_vote(
    state: GovernanceState,
    proposal_id: int,
    reputation: PlayerReputation,
    choice: VoteChoice,
    timestamp: int,
) -> PlayerVote:
    """Cast a vote weighted by a freshly calculated reputation."""
    return cast_vote(
        state,
        proposal_id,
        reputation.address,
        choice,
        reputation.reputation_score,
        reputation.voting_power,
        timestamp,
    )


def has_passed(proposal: GovernanceProposal) -> bool:
    return proposal.has_passed()


def execute_proposal(state: GovernanceState, proposal_id: int) -> bool:
    """Execute a proposal if it has passed. Returns whether it passed.

    Raises ProposalNotFoundError, or AlreadyExecutedError once a previous
    call succeeded. A failed check sets nothing: the proposal can be
    re-checked later, including after late votes.
    """
    proposal = _require_proposal(state, proposal_id)
    if proposal.executed:
        raise AlreadyExecutedError(proposal_id)

    passed = proposal.has_passed()
    if passed:
        proposal.executed = True
        logger.info(
            "proposal_executed id=%d yes_power=%d total_power=%d",
            proposal_id,
            proposal.yes_voting_power,
            proposal.total_voting_power,
        )
    else:
        logger.info(
            "proposal_not_passed id=%d yes_power=%d total_power=%d",
            proposal_id,
            proposal.yes_voting_power,
            proposal.total_voting_power,
        )
    return passed


def advance_round(proposal: GovernanceProposal) -> None:
    proposal.advance_round()


def advance_voting_round(state: GovernanceState, proposal_id: int) -> GovernanceProposal:
    """Advance one proposal's voting clock. Driven by an external block/round source."""
    proposal = _require_proposal(state, proposal_id)
    proposal.advance_round()
    if not proposal.is_voting_open():
        logger.info("voting_closed proposal=%d", proposal_id)
    return proposal


# --- Dependent Apps ---


def register_dependent_app(
    state: GovernanceState,
    app_id: str,
    app_name: str,
    min_reputation_tier: int,
    registered_at: int,
) -> DependentApp:
    """Register an external consumer gated on a reputation tier.

    Raises DuplicateAppError if app_id is already registered.
    """
    if _find_app(state, app_id) is not None:
        raise DuplicateAppError(app_id)

    app = DependentApp(
        app_id=app_id,
        app_name=app_name,
        min_reputation_tier=min_reputation_tier,
        registered_at=registered_at,
    )
    state.dependent_apps.append(app)
    logger.info("app_registered app=%s min_tier=%d", app_id, min_reputation_tier)
    return app


def check_app_eligibility(state: GovernanceState, app_id: str, user_tier: int) -> bool:
    """Whether ``user_tier`` meets the app's minimum. Raises AppNotFoundError."""
    app = _find_app(state, app_id)
    if app is None:
        raise AppNotFoundError(app_id)
    return user_tier >= app.min_reputation_tier


# --- Read Accessors ---


def get_active_proposals(state: GovernanceState) -> list[GovernanceProposal]:
    return [p for p in state.proposals if p.is_voting_open()]


def get_executed_proposals(state: GovernanceState) -> list[GovernanceProposal]:
    return [p for p in state.proposals if p.executed]


def get_dependent_apps(state: GovernanceState) -> list[DependentApp]:
    return list(state.dependent_apps)
