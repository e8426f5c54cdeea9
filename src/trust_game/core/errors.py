"""Failure kinds raised by the engine.

Validation predicates (validate_move, strategy checks) return booleans.
Everything here is an explicit failure for the immediate caller to handle.
"""

from __future__ import annotations


class TrustGameError(ValueError):
    """Base class for every failure raised by the Trust Game engine."""


class GameFinishedError(TrustGameError):
    """Raised when a round is played after the game's last round."""


class GovernanceError(TrustGameError):
    """Base class for governance ledger failures."""


class NotFoundError(GovernanceError):
    """An unknown proposal or app id was referenced."""


class ProposalNotFoundError(NotFoundError):
    def __init__(self, proposal_id: int) -> None:
        super().__init__(f"Proposal {proposal_id} not found")
        self.proposal_id = proposal_id


class AppNotFoundError(NotFoundError):
    def __init__(self, app_id: str) -> None:
        super().__init__(f"App {app_id} not found")
        self.app_id = app_id


class AlreadyVotedError(GovernanceError):
    def __init__(self, address: str, proposal_id: int) -> None:
        super().__init__(f"Player {address} has already voted on proposal {proposal_id}")
        self.address = address
        self.proposal_id = proposal_id


class VotingClosedError(GovernanceError):
    def __init__(self, proposal_id: int) -> None:
        super().__init__(f"Voting period has ended for proposal {proposal_id}")
        self.proposal_id = proposal_id


class AlreadyExecutedError(GovernanceError):
    def __init__(self, proposal_id: int) -> None:
        super().__init__(f"Proposal {proposal_id} already executed")
        self.proposal_id = proposal_id


class DuplicateAppError(GovernanceError):
    def __init__(self, app_id: str) -> None:
        super().__init__(f"App {app_id} already registered")
        self.app_id = app_id


class AttestationError(TrustGameError):
    """Raised when raw prover input fails boundary re-validation."""
