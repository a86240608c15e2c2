"""Models package - DDL and entities for all domains."""

from app.models.audit import AUDIT_LOG_DDL, AUDIT_LOG_SEQ_DDL, AuditAction, AuditLogEntry
from app.models.auth import USER_DDL, User, UserRole
from app.models.common import BaseEntity, utcnow
from app.models.registry import (
    CANDIDATE_DDL,
    CANDIDATE_INDEXES,
    CANDIDATE_SEQ_DDL,
    POSITION_DDL,
    Candidate,
    Position,
)
from app.models.voting import (
    VOTE_COUNT_DDL,
    VOTE_RECORD_DDL,
    BallotEntry,
    CandidateResult,
    Identity,
    PositionResult,
    Selection,
    VoteCount,
    VoteRecord,
    vote_count_id,
)

ALL_DDL = [
    # Registry
    POSITION_DDL,
    CANDIDATE_SEQ_DDL,
    CANDIDATE_DDL,
    *CANDIDATE_INDEXES,
    # Voting
    VOTE_RECORD_DDL,
    VOTE_COUNT_DDL,
    # Auth
    USER_DDL,
    # Audit
    AUDIT_LOG_SEQ_DDL,
    AUDIT_LOG_DDL,
]

__all__ = [
    # Common
    "BaseEntity",
    "utcnow",
    # Registry
    "POSITION_DDL",
    "CANDIDATE_DDL",
    "Position",
    "Candidate",
    # Voting
    "VOTE_RECORD_DDL",
    "VOTE_COUNT_DDL",
    "vote_count_id",
    "Identity",
    "Selection",
    "BallotEntry",
    "VoteRecord",
    "VoteCount",
    "CandidateResult",
    "PositionResult",
    # Auth
    "USER_DDL",
    "User",
    "UserRole",
    # Audit
    "AUDIT_LOG_DDL",
    "AuditAction",
    "AuditLogEntry",
    # All DDL
    "ALL_DDL",
]
