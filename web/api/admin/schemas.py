"""Admin API response schemas."""

from datetime import datetime

from pydantic import BaseModel

from web.api.voting.schemas import VoteRecordResponse


class AuditLogItem(BaseModel):
    """One audit entry."""

    id: str
    action: str
    performed_by: str
    performed_by_email: str
    target_user_id: str | None
    target_user_email: str | None
    timestamp: datetime
    details: str
    vote_count_before: int | None
    vote_count_after: int | None


class AuditLogResponse(BaseModel):
    """Audit entries, newest first."""

    items: list[AuditLogItem]


class DeleteVoteResponse(BaseModel):
    """Result of deleting one ballot."""

    user_id: str
    user_email: str
    positions: list[str]
    total_votes: int


class ResetVotesResponse(BaseModel):
    """Result of resetting all ballots."""

    deleted: int
    total_votes: int


class VoteRecordsResponse(BaseModel):
    """All stored ballots, newest first."""

    items: list[VoteRecordResponse]
    total: int


class TallyValidationResponse(BaseModel):
    """Counter integrity report."""

    valid: bool
    stats: dict[str, int]
    issues: list[str]
