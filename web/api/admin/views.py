"""Admin API views - vote management and audit trail."""

from app.container import container
from app.models import AuditAction
from app.services.voting.validation import validate_tallies
from web.api.errors import ValidationError, validate_admin, validate_user_id
from web.api.voting.views import record_response

from .schemas import (
    AuditLogItem,
    AuditLogResponse,
    DeleteVoteResponse,
    ResetVotesResponse,
    TallyValidationResponse,
    VoteRecordsResponse,
)


def delete_vote(user_id: str, admin_id: str, admin_email: str) -> DeleteVoteResponse:
    """Delete one user's ballot. Raises VoteNotFound if there is none."""
    validate_user_id(user_id)
    validate_admin(admin_id, admin_email)

    record = container.management.delete_vote(user_id, admin_id, admin_email)

    return DeleteVoteResponse(
        user_id=record.user_id,
        user_email=record.user_email,
        positions=record.positions,
        total_votes=container.management.get_total_vote_count(),
    )


def reset_all_votes(admin_id: str, admin_email: str) -> ResetVotesResponse:
    """Delete every ballot and zero the tally."""
    validate_admin(admin_id, admin_email)
    deleted = container.management.reset_all_votes(admin_id, admin_email)
    return ResetVotesResponse(deleted=deleted, total_votes=container.management.get_total_vote_count())


def get_audit_logs(action: str | None = None) -> AuditLogResponse:
    """Get audit entries, optionally filtered by action."""
    if action is not None and action not in {a.value for a in AuditAction}:
        raise ValidationError(f"Unknown audit action: {action}")

    entries = container.audit.list_entries(AuditAction(action) if action else None)

    items = [
        AuditLogItem(
            id=e.id,
            action=str(e.action),
            performed_by=e.performed_by,
            performed_by_email=e.performed_by_email,
            target_user_id=e.target_user_id,
            target_user_email=e.target_user_email,
            timestamp=e.timestamp,
            details=e.details,
            vote_count_before=e.vote_count_before,
            vote_count_after=e.vote_count_after,
        )
        for e in entries
    ]

    return AuditLogResponse(items=items)


def get_vote_records() -> VoteRecordsResponse:
    """Get all ballots, newest first."""
    records = container.management.list_vote_records()
    return VoteRecordsResponse(items=[record_response(r) for r in records], total=len(records))


def get_total_vote_count() -> int:
    """Number of voters who have cast a ballot."""
    return container.management.get_total_vote_count()


def check_tallies() -> TallyValidationResponse:
    """Compare counters with the ballots they summarize."""
    result = validate_tallies(container.vote_records, container.vote_counts)
    return TallyValidationResponse(valid=result["valid"], stats=result["stats"], issues=result["issues"])
