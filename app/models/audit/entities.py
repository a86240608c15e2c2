"""Audit domain entities."""

from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum

from app.models.common import BaseEntity


class AuditAction(StrEnum):
    """Privileged actions recorded in the audit log."""

    DELETE_VOTE = "delete_vote"
    RESET_ALL_VOTES = "reset_all_votes"


@dataclass
class AuditLogEntry(BaseEntity):
    """One admin action against vote data."""

    id: str
    action: AuditAction
    performed_by: str
    performed_by_email: str
    timestamp: datetime
    details: str
    target_user_id: str | None = None
    target_user_email: str | None = None
    vote_count_before: int | None = None
    vote_count_after: int | None = None
