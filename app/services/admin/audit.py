"""Audit log - best-effort, append-only trail of admin vote mutations."""

from collections.abc import Callable
from uuid import uuid4

from loguru import logger

from app.errors import AuditLogFailure
from app.models import AuditAction, AuditLogEntry, utcnow
from app.repositories import AuditLogRepository, ChangeFeed, feed

audit_logger = logger.bind(audit=True)


class AuditLog:
    """Independent sink for admin actions; its failures never reach the caller."""

    def __init__(self, repo: AuditLogRepository, change_feed: ChangeFeed = feed):
        self._repo = repo
        self._feed = change_feed
        logger.debug("AuditLog initialized")

    def append(
        self,
        action: AuditAction,
        performed_by: str,
        performed_by_email: str,
        details: str,
        target_user_id: str | None = None,
        target_user_email: str | None = None,
        vote_count_before: int | None = None,
        vote_count_after: int | None = None,
    ) -> AuditLogEntry | None:
        """Persist an entry. Returns None (after logging) if the write fails."""
        entry = AuditLogEntry(
            id=uuid4().hex,
            action=action,
            performed_by=performed_by,
            performed_by_email=performed_by_email,
            timestamp=utcnow(),
            details=details,
            target_user_id=target_user_id,
            target_user_email=target_user_email,
            vote_count_before=vote_count_before,
            vote_count_after=vote_count_after,
        )
        audit_logger.info("{} by {} <{}>: {}", action, performed_by, performed_by_email, details)

        try:
            self._repo.append(entry)
        except Exception as e:
            failure = AuditLogFailure(f"Failed to write audit log {entry.id} ({action}): {e}")
            logger.error("{}", failure.message)
            return None

        return entry

    def list_entries(self, action: AuditAction | None = None) -> list[AuditLogEntry]:
        """Entries newest first."""
        return self._repo.list_all(action)

    def subscribe(self, callback: Callable[[list[AuditLogEntry]], None]) -> Callable[[], None]:
        """Push newest-first entries now and after every append."""

        def push() -> None:
            callback(self.list_entries())

        unsubscribe = self._feed.subscribe(self._repo.collection, push)
        push()
        return unsubscribe
