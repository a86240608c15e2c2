"""Admin vote management - delete one ballot, reset all ballots."""

from collections.abc import Callable

from loguru import logger

from app.errors import NotAuthorized, VoteNotFound
from app.models import AuditAction, UserRole, VoteRecord
from app.repositories import (
    ChangeFeed,
    UserRepository,
    VoteRecordRepository,
    feed,
    retry_on_conflict,
    transaction,
)
from app.services.admin.audit import AuditLog
from app.services.voting.tally import TallyAggregator


class VoteManagement:
    """Compensating operations over ledger + tally, each followed by an audit entry."""

    def __init__(
        self,
        record_repo: VoteRecordRepository,
        tally: TallyAggregator,
        audit: AuditLog,
        user_repo: UserRepository,
        change_feed: ChangeFeed = feed,
    ):
        self._records = record_repo
        self._tally = tally
        self._audit = audit
        self._users = user_repo
        self._feed = change_feed
        logger.debug("VoteManagement initialized")

    def is_admin(self, user_id: str) -> bool:
        return bool(user_id) and self._users.get_role(user_id) == UserRole.ADMIN

    def _require_admin(self, admin_id: str) -> None:
        if not self.is_admin(admin_id):
            logger.warning("Vote management refused for non-admin {}", admin_id)
            raise NotAuthorized(admin_id)

    def get_total_vote_count(self) -> int:
        """Number of vote records (one per voter)."""
        return self._records.count()

    def list_vote_records(self) -> list[VoteRecord]:
        """All vote records, newest first."""
        return self._records.list_all()

    def subscribe_to_vote_records(self, callback: Callable[[list[VoteRecord]], None]) -> Callable[[], None]:
        def push() -> None:
            callback(self.list_vote_records())

        unsubscribe = self._feed.subscribe(self._records.collection, push)
        push()
        return unsubscribe

    def delete_vote(self, target_user_id: str, admin_id: str, admin_email: str) -> VoteRecord:
        """Remove one voter's ballot and take its votes back out of the tally.

        Raises NotAuthorized unless admin_id has the admin role, and VoteNotFound
        if the voter has no record; both write nothing.
        """
        self._require_admin(admin_id)
        record, before, after = self._delete_record(target_user_id)
        logger.info("Vote of {} deleted by {}", target_user_id, admin_id)

        email = record.user_email or "Unknown"
        self._audit.append(
            AuditAction.DELETE_VOTE,
            admin_id,
            admin_email,
            f"Deleted vote for user {email}. Positions: {', '.join(record.positions)}",
            target_user_id=target_user_id,
            target_user_email=email,
            vote_count_before=before,
            vote_count_after=after,
        )
        return record

    @retry_on_conflict
    def _delete_record(self, user_id: str) -> tuple[VoteRecord, int, int]:
        with transaction():
            record = self._records.get(user_id)
            if record is None:
                raise VoteNotFound(user_id)

            before = self._records.count()
            self._tally.retract_ballot(record.votes)
            self._records.delete(user_id)
            after = self._records.count()
        return record, before, after

    def reset_all_votes(self, admin_id: str, admin_email: str) -> int:
        """Delete every ballot and zero every counter (counters are kept).

        Both steps are idempotent, so re-running after a failure converges.
        Returns the number of records deleted. Raises NotAuthorized for
        non-admins.
        """
        self._require_admin(admin_id)
        before = self._reset()
        logger.warning("All votes reset by {} ({} records deleted)", admin_id, before)

        self._audit.append(
            AuditAction.RESET_ALL_VOTES,
            admin_id,
            admin_email,
            f"Reset all votes. Total votes deleted: {before}",
            vote_count_before=before,
            vote_count_after=0,
        )
        return before

    @retry_on_conflict
    def _reset(self) -> int:
        with transaction():
            before = self._records.count()
            self._records.delete_all()
            self._tally.reset_counts()
        return before
