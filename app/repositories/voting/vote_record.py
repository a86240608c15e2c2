"""Vote record repository - one ballot document per voter identity."""

import json
from collections import Counter

import duckdb
from loguru import logger

from app.models import BallotEntry, VoteRecord
from app.repositories.base import BaseRepository
from app.repositories.db import is_duplicate_key

_COLUMNS = "user_id, user_email, votes, timestamp, has_voted"


def _to_record(row) -> VoteRecord:
    return VoteRecord(
        user_id=row[0],
        user_email=row[1],
        votes=[BallotEntry.from_document(v) for v in json.loads(row[2])],
        timestamp=row[3],
        has_voted=bool(row[4]),
    )


class VoteRecordRepository(BaseRepository):
    """Repository for vote records, keyed by identity id."""

    table = "vote_record"
    collection = "voteRecords"

    def get(self, user_id: str) -> VoteRecord | None:
        row = self.fetchone(f"SELECT {_COLUMNS} FROM vote_record WHERE user_id = ?", [user_id])
        return _to_record(row) if row else None

    def has_voted(self, user_id: str) -> bool:
        row = self.fetchone("SELECT has_voted FROM vote_record WHERE user_id = ?", [user_id])
        return bool(row and row[0])

    def insert_if_absent(self, record: VoteRecord) -> bool:
        """Create the record only if no record exists for the user.

        Returns False when the primary key is already taken; other constraint
        failures propagate. Inside a transaction the rejected insert aborts it;
        the caller must roll back.
        """
        votes = json.dumps([v.to_document() for v in record.votes])
        try:
            self.execute(
                f"INSERT INTO vote_record ({_COLUMNS}) VALUES (?, ?, ?, ?, ?)",
                [record.user_id, record.user_email, votes, record.timestamp, record.has_voted],
            )
        except duckdb.ConstraintException as e:
            if not is_duplicate_key(e):
                raise
            logger.warning("Vote record for {} already exists", record.user_id)
            return False

        self._changed()
        logger.debug("Vote record stored for {}", record.user_id)
        return True

    def delete(self, user_id: str) -> bool:
        deleted = self.affected("DELETE FROM vote_record WHERE user_id = ?", [user_id])
        if deleted:
            self._changed()
        return deleted > 0

    def delete_all(self) -> int:
        """Delete every record; returns how many were removed."""
        deleted = self.affected("DELETE FROM vote_record")
        if deleted:
            self._changed()
        logger.info("Deleted {} vote records", deleted)
        return deleted

    def list_all(self) -> list[VoteRecord]:
        """All records, newest first."""
        rows = self.fetchall(f"SELECT {_COLUMNS} FROM vote_record ORDER BY timestamp DESC, user_id")
        return [_to_record(r) for r in rows]

    def selection_totals(self) -> dict[tuple[str, str], int]:
        """Count records per (position, candidate_id), recomputed from the ballots."""
        totals: Counter = Counter()
        for (votes,) in self.fetchall("SELECT votes FROM vote_record"):
            for v in json.loads(votes):
                totals[(v["position"], v["candidateId"])] += 1
        return dict(totals)
