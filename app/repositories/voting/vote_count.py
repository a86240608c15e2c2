"""Vote count repository - atomic per-candidate counters."""

from loguru import logger

from app.models import VoteCount, vote_count_id
from app.repositories.base import BaseRepository

_COLUMNS = "id, position, candidate_id, candidate_name, count"


def _to_count(row) -> VoteCount:
    return VoteCount(id=row[0], position=row[1], candidate_id=row[2], candidate_name=row[3], count=row[4])


class VoteCountRepository(BaseRepository):
    """Repository for vote counts, keyed by "{position}_{candidate_id}"."""

    table = "vote_count"
    collection = "voteCounts"

    def get(self, position: str, candidate_id: str) -> VoteCount | None:
        row = self.fetchone(
            f"SELECT {_COLUMNS} FROM vote_count WHERE id = ?",
            [vote_count_id(position, candidate_id)],
        )
        return _to_count(row) if row else None

    def increment(self, position: str, candidate_id: str, candidate_name: str) -> None:
        """Create the counter at 1 or add 1, in a single statement."""
        self.execute(
            f"""
            INSERT INTO vote_count ({_COLUMNS}) VALUES (?, ?, ?, ?, 1)
            ON CONFLICT (id) DO UPDATE SET count = count + 1
            """,
            [vote_count_id(position, candidate_id), position, candidate_id, candidate_name],
        )
        self._changed()
        logger.debug("Count +1: {}/{}", position, candidate_id)

    def decrement(self, position: str, candidate_id: str) -> bool:
        """Subtract 1, never below 0. Missing counters are left alone."""
        changed = self.affected(
            "UPDATE vote_count SET count = GREATEST(count - 1, 0) WHERE id = ?",
            [vote_count_id(position, candidate_id)],
        )
        if changed:
            self._changed()
            logger.debug("Count -1: {}/{}", position, candidate_id)
        return changed > 0

    def reset_all(self) -> int:
        """Zero every counter; documents are kept."""
        changed = self.affected("UPDATE vote_count SET count = 0 WHERE count <> 0")
        if changed:
            self._changed()
        logger.info("Reset {} vote counts to 0", changed)
        return changed

    def list_all(self) -> list[VoteCount]:
        rows = self.fetchall(f"SELECT {_COLUMNS} FROM vote_count ORDER BY position, candidate_id")
        return [_to_count(r) for r in rows]
