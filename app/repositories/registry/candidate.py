"""Candidate repository - candidates joined with their position name."""

from uuid import uuid4

from loguru import logger

from app.models import Candidate, utcnow
from app.repositories.base import BaseRepository

_SELECT = """
    SELECT c.id, c.name, c.position_id, COALESCE(p.name, ''), c.bio, c.image,
           c.user_id, c.email, c.profession, c.created_at, c.updated_at
    FROM candidate c
    LEFT JOIN position p ON p.id = c.position_id
"""

_UPDATABLE = {"name", "position_id", "bio", "image", "user_id", "email", "profession"}


def _to_candidate(row) -> Candidate:
    return Candidate(
        id=row[0],
        name=row[1],
        position_id=row[2],
        position=row[3],
        bio=row[4] or "",
        image=row[5] or "",
        user_id=row[6],
        email=row[7],
        profession=row[8],
        created_at=row[9],
        updated_at=row[10],
    )


class CandidateRepository(BaseRepository):
    """Repository for candidates."""

    table = "candidate"
    collection = "candidates"

    def create(
        self,
        name: str,
        position_id: str,
        bio: str = "",
        image: str = "",
        user_id: str | None = None,
        email: str | None = None,
        profession: str | None = None,
    ) -> Candidate:
        """Create a candidate for a position and return it."""
        now = utcnow()
        candidate_id = uuid4().hex
        self.execute(
            """
            INSERT INTO candidate (id, name, position_id, bio, image, user_id, email, profession, created_at, updated_at)
            VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?)
            """,
            [candidate_id, name, position_id, bio, image, user_id, email, profession, now, now],
        )
        self._changed()
        logger.info("Candidate created: {} for position {}", name, position_id)
        return self.get(candidate_id)

    def get(self, candidate_id: str) -> Candidate | None:
        row = self.fetchone(f"{_SELECT} WHERE c.id = ?", [candidate_id])
        return _to_candidate(row) if row else None

    def list_all(self) -> list[Candidate]:
        """All candidates in creation order."""
        return [_to_candidate(r) for r in self.fetchall(f"{_SELECT} ORDER BY c.seq")]

    def list_by_position(self, position_id: str) -> list[Candidate]:
        rows = self.fetchall(f"{_SELECT} WHERE c.position_id = ? ORDER BY c.seq", [position_id])
        return [_to_candidate(r) for r in rows]

    def update(self, candidate_id: str, **fields) -> bool:
        """Patch candidate fields."""
        unknown = set(fields) - _UPDATABLE
        if unknown:
            raise ValueError(f"Cannot update candidate fields: {', '.join(sorted(unknown))}")
        if not fields:
            return False

        assignments = ", ".join(f"{k} = ?" for k in fields)
        changed = self.affected(
            f"UPDATE candidate SET {assignments}, updated_at = ? WHERE id = ?",
            [*fields.values(), utcnow(), candidate_id],
        )
        if changed:
            self._changed()
        return changed > 0

    def delete(self, candidate_id: str) -> bool:
        deleted = self.affected("DELETE FROM candidate WHERE id = ?", [candidate_id])
        if deleted:
            self._changed()
            logger.info("Candidate {} deleted", candidate_id)
        return deleted > 0
