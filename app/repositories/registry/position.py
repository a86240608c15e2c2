"""Position repository - contested roles in ballot order."""

from uuid import uuid4

from loguru import logger

from app.models import Position, utcnow
from app.repositories.base import BaseRepository

_COLUMNS = "id, name, order_num, created_at, updated_at"


def _to_position(row) -> Position:
    return Position(id=row[0], name=row[1], order=row[2], created_at=row[3], updated_at=row[4])


class PositionRepository(BaseRepository):
    """Repository for positions."""

    table = "position"
    collection = "positions"

    def create(self, name: str, order: int) -> Position:
        """Create a position and return it."""
        now = utcnow()
        position = Position(id=uuid4().hex, name=name, order=order, created_at=now, updated_at=now)
        self.execute(
            f"INSERT INTO position ({_COLUMNS}) VALUES (?, ?, ?, ?, ?)",
            [position.id, name, order, now, now],
        )
        self._changed()
        logger.info("Position created: {} (order {})", name, order)
        return position

    def get(self, position_id: str) -> Position | None:
        row = self.fetchone(f"SELECT {_COLUMNS} FROM position WHERE id = ?", [position_id])
        return _to_position(row) if row else None

    def list_all(self) -> list[Position]:
        """All positions, ordered by ballot order."""
        rows = self.fetchall(f"SELECT {_COLUMNS} FROM position ORDER BY order_num, created_at")
        return [_to_position(r) for r in rows]

    def rename(self, position_id: str, name: str) -> bool:
        changed = self.affected(
            "UPDATE position SET name = ?, updated_at = ? WHERE id = ?",
            [name, utcnow(), position_id],
        )
        if changed:
            self._changed()
            logger.info("Position {} renamed to {}", position_id, name)
        return changed > 0

    def delete(self, position_id: str) -> bool:
        deleted = self.affected("DELETE FROM position WHERE id = ?", [position_id])
        if deleted:
            self._changed()
            logger.info("Position {} deleted", position_id)
        return deleted > 0
