"""User repository - role lookup for admin access."""

from loguru import logger

from app.models import User, UserRole, utcnow
from app.repositories.base import BaseRepository

_COLUMNS = "user_id, email, role, created_at, updated_at"


def _to_user(row) -> User:
    role = row[2] if row[2] in {r.value for r in UserRole} else UserRole.USER
    return User(user_id=row[0], email=row[1], role=UserRole(role), created_at=row[3], updated_at=row[4])


class UserRepository(BaseRepository):
    """Repository for users, keyed by identity id."""

    table = "app_user"
    collection = "users"

    def get(self, user_id: str) -> User | None:
        row = self.fetchone(f"SELECT {_COLUMNS} FROM app_user WHERE user_id = ?", [user_id])
        return _to_user(row) if row else None

    def get_role(self, user_id: str) -> UserRole:
        """Stored role, or plain user when the identity is unknown."""
        user = self.get(user_id)
        return user.role if user else UserRole.USER

    def set_role(self, user_id: str, email: str, role: UserRole) -> User:
        """Create the user or change their role."""
        now = utcnow()
        self.execute(
            f"""
            INSERT INTO app_user ({_COLUMNS}) VALUES (?, ?, ?, ?, ?)
            ON CONFLICT (user_id) DO UPDATE
            SET email = EXCLUDED.email, role = EXCLUDED.role, updated_at = EXCLUDED.updated_at
            """,
            [user_id, email, str(role), now, now],
        )
        self._changed()
        logger.info("Role of {} set to {}", user_id, role)
        return self.get(user_id)
