"""Auth domain models."""

from app.models.auth.entities import User, UserRole
from app.models.auth.user import USER_DDL

__all__ = [
    "USER_DDL",
    "User",
    "UserRole",
]
