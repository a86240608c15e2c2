"""Auth entities."""

from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum

from app.models.common import BaseEntity


class UserRole(StrEnum):
    ADMIN = "admin"
    USER = "user"


@dataclass
class User(BaseEntity):
    """Identity with a role. Identities without a row are plain users."""

    user_id: str
    email: str
    role: UserRole = UserRole.USER
    created_at: datetime | None = None
    updated_at: datetime | None = None
