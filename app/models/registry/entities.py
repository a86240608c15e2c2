"""Registry entities - positions and their candidates."""

from dataclasses import dataclass
from datetime import datetime

from app.models.common import BaseEntity


@dataclass
class Position(BaseEntity):
    """A contested role; `order` defines ballot sequence."""

    id: str
    name: str
    order: int
    created_at: datetime | None = None
    updated_at: datetime | None = None


@dataclass
class Candidate(BaseEntity):
    """Candidate standing for one position."""

    id: str
    name: str
    position_id: str
    position: str = ""
    bio: str = ""
    image: str = ""
    user_id: str | None = None
    email: str | None = None
    profession: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
