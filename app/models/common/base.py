"""Base entity class for all domain entities."""

from dataclasses import asdict, dataclass
from datetime import UTC, datetime
from typing import Any


def utcnow() -> datetime:
    """Naive UTC timestamp (DuckDB TIMESTAMP columns carry no zone)."""
    return datetime.now(UTC).replace(tzinfo=None)


def _camel(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part.title() for part in rest)


@dataclass
class BaseEntity:
    """Base class for all entities."""

    def to_dict(self) -> dict[str, Any]:
        """Convert entity to dictionary."""
        return asdict(self)

    def to_document(self) -> dict[str, Any]:
        """Convert entity to a camelCase document (wire format)."""
        return {_camel(k): v for k, v in self.to_dict().items()}
