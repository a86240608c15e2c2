"""Voting domain entities."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from app.models.common import BaseEntity


@dataclass
class Identity(BaseEntity):
    """Authenticated voter or admin, as issued by the identity provider."""

    id: str
    email: str = ""


@dataclass
class Selection(BaseEntity):
    """Candidate chosen for one position on a ballot."""

    candidate_id: str
    candidate_name: str


@dataclass
class BallotEntry(BaseEntity):
    """One position's vote inside a vote record."""

    position: str
    candidate_id: str
    candidate_name: str

    @classmethod
    def from_document(cls, doc: dict[str, Any]) -> "BallotEntry":
        return cls(
            position=doc["position"],
            candidate_id=doc["candidateId"],
            candidate_name=doc.get("candidateName", ""),
        )


@dataclass
class VoteRecord(BaseEntity):
    """Durable proof that an identity cast its ballot."""

    user_id: str
    user_email: str
    votes: list[BallotEntry] = field(default_factory=list)
    timestamp: datetime | None = None
    has_voted: bool = True

    def to_document(self) -> dict[str, Any]:
        doc = super().to_document()
        doc["votes"] = [v.to_document() for v in self.votes]
        return doc

    @property
    def positions(self) -> list[str]:
        return [v.position for v in self.votes]


@dataclass
class VoteCount(BaseEntity):
    """Tally for one (position, candidate) pair."""

    id: str
    position: str
    candidate_id: str
    candidate_name: str
    count: int = 0


@dataclass
class CandidateResult(BaseEntity):
    """Dashboard line for one candidate."""

    id: str
    name: str
    image: str
    votes: int
    percentage: float


@dataclass
class PositionResult(BaseEntity):
    """Dashboard block for one position."""

    position: str
    results: list[CandidateResult]
    total_votes: int
    winner: CandidateResult | None
