"""Voting API request/response schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class SelectionItem(BaseModel):
    """Candidate picked for one position."""

    model_config = ConfigDict(populate_by_name=True)

    candidate_id: str = Field(alias="candidateId")
    candidate_name: str = Field(alias="candidateName", default="")


class BallotRequest(BaseModel):
    """Ballot submitted by an authenticated voter."""

    model_config = ConfigDict(populate_by_name=True)

    user_id: str = Field(alias="userId")
    user_email: str = Field(alias="userEmail", default="")
    selections: dict[str, SelectionItem]


class BallotEntryItem(BaseModel):
    """One position's vote in a record."""

    position: str
    candidate_id: str
    candidate_name: str


class VoteRecordResponse(BaseModel):
    """Stored ballot."""

    user_id: str
    user_email: str
    votes: list[BallotEntryItem]
    timestamp: datetime | None
    has_voted: bool


class VoteStatusResponse(BaseModel):
    """Has the identity voted."""

    user_id: str
    has_voted: bool


class CountsResponse(BaseModel):
    """Live tally: position -> candidate_id -> count."""

    counts: dict[str, dict[str, int]]
    total_votes_cast: int
