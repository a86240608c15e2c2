"""Dashboard API response schemas."""

from pydantic import BaseModel


class CandidateResultItem(BaseModel):
    """Candidate line on the results board."""

    id: str
    name: str
    image: str
    votes: int
    percentage: float
    is_winner: bool


class PositionResultItem(BaseModel):
    """Results for one position."""

    position: str
    total_votes: int
    winner_id: str | None
    results: list[CandidateResultItem]


class ResultsResponse(BaseModel):
    """Results for all positions, in ballot order."""

    items: list[PositionResultItem]
    total_votes_cast: int


class OverviewResponse(BaseModel):
    """Dashboard overview response."""

    positions_count: int
    candidates_count: int
    voters_count: int
    total_votes_cast: int
