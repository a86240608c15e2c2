"""Dashboard API views - thin layer over services."""

from app.container import container
from app.models import PositionResult

from .schemas import CandidateResultItem, OverviewResponse, PositionResultItem, ResultsResponse


def _position_item(p: PositionResult) -> PositionResultItem:
    winner_id = p.winner.id if p.winner else None
    return PositionResultItem(
        position=p.position,
        total_votes=p.total_votes,
        winner_id=winner_id,
        results=[
            CandidateResultItem(
                id=r.id,
                name=r.name,
                image=r.image,
                votes=r.votes,
                percentage=r.percentage,
                is_winner=r.id == winner_id,
            )
            for r in p.results
        ],
    )


def get_results() -> ResultsResponse:
    """Get per-position results with winners."""
    data = container.dashboard.position_results()
    items = [_position_item(p) for p in data]
    return ResultsResponse(items=items, total_votes_cast=sum(p.total_votes for p in data))


def get_overview() -> OverviewResponse:
    """Get dashboard overview."""
    data = container.dashboard.get_overview()

    return OverviewResponse(
        positions_count=data["positions_count"],
        candidates_count=data["candidates_count"],
        voters_count=data["voters_count"],
        total_votes_cast=data["total_votes_cast"],
    )
