"""Dashboard service - read-side results over the live tally."""

from collections.abc import Callable

from app.models import CandidateResult, PositionResult
from app.repositories import CandidateRepository, PositionRepository, VoteRecordRepository
from app.services.voting.tally import CountsMap, TallyAggregator


def pick_winner(results: list[CandidateResult]) -> CandidateResult | None:
    """Highest count wins; on a tie the first candidate in the list wins.

    Returns None while nobody in the position has a vote.
    """
    if not results:
        return None
    winner = max(results, key=lambda r: r.votes)
    return winner if winner.votes > 0 else None


class DashboardService:
    """Dashboard business logic."""

    def __init__(
        self,
        position_repo: PositionRepository,
        candidate_repo: CandidateRepository,
        record_repo: VoteRecordRepository,
        tally: TallyAggregator,
    ):
        self._positions = position_repo
        self._candidates = candidate_repo
        self._records = record_repo
        self._tally = tally

    def position_results(self, counts: CountsMap | None = None) -> list[PositionResult]:
        """Per-position results in ballot order."""
        if counts is None:
            counts = self._tally.get_counts()

        results = []
        for position in self._positions.list_all():
            position_votes = counts.get(position.name, {})
            total = sum(position_votes.values())

            lines = []
            for c in self._candidates.list_by_position(position.id):
                votes = position_votes.get(c.id, 0)
                lines.append(
                    CandidateResult(
                        id=c.id,
                        name=c.name,
                        image=c.image,
                        votes=votes,
                        percentage=round(votes / total * 100, 1) if total else 0.0,
                    )
                )

            results.append(
                PositionResult(
                    position=position.name,
                    results=lines,
                    total_votes=total,
                    winner=pick_winner(lines),
                )
            )
        return results

    def subscribe_to_results(self, callback: Callable[[list[PositionResult]], None]) -> Callable[[], None]:
        """Recompute results on every tally change."""
        return self._tally.subscribe_to_counts(lambda counts: callback(self.position_results(counts)))

    def get_overview(self) -> dict:
        """Headline numbers for the dashboard."""
        counts = self._tally.get_counts()
        return {
            "positions_count": len(self._positions.list_all()),
            "candidates_count": self._candidates.count(),
            "voters_count": self._records.count(),
            "total_votes_cast": sum(sum(p.values()) for p in counts.values()),
        }
