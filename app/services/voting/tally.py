"""Tally aggregator - per (position, candidate) running counts."""

from collections import defaultdict
from collections.abc import Callable, Iterable

from loguru import logger

from app.models import BallotEntry
from app.repositories import ChangeFeed, VoteCountRepository, feed, retry_on_conflict, transaction

CountsMap = dict[str, dict[str, int]]


class TallyAggregator:
    """Maintains VoteCount documents incrementally; never recounts on read."""

    def __init__(self, count_repo: VoteCountRepository, change_feed: ChangeFeed = feed):
        self._counts = count_repo
        self._feed = change_feed
        logger.debug("TallyAggregator initialized")

    @retry_on_conflict
    def increment_count(self, position: str, candidate_id: str, candidate_name: str) -> None:
        """Add one vote; creates the counter at 1 on first vote."""
        with transaction():
            self._counts.increment(position, candidate_id, candidate_name)

    @retry_on_conflict
    def decrement_count(self, position: str, candidate_id: str) -> None:
        """Remove one vote, floored at 0."""
        with transaction():
            self._counts.decrement(position, candidate_id)

    def record_ballot(self, entries: Iterable[BallotEntry]) -> None:
        """Increment every selection of a ballot.

        Runs inside the caller's transaction, so no retry here: a conflict must
        abort and retry the whole unit of work.
        """
        for e in entries:
            self._counts.increment(e.position, e.candidate_id, e.candidate_name)

    def retract_ballot(self, entries: Iterable[BallotEntry]) -> None:
        """Decrement every selection of a ballot. Caller owns the transaction."""
        for e in entries:
            self._counts.decrement(e.position, e.candidate_id)

    def reset_counts(self) -> int:
        """Zero all counters. Caller owns the transaction."""
        return self._counts.reset_all()

    def get_counts(self) -> CountsMap:
        """Counts as {position: {candidate_id: count}}."""
        result: CountsMap = defaultdict(dict)
        for c in self._counts.list_all():
            result[c.position][c.candidate_id] = c.count or 0
        return dict(result)

    def subscribe_to_counts(self, callback: Callable[[CountsMap], None]) -> Callable[[], None]:
        """Push the full counts map now and after every committed count change."""

        def push() -> None:
            callback(self.get_counts())

        unsubscribe = self._feed.subscribe(self._counts.collection, push)
        push()
        return unsubscribe
