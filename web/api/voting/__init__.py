"""Voting API."""

from web.api.voting.views import (
    get_counts,
    get_vote_record,
    get_vote_status,
    submit_ballot,
)

__all__ = [
    "submit_ballot",
    "get_vote_status",
    "get_vote_record",
    "get_counts",
]
