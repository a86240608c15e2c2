"""Voting domain models - vote records, counts and ballot entities."""

from app.models.voting.entities import (
    BallotEntry,
    CandidateResult,
    Identity,
    PositionResult,
    Selection,
    VoteCount,
    VoteRecord,
)
from app.models.voting.vote_count import VOTE_COUNT_DDL, vote_count_id
from app.models.voting.vote_record import VOTE_RECORD_DDL

__all__ = [
    "VOTE_RECORD_DDL",
    "VOTE_COUNT_DDL",
    "vote_count_id",
    "Identity",
    "Selection",
    "BallotEntry",
    "VoteRecord",
    "VoteCount",
    "CandidateResult",
    "PositionResult",
]
