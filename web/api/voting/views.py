"""Voting API views - thin layer over services."""

from app.container import container
from app.models import Identity, Selection, VoteRecord
from web.api.errors import NotFoundError, validate_user_id

from .schemas import (
    BallotEntryItem,
    BallotRequest,
    CountsResponse,
    VoteRecordResponse,
    VoteStatusResponse,
)


def record_response(record: VoteRecord) -> VoteRecordResponse:
    return VoteRecordResponse(
        user_id=record.user_id,
        user_email=record.user_email,
        votes=[
            BallotEntryItem(position=v.position, candidate_id=v.candidate_id, candidate_name=v.candidate_name)
            for v in record.votes
        ],
        timestamp=record.timestamp,
        has_voted=record.has_voted,
    )


def submit_ballot(request: BallotRequest) -> VoteRecordResponse:
    """Cast a ballot. Raises AlreadyVoted / IncompleteBallot / NotAuthenticated."""
    identity = Identity(id=request.user_id, email=request.user_email)
    selections = {
        position: Selection(candidate_id=s.candidate_id, candidate_name=s.candidate_name)
        for position, s in request.selections.items()
    }
    record = container.ledger.submit_ballot(identity, selections)
    return record_response(record)


def get_vote_status(user_id: str) -> VoteStatusResponse:
    """Check whether a user has voted."""
    validate_user_id(user_id)
    has_voted = container.ledger.has_voted(Identity(id=user_id))
    return VoteStatusResponse(user_id=user_id, has_voted=has_voted)


def get_vote_record(user_id: str) -> VoteRecordResponse:
    """Get a user's stored ballot."""
    validate_user_id(user_id)
    record = container.ledger.get_vote_record(user_id)
    if record is None:
        raise NotFoundError(f"No vote record for {user_id}")
    return record_response(record)


def get_counts() -> CountsResponse:
    """Get the live tally."""
    counts = container.tally.get_counts()
    return CountsResponse(
        counts=counts,
        total_votes_cast=sum(sum(p.values()) for p in counts.values()),
    )
