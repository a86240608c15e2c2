"""Vote ledger - ballot validation, the one-vote-per-identity gate, submission."""

from collections.abc import Mapping
from typing import Any

from loguru import logger

from app.errors import AlreadyVoted, IncompleteBallot, NotAuthenticated
from app.models import BallotEntry, Identity, Position, Selection, VoteRecord, utcnow
from app.repositories import PositionRepository, VoteRecordRepository, retry_on_conflict, transaction
from app.services.voting.tally import TallyAggregator


def _coerce(selection: Selection | Mapping[str, Any]) -> Selection:
    """Accept Selection objects or {candidateId, candidateName} documents."""
    if isinstance(selection, Selection):
        return selection
    return Selection(
        candidate_id=str(selection.get("candidateId") or selection.get("candidate_id") or ""),
        candidate_name=str(selection.get("candidateName") or selection.get("candidate_name") or ""),
    )


def build_ballot(
    positions: list[Position],
    selections: Mapping[str, Selection | Mapping[str, Any]],
) -> list[BallotEntry]:
    """Check completeness against current positions; return entries in ballot order.

    Raises IncompleteBallot unless there is exactly one non-empty selection per
    position.
    """
    chosen = {name: _coerce(s) for name, s in selections.items()}
    provided = sum(1 for s in chosen.values() if s.candidate_id)
    required = len(positions)

    missing = [p.name for p in positions if p.name not in chosen or not chosen[p.name].candidate_id]
    if not positions or missing or len(chosen) != required:
        raise IncompleteBallot(required, provided, missing)

    return [
        BallotEntry(
            position=p.name,
            candidate_id=chosen[p.name].candidate_id,
            candidate_name=chosen[p.name].candidate_name,
        )
        for p in positions
    ]


class VoteLedger:
    """Owns the has-voted invariant and the per-identity ballot record."""

    def __init__(
        self,
        record_repo: VoteRecordRepository,
        position_repo: PositionRepository,
        tally: TallyAggregator,
    ):
        self._records = record_repo
        self._positions = position_repo
        self._tally = tally
        logger.debug("VoteLedger initialized")

    def has_voted(self, identity: Identity) -> bool:
        """True iff a vote record with has_voted exists for the identity."""
        return self._records.has_voted(identity.id)

    def get_vote_record(self, user_id: str) -> VoteRecord | None:
        return self._records.get(user_id)

    def submit_ballot(
        self,
        identity: Identity | None,
        selections: Mapping[str, Selection | Mapping[str, Any]],
    ) -> VoteRecord:
        """Validate and persist one ballot, then count it.

        Writes nothing on IncompleteBallot or AlreadyVoted. Record and counter
        updates commit together or not at all.
        """
        if identity is None or not identity.id:
            raise NotAuthenticated()

        entries = build_ballot(self._positions.list_all(), selections)
        record = VoteRecord(
            user_id=identity.id,
            user_email=identity.email or "",
            votes=entries,
            timestamp=utcnow(),
            has_voted=True,
        )

        self._store(record)
        logger.info("Ballot accepted for {} ({} positions)", identity.id, len(entries))
        return record

    @retry_on_conflict
    def _store(self, record: VoteRecord) -> None:
        # Fast path; the conditional insert below is the real gate.
        if self._records.has_voted(record.user_id):
            raise AlreadyVoted(record.user_id)

        with transaction():
            if not self._records.insert_if_absent(record):
                raise AlreadyVoted(record.user_id)
            self._tally.record_ballot(record.votes)
