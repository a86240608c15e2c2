"""Shared fixtures - fresh in-memory database per test."""

from types import SimpleNamespace

import pytest

from app.models import Identity, Selection, UserRole
from app.repositories import (
    AuditLogRepository,
    CandidateRepository,
    PositionRepository,
    UserRepository,
    VoteCountRepository,
    VoteRecordRepository,
    close_db,
    feed,
    open_db,
)
from app.services import AuditLog, DashboardService, TallyAggregator, VoteLedger, VoteManagement


@pytest.fixture(autouse=True)
def memory_db():
    open_db(":memory:")
    yield
    feed.clear()
    close_db()


@pytest.fixture
def svc():
    """Repositories and services wired like the container; admin-1 is an admin."""
    positions = PositionRepository()
    candidates = CandidateRepository()
    records = VoteRecordRepository()
    counts = VoteCountRepository()
    audit_repo = AuditLogRepository()
    users = UserRepository()
    users.set_role("admin-1", "admin@example.com", UserRole.ADMIN)

    tally = TallyAggregator(count_repo=counts)
    audit = AuditLog(repo=audit_repo)

    return SimpleNamespace(
        positions=positions,
        candidates=candidates,
        records=records,
        counts=counts,
        audit_repo=audit_repo,
        users=users,
        tally=tally,
        audit=audit,
        ledger=VoteLedger(record_repo=records, position_repo=positions, tally=tally),
        management=VoteManagement(record_repo=records, tally=tally, audit=audit, user_repo=users),
        dashboard=DashboardService(
            position_repo=positions,
            candidate_repo=candidates,
            record_repo=records,
            tally=tally,
        ),
    )


@pytest.fixture
def slate(svc):
    """President (c1, c2) and Secretary (s1, s2)."""
    president = svc.positions.create("President", 1)
    secretary = svc.positions.create("Secretary", 2)
    return {
        "President": president,
        "Secretary": secretary,
        "c1": svc.candidates.create("Sarah Johnson", president.id),
        "c2": svc.candidates.create("Michael Chen", president.id),
        "s1": svc.candidates.create("James Wilson", secretary.id),
        "s2": svc.candidates.create("Ana Lopez", secretary.id),
    }


@pytest.fixture
def ballot(slate):
    """ballot("c1", "s2") -> full selections map."""

    def make(president: str, secretary: str) -> dict[str, Selection]:
        p, s = slate[president], slate[secretary]
        return {
            "President": Selection(candidate_id=p.id, candidate_name=p.name),
            "Secretary": Selection(candidate_id=s.id, candidate_name=s.name),
        }

    return make


@pytest.fixture
def voter():
    def make(n) -> Identity:
        return Identity(id=f"user-{n}", email=f"user{n}@example.com")

    return make
