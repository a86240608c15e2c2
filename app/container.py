"""Dependency Injection container - initialized at app startup."""

from app.repositories import (
    AuditLogRepository,
    CandidateRepository,
    PositionRepository,
    UserRepository,
    VoteCountRepository,
    VoteRecordRepository,
)
from app.services.admin import AuditLog, VoteManagement
from app.services.auth import PinIdentityProvider
from app.services.dashboard.service import DashboardService
from app.services.voting.ledger import VoteLedger
from app.services.voting.tally import TallyAggregator


class Container:
    """Application DI container - holds all singleton instances."""

    _instance = None
    _initialized = False

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def init(self) -> None:
        """Initialize all dependencies. Call once at app startup."""
        if self._initialized:
            return

        # Repositories (singletons)
        self.positions = PositionRepository()
        self.candidates = CandidateRepository()
        self.vote_records = VoteRecordRepository()
        self.vote_counts = VoteCountRepository()
        self.users = UserRepository()
        self._audit_repo = AuditLogRepository()

        # Services (with injected repos)
        self.tally = TallyAggregator(count_repo=self.vote_counts)

        self.ledger = VoteLedger(
            record_repo=self.vote_records,
            position_repo=self.positions,
            tally=self.tally,
        )

        self.audit = AuditLog(repo=self._audit_repo)

        self.management = VoteManagement(
            record_repo=self.vote_records,
            tally=self.tally,
            audit=self.audit,
            user_repo=self.users,
        )

        self.dashboard = DashboardService(
            position_repo=self.positions,
            candidate_repo=self.candidates,
            record_repo=self.vote_records,
            tally=self.tally,
        )

        self.identity = PinIdentityProvider()

        self._initialized = True


# Global container instance
container = Container()
