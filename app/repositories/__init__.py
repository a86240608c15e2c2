"""Repositories package - data access layer for our database."""

from app.repositories.audit.audit_log import AuditLogRepository
from app.repositories.auth.user import UserRepository
from app.repositories.base import BaseRepository
from app.repositories.db import (
    close_db,
    get_db,
    init_tables,
    notify,
    open_db,
    reconnect_db,
    transaction,
)
from app.repositories.feed import ChangeFeed, feed
from app.repositories.registry.candidate import CandidateRepository
from app.repositories.registry.position import PositionRepository
from app.repositories.retry import retry_on_conflict
from app.repositories.voting.vote_count import VoteCountRepository
from app.repositories.voting.vote_record import VoteRecordRepository

__all__ = [
    # DB
    "get_db",
    "open_db",
    "close_db",
    "reconnect_db",
    "init_tables",
    "transaction",
    "notify",
    # Feed
    "ChangeFeed",
    "feed",
    # Base
    "BaseRepository",
    "retry_on_conflict",
    # Registry
    "PositionRepository",
    "CandidateRepository",
    # Voting
    "VoteRecordRepository",
    "VoteCountRepository",
    # Auth
    "UserRepository",
    # Audit
    "AuditLogRepository",
]
