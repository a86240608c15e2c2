"""Services package - service class exports."""

from app.services.admin import AuditLog, VoteManagement
from app.services.auth import IdentityProvider, PinIdentityProvider
from app.services.dashboard.service import DashboardService
from app.services.voting.ledger import VoteLedger
from app.services.voting.tally import TallyAggregator
from app.services.voting.validation import validate_tallies

__all__ = [
    "AuditLog",
    "DashboardService",
    "IdentityProvider",
    "PinIdentityProvider",
    "TallyAggregator",
    "VoteLedger",
    "VoteManagement",
    "validate_tallies",
]
