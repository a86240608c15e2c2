"""Admin services."""

from app.services.admin.audit import AuditLog
from app.services.admin.management import VoteManagement

__all__ = [
    "AuditLog",
    "VoteManagement",
]
