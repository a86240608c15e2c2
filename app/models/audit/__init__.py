"""Audit domain models."""

from app.models.audit.audit_log import AUDIT_LOG_DDL, AUDIT_LOG_SEQ_DDL
from app.models.audit.entities import AuditAction, AuditLogEntry

__all__ = [
    "AUDIT_LOG_SEQ_DDL",
    "AUDIT_LOG_DDL",
    "AuditAction",
    "AuditLogEntry",
]
