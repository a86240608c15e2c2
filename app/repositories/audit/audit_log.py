"""Audit log repository - append-only."""

from app.models import AuditAction, AuditLogEntry
from app.repositories.base import BaseRepository

_COLUMNS = (
    "id, action, performed_by, performed_by_email, target_user_id, target_user_email, "
    "timestamp, details, vote_count_before, vote_count_after"
)


def _to_entry(row) -> AuditLogEntry:
    return AuditLogEntry(
        id=row[0],
        action=AuditAction(row[1]),
        performed_by=row[2],
        performed_by_email=row[3],
        target_user_id=row[4],
        target_user_email=row[5],
        timestamp=row[6],
        details=row[7],
        vote_count_before=row[8],
        vote_count_after=row[9],
    )


class AuditLogRepository(BaseRepository):
    """Repository for audit log entries."""

    table = "audit_log"
    collection = "auditLogs"

    def append(self, entry: AuditLogEntry) -> None:
        self.execute(
            f"INSERT INTO audit_log ({_COLUMNS}) VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?)",
            [
                entry.id,
                str(entry.action),
                entry.performed_by,
                entry.performed_by_email,
                entry.target_user_id,
                entry.target_user_email,
                entry.timestamp,
                entry.details,
                entry.vote_count_before,
                entry.vote_count_after,
            ],
        )
        self._changed()

    def get(self, entry_id: str) -> AuditLogEntry | None:
        row = self.fetchone(f"SELECT {_COLUMNS} FROM audit_log WHERE id = ?", [entry_id])
        return _to_entry(row) if row else None

    def list_all(self, action: AuditAction | None = None) -> list[AuditLogEntry]:
        """Entries newest first; insertion order breaks timestamp ties."""
        if action:
            rows = self.fetchall(
                f"SELECT {_COLUMNS} FROM audit_log WHERE action = ? ORDER BY timestamp DESC, seq DESC",
                [str(action)],
            )
        else:
            rows = self.fetchall(f"SELECT {_COLUMNS} FROM audit_log ORDER BY timestamp DESC, seq DESC")
        return [_to_entry(r) for r in rows]
