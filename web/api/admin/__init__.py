"""Admin API."""

from web.api.admin.views import (
    check_tallies,
    delete_vote,
    get_audit_logs,
    get_total_vote_count,
    get_vote_records,
    reset_all_votes,
)

__all__ = [
    "delete_vote",
    "reset_all_votes",
    "get_audit_logs",
    "get_vote_records",
    "get_total_vote_count",
    "check_tallies",
]
