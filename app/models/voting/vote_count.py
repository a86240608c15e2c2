"""Vote count model - running tally per (position, candidate)."""

VOTE_COUNT_DDL = """
CREATE TABLE IF NOT EXISTS vote_count (
    id VARCHAR PRIMARY KEY,
    position VARCHAR NOT NULL,
    candidate_id VARCHAR NOT NULL,
    candidate_name VARCHAR NOT NULL,
    count INTEGER NOT NULL DEFAULT 0
)
"""


def vote_count_id(position: str, candidate_id: str) -> str:
    """Document key for a (position, candidate) counter."""
    return f"{position}_{candidate_id}"
