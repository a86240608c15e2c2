"""Vote record model - one ballot per voter identity."""

VOTE_RECORD_DDL = """
CREATE TABLE IF NOT EXISTS vote_record (
    user_id VARCHAR PRIMARY KEY,
    user_email VARCHAR NOT NULL,
    votes JSON NOT NULL,
    timestamp TIMESTAMP NOT NULL,
    has_voted BOOLEAN NOT NULL DEFAULT TRUE
)
"""
