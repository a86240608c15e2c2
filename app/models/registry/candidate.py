"""Candidate model - linked to its position by id, not by name."""

CANDIDATE_SEQ_DDL = "CREATE SEQUENCE IF NOT EXISTS candidate_seq"

CANDIDATE_DDL = """
CREATE TABLE IF NOT EXISTS candidate (
    id VARCHAR PRIMARY KEY,
    name VARCHAR NOT NULL,
    position_id VARCHAR NOT NULL,
    bio VARCHAR DEFAULT '',
    image VARCHAR DEFAULT '',
    user_id VARCHAR,
    email VARCHAR,
    profession VARCHAR,
    created_at TIMESTAMP NOT NULL,
    updated_at TIMESTAMP NOT NULL,
    seq BIGINT DEFAULT nextval('candidate_seq')
)
"""

CANDIDATE_INDEXES = [
    "CREATE INDEX IF NOT EXISTS idx_candidate_position ON candidate(position_id)",
]
