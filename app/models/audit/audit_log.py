"""Audit log model - append-only trail of admin vote mutations."""

AUDIT_LOG_SEQ_DDL = "CREATE SEQUENCE IF NOT EXISTS audit_log_seq"

AUDIT_LOG_DDL = """
CREATE TABLE IF NOT EXISTS audit_log (
    id VARCHAR PRIMARY KEY,
    action VARCHAR NOT NULL,
    performed_by VARCHAR NOT NULL,
    performed_by_email VARCHAR NOT NULL,
    target_user_id VARCHAR,
    target_user_email VARCHAR,
    timestamp TIMESTAMP NOT NULL,
    details VARCHAR NOT NULL,
    vote_count_before INTEGER,
    vote_count_after INTEGER,
    seq BIGINT DEFAULT nextval('audit_log_seq')
)
"""
