"""User model - role assignments for identities."""

USER_DDL = """
CREATE TABLE IF NOT EXISTS app_user (
    user_id VARCHAR PRIMARY KEY,
    email VARCHAR NOT NULL,
    role VARCHAR NOT NULL DEFAULT 'user',
    created_at TIMESTAMP NOT NULL,
    updated_at TIMESTAMP NOT NULL
)
"""
