"""Position (contested role) model."""

POSITION_DDL = """
CREATE TABLE IF NOT EXISTS position (
    id VARCHAR PRIMARY KEY,
    name VARCHAR NOT NULL,
    order_num INTEGER NOT NULL,
    created_at TIMESTAMP NOT NULL,
    updated_at TIMESTAMP NOT NULL
)
"""
