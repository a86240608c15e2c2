"""Application settings."""

import os
from pathlib import Path

# Database
DB_PATH = os.getenv("VOTING_DB_PATH", "voting.duckdb")

# Logging
LOG_DIR = Path(os.getenv("VOTING_LOG_DIR", "logs"))

# Transactions (write-write conflicts are retried)
TX_RETRY_ATTEMPTS = int(os.getenv("TX_RETRY_ATTEMPTS", "10"))
TX_RETRY_MAX_WAIT = float(os.getenv("TX_RETRY_MAX_WAIT", "0.5"))

# Admin identity used by manage.py when no flags are given
ADMIN_ID = os.getenv("ADMIN_ID", "")
ADMIN_EMAIL = os.getenv("ADMIN_EMAIL", "")
