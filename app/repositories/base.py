"""Base repository class."""

from typing import Any

import duckdb
from loguru import logger

from app.errors import StoreUnavailable
from app.repositories.db import get_db, notify


class BaseRepository:
    """Base repository over one table / document collection."""

    table: str = ""
    collection: str = ""

    def __init__(self):
        logger.debug("{} initialized", self.__class__.__name__)

    @property
    def _db(self) -> duckdb.DuckDBPyConnection:
        return get_db()

    def execute(self, query: str, params: list | None = None) -> Any:
        """Execute SQL query."""
        try:
            if params:
                return self._db.execute(query, params)
            return self._db.execute(query)
        except (duckdb.IOException, duckdb.ConnectionException) as e:
            logger.error("Store failure on {}: {}", self.collection, e)
            raise StoreUnavailable(f"Vote store unavailable: {e}") from e

    def fetchall(self, query: str, params: list | None = None) -> list:
        """Execute and fetch all rows."""
        return self.execute(query, params).fetchall()

    def fetchone(self, query: str, params: list | None = None) -> Any:
        """Execute and fetch one row."""
        return self.execute(query, params).fetchone()

    def affected(self, query: str, params: list | None = None) -> int:
        """Execute a DML statement and return the number of changed rows."""
        row = self.fetchone(query, params)
        return int(row[0]) if row else 0

    def count(self) -> int:
        """Number of documents in the collection."""
        return self.fetchone(f"SELECT COUNT(*) FROM {self.table}")[0]

    def _changed(self) -> None:
        notify(self.collection)
