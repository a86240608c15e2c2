"""DuckDB connection management."""

import threading
from collections.abc import Iterator
from contextlib import contextmanager

import duckdb
from loguru import logger

import settings
from app.errors import StoreUnavailable
from app.models import ALL_DDL
from app.repositories.feed import feed

_lock = threading.Lock()
_write_lock = threading.Lock()
_root: duckdb.DuckDBPyConnection | None = None
_local = threading.local()


def _tables_exist(conn: duckdb.DuckDBPyConnection) -> bool:
    """Check if main tables already exist."""
    try:
        result = conn.execute(
            "SELECT COUNT(*) FROM information_schema.tables WHERE table_name = 'vote_record'"
        ).fetchone()
        return result[0] > 0
    except duckdb.Error:
        return False


def init_tables(conn: duckdb.DuckDBPyConnection) -> None:
    """Initialize all tables from DDL statements (idempotent - uses IF NOT EXISTS)."""
    if _tables_exist(conn):
        return

    for ddl in ALL_DDL:
        conn.execute(ddl)
    logger.info("DB tables initialized")


def _connect(path: str) -> duckdb.DuckDBPyConnection:
    try:
        conn = duckdb.connect(path)
    except (duckdb.IOException, duckdb.ConnectionException) as e:
        logger.error("Cannot open DB {}: {}", path, e)
        raise StoreUnavailable(f"Cannot open vote store: {e}") from e
    init_tables(conn)
    logger.debug("DB connected: {}", path)
    return conn


def open_db(path: str | None = None) -> duckdb.DuckDBPyConnection:
    """(Re)open the shared database. Defaults to settings.DB_PATH."""
    global _root
    with _lock:
        if _root is not None:
            _root.close()
        _root = _connect(path or settings.DB_PATH)
        return _root


def get_db() -> duckdb.DuckDBPyConnection:
    """Get thread-local cursor on the shared database."""
    global _root
    root = getattr(_local, "root", None)
    if root is None or root is not _root:
        with _lock:
            if _root is None:
                _root = _connect(settings.DB_PATH)
            _local.conn = _root.cursor()
            _local.root = _root
    return _local.conn


def close_db() -> None:
    """Close the shared database and this thread's cursor."""
    global _root
    with _lock:
        if getattr(_local, "conn", None) is not None:
            _local.conn.close()
        _local.conn = None
        _local.root = None
        if _root is not None:
            _root.close()
            _root = None
            logger.debug("DB connection closed")


def reconnect_db() -> duckdb.DuckDBPyConnection:
    """Force reconnect."""
    close_db()
    return get_db()


def notify(collection: str) -> None:
    """Publish a change now, or on commit when inside a transaction."""
    pending = getattr(_local, "pending", None)
    if pending is not None:
        pending.add(collection)
    else:
        feed.publish(collection)


def is_duplicate_key(exc: BaseException) -> bool:
    """Primary-key / unique violation, as opposed to NOT NULL or CHECK failures."""
    return isinstance(exc, duckdb.ConstraintException) and "duplicate" in str(exc).lower()


def _rollback(conn: duckdb.DuckDBPyConnection) -> None:
    try:
        conn.rollback()
    except duckdb.TransactionException as e:
        # commit already failed and closed the transaction
        logger.debug("Rollback skipped: {}", e)


@contextmanager
def transaction() -> Iterator[duckdb.DuckDBPyConnection]:
    """Run a block in one DuckDB transaction on this thread's cursor.

    Write transactions are serialized process-wide. Change notices raised
    inside the block are published after commit, outside the lock.
    Not re-entrant.
    """
    conn = get_db()
    with _write_lock:
        conn.begin()
        _local.pending = set()
        try:
            yield conn
            conn.commit()
        except BaseException:
            _rollback(conn)
            _local.pending = None
            raise

        changed, _local.pending = _local.pending, None

    for collection in sorted(changed):
        feed.publish(collection)
