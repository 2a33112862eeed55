"""
db/connection.py
----------------
Provides the database connection the vault store works against.

Two backends are supported, selected by ``DB_BACKEND``:
    - ``sqlite``:   a single sqlite3 connection to ``SQLITE_PATH``.
    - ``postgres``: connections drawn from a psycopg2 SimpleConnectionPool.

The caller owns the connection: open it with `open_connection()`, hand it
to a `VaultStore`, and give it back with `close_connection()`.
"""

import sqlite3

import psycopg2
from psycopg2 import pool

from config import DATABASE_URL, DB_BACKEND, DB_POOL_MAX, DB_POOL_MIN, SQLITE_PATH
from utils.logger import get_logger

logger = get_logger(__name__)

SUPPORTED_BACKENDS = ("sqlite", "postgres")

_pool: pool.SimpleConnectionPool | None = None


def init_pool(min_conn: int = DB_POOL_MIN, max_conn: int = DB_POOL_MAX) -> None:
    """
    Initialize the PostgreSQL connection pool.

    Args:
        min_conn: Minimum number of connections to keep open.
        max_conn: Maximum number of connections allowed.

    Raises:
        psycopg2.OperationalError: If the database is unreachable.
    """
    global _pool
    if _pool is not None:
        return
    try:
        _pool = pool.SimpleConnectionPool(min_conn, max_conn, DATABASE_URL)
        logger.info("Database connection pool initialized successfully.")
    except psycopg2.OperationalError as e:
        logger.error(f"Failed to initialize database pool: {e}")
        raise


def get_connection():
    """
    Get a connection from the pool.

    Returns:
        A psycopg2 connection object.

    Raises:
        RuntimeError: If the pool has not been initialized.
    """
    if _pool is None:
        raise RuntimeError("Database pool not initialized. Call init_pool() first.")
    return _pool.getconn()


def release_connection(conn) -> None:
    """Return a connection back to the pool."""
    if _pool is not None:
        _pool.putconn(conn)


def close_pool() -> None:
    """Close all connections in the pool."""
    global _pool
    if _pool is not None:
        _pool.closeall()
        _pool = None
        logger.info("Database connection pool closed.")


def open_sqlite(path: str = SQLITE_PATH) -> sqlite3.Connection:
    """
    Open a SQLite connection with foreign keys enforced.

    Args:
        path: Database file, or ``":memory:"``.
    """
    conn = sqlite3.connect(path)
    conn.execute("PRAGMA foreign_keys = ON")
    logger.info(f"Opened SQLite database at {path}")
    return conn


def open_connection(backend: str = DB_BACKEND):
    """
    Open a connection for the configured backend.

    Args:
        backend: ``"sqlite"`` or ``"postgres"``.

    Returns:
        A DB-API 2 connection ready to be passed to ``VaultStore``.

    Raises:
        ValueError: If the backend name is unknown.
    """
    if backend == "sqlite":
        return open_sqlite()
    if backend == "postgres":
        init_pool()
        return get_connection()
    raise ValueError(
        f"Unsupported DB_BACKEND '{backend}', expected one of {SUPPORTED_BACKENDS}"
    )


def close_connection(conn, backend: str = DB_BACKEND) -> None:
    """Close a SQLite connection, or return a pooled one to the pool."""
    if backend == "postgres":
        release_connection(conn)
    else:
        conn.close()
