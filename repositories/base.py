"""
repositories/base.py
--------------------
Shared plumbing for the vault repositories.

A repository wraps one DB-API 2 connection that it does not own. SQL is
written with ``%s`` placeholders and rewritten to ``?`` when the driver
uses the ``qmark`` style (sqlite3). Every driver exception is logged,
rolled back and re-raised as `StoreError`.
"""

import sys
from contextlib import closing

from utils.errors import StoreError
from utils.logger import get_logger

logger = get_logger(__name__)


def detect_paramstyle(conn) -> str:
    """
    Look up the DB-API ``paramstyle`` of the driver that created `conn`.

    Falls back to ``"format"`` when the driver module cannot be found.
    """
    driver = type(conn).__module__.split(".")[0]
    module = sys.modules.get(driver)
    return getattr(module, "paramstyle", "format")


class BaseRepository:
    """Connection holder with query, write and rollback helpers."""

    def __init__(self, conn, paramstyle: str | None = None):
        self.conn = conn
        self.paramstyle = paramstyle or detect_paramstyle(conn)

    def _sql(self, sql: str) -> str:
        if self.paramstyle == "qmark":
            return sql.replace("%s", "?")
        return sql

    def _rollback(self) -> None:
        """Roll back, logging (not raising) if the rollback itself fails."""
        try:
            self.conn.rollback()
        except Exception as e:
            logger.error(f"Rollback failed: {e}")

    def _fetch_all(self, sql: str, params: tuple) -> list[tuple]:
        try:
            with closing(self.conn.cursor()) as cur:
                cur.execute(self._sql(sql), params)
                return cur.fetchall()
        except Exception as e:
            self._rollback()
            logger.error(f"Query failed: {e}")
            raise StoreError(f"Query failed: {e}") from e

    def _fetch_one(self, sql: str, params: tuple) -> tuple | None:
        rows = self._fetch_all(sql, params)
        return rows[0] if rows else None

    def _execute(self, sql: str, params: tuple, action: str) -> int:
        """
        Run a single write statement and commit it.

        Args:
            sql: Statement with ``%s`` placeholders.
            params: Bound values.
            action: Short description used in log and error messages.

        Returns:
            Number of rows the statement changed.

        Raises:
            StoreError: If the statement or the commit fails.
        """
        try:
            with closing(self.conn.cursor()) as cur:
                cur.execute(self._sql(sql), params)
                changed = cur.rowcount
            self.conn.commit()
            return changed
        except Exception as e:
            self._rollback()
            logger.error(f"{action} failed: {e}")
            raise StoreError(f"{action} failed: {e}") from e
