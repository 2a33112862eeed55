"""
repositories/codebook_repo.py
-----------------------------
Data access layer for codebooks.
All SQL queries related to the `Codebook` table live here, including the
cascading delete of a codebook's entries.
"""

from contextlib import closing

from models.codebook import Codebook
from repositories.base import BaseRepository
from utils.errors import StoreError
from utils.logger import get_logger

logger = get_logger(__name__)


class CodebookRepository(BaseRepository):
    """Repository for CRUD operations on the Codebook table."""

    # ── CREATE ────────────────────────────────────────────

    def create(self, owner: str, name: str) -> bool:
        """
        Insert a codebook, doing nothing if (owner, name) already exists.

        Returns:
            True once the statement has executed, whether or not a row
            was added.
        """
        sql = """
            INSERT INTO Codebook (username, codebook_name)
            VALUES (%s, %s)
            ON CONFLICT (username, codebook_name) DO NOTHING
        """
        added = self._execute(sql, (owner, name), "Create codebook")
        if added > 0:
            logger.info(f"Created codebook '{name}' for {owner}")
        else:
            logger.info(f"Codebook '{name}' already exists for {owner}")
        return True

    # ── READ ──────────────────────────────────────────────

    def exists(self, codebook_id: int) -> bool:
        sql = "SELECT 1 FROM Codebook WHERE codebook_id = %s"
        return self._fetch_one(sql, (codebook_id,)) is not None

    def get_by_owner(self, owner: str) -> list[Codebook]:
        """
        Fetch every codebook of a user, newest first.

        Rows created within the same timestamp tick are ordered by id so
        the most recently inserted one still comes first.
        """
        sql = """
            SELECT codebook_id, codebook_name, username, created_time
            FROM Codebook
            WHERE username = %s
            ORDER BY created_time DESC, codebook_id DESC
        """
        return [self._row_to_codebook(r) for r in self._fetch_all(sql, (owner,))]

    # ── DELETE ────────────────────────────────────────────

    def delete_with_entries(self, codebook_id: int) -> bool:
        """
        Delete a codebook and all of its entries in one transaction.

        The codebook's existence is decided inside the transaction: when
        the codebook delete touches no row, everything is rolled back
        and False is returned.

        Raises:
            StoreError: If either statement or the commit fails. The
                transaction is rolled back first.
        """
        try:
            with closing(self.conn.cursor()) as cur:
                cur.execute(
                    self._sql("DELETE FROM PasswordEntry WHERE codebook_id = %s"),
                    (codebook_id,),
                )
                removed_entries = cur.rowcount
                cur.execute(
                    self._sql("DELETE FROM Codebook WHERE codebook_id = %s"),
                    (codebook_id,),
                )
                deleted = cur.rowcount > 0
            if not deleted:
                self.conn.rollback()
                return False
            self.conn.commit()
        except Exception as e:
            self._rollback()
            logger.error(f"Failed to delete codebook #{codebook_id}: {e}")
            raise StoreError(f"Delete codebook failed: {e}") from e

        logger.info(f"Deleted codebook #{codebook_id} and {removed_entries} entries")
        return True

    # ── HELPERS ───────────────────────────────────────────

    @staticmethod
    def _row_to_codebook(row: tuple) -> Codebook:
        return Codebook(
            id=row[0],
            name=row[1],
            owner=row[2],
            created_time=str(row[3]),
        )
