"""
repositories/entry_repo.py
--------------------------
Data access layer for password entries.
All SQL queries related to the `PasswordEntry` table live here.
"""

from models.entry import PasswordEntry
from repositories.base import BaseRepository
from utils.logger import get_logger

logger = get_logger(__name__)


class EntryRepository(BaseRepository):
    """Repository for CRUD operations on the PasswordEntry table."""

    # ── CREATE ────────────────────────────────────────────

    def add(
        self,
        codebook_id: int,
        address: str,
        public_key: str,
        encrypted_password: str,
        notes: str,
    ) -> bool:
        """
        Insert an entry into an existing codebook.

        The row is selected from Codebook, so a missing codebook yields
        zero inserted rows instead of a foreign-key error.

        Returns:
            True if a row was inserted, False if the codebook does not exist.
        """
        sql = """
            INSERT INTO PasswordEntry
                (codebook_id, address, public_key, encrypted_password, notes)
            SELECT codebook_id, %s, %s, %s, %s
            FROM Codebook
            WHERE codebook_id = %s
        """
        added = self._execute(
            sql,
            (address, public_key, encrypted_password, notes, codebook_id),
            "Add entry",
        )
        if added > 0:
            logger.info(f"Added entry for {address} to codebook #{codebook_id}")
            return True
        logger.info(f"Codebook #{codebook_id} not found, entry for {address} not added")
        return False

    # ── READ ──────────────────────────────────────────────

    def get_page(
        self, codebook_id: int, address_filter: str, limit: int, offset: int
    ) -> list[PasswordEntry]:
        """
        Fetch entries whose address contains `address_filter`, newest first.

        Args:
            codebook_id: Codebook to list.
            address_filter: Substring to look for; empty matches everything.
            limit: Maximum rows to return.
            offset: Rows to skip.
        """
        sql = """
            SELECT entry_id, codebook_id, address, public_key,
                   encrypted_password, notes, created_time
            FROM PasswordEntry
            WHERE codebook_id = %s
              AND address LIKE %s
            ORDER BY created_time DESC, entry_id DESC
            LIMIT %s OFFSET %s
        """
        rows = self._fetch_all(
            sql, (codebook_id, self._like_pattern(address_filter), limit, offset)
        )
        return [self._row_to_entry(r) for r in rows]

    def count(self, codebook_id: int, address_filter: str) -> int:
        """Count entries matching the same filter as `get_page`."""
        sql = """
            SELECT COUNT(*)
            FROM PasswordEntry
            WHERE codebook_id = %s
              AND address LIKE %s
        """
        row = self._fetch_one(sql, (codebook_id, self._like_pattern(address_filter)))
        return int(row[0]) if row else 0

    # ── UPDATE ────────────────────────────────────────────

    def update(
        self,
        entry_id: int,
        address: str,
        public_key: str,
        encrypted_password: str,
        notes: str,
    ) -> bool:
        """
        Replace every mutable field of an entry.

        Returns:
            True if a row was changed, False if no entry has `entry_id`.
        """
        sql = """
            UPDATE PasswordEntry SET
                address = %s,
                public_key = %s,
                encrypted_password = %s,
                notes = %s
            WHERE entry_id = %s
        """
        changed = self._execute(
            sql,
            (address, public_key, encrypted_password, notes, entry_id),
            "Update entry",
        )
        if changed > 0:
            logger.info(f"Updated entry #{entry_id}")
            return True
        return False

    # ── HELPERS ───────────────────────────────────────────

    @staticmethod
    def _like_pattern(address_filter: str) -> str:
        # LIKE wildcards typed by the caller are passed through unescaped
        return f"%{address_filter}%"

    @staticmethod
    def _row_to_entry(row: tuple) -> PasswordEntry:
        return PasswordEntry(
            id=row[0],
            codebook_id=row[1],
            address=row[2],
            public_key=row[3],
            encrypted_password=row[4],
            notes=row[5] if row[5] is not None else "",
            created_time=str(row[6]),
        )
