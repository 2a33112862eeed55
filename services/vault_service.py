"""
services/vault_service.py
-------------------------
Public entry point of the password vault data-access layer.

`VaultStore` validates input, then delegates to the codebook and entry
repositories. Passwords are stored exactly as received: callers pass
ciphertext produced by their own key-management component.

All calls block on the shared connection. The store does no locking,
so a connection used from several threads must be serialised by the
caller. The connection must not be in autocommit mode, otherwise the
two statements of `delete_codebook` commit separately.
"""

from config import DEFAULT_PAGE_SIZE
from models.codebook import Codebook
from models.entry import PasswordEntry
from repositories.codebook_repo import CodebookRepository
from repositories.entry_repo import EntryRepository
from utils.errors import InvalidArgumentError
from utils.logger import get_logger
from utils.validators import require_codebook_name, require_entry_fields, require_page

logger = get_logger(__name__)


class VaultStore:
    """Codebook and password-entry operations over one database connection."""

    def __init__(self, conn, paramstyle: str | None = None):
        """
        Args:
            conn: Open DB-API 2 connection. The store keeps a reference
                but never closes it.
            paramstyle: Driver placeholder style. Detected from the
                connection's driver module when omitted.

        Raises:
            InvalidArgumentError: If `conn` is None.
        """
        if conn is None:
            raise InvalidArgumentError("Invalid database connection")
        self.codebook_repo = CodebookRepository(conn, paramstyle)
        self.entry_repo = EntryRepository(conn, paramstyle)

    # ── Codebooks ─────────────────────────────────────────

    def create_codebook(self, owner: str, name: str) -> bool:
        """
        Create a codebook for `owner`. Creating an existing one is a no-op.

        Raises:
            InvalidArgumentError: If `name` is empty, longer than 100
                characters, or contains characters other than letters,
                digits, space, '-' and '_'.
            StoreError: On backend failure.
        """
        require_codebook_name(name)
        return self.codebook_repo.create(owner, name)

    def delete_codebook(self, codebook_id: int) -> bool:
        """
        Delete a codebook together with all of its entries.

        Returns:
            False if the codebook does not exist; nothing is changed.
        """
        deleted = self.codebook_repo.delete_with_entries(codebook_id)
        if not deleted:
            logger.info(f"Codebook #{codebook_id} not found, nothing deleted")
        return deleted

    def get_user_codebooks(self, owner: str) -> list[Codebook]:
        """List `owner`'s codebooks, newest first."""
        if not owner:
            return []
        return self.codebook_repo.get_by_owner(owner)

    def codebook_exists(self, codebook_id: int) -> bool:
        return self.codebook_repo.exists(codebook_id)

    # ── Entries ───────────────────────────────────────────

    def add_entry(
        self,
        codebook_id: int,
        address: str,
        public_key: str,
        encrypted_password: str,
        notes: str = "",
    ) -> bool:
        """
        Store an encrypted credential in a codebook.

        Returns:
            False if the codebook does not exist; no row is inserted.

        Raises:
            InvalidArgumentError: If address, public key or encrypted
                password is empty or too long.
            StoreError: On backend failure.
        """
        require_entry_fields(address, public_key, encrypted_password)
        return self.entry_repo.add(
            codebook_id, address, public_key, encrypted_password, notes or ""
        )

    def get_entries(
        self,
        codebook_id: int,
        filter: str = "",
        page: int = 0,
        page_size: int = DEFAULT_PAGE_SIZE,
    ) -> list[PasswordEntry]:
        """
        List one page of a codebook's entries, newest first.

        Args:
            codebook_id: Codebook to list.
            filter: Substring the address must contain. Empty matches all.
                Case sensitivity follows the backend's LIKE.
            page: Zero-based page index.
            page_size: Entries per page. No upper bound.

        Raises:
            InvalidArgumentError: If `page` is negative or `page_size` < 1.
        """
        require_page(page, page_size)
        return self.entry_repo.get_page(
            codebook_id, filter or "", page_size, page * page_size
        )

    def count_entries(self, codebook_id: int, filter: str = "") -> int:
        """Number of entries `get_entries` would page through for `filter`."""
        return self.entry_repo.count(codebook_id, filter or "")

    def update_entry(
        self,
        entry_id: int,
        address: str,
        public_key: str,
        encrypted_password: str,
        notes: str = "",
    ) -> bool:
        """
        Replace address, public key, encrypted password and notes of an entry.

        Returns:
            True only if an entry was actually changed; an unknown
            `entry_id` gives False.

        Raises:
            InvalidArgumentError: If a bounded field is empty or too long.
                Nothing is written.
            StoreError: On backend failure.
        """
        require_entry_fields(address, public_key, encrypted_password)
        return self.entry_repo.update(
            entry_id, address, public_key, encrypted_password, notes or ""
        )
