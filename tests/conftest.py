"""
Shared pytest fixtures for the vault store tests.

Every test gets a fresh in-memory SQLite database carrying the vault
schema, and a `VaultStore` bound to it.
"""

import pytest

from db.connection import open_sqlite
from services.vault_service import VaultStore

SCHEMA_SQL = """
CREATE TABLE Codebook (
    codebook_id     INTEGER PRIMARY KEY AUTOINCREMENT,
    username        TEXT NOT NULL,
    codebook_name   TEXT NOT NULL,
    created_time    TEXT NOT NULL DEFAULT CURRENT_TIMESTAMP,
    UNIQUE(username, codebook_name)
);

CREATE TABLE PasswordEntry (
    entry_id            INTEGER PRIMARY KEY AUTOINCREMENT,
    codebook_id         INTEGER NOT NULL REFERENCES Codebook(codebook_id),
    address             TEXT NOT NULL,
    public_key          TEXT NOT NULL,
    encrypted_password  TEXT NOT NULL,
    notes               TEXT,
    created_time        TEXT NOT NULL DEFAULT CURRENT_TIMESTAMP
);
"""


@pytest.fixture
def conn():
    connection = open_sqlite(":memory:")
    connection.executescript(SCHEMA_SQL)
    yield connection
    connection.close()


@pytest.fixture
def store(conn):
    return VaultStore(conn)


@pytest.fixture
def codebook_id(store, conn):
    """Id of a freshly created codebook 'Personal' owned by alice."""
    store.create_codebook("alice", "Personal")
    return conn.execute(
        "SELECT codebook_id FROM Codebook WHERE username = ? AND codebook_name = ?",
        ("alice", "Personal"),
    ).fetchone()[0]
