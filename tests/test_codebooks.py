"""Tests for codebook operations of VaultStore."""

import logging

import pytest

from services.vault_service import VaultStore
from tests.helpers import CIPHERTEXT, PUBLIC_KEY, count_rows
from utils.errors import InvalidArgumentError, StoreError


def test_store_requires_a_connection():
    with pytest.raises(InvalidArgumentError):
        VaultStore(None)


class TestCreateCodebook:
    def test_creates_row(self, store, conn):
        assert store.create_codebook("alice", "Work") is True
        row = conn.execute("SELECT username, codebook_name FROM Codebook").fetchone()
        assert row == ("alice", "Work")

    def test_duplicate_is_silent_noop(self, store, conn):
        assert store.create_codebook("alice", "Work") is True
        assert store.create_codebook("alice", "Work") is True
        assert count_rows(conn, "Codebook") == 1

    def test_same_name_for_different_owners(self, store, conn):
        store.create_codebook("alice", "Work")
        store.create_codebook("bob", "Work")
        assert count_rows(conn, "Codebook") == 2

    @pytest.mark.parametrize("name", ["", "x" * 101, "work!"])
    def test_invalid_name_raises_without_writing(self, store, conn, name):
        with pytest.raises(InvalidArgumentError):
            store.create_codebook("alice", name)
        assert count_rows(conn, "Codebook") == 0


class TestGetUserCodebooks:
    def test_newest_first(self, store, conn):
        conn.executemany(
            "INSERT INTO Codebook (username, codebook_name, created_time) VALUES (?, ?, ?)",
            [
                ("alice", "Middle", "2024-05-02 10:00:00"),
                ("alice", "Newest", "2024-05-03 10:00:00"),
                ("alice", "Oldest", "2024-05-01 10:00:00"),
                ("bob", "Other", "2024-05-04 10:00:00"),
            ],
        )
        conn.commit()

        books = store.get_user_codebooks("alice")

        assert [b.name for b in books] == ["Newest", "Middle", "Oldest"]
        assert all(b.owner == "alice" for b in books)
        assert books[0].created_time == "2024-05-03 10:00:00"

    def test_same_timestamp_falls_back_to_insert_order(self, store):
        for name in ("First", "Second", "Third"):
            store.create_codebook("alice", name)
        assert [b.name for b in store.get_user_codebooks("alice")] == [
            "Third",
            "Second",
            "First",
        ]

    def test_owner_without_codebooks(self, store):
        assert store.get_user_codebooks("nobody") == []

    def test_empty_owner(self, store):
        store.create_codebook("alice", "Work")
        assert store.get_user_codebooks("") == []


class TestDeleteCodebook:
    def test_missing_codebook_returns_false(self, store, conn, codebook_id):
        store.add_entry(codebook_id, "example.com", PUBLIC_KEY, CIPHERTEXT, "")

        assert store.delete_codebook(codebook_id + 100) is False
        assert count_rows(conn, "Codebook") == 1
        assert count_rows(conn, "PasswordEntry") == 1

    def test_removes_codebook_and_its_entries(self, store, conn, codebook_id):
        store.create_codebook("alice", "Keep")
        keep_id = conn.execute(
            "SELECT codebook_id FROM Codebook WHERE codebook_name = 'Keep'"
        ).fetchone()[0]
        store.add_entry(codebook_id, "a.example.com", PUBLIC_KEY, CIPHERTEXT, "")
        store.add_entry(codebook_id, "b.example.com", PUBLIC_KEY, CIPHERTEXT, "")
        store.add_entry(keep_id, "c.example.com", PUBLIC_KEY, CIPHERTEXT, "")

        assert store.delete_codebook(codebook_id) is True

        assert store.codebook_exists(codebook_id) is False
        assert store.codebook_exists(keep_id) is True
        remaining = conn.execute("SELECT address FROM PasswordEntry").fetchall()
        assert remaining == [("c.example.com",)]

    def test_failure_midway_rolls_back_everything(self, store, conn, codebook_id):
        store.add_entry(codebook_id, "a.example.com", PUBLIC_KEY, CIPHERTEXT, "")
        store.add_entry(codebook_id, "b.example.com", PUBLIC_KEY, CIPHERTEXT, "")
        # Entries are deleted first, then this trigger aborts the codebook delete
        conn.execute(
            """
            CREATE TRIGGER block_codebook_delete BEFORE DELETE ON Codebook
            BEGIN
                SELECT RAISE(ABORT, 'simulated backend failure');
            END
            """
        )

        with pytest.raises(StoreError, match="simulated backend failure") as exc_info:
            store.delete_codebook(codebook_id)

        assert isinstance(exc_info.value, RuntimeError)
        assert exc_info.value.__cause__ is not None
        assert count_rows(conn, "Codebook") == 1
        assert count_rows(conn, "PasswordEntry") == 2

    def test_failure_is_logged(self, store, conn, codebook_id, caplog):
        conn.execute(
            """
            CREATE TRIGGER block_codebook_delete BEFORE DELETE ON Codebook
            BEGIN
                SELECT RAISE(ABORT, 'simulated backend failure');
            END
            """
        )

        with caplog.at_level(logging.ERROR):
            with pytest.raises(StoreError):
                store.delete_codebook(codebook_id)

        assert any(
            "Failed to delete codebook" in record.getMessage() for record in caplog.records
        )
