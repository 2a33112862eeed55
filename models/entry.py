"""
models/entry.py
---------------
Domain model for a stored credential.

The password is held only in its encrypted form; encryption and key
handling happen outside this package.
"""

from dataclasses import dataclass, field


@dataclass
class PasswordEntry:
    """
    Represents one password entry row.

    Attributes:
        id: Database primary key (entry_id).
        codebook_id: Owning codebook.
        address: Hostname or service identifier.
        public_key: Public key the password was encrypted for.
        encrypted_password: Opaque ciphertext.
        notes: Free-text notes.
        created_time: Timestamp set by the database on insert.
    """
    id: int
    codebook_id: int
    address: str
    public_key: str = field(repr=False)
    encrypted_password: str = field(repr=False)
    notes: str = ""
    created_time: str = ""

    def __str__(self) -> str:
        return f"#{self.id} {self.address} ({self.created_time})"
