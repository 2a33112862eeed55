"""
models/codebook.py
------------------
Domain model for a codebook: a named, per-user group of password entries.
"""

from dataclasses import dataclass


@dataclass
class Codebook:
    """
    Represents one codebook row.

    Attributes:
        id: Database primary key (codebook_id).
        name: Display name, unique per owner.
        owner: Username that owns the codebook.
        created_time: Timestamp set by the database on insert.
    """
    id: int
    name: str
    owner: str
    created_time: str

    def __str__(self) -> str:
        return f"#{self.id} {self.name} ({self.owner}, {self.created_time})"
