"""
utils/errors.py
---------------
Exception hierarchy for the vault store.

Validation problems and backend problems are kept apart so callers can
tell "you sent bad input" from "the database failed". Both stay
compatible with the built-in ``ValueError`` / ``RuntimeError`` so code
that only knows the standard exceptions still catches them.
"""


class VaultError(Exception):
    """Base class for every error raised by the vault store."""


class InvalidArgumentError(VaultError, ValueError):
    """Raised when input fails validation. Nothing is written."""


class StoreError(VaultError, RuntimeError):
    """Raised when a backend statement fails.

    Wraps the driver exception (available as ``__cause__``) and carries
    its diagnostic message.
    """
