"""
utils/validators.py
-------------------
Input validation for codebook names, entry fields and paging arguments.

The ``validate_*`` predicates return a bool. The ``require_*`` helpers
raise ``InvalidArgumentError`` and are what the service layer calls
before touching the database.
"""

import re

from utils.errors import InvalidArgumentError

MAX_CODEBOOK_NAME_LENGTH = 100
MAX_ADDRESS_LENGTH = 253
MAX_PUBLIC_KEY_LENGTH = 4096
MAX_ENCRYPTED_PASSWORD_LENGTH = 512

# ASCII letters and digits, space, hyphen, underscore
_CODEBOOK_NAME_RE = re.compile(r"^[A-Za-z0-9 _-]+$")


def validate_codebook_name(name: str) -> bool:
    """
    Check a codebook name: 1-100 chars of letters, digits, space, '-' or '_'.

    Returns:
        True if the name is acceptable.
    """
    if not isinstance(name, str) or not name:
        return False
    if len(name) > MAX_CODEBOOK_NAME_LENGTH:
        return False
    return bool(_CODEBOOK_NAME_RE.fullmatch(name))


def _require_length(field: str, value: str, max_length: int) -> None:
    if not isinstance(value, str) or not value or len(value) > max_length:
        raise InvalidArgumentError(f"{field} must be 1-{max_length} characters")


def require_codebook_name(name: str) -> None:
    if not validate_codebook_name(name):
        raise InvalidArgumentError("Codebook name is invalid")


def require_entry_fields(address: str, public_key: str, encrypted_password: str) -> None:
    """
    Validate the bounded fields of a password entry.

    Notes are free text and are not checked here.

    Raises:
        InvalidArgumentError: On the first field out of bounds.
    """
    _require_length("Address", address, MAX_ADDRESS_LENGTH)
    _require_length("Public key", public_key, MAX_PUBLIC_KEY_LENGTH)
    _require_length("Encrypted password", encrypted_password, MAX_ENCRYPTED_PASSWORD_LENGTH)


def require_page(page: int, page_size: int) -> None:
    """Reject a negative page index or a page size below one."""
    if page < 0:
        raise InvalidArgumentError("Page must be zero or greater")
    if page_size < 1:
        raise InvalidArgumentError("Page size must be at least 1")
