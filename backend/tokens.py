"""Share tokens, storage names and identity format checks."""

import hashlib
import re
import secrets
import string

TOKEN_ALPHABET = string.ascii_letters + string.digits
TOKEN_MIN_LENGTH = 6
TOKEN_MAX_LENGTH = 32
ISSUED_TOKEN_LENGTH = 12

_TOKEN_RE = re.compile(r"^[A-Za-z0-9]+$")
_UUID_RE = re.compile(
    r"^[a-fA-F0-9]{8}-[a-fA-F0-9]{4}-[a-fA-F0-9]{4}-[a-fA-F0-9]{4}-[a-fA-F0-9]{12}$"
)
_STORAGE_NAME_RE = re.compile(r"^[0-9a-f]{1,64}$")


def validate_token(
    token: str | None,
    min_len: int = TOKEN_MIN_LENGTH,
    max_len: int = TOKEN_MAX_LENGTH,
) -> bool:
    if not token or not min_len <= len(token) <= max_len:
        return False
    return _TOKEN_RE.fullmatch(token) is not None


def issue_token(length: int = ISSUED_TOKEN_LENGTH) -> str:
    return "".join(secrets.choice(TOKEN_ALPHABET) for _ in range(length))


def resolve_token(candidate: str | None) -> str:
    """Keep a caller-chosen token if it is well formed, otherwise mint one."""
    if validate_token(candidate):
        return candidate
    return issue_token()


def derive_storage_name(original_name: str) -> str:
    """Salted 128-bit digest of the filename, as lowercase hex.

    A fresh 64-bit salt is drawn on every call, so the same filename never
    maps to the same storage name twice.
    """
    salt = secrets.token_bytes(8)
    digest = hashlib.blake2b(original_name.encode("utf-8"), digest_size=16, key=salt)
    return digest.hexdigest()


def is_storage_name(value: str) -> bool:
    return _STORAGE_NAME_RE.fullmatch(value) is not None


def is_canonical_uuid(value: str) -> bool:
    return _UUID_RE.fullmatch(value) is not None
