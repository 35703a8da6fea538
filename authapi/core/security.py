"""Password salting, hashing and verification."""

import bcrypt

from authapi.core.config import settings

# bcrypt only reads the first 72 bytes of the secret.
BCRYPT_MAX_BYTES = 72


def _secret_bytes(plain_password: str) -> bytes:
    return plain_password.encode("utf-8")[:BCRYPT_MAX_BYTES]


def generate_salt(rounds: int | None = None) -> str:
    """Return a fresh bcrypt salt (cost from BCRYPT_ROUNDS unless given)."""
    cost = settings.BCRYPT_ROUNDS if rounds is None else rounds
    return bcrypt.gensalt(rounds=cost).decode("utf-8")


def hash_password(plain_password: str, salt: str) -> str:
    """Hash a plain-text password with the given salt. Do not store plain passwords."""
    return bcrypt.hashpw(_secret_bytes(plain_password), salt.encode("utf-8")).decode("utf-8")


def verify_password(plain_password: str, hashed: str) -> bool:
    """Verify a plain password against a stored hash."""
    try:
        return bcrypt.checkpw(_secret_bytes(plain_password), hashed.encode("utf-8"))
    except (ValueError, TypeError):
        return False
