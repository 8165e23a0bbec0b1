"""
Password hashing utilities.

Passwords are hashed with bcrypt (salted, one-way). Login is a stateless
credential check, no tokens are issued.
"""

from typing import Optional
from passlib.context import CryptContext

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")

MIN_PASSWORD_LENGTH = 6
BCRYPT_MAX_BYTES = 72


def _bcrypt_input(password: str) -> bytes:
    # bcrypt only looks at the first 72 bytes; newer backends raise instead of truncating
    return password.encode("utf-8")[:BCRYPT_MAX_BYTES]


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Check a login attempt against the stored hash."""
    try:
        return pwd_context.verify(_bcrypt_input(plain_password), hashed_password)
    except ValueError:
        # Stored value is not a recognizable hash
        return False


def get_password_hash(password: str) -> str:
    return pwd_context.hash(_bcrypt_input(password))


def prepare_password_for_write(password: str, current_hash: Optional[str] = None) -> str:
    """
    Transform a password value for persistence.

    Called by the repository layer whenever a write includes the password
    field. Re-submitting the stored hash unchanged keeps it as is; any other
    value is hashed with a fresh salt.
    """
    if current_hash is not None and password == current_hash:
        return current_hash
    return get_password_hash(password)
