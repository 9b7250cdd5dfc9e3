"""
Password hashing with bcrypt.
"""
from __future__ import annotations

import hashlib

from passlib.context import CryptContext

from academy.config.settings import settings
from academy.core.exceptions import ValidationError

_pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
    bcrypt__rounds=settings.PASSWORD_BCRYPT_ROUNDS,
)


def _prepare_password_for_bcrypt(password: str) -> str:
    """
    Handle bcrypt's 72-byte input limit.

    Longer passwords are replaced by their SHA-256 hex digest.
    """
    if len(password.encode('utf-8')) > 71:
        return hashlib.sha256(password.encode('utf-8')).hexdigest()
    return password


def hash_password(password: str) -> str:
    """
    Hash a plaintext password using bcrypt.

    Raises:
        ValidationError: If password is empty
    """
    if not password:
        raise ValidationError("Password cannot be empty", field="password")
    return _pwd_context.hash(_prepare_password_for_bcrypt(password))


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a plaintext password against a stored hash."""
    if not plain_password or not hashed_password:
        return False
    try:
        return _pwd_context.verify(_prepare_password_for_bcrypt(plain_password), hashed_password)
    except ValueError:
        # malformed hash
        return False
