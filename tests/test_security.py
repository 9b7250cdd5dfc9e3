from __future__ import annotations

import pytest

from academy.core.exceptions import ValidationError
from academy.services.common.security import hash_password, verify_password


def test_hash_and_verify() -> None:
    hashed = hash_password("Student123!")

    assert hashed != "Student123!"
    assert verify_password("Student123!", hashed)
    assert not verify_password("student123!", hashed)


def test_long_passwords_are_not_truncated() -> None:
    base = "x" * 80
    hashed = hash_password(base + "a")

    assert verify_password(base + "a", hashed)
    assert not verify_password(base + "b", hashed)


def test_empty_password_is_rejected() -> None:
    with pytest.raises(ValidationError):
        hash_password("")


def test_verify_handles_missing_or_malformed_hash() -> None:
    assert verify_password("secret", "") is False
    assert verify_password("secret", "not-a-bcrypt-hash") is False
