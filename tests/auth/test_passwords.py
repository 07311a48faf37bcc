"""Tests for kudos/auth/passwords.py - credential hashing."""

import hashlib

from hypothesis import assume, given
from hypothesis import settings as hypothesis_settings
from hypothesis import strategies as st

from kudos.auth.passwords import hash_password, verify_password


def test_hash_password_is_hex_sha256():
    """Test hash_password() returns the lowercase hex SHA-256 digest."""
    assert hash_password("Secret1!") == hashlib.sha256(b"Secret1!").hexdigest()
    assert len(hash_password("Secret1!")) == 64


def test_hash_password_is_deterministic():
    """Test the same password always hashes to the same value."""
    assert hash_password("Secret1!") == hash_password("Secret1!")
    assert hash_password("Secret1!") != hash_password("Secret2!")


def test_verify_password_rejects_wrong_password():
    """Test verify_password() returns False for a different password."""
    stored = hash_password("Secret1!")
    assert verify_password("Secret1?", stored) is False
    assert verify_password("", stored) is False


@hypothesis_settings(max_examples=50)
@given(password=st.text(min_size=1, max_size=64))
def test_verify_password_accepts_own_hash(password):
    """Any password verifies against its own hash, including non-ASCII text."""
    assert verify_password(password, hash_password(password)) is True


@hypothesis_settings(max_examples=50)
@given(
    password=st.text(min_size=1, max_size=64),
    other=st.text(min_size=1, max_size=64),
)
def test_verify_password_rejects_other_passwords(password, other):
    """A stored hash never verifies a different password."""
    assume(password != other)
    assert verify_password(other, hash_password(password)) is False
