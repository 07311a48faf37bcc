"""Password hashing.

Digests are unsalted SHA-256 hex strings so they stay comparable with the
hashes already stored in the users table. Hashing is deterministic: the
same plaintext always yields the same digest.
"""

import hashlib
import hmac


def hash_password(password: str) -> str:
    return hashlib.sha256(password.encode("utf-8")).hexdigest()


def verify_password(password: str, password_hash: str) -> bool:
    """Check a plaintext password against a stored digest."""
    return hmac.compare_digest(
        hash_password(password).encode("ascii"), password_hash.encode("utf-8")
    )
