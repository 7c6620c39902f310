"""Password Hashing — salted PBKDF2-SHA256, encoded as a single string.

Invariants:
    - Encoded form is "pbkdf2_sha256$<iterations>$<salt_hex>$<hash_hex>"
    - verify_password never raises on malformed input; it returns False
    - Comparison is constant-time (hmac.compare_digest)
"""

import hashlib
import hmac
import secrets

ALGORITHM = "pbkdf2_sha256"
DEFAULT_ITERATIONS = 260_000
SALT_BYTES = 16


def _derive(password: str, salt: bytes, iterations: int) -> bytes:
    return hashlib.pbkdf2_hmac("sha256", password.encode("utf-8"), salt, iterations)


def hash_password(password: str, iterations: int = DEFAULT_ITERATIONS) -> str:
    """Hash a plaintext password with a fresh random salt."""
    salt = secrets.token_bytes(SALT_BYTES)
    digest = _derive(password, salt, iterations)
    return f"{ALGORITHM}${iterations}${salt.hex()}${digest.hex()}"


def verify_password(password: str, encoded: str) -> bool:
    """Check a plaintext password against an encoded hash."""
    try:
        algorithm, iterations, salt_hex, digest_hex = encoded.split("$")
        if algorithm != ALGORITHM:
            return False
        salt = bytes.fromhex(salt_hex)
        expected = bytes.fromhex(digest_hex)
        rounds = int(iterations)
    except (ValueError, AttributeError):
        return False
    return hmac.compare_digest(_derive(password, salt, rounds), expected)
