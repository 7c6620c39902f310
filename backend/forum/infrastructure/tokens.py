"""JWT Access Tokens — signing and verification via python-jose.

Invariants:
    - "sub" carries the user id as a string; "exp" and "jti" are always set
    - decode_access_token raises ValueError for any invalid, tampered, or expired token
"""

import uuid
from datetime import datetime, timedelta, timezone
from typing import Any

from jose import JWTError, jwt

from forum.config import get_settings


def create_access_token(
    data: dict[str, Any], expires_minutes: int | None = None,
) -> str:
    """Create a signed JWT access token with expiration and JTI."""
    settings = get_settings()
    to_encode = data.copy()
    expire = datetime.now(timezone.utc) + timedelta(
        minutes=expires_minutes or settings.access_token_expire_minutes,
    )
    to_encode.update({"exp": expire, "jti": str(uuid.uuid4())})
    return jwt.encode(
        to_encode, settings.jwt_secret_key, algorithm=settings.jwt_algorithm,
    )


def create_user_token(user_id: int) -> str:
    return create_access_token({"sub": str(user_id)})


def decode_access_token(token: str) -> dict[str, Any]:
    """Decode and validate a JWT access token.

    Raises:
        ValueError: If the signature, expiry, or format check fails.
    """
    settings = get_settings()
    try:
        return jwt.decode(
            token, settings.jwt_secret_key, algorithms=[settings.jwt_algorithm],
        )
    except JWTError as exc:
        raise ValueError("Invalid token") from exc


def user_id_from_token(token: str) -> int:
    """Extract the user id from a token's subject claim."""
    payload = decode_access_token(token)
    subject = payload.get("sub")
    if subject is None:
        raise ValueError("Token has no subject")
    try:
        return int(subject)
    except (TypeError, ValueError) as exc:
        raise ValueError("Token subject is not a user id") from exc
