"""JWT token utilities."""

from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional
from uuid import UUID

from jose import JWTError, jwt

from ..config import Settings
from ..core.exceptions import InvalidTokenError

ACCESS_TOKEN_TYPE = "access"


def create_access_token(
    user_id: UUID,
    settings: Settings,
    issued_at: Optional[datetime] = None,
) -> str:
    """Sign a bearer token for user_id, valid for access_token_expire_minutes."""
    issued_at = issued_at or datetime.now(timezone.utc)
    expire = issued_at + timedelta(minutes=settings.access_token_expire_minutes)

    to_encode = {
        "sub": str(user_id),
        "type": ACCESS_TOKEN_TYPE,
        "iat": issued_at,
        "exp": expire,
    }
    return jwt.encode(to_encode, settings.secret_key, algorithm=settings.algorithm)


def decode_access_token(token: str, settings: Settings) -> Dict[str, Any]:
    """Decode and validate an access token.

    Raises InvalidTokenError for a bad signature, a malformed or expired token,
    or a token of another type.
    """
    try:
        payload = jwt.decode(token, settings.secret_key, algorithms=[settings.algorithm])
    except JWTError as exc:
        raise InvalidTokenError() from exc

    if payload.get("type") != ACCESS_TOKEN_TYPE:
        raise InvalidTokenError()

    return payload


def get_user_id_from_token(token: str, settings: Settings) -> UUID:
    """Extract the user ID carried by a valid access token."""
    payload = decode_access_token(token, settings)

    user_id = payload.get("sub")
    if not user_id:
        raise InvalidTokenError()

    try:
        return UUID(user_id)
    except (TypeError, ValueError) as exc:
        raise InvalidTokenError() from exc
