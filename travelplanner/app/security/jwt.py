"""JWT token creation and verification."""

import jwt
from datetime import datetime, timedelta, timezone
from typing import Literal

from pydantic import BaseModel

from travelplanner.app.config import get_settings


class TokenPayload(BaseModel):
    """JWT token payload."""
    user_id: int
    token_type: Literal["access"]
    issued_at: datetime
    expires_at: datetime


class AuthenticationError(Exception):
    """Authentication-related errors."""
    pass


def get_jwt_private_key() -> str:
    """Get JWT private key from settings."""
    settings = get_settings()
    key = settings.jwt_private_key_pem.strip()

    if key.startswith("dummy-"):
        raise AuthenticationError(
            "JWT private key not configured. Set JWT_PRIVATE_KEY_PEM in environment."
        )

    return key


def get_jwt_public_key() -> str:
    """Get JWT public key from settings."""
    settings = get_settings()
    key = settings.jwt_public_key_pem.strip()

    if key.startswith("dummy-"):
        raise AuthenticationError(
            "JWT public key not configured. Set JWT_PUBLIC_KEY_PEM in environment."
        )

    return key


def create_access_token(user_id: int) -> str:
    """Create a signed RS256 access token for a user.

    Args:
        user_id: Primary key of the authenticated user

    Returns:
        Encoded JWT token string

    Raises:
        AuthenticationError: If JWT keys not configured
    """
    settings = get_settings()
    now = datetime.now(timezone.utc)
    expires = now + timedelta(minutes=settings.jwt_access_ttl_minutes)

    payload = {
        "sub": str(user_id),
        "iat": now,
        "exp": expires,
        "type": "access",
    }

    return jwt.encode(payload, get_jwt_private_key(), algorithm="RS256")


def verify_access_token(token: str) -> TokenPayload:
    """Verify and decode JWT access token.

    Args:
        token: JWT token string

    Returns:
        TokenPayload with the user id

    Raises:
        AuthenticationError: If token is invalid, expired, or wrong type
    """
    try:
        payload = jwt.decode(token, get_jwt_public_key(), algorithms=["RS256"])

        if payload.get("type") != "access":
            raise AuthenticationError("Invalid token type")

        return TokenPayload(
            user_id=int(payload["sub"]),
            token_type=payload["type"],
            issued_at=datetime.fromtimestamp(payload["iat"], tz=timezone.utc),
            expires_at=datetime.fromtimestamp(payload["exp"], tz=timezone.utc),
        )

    except jwt.ExpiredSignatureError:
        raise AuthenticationError("Token has expired")
    except jwt.InvalidTokenError as e:
        raise AuthenticationError(f"Invalid token: {e}")
    except (KeyError, ValueError) as e:
        raise AuthenticationError(f"Malformed token payload: {e}")
