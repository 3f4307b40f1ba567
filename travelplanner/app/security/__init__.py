"""Security utilities for authentication and authorization."""

from .jwt import (
    create_access_token,
    verify_access_token,
    TokenPayload,
    AuthenticationError,
)
from .middleware import SecurityHeadersMiddleware
from .ownership import is_owner
from .passwords import hash_password, verify_password

__all__ = [
    "create_access_token",
    "verify_access_token",
    "TokenPayload",
    "AuthenticationError",
    "hash_password",
    "verify_password",
    "is_owner",
    "SecurityHeadersMiddleware",
]
