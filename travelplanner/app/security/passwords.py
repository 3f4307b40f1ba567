"""Password hashing and verification using Argon2id."""

from argon2 import PasswordHasher
from argon2.exceptions import InvalidHashError, VerificationError, VerifyMismatchError

from travelplanner.app.config import get_settings


def get_password_hasher() -> PasswordHasher:
    """Get configured Argon2id password hasher.

    Returns:
        Configured PasswordHasher instance
    """
    return PasswordHasher(
        time_cost=3,        # 3 iterations
        memory_cost=65536,  # 64 MB
        parallelism=1,
        hash_len=32,
        salt_len=16,
        encoding="utf-8",
    )


def hash_password(password: str) -> str:
    """Hash password using Argon2id.

    Args:
        password: Plain text password

    Returns:
        Argon2id hash string

    Raises:
        ValueError: If password is too short or too long
    """
    settings = get_settings()

    if len(password) < settings.password_min_length:
        raise ValueError(
            f"Password must be at least {settings.password_min_length} characters"
        )

    if len(password) > 128:
        raise ValueError("Password must be 128 characters or less")

    return get_password_hasher().hash(password)


def verify_password(password: str, hash_string: str) -> bool:
    """Verify password against Argon2id hash.

    Args:
        password: Plain text password to verify
        hash_string: Stored Argon2id hash

    Returns:
        True if password matches hash, False otherwise
    """
    try:
        return get_password_hasher().verify(hash_string, password)
    except VerifyMismatchError:
        return False
    except (VerificationError, InvalidHashError):
        # Malformed or foreign hash
        return False
