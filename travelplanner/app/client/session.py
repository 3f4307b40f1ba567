"""Explicit client session state."""

from typing import Any


class ApiSession:
    """Holds the bearer token and user for one client.

    Set on login, cleared on logout or when the server answers 401/403.
    """

    def __init__(self) -> None:
        self.token: str | None = None
        self.user: dict[str, Any] | None = None

    @property
    def is_authenticated(self) -> bool:
        return self.token is not None

    def set(self, token: str, user: dict[str, Any] | None) -> None:
        self.token = token
        self.user = user

    def clear(self) -> None:
        self.token = None
        self.user = None

    def auth_headers(self) -> dict[str, str]:
        """Authorization header for the current token, if any."""
        if not self.token:
            return {}
        return {"Authorization": f"Bearer {self.token}"}
