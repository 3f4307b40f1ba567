"""Synchronous client for the travel planner HTTP API."""

import logging
from typing import Any

import httpx

from .decode import DecodedDestination, decode_destination, decode_destination_list
from .session import ApiSession

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "http://localhost:8000"


class ApiError(Exception):
    """Non-2xx response from the API."""

    def __init__(self, status_code: int, detail: Any) -> None:
        super().__init__(f"Request failed: {status_code} {detail}")
        self.status_code = status_code
        self.detail = detail


class TravelPlannerClient:
    """Calls the API with the token held by an explicit ``ApiSession``."""

    def __init__(
        self,
        session: ApiSession,
        base_url: str = DEFAULT_BASE_URL,
        http: httpx.Client | None = None,
    ) -> None:
        self.session = session
        self._http = http or httpx.Client(base_url=base_url, timeout=60.0)

    def close(self) -> None:
        self._http.close()

    def __enter__(self) -> "TravelPlannerClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def _request(self, method: str, path: str, **kwargs: Any) -> Any:
        headers = {**self.session.auth_headers(), **kwargs.pop("headers", {})}
        response = self._http.request(method, path, headers=headers, **kwargs)

        if response.status_code in (401, 403):
            # Stale or rejected credentials end the session
            logger.info("session_cleared", extra={"status_code": response.status_code})
            self.session.clear()

        if response.is_error:
            try:
                detail = response.json().get("detail", response.text)
            except ValueError:
                detail = response.text
            raise ApiError(response.status_code, detail)

        if response.status_code == 204 or not response.content:
            return None
        return response.json()

    # Auth
    def login(self, identifier: str, password: str) -> dict[str, Any]:
        data = self._request(
            "POST",
            "/api/auth/local",
            json={"identifier": identifier, "password": password},
        )
        self.session.set(data["jwt"], data.get("user"))
        return data["user"]

    def register(self, username: str, email: str, password: str) -> dict[str, Any]:
        data = self._request(
            "POST",
            "/api/auth/local/register",
            json={"username": username, "email": email, "password": password},
        )
        self.session.set(data["jwt"], data.get("user"))
        return data["user"]

    def logout(self) -> None:
        self.session.clear()

    def me(self) -> dict[str, Any]:
        user = self._request("GET", "/api/users/me")
        if self.session.token:
            self.session.user = user
        return user

    # Catalog
    def list_destinations(self, search: str | None = None) -> list[DecodedDestination]:
        params = {"search": search} if search else None
        return decode_destination_list(
            self._request("GET", "/api/destinations", params=params)
        )

    def get_destination(self, destination_id: int) -> DecodedDestination:
        return decode_destination(
            self._request("GET", f"/api/destinations/{destination_id}")
        )

    # Trips
    def plan_trip(self, **body: Any) -> dict[str, Any]:
        """POST /api/trips/plan; keyword names are the camelCase body keys."""
        return self._request("POST", "/api/trips/plan", json=body)

    def list_trips(self) -> list[dict[str, Any]]:
        return self._request("GET", "/api/trips")["data"]

    def delete_trip(self, trip_id: int) -> None:
        self._request("DELETE", f"/api/trips/{trip_id}")
