"""Unit tests for health check endpoint."""

import asyncio
from unittest.mock import MagicMock, patch

from sqlalchemy.exc import OperationalError

from travelplanner.app.api.health import get_health


def _mock_factory(execute: MagicMock) -> MagicMock:
    mock_session = MagicMock()
    mock_session.__enter__ = MagicMock(return_value=mock_session)
    mock_session.__exit__ = MagicMock(return_value=None)
    mock_session.execute = execute
    return MagicMock(return_value=mock_session)


def test_healthz_ok_when_db_ok() -> None:
    """Test health check returns ok when the database answers."""
    factory = _mock_factory(MagicMock())

    with patch("travelplanner.app.api.health.get_session_factory", return_value=factory):
        result = asyncio.run(get_health())

    assert result.status == "ok"
    assert result.checks["db"] == "ok"


def test_healthz_down_when_db_fails() -> None:
    """Test health check returns down when the database query fails."""
    error = OperationalError("SELECT 1", {}, Exception("DB connection failed"))
    factory = _mock_factory(MagicMock(side_effect=error))

    with patch("travelplanner.app.api.health.get_session_factory", return_value=factory):
        result = asyncio.run(get_health())

    assert result.status == "down"
    assert result.checks["db"] == "down"
