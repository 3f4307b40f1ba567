"""Failure kinds raised by the planning pipeline."""


class PlanningError(Exception):
    """Base exception for plan request failures.

    Every failure is terminal for the request; ``status_code`` is the HTTP
    status the API layer reports.
    """

    status_code: int = 500
    kind: str = "internal"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class PlanValidationError(PlanningError):
    """Required request fields missing or invalid."""

    status_code = 400
    kind = "validation"


class PlanAuthorizationError(PlanningError):
    """Saving requested without an authenticated caller."""

    status_code = 401
    kind = "authorization"


class DestinationNotFoundError(PlanningError):
    """destinationId does not resolve to a stored destination."""

    status_code = 404
    kind = "not_found"


class ConfigurationError(PlanningError):
    """Completion provider credential missing."""

    status_code = 500
    kind = "configuration"


class GenerationError(PlanningError):
    """Provider answered without usable content."""

    status_code = 500
    kind = "generation"


class ParseError(PlanningError):
    """Provider content could not be coerced into a JSON object."""

    status_code = 500
    kind = "parse"


class ProviderUnavailableError(PlanningError):
    """The completion provider could not be reached or rejected the call."""

    status_code = 502
    kind = "provider"
