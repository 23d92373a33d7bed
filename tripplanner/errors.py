# tripplanner/errors.py
"""
Error kinds raised by the provider clients and the aggregate search.

Each error carries the HTTP status the relay answers with, so FastAPI can
turn any of them into a `{"message": ...}` body without a lookup table.
"""


class TripPlannerError(Exception):
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFound(TripPlannerError):
    """Provider reports no match for the destination."""

    status_code = 404


class Unauthorized(TripPlannerError):
    """Provider rejected the configured credential."""

    status_code = 401


class TransportFailure(TripPlannerError):
    """Network error, timeout, non-JSON body or an unexpected provider status."""

    status_code = 502


class Misconfigured(TripPlannerError):
    """A required API key or setting is absent, invalid or still a template placeholder."""

    status_code = 500


class InvalidDestination(TripPlannerError):
    """Blank or otherwise unusable destination text."""

    status_code = 422
