"""
Custom exception types for the TalentLMS API client.

These exceptions allow callers to distinguish between invalid client
configuration, error responses returned by TalentLMS, failures of the
underlying transport, and lookups whose anchor resource does not exist.
"""

from __future__ import annotations


class TalentLmsError(Exception):
    """Base exception for all TalentLMS client errors."""


class ConfigurationError(TalentLmsError, ValueError):
    """Raised when the client is constructed with invalid settings."""


class ApiError(TalentLmsError):
    """Raised when TalentLMS answers with a non-success HTTP status.

    Attributes
    ----------
    status_code : int
        The HTTP status code of the response.
    message : str
        The ``error.message`` reported by TalentLMS, or the HTTP reason
        phrase when the body carried none.
    """

    def __init__(self, status_code: int, message: str) -> None:
        self.status_code = status_code
        self.message = message
        super().__init__(f"TalentLMS API error {status_code}: {message}")


class RequestError(TalentLmsError):
    """Raised when the request could not be completed or decoded."""


class NotFoundError(TalentLmsError, LookupError):
    """Raised when a course looked up by code does not exist."""

    def __init__(self, code: str) -> None:
        self.code = code
        super().__init__(f"Course with code {code} not found")
