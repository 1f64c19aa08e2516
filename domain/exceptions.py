"""Failure taxonomy for the match history service.

Each exception carries a human-readable ``message`` that is safe to show to
the caller, a ``details`` dict for logging, and an ``http_status`` hint the
transport layer can map to a response code.
"""

from __future__ import annotations


class MatchHistoryError(Exception):
    """Base exception for all match history errors."""

    http_status: int = 500

    def __init__(self, message: str, details: dict | None = None) -> None:
        self.message = message
        self.details = details or {}
        super().__init__(message)


class ConfigurationError(MatchHistoryError):
    """Raised when a required setting is missing or holds an unknown value."""


class InvalidRequestError(MatchHistoryError):
    """Raised when caller input cannot be sent upstream."""

    http_status = 400


# =============================================================================
# Upstream (Riot API) errors
# =============================================================================


class RiotAPIError(MatchHistoryError):
    """Base class for failures reported by, or caused by, the Riot API."""

    http_status = 502

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        details: dict | None = None,
    ) -> None:
        self.status_code = status_code
        super().__init__(message, details)


class NotFoundError(RiotAPIError):
    """The requested account, summoner, match or participant does not exist."""

    http_status = 404


class AuthError(RiotAPIError):
    """The API key was rejected (401/403). Not correctable by the caller."""

    http_status = 502


class RateLimitedError(RiotAPIError):
    """Upstream throttled the request (429)."""

    http_status = 429

    def __init__(
        self,
        message: str,
        retry_after: int | None = None,
        details: dict | None = None,
    ) -> None:
        self.retry_after = retry_after
        super().__init__(message, status_code=429, details=details)


class UpstreamError(RiotAPIError):
    """Any other non-2xx status, transport failure, or unusable payload."""
