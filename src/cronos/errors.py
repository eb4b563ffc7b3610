"""Custom exception types for the Cronos merge-duration reporter."""


class CronosError(Exception):
    """Base exception for all errors surfaced by the reporter."""


class ConfigurationError(CronosError):
    """Raised when runtime configuration values are missing or invalid."""


class AuthenticationError(CronosError):
    """Raised when the GitLab access token is unavailable."""


class ApiError(CronosError):
    """Raised when a GitLab API request fails or returns an unexpected response."""


class AuthOrNetworkError(ApiError):
    """Raised when a request to GitLab could not be sent or completed."""


NetworkOrTransportError = AuthOrNetworkError


class ApiStatusError(ApiError):
    """Raised when GitLab answers with a non-success HTTP status."""

    def __init__(self, status_code: int, reason: str = "") -> None:
        self.status_code = status_code
        self.reason = reason
        status = f"{status_code} {reason}".strip()
        super().__init__(f"Request to GitLab API failed with status: {status}")


class DataValidationError(CronosError):
    """Raised when API payloads do not meet expected constraints."""


class TimestampParseError(DataValidationError):
    """Raised when a timestamp is not a timezone-aware ISO-8601 instant."""


class EmptyCommitListError(DataValidationError):
    """Raised when a merge request has no commits to measure from."""
