"""Error types raised by the fetch pipeline."""

from typing import Optional


class TrackerError(Exception):
    """Base class for fatal errors in a fetch run."""


class ConfigurationError(TrackerError):
    """Required credentials or settings are missing."""


class UpstreamError(TrackerError):
    """Strava answered with a non-success status."""

    def __init__(self, status_code: int, reason: Optional[str] = None, message: Optional[str] = None):
        self.status_code = status_code
        self.reason = reason or ""
        super().__init__(message or f"{status_code} {self.reason}".strip())


class UpstreamAuthError(UpstreamError):
    def __init__(self, status_code: int, reason: Optional[str] = None):
        super().__init__(
            status_code,
            reason,
            f"Failed to refresh access token: {status_code} {reason or ''}".strip(),
        )


class UpstreamApiError(UpstreamError):
    def __init__(self, status_code: int, reason: Optional[str] = None):
        super().__init__(
            status_code,
            reason,
            f"Strava API error: {status_code} {reason or ''}".strip(),
        )


class IoError(TrackerError):
    """The snapshot file could not be written."""
