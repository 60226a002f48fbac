"""Error types for WeatherBug service interactions.

Only the HTTP collaborator raises these. Data binding reports absence through
defaults, ``None`` and empty lists instead.
"""

from __future__ import annotations


class WeatherBugServiceError(Exception):
    """Base error for WeatherBug remote call failures."""


class WeatherBugTimeout(WeatherBugServiceError):
    """Timeout while communicating with the WeatherBug API."""


class WeatherBugConnectionError(WeatherBugServiceError):
    """Network connection to the WeatherBug API failed."""


class WeatherBugParseError(WeatherBugServiceError):
    """The WeatherBug API returned a document that is not well-formed XML."""


class WeatherBugResponseError(WeatherBugServiceError):
    """HTTP response error from the WeatherBug API."""

    def __init__(self, status: int, message: str) -> None:
        super().__init__(message)
        self.status = status
