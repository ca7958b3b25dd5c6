"""Exception hierarchy for citation resolution and retrieval."""

from typing import Optional


class CitationFetchError(Exception):
    """Base class for every error raised by citefetch."""


class ValidationError(CitationFetchError):
    """Required input was blank; raised before any network activity."""

    def __init__(self, fields: tuple[str, ...] | list[str]):
        self.fields = tuple(fields)
        super().__init__(f"Required field(s) blank: {', '.join(self.fields)}")


class TransportError(CitationFetchError):
    """A network call failed or returned a non-success status."""

    def __init__(self, message: str, url: str, status_code: Optional[int] = None):
        self.url = url
        self.status_code = status_code
        super().__init__(message)


class ConfigError(CitationFetchError):
    """A service configuration file could not be read or validated."""
