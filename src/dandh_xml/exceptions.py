"""
Exceptions raised by the D&H client.

A remote STATUS=failure is not an exception; it comes back as an error result.
"""

from typing import List, Optional


class DandhError(Exception):
    """Base class for all D&H client errors."""


class TransportError(DandhError):
    """The request could not be delivered or the server answered with an HTTP error."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class MalformedResponseError(DandhError):
    """The response body is not parseable XML."""

    def __init__(self, message: str, body: str = ''):
        super().__init__(message)
        self.body = body


class ConfigurationError(DandhError):
    """Client settings are missing or invalid."""


class MissingFieldsError(DandhError, ValueError):
    """Strict mode: an order is missing required fields."""

    def __init__(self, missing: List[str]):
        super().__init__(f"Missing required order fields: {', '.join(missing)}")
        self.missing = missing
