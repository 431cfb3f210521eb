"""
Geocoder Exceptions

This module contains the exception classes raised by providers, transports
and value objects of the geocoder library.
"""

import logging
from typing import Optional

logger = logging.getLogger(__name__)


class GeocoderError(Exception):
    """Base exception class for all geocoder errors, dood!

    All other exceptions in this module inherit from this base class.

    Attributes:
        message: Human-readable error message
    """

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message
        logger.debug(f"{type(self).__name__}: {message}")

    def __str__(self) -> str:
        return self.message


class InvalidArgument(GeocoderError, ValueError):
    """Raised when a value passed to the library is not acceptable.

    This typically occurs when:
    - An unknown region is given to a provider
    - A query is built with empty text
    - Coordinates or bounds are out of range
    """


class InvalidCredentials(GeocoderError):
    """Raised when the API key is missing or rejected by the service."""

    def __init__(self, message: str = "Invalid credentials. Check your API key.") -> None:
        super().__init__(message)


class QuotaExceeded(GeocoderError):
    """Raised when the service reports that the request quota is exhausted."""

    def __init__(self, message: str = "Quota exceeded. Please try again later.") -> None:
        super().__init__(message)


class InvalidServerResponse(GeocoderError):
    """Raised when the service answers with something we cannot use.

    Attributes:
        url: Request URL that produced the response
        code: HTTP status code (if available)
    """

    def __init__(self, message: str, url: Optional[str] = None, code: Optional[int] = None) -> None:
        super().__init__(message)
        self.url = url
        self.code = code

    @classmethod
    def create(cls, url: str, code: int = 0) -> "InvalidServerResponse":
        """Build the error for a response that could not be processed."""
        return cls(f'The geocoder server returned an invalid response ({code}) for query "{url}".', url, code)

    @classmethod
    def emptyResponse(cls, url: str) -> "InvalidServerResponse":
        """Build the error for a response with no body."""
        return cls(f'The geocoder server returned an empty response for query "{url}".', url)


class CollectionIsEmpty(GeocoderError):
    """Raised when the first element of an empty collection is requested."""

    def __init__(self, message: str = "The collection is empty.") -> None:
        super().__init__(message)


class OutOfBounds(GeocoderError, IndexError):
    """Raised when a collection index does not exist."""
