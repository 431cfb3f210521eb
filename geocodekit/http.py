"""
HTTP transport for geocoding providers

Providers never talk to the network themselves: they are given an object with
a ``fetch(url) -> str`` method. HttpxTransport is the default one, built on a
synchronous httpx client.
"""

import logging
from typing import Optional, Protocol

import httpx

from .exceptions import InvalidCredentials, InvalidServerResponse, QuotaExceeded

logger = logging.getLogger(__name__)

DEFAULT_USER_AGENT = "locationiq-geocoder"


class HttpTransport(Protocol):
    """
    Protocol for objects performing the actual HTTP GET, dood!

    Implementations return the response body as text and raise on any
    transport level failure.
    """

    def fetch(self, url: str) -> str:
        """
        Fetch given URL and return the response body

        Args:
            url: Fully built request URL

        Returns:
            str: Response body
        """
        ...


class HttpxTransport:
    """Default transport on top of httpx.Client.

    Error Handling:
        - Timeout / network errors: httpx.RequestError is raised as is
        - 401, 403: InvalidCredentials
        - 429: QuotaExceeded
        - other 4xx/5xx: InvalidServerResponse
        - empty body: InvalidServerResponse
    """

    def __init__(
        self,
        timeout: float = 10,
        userAgent: str = DEFAULT_USER_AGENT,
        client: Optional[httpx.Client] = None,
    ):
        """Initialize transport, dood!

        Args:
            timeout: HTTP request timeout in seconds (default: 10)
            userAgent: User-Agent header sent with each request
            client: Preconfigured httpx client, not closed by this transport
        """
        self.timeout = timeout
        self.userAgent = userAgent
        self._ownsClient = client is None
        self._client = client if client is not None else httpx.Client(timeout=timeout)

    def fetch(self, url: str) -> str:
        response = self._client.get(url, headers={"User-Agent": self.userAgent})

        statusCode = response.status_code
        if statusCode in (401, 403):
            logger.error("Invalid API key")
            raise InvalidCredentials()
        elif statusCode == 429:
            logger.error("Rate limit exceeded")
            raise QuotaExceeded()
        elif statusCode >= 300:
            logger.error(f"API request failed: {statusCode}")
            raise InvalidServerResponse.create(url, statusCode)

        body = response.text
        if not body:
            raise InvalidServerResponse.emptyResponse(url)

        logger.debug(f"API request successful: {statusCode}")
        return body

    def close(self) -> None:
        if self._ownsClient:
            self._client.close()

    def __enter__(self) -> "HttpxTransport":
        return self

    def __exit__(self, *args) -> None:
        self.close()
