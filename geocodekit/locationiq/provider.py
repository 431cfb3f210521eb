"""
LocationIQ geocoding provider

This module provides the LocationIQProvider class which builds LocationIQ
request URLs, fetches them through an HttpTransport and parses the XML answers.
"""

import logging
from typing import Any, Dict, Optional
from urllib.parse import quote_plus

from ..exceptions import InvalidArgument, InvalidCredentials
from ..http import HttpTransport, HttpxTransport
from ..models import AddressCollection, GeocodeQuery, ReverseQuery
from ..provider import HttpProvider
from .constants import BASE_API_URL, DEFAULT_ZOOM, GEOCODE_ENDPOINT, PROVIDER_NAME, REGIONS, REVERSE_ENDPOINT
from .xml_parser import parseGeocodeResponse, parseReverseResponse

logger = logging.getLogger(__name__)


def appendLocale(url: str, locale: Optional[str]) -> str:
    """Add ``accept-language`` parameter to the URL if locale is set."""
    if locale is None:
        return url
    return f"{url}&accept-language={quote_plus(locale)}"


class LocationIQProvider(HttpProvider):
    """LocationIQ provider, dood!

    Forward and reverse geocoding against one of the regional LocationIQ
    hosts. The provider holds no state besides its configuration, so one
    instance can serve any number of queries.

    Example:
        >>> from geocodekit import GeocodeQuery, HttpxTransport, LocationIQProvider, ReverseQuery
        >>>
        >>> provider = LocationIQProvider(HttpxTransport(), apiKey="your_api_key", region="eu1")
        >>>
        >>> # Forward geocoding
        >>> addresses = provider.geocode(GeocodeQuery("Paris", limit=3))
        >>>
        >>> # Reverse geocoding
        >>> addresses = provider.reverse(ReverseQuery.fromCoordinates(48.8566, 2.3522))
    """

    def __init__(self, transport: HttpTransport, apiKey: Optional[str], region: Optional[str] = None):
        """Initialize LocationIQ provider, dood!

        Args:
            transport: Transport used to fetch URLs
            apiKey: LocationIQ API key (required)
            region: API region, one of ``us1``, ``eu1`` (default: ``us1``)

        Raises:
            InvalidCredentials: If no API key is given
            InvalidArgument: If the region is unknown
        """
        if not apiKey:
            raise InvalidCredentials("No API key provided.")

        if region is None:
            region = REGIONS[0]
        elif region not in REGIONS:
            raise InvalidArgument("`region` must be None or one of `{}`".format("`, `".join(REGIONS)))

        super().__init__(transport)
        self.apiKey = apiKey
        self.region = region
        self.baseUrl = BASE_API_URL.replace("{region}", region)

    @classmethod
    def fromConfig(cls, config: Dict[str, Any], transport: Optional[HttpTransport] = None) -> "LocationIQProvider":
        """Create provider from the ``[locationiq]`` config section.

        Args:
            config: Section with ``api-key``, ``region`` and ``timeout`` keys
            transport: Transport to use (default: HttpxTransport with configured timeout)
        """
        if transport is None:
            transport = HttpxTransport(timeout=config.get("timeout", 10))
        return cls(transport, apiKey=config.get("api-key"), region=config.get("region"))

    def getName(self) -> str:
        return PROVIDER_NAME

    def geocode(self, query: GeocodeQuery) -> AddressCollection:
        url = self.buildGeocodeUrl(query.text, query.limit)
        content = self._executeQuery(url, query.locale)

        result = parseGeocodeResponse(content, url)
        logger.debug(f"Got {len(result)} results for geocode query")
        return result

    def reverse(self, query: ReverseQuery) -> AddressCollection:
        coordinates = query.coordinates
        url = self.buildReverseUrl(coordinates.latitude, coordinates.longitude, query.zoom)
        content = self._executeQuery(url, query.locale)

        result = parseReverseResponse(content)
        logger.debug(f"Got {len(result)} results for reverse query")
        return result

    def buildGeocodeUrl(self, text: str, limit: int) -> str:
        """Build search URL for given text, no range check on ``limit``."""
        return self.baseUrl + GEOCODE_ENDPOINT.format(query=quote_plus(text), limit=int(limit), apiKey=self.apiKey)

    def buildReverseUrl(self, latitude: float, longitude: float, zoom: Optional[int] = None) -> str:
        """Build reverse URL for given point, ``zoom`` defaults to 18."""
        return self.baseUrl + REVERSE_ENDPOINT.format(
            latitude=float(latitude),
            longitude=float(longitude),
            zoom=int(zoom if zoom is not None else DEFAULT_ZOOM),
            apiKey=self.apiKey,
        )

    def _executeQuery(self, url: str, locale: Optional[str] = None) -> str:
        url = appendLocale(url, locale)
        logger.debug(f"Making request to {url.replace(self.apiKey, '***')}")
        return self.getUrlContents(url)
