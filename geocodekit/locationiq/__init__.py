"""
LocationIQ provider for the geocoder library

Example usage:
    from geocodekit import GeocodeQuery, HttpxTransport, ReverseQuery
    from geocodekit.locationiq import LocationIQProvider

    provider = LocationIQProvider(HttpxTransport(), apiKey="your_api_key")

    # Forward geocoding
    addresses = provider.geocode(GeocodeQuery("Angarsk, Russia"))

    # Reverse geocoding
    addresses = provider.reverse(ReverseQuery.fromCoordinates(52.5443, 103.8882))
"""

from .constants import PROVIDER_NAME, REGIONS
from .provider import LocationIQProvider, appendLocale
from .xml_parser import parseGeocodeResponse, parseReverseResponse, xmlResultToAddress

__all__ = [
    "LocationIQProvider",
    "PROVIDER_NAME",
    "REGIONS",
    "appendLocale",
    "parseGeocodeResponse",
    "parseReverseResponse",
    "xmlResultToAddress",
]
