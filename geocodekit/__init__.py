"""
Geocoder library

Providers turning free-form addresses into structured, normalized address
records and back, dood!

Example usage:
    from geocodekit import GeocodeQuery, HttpxTransport, ReverseQuery
    from geocodekit.locationiq import LocationIQProvider

    with HttpxTransport(timeout=5) as transport:
        provider = LocationIQProvider(transport, apiKey="your_api_key", region="eu1")

        # Forward geocoding
        addresses = provider.geocode(GeocodeQuery("Angarsk, Russia", limit=3))
        for address in addresses:
            print(address.locality, address.coordinates)

        # Reverse geocoding
        addresses = provider.reverse(ReverseQuery.fromCoordinates(52.5443, 103.8882))
"""

from .builder import AddressBuilder
from .exceptions import (
    CollectionIsEmpty,
    GeocoderError,
    InvalidArgument,
    InvalidCredentials,
    InvalidServerResponse,
    OutOfBounds,
    QuotaExceeded,
)
from .http import HttpTransport, HttpxTransport
from .locationiq import LocationIQProvider
from .models import (
    Address,
    AddressCollection,
    AdminLevel,
    Bounds,
    Coordinates,
    GeocodeQuery,
    ReverseQuery,
)
from .provider import HttpProvider, Provider

__all__ = [
    "Address",
    "AddressBuilder",
    "AddressCollection",
    "AdminLevel",
    "Bounds",
    "CollectionIsEmpty",
    "Coordinates",
    "GeocodeQuery",
    "GeocoderError",
    "HttpProvider",
    "HttpTransport",
    "HttpxTransport",
    "InvalidArgument",
    "InvalidCredentials",
    "InvalidServerResponse",
    "LocationIQProvider",
    "OutOfBounds",
    "Provider",
    "QuotaExceeded",
    "ReverseQuery",
]
