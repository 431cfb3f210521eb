"""
Base classes for geocoding providers
"""

from abc import ABC, abstractmethod

from .http import HttpTransport
from .models import AddressCollection, GeocodeQuery, ReverseQuery


class Provider(ABC):
    """
    Abstract base class for geocoding providers.

    All providers turn a GeocodeQuery or a ReverseQuery into an
    AddressCollection and report their name.
    """

    @abstractmethod
    def geocode(self, query: GeocodeQuery) -> AddressCollection:
        """
        Look up addresses matching free-form text.

        Args:
            query: Text to look up, with result limit and locale

        Returns:
            AddressCollection: Matches in provider order, possibly empty
        """
        pass

    @abstractmethod
    def reverse(self, query: ReverseQuery) -> AddressCollection:
        """
        Describe the place found at the given coordinates.

        Args:
            query: Point to look up, with locale and zoom

        Returns:
            AddressCollection: Matches, possibly empty
        """
        pass

    @abstractmethod
    def getName(self) -> str:
        pass


class HttpProvider(Provider):
    """Provider which fetches its data over HTTP through an injected transport."""

    def __init__(self, transport: HttpTransport):
        self.transport = transport

    def getUrlContents(self, url: str) -> str:
        # Transport errors propagate to the caller untouched
        return self.transport.fetch(url)
