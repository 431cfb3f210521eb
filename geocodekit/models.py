"""
Geocoder data models

This module contains the immutable value objects shared by all providers:
queries going in and addresses coming out, dood!
"""

import dataclasses
from dataclasses import dataclass
from typing import Any, Dict, Iterator, List, Optional, Sequence, Tuple, Union, overload

from .exceptions import CollectionIsEmpty, InvalidArgument, OutOfBounds

MIN_ADMIN_LEVEL = 1
MAX_ADMIN_LEVEL = 5
DEFAULT_RESULT_LIMIT = 5


def _toFloat(value: Any, name: str) -> float:
    try:
        return float(value)
    except (TypeError, ValueError):
        raise InvalidArgument(f"`{name}` must be a number, got {value!r}")


def _checkLatitude(value: float, name: str = "latitude") -> None:
    if not -90.0 <= value <= 90.0:
        raise InvalidArgument(f"`{name}` must be between -90 and 90, got {value}")


def _checkLongitude(value: float, name: str = "longitude") -> None:
    if not -180.0 <= value <= 180.0:
        raise InvalidArgument(f"`{name}` must be between -180 and 180, got {value}")


@dataclass(frozen=True, slots=True)
class Coordinates:
    """
    Latitude/longitude pair in decimal degrees
    """

    latitude: float
    longitude: float

    def __post_init__(self):
        # frozen dataclass, so coerced values go through object.__setattr__
        object.__setattr__(self, "latitude", _toFloat(self.latitude, "latitude"))
        object.__setattr__(self, "longitude", _toFloat(self.longitude, "longitude"))
        _checkLatitude(self.latitude)
        _checkLongitude(self.longitude)

    def toDict(self) -> Dict[str, float]:
        return {"latitude": self.latitude, "longitude": self.longitude}


@dataclass(frozen=True, slots=True)
class Bounds:
    """
    Rectangular extent expressed as south/west/north/east limits
    """

    south: float
    west: float
    north: float
    east: float

    def __post_init__(self):
        for name in ("south", "west", "north", "east"):
            object.__setattr__(self, name, _toFloat(getattr(self, name), name))
        _checkLatitude(self.south, "south")
        _checkLatitude(self.north, "north")
        _checkLongitude(self.west, "west")
        _checkLongitude(self.east, "east")

    def toDict(self) -> Dict[str, float]:
        return {"south": self.south, "west": self.west, "north": self.north, "east": self.east}


@dataclass(frozen=True, slots=True)
class AdminLevel:
    """
    Administrative division of an address (state is 1, county is 2)
    """

    level: int
    name: str
    code: Optional[str] = None

    def __post_init__(self):
        if not MIN_ADMIN_LEVEL <= self.level <= MAX_ADMIN_LEVEL:
            raise InvalidArgument(
                f"Administrative level should be an integer in [{MIN_ADMIN_LEVEL},{MAX_ADMIN_LEVEL}], "
                f"got {self.level}"
            )

    def toDict(self) -> Dict[str, Any]:
        return {"level": self.level, "name": self.name, "code": self.code}


@dataclass(frozen=True, slots=True)
class Address:
    """Normalized address record produced by a provider, dood!

    Every field except ``providedBy`` is optional, since the services return
    whatever they happen to know about a place.
    """

    providedBy: str
    """Name of the provider which built this record"""
    coordinates: Optional[Coordinates] = None
    bounds: Optional[Bounds] = None
    streetNumber: Optional[str] = None
    streetName: Optional[str] = None
    postalCode: Optional[str] = None
    locality: Optional[str] = None
    subLocality: Optional[str] = None
    adminLevels: Tuple[AdminLevel, ...] = ()
    """Administrative levels in the order they were added"""
    country: Optional[str] = None
    countryCode: Optional[str] = None
    """ISO 3166-1 alpha-2 code, upper case"""

    def getAdminLevel(self, level: int) -> Optional[AdminLevel]:
        for adminLevel in self.adminLevels:
            if adminLevel.level == level:
                return adminLevel
        return None

    def toDict(self) -> Dict[str, Any]:
        """Convert the address into a JSON-ready dictionary."""
        return {
            "providedBy": self.providedBy,
            "coordinates": self.coordinates.toDict() if self.coordinates else None,
            "bounds": self.bounds.toDict() if self.bounds else None,
            "streetNumber": self.streetNumber,
            "streetName": self.streetName,
            "postalCode": self.postalCode,
            "locality": self.locality,
            "subLocality": self.subLocality,
            "adminLevels": [adminLevel.toDict() for adminLevel in self.adminLevels],
            "country": self.country,
            "countryCode": self.countryCode,
        }


class AddressCollection(Sequence[Address]):
    """Ordered, read-only list of addresses returned by a query.

    Order is the order in which the provider produced the records, which for
    XML providers is document order.

    Example:
        >>> collection = provider.geocode(GeocodeQuery("Paris"))
        >>> if not collection.isEmpty():
        ...     print(collection.first().locality)
    """

    __slots__ = ("_addresses",)

    def __init__(self, addresses: Optional[Sequence[Address]] = None):
        self._addresses: Tuple[Address, ...] = tuple(addresses or ())

    @overload
    def __getitem__(self, index: int) -> Address: ...

    @overload
    def __getitem__(self, index: slice) -> "AddressCollection": ...

    def __getitem__(self, index: Union[int, slice]) -> Union[Address, "AddressCollection"]:
        if isinstance(index, slice):
            return AddressCollection(self._addresses[index])
        return self._addresses[index]

    def __len__(self) -> int:
        return len(self._addresses)

    def __iter__(self) -> Iterator[Address]:
        return iter(self._addresses)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, AddressCollection):
            return self._addresses == other._addresses
        return NotImplemented

    def __repr__(self) -> str:
        return f"AddressCollection({list(self._addresses)!r})"

    def isEmpty(self) -> bool:
        return not self._addresses

    def first(self) -> Address:
        """Get the first address, raising CollectionIsEmpty when there is none."""
        if not self._addresses:
            raise CollectionIsEmpty()
        return self._addresses[0]

    def get(self, index: int) -> Address:
        if not 0 <= index < len(self._addresses):
            raise OutOfBounds(f"Index {index} is out of bounds for a collection of {len(self._addresses)}")
        return self._addresses[index]

    def slice(self, offset: int, length: Optional[int] = None) -> "AddressCollection":
        end = None if length is None else offset + length
        return AddressCollection(self._addresses[offset:end])

    def toList(self) -> List[Dict[str, Any]]:
        return [address.toDict() for address in self._addresses]


@dataclass(frozen=True, slots=True)
class GeocodeQuery:
    """
    Forward geocoding request: free-form text to look up
    """

    text: str
    limit: int = DEFAULT_RESULT_LIMIT
    locale: Optional[str] = None

    def __post_init__(self):
        if not self.text or not self.text.strip():
            raise InvalidArgument("Geocode query cannot be empty")

    def withLimit(self, limit: int) -> "GeocodeQuery":
        return dataclasses.replace(self, limit=limit)

    def withLocale(self, locale: Optional[str]) -> "GeocodeQuery":
        return dataclasses.replace(self, locale=locale)


@dataclass(frozen=True, slots=True)
class ReverseQuery:
    """
    Reverse geocoding request: a point to describe
    """

    coordinates: Coordinates
    limit: int = DEFAULT_RESULT_LIMIT
    locale: Optional[str] = None
    zoom: Optional[int] = None
    """Level of detail, provider default when None"""

    @classmethod
    def fromCoordinates(cls, latitude: float, longitude: float) -> "ReverseQuery":
        return cls(Coordinates(latitude, longitude))

    def withLocale(self, locale: Optional[str]) -> "ReverseQuery":
        return dataclasses.replace(self, locale=locale)

    def withZoom(self, zoom: Optional[int]) -> "ReverseQuery":
        return dataclasses.replace(self, zoom=zoom)
