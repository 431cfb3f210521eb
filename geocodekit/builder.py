"""
Address builder

Providers feed whatever fields they managed to extract into an AddressBuilder
and call build() to get an immutable Address, dood!
"""

import logging
from typing import Any, Dict, List, Optional

from .exceptions import InvalidArgument
from .models import Address, AdminLevel, Bounds, Coordinates

logger = logging.getLogger(__name__)


class AddressBuilder:
    """Mutable accumulator for Address fields.

    Coordinates and bounds are validated here: if the provider hands over
    something that is not a valid point or extent, the field is left unset
    instead of failing the whole record.

    Example:
        >>> builder = AddressBuilder("locationiq")
        >>> builder.setCoordinates("48.8566", "2.3522")
        >>> builder.setLocality("Paris")
        >>> address = builder.build()
    """

    def __init__(self, providedBy: str):
        self.providedBy = providedBy
        self.coordinates: Optional[Coordinates] = None
        self.bounds: Optional[Bounds] = None
        self.streetNumber: Optional[str] = None
        self.streetName: Optional[str] = None
        self.postalCode: Optional[str] = None
        self.locality: Optional[str] = None
        self.subLocality: Optional[str] = None
        self.country: Optional[str] = None
        self.countryCode: Optional[str] = None
        self._adminLevels: Dict[int, AdminLevel] = {}

    def setCoordinates(self, latitude: Any, longitude: Any) -> "AddressBuilder":
        if latitude is None or latitude == "" or longitude is None or longitude == "":
            self.coordinates = None
            return self
        try:
            self.coordinates = Coordinates(latitude, longitude)
        except InvalidArgument as e:
            logger.debug(f"Ignoring invalid coordinates ({latitude}, {longitude}): {e}")
            self.coordinates = None
        return self

    def setBounds(self, south: Any, north: Any, west: Any, east: Any) -> "AddressBuilder":
        try:
            self.bounds = Bounds(south=south, west=west, north=north, east=east)
        except InvalidArgument as e:
            logger.debug(f"Ignoring invalid bounds ({south}, {north}, {west}, {east}): {e}")
            self.bounds = None
        return self

    def addAdminLevel(self, level: int, name: str, code: Optional[str] = None) -> "AddressBuilder":
        """Add an administrative level, dood!

        Raises:
            InvalidArgument: If the level is out of range or already present
        """
        if level in self._adminLevels:
            raise InvalidArgument(f"Administrative level {level} is defined twice")
        self._adminLevels[level] = AdminLevel(level, name, code)
        return self

    def setStreetNumber(self, streetNumber: Optional[str]) -> "AddressBuilder":
        self.streetNumber = streetNumber
        return self

    def setStreetName(self, streetName: Optional[str]) -> "AddressBuilder":
        self.streetName = streetName
        return self

    def setPostalCode(self, postalCode: Optional[str]) -> "AddressBuilder":
        self.postalCode = postalCode
        return self

    def setLocality(self, locality: Optional[str]) -> "AddressBuilder":
        self.locality = locality
        return self

    def setSubLocality(self, subLocality: Optional[str]) -> "AddressBuilder":
        self.subLocality = subLocality
        return self

    def setCountry(self, country: Optional[str]) -> "AddressBuilder":
        self.country = country
        return self

    def setCountryCode(self, countryCode: Optional[str]) -> "AddressBuilder":
        self.countryCode = countryCode
        return self

    def getAdminLevels(self) -> List[AdminLevel]:
        return list(self._adminLevels.values())

    def build(self) -> Address:
        return Address(
            providedBy=self.providedBy,
            coordinates=self.coordinates,
            bounds=self.bounds,
            streetNumber=self.streetNumber,
            streetName=self.streetName,
            postalCode=self.postalCode,
            locality=self.locality,
            subLocality=self.subLocality,
            adminLevels=tuple(self._adminLevels.values()),
            country=self.country,
            countryCode=self.countryCode,
        )
