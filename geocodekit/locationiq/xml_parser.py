"""
XML parser for LocationIQ API responses

This module converts the ``xmlv1.1`` documents returned by LocationIQ into
AddressCollection objects.

Two document shapes exist:

Search (forward geocoding)::

    <searchresults querystring="..." ...>
        <place place_id="..." lat="48.85" lon="2.35" boundingbox="48.81,48.90,2.22,2.46" ...>
            <city>Paris</city>
            <state>Ile-de-France</state>
            <country>France</country>
            <country_code>fr</country_code>
        </place>
        ...
    </searchresults>

Reverse geocoding::

    <reversegeocode timestamp="..." ...>
        <result place_id="..." lat="..." lon="..." boundingbox="...">Display name</result>
        <addressparts>
            <house_number>10</house_number>
            <road>Rue de Rivoli</road>
            ...
        </addressparts>
    </reversegeocode>

When the service has nothing at a point it answers with
``<reversegeocode><error>Unable to geocode</error></reversegeocode>``.

Parsing policy differs between the two modes: a broken search document is an
error (InvalidServerResponse), while a broken or ``<error>`` reverse document is
just an empty result.

Elements that are present but empty (``<state></state>``, ``<road/>``) count
as absent, exactly like a missing element.
"""

import logging
import xml.etree.ElementTree as ET
from typing import Optional

from ..builder import AddressBuilder
from ..exceptions import InvalidServerResponse
from ..models import Address, AddressCollection
from .constants import PROVIDER_NAME

logger = logging.getLogger(__name__)

# Address tags mapped to administrative levels, in level order
ADMIN_LEVEL_TAGS = ("state", "county")


def parseGeocodeResponse(content: str, url: str) -> AddressCollection:
    """
    Parse search response from LocationIQ API.

    Args:
        content: Raw XML body of the response
        url: Request URL, reported in the error if the body cannot be used

    Returns:
        AddressCollection: One address per ``<place>`` in document order.
            Empty if the search matched nothing.

    Raises:
        InvalidServerResponse: If the body is not XML or has no
            ``<searchresults>`` element.
    """
    try:
        root = ET.fromstring(content)
    except ET.ParseError as e:
        logger.error(f"XML parsing error: {e}")
        raise InvalidServerResponse.create(url)

    searchResults = _findElement(root, "searchresults")
    if searchResults is None:
        logger.error("Invalid XML format: missing searchresults element")
        raise InvalidServerResponse.create(url)

    addresses = [xmlResultToAddress(place, place) for place in searchResults.iter("place")]
    return AddressCollection(addresses)


def parseReverseResponse(content: str) -> AddressCollection:
    """
    Parse reverse geocoding response from LocationIQ API.

    Never raises: unparsable documents and documents reporting an ``<error>``
    both give an empty collection.

    Args:
        content: Raw XML body of the response

    Returns:
        AddressCollection: A single address, or nothing
    """
    try:
        root = ET.fromstring(content)
    except ET.ParseError as e:
        logger.warning(f"XML parsing error: {e}")
        return AddressCollection()

    error = _findElement(root, "error")
    if error is not None:
        logger.debug(f"API error: {''.join(error.itertext())}")
        return AddressCollection()

    reverseGeocode = _findElement(root, "reversegeocode")
    if reverseGeocode is None:
        logger.warning("Invalid XML format: missing reversegeocode element")
        return AddressCollection()

    resultNode = reverseGeocode.find(".//result")
    addressNode = reverseGeocode.find(".//addressparts")
    if resultNode is None or addressNode is None:
        logger.warning("Invalid XML format: missing result or addressparts element")
        return AddressCollection()

    return AddressCollection([xmlResultToAddress(resultNode, addressNode)])


def xmlResultToAddress(resultNode: ET.Element, addressNode: ET.Element) -> Address:
    """
    Build an Address from a pair of nodes.

    Coordinates and bounding box are read from the attributes of
    ``resultNode``, everything else from the child elements of
    ``addressNode``. For search results both are the same ``<place>``
    element, for reverse results they are the ``<result>`` and
    ``<addressparts>`` siblings.

    Args:
        resultNode: Element carrying ``lat``, ``lon`` and ``boundingbox``
        addressNode: Element carrying the address tags

    Returns:
        Address: Built record, missing tags leave fields unset
    """
    builder = AddressBuilder(PROVIDER_NAME)

    for level, tagName in enumerate(ADMIN_LEVEL_TAGS, start=1):
        adminLevel = _getNodeValue(addressNode, tagName)
        if adminLevel is not None:
            builder.addAdminLevel(level, adminLevel)

    # get the first postal code when there are many
    postalCode = _getNodeValue(addressNode, "postcode")
    if postalCode:
        postalCode = postalCode.split(";")[0]
    builder.setPostalCode(postalCode)

    builder.setStreetName(_getNodeValue(addressNode, "road") or _getNodeValue(addressNode, "pedestrian"))
    builder.setStreetNumber(_getNodeValue(addressNode, "house_number"))
    builder.setLocality(_getNodeValue(addressNode, "city"))
    builder.setSubLocality(_getNodeValue(addressNode, "suburb"))
    builder.setCountry(_getNodeValue(addressNode, "country"))
    builder.setCoordinates(resultNode.get("lat"), resultNode.get("lon"))

    countryCode = _getNodeValue(addressNode, "country_code")
    if countryCode is not None:
        builder.setCountryCode(countryCode.upper())

    boundsAttr = resultNode.get("boundingbox")
    if boundsAttr:
        parts = boundsAttr.split(",")
        if len(parts) == 4:
            south, north, west, east = parts
            builder.setBounds(south=south, north=north, west=west, east=east)
        else:
            logger.warning(f"Ignoring malformed boundingbox: {boundsAttr}")

    return builder.build()


def _findElement(root: ET.Element, tagName: str) -> Optional[ET.Element]:
    """Find the root itself or its first descendant with given tag."""
    if root.tag == tagName:
        return root
    return root.find(f".//{tagName}")


def _getNodeValue(node: ET.Element, tagName: str) -> Optional[str]:
    """
    Get text of the first descendant of ``node`` named ``tagName``.

    Returns:
        Optional[str]: Text content, or None if the element is missing or empty
    """
    element = node.find(f".//{tagName}")
    if element is None:
        return None
    value = "".join(element.itertext())
    return value if value else None
