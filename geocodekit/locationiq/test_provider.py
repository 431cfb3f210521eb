"""
Unit tests for LocationIQ provider

This module tests construction and validation, URL building for both modes,
locale handling, and how transport output and errors reach the caller.
"""

from unittest.mock import MagicMock, patch

import httpx
import pytest

from ..exceptions import InvalidArgument, InvalidCredentials, InvalidServerResponse, QuotaExceeded
from ..http import HttpxTransport
from ..models import GeocodeQuery, ReverseQuery
from .provider import LocationIQProvider, appendLocale

SEARCH_XML = """<?xml version="1.0" encoding="UTF-8"?>
<searchresults querystring="Paris">
    <place lat="48.8588897" lon="2.3200410" boundingbox="48.8155755,48.902156,2.224122,2.4697602">
        <city>Paris</city>
        <state>Ile-de-France</state>
        <country>France</country>
        <country_code>fr</country_code>
    </place>
</searchresults>"""

EMPTY_SEARCH_XML = '<?xml version="1.0" encoding="UTF-8"?><searchresults querystring="nowhere"></searchresults>'

REVERSE_XML = """<?xml version="1.0" encoding="UTF-8"?>
<reversegeocode>
    <result lat="48.8606111" lon="2.337644" boundingbox="48.8570,48.8640,2.3300,2.3410">Louvre</result>
    <addressparts>
        <road>Rue de Rivoli</road>
        <city>Paris</city>
        <postcode>75001;75058</postcode>
        <country>France</country>
        <country_code>fr</country_code>
    </addressparts>
</reversegeocode>"""

REVERSE_ERROR_XML = (
    '<?xml version="1.0" encoding="UTF-8"?><reversegeocode><error>Unable to geocode</error></reversegeocode>'
)


@pytest.fixture
def transport() -> MagicMock:
    """Transport mock returning an empty search document by default."""
    mock = MagicMock()
    mock.fetch.return_value = EMPTY_SEARCH_XML
    return mock


@pytest.fixture
def provider(transport: MagicMock) -> LocationIQProvider:
    return LocationIQProvider(transport, apiKey="test_key")


def test_empty_api_key_is_rejected(transport):
    """Test that construction needs an API key."""
    for apiKey in ["", None]:
        with pytest.raises(InvalidCredentials):
            LocationIQProvider(transport, apiKey=apiKey)


def test_unknown_region_is_rejected(transport):
    """Test that only known regions are accepted."""
    with pytest.raises(InvalidArgument) as excInfo:
        LocationIQProvider(transport, apiKey="test_key", region="ap1")

    assert "us1" in str(excInfo.value)
    assert "eu1" in str(excInfo.value)


def test_default_region(provider):
    """Test that us1 is used when no region is given."""
    assert provider.region == "us1"
    assert provider.baseUrl == "https://us1.locationiq.com/v1"


def test_eu_region(transport):
    """Test that the region is substituted into the base URL."""
    provider = LocationIQProvider(transport, apiKey="test_key", region="eu1")

    assert provider.baseUrl == "https://eu1.locationiq.com/v1"
    assert provider.buildGeocodeUrl("Paris", 5).startswith("https://eu1.locationiq.com/v1/search.php?")


def test_get_name(provider):
    assert provider.getName() == "locationiq"


def test_build_geocode_url(provider):
    """Test the search URL layout."""
    url = provider.buildGeocodeUrl("Paris", 5)

    assert url == (
        "https://us1.locationiq.com/v1/search.php?q=Paris&format=xmlv1.1"
        "&addressdetails=1&normalizecity=1&limit=5&key=test_key"
    )


def test_build_geocode_url_encodes_text(provider):
    """Test that query text is percent-encoded."""
    url = provider.buildGeocodeUrl("10 Downing St, London & Co", 1)

    assert "q=10+Downing+St%2C+London+%26+Co&" in url
    assert "limit=1&" in url
    assert url.endswith("&key=test_key")


def test_build_geocode_url_does_not_check_limit(provider):
    """Test that the service is left to judge the limit."""
    assert "limit=1000&" in provider.buildGeocodeUrl("Paris", 1000)
    assert "limit=0&" in provider.buildGeocodeUrl("Paris", 0)


def test_build_reverse_url(provider):
    """Test the reverse URL layout and default zoom."""
    url = provider.buildReverseUrl(48.8566, 2.3522)

    assert url == (
        "https://us1.locationiq.com/v1/reverse.php?format=xmlv1.1&lat=48.856600&lon=2.352200"
        "&addressdetails=1&normalizecity=1&zoom=18&key=test_key"
    )


def test_build_reverse_url_with_zoom(provider):
    url = provider.buildReverseUrl(-33.8688, 151.2093, 10)

    assert "lat=-33.868800&lon=151.209300&" in url
    assert "zoom=10&" in url


def test_append_locale():
    """Test that exactly one accept-language parameter is added."""
    url = "https://us1.locationiq.com/v1/search.php?q=Paris&key=test_key"

    assert appendLocale(url, None) == url
    withLocale = appendLocale(url, "fr")
    assert withLocale == url + "&accept-language=fr"
    assert withLocale.count("accept-language") == 1


def test_geocode_fetches_built_url(provider, transport):
    """Test that geocode hands the built URL to the transport."""
    transport.fetch.return_value = SEARCH_XML

    result = provider.geocode(GeocodeQuery("Paris", limit=3))

    transport.fetch.assert_called_once_with(provider.buildGeocodeUrl("Paris", 3))
    assert len(result) == 1
    address = result.first()
    assert address.providedBy == "locationiq"
    assert address.locality == "Paris"
    assert address.countryCode == "FR"
    assert address.coordinates.latitude == 48.8588897


def test_geocode_with_locale(provider, transport):
    """Test that query locale becomes accept-language."""
    provider.geocode(GeocodeQuery("Paris", locale="de"))

    url = transport.fetch.call_args[0][0]
    assert url.endswith("&key=test_key&accept-language=de")
    assert url.count("accept-language=") == 1


def test_geocode_no_results(provider, transport):
    """Test that an empty search is an empty collection."""
    result = provider.geocode(GeocodeQuery("nowhere"))

    assert result.isEmpty()
    assert len(result) == 0


def test_geocode_invalid_response(provider, transport):
    """Test that a broken search body raises with the request URL."""
    transport.fetch.return_value = "<html>Bad Gateway</html>"

    with pytest.raises(InvalidServerResponse) as excInfo:
        provider.geocode(GeocodeQuery("Paris"))

    assert excInfo.value.url == provider.buildGeocodeUrl("Paris", 5)


def test_reverse(provider, transport):
    """Test reverse geocoding through the transport."""
    transport.fetch.return_value = REVERSE_XML

    result = provider.reverse(ReverseQuery.fromCoordinates(48.8606111, 2.337644).withZoom(16))

    transport.fetch.assert_called_once_with(provider.buildReverseUrl(48.8606111, 2.337644, 16))
    assert len(result) == 1
    address = result.first()
    assert address.streetName == "Rue de Rivoli"
    assert address.postalCode == "75001"
    assert address.bounds.north == 48.8640


def test_reverse_with_locale(provider, transport):
    transport.fetch.return_value = REVERSE_XML

    provider.reverse(ReverseQuery.fromCoordinates(1.0, 2.0).withLocale("en"))

    url = transport.fetch.call_args[0][0]
    assert "zoom=18&" in url
    assert url.endswith("&accept-language=en")


def test_reverse_error_is_empty(provider, transport):
    """Test that a reported error is an empty result, not an exception."""
    transport.fetch.return_value = REVERSE_ERROR_XML

    result = provider.reverse(ReverseQuery.fromCoordinates(0.0, 0.0))

    assert result.isEmpty()


def test_reverse_garbage_is_empty(provider, transport):
    transport.fetch.return_value = "this is not xml"

    assert provider.reverse(ReverseQuery.fromCoordinates(0.0, 0.0)).isEmpty()


def test_transport_errors_propagate(provider, transport):
    """Test that transport failures reach the caller unchanged."""
    error = httpx.ConnectTimeout("Timeout")
    transport.fetch.side_effect = error

    with pytest.raises(httpx.ConnectTimeout) as excInfo:
        provider.geocode(GeocodeQuery("Paris"))
    assert excInfo.value is error

    with pytest.raises(httpx.ConnectTimeout):
        provider.reverse(ReverseQuery.fromCoordinates(0.0, 0.0))


def test_transport_quota_error_propagates(provider, transport):
    transport.fetch.side_effect = QuotaExceeded()

    with pytest.raises(QuotaExceeded):
        provider.reverse(ReverseQuery.fromCoordinates(0.0, 0.0))


def test_reverse_redirect_is_an_error():
    """Test that a redirect answer fails instead of parsing as an empty result."""

    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(302, headers={"Location": "https://example.com/"}, text="<html>Moved</html>")

    with httpx.Client(transport=httpx.MockTransport(handler)) as client:
        provider = LocationIQProvider(HttpxTransport(client=client), "test_key")

        with pytest.raises(InvalidServerResponse) as excInfo:
            provider.reverse(ReverseQuery.fromCoordinates(1.0, 2.0))

    assert excInfo.value.code == 302


def test_from_config_with_transport(transport):
    """Test creating provider from a config section."""
    provider = LocationIQProvider.fromConfig({"api-key": "cfg_key", "region": "eu1"}, transport)

    assert provider.apiKey == "cfg_key"
    assert provider.baseUrl == "https://eu1.locationiq.com/v1"
    assert provider.transport is transport


def test_from_config_creates_httpx_transport():
    """Test that a default transport is built with configured timeout."""
    with patch("httpx.Client") as mockClient:
        provider = LocationIQProvider.fromConfig({"api-key": "cfg_key", "timeout": 3})

        assert isinstance(provider.transport, HttpxTransport)
        assert provider.transport.timeout == 3
        mockClient.assert_called_once_with(timeout=3)


def test_from_config_without_key():
    with pytest.raises(InvalidCredentials):
        LocationIQProvider.fromConfig({}, MagicMock())
