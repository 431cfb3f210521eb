"""
LocationIQ API constants
"""

PROVIDER_NAME = "locationiq"

BASE_API_URL = "https://{region}.locationiq.com/v1"

# First one is the default region
REGIONS = (
    "us1",
    "eu1",
)

RESPONSE_FORMAT = "xmlv1.1"

GEOCODE_ENDPOINT = (
    "/search.php?q={query}&format=" + RESPONSE_FORMAT + "&addressdetails=1&normalizecity=1&limit={limit}&key={apiKey}"
)
REVERSE_ENDPOINT = (
    "/reverse.php?format="
    + RESPONSE_FORMAT
    + "&lat={latitude:f}&lon={longitude:f}&addressdetails=1&normalizecity=1&zoom={zoom}&key={apiKey}"
)

DEFAULT_ZOOM = 18
