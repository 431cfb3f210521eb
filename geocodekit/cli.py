"""CLI interface for the LocationIQ geocodekit.

This module provides a command-line interface to run forward and reverse
geocoding queries and print the results as JSON.
"""

import argparse
import json
import logging
import sys
from typing import List, Optional

import httpx

from .config import ConfigManager
from .exceptions import GeocoderError
from .locationiq import LocationIQProvider
from .logging_utils import initLogging
from .models import AddressCollection, GeocodeQuery, ReverseQuery

logger = logging.getLogger(__name__)


def buildParser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Geocode addresses and coordinates with LocationIQ",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s geocode "10 Downing Street, London" --limit 1
  %(prog)s --config configs/prod.toml reverse 48.8566 2.3522 --zoom 16 --locale fr
        """,
    )

    parser.add_argument("--config", "-c", default="config.toml", help="Path to TOML configuration file")
    parser.add_argument("--dotenv", default=".env", help="Path to .env file with secrets")

    subparsers = parser.add_subparsers(dest="command", required=True)

    geocodeParser = subparsers.add_parser("geocode", help="Look up an address")
    geocodeParser.add_argument("text", help="Free-form address")
    geocodeParser.add_argument("--limit", type=int, default=5, help="Maximum number of results")
    geocodeParser.add_argument("--locale", help="Preferred language of results (e.g. en, fr)")

    reverseParser = subparsers.add_parser("reverse", help="Describe a point")
    reverseParser.add_argument("latitude", type=float)
    reverseParser.add_argument("longitude", type=float)
    reverseParser.add_argument("--zoom", type=int, help="Level of detail (default: 18)")
    reverseParser.add_argument("--locale", help="Preferred language of results (e.g. en, fr)")

    return parser


def runCommand(provider: LocationIQProvider, args: argparse.Namespace) -> AddressCollection:
    if args.command == "geocode":
        return provider.geocode(GeocodeQuery(args.text, limit=args.limit, locale=args.locale))
    query = ReverseQuery.fromCoordinates(args.latitude, args.longitude).withZoom(args.zoom).withLocale(args.locale)
    return provider.reverse(query)


def main(argv: Optional[List[str]] = None) -> None:
    """Main CLI entry point."""
    args = buildParser().parse_args(argv)

    configManager = ConfigManager(args.config, args.dotenv)
    initLogging(configManager.getLoggingConfig())

    try:
        provider = LocationIQProvider.fromConfig(configManager.getLocationIQConfig())
        result = runCommand(provider, args)
    except (GeocoderError, httpx.RequestError) as e:
        logger.error(f"Geocoding failed: {e}")
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    print(json.dumps(result.toList(), ensure_ascii=False, indent=2))


if __name__ == "__main__":
    main()
