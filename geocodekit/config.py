"""
Configuration management for the geocodekit.
"""

import logging
import os
import re
import sys
from pathlib import Path
from typing import Any, Dict

import tomli

logger = logging.getLogger(__name__)


def replaceMatchToEnv(match: re.Match[str]) -> str:
    """Replace environment variable placeholder with actual value.

    Args:
        match: A regex match object containing the environment variable name.

    Returns:
        str: The value of the environment variable or the original placeholder
             if the variable is not set.
    """
    key = match.group(1)
    return os.getenv(key, match.group(0))


def substituteEnvVars(value: Any) -> Any:
    """Recursively substitute ``${VAR_NAME}`` placeholders in configuration values.

    Strings, dictionaries and lists are processed, other values are returned
    unchanged.
    """
    if isinstance(value, str):
        return re.sub(r"\$\{([A-Za-z_][A-Za-z0-9_-]*)\}", replaceMatchToEnv, value)
    elif isinstance(value, dict):
        return {k: substituteEnvVars(v) for k, v in value.items()}
    elif isinstance(value, list):
        return [substituteEnvVars(item) for item in value]
    return value


def loadDotEnv(path: str = ".env") -> Dict[str, str]:
    """
    Simple dotenv file loader.

    Read file line by line and put ``KEY=value`` pairs into the environment.
    Variables already present in the environment are kept.

    Args:
        path: Path to .env file (default ".env")

    Returns:
        Dictionary of key-value pairs from .env file
    """
    ret: Dict[str, str] = {}
    envFile = Path(path)
    if not envFile.is_file():
        return ret

    with open(envFile, "rt") as f:
        for line in f:
            line = line.strip()
            if not line or line.startswith("#") or "=" not in line:
                continue
            key, value = line.split("=", 1)
            ret[key.strip()] = value.strip().strip('"')

    for k, v in ret.items():
        os.environ.setdefault(k, v)
    return ret


class ConfigManager:
    """Manages configuration loading for the geocoder, dood!

    Expected layout::

        [locationiq]
        api-key = "${LOCATIONIQ_API_KEY}"
        region = "us1"
        timeout = 10

        [logging]
        level = "INFO"
        console = true
    """

    def __init__(self, configPath: str = "config.toml", dotEnvFile: str = ".env"):
        """Initialize ConfigManager with config file path."""
        self.configPath = configPath
        loadDotEnv(dotEnvFile)
        self.config = substituteEnvVars(self._loadConfig())

    def _loadConfig(self) -> Dict[str, Any]:
        """Load configuration from TOML file."""
        configFile = Path(self.configPath)
        if not configFile.exists():
            logger.error(f"Configuration file {self.configPath} not found!")
            sys.exit(1)

        try:
            with open(configFile, "rb") as f:
                config = tomli.load(f)
        except tomli.TOMLDecodeError as e:
            logger.error(f"Failed to load configuration: {e}")
            sys.exit(1)

        logger.info("Configuration loaded successfully")
        return config

    def get(self, key: str, default=None) -> Any:
        """Get configuration value by key."""
        return self.config.get(key, default)

    def getLocationIQConfig(self) -> Dict[str, Any]:
        """Get LocationIQ provider configuration."""
        return self.get("locationiq", {})

    def getLoggingConfig(self) -> Dict[str, Any]:
        """Get logging configuration."""
        return self.get("logging", {})
