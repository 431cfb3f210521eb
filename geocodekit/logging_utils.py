"""
Logging utilities for the geocodekit.

Logging is configured from the ``[logging]`` config section::

    [logging]
    level = "DEBUG"
    console = true
    file = "logs/geocoder.log"
    rotate = true

    [logging.logger."geocodekit.locationiq"]
    level = "INFO"
"""

import logging
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)

DEFAULT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Chatty libraries which are held at WARNING unless explicitly configured
QUIET_LOGGERS = ("httpx", "httpcore")


def getLogLevelByStr(levelStr: str, default: Optional[int] = None) -> Optional[int]:
    """Get log level by name, ``default`` for unknown names."""
    level = logging.getLevelName(levelStr.upper())
    if isinstance(level, int):
        return level
    logger.error(f"Invalid log level '{levelStr}'")
    return default


def _handlerLevel(config: Dict[str, Any], key: str, default: int) -> int:
    if key not in config:
        return default
    level = getLogLevelByStr(config[key], default)
    return level if level is not None else default


def _makeFileHandler(logFile: str, rotate: bool) -> logging.Handler:
    logPath = Path(logFile)
    logPath.parent.mkdir(parents=True, exist_ok=True)
    if rotate:
        return TimedRotatingFileHandler(
            filename=logFile,
            when="midnight",
            interval=1,
            backupCount=7,
            encoding="utf-8",
        )
    return logging.FileHandler(logFile, encoding="utf-8")


def configureLogger(localLogger: logging.Logger, config: Dict[str, Any]) -> None:
    """Configure one logger: level, propagation, console and file handlers."""
    if "propagate" in config:
        localLogger.propagate = bool(config["propagate"])

    if "level" in config:
        logLevel = getLogLevelByStr(config["level"])
        if logLevel is not None:
            localLogger.setLevel(logLevel)

    logLevel = localLogger.getEffectiveLevel()
    formatter = logging.Formatter(config.get("format", DEFAULT_LOG_FORMAT))

    # Avoid duplicate output when called twice
    for handler in localLogger.handlers[:]:
        localLogger.removeHandler(handler)

    if config.get("console", False):
        consoleHandler = logging.StreamHandler()
        consoleHandler.setLevel(_handlerLevel(config, "console-level", logLevel))
        consoleHandler.setFormatter(formatter)
        localLogger.addHandler(consoleHandler)

    if "file" in config:
        try:
            fileHandler = _makeFileHandler(config["file"], bool(config.get("rotate", False)))
        except OSError as e:
            logger.error(f"Failed to setup file logging for {localLogger.name}: {e}")
        else:
            fileHandler.setLevel(_handlerLevel(config, "file-level", logLevel))
            fileHandler.setFormatter(formatter)
            localLogger.addHandler(fileHandler)
            logger.info(f"Logging {localLogger.name} to file: {config['file']}")


def initLogging(config: Dict[str, Any]) -> None:
    """Configure logging from config file settings."""
    rootLogger = logging.getLogger()
    rootLogger.setLevel(logging.INFO)

    configureLogger(rootLogger, config)
    logLevel = rootLogger.getEffectiveLevel()

    # Do not log every GET made by the transport
    if logLevel < logging.WARNING:
        for name in QUIET_LOGGERS:
            logging.getLogger(name).setLevel(logging.WARNING)

    for loggerName, loggerConfig in config.get("logger", {}).items():
        logger.debug(f"Configuring logger '{loggerName}' with config {loggerConfig}")
        configureLogger(logging.getLogger(loggerName), loggerConfig)

    logger.info(f"Logging configured: root level={logging.getLevelName(logLevel)}")
