"""
Logging setup for the minigfm command line tool.

The ``[logging]`` TOML section understands:
    level    root log level name (default WARNING)
    format   record format for added handlers
    console  log to stderr, stdout carries the converted HTML
    file     also append records to this file
    logger   table of ``name = "LEVEL"`` overrides, e.g. minigfm.protector
"""
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

logger = logging.getLogger(__name__)

DEFAULT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def getLogLevelByStr(levelStr: str, default: Optional[int] = None) -> Optional[int]:
    """Get log level by name, `default` for unknown names."""
    level = logging.getLevelName(str(levelStr).upper())
    if not isinstance(level, int):
        logger.error(f"Invalid log level '{levelStr}'")
        return default
    return level


def configureLogger(localLogger: logging.Logger, config: Dict[str, Any]) -> None:
    """Set level and handlers of a logger from the [logging] section.

    Existing handlers are replaced only when console or file output is set.
    """
    if "level" in config:
        logLevel = getLogLevelByStr(config["level"])
        if logLevel is not None:
            localLogger.setLevel(logLevel)

    handlers: List[logging.Handler] = []
    if config.get("console", False):
        handlers.append(logging.StreamHandler())

    if "file" in config:
        logPath = Path(config["file"])
        try:
            logPath.parent.mkdir(parents=True, exist_ok=True)
            handlers.append(logging.FileHandler(logPath, encoding="utf-8"))
        except OSError as e:
            logger.error(f"Failed to open log file {logPath}: {e}")

    if not handlers:
        return

    for handler in localLogger.handlers[:]:
        localLogger.removeHandler(handler)

    formatter = logging.Formatter(config.get("format", DEFAULT_LOG_FORMAT))
    for handler in handlers:
        handler.setFormatter(formatter)
        localLogger.addHandler(handler)


def initLogging(config: Dict[str, Any]) -> None:
    """Configure logging from config file settings."""
    rootLogger = logging.getLogger()
    rootLogger.setLevel(logging.WARNING)
    configureLogger(rootLogger, config)

    for loggerName, levelStr in config.get("logger", {}).items():
        logLevel = getLogLevelByStr(levelStr)
        if logLevel is not None:
            logging.getLogger(loggerName).setLevel(logLevel)

    logger.info(f"Logging configured: root level={logging.getLevelName(rootLogger.level)}")
