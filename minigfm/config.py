"""
Configuration management for MiniGFM.
"""

import logging
import os
import re
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

import tomli

from .exceptions import ConfigError
from .highlighting import PygmentsHighlighter

logger = logging.getLogger(__name__)

HIGHLIGHT_BACKENDS = ("none", "pygments")


def replaceMatchToEnv(match: re.Match[str]) -> str:
    """Replace environment variable placeholder with its value.

    Args:
        match: A regex match object containing the environment variable name.

    Returns:
        str: The value of the environment variable or the original placeholder
             if the variable is not set.
    """
    key = match.group(1)
    return os.getenv(key, match.group(0))


def substituteEnvVars(value: Any) -> Any:
    """Recursively substitute ${VAR_NAME} placeholders in configuration values.

    Args:
        value: The configuration value to process. Can be a string, dict, list, or other type.

    Returns:
        The processed value with environment variables substituted.
    """
    if isinstance(value, str):
        return re.sub(r"\$\{([A-Za-z_][A-Za-z0-9_-]*)\}", replaceMatchToEnv, value)
    elif isinstance(value, dict):
        return {k: substituteEnvVars(v) for k, v in value.items()}
    elif isinstance(value, list):
        return [substituteEnvVars(item) for item in value]
    return value


class ConfigManager:
    """Manages configuration loading for MiniGFM.

    Recognised sections:
        [parser]   unsafe = false, highlight = "none" | "pygments"
        [logging]  see minigfm.logging_utils.initLogging()
    """

    def __init__(self, configPath: Optional[str] = None, configDirs: Optional[List[str]] = None):
        """Initialize ConfigManager with config file path and optional config directories."""
        self.config_path = configPath
        self.config_dirs = configDirs or []
        self.config = substituteEnvVars(self._loadConfig())

    def _findTomlFilesRecursive(self, directory: str) -> List[Path]:
        """Recursively find all .toml files in a directory."""
        dir_path = Path(directory)

        if not dir_path.is_dir():
            logger.warning(f"Config directory {directory} does not exist or is not a directory, skipping")
            return []

        toml_files = [toml_file for toml_file in dir_path.rglob("*.toml") if toml_file.is_file()]
        for toml_file in toml_files:
            logger.debug(f"Found config file: {toml_file}")

        return sorted(toml_files)  # Sort for consistent ordering

    def _mergeConfigs(self, base_config: Dict[str, Any], new_config: Dict[str, Any]) -> Dict[str, Any]:
        """Recursively merge two configuration dictionaries."""
        merged = base_config.copy()

        for key, value in new_config.items():
            if key in merged and isinstance(merged[key], dict) and isinstance(value, dict):
                merged[key] = self._mergeConfigs(merged[key], value)
            else:
                merged[key] = value

        return merged

    def _loadConfig(self) -> Dict[str, Any]:
        """Load configuration from TOML file and optional config directories.

        A missing main file is not an error: defaults are used. A file that
        cannot be read or parsed terminates the program.

        Returns:
            Dict[str, Any]: The loaded and merged configuration dictionary.

        Raises:
            SystemExit: If a configuration file cannot be read or parsed.
        """
        config: Dict[str, Any] = {}

        if self.config_path is not None:
            config_file = Path(self.config_path)
            if config_file.exists():
                config = self._loadTomlFile(config_file)
                logger.info(f"Loaded main config from {self.config_path}")
            else:
                logger.warning(f"Configuration file {self.config_path} not found, using defaults")

        for config_dir in self.config_dirs:
            toml_files = self._findTomlFilesRecursive(config_dir)
            logger.info(f"Found {len(toml_files)} .toml files in {config_dir}")

            for toml_file in toml_files:
                config = self._mergeConfigs(config, self._loadTomlFile(toml_file))
                logger.info(f"Merged config from {toml_file}")

        return config

    def _loadTomlFile(self, path: Path) -> Dict[str, Any]:
        try:
            with open(path, "rb") as f:
                return tomli.load(f)
        except (OSError, tomli.TOMLDecodeError) as e:
            logger.error(f"Failed to load configuration file {path}: {e}")
            sys.exit(1)

    def get(self, key: str, default=None) -> Any:
        """Get configuration value by key."""
        return self.config.get(key, default)

    def getParserConfig(self) -> Dict[str, Any]:
        """Get parser-specific configuration."""
        return self.get("parser", {})

    def getLoggingConfig(self) -> Dict[str, Any]:
        """Get logging-specific configuration."""
        return self.get("logging", {})

    def getParserOptions(self) -> Dict[str, Any]:
        """
        Build options for MiniGFM from the [parser] section.

        Returns:
            Dict with 'unsafe' and 'highlighter' keys

        Raises:
            ConfigError: If the highlight backend is unknown
        """
        parserConfig = self.getParserConfig()

        highlight = str(parserConfig.get("highlight", "none")).lower()
        if highlight not in HIGHLIGHT_BACKENDS:
            raise ConfigError(
                f"Unknown highlight backend '{highlight}', expected one of {', '.join(HIGHLIGHT_BACKENDS)}",
                key="parser.highlight",
            )

        return {
            "unsafe": bool(parserConfig.get("unsafe", False)),
            "highlighter": PygmentsHighlighter() if highlight == "pygments" else None,
        }

    def setParserOption(self, key: str, value: Any) -> None:
        """Override a [parser] value, e.g. from the command line."""
        self.config.setdefault("parser", {})[key] = value
