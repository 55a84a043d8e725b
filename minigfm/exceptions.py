"""
Exceptions for MiniGFM.
"""


class MiniGFMError(Exception):
    """Base exception for MiniGFM errors."""

    pass


class ConfigError(MiniGFMError):
    """Raised when configuration values are invalid."""

    def __init__(self, message: str, key: str = ""):
        self.message = message
        self.key = key

        location = f" (key '{key}')" if key else ""
        super().__init__(f"{message}{location}")
