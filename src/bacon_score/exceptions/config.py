"""Configuration and command-line usage exceptions."""

from typing import Any

from .base import BaconScoreError


class ConfigurationError(BaconScoreError):
    """Base class for configuration-related errors."""

    pass


class InvalidConfigError(ConfigurationError):
    """Raised when configuration values are invalid."""

    def __init__(self, key: str, value: Any, reason: str):
        super().__init__(
            f"Invalid configuration for {key}: {value}",
            details={"key": key, "value": str(value), "reason": reason},
        )
        self.key = key
        self.value = value
        self.reason = reason


class CLIUsageError(ConfigurationError):
    """Raised for bad command lines: extra datasets or a repeated flag."""

    def __init__(self, reason: str):
        super().__init__(reason)
        self.reason = reason
