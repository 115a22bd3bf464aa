"""Base exception for Bacon Score."""

from typing import Dict, Optional


class BaconScoreError(Exception):
    """Base exception for all Bacon Score errors.

    ``exit_code`` is the process status the CLI uses when the error ends a run.
    """

    exit_code = 1

    def __init__(self, message: str, details: Optional[Dict[str, str]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if not self.details:
            return self.message
        details_str = ", ".join(f"{k}={v}" for k, v in self.details.items())
        return f"{self.message} ({details_str})"
