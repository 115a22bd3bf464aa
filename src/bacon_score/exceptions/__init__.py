"""Exception hierarchy for Bacon Score."""

from .base import BaconScoreError
from .config import (
    CLIUsageError,
    ConfigurationError,
    InvalidConfigError,
)
from .dataset import (
    DatasetError,
    FileOpenError,
    GraphIntegrityError,
    MalformedInputError,
    OutOfMemoryError,
)
from .query import ActorNotFoundError, QueryError

__all__ = [
    "BaconScoreError",
    "DatasetError",
    "FileOpenError",
    "MalformedInputError",
    "OutOfMemoryError",
    "GraphIntegrityError",
    "QueryError",
    "ActorNotFoundError",
    "ConfigurationError",
    "InvalidConfigError",
    "CLIUsageError",
]
