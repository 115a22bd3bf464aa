"""Query-phase exceptions. These are recoverable and isolated per query."""

from typing import List, Optional

from .base import BaconScoreError


class QueryError(BaconScoreError):
    """Base class for errors raised while answering a query."""

    pass


class ActorNotFoundError(QueryError):
    """Raised when a queried name has no matching actor in the graph."""

    def __init__(self, name: str, suggestions: Optional[List[str]] = None):
        details = {"name": name}
        if suggestions:
            details["did_you_mean"] = ", ".join(suggestions)

        super().__init__("Actor Could Not be Found.", details=details)
        self.name = name
        self.suggestions = suggestions or []
