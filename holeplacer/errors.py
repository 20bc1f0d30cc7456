"""Exception hierarchy for the hole placer."""

from __future__ import annotations


class PlacerError(Exception):
    """Base exception for all placer errors."""

    def __init__(self, message: str, details: dict[str, str] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ConfigurationError(PlacerError):
    """A required host resource is missing or ambiguous. Aborts the run."""
    pass


class GeometryError(PlacerError):
    """An element centerline cannot be represented as a straight line."""
    pass


class ResolutionError(PlacerError):
    """A wall or level reference returned by a ray query no longer resolves."""
    pass
