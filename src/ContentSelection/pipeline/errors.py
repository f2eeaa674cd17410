"""Custom exception hierarchy for the content selection engine."""
from __future__ import annotations


class ContentSelectionError(Exception):
    """Base exception for the content selection engine."""


class InvalidConfiguration(ContentSelectionError):
    """Raised when a filter configuration violates its contract."""


class ArtifactError(ContentSelectionError):
    """Raised when an items or settings file cannot be loaded."""
