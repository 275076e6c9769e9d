"""MedSearch exception hierarchy."""


class MedSearchError(Exception):
    """Base exception for all MedSearch errors."""


class SourceError(MedSearchError):
    """Base exception for collection source errors."""


class SourceNotFoundError(SourceError):
    """Raised when no source is registered for a requested record kind."""


class CatalogError(MedSearchError):
    """Raised when a seed catalogue file cannot be read or validated."""
