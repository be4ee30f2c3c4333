"""Exceptions for the Solr search helpers."""

from typing import Dict, List, Optional


class SolrSearchError(Exception):
    """Base exception for Solr search errors."""
    pass


class ConfigurationError(SolrSearchError):
    """Configuration-related errors."""
    pass


class QueryError(SolrSearchError):
    """Query-related errors."""
    pass


class FieldNotFoundError(SolrSearchError):
    """Raised when a facet field has no label definition."""

    def __init__(self, slug: str):
        self.slug = slug
        super().__init__(f"No search field defined for slug '{slug}'")


class OptionStoreError(SolrSearchError):
    """Raised when options cannot be read or written."""
    pass


class SettingsValidationError(SolrSearchError):
    """Raised when a settings submission fails validation.

    Args:
        errors: Mapping of field name to its validation messages
    """

    def __init__(self, errors: Dict[str, List[str]], message: Optional[str] = None):
        self.errors = errors
        super().__init__(message or f"Invalid settings: {', '.join(sorted(errors))}")
