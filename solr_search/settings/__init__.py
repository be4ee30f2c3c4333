"""Plugin settings and option storage."""

from solr_search.settings.highlight import (
    DEFAULT_OPTIONS,
    HighlightForm,
    HighlightSettings,
    install_default_options,
)
from solr_search.settings.stores import InMemoryOptionStore, JsonFileOptionStore

__all__ = [
    "DEFAULT_OPTIONS",
    "HighlightForm",
    "HighlightSettings",
    "InMemoryOptionStore",
    "JsonFileOptionStore",
    "install_default_options",
]
