"""Tool definitions for the Solr search server."""

import inspect
import sys

from .tool_decorator import tool
from .search import execute_search_query
from .facets import (
    execute_add_facet,
    execute_collection_facets,
    execute_facet_label,
    execute_remove_facet,
)
from .settings import execute_get_highlight_settings, execute_save_highlight_settings

__all__ = [
    "execute_search_query",
    "execute_add_facet",
    "execute_remove_facet",
    "execute_facet_label",
    "execute_collection_facets",
    "execute_get_highlight_settings",
    "execute_save_highlight_settings",
]

TOOLS_DEFINITION = [
    obj
    for name, obj in inspect.getmembers(sys.modules[__name__])
    if inspect.isfunction(obj) and hasattr(obj, "_is_tool") and obj._is_tool
]
