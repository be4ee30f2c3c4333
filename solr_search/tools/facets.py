"""Tools for facet URLs, labels and collection facets."""

from typing import Optional

from solr_search.facets.codec import add_facet, remove_facet
from solr_search.facets.labels import key_to_label
from solr_search.facets.tree import collection_tree_full_list_facet, render_facet_tree
from solr_search.tools.tool_decorator import tool


@tool()
async def execute_add_facet(mcp, field: str, value: str, q: str = "", facet: str = "") -> str:
    """Build the results URL with a facet added to the current ones.

    Args:
        mcp: SolrSearchServer instance
        field: Facet field
        value: Facet value
        q: Current free-text search term
        facet: Current facet parameter

    Returns:
        HTML-escaped results URL
    """
    return add_facet({"q": q, "facet": facet}, field, value, mcp.config.results_url)


@tool()
async def execute_remove_facet(mcp, field: str, value: str, q: str = "", facet: str = "") -> str:
    """Build the results URL with a facet removed from the current ones.

    Args:
        mcp: SolrSearchServer instance
        field: Facet field
        value: Facet value
        q: Current free-text search term
        facet: Current facet parameter

    Returns:
        HTML-escaped results URL
    """
    return remove_facet({"q": q, "facet": facet}, field, value, mcp.config.results_url)


@tool()
async def execute_facet_label(mcp, key: str) -> str:
    """Get the human-readable label of a facet key such as collection_s."""
    return key_to_label(key, mcp.label_resolver)


@tool()
async def execute_collection_facets(mcp, q: str = "", facet: str = "") -> Optional[str]:
    """Render the collection hierarchy as nested facet links.

    Args:
        mcp: SolrSearchServer instance
        q: Current free-text search term
        facet: Current facet parameter

    Returns:
        HTML list markup, or None when there are no collections
    """
    nodes = collection_tree_full_list_facet(
        mcp.collection_provider, {"q": q, "facet": facet}, mcp.config.results_url
    )
    return render_facet_tree(nodes)
